"""Spawn the adapter once per call and collect its result.

Each call starts a fresh process, writes the optional payload to its stdin,
closes stdin, then waits for exit while draining stdout and stderr. Nothing
is retried, timed out or serialized here: concurrent calls run as
independent processes and the OS pasteboard decides who wins.
"""

import asyncio
import logging
import os
from collections.abc import Sequence
from pathlib import Path

from pbbridge.config.schema import AdapterConfig
from pbbridge.core.encoding import ENCODING, ENCODING_ERRORS
from pbbridge.core.errors import AdapterError, AdapterSpawnError
from pbbridge.core.types import AdapterResult

logger = logging.getLogger(__name__)


# Environment variables always passed to the adapter.
# These are needed to locate and run it but don't contain secrets.
SAFE_ENV_KEYS: frozenset[str] = frozenset({
    "PATH",         # Find executables
    "HOME",         # User home directory (config files)
    "USER",         # Current username
    "LOGNAME",      # Login name
    "LANG",         # Locale (character encoding)
    "LC_ALL",       # Locale override
    "LC_CTYPE",     # Character classification locale
    "TMPDIR",       # Temporary directory
    "PYTHONPATH",   # Locate pbbridge when run from a checkout
    "VIRTUAL_ENV",  # Active virtualenv
    "PBBRIDGE_LOG_DIR",
    "__CF_USER_TEXT_ENCODING",  # CoreFoundation default text encoding
})


def build_safe_env(
    explicit_env: dict[str, str] | None = None,
    passthrough: list[str] | None = None,
) -> dict[str, str]:
    """Build the environment for an adapter process.

    The adapter receives only:
    1. Safe system variables (PATH, HOME, etc.)
    2. Host variables named in ``passthrough``
    3. ``explicit_env`` (highest priority)

    Args:
        explicit_env: Explicit env vars from config (merged last).
        passthrough: Env var names to copy from the host environment.

    Returns:
        Environment dict for the subprocess.
    """
    env: dict[str, str] = {}

    for key in SAFE_ENV_KEYS:
        if key in os.environ:
            env[key] = os.environ[key]

    if passthrough:
        for key in passthrough:
            if key in os.environ:
                env[key] = os.environ[key]

    if explicit_env:
        env.update(explicit_env)

    return env


async def run_adapter(
    args: Sequence[str],
    stdin_data: str | bytes | None = None,
    config: AdapterConfig | None = None,
) -> AdapterResult:
    """Run one adapter command.

    Args:
        args: Adapter argument vector (command first).
        stdin_data: Payload for stdin. Strings are sent as UTF-8 with
            unencodable characters replaced. When None, stdin is closed
            immediately.
        config: Adapter launch settings. Defaults to AdapterConfig().

    Returns:
        The collected stdout bytes, stderr text and exit status. A missing
        exit status is reported as 1.

    Raises:
        AdapterSpawnError: If the adapter executable could not be started or
            the configured working directory does not exist.
    """
    config = config or AdapterConfig()
    argv = [*config.command, *args]
    env = build_safe_env(explicit_env=config.env, passthrough=config.env_passthrough)

    if isinstance(stdin_data, str):
        # Lone surrogates become "?"; the adapter judges the payload
        stdin_data = stdin_data.encode(ENCODING, errors=ENCODING_ERRORS)

    if config.cwd is not None and not Path(config.cwd).is_dir():
        raise AdapterSpawnError(f"Adapter working directory not found: {config.cwd}")

    logger.debug("Spawning adapter: %s", argv)
    try:
        process = await asyncio.create_subprocess_exec(
            *argv,
            stdin=asyncio.subprocess.PIPE,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            env=env,
            cwd=config.cwd,
        )
    except FileNotFoundError as e:
        raise AdapterSpawnError(f"Adapter command not found: {config.command[0]}") from e
    except OSError as e:
        raise AdapterSpawnError(f"Failed to spawn adapter: {e}") from e

    # communicate() writes stdin_data (or nothing), closes stdin and drains both pipes
    stdout, stderr = await process.communicate(stdin_data if stdin_data is not None else b"")

    exit_code = process.returncode if process.returncode is not None else 1
    logger.debug("Adapter %s exited with code %d", args[0] if args else "?", exit_code)

    return AdapterResult(
        stdout=stdout,
        stderr=stderr.decode(ENCODING, errors=ENCODING_ERRORS),
        exit_code=exit_code,
    )


def check_result(result: AdapterResult) -> AdapterResult:
    """Raise AdapterError for a non-zero exit status, else return ``result``."""
    if not result.ok:
        raise AdapterError(result.exit_code, result.stderr)
    return result
