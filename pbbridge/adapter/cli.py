"""Adapter entry point: parse one command line, run it, exit.

Exit status is 0 on success and 1 on any failure, with a single
human-readable line on stderr. Nothing else is ever written to stderr.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import BinaryIO, NoReturn, TextIO

from pbbridge.adapter.backend import PasteboardOpener
from pbbridge.adapter.commands import COMMANDS
from pbbridge.config.loader import load_config
from pbbridge.core.constants import LOG_DIR_ENV_VAR
from pbbridge.core.errors import CommandError, ConfigError, UsageError
from pbbridge.core.log import configure_file_logging
from pbbridge.core.types import ImageFormat

logger = logging.getLogger(__name__)

USAGE = """\
Usage: pbhelper <command> [options]

Commands:
  list-types  [--pasteboard NAME]
  read-text   [--pasteboard NAME]
  write-text  [--pasteboard NAME]
  read-image  [--pasteboard NAME] [--format png|tiff]
  write-image [--pasteboard NAME] [--format png|tiff]
  read        --type UTI [--pasteboard NAME]
  write       --type UTI [--pasteboard NAME] [--base64]
  clear       [--pasteboard NAME]"""


class AdapterArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_parser() -> AdapterArgumentParser:
    parser = AdapterArgumentParser(
        prog="pbhelper",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("command")
    parser.add_argument("--pasteboard")
    parser.add_argument("--type")
    parser.add_argument(
        "--format",
        choices=[f.value for f in ImageFormat],
        default=ImageFormat.PNG.value,
    )
    parser.add_argument("--base64", action="store_true")
    return parser


def parse_args(argv: Sequence[str]) -> argparse.Namespace:
    """Parse an adapter argument vector.

    Raises:
        UsageError: For a missing or unknown command, an unknown argument, a
            flag without its value, or an unsupported --format.
    """
    if not argv:
        raise UsageError("Missing command")
    args = build_parser().parse_args(list(argv))
    if args.command not in COMMANDS:
        raise UsageError(f"Unknown command: {args.command}")
    return args


def _default_opener(name: str | None):
    # AppKit is only importable on macOS; keep it out of module import
    from pbbridge.adapter.appkit import open_pasteboard

    return open_pasteboard(name)


def _configure_logging() -> None:
    log_dir = os.environ.get(LOG_DIR_ENV_VAR)
    level = logging.INFO
    if not log_dir:
        config = load_config()
        log_dir = config.logging.log_dir
        level = config.logging.level_number
    if log_dir:
        configure_file_logging(Path(log_dir).expanduser(), level)


def run(
    argv: Sequence[str],
    opener: PasteboardOpener,
    stdin: BinaryIO,
    stdout: BinaryIO,
    stderr: TextIO,
) -> int:
    """Run one adapter command and return its exit status."""
    try:
        args = parse_args(argv)
        logger.debug("Running %s (pasteboard=%s)", args.command, args.pasteboard or "general")
        COMMANDS[args.command](args, opener, stdin, stdout)
    except UsageError as e:
        stderr.write(f"{e.message}\n{USAGE}\n")
        return e.exit_code
    except CommandError as e:
        logger.debug("Command failed: %s", e.message)
        stderr.write(f"{e.message}\n")
        return e.exit_code
    finally:
        stdout.flush()
    return 0


def main(argv: Sequence[str] | None = None, opener: PasteboardOpener | None = None) -> int:
    """Console entry point for ``pbhelper`` / ``python -m pbbridge.adapter``."""
    try:
        _configure_logging()
    except (ConfigError, OSError) as e:
        sys.stderr.write(f"{e}\n")
        return 1

    return run(
        sys.argv[1:] if argv is None else argv,
        opener or _default_opener,
        sys.stdin.buffer,
        sys.stdout.buffer,
        sys.stderr,
    )
