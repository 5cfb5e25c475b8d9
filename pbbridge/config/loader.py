"""Configuration loading with fail-fast behavior and layered merging.

Layers, later overriding earlier:
1. Global user config (~/.pbbridge/config.json)
2. Project local config (cwd/.pbbridge/config.json)
3. PBBRIDGE_ADAPTER environment variable (adapter.command only)

Missing layers are skipped; with no layers at all the Pydantic defaults apply.
"""

import json
import logging
import os
import shlex
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from pbbridge.config.schema import Config
from pbbridge.core.constants import (
    ADAPTER_ENV_VAR,
    CONFIG_FILE_NAME,
    PBBRIDGE_DIR_NAME,
    get_global_config_path,
)
from pbbridge.core.errors import ConfigError
from pbbridge.core.utils import deep_merge

logger = logging.getLogger(__name__)


def load_config(path: Path | None = None, cwd: Path | None = None) -> Config:
    """Load configuration from file with layered merging.

    Args:
        path: Explicit config file path. If provided, skips layered loading
            and the file must exist.
        cwd: Working directory for local lookup. Defaults to Path.cwd().

    Returns:
        Validated Config object.

    Raises:
        ConfigError: If a config file is unreadable, is not a JSON object,
            or the merged config fails validation.
    """
    if path is not None:
        data = _read_layer(path)
        if data is None:
            raise ConfigError(f"Config file not found: {path}")
        merged, loaded_from = data, [path]
    else:
        merged, loaded_from = _load_layers(cwd or Path.cwd())

    merged = _apply_env_overrides(merged)

    if loaded_from:
        logger.debug("Config loaded from: %s", [str(p) for p in loaded_from])

    try:
        return Config.model_validate(merged)
    except ValidationError as e:
        sources = ", ".join(str(p) for p in loaded_from) or "defaults"
        raise ConfigError(f"Config validation failed ({sources}): {e}") from e


def _read_layer(path: Path) -> dict[str, Any] | None:
    """One config file as a dict; None when absent, {} when blank."""
    if not path.is_file():
        return None

    try:
        # utf-8-sig: editors on macOS occasionally save a BOM
        content = path.read_text(encoding="utf-8-sig").strip()
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    if not content:
        return {}

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must hold a JSON object, not {type(data).__name__}")
    return data


def _load_layers(cwd: Path) -> tuple[dict[str, Any], list[Path]]:
    merged: dict[str, Any] = {}
    loaded_from: list[Path] = []

    global_config = get_global_config_path()
    local_config = cwd / PBBRIDGE_DIR_NAME / CONFIG_FILE_NAME

    layers = [global_config]
    # Avoid loading the same file twice when cwd is the home directory
    if local_config.resolve() != global_config.resolve():
        layers.append(local_config)

    for layer in layers:
        data = _read_layer(layer)
        if data is None:
            logger.debug("No config at %s", layer)
            continue
        merged = deep_merge(merged, data)
        loaded_from.append(layer)

    return merged, loaded_from


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    command = os.environ.get(ADAPTER_ENV_VAR)
    if not command:
        return data
    try:
        argv = shlex.split(command)
    except ValueError as e:
        raise ConfigError(f"Invalid {ADAPTER_ENV_VAR}: {e}") from e
    logger.debug("Adapter command overridden by %s", ADAPTER_ENV_VAR)
    return deep_merge(data, {"adapter": {"command": argv}})
