"""Core constants and paths for pbbridge.

Single source of truth for global paths and environment variable names.
"""

from pathlib import Path

PBBRIDGE_DIR_NAME = ".pbbridge"
CONFIG_FILE_NAME = "config.json"

# Overrides adapter.command (shell-style split)
ADAPTER_ENV_VAR = "PBBRIDGE_ADAPTER"

# Enables adapter file logging without a config file
LOG_DIR_ENV_VAR = "PBBRIDGE_LOG_DIR"


def get_global_config_path() -> Path:
    """~/.pbbridge/config.json, the lowest-priority config layer."""
    return Path.home() / PBBRIDGE_DIR_NAME / CONFIG_FILE_NAME
