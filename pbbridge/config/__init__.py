"""Configuration loading and validation."""

from pbbridge.config.loader import load_config
from pbbridge.config.schema import AdapterConfig, Config, LoggingConfig

__all__ = [
    "AdapterConfig",
    "Config",
    "LoggingConfig",
    "load_config",
]
