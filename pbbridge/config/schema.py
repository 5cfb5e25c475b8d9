"""Pydantic models for pbbridge configuration validation."""

import logging
import sys
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


def default_adapter_command() -> list[str]:
    """Run the adapter with the interpreter the bridge is running under."""
    return [sys.executable, "-m", "pbbridge.adapter"]


class AdapterConfig(BaseModel):
    """How the bridge launches the adapter process.

    Example in config.json:
        "adapter": {
            "command": ["/usr/local/bin/pbhelper"],
            "env_passthrough": ["PYTHONPATH"]
        }
    """

    model_config = ConfigDict(extra="forbid")

    command: list[str] = Field(default_factory=default_adapter_command)
    """Executable and leading arguments; the command vector is appended."""

    env: dict[str, str] = Field(default_factory=dict)
    """Explicit environment variables for the adapter (highest priority)."""

    env_passthrough: list[str] = Field(default_factory=list)
    """Names of host environment variables copied to the adapter."""

    cwd: str | None = None
    """Working directory for the adapter process."""

    @field_validator("command")
    @classmethod
    def validate_command(cls, v: list[str]) -> list[str]:
        if not v or not v[0]:
            raise ValueError("adapter command must name an executable")
        return v


class LoggingConfig(BaseModel):
    """File logging for the bridge and adapter processes."""

    model_config = ConfigDict(extra="forbid")

    log_dir: str | None = None
    """Directory for pbbridge.log. File logging is off when unset."""

    level: LogLevel = "INFO"

    @property
    def level_number(self) -> int:
        return logging.getLevelName(self.level)


class Config(BaseModel):
    """Root configuration."""

    model_config = ConfigDict(extra="forbid")

    adapter: AdapterConfig = Field(default_factory=AdapterConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
