"""Typed exception hierarchy for pbbridge."""

from __future__ import annotations


class PasteboardBridgeError(Exception):
    """Base class for all pbbridge errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigError(PasteboardBridgeError):
    """Raised for configuration issues (unreadable file, invalid JSON, validation failure)."""


# === Bridge side ===


class AdapterSpawnError(PasteboardBridgeError):
    """The adapter executable could not be started (missing binary, permissions)."""


class AdapterError(PasteboardBridgeError):
    """The adapter ran and exited with a non-zero status.

    The message is the adapter's trimmed stderr, or a generic
    ``adapter exited with code N`` when stderr was empty.
    """

    def __init__(self, exit_code: int, stderr: str = "") -> None:
        self.exit_code = exit_code
        self.stderr = stderr
        super().__init__(stderr.strip() or f"adapter exited with code {exit_code}")


# === Adapter side ===


class CommandError(PasteboardBridgeError):
    """A single adapter command failed; reported on stderr with exit status 1."""

    exit_code: int = 1


class UsageError(CommandError):
    """The argument vector does not match the command grammar."""
