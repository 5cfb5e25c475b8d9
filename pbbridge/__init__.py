"""pbbridge: macOS pasteboard access through a per-call adapter process."""

__version__ = "0.1.0"
