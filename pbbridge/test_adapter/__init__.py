"""Adapter with an in-memory or file-backed pasteboard, for development and testing.

Runs the real adapter commands against a pasteboard that needs no window
server, so the bridge can be exercised end to end on any platform.

Usage:
    PBBRIDGE_TEST_STORE=/tmp/pasteboards.json python -m pbbridge.test_adapter <command> ...

Without PBBRIDGE_TEST_STORE every process starts with empty pasteboards.
"""

from pbbridge.test_adapter.store import FilePasteboardStore, MemoryPasteboard, MemoryPasteboardStore

__all__ = [
    "FilePasteboardStore",
    "MemoryPasteboard",
    "MemoryPasteboardStore",
]
