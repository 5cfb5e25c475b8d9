"""Native pasteboard adapter: one OS pasteboard operation per process."""

from pbbridge.adapter.backend import Pasteboard, PasteboardOpener
from pbbridge.adapter.cli import main, parse_args, run
from pbbridge.adapter.commands import COMMANDS, read_variant

__all__ = [
    "COMMANDS",
    "Pasteboard",
    "PasteboardOpener",
    "main",
    "parse_args",
    "read_variant",
    "run",
]
