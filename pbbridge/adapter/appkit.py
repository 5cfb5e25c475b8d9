"""NSPasteboard backend (macOS, requires pyobjc-framework-Cocoa)."""

import logging

from AppKit import (
    NSPasteboard,
    NSPasteboardNameDrag,
    NSPasteboardNameFind,
    NSPasteboardNameFont,
    NSPasteboardNameRuler,
)
from Foundation import NSData

from pbbridge.adapter.backend import Pasteboard
from pbbridge.core.types import PasteboardName

logger = logging.getLogger(__name__)

_WELL_KNOWN_NAMES = {
    PasteboardName.FIND: NSPasteboardNameFind,
    PasteboardName.FONT: NSPasteboardNameFont,
    PasteboardName.RULER: NSPasteboardNameRuler,
    PasteboardName.DRAG: NSPasteboardNameDrag,
}


class AppKitPasteboard(Pasteboard):
    """Thin wrapper over an ``NSPasteboard`` instance."""

    def __init__(self, pasteboard) -> None:
        self._pasteboard = pasteboard

    def types(self) -> list[str]:
        types = self._pasteboard.types()
        if not types:
            return []
        return [str(t) for t in types]

    def string_for_type(self, type_identifier: str) -> str | None:
        value = self._pasteboard.stringForType_(type_identifier)
        return None if value is None else str(value)

    def data_for_type(self, type_identifier: str) -> bytes | None:
        data = self._pasteboard.dataForType_(type_identifier)
        return None if data is None else bytes(data)

    def clear_contents(self) -> None:
        self._pasteboard.clearContents()

    def set_string(self, value: str, type_identifier: str) -> bool:
        return bool(self._pasteboard.setString_forType_(value, type_identifier))

    def set_data(self, data: bytes, type_identifier: str) -> bool:
        ns_data = NSData.dataWithBytes_length_(data, len(data))
        return bool(self._pasteboard.setData_forType_(ns_data, type_identifier))


def open_pasteboard(name: str | None) -> AppKitPasteboard:
    """Resolve a --pasteboard value to a live pasteboard.

    ``None`` and ``"general"`` give the general pasteboard, the other
    well-known names give their dedicated pasteboards, and anything else is
    passed to the OS as a custom name (created on demand).
    """
    well_known = PasteboardName.lookup(name)
    if well_known is PasteboardName.GENERAL:
        return AppKitPasteboard(NSPasteboard.generalPasteboard())
    if well_known is not None:
        return AppKitPasteboard(NSPasteboard.pasteboardWithName_(_WELL_KNOWN_NAMES[well_known]))
    logger.debug("Opening custom pasteboard %r", name)
    return AppKitPasteboard(NSPasteboard.pasteboardWithName_(name))
