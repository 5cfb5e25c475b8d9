"""Pasteboards that live in a dict, optionally persisted as JSON."""

import base64
import json
import logging
from pathlib import Path

from pbbridge.adapter.backend import Pasteboard
from pbbridge.core.encoding import ENCODING
from pbbridge.core.types import PasteboardName

logger = logging.getLogger(__name__)


class MemoryPasteboard(Pasteboard):
    """One pasteboard item as an ordered mapping of type identifier to bytes.

    Strings are stored as UTF-8 and any payload that decodes as UTF-8 can be
    read back as a string, the way NSPasteboard treats text-like data.
    """

    def __init__(self, items: dict[str, bytes] | None = None) -> None:
        self.items: dict[str, bytes] = items if items is not None else {}
        # Flip to make set_string/set_data report failure
        self.refuse_writes = False

    def types(self) -> list[str]:
        return list(self.items)

    def string_for_type(self, type_identifier: str) -> str | None:
        data = self.items.get(type_identifier)
        if data is None:
            return None
        try:
            return data.decode(ENCODING)
        except UnicodeDecodeError:
            return None

    def data_for_type(self, type_identifier: str) -> bytes | None:
        return self.items.get(type_identifier)

    def clear_contents(self) -> None:
        self.items.clear()

    def set_string(self, value: str, type_identifier: str) -> bool:
        return self.set_data(value.encode(ENCODING), type_identifier)

    def set_data(self, data: bytes, type_identifier: str) -> bool:
        if self.refuse_writes:
            return False
        self.items[type_identifier] = bytes(data)
        return True


class MemoryPasteboardStore:
    """Named pasteboards for one process; usable directly as an opener."""

    def __init__(self) -> None:
        self.pasteboards: dict[str, MemoryPasteboard] = {}

    @staticmethod
    def key(name: str | None) -> str:
        well_known = PasteboardName.lookup(name)
        return well_known.value if well_known is not None else str(name)

    def __call__(self, name: str | None) -> MemoryPasteboard:
        return self.pasteboards.setdefault(self.key(name), MemoryPasteboard())


class FilePasteboardStore(MemoryPasteboardStore):
    """Memory store loaded from and saved back to a JSON file.

    File layout: ``{"general": {"public.utf8-plain-text": "<base64>"}}``.
    """

    def __init__(self, path: Path) -> None:
        super().__init__()
        self.path = path
        if path.is_file() and path.stat().st_size:
            raw = json.loads(path.read_text(encoding=ENCODING))
            for name, items in raw.items():
                self.pasteboards[name] = MemoryPasteboard(
                    {t: base64.b64decode(v) for t, v in items.items()}
                )
        logger.debug("Loaded %d pasteboards from %s", len(self.pasteboards), path)

    def save(self) -> None:
        raw = {
            name: {t: base64.b64encode(v).decode("ascii") for t, v in pb.items.items()}
            for name, pb in self.pasteboards.items()
        }
        self.path.write_text(json.dumps(raw), encoding=ENCODING)
