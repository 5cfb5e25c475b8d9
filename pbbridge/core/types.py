"""Core value types shared by the adapter and the bridge."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Well-known type identifiers
PLAIN_TEXT_TYPE = "public.utf8-plain-text"
TIFF_TYPE = "public.tiff"
PNG_TYPE = "public.png"


class PasteboardName(str, Enum):
    """Well-known pasteboards. Any other name refers to a custom pasteboard."""

    GENERAL = "general"
    FIND = "find"
    FONT = "font"
    RULER = "ruler"
    DRAG = "drag"

    @classmethod
    def lookup(cls, name: str | None) -> PasteboardName | None:
        """Return the well-known member for ``name``, or None for custom names.

        ``None`` means the general pasteboard.
        """
        if name is None:
            return cls.GENERAL
        try:
            return cls(name)
        except ValueError:
            return None


class ImageFormat(str, Enum):
    """Image encodings the adapter can emit and accept."""

    PNG = "png"
    TIFF = "tiff"

    @property
    def type_identifier(self) -> str:
        return PNG_TYPE if self is ImageFormat.PNG else TIFF_TYPE


# Written on every image write, whatever format was requested
CANONICAL_IMAGE_FORMAT = ImageFormat.TIFF

# Order in which image representations are tried on read
IMAGE_READ_CANDIDATES: tuple[ImageFormat, ...] = (ImageFormat.TIFF, ImageFormat.PNG)


@dataclass(frozen=True)
class TextVariant:
    """A typed read that the pasteboard could represent as a string."""

    text: str


@dataclass(frozen=True)
class BinaryVariant:
    """A typed read that only exists as raw bytes."""

    data: bytes


ReadVariant = TextVariant | BinaryVariant


@dataclass(frozen=True)
class AdapterResult:
    """Outcome of one adapter process."""

    stdout: bytes
    stderr: str
    exit_code: int

    @property
    def ok(self) -> bool:
        return self.exit_code == 0
