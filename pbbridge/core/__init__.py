"""Core types, errors and constants."""

from pbbridge.core.encoding import ENCODING, ENCODING_ERRORS
from pbbridge.core.errors import (
    AdapterError,
    AdapterSpawnError,
    CommandError,
    ConfigError,
    PasteboardBridgeError,
    UsageError,
)
from pbbridge.core.types import (
    CANONICAL_IMAGE_FORMAT,
    IMAGE_READ_CANDIDATES,
    PLAIN_TEXT_TYPE,
    PNG_TYPE,
    TIFF_TYPE,
    AdapterResult,
    BinaryVariant,
    ImageFormat,
    PasteboardName,
    ReadVariant,
    TextVariant,
)

__all__ = [
    "ENCODING",
    "ENCODING_ERRORS",
    # Errors
    "PasteboardBridgeError",
    "ConfigError",
    "AdapterError",
    "AdapterSpawnError",
    "CommandError",
    "UsageError",
    # Types
    "PLAIN_TEXT_TYPE",
    "PNG_TYPE",
    "TIFF_TYPE",
    "CANONICAL_IMAGE_FORMAT",
    "IMAGE_READ_CANDIDATES",
    "AdapterResult",
    "BinaryVariant",
    "ImageFormat",
    "PasteboardName",
    "ReadVariant",
    "TextVariant",
]
