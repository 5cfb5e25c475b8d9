"""Bitmap decoding and re-encoding with Pillow."""

import io
import logging

from PIL import Image, UnidentifiedImageError
from PIL.Image import DecompressionBombError

from pbbridge.core.types import ImageFormat

logger = logging.getLogger(__name__)

# Modes the PNG encoder stores directly; others are converted to RGBA first
_PNG_MODES = frozenset({"1", "L", "LA", "I", "I;16", "P", "RGB", "RGBA"})

_PIL_FORMATS = {
    ImageFormat.PNG: "PNG",
    ImageFormat.TIFF: "TIFF",
}


def decode_image(data: bytes) -> Image.Image | None:
    """Decode ``data`` into an in-memory bitmap, or None if it has no pixels.

    The image is fully loaded so truncated payloads are rejected here rather
    than when re-encoding. Images over Pillow's pixel limit count as
    undecodable too.
    """
    if not data:
        return None
    try:
        image = Image.open(io.BytesIO(data))
        image.load()
    except (
        UnidentifiedImageError,
        DecompressionBombError,
        OSError,
        ValueError,
        SyntaxError,
        EOFError,
    ) as e:
        logger.debug("Image decode failed: %s", e)
        return None
    return image


def encode_image(image: Image.Image, fmt: ImageFormat) -> bytes:
    """Encode ``image`` as ``fmt``.

    Raises:
        OSError, ValueError: If Pillow cannot write the image in that format.
    """
    if fmt is ImageFormat.PNG and image.mode not in _PNG_MODES:
        image = image.convert("RGBA")
    output = io.BytesIO()
    image.save(output, format=_PIL_FORMATS[fmt])
    return output.getvalue()
