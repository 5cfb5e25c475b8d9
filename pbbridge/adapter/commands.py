"""Adapter commands: one OS pasteboard operation each.

Every command receives the parsed arguments, an opener for the target
pasteboard and the process's binary stdin/stdout. Failures raise
CommandError; the entry point turns them into a stderr line and exit 1.

Writes always clear the pasteboard before setting anything. A write that
fails after the clear (a pasteboard refusing a representation) leaves the
pasteboard empty; input is validated before the clear so malformed payloads
never get that far.
"""

from __future__ import annotations

import argparse
import base64
import binascii
import json
import logging
from collections.abc import Callable
from typing import BinaryIO

from pbbridge.adapter.backend import Pasteboard, PasteboardOpener
from pbbridge.adapter.imaging import decode_image, encode_image
from pbbridge.core.encoding import ENCODING, ENCODING_ERRORS
from pbbridge.core.errors import CommandError
from pbbridge.core.types import (
    CANONICAL_IMAGE_FORMAT,
    IMAGE_READ_CANDIDATES,
    PLAIN_TEXT_TYPE,
    BinaryVariant,
    ImageFormat,
    ReadVariant,
    TextVariant,
)

logger = logging.getLogger(__name__)

Command = Callable[[argparse.Namespace, PasteboardOpener, BinaryIO, BinaryIO], None]


# === Payload helpers ===


def decode_utf8(data: bytes) -> str:
    try:
        return data.decode(ENCODING)
    except UnicodeDecodeError as e:
        raise CommandError("Invalid UTF-8 input") from e


def decode_base64(data: bytes, error_message: str) -> bytes:
    """Strictly decode base64 text, ignoring surrounding whitespace."""
    try:
        return base64.b64decode(data.strip(), validate=True)
    except (binascii.Error, ValueError) as e:
        raise CommandError(error_message) from e


def encode_base64(data: bytes) -> bytes:
    return base64.b64encode(data)


def read_variant(pasteboard: Pasteboard, type_identifier: str) -> ReadVariant | None:
    """Read ``type_identifier``, preferring its string form over raw bytes."""
    text = pasteboard.string_for_type(type_identifier)
    if text is not None:
        return TextVariant(text)
    data = pasteboard.data_for_type(type_identifier)
    if data is not None:
        return BinaryVariant(data)
    return None


def image_representations(requested: ImageFormat) -> list[ImageFormat]:
    """Formats written for an image: the canonical one, then the requested one if distinct."""
    formats = [CANONICAL_IMAGE_FORMAT]
    if requested is not CANONICAL_IMAGE_FORMAT:
        formats.append(requested)
    return formats


def _set_string(pasteboard: Pasteboard, value: str, type_identifier: str) -> None:
    if not pasteboard.set_string(value, type_identifier):
        raise CommandError(f"Failed to write {type_identifier} to pasteboard")


def _set_data(pasteboard: Pasteboard, data: bytes, type_identifier: str) -> None:
    if not pasteboard.set_data(data, type_identifier):
        raise CommandError(f"Failed to write {type_identifier} to pasteboard")


def _require_type(args: argparse.Namespace) -> str:
    if not args.type:
        raise CommandError(f"--type is required for {args.command} command")
    return args.type


# === Commands ===


def cmd_list_types(
    args: argparse.Namespace, opener: PasteboardOpener, stdin: BinaryIO, stdout: BinaryIO
) -> None:
    types = opener(args.pasteboard).types()
    try:
        payload = json.dumps(types)
    except (TypeError, ValueError) as e:
        raise CommandError("Failed to serialize types") from e
    stdout.write((payload + "\n").encode(ENCODING))


def cmd_read_text(
    args: argparse.Namespace, opener: PasteboardOpener, stdin: BinaryIO, stdout: BinaryIO
) -> None:
    text = opener(args.pasteboard).string_for_type(PLAIN_TEXT_TYPE)
    if text is None:
        raise CommandError("No text on pasteboard")
    stdout.write(text.encode(ENCODING, errors=ENCODING_ERRORS))


def cmd_write_text(
    args: argparse.Namespace, opener: PasteboardOpener, stdin: BinaryIO, stdout: BinaryIO
) -> None:
    text = decode_utf8(stdin.read())
    pasteboard = opener(args.pasteboard)
    pasteboard.clear_contents()
    _set_string(pasteboard, text, PLAIN_TEXT_TYPE)


def cmd_read_image(
    args: argparse.Namespace, opener: PasteboardOpener, stdin: BinaryIO, stdout: BinaryIO
) -> None:
    fmt = ImageFormat(args.format)
    pasteboard = opener(args.pasteboard)

    image = None
    for candidate in IMAGE_READ_CANDIDATES:
        data = pasteboard.data_for_type(candidate.type_identifier)
        if data is None:
            continue
        image = decode_image(data)
        if image is not None:
            logger.debug("Decoded image from %s representation", candidate.value)
            break

    if image is None:
        raise CommandError("No image on pasteboard")

    try:
        output = encode_image(image, fmt)
    except (OSError, ValueError) as e:
        raise CommandError(f"Failed to convert image to {fmt.value}") from e
    stdout.write(encode_base64(output))


def cmd_write_image(
    args: argparse.Namespace, opener: PasteboardOpener, stdin: BinaryIO, stdout: BinaryIO
) -> None:
    fmt = ImageFormat(args.format)
    image_data = decode_base64(stdin.read(), "Invalid base64 image data")
    image = decode_image(image_data)
    if image is None:
        raise CommandError("Failed to decode image data")

    pasteboard = opener(args.pasteboard)
    pasteboard.clear_contents()
    for representation in image_representations(fmt):
        try:
            encoded = encode_image(image, representation)
        except (OSError, ValueError) as e:
            logger.debug("Skipping %s representation: %s", representation.value, e)
            continue
        _set_data(pasteboard, encoded, representation.type_identifier)


def cmd_read(
    args: argparse.Namespace, opener: PasteboardOpener, stdin: BinaryIO, stdout: BinaryIO
) -> None:
    type_identifier = _require_type(args)
    variant = read_variant(opener(args.pasteboard), type_identifier)

    if isinstance(variant, TextVariant):
        stdout.write(variant.text.encode(ENCODING, errors=ENCODING_ERRORS))
    elif isinstance(variant, BinaryVariant):
        stdout.write(encode_base64(variant.data))
    else:
        raise CommandError(f"No data for type {type_identifier} on pasteboard")


def cmd_write(
    args: argparse.Namespace, opener: PasteboardOpener, stdin: BinaryIO, stdout: BinaryIO
) -> None:
    type_identifier = _require_type(args)
    payload = stdin.read()

    if args.base64:
        data = decode_base64(payload, "Invalid base64 data")
        pasteboard = opener(args.pasteboard)
        pasteboard.clear_contents()
        _set_data(pasteboard, data, type_identifier)
    else:
        text = decode_utf8(payload)
        pasteboard = opener(args.pasteboard)
        pasteboard.clear_contents()
        _set_string(pasteboard, text, type_identifier)


def cmd_clear(
    args: argparse.Namespace, opener: PasteboardOpener, stdin: BinaryIO, stdout: BinaryIO
) -> None:
    opener(args.pasteboard).clear_contents()


COMMANDS: dict[str, Command] = {
    "list-types": cmd_list_types,
    "read-text": cmd_read_text,
    "write-text": cmd_write_text,
    "read-image": cmd_read_image,
    "write-image": cmd_write_image,
    "read": cmd_read,
    "write": cmd_write,
    "clear": cmd_clear,
}

# Commands that drain stdin before touching the pasteboard
STDIN_COMMANDS = frozenset({"write-text", "write-image", "write"})
