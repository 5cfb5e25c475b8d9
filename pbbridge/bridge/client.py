"""Typed async pasteboard operations backed by the adapter process.

One method per adapter command. Inputs are not validated here; the adapter
is the only judge of payloads, and its stderr becomes the AdapterError
message.
"""

from __future__ import annotations

import json
import logging
from typing import Literal

from pbbridge.bridge.process import check_result, run_adapter
from pbbridge.config.schema import AdapterConfig
from pbbridge.core.encoding import ENCODING, ENCODING_ERRORS

logger = logging.getLogger(__name__)

ImageFormatName = Literal["png", "tiff"]


def pasteboard_args(pasteboard: str | None) -> list[str]:
    """``--pasteboard NAME``, or nothing for the general pasteboard."""
    return ["--pasteboard", pasteboard] if pasteboard else []


class PasteboardClient:
    """Async facade over the adapter command grammar.

    Holds only launch settings; every call spawns its own adapter process.

    Attributes:
        config: How to launch the adapter.
    """

    def __init__(self, config: AdapterConfig | None = None) -> None:
        self.config = config or AdapterConfig()

    async def _run(self, args: list[str], stdin_data: str | None = None) -> bytes:
        result = await run_adapter(args, stdin_data, self.config)
        return check_result(result).stdout

    async def list_types(self, pasteboard: str | None = None) -> list[str]:
        """Type identifiers on the pasteboard.

        Raises:
            json.JSONDecodeError: If the adapter printed malformed JSON.
        """
        stdout = await self._run(["list-types", *pasteboard_args(pasteboard)])
        return json.loads(stdout)

    async def read_text(self, pasteboard: str | None = None) -> str:
        stdout = await self._run(["read-text", *pasteboard_args(pasteboard)])
        return stdout.decode(ENCODING, errors=ENCODING_ERRORS)

    async def write_text(self, text: str, pasteboard: str | None = None) -> None:
        """Replace the pasteboard contents with plain text."""
        await self._run(["write-text", *pasteboard_args(pasteboard)], text)

    async def read_image(
        self, pasteboard: str | None = None, format: ImageFormatName = "png"
    ) -> str:
        """Return the pasteboard image as base64 in ``format`` (not decoded)."""
        stdout = await self._run(["read-image", "--format", format, *pasteboard_args(pasteboard)])
        return stdout.decode(ENCODING, errors=ENCODING_ERRORS)

    async def write_image(
        self, data: str, pasteboard: str | None = None, format: ImageFormatName = "png"
    ) -> None:
        """Replace the pasteboard contents with a base64-encoded image."""
        await self._run(["write-image", "--format", format, *pasteboard_args(pasteboard)], data)

    async def read_data(self, type: str, pasteboard: str | None = None) -> str:
        """Read one type: its text if representable, otherwise base64."""
        stdout = await self._run(["read", "--type", type, *pasteboard_args(pasteboard)])
        return stdout.decode(ENCODING, errors=ENCODING_ERRORS)

    async def write_data(
        self,
        type: str,
        data: str,
        is_base64: bool = False,
        pasteboard: str | None = None,
    ) -> None:
        """Replace the pasteboard contents with ``data`` under ``type``."""
        args = ["write", "--type", type]
        if is_base64:
            args.append("--base64")
        await self._run([*args, *pasteboard_args(pasteboard)], data)

    async def clear(self, pasteboard: str | None = None) -> None:
        await self._run(["clear", *pasteboard_args(pasteboard)])
