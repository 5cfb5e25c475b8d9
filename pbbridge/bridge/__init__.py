"""Process bridge: typed async pasteboard operations.

The module-level functions use a client configured from ``load_config()``
on first use. Build a ``PasteboardClient`` directly for other settings.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from pbbridge.bridge.client import ImageFormatName, PasteboardClient, pasteboard_args
from pbbridge.bridge.process import SAFE_ENV_KEYS, build_safe_env, check_result, run_adapter
from pbbridge.config.loader import load_config
from pbbridge.core.log import configure_file_logging


@lru_cache(maxsize=1)
def get_default_client() -> PasteboardClient:
    """Client built from the layered config, created once per process.

    A .env file in the working directory may set PBBRIDGE_ADAPTER.
    """
    load_dotenv(find_dotenv(usecwd=True))
    config = load_config()
    if config.logging.log_dir:
        configure_file_logging(Path(config.logging.log_dir).expanduser(), config.logging.level_number)
    logging.getLogger(__name__).debug("Default adapter command: %s", config.adapter.command)
    return PasteboardClient(config.adapter)


async def list_types(pasteboard: str | None = None) -> list[str]:
    return await get_default_client().list_types(pasteboard)


async def read_text(pasteboard: str | None = None) -> str:
    return await get_default_client().read_text(pasteboard)


async def write_text(text: str, pasteboard: str | None = None) -> None:
    await get_default_client().write_text(text, pasteboard)


async def read_image(pasteboard: str | None = None, format: ImageFormatName = "png") -> str:
    return await get_default_client().read_image(pasteboard, format)


async def write_image(
    data: str, pasteboard: str | None = None, format: ImageFormatName = "png"
) -> None:
    await get_default_client().write_image(data, pasteboard, format)


async def read_data(type: str, pasteboard: str | None = None) -> str:
    return await get_default_client().read_data(type, pasteboard)


async def write_data(
    type: str, data: str, is_base64: bool = False, pasteboard: str | None = None
) -> None:
    await get_default_client().write_data(type, data, is_base64, pasteboard)


async def clear(pasteboard: str | None = None) -> None:
    await get_default_client().clear(pasteboard)


__all__ = [
    "ImageFormatName",
    "PasteboardClient",
    "SAFE_ENV_KEYS",
    "build_safe_env",
    "check_result",
    "clear",
    "get_default_client",
    "list_types",
    "pasteboard_args",
    "read_data",
    "read_image",
    "read_text",
    "run_adapter",
    "write_data",
    "write_image",
    "write_text",
]
