"""Shared pytest fixtures and configuration for pytest."""

import base64
import io
import sys
from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image

from pbbridge.adapter.cli import run
from pbbridge.test_adapter.store import MemoryPasteboardStore

REPO_ROOT = Path(__file__).resolve().parent.parent


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for platform-specific tests."""
    config.addinivalue_line(
        "markers", "macos_only: mark test that needs the real macOS pasteboard"
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Auto-skip tests based on platform markers."""
    skip_macos = pytest.mark.skip(reason="macOS-only test")

    for item in items:
        if "macos_only" in item.keywords and sys.platform != "darwin":
            item.add_marker(skip_macos)


def make_image_bytes(fmt: str = "PNG", size: tuple[int, int] = (2, 2), mode: str = "RGB") -> bytes:
    """Encode a small solid-colour image with Pillow."""
    color = (200, 30, 30) if mode == "RGB" else (200, 30, 30, 255)
    image = Image.new(mode, size, color)
    output = io.BytesIO()
    image.save(output, format=fmt)
    return output.getvalue()


@pytest.fixture
def png_bytes() -> bytes:
    return make_image_bytes("PNG")


@pytest.fixture
def png_base64(png_bytes: bytes) -> str:
    return base64.b64encode(png_bytes).decode("ascii")


@pytest.fixture
def tiff_bytes() -> bytes:
    return make_image_bytes("TIFF")


@pytest.fixture
def store() -> MemoryPasteboardStore:
    """Fresh set of in-memory pasteboards."""
    return MemoryPasteboardStore()


AdapterRunner = Callable[..., tuple[int, bytes, str]]


@pytest.fixture
def adapter(store: MemoryPasteboardStore) -> AdapterRunner:
    """Run one adapter command in-process against ``store``.

    Returns (exit_code, stdout_bytes, stderr_text).
    """

    def _run(*argv: str, stdin: bytes | str = b"") -> tuple[int, bytes, str]:
        if isinstance(stdin, str):
            stdin = stdin.encode("utf-8")
        stdout = io.BytesIO()
        stderr = io.StringIO()
        exit_code = run(list(argv), store, io.BytesIO(stdin), stdout, stderr)
        return exit_code, stdout.getvalue(), stderr.getvalue()

    return _run


@pytest.fixture
def image_factory() -> Callable[..., bytes]:
    return make_image_bytes


@pytest.fixture
def repo_root() -> Path:
    return REPO_ROOT
