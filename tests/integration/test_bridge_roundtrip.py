"""Integration tests for the process bridge against the test adapter.

Each call spawns ``python -m pbbridge.test_adapter``, which runs the real
adapter entry point over pasteboards persisted in a JSON file, so state
carries across processes the way the system pasteboard does.
"""

import asyncio
import base64
import sys
from pathlib import Path

import pytest

from pbbridge.bridge import PasteboardClient
from pbbridge.config.schema import AdapterConfig
from pbbridge.core.errors import AdapterError, AdapterSpawnError
from pbbridge.core.types import PLAIN_TEXT_TYPE, PNG_TYPE, TIFF_TYPE

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
CUSTOM_TYPE = "com.pbbridge.tests.custom"


@pytest.fixture
def store_file(tmp_path: Path) -> Path:
    return tmp_path / "pasteboards.json"


@pytest.fixture
def client(tmp_path: Path, store_file: Path, repo_root: Path) -> PasteboardClient:
    """Bridge client wired to the file-backed test adapter."""
    config = AdapterConfig(
        command=[sys.executable, "-m", "pbbridge.test_adapter"],
        env={
            "PBBRIDGE_TEST_STORE": str(store_file),
            "PYTHONPATH": str(repo_root),
            "HOME": str(tmp_path),
        },
        cwd=str(tmp_path),
    )
    return PasteboardClient(config)


class TestText:
    """Text round-trips through the adapter process."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "text",
        ["hello", "", "line one\nline two\n", "héllo wörld ✓ 日本語 🎉", "x" * 100_000],
        ids=["simple", "empty", "multiline", "unicode", "large"],
    )
    async def test_round_trip(self, client: PasteboardClient, text: str) -> None:
        await client.write_text(text)

        assert await client.read_text() == text

    @pytest.mark.asyncio
    async def test_lone_surrogate_reaches_adapter_replaced(self, client: PasteboardClient) -> None:
        await client.write_text("a\ud800b")

        assert await client.read_text() == "a?b"

    @pytest.mark.asyncio
    async def test_enumeration_reflects_text_write(self, client: PasteboardClient) -> None:
        await client.write_text("hello")

        assert PLAIN_TEXT_TYPE in await client.list_types()

    @pytest.mark.asyncio
    async def test_read_text_empty_pasteboard(self, client: PasteboardClient) -> None:
        await client.clear()

        with pytest.raises(AdapterError) as exc_info:
            await client.read_text()

        assert exc_info.value.message == "No text on pasteboard"
        assert exc_info.value.exit_code == 1


class TestClear:
    """clear is idempotent."""

    @pytest.mark.asyncio
    async def test_clear_twice(self, client: PasteboardClient) -> None:
        await client.write_text("something")

        await client.clear()
        assert await client.list_types() == []
        await client.clear()
        assert await client.list_types() == []


class TestImages:
    """Image writes and re-encoded reads."""

    @pytest.mark.asyncio
    async def test_png_round_trip(self, client: PasteboardClient, png_base64: str) -> None:
        await client.write_image(png_base64)

        data = base64.b64decode(await client.read_image(format="png"))

        assert data.startswith(PNG_SIGNATURE)

    @pytest.mark.asyncio
    async def test_tiff_read(self, client: PasteboardClient, png_base64: str) -> None:
        await client.write_image(png_base64)

        data = base64.b64decode(await client.read_image(format="tiff"))

        assert data[:2] in (b"II", b"MM")

    @pytest.mark.asyncio
    async def test_png_write_adds_both_representations(
        self, client: PasteboardClient, png_base64: str
    ) -> None:
        await client.write_image(png_base64, format="png")

        types = await client.list_types()

        assert TIFF_TYPE in types
        assert PNG_TYPE in types

    @pytest.mark.asyncio
    async def test_tiff_write_is_canonical_only(
        self, client: PasteboardClient, png_base64: str
    ) -> None:
        await client.write_image(png_base64, format="tiff")

        assert await client.list_types() == [TIFF_TYPE]

    @pytest.mark.asyncio
    async def test_image_write_replaces_text(
        self, client: PasteboardClient, png_base64: str
    ) -> None:
        await client.write_text("will be replaced")
        await client.write_image(png_base64)

        types = await client.list_types()

        assert PLAIN_TEXT_TYPE not in types
        assert TIFF_TYPE in types

    @pytest.mark.asyncio
    async def test_read_image_empty_pasteboard(self, client: PasteboardClient) -> None:
        await client.clear()

        with pytest.raises(AdapterError, match="^No image on pasteboard$"):
            await client.read_image()

    @pytest.mark.asyncio
    async def test_invalid_base64_rejected_by_adapter(self, client: PasteboardClient) -> None:
        await client.write_text("kept")

        with pytest.raises(AdapterError, match="^Invalid base64 image data$"):
            await client.write_image("not base64!!")

        assert await client.read_text() == "kept"

    @pytest.mark.asyncio
    async def test_undecodable_image_rejected(self, client: PasteboardClient) -> None:
        payload = base64.b64encode(b"these bytes are not an image").decode("ascii")

        with pytest.raises(AdapterError, match="^Failed to decode image data$"):
            await client.write_image(payload)


class TestTypedData:
    """Custom type identifiers."""

    @pytest.mark.asyncio
    async def test_text_round_trip(self, client: PasteboardClient) -> None:
        await client.write_data(CUSTOM_TYPE, '{"id": 7}')

        assert await client.read_data(CUSTOM_TYPE) == '{"id": 7}'
        assert await client.list_types() == [CUSTOM_TYPE]

    @pytest.mark.asyncio
    async def test_base64_write_of_text_reads_back_as_text(
        self, client: PasteboardClient
    ) -> None:
        await client.write_data(CUSTOM_TYPE, base64.b64encode(b"plain").decode(), True)

        assert await client.read_data(CUSTOM_TYPE) == "plain"

    @pytest.mark.asyncio
    async def test_binary_reads_back_as_base64(self, client: PasteboardClient) -> None:
        raw = b"\xff\xfe\x00\x01binary"
        await client.write_data(CUSTOM_TYPE, base64.b64encode(raw).decode(), True)

        assert base64.b64decode(await client.read_data(CUSTOM_TYPE)) == raw

    @pytest.mark.asyncio
    async def test_read_missing_type(self, client: PasteboardClient) -> None:
        await client.write_text("hello")

        with pytest.raises(AdapterError) as exc_info:
            await client.read_data(CUSTOM_TYPE)

        assert exc_info.value.message == f"No data for type {CUSTOM_TYPE} on pasteboard"


class TestNamedPasteboards:
    """Pasteboards are independent of one another."""

    @pytest.mark.asyncio
    async def test_named_pasteboards_are_separate(self, client: PasteboardClient) -> None:
        await client.write_text("general text")
        await client.write_text("find text", "find")
        await client.write_text("custom text", "com.pbbridge.tests.board")

        assert await client.read_text() == "general text"
        assert await client.read_text("general") == "general text"
        assert await client.read_text("find") == "find text"
        assert await client.read_text("com.pbbridge.tests.board") == "custom text"

    @pytest.mark.asyncio
    async def test_clear_only_affects_target(self, client: PasteboardClient) -> None:
        await client.write_text("general text")
        await client.write_text("find text", "find")

        await client.clear("find")

        assert await client.read_text() == "general text"
        assert await client.list_types("find") == []


class TestProcessBehaviour:
    """Bridge-level process handling."""

    @pytest.mark.asyncio
    async def test_concurrent_reads_spawn_independent_processes(
        self, client: PasteboardClient
    ) -> None:
        await client.write_text("shared")

        results = await asyncio.gather(*(client.read_text() for _ in range(5)))

        assert results == ["shared"] * 5

    @pytest.mark.asyncio
    async def test_missing_adapter_binary(self, tmp_path: Path) -> None:
        client = PasteboardClient(AdapterConfig(command=[str(tmp_path / "no-pbhelper")]))

        with pytest.raises(AdapterSpawnError):
            await client.read_text()

    @pytest.mark.asyncio
    async def test_usage_error_message_is_adapter_stderr(
        self, client: PasteboardClient
    ) -> None:
        with pytest.raises(AdapterError) as exc_info:
            await client.read_image(format="gif")  # type: ignore[arg-type]

        assert exc_info.value.message.startswith("argument --format")
        assert "Usage: pbhelper" in exc_info.value.stderr
