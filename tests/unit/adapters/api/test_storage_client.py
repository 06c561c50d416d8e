"""
Tests for StorageClient - image downloads from the CDN.
"""

import io

import httpx
import pytest
import respx

from tmdbnet.adapters.api.errors import ServiceRequestError
from tmdbnet.adapters.api.storage_client import StorageClient
from tmdbnet.core.ports import IImageStorage

IMAGE_URL = "https://image.tmdb.org/t/p"


class TestStorageClient:
    """Tests for StorageClient.download()."""

    def test_implements_interface(self) -> None:
        assert isinstance(StorageClient(), IImageStorage)

    @pytest.mark.asyncio
    @respx.mock
    async def test_download_copies_bytes(self) -> None:
        content = b"\x89PNG" + b"\x00" * 2048
        route = respx.get(f"{IMAGE_URL}/w500/kqjL17yufvn9OVLyXYpvtyrFfak.jpg").mock(
            return_value=httpx.Response(200, content=content)
        )
        sink = io.BytesIO()

        async with StorageClient() as storage:
            written = await storage.download("/kqjL17yufvn9OVLyXYpvtyrFfak.jpg", sink, "w500")

        assert written == len(content)
        assert sink.getvalue() == content
        assert route.call_count == 1
        assert "api_key" not in str(route.calls.last.request.url)

    @pytest.mark.asyncio
    @respx.mock
    async def test_default_size_is_original(self) -> None:
        route = respx.get(f"{IMAGE_URL}/original/poster.jpg").mock(
            return_value=httpx.Response(200, content=b"img")
        )

        async with StorageClient() as storage:
            await storage.download("poster.jpg", io.BytesIO())

        assert route.called

    @pytest.mark.asyncio
    @respx.mock
    async def test_error_status_writes_nothing(self) -> None:
        respx.get(f"{IMAGE_URL}/original/missing.jpg").mock(
            return_value=httpx.Response(404, text="Not Found")
        )
        sink = io.BytesIO()

        async with StorageClient() as storage:
            with pytest.raises(ServiceRequestError) as exc_info:
                await storage.download("/missing.jpg", sink)

        assert exc_info.value.status_code == 404
        assert sink.getvalue() == b""

    @pytest.mark.asyncio
    @respx.mock
    async def test_custom_base_url(self) -> None:
        route = respx.get("https://cdn.example.com/images/w92/a.jpg").mock(
            return_value=httpx.Response(200, content=b"a")
        )

        async with StorageClient(base_url="https://cdn.example.com/images/") as storage:
            await storage.download("/a.jpg", io.BytesIO(), "w92")

        assert route.called
