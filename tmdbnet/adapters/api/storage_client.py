"""
Telechargement des images depuis le CDN du service.

Les images ne demandent pas d'authentification; les chemins sont ceux
renvoyes par l'API (poster_path, backdrop_path, profile_path...).

Usage:
    async with StorageClient() as storage:
        with open("poster.jpg", "wb") as f:
            size = await storage.download("/kqjL17yufvn9OVLyXYpvtyrFfak.jpg", f, "w500")
"""

from typing import BinaryIO, Optional

import httpx
from loguru import logger

from tmdbnet.adapters.api.errors import ServiceRequestError
from tmdbnet.adapters.api.transport import build_async_client
from tmdbnet.core.ports import IImageStorage


class StorageClient(IImageStorage):
    """
    Client de telechargement d'images.

    Attributes:
        IMAGE_BASE_URL: URL de base du CDN d'images
    """

    IMAGE_BASE_URL = "https://image.tmdb.org/t/p/"

    def __init__(self, *, base_url: str = IMAGE_BASE_URL, timeout: float = 30.0) -> None:
        self._base_url = base_url
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = build_async_client(
                self._base_url, timeout=self._timeout, headers={"Accept": "*/*"}
            )
        return self._client

    async def download(
        self,
        file_path: str,
        sink: BinaryIO,
        size: str = "original",
    ) -> int:
        """
        Copie une image dans le flux fourni, au fil de la reception.

        Args:
            file_path: Chemin de l'image tel que renvoye par l'API
            sink: Flux binaire de destination
            size: Taille demandee (ex: "w500", "original")

        Returns:
            Nombre d'octets ecrits

        Raises:
            ServiceRequestError: Si le CDN renvoie un statut d'echec
                                 (aucun octet n'est alors ecrit)
        """
        target = f"{size}/{file_path.lstrip('/')}"
        written = 0
        async with self._get_client().stream("GET", target) as response:
            if not response.is_success:
                raise ServiceRequestError.from_status(response)
            async for chunk in response.aiter_bytes():
                sink.write(chunk)
                written += len(chunk)

        logger.debug("Image {path} telechargee ({size} octets)", path=target, size=written)
        return written

    async def close(self) -> None:
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "StorageClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
