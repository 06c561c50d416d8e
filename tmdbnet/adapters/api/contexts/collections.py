"""Facade des operations sur les collections de films."""

from typing import Optional

from tmdbnet.adapters.api.contexts.base import ResourceContext
from tmdbnet.core.entities import Collection, Collections, Images
from tmdbnet.core.value_objects import Command


class CollectionsContext(ResourceContext):
    async def get(
        self,
        collection_id: int,
        *,
        language: Optional[str] = None,
        append_all: bool = False,
    ) -> Collection:
        parameters = {"language": language}
        if append_all:
            parameters["append_to_response"] = "images"
        command = Command(f"collection/{collection_id}", parameters)
        return await self._executor.get(command, Collection)

    async def get_images(
        self, collection_id: int, *, language: Optional[str] = None
    ) -> Images:
        command = Command(f"collection/{collection_id}/images", {"language": language})
        return await self._executor.get(command, Images)

    async def search(
        self, query: str, *, language: Optional[str] = None, page: int = 1
    ) -> Collections:
        parameters = {"query": query, "page": page, "language": language}
        return await self._executor.get(Command("search/collection", parameters), Collections)
