"""Facade des operations sur les genres."""

from typing import Optional

from tmdbnet.adapters.api.contexts.base import ResourceContext, listing_path
from tmdbnet.core.entities import Genre, Genres, Movies
from tmdbnet.core.value_objects import Command, DataInfoType


class GenresContext(ResourceContext):
    async def get(
        self,
        data_type: DataInfoType = DataInfoType.MOVIE,
        *,
        language: Optional[str] = None,
    ) -> list[Genre]:
        """Liste officielle des genres films ou series."""
        command = Command(listing_path("genre", data_type), {"language": language})
        genres = await self._executor.get(command, Genres)
        return genres.results

    async def get_movies(
        self,
        genre_id: int,
        *,
        language: Optional[str] = None,
        include_adult: bool = False,
        page: int = 1,
    ) -> Movies:
        parameters = {"page": page, "include_adult": include_adult, "language": language}
        return await self._executor.get(Command(f"genre/{genre_id}/movies", parameters), Movies)
