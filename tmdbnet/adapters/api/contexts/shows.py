"""
Facade des operations sur les series, saisons et episodes.
"""

from datetime import date
from decimal import Decimal
from typing import Optional, Union

from tmdbnet.adapters.api.contexts.base import ResourceContext, media_path
from tmdbnet.core.entities import (
    Changes,
    Episode,
    ExternalIds,
    Images,
    MediaCredit,
    MediaCredits,
    Network,
    Season,
    Show,
    Shows,
    Translation,
    Translations,
    Video,
    Videos,
)
from tmdbnet.core.value_objects import Command

SHOW_APPENDICES = "images,credits,keywords,videos,translations,external_ids"
SEASON_APPENDICES = "images,credits,videos,external_ids"


class ShowsContext(ResourceContext):
    """Operations sur les series TV."""

    async def search(
        self,
        query: str,
        *,
        language: Optional[str] = None,
        first_air_date_year: Optional[int] = None,
        autocomplete: bool = False,
        page: int = 1,
    ) -> Shows:
        parameters = {
            "query": query,
            "page": page,
            "language": language,
            "first_air_date_year": first_air_date_year,
        }
        if autocomplete:
            parameters["search_type"] = "ngram"
        return await self._executor.get(Command("search/tv", parameters), Shows)

    async def discover(
        self,
        *,
        language: Optional[str] = None,
        year: Optional[int] = None,
        minimum_date: Optional[date] = None,
        maximum_date: Optional[date] = None,
        vote_count: Optional[int] = None,
        vote_average: Optional[Union[Decimal, float]] = None,
        genres: Optional[str] = None,
        networks: Optional[str] = None,
        page: int = 1,
    ) -> Shows:
        """Decouvre des series selon des criteres de filtre."""
        parameters = {
            "page": page,
            "language": language,
            "first_air_date_year": year,
            "first_air_date.gte": minimum_date,
            "first_air_date.lte": maximum_date,
            "vote_count.gte": vote_count,
            "vote_average.gte": vote_average,
            "with_genres": genres,
            "with_networks": networks,
        }
        return await self._executor.get(Command("discover/tv", parameters), Shows)

    async def get(
        self,
        show_id: int,
        *,
        language: Optional[str] = None,
        append_all: bool = False,
    ) -> Show:
        parameters = {"language": language}
        if append_all:
            parameters["append_to_response"] = SHOW_APPENDICES
        return await self._executor.get(Command(f"tv/{show_id}", parameters), Show)

    async def get_latest(self) -> Show:
        """Derniere serie ajoutee au service."""
        return await self._executor.get(Command("tv/latest"), Show)

    async def get_season(
        self,
        show_id: int,
        season: int,
        *,
        language: Optional[str] = None,
        append_all: bool = False,
    ) -> Season:
        parameters = {"language": language}
        if append_all:
            parameters["append_to_response"] = SEASON_APPENDICES
        command = Command(media_path("tv", show_id, season), parameters)
        return await self._executor.get(command, Season)

    async def get_episode(
        self,
        show_id: int,
        season: int,
        episode: int,
        *,
        language: Optional[str] = None,
        append_all: bool = False,
    ) -> Episode:
        parameters = {"language": language}
        if append_all:
            parameters["append_to_response"] = SEASON_APPENDICES
        command = Command(media_path("tv", show_id, season, episode), parameters)
        return await self._executor.get(command, Episode)

    async def get_ids(
        self,
        show_id: int,
        *,
        season: Optional[int] = None,
        episode: Optional[int] = None,
    ) -> ExternalIds:
        """
        Identifiants externes d'une serie, d'une saison ou d'un episode.

        L'episode n'est pris en compte que si la saison est fournie.
        """
        command = Command(media_path("tv", show_id, season, episode, "external_ids"))
        return await self._executor.get(command, ExternalIds)

    async def get_credits(self, show_id: int) -> list[MediaCredit]:
        """Retourne la distribution puis l'equipe technique."""
        credits = await self._executor.get(Command(f"tv/{show_id}/credits"), MediaCredits)
        return [*credits.cast, *credits.crew]

    async def get_images(
        self,
        show_id: int,
        *,
        season: Optional[int] = None,
        episode: Optional[int] = None,
        language: Optional[str] = None,
    ) -> Images:
        command = Command(
            media_path("tv", show_id, season, episode, "images"), {"language": language}
        )
        return await self._executor.get(command, Images)

    async def get_similar(
        self, show_id: int, *, language: Optional[str] = None, page: int = 1
    ) -> Shows:
        command = Command(f"tv/{show_id}/similar", {"page": page, "language": language})
        return await self._executor.get(command, Shows)

    async def get_videos(
        self,
        show_id: int,
        *,
        season: Optional[int] = None,
        episode: Optional[int] = None,
        language: Optional[str] = None,
    ) -> list[Video]:
        command = Command(
            media_path("tv", show_id, season, episode, "videos"), {"language": language}
        )
        videos = await self._executor.get(command, Videos)
        return videos.results

    async def get_translations(self, show_id: int) -> list[Translation]:
        translations = await self._executor.get(
            Command(f"tv/{show_id}/translations"), Translations
        )
        return translations.results

    async def get_on_air(self, *, language: Optional[str] = None, page: int = 1) -> Shows:
        """Series ayant un episode diffuse dans les 7 prochains jours."""
        command = Command("tv/on_the_air", {"page": page, "language": language})
        return await self._executor.get(command, Shows)

    async def get_airing(
        self,
        *,
        language: Optional[str] = None,
        timezone: Optional[str] = None,
        page: int = 1,
    ) -> Shows:
        """Series diffusees aujourd'hui dans le fuseau horaire donne."""
        command = Command(
            "tv/airing_today", {"page": page, "language": language, "timezone": timezone}
        )
        return await self._executor.get(command, Shows)

    async def get_popular(self, *, language: Optional[str] = None, page: int = 1) -> Shows:
        command = Command("tv/popular", {"page": page, "language": language})
        return await self._executor.get(command, Shows)

    async def get_top_rated(self, *, language: Optional[str] = None, page: int = 1) -> Shows:
        command = Command("tv/top_rated", {"page": page, "language": language})
        return await self._executor.get(command, Shows)

    async def get_changes(
        self,
        *,
        minimum_date: Optional[date] = None,
        maximum_date: Optional[date] = None,
        page: int = 1,
    ) -> Changes:
        parameters = {"page": page, "start_date": minimum_date, "end_date": maximum_date}
        return await self._executor.get(Command("tv/changes", parameters), Changes)

    async def get_network(self, network_id: int) -> Network:
        return await self._executor.get(Command(f"network/{network_id}"), Network)

    async def get_account_rated(
        self,
        account_id: int,
        session: str,
        *,
        language: Optional[str] = None,
        page: int = 1,
    ) -> Shows:
        return await self._account_shows(account_id, "rated", session, language, page)

    async def get_favorited(
        self,
        account_id: int,
        session: str,
        *,
        language: Optional[str] = None,
        page: int = 1,
    ) -> Shows:
        return await self._account_shows(account_id, "favorite", session, language, page)

    async def get_watchlist(
        self,
        account_id: int,
        session: str,
        *,
        language: Optional[str] = None,
        page: int = 1,
    ) -> Shows:
        return await self._account_shows(account_id, "watchlist", session, language, page)

    async def _account_shows(
        self,
        account_id: int,
        listing: str,
        session: str,
        language: Optional[str],
        page: int,
    ) -> Shows:
        command = Command(
            f"account/{account_id}/{listing}/tv",
            {"session_id": session, "page": page, "language": language},
        )
        return await self._executor.get(command, Shows)

    async def set_rating(
        self,
        session: str,
        show_id: int,
        value: Union[Decimal, float],
        *,
        season: Optional[int] = None,
        episode: Optional[int] = None,
    ) -> bool:
        """
        Note une serie, ou un episode si saison et episode sont fournis.

        Args:
            session: Identifiant de session
            show_id: Identifiant de la serie
            value: Note (0.5 a 10, par pas de 0.5)
            season: Numero de saison (note d'episode)
            episode: Numero d'episode (note d'episode)

        Raises:
            ValueError: Si un seul des deux numeros saison/episode est fourni
        """
        if (season is None) != (episode is None):
            raise ValueError("season and episode must be given together")
        path = media_path("tv", show_id, season, episode, "rating")
        command = Command(path, {"session_id": session})
        return await self._write("POST", command, {"value": float(value)})

    async def set_favorite(
        self, account_id: int, session: str, show_id: int, value: bool
    ) -> bool:
        command = Command(f"account/{account_id}/favorite", {"session_id": session})
        body = {"media_type": "tv", "media_id": show_id, "favorite": value}
        return await self._write("POST", command, body)

    async def set_watchlist(
        self, account_id: int, session: str, show_id: int, value: bool
    ) -> bool:
        command = Command(f"account/{account_id}/watchlist", {"session_id": session})
        body = {"media_type": "tv", "media_id": show_id, "watchlist": value}
        return await self._write("POST", command, body)
