"""
Facade des operations sur les films.

Usage:
    movies = client.movies
    page = await movies.search("Alien", year=1979)
    movie = await movies.get(348, language="fr", append_all=True)
"""

from datetime import date
from decimal import Decimal
from typing import Optional, Union

from tmdbnet.adapters.api.contexts.base import ResourceContext, path_segment
from tmdbnet.core.entities import (
    AlternativeTitle,
    AlternativeTitles,
    Changes,
    CountryRelease,
    Images,
    Keyword,
    Keywords,
    MediaCredit,
    MediaCredits,
    MediaLists,
    Movie,
    Movies,
    Releases,
    Reviews,
    Translation,
    Translations,
    Video,
    Videos,
)
from tmdbnet.core.value_objects import Command

MOVIE_APPENDICES = (
    "alternative_titles,images,credits,keywords,releases,"
    "videos,translations,reviews,external_ids"
)


class MoviesContext(ResourceContext):
    """Operations de recherche, consultation et notation des films."""

    async def search(
        self,
        query: str,
        *,
        language: Optional[str] = None,
        include_adult: bool = False,
        year: Optional[int] = None,
        autocomplete: bool = False,
        page: int = 1,
    ) -> Movies:
        """
        Recherche des films par titre.

        Args:
            query: Texte recherche
            language: Code langue ISO 639-1 (ex: "fr")
            include_adult: Inclure les contenus adultes
            year: Annee de sortie
            autocomplete: Recherche par n-grammes (saisie incomplete)
            page: Numero de page (1-indexe)
        """
        parameters = {
            "query": query,
            "page": page,
            "include_adult": include_adult,
            "language": language,
            "year": year,
        }
        if autocomplete:
            parameters["search_type"] = "ngram"
        return await self._executor.get(Command("search/movie", parameters), Movies)

    async def discover(
        self,
        *,
        language: Optional[str] = None,
        include_adult: bool = False,
        year: Optional[int] = None,
        minimum_date: Optional[date] = None,
        maximum_date: Optional[date] = None,
        vote_count: Optional[int] = None,
        vote_average: Optional[Union[Decimal, float]] = None,
        genres: Optional[str] = None,
        companies: Optional[str] = None,
        page: int = 1,
    ) -> Movies:
        """
        Decouvre des films selon des criteres de filtre.

        Les genres et compagnies sont des listes d'identifiants separes
        par des virgules (ET) ou des barres verticales (OU).
        """
        parameters = {
            "page": page,
            "include_adult": include_adult,
            "language": language,
            "year": year,
            "release_date.gte": minimum_date,
            "release_date.lte": maximum_date,
            "vote_count.gte": vote_count,
            "vote_average.gte": vote_average,
            "with_genres": genres,
            "with_companies": companies,
        }
        return await self._executor.get(Command("discover/movie", parameters), Movies)

    async def get(
        self,
        movie_id: int,
        *,
        language: Optional[str] = None,
        append_all: bool = False,
    ) -> Movie:
        """
        Recupere un film par son identifiant.

        Args:
            movie_id: Identifiant du film
            language: Code langue ISO 639-1
            append_all: Ajoute titres alternatifs, images, credits, mots-cles,
                        sorties, videos, traductions, critiques et ids externes
        """
        parameters = {"language": language}
        if append_all:
            parameters["append_to_response"] = MOVIE_APPENDICES
        return await self._executor.get(Command(f"movie/{movie_id}", parameters), Movie)

    async def get_images(self, movie_id: int, *, language: Optional[str] = None) -> Images:
        command = Command(f"movie/{movie_id}/images", {"language": language})
        return await self._executor.get(command, Images)

    async def get_credits(self, movie_id: int) -> list[MediaCredit]:
        """Retourne la distribution puis l'equipe technique."""
        credits = await self._executor.get(Command(f"movie/{movie_id}/credits"), MediaCredits)
        return [*credits.cast, *credits.crew]

    async def get_videos(self, movie_id: int, *, language: Optional[str] = None) -> list[Video]:
        command = Command(f"movie/{movie_id}/videos", {"language": language})
        videos = await self._executor.get(command, Videos)
        return videos.results

    async def get_reviews(
        self, movie_id: int, *, language: Optional[str] = None, page: int = 1
    ) -> Reviews:
        command = Command(f"movie/{movie_id}/reviews", {"page": page, "language": language})
        return await self._executor.get(command, Reviews)

    async def get_lists(
        self, movie_id: int, *, language: Optional[str] = None, page: int = 1
    ) -> MediaLists:
        """Listes publiques contenant le film."""
        command = Command(f"movie/{movie_id}/lists", {"page": page, "language": language})
        return await self._executor.get(command, MediaLists)

    async def get_similar(
        self, movie_id: int, *, language: Optional[str] = None, page: int = 1
    ) -> Movies:
        command = Command(
            f"movie/{movie_id}/similar", {"page": page, "language": language}
        )
        return await self._executor.get(command, Movies)

    async def get_guest_rated(
        self, guest_session: str, *, language: Optional[str] = None, page: int = 1
    ) -> Movies:
        """Films notes par une session invitee."""
        command = Command(
            f"guest_session/{path_segment(guest_session)}/rated/movies",
            {"page": page, "language": language},
        )
        return await self._executor.get(command, Movies)

    async def get_popular(self, *, language: Optional[str] = None, page: int = 1) -> Movies:
        command = Command("movie/popular", {"page": page, "language": language})
        return await self._executor.get(command, Movies)

    async def get_top_rated(self, *, language: Optional[str] = None, page: int = 1) -> Movies:
        command = Command("movie/top_rated", {"page": page, "language": language})
        return await self._executor.get(command, Movies)

    async def get_now_playing(self, *, language: Optional[str] = None, page: int = 1) -> Movies:
        command = Command("movie/now_playing", {"page": page, "language": language})
        return await self._executor.get(command, Movies)

    async def get_upcoming(self, *, language: Optional[str] = None, page: int = 1) -> Movies:
        command = Command("movie/upcoming", {"page": page, "language": language})
        return await self._executor.get(command, Movies)

    async def get_alternative_titles(
        self, movie_id: int, *, country: Optional[str] = None
    ) -> list[AlternativeTitle]:
        """Titres alternatifs, filtres par code pays ISO 3166-1 si fourni."""
        command = Command(f"movie/{movie_id}/alternative_titles", {"country": country})
        titles = await self._executor.get(command, AlternativeTitles)
        return titles.results

    async def get_keywords(self, movie_id: int) -> list[Keyword]:
        keywords = await self._executor.get(Command(f"movie/{movie_id}/keywords"), Keywords)
        return keywords.results

    async def get_releases(self, movie_id: int) -> list[CountryRelease]:
        releases = await self._executor.get(Command(f"movie/{movie_id}/releases"), Releases)
        return releases.countries

    async def get_translations(self, movie_id: int) -> list[Translation]:
        command = Command(f"movie/{movie_id}/translations")
        translations = await self._executor.get(command, Translations)
        return translations.results

    async def get_changes(
        self,
        *,
        minimum_date: Optional[date] = None,
        maximum_date: Optional[date] = None,
        page: int = 1,
    ) -> Changes:
        """Identifiants des films modifies sur la periode (24h par defaut)."""
        parameters = {"page": page, "start_date": minimum_date, "end_date": maximum_date}
        return await self._executor.get(Command("movie/changes", parameters), Changes)

    async def get_account_rated(
        self,
        account_id: int,
        session: str,
        *,
        language: Optional[str] = None,
        page: int = 1,
    ) -> Movies:
        return await self._account_movies(account_id, "rated", session, language, page)

    async def get_favorited(
        self,
        account_id: int,
        session: str,
        *,
        language: Optional[str] = None,
        page: int = 1,
    ) -> Movies:
        return await self._account_movies(account_id, "favorite", session, language, page)

    async def get_watchlist(
        self,
        account_id: int,
        session: str,
        *,
        language: Optional[str] = None,
        page: int = 1,
    ) -> Movies:
        return await self._account_movies(account_id, "watchlist", session, language, page)

    async def _account_movies(
        self,
        account_id: int,
        listing: str,
        session: str,
        language: Optional[str],
        page: int,
    ) -> Movies:
        command = Command(
            f"account/{account_id}/{listing}/movies",
            {"session_id": session, "page": page, "language": language},
        )
        return await self._executor.get(command, Movies)

    async def set_rating(
        self, session: str, movie_id: int, value: Union[Decimal, float]
    ) -> bool:
        """
        Note un film (0.5 a 10, par pas de 0.5).

        Returns:
            True si la note a ete creee ou mise a jour
        """
        command = Command(f"movie/{movie_id}/rating", {"session_id": session})
        return await self._write("POST", command, {"value": float(value)})

    async def set_favorite(
        self, account_id: int, session: str, movie_id: int, value: bool
    ) -> bool:
        """Ajoute (value=True) ou retire un film des favoris du compte."""
        command = Command(f"account/{account_id}/favorite", {"session_id": session})
        body = {"media_type": "movie", "media_id": movie_id, "favorite": value}
        return await self._write("POST", command, body)

    async def set_watchlist(
        self, account_id: int, session: str, movie_id: int, value: bool
    ) -> bool:
        """Ajoute (value=True) ou retire un film de la liste de suivi du compte."""
        command = Command(f"account/{account_id}/watchlist", {"session_id": session})
        body = {"media_type": "movie", "media_id": movie_id, "watchlist": value}
        return await self._write("POST", command, body)
