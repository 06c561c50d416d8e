"""
Pages de resultats et agregats renvoyes par les recherches.
"""

from typing import Optional

from pydantic import Field

from tmdbnet.core.entities.account import MediaList
from tmdbnet.core.entities.base import AnyResource, PagedResult, Resource, ServiceModel
from tmdbnet.core.entities.media import Collection, Company, Episode, Movie, Season, Show
from tmdbnet.core.entities.people import Person


class Movies(PagedResult[Movie]):
    pass


class Shows(PagedResult[Show]):
    pass


class People(PagedResult[Person]):
    pass


class Collections(PagedResult[Collection]):
    pass


class Companies(PagedResult[Company]):
    pass


class MediaLists(PagedResult[MediaList]):
    pass


class Resources(PagedResult[AnyResource]):
    """Resultats d'une recherche multi-types (films, series, personnes)."""


class ChangedItem(ServiceModel):
    id: int = 0
    adult: Optional[bool] = None


class Changes(PagedResult[ChangedItem]):
    pass


class FindResult(ServiceModel):
    """Resultats d'une recherche par identifiant externe."""

    movies: list[Movie] = Field(default_factory=list, alias="movie_results")
    people: list[Person] = Field(default_factory=list, alias="person_results")
    shows: list[Show] = Field(default_factory=list, alias="tv_results")
    seasons: list[Season] = Field(default_factory=list, alias="tv_season_results")
    episodes: list[Episode] = Field(default_factory=list, alias="tv_episode_results")

    def first(self) -> Optional[Resource]:
        """Premier resultat, dans l'ordre films, personnes, series, saisons, episodes."""
        for group in (self.movies, self.people, self.shows, self.seasons, self.episodes):
            if group:
                return group[0]
        return None
