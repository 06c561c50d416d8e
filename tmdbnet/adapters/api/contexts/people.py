"""
Facade des operations sur les personnes (acteurs, equipes techniques).
"""

from datetime import date
from typing import Optional

from tmdbnet.adapters.api.contexts.base import ResourceContext
from tmdbnet.core.entities import (
    Changes,
    ExternalIds,
    Image,
    People,
    Person,
    PersonCredit,
    PersonCredits,
    PersonImages,
)
from tmdbnet.core.value_objects import Command, DataInfoType

PERSON_APPENDICES = "images,external_ids"


class PeopleContext(ResourceContext):
    """Operations sur les personnes."""

    async def get(self, person_id: int, *, append_all: bool = False) -> Person:
        parameters = {}
        if append_all:
            parameters["append_to_response"] = PERSON_APPENDICES
        return await self._executor.get(Command(f"person/{person_id}", parameters), Person)

    async def get_credits(
        self,
        person_id: int,
        *,
        data_type: DataInfoType = DataInfoType.COMBINED,
        language: Optional[str] = None,
    ) -> list[PersonCredit]:
        """
        Filmographie d'une personne: roles puis postes techniques.

        Args:
            person_id: Identifiant de la personne
            data_type: Films, series ou les deux
            language: Code langue ISO 639-1
        """
        command = Command(
            f"person/{person_id}/{data_type.value}_credits", {"language": language}
        )
        credits = await self._executor.get(command, PersonCredits)
        return [*credits.cast, *credits.crew]

    async def get_images(self, person_id: int) -> list[Image]:
        images = await self._executor.get(Command(f"person/{person_id}/images"), PersonImages)
        return images.results

    async def get_ids(self, person_id: int) -> ExternalIds:
        return await self._executor.get(Command(f"person/{person_id}/external_ids"), ExternalIds)

    async def search(
        self,
        query: str,
        *,
        include_adult: bool = False,
        autocomplete: bool = False,
        page: int = 1,
    ) -> People:
        parameters = {"query": query, "page": page, "include_adult": include_adult}
        if autocomplete:
            parameters["search_type"] = "ngram"
        return await self._executor.get(Command("search/person", parameters), People)

    async def get_changes(
        self,
        *,
        minimum_date: Optional[date] = None,
        maximum_date: Optional[date] = None,
        page: int = 1,
    ) -> Changes:
        parameters = {"page": page, "start_date": minimum_date, "end_date": maximum_date}
        return await self._executor.get(Command("person/changes", parameters), Changes)
