"""Facade des operations sur les societes de production."""

from typing import Optional

from tmdbnet.adapters.api.contexts.base import ResourceContext
from tmdbnet.core.entities import Companies, Company, Movies
from tmdbnet.core.value_objects import Command


class CompaniesContext(ResourceContext):
    async def get(self, company_id: int) -> Company:
        return await self._executor.get(Command(f"company/{company_id}"), Company)

    async def get_movies(
        self, company_id: int, *, language: Optional[str] = None, page: int = 1
    ) -> Movies:
        """Films produits par la societe."""
        command = Command(
            f"company/{company_id}/movies", {"page": page, "language": language}
        )
        return await self._executor.get(command, Movies)

    async def search(self, query: str, *, page: int = 1) -> Companies:
        parameters = {"query": query, "page": page}
        return await self._executor.get(Command("search/company", parameters), Companies)
