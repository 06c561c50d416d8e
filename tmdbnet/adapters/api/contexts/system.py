"""
Facade des donnees systeme: compte, configuration et referentiels.
"""

from tmdbnet.adapters.api.contexts.base import ResourceContext, listing_path
from tmdbnet.core.entities import (
    Account,
    Certification,
    Certifications,
    Configuration,
    Job,
    Jobs,
)
from tmdbnet.core.value_objects import Command, DataInfoType


class SystemContext(ResourceContext):
    """Compte courant, configuration du service et listes de reference."""

    async def get_account(self, session: str) -> Account:
        return await self._executor.get(Command("account", {"session_id": session}), Account)

    async def get_certifications(
        self, data_type: DataInfoType = DataInfoType.MOVIE
    ) -> dict[str, list[Certification]]:
        """Classifications par code pays (ex: "FR" -> [U, 12, 16, 18])."""
        command = Command(listing_path("certification", data_type))
        certifications = await self._executor.get(command, Certifications)
        return certifications.results

    async def get_configuration(self) -> Configuration:
        """Tailles d'images disponibles et URL de base des images."""
        return await self._executor.get(Command("configuration"), Configuration)

    async def get_timezones(self) -> dict[str, list[str]]:
        """
        Fuseaux horaires par code pays.

        Le service renvoie une liste d'objets a une cle; ils sont fusionnes
        en une seule table.
        """
        entries = await self._executor.get(
            Command("timezones/list"), list[dict[str, list[str]]]
        )
        timezones: dict[str, list[str]] = {}
        for entry in entries:
            timezones.update(entry)
        return timezones

    async def get_jobs(self) -> list[Job]:
        jobs = await self._executor.get(Command("job/list"), Jobs)
        return jobs.results
