"""
Facade des operations sur les listes utilisateur.

Toutes les operations d'ecriture exigent une session utilisateur
(voir ServiceClient.login et ServiceClient.get_session).
"""

from typing import Optional

from tmdbnet.adapters.api.contexts.base import ResourceContext, path_segment
from tmdbnet.core.entities import ItemStatus, ListCreated, MediaList
from tmdbnet.core.value_objects import Command


def _list_path(list_id: str, leaf: Optional[str] = None) -> str:
    path = f"list/{path_segment(list_id)}"
    return f"{path}/{leaf}" if leaf else path


class ListsContext(ResourceContext):
    """Consultation et edition des listes."""

    async def get(self, list_id: str) -> MediaList:
        return await self._executor.get(Command(_list_path(list_id)), MediaList)

    async def contains(self, list_id: str, movie_id: int) -> bool:
        """Vrai si le film fait partie de la liste."""
        command = Command(_list_path(list_id, "item_status"), {"movie_id": movie_id})
        status = await self._executor.get(command, ItemStatus)
        return status.present

    async def create(
        self,
        session: str,
        name: str,
        description: str = "",
        *,
        language: Optional[str] = None,
    ) -> Optional[str]:
        """
        Cree une liste.

        Args:
            session: Identifiant de session
            name: Nom de la liste
            description: Description de la liste
            language: Code langue ISO 639-1 de la liste

        Returns:
            Identifiant de la liste creee, None si le service n'en renvoie pas
        """
        body = {"name": name, "description": description}
        if language is not None:
            body["language"] = language
        command = Command("list", {"session_id": session})
        created = await self._executor.send("POST", command, ListCreated, body)
        return created.list_id

    async def insert(self, session: str, list_id: str, media_id: int) -> bool:
        command = Command(_list_path(list_id, "add_item"), {"session_id": session})
        return await self._write("POST", command, {"media_id": media_id})

    async def remove(self, session: str, list_id: str, media_id: int) -> bool:
        command = Command(_list_path(list_id, "remove_item"), {"session_id": session})
        return await self._write("POST", command, {"media_id": media_id})

    async def clear(self, session: str, list_id: str) -> bool:
        """Vide la liste sans la supprimer."""
        command = Command(
            _list_path(list_id, "clear"), {"session_id": session, "confirm": True}
        )
        return await self._write("POST", command)

    async def delete(self, session: str, list_id: str) -> bool:
        command = Command(_list_path(list_id), {"session_id": session})
        return await self._write("DELETE", command)
