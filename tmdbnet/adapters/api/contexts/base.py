"""
Socle commun des facades par famille de ressources.

Une facade ne fait que construire une Command et la confier au coeur
d'execution; elle ne connait ni HTTP ni le rate limiting.
"""

from typing import Any, Optional, Union
from urllib.parse import quote

from tmdbnet.core.entities import Status
from tmdbnet.core.ports import IRequestExecutor
from tmdbnet.core.value_objects import Command, DataInfoType


class ResourceContext:
    """Facade de base, liee a un executeur de requetes."""

    def __init__(self, executor: IRequestExecutor) -> None:
        self._executor = executor

    async def _write(
        self,
        method: str,
        command: Command,
        body: Optional[dict[str, Any]] = None,
    ) -> bool:
        """Execute une operation d'ecriture et retourne son statut de succes."""
        status = await self._executor.send(method, command, Status, body)
        return status.succeeded


def media_path(
    root: str,
    show_id: int,
    season: Optional[int] = None,
    episode: Optional[int] = None,
    leaf: Optional[str] = None,
) -> str:
    """
    Chemin d'une serie, d'une saison ou d'un episode.

    L'episode n'est pris en compte que si la saison est fournie.

    Example:
        media_path("tv", 1396, 1, 2, "images") -> "tv/1396/season/1/episode/2/images"
    """
    parts = [root, str(show_id)]
    if season is not None:
        parts += ["season", str(season)]
        if episode is not None:
            parts += ["episode", str(episode)]
    if leaf:
        parts.append(leaf)
    return "/".join(parts)


def path_segment(value: Union[str, int]) -> str:
    """
    Segment de chemin encode pour un identifiant fourni par l'appelant.

    Example:
        path_segment("a?b") -> "a%3Fb"
    """
    return quote(str(value).strip(), safe="")


def listing_path(root: str, data_type: DataInfoType) -> str:
    """Chemin des listes de reference (genres, certifications) par type."""
    if data_type is DataInfoType.COMBINED:
        return f"{root}/list"
    return f"{root}/{data_type.value}/list"
