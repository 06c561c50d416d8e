"""
Objets valeur decrivant un appel logique a l'API avant sa transmission.

Une Command associe un chemin relatif (ex: "movie/550") a une table ordonnee
de parametres nommes. Elle est construite a chaque appel et n'est jamais
partagee ni modifiee ensuite.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Union

# Types scalaires acceptes comme valeur de parametre (None = parametre omis)
ParameterValue = Optional[Union[str, int, float, bool, Decimal, date]]


class DataInfoType(Enum):
    """Famille de donnees pour les endpoints communs aux films et series.

    Valeurs:
        MOVIE: Donnees films (ex: genre/movie/list)
        TELEVISION: Donnees series (ex: genre/tv/list)
        COMBINED: Donnees combinees (credits d'une personne)
    """

    MOVIE = "movie"
    TELEVISION = "tv"
    COMBINED = "combined"


class ExternalSource(Enum):
    """Sources d'identifiants externes acceptees par l'endpoint find."""

    IMDB = "imdb_id"
    FREEBASE = "freebase_id"
    FREEBASE_MID = "freebase_mid"
    TVDB = "tvdb_id"
    TVRAGE = "tvrage_id"


@dataclass(frozen=True)
class Command:
    """
    Description immutable d'un appel API.

    Attributs:
        path: Chemin relatif a l'URL de base du service (sans "/" initial)
        parameters: Parametres nommes, dans l'ordre d'insertion. Les valeurs
                    None sont conservees ici et omises au rendu.

    Example:
        cmd = Command("search/movie", {"query": "Alien", "year": None})
        cmd.with_parameter("page", 2)
    """

    path: str
    parameters: Mapping[str, ParameterValue] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Copie defensive figee : l'appelant peut reutiliser son dict
        object.__setattr__(self, "path", self.path.strip().lstrip("/"))
        object.__setattr__(
            self, "parameters", MappingProxyType(dict(self.parameters))
        )

    def with_parameter(self, name: str, value: ParameterValue) -> "Command":
        """Retourne une nouvelle Command avec un parametre ajoute ou remplace."""
        parameters = dict(self.parameters)
        parameters[name] = value
        return Command(self.path, parameters)
