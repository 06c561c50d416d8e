"""
Objets valeur immutables du client.

Exports :
- Command : chemin + parametres d'un appel logique
- DataInfoType : famille de donnees (films, series, combine)
- ExternalSource : sources d'identifiants externes pour find
"""

from tmdbnet.core.value_objects.command import (
    Command,
    DataInfoType,
    ExternalSource,
    ParameterValue,
)

__all__ = [
    "Command",
    "DataInfoType",
    "ExternalSource",
    "ParameterValue",
]
