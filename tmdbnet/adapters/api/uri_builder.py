"""
Rendu deterministe d'une Command en cible de requete HTTP.

Regles de formatage des valeurs:
- None : parametre omis (jamais rendu vide)
- date / datetime : YYYY-MM-DD
- Decimal / float : notation invariante, independante de la locale
- bool : true / false
- autres : str(value) encode pour une query string

L'ordre des parametres est l'ordre d'insertion de la Command, la cle API
est toujours rendue en premier.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Mapping
from urllib.parse import quote

from tmdbnet.core.value_objects import Command, ParameterValue


def format_parameter_value(value: ParameterValue) -> str:
    """
    Formate une valeur de parametre pour la query string.

    Args:
        value: Valeur scalaire non None

    Returns:
        Valeur rendue et encodee (percent-encoding)
    """
    # bool avant int : bool est une sous-classe de int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Decimal):
        return quote(format(value, "f"), safe="")
    if isinstance(value, float):
        return quote(repr(value), safe="")
    return quote(str(value), safe="")


def build_query(parameters: Mapping[str, ParameterValue]) -> str:
    """
    Construit la query string (sans "?") a partir des parametres.

    Les parametres de valeur None sont omis.
    """
    return "&".join(
        f"{quote(name, safe='.')}={format_parameter_value(value)}"
        for name, value in parameters.items()
        if value is not None
    )


def build_request_target(command: Command, api_key: str) -> str:
    """
    Construit la cible relative d'une requete (chemin + query string).

    Args:
        command: Commande a rendre
        api_key: Cle API ajoutee a chaque requete

    Returns:
        Cible relative, ex: "movie/550?api_key=xxx&language=fr"
    """
    query = build_query({"api_key": api_key, **command.parameters})
    return f"{command.path}?{query}"
