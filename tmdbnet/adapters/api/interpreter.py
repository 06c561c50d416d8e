"""
Interpretation des reponses terminales du service.

Une reponse en succes est convertie en valeur typee; une reponse en
echec est convertie en ServiceRequestError.
"""

import json
from typing import Any, Optional, TypeVar, get_origin

import httpx
from loguru import logger
from pydantic import TypeAdapter, ValidationError

from tmdbnet.adapters.api.errors import ServiceRequestError
from tmdbnet.adapters.api.resolver import ResourceResolver
from tmdbnet.core.entities.base import ServiceModel

T = TypeVar("T")


class ResponseInterpreter:
    """
    Convertit une reponse HTTP en valeur typee ou en erreur de service.

    Le resolveur de ressources polymorphes est transmis a chaque
    validation par le contexte pydantic.
    """

    def __init__(self, resolver: Optional[ResourceResolver] = None) -> None:
        self.resolver = resolver or ResourceResolver()
        self._adapters: dict[Any, TypeAdapter] = {}

    def _adapter_for(self, result_type: Any) -> TypeAdapter:
        adapter = self._adapters.get(result_type)
        if adapter is None:
            adapter = TypeAdapter(result_type)
            self._adapters[result_type] = adapter
        return adapter

    def read(self, response: httpx.Response, result_type: type[T]) -> T:
        """
        Lit une reponse terminale.

        Args:
            response: Reponse deja lue (jamais un 429 intermediaire)
            result_type: Type attendu (modele, liste, dict...)

        Returns:
            Valeur de type result_type

        Raises:
            ServiceRequestError: Si le statut n'est pas un succes
        """
        if not response.is_success:
            raise ServiceRequestError.from_response(response)

        payload = self._load(response)
        try:
            return self._adapter_for(result_type).validate_python(
                payload, context={"resolver": self.resolver}
            )
        except ValidationError as exc:
            # Les modeles absorbent deja les champs invalides
            if isinstance(result_type, type) and issubclass(result_type, ServiceModel):
                raise
            logger.debug(
                "Corps inattendu pour {type} ({count} erreur(s)), valeur vide renvoyee",
                type=result_type,
                count=exc.error_count(),
            )
            return _empty_value(result_type)

    @staticmethod
    def _load(response: httpx.Response) -> Any:
        if not response.content:
            return {}
        try:
            return json.loads(response.content)
        except ValueError:
            logger.debug(
                "Corps illisible (statut {status}), traite comme objet vide",
                status=response.status_code,
            )
            return {}


def _empty_value(result_type: Any) -> Any:
    """Valeur vide d'un type conteneur ([] pour une liste, {} pour un dict)."""
    origin = get_origin(result_type) or result_type
    if origin in (list, dict, set, frozenset, tuple):
        return origin()
    return None
