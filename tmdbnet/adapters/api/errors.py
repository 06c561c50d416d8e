"""
Erreur normalisee pour tout echec renvoye par le service.

Le corps d'une reponse en erreur a l'une des formes suivantes:
    {"status_code": 34, "status_message": "The resource you requested could not be found."}
    {"errors": ["query must be provided"]}

Si le corps est absent ou illisible, le message est la raison HTTP
et le code de service vaut UNKNOWN_SERVICE_CODE.
"""

import json
from typing import Any, Optional

import httpx

UNKNOWN_SERVICE_CODE = 0


class ServiceRequestError(Exception):
    """
    Exception levee quand le service renvoie un statut d'echec.

    Les appelants distinguent "introuvable", "requete invalide" ou
    "authentification refusee" par le code de service, dont les valeurs
    sont definies par le service.

    Attributes:
        status_code: Code de statut HTTP
        service_code: Code de statut du service (0 si inconnu)
        message: Message lisible
    """

    def __init__(self, status_code: int, service_code: int, message: str) -> None:
        self.status_code = status_code
        self.service_code = service_code
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(status_code={self.status_code}, "
            f"service_code={self.service_code}, message={self.message!r})"
        )

    @classmethod
    def from_status(cls, response: httpx.Response) -> "ServiceRequestError":
        """Construit l'erreur depuis la seule ligne de statut, sans lire le corps."""
        return cls(response.status_code, UNKNOWN_SERVICE_CODE, response.reason_phrase)

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ServiceRequestError":
        """
        Construit l'erreur depuis le corps JSON de la reponse.

        Args:
            response: Reponse en erreur, corps deja lu

        Returns:
            ServiceRequestError (ou sous-classe) portant les deux codes
        """
        payload = _load_payload(response)
        if payload is None:
            return cls.from_status(response)

        service_code = payload.get("status_code")
        if isinstance(service_code, bool) or not isinstance(service_code, int):
            service_code = UNKNOWN_SERVICE_CODE

        errors = payload.get("errors")
        if isinstance(errors, list) and errors:
            message = "\n".join(str(error) for error in errors)
        else:
            message = payload.get("status_message") or response.reason_phrase

        return cls(response.status_code, service_code, str(message))


def _load_payload(response: httpx.Response) -> Optional[dict[str, Any]]:
    """Retourne le corps JSON si c'est un objet, None sinon."""
    if not response.content:
        return None
    try:
        payload = json.loads(response.content)
    except ValueError:
        return None
    return payload if isinstance(payload, dict) else None
