"""
Client du service de metadonnees films/series.

Ce module fournit:
- ServiceClient: coeur d'execution et facades par ressource
- StorageClient: telechargement d'images depuis le CDN

Infrastructure partagee:
- ServiceRequestError: erreur normalisee renvoyee par le service
- RateLimitError: 429 remonte apres epuisement du plafond de tentatives
- with_retry / request_with_retry: retry pilote par Retry-After et X-RateLimit-*
- ResourceResolver: choix de la forme concrete d'apres media_type

Les clients implementent IRequestExecutor et IImageStorage definis dans
core/ports/api_clients.py.
"""

from tmdbnet.adapters.api.errors import ServiceRequestError
from tmdbnet.adapters.api.resolver import ResourceResolver
from tmdbnet.adapters.api.retry import RateLimitError, request_with_retry, with_retry
from tmdbnet.adapters.api.service_client import ServiceClient
from tmdbnet.adapters.api.storage_client import StorageClient

__all__ = [
    "RateLimitError",
    "ResourceResolver",
    "ServiceClient",
    "ServiceRequestError",
    "StorageClient",
    "request_with_retry",
    "with_retry",
]
