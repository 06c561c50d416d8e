"""
Container d'injection de dependances via dependency-injector.

Fournit le client du service et le client d'images construits depuis
la configuration, pour la CLI ou une application hote.
"""

from dependency_injector import containers, providers

from .adapters.api.resolver import ResourceResolver
from .adapters.api.service_client import ServiceClient
from .adapters.api.storage_client import StorageClient
from .config import Settings


class Container(containers.DeclarativeContainer):
    """Container DI.

    Utilisation :
        container = Container()
        client = container.service_client()
        try:
            movie = await client.movies.get(550)
        finally:
            await client.close()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Table media_type -> modele, partagee (sans etat)
    resource_resolver = providers.Singleton(ResourceResolver)

    # Clients - Factory: chaque appelant possede et ferme son client HTTP
    service_client = providers.Factory(
        ServiceClient,
        api_key=config.provided.api_key,
        base_url=config.provided.base_url,
        timeout=config.provided.request_timeout,
        max_attempts=config.provided.max_throttle_attempts,
        resolver=resource_resolver,
    )

    storage_client = providers.Factory(
        StorageClient,
        base_url=config.provided.image_base_url,
        timeout=config.provided.request_timeout,
    )
