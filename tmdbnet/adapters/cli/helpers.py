"""
Utilitaires partages pour les commandes CLI de tmdbnet.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container initialise
- require_api_key : arret propre si la cle API n'est pas configuree
- service_session : client du service ouvert, erreurs converties en code 1
- format_year : annee d'une date renvoyee par le service
"""

from contextlib import asynccontextmanager, contextmanager
from datetime import date
from functools import wraps
from typing import Optional

import typer
from loguru import logger as loguru_logger
from rich.console import Console

from tmdbnet.adapters.api.errors import ServiceRequestError
from tmdbnet.config import Settings
from tmdbnet.container import Container

console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("tmdbnet")
    try:
        yield
    finally:
        loguru_logger.enable("tmdbnet")


def with_container():
    """
    Decorateur qui injecte un container initialise en premier argument.

    Usage:
        @with_container()
        async def my_command(container, ...):
            config = container.config()
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            container = Container()
            return await func(container, *args, **kwargs)
        return wrapper
    return decorator


def require_api_key(config: Settings) -> None:
    """Interrompt la commande (code 1) si aucune cle API n'est configuree."""
    if not config.api_enabled:
        console.print(
            "[red]Cle API absente.[/red] Definissez TMDBNET_API_KEY "
            "(variable d'environnement ou fichier .env)."
        )
        raise typer.Exit(code=1)


def format_year(value: Optional[date]) -> str:
    """Annee d'une date, "-" si absente."""
    return str(value.year) if value else "-"


@asynccontextmanager
async def service_session(container):
    """
    Ouvre un client du service pour la duree d'une commande.

    Verifie la cle API, ferme le client en sortie et convertit une
    ServiceRequestError en message d'erreur et code de sortie 1.

    Usage:
        async with service_session(container) as (client, config):
            movie = await client.movies.get(550)
    """
    config = container.config()
    require_api_key(config)
    client = container.service_client()
    try:
        yield client, config
    except ServiceRequestError as e:
        console.print(
            f"[red]Erreur du service ({e.status_code}, code {e.service_code}):[/red] {e.message}"
        )
        raise typer.Exit(code=1) from e
    finally:
        await client.close()
