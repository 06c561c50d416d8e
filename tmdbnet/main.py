"""
Point d'entrée CLI de tmdbnet.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import download, find, movie, person, search
from .config import Settings
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="tmdbnet",
    help="Client en ligne de commande de la base de films et séries TMDb",
)
container = Container()

app.command()(search)
app.command()(movie)
app.command()(person)
app.command()(find)
app.command()(download)


def get_config() -> Settings:
    """Récupère les paramètres depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration tmdbnet")
    typer.echo(f"API : {config.base_url}")
    typer.echo(f"Images : {config.image_base_url}")
    typer.echo(f"Clé API : {'configurée' if config.api_enabled else 'absente'}")
    typer.echo(f"Langue : {config.language or 'défaut du service'}")
    typer.echo(f"Timeout : {config.request_timeout}s")
    attempts = config.max_throttle_attempts
    typer.echo(f"Tentatives sur 429 : {attempts if attempts else 'illimitées'}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"tmdbnet v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
        throttle_log_file=settings.throttle_log_file,
    )

    logger.debug("Démarrage de tmdbnet", version=__version__)

    app()


if __name__ == "__main__":
    main()
