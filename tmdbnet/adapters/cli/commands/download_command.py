"""
Commande CLI de telechargement d'images (download).
"""

import asyncio
from pathlib import Path
from typing import Annotated

import httpx
import typer
from rich.status import Status

from tmdbnet.adapters.api.errors import ServiceRequestError
from tmdbnet.adapters.cli.helpers import console, suppress_loguru, with_container


def download(
    file_path: Annotated[
        str, typer.Argument(help="Chemin de l'image renvoye par l'API (ex: /abc.jpg)")
    ],
    output: Annotated[Path, typer.Argument(help="Fichier de destination")],
    size: Annotated[
        str, typer.Option("--size", "-s", help="Taille (w92, w500, original...)")
    ] = "original",
) -> None:
    """Telecharge une image (poster, fond, profil) vers un fichier."""
    asyncio.run(_download_async(file_path, output, size))


@with_container()
async def _download_async(container, file_path: str, output: Path, size: str) -> None:
    """
    Implementation async de la commande download.

    L'image est ecrite dans un fichier temporaire voisin, renomme en
    destination une fois le telechargement termine. Un fichier existant
    n'est remplace qu'en cas de succes.
    """
    storage = container.storage_client()
    output.parent.mkdir(parents=True, exist_ok=True)
    temp_path = output.with_suffix(output.suffix + ".tmp")
    try:
        with suppress_loguru(), temp_path.open("wb") as sink:
            with Status(f"[cyan]Telechargement de {file_path}...", console=console):
                written = await storage.download(file_path, sink, size)
        temp_path.replace(output)
    except ServiceRequestError as e:
        temp_path.unlink(missing_ok=True)
        console.print(f"[red]Echec du telechargement ({e.status_code}):[/red] {e.message}")
        raise typer.Exit(code=1) from e
    except httpx.TransportError as e:
        temp_path.unlink(missing_ok=True)
        console.print(f"[red]Erreur reseau:[/red] {e}")
        raise typer.Exit(code=1) from e
    finally:
        await storage.close()

    console.print(f"[green]{written:,} octets ecrits dans {output}[/green]")
