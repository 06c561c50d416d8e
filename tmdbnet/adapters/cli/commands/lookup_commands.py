"""
Commandes CLI de consultation (search, movie, person, find).
"""

import asyncio
from typing import Annotated, Optional

import typer
from rich.panel import Panel
from rich.status import Status
from rich.table import Table

from tmdbnet.adapters.cli.helpers import (
    console,
    format_year,
    service_session,
    suppress_loguru,
    with_container,
)
from tmdbnet.core.entities import Episode, Movie, Person, Resource, Resources, Season, Show
from tmdbnet.core.value_objects import ExternalSource

# Nombre d'acteurs affiches dans la fiche d'un film
_CAST_PREVIEW = 5


def _describe(resource: Resource) -> tuple[str, str, str]:
    """Type, titre et annee (ou departement) d'une ressource pour l'affichage."""
    if isinstance(resource, Movie):
        return "Film", resource.title or resource.original_title or "?", format_year(
            resource.release_date
        )
    if isinstance(resource, Show):
        return "Serie", resource.name or resource.original_name or "?", format_year(
            resource.first_air_date
        )
    if isinstance(resource, Person):
        return "Personne", resource.name or "?", resource.known_for_department or "-"
    if isinstance(resource, Season):
        return "Saison", resource.name or "?", format_year(resource.air_date)
    if isinstance(resource, Episode):
        return "Episode", resource.name or "?", format_year(resource.air_date)
    return resource.media_type or "?", "?", "-"


def _render_resources(results: Resources) -> Table:
    table = Table(
        title=f"Page {results.page_index}/{results.page_count} "
        f"({results.total_count} resultats)"
    )
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Type")
    table.add_column("Titre", style="bold")
    table.add_column("Annee / Domaine", style="dim")
    for resource in results.results:
        kind, title, detail = _describe(resource)
        table.add_row(str(resource.id), kind, title, detail)
    return table


def _render_movie(movie: Movie) -> Panel:
    lines = [f"[bold]{movie.title or movie.original_title}[/bold] ({format_year(movie.release_date)})"]
    if movie.tag_line:
        lines.append(f"[italic]{movie.tag_line}[/italic]")
    if movie.genres:
        lines.append("Genres : " + ", ".join(g.name or "?" for g in movie.genres))
    if movie.runtime:
        lines.append(f"Duree : {movie.runtime} min")
    lines.append(f"Note : {movie.vote_average:.1f} ({movie.vote_count} votes)")
    if movie.imdb:
        lines.append(f"IMDb : {movie.imdb}")
    if movie.credits and movie.credits.cast:
        names = [c.name or "?" for c in movie.credits.cast[:_CAST_PREVIEW]]
        lines.append("Avec : " + ", ".join(names))
    if movie.overview:
        lines.append("")
        lines.append(movie.overview)
    return Panel("\n".join(lines), title=f"Film {movie.id}", border_style="white")


def _render_person(person: Person) -> Panel:
    lines = [f"[bold]{person.name}[/bold]"]
    if person.known_for_department:
        lines.append(f"Domaine : {person.known_for_department}")
    if person.birth_day:
        born = f"Naissance : {person.birth_day}"
        if person.birth_place:
            born += f" ({person.birth_place})"
        lines.append(born)
    if person.death_day:
        lines.append(f"Deces : {person.death_day}")
    if person.biography:
        lines.append("")
        lines.append(person.biography)
    return Panel("\n".join(lines), title=f"Personne {person.id}", border_style="white")


def search(
    query: Annotated[str, typer.Argument(help="Texte a rechercher")],
    language: Annotated[
        Optional[str],
        typer.Option("--language", "-l", help="Code langue (ex: fr)"),
    ] = None,
    page: Annotated[int, typer.Option("--page", "-p", min=1, help="Numero de page")] = 1,
) -> None:
    """Recherche films, series et personnes en une seule requete."""
    asyncio.run(_search_async(query, language, page))


@with_container()
async def _search_async(container, query: str, language: Optional[str], page: int) -> None:
    """Implementation async de la commande search."""
    async with service_session(container) as (client, config):
        with suppress_loguru():
            with Status("[cyan]Recherche...", console=console):
                results = await client.search(
                    query, language=language or config.language, page=page
                )

    if not results.results:
        console.print("[yellow]Aucun resultat.[/yellow]")
        return
    console.print(_render_resources(results))


def movie(
    movie_id: Annotated[int, typer.Argument(help="Identifiant du film")],
    language: Annotated[
        Optional[str],
        typer.Option("--language", "-l", help="Code langue (ex: fr)"),
    ] = None,
    full: Annotated[
        bool,
        typer.Option("--full", "-f", help="Inclut credits, images, videos..."),
    ] = False,
) -> None:
    """Affiche la fiche d'un film."""
    asyncio.run(_movie_async(movie_id, language, full))


@with_container()
async def _movie_async(container, movie_id: int, language: Optional[str], full: bool) -> None:
    """Implementation async de la commande movie."""
    async with service_session(container) as (client, config):
        with suppress_loguru():
            result = await client.movies.get(
                movie_id, language=language or config.language, append_all=full
            )
    console.print(_render_movie(result))


def person(
    person_id: Annotated[int, typer.Argument(help="Identifiant de la personne")],
) -> None:
    """Affiche la fiche d'une personne."""
    asyncio.run(_person_async(person_id))


@with_container()
async def _person_async(container, person_id: int) -> None:
    async with service_session(container) as (client, _config):
        with suppress_loguru():
            result = await client.people.get(person_id)
    console.print(_render_person(result))


def find(
    external_id: Annotated[str, typer.Argument(help="Identifiant externe (ex: tt0078748)")],
    source: Annotated[
        str,
        typer.Option(
            "--source", "-s",
            help="Source: " + ", ".join(s.value for s in ExternalSource),
        ),
    ] = ExternalSource.IMDB.value,
) -> None:
    """Recherche une ressource par identifiant externe."""
    asyncio.run(_find_async(external_id, source))


@with_container()
async def _find_async(container, external_id: str, source: str) -> None:
    """Implementation async de la commande find."""
    async with service_session(container) as (client, _config):
        try:
            with suppress_loguru():
                result = await client.find(external_id, source)
        except ValueError as e:
            console.print(f"[red]Argument invalide:[/red] {e}")
            raise typer.Exit(code=1) from e

    if result is None:
        console.print(f"[yellow]Aucune ressource pour {external_id} ({source}).[/yellow]")
        return
    kind, title, detail = _describe(result)
    console.print(f"[bold]{kind}[/bold] {result.id} : {title} [dim]({detail})[/dim]")
