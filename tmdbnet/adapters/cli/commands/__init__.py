"""Sous-package CLI commands - re-exporte les commandes publiques."""

from tmdbnet.adapters.cli.commands.download_command import download
from tmdbnet.adapters.cli.commands.lookup_commands import (
    find,
    movie,
    person,
    search,
)

__all__ = [
    "download",
    "find",
    "movie",
    "person",
    "search",
]
