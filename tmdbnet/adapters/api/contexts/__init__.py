"""
Facades par famille de ressources.

Chaque facade construit des Command et les confie a un IRequestExecutor.
"""

from tmdbnet.adapters.api.contexts.base import ResourceContext
from tmdbnet.adapters.api.contexts.collections import CollectionsContext
from tmdbnet.adapters.api.contexts.companies import CompaniesContext
from tmdbnet.adapters.api.contexts.genres import GenresContext
from tmdbnet.adapters.api.contexts.lists import ListsContext
from tmdbnet.adapters.api.contexts.movies import MoviesContext
from tmdbnet.adapters.api.contexts.people import PeopleContext
from tmdbnet.adapters.api.contexts.reviews import ReviewsContext
from tmdbnet.adapters.api.contexts.shows import ShowsContext
from tmdbnet.adapters.api.contexts.system import SystemContext

__all__ = [
    "CollectionsContext",
    "CompaniesContext",
    "GenresContext",
    "ListsContext",
    "MoviesContext",
    "PeopleContext",
    "ResourceContext",
    "ReviewsContext",
    "ShowsContext",
    "SystemContext",
]
