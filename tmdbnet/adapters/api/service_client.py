"""
Client principal du service de metadonnees films/series (API v3).

Possede le client HTTP, l'interpreteur de reponses et les facades par
ressource. Toutes les requetes passent par get() ou send(), qui
appliquent le mecanisme de retry sur limitation puis interpretent la
reponse terminale.

Usage:
    async with ServiceClient(api_key="your_key") as client:
        results = await client.search("Alien")
        movie = await client.movies.get(348, language="fr")
"""

import asyncio
from typing import Any, Optional, TypeVar, Union
from urllib.parse import quote

import httpx
from loguru import logger

from tmdbnet.adapters.api.contexts import (
    CollectionsContext,
    CompaniesContext,
    GenresContext,
    ListsContext,
    MoviesContext,
    PeopleContext,
    ReviewsContext,
    ShowsContext,
    SystemContext,
)
from tmdbnet.adapters.api.errors import ServiceRequestError
from tmdbnet.adapters.api.interpreter import ResponseInterpreter
from tmdbnet.adapters.api.resolver import ResourceResolver
from tmdbnet.adapters.api.retry import Sleep, request_with_retry
from tmdbnet.adapters.api.transport import build_async_client
from tmdbnet.adapters.api.uri_builder import build_request_target
from tmdbnet.core.entities import AuthenticationResult, FindResult, Resource, Resources
from tmdbnet.core.ports import IRequestExecutor
from tmdbnet.core.value_objects import Command, ExternalSource

T = TypeVar("T")


class ServiceClient(IRequestExecutor):
    """
    Client API asynchrone du service.

    Implemente IRequestExecutor avec:
    - Retry transparent sur 429 (Retry-After + 1s)
    - Pause sur quota epuise (X-RateLimit-Reset + 1s)
    - Normalisation des erreurs en ServiceRequestError
    - Resolution des ressources polymorphes par media_type

    Attributes:
        BASE_URL: URL de base de l'API v3
        movies, shows, people, collections, companies, genres, lists,
        reviews, settings: Facades par famille de ressources
    """

    BASE_URL = "https://api.themoviedb.org/3"

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = BASE_URL,
        timeout: float = 30.0,
        max_attempts: Optional[int] = None,
        resolver: Optional[ResourceResolver] = None,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        """
        Initialise le client.

        Args:
            api_key: Cle API v3, ajoutee a chaque requete
            base_url: URL de base du service
            timeout: Timeout HTTP en secondes
            max_attempts: Plafond de tentatives sur 429 (None: illimite)
            resolver: Resolveur de ressources polymorphes
            sleep: Coroutine d'attente utilisee pour les pauses de limitation
        """
        self._api_key = api_key
        self._base_url = base_url
        self._timeout = timeout
        self._max_attempts = max_attempts
        self._sleep = sleep
        self._interpreter = ResponseInterpreter(resolver)
        self._client: Optional[httpx.AsyncClient] = None

        self.movies = MoviesContext(self)
        self.shows = ShowsContext(self)
        self.people = PeopleContext(self)
        self.collections = CollectionsContext(self)
        self.companies = CompaniesContext(self)
        self.genres = GenresContext(self)
        self.lists = ListsContext(self)
        self.reviews = ReviewsContext(self)
        self.settings = SystemContext(self)

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            self._client = build_async_client(self._base_url, timeout=self._timeout)
        return self._client

    async def get(self, command: Command, result_type: type[T]) -> T:
        return await self.send("GET", command, result_type)

    async def send(
        self,
        method: str,
        command: Command,
        result_type: type[T],
        body: Optional[dict[str, Any]] = None,
    ) -> T:
        """
        Execute une Command et interprete la reponse terminale.

        Args:
            method: Methode HTTP
            command: Commande a executer
            result_type: Type attendu de la reponse
            body: Corps JSON optionnel

        Returns:
            Valeur de type result_type

        Raises:
            ServiceRequestError: Si le service renvoie un statut d'echec
        """
        target = build_request_target(command, self._api_key)
        kwargs: dict[str, Any] = {}
        if body is not None:
            kwargs["json"] = body

        response = await request_with_retry(
            self._get_client(),
            method,
            target,
            self._max_attempts,
            sleep=self._sleep,
            **kwargs,
        )
        try:
            return self._interpreter.read(response, result_type)
        except ServiceRequestError as e:
            # Le chemin seul: la query string contient la cle API
            logger.warning(
                "{method} {path} en echec: {status} ({code}) {message}",
                method=method,
                path=command.path,
                status=e.status_code,
                code=e.service_code,
                message=e.message,
            )
            raise

    async def login(self, username: str, password: str) -> Optional[str]:
        """
        Genere un jeton de requete et le valide avec des identifiants.

        Returns:
            Jeton de requete valide, a echanger contre une session
        """
        created = await self.get(Command("authentication/token/new"), AuthenticationResult)
        parameters = {
            "request_token": created.token,
            "username": username,
            "password": password,
        }
        validated = await self.get(
            Command("authentication/token/validate_with_login", parameters),
            AuthenticationResult,
        )
        return validated.token

    async def get_session(self, token: Optional[str] = None) -> Optional[str]:
        """
        Ouvre une session utilisateur, ou une session invitee sans jeton.

        Une session est requise par toutes les operations d'ecriture.
        """
        if token is None:
            result = await self.get(
                Command("authentication/guest_session/new"), AuthenticationResult
            )
            return result.guest
        result = await self.get(
            Command("authentication/session/new", {"request_token": token}),
            AuthenticationResult,
        )
        return result.session

    async def find(
        self,
        external_id: str,
        external_source: Union[ExternalSource, str],
    ) -> Optional[Resource]:
        """
        Recherche un objet par identifiant externe (IMDb, TVDB...).

        Args:
            external_id: Identifiant externe (ex: "tt0078748")
            external_source: Source de l'identifiant (ex: "imdb_id")

        Returns:
            Premier resultat parmi films, personnes, series, saisons,
            episodes, ou None si rien n'est trouve

        Raises:
            ValueError: Identifiant vide ou source non supportee
        """
        if not external_id or not external_id.strip():
            raise ValueError("external_id must not be blank")
        try:
            source = ExternalSource(external_source)
        except ValueError:
            raise ValueError(
                f"Unsupported external source: {external_source!r}"
            ) from None

        command = Command(
            f"find/{quote(external_id.strip(), safe='')}",
            {"external_source": source.value},
        )
        result = await self.get(command, FindResult)
        return result.first()

    async def search(
        self,
        query: str,
        *,
        language: Optional[str] = None,
        include_adult: bool = False,
        page: int = 1,
    ) -> Resources:
        """Recherche films, series et personnes en une seule requete."""
        parameters = {
            "query": query,
            "page": page,
            "include_adult": include_adult,
            "language": language,
        }
        return await self.get(Command("search/multi", parameters), Resources)

    async def close(self) -> None:
        """
        Ferme le client HTTP.

        Doit etre appele a la fin de l'utilisation pour liberer
        les ressources reseau.
        """
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "ServiceClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
