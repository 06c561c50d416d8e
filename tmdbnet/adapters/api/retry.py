"""
Mecanisme de retry pilote par les en-tetes de limitation du service.

Deux signaux de limitation sont absorbes de facon transparente:
- 429 Too Many Requests : attente de Retry-After + 1s, puis meme requete
- succes avec X-RateLimit-Remaining a 0 : attente jusqu'a
  X-RateLimit-Reset + 1s avant de rendre la reponse deja recue

Les erreurs de transport et les autres statuts d'echec ne sont jamais
relances ici. L'appelant recoit toujours une reponse unique, jamais un 429
intermediaire.

Usage:
    # Avec le decorateur
    @with_retry(max_attempts=10)
    async def my_api_call():
        ...

    # Avec la fonction helper
    response = await request_with_retry(client, "GET", url)
"""

import asyncio
import math
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Awaitable, Callable, Optional

import httpx
from loguru import logger
from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    stop_never,
)

from tmdbnet.adapters.api.errors import ServiceRequestError
from tmdbnet.logging_config import THROTTLE_EVENT

SAFETY_MARGIN_SECONDS = 1.0
RATE_LIMIT_REMAINING_HEADER = "X-RateLimit-Remaining"
RATE_LIMIT_RESET_HEADER = "X-RateLimit-Reset"

Sleep = Callable[[float], Awaitable[None]]
Clock = Callable[[], float]


class RateLimitError(ServiceRequestError):
    """
    Exception levee quand l'API retourne 429 Too Many Requests.

    Interne a la boucle de retry; ne remonte a l'appelant que si le
    plafond de tentatives est atteint.

    Attributes:
        retry_after: Nombre de secondes a attendre (header Retry-After),
                     0 si absent ou illisible.
    """

    def __init__(
        self,
        status_code: int,
        service_code: int,
        message: str,
        retry_after: float = 0.0,
    ) -> None:
        super().__init__(status_code, service_code, message)
        self.retry_after = retry_after

    @classmethod
    def from_response(cls, response: httpx.Response) -> "RateLimitError":
        error = super().from_response(response)
        error.retry_after = parse_retry_after(response.headers.get("Retry-After"))
        return error


@dataclass(frozen=True)
class RateLimitSignal:
    """
    Vue en lecture seule sur les en-tetes de quota d'une reponse.

    Attributes:
        remaining: Nombre d'appels restants dans la fenetre, None si absent
        reset: Fin de la fenetre (epoch Unix en secondes), None si absent
    """

    remaining: Optional[int] = None
    reset: Optional[int] = None

    @classmethod
    def from_headers(cls, headers: httpx.Headers) -> "RateLimitSignal":
        return cls(
            remaining=_int_header(headers, RATE_LIMIT_REMAINING_HEADER),
            reset=_int_header(headers, RATE_LIMIT_RESET_HEADER),
        )

    @property
    def exhausted(self) -> bool:
        """Vrai si le quota est epuise et que la fin de fenetre est connue."""
        return self.remaining == 0 and self.reset is not None

    def delay_until_reset(self, now: float) -> float:
        """Delai jusqu'a une seconde apres la fin de fenetre, jamais negatif."""
        if self.reset is None:
            return 0.0
        return max(0.0, self.reset + SAFETY_MARGIN_SECONDS - now)


def _int_header(headers: httpx.Headers, name: str) -> Optional[int]:
    value = headers.get(name)
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


def parse_retry_after(value: Optional[str], now: Optional[datetime] = None) -> float:
    """
    Convertit un header Retry-After en nombre de secondes.

    Accepte un delai en secondes ou une date HTTP.

    Args:
        value: Valeur brute du header
        now: Instant de reference pour une date HTTP (defaut: maintenant, UTC)

    Returns:
        Secondes a attendre, 0 si absent ou illisible
    """
    if not value:
        return 0.0
    value = value.strip()
    try:
        seconds = float(value)
    except ValueError:
        pass
    else:
        # inf et nan sont traites comme illisibles
        return max(0.0, seconds) if math.isfinite(seconds) else 0.0
    try:
        retry_at = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return 0.0
    if retry_at.tzinfo is None:
        retry_at = retry_at.replace(tzinfo=timezone.utc)
    now = now or datetime.now(timezone.utc)
    return max(0.0, (retry_at - now).total_seconds())


def wait_retry_after(retry_state: RetryCallState) -> float:
    """Strategie d'attente tenacity: Retry-After du dernier 429 + marge."""
    error = retry_state.outcome.exception() if retry_state.outcome else None
    retry_after = getattr(error, "retry_after", 0.0)
    return retry_after + SAFETY_MARGIN_SECONDS


def _log_throttle(retry_state: RetryCallState) -> None:
    logger.bind(event=THROTTLE_EVENT).warning(
        "Requete limitee (429), nouvelle tentative dans {delay:.1f}s (tentative {attempt})",
        delay=retry_state.next_action.sleep if retry_state.next_action else 0.0,
        attempt=retry_state.attempt_number,
    )


def with_retry(max_attempts: Optional[int] = None, sleep: Sleep = asyncio.sleep):
    """
    Decorateur pour relancer sur RateLimitError selon le header Retry-After.

    Args:
        max_attempts: Nombre maximum de tentatives (defaut: None, illimite)
        sleep: Coroutine d'attente (defaut: asyncio.sleep, annulable)

    Returns:
        Decorateur a appliquer sur une fonction async

    Example:
        @with_retry(max_attempts=3)
        async def fetch_data():
            # Relance jusqu'a 3 fois si RateLimitError est levee
            ...
    """
    return retry(
        retry=retry_if_exception_type(RateLimitError),
        wait=wait_retry_after,
        stop=stop_after_attempt(max_attempts) if max_attempts else stop_never,
        sleep=sleep,
        before_sleep=_log_throttle,
        reraise=True,
    )


async def request_with_retry(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    max_attempts: Optional[int] = None,
    *,
    sleep: Sleep = asyncio.sleep,
    clock: Clock = time.time,
    **kwargs,
) -> httpx.Response:
    """
    Execute une requete HTTP en absorbant les signaux de limitation.

    Les 429 sont relances apres Retry-After + 1s. Une reponse reussie
    dont le quota restant vaut 0 est rendue apres une pause se terminant
    une seconde apres X-RateLimit-Reset, sans nouvel appel. Les autres
    reponses (succes ou erreur) sont rendues immediatement.

    Args:
        client: Client httpx async a utiliser
        method: Methode HTTP (GET, POST, etc.)
        url: URL ou cible relative a appeler
        max_attempts: Plafond de tentatives sur 429 (defaut: illimite)
        sleep: Coroutine d'attente, annulable
        clock: Horloge (epoch Unix en secondes)
        **kwargs: Arguments supplementaires passes a client.request()

    Returns:
        httpx.Response terminale (succes ou erreur non-429)

    Raises:
        RateLimitError: Si 429 apres epuisement du plafond de tentatives
        httpx.TransportError: Erreurs reseau, propagees sans retry
        asyncio.CancelledError: Si l'appel est annule pendant un echange ou une attente
    """

    @with_retry(max_attempts=max_attempts, sleep=sleep)
    async def _do_request() -> httpx.Response:
        response = await client.request(method, url, **kwargs)
        if response.status_code == 429:
            raise RateLimitError.from_response(response)
        return response

    response = await _do_request()

    signal = RateLimitSignal.from_headers(response.headers)
    if response.is_success and signal.exhausted:
        delay = signal.delay_until_reset(clock())
        logger.bind(event=THROTTLE_EVENT).debug(
            "Quota epuise, pause de {delay:.1f}s avant de rendre la reponse",
            delay=delay,
        )
        await sleep(delay)

    return response
