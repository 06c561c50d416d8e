"""
Construction du client HTTP partage par les appels au service.

Un seul httpx.AsyncClient par ServiceClient: son pool de connexions est
la seule ressource partagee entre appels concurrents.
"""

from http.cookiejar import CookieJar, DefaultCookiePolicy
from typing import Optional

import httpx

DEFAULT_HEADERS = {"Accept": "application/json"}


def _cookieless_jar() -> CookieJar:
    """Jar dont la politique refuse tous les domaines."""
    return CookieJar(policy=DefaultCookiePolicy(allowed_domains=[]))


def build_async_client(
    base_url: str,
    *,
    timeout: float,
    headers: Optional[dict[str, str]] = None,
) -> httpx.AsyncClient:
    """
    Cree un httpx.AsyncClient configure pour le service.

    Redirections desactivees, cookies refuses, decompression gzip
    assuree par httpx.

    Args:
        base_url: URL de base contre laquelle les cibles relatives sont resolues
        timeout: Timeout en secondes
        headers: En-tetes supplementaires

    Returns:
        Client pret a l'emploi, a fermer par l'appelant
    """
    merged = dict(DEFAULT_HEADERS)
    if headers:
        merged.update(headers)
    return httpx.AsyncClient(
        base_url=base_url,
        headers=merged,
        timeout=httpx.Timeout(timeout),
        follow_redirects=False,
        cookies=_cookieless_jar(),
    )
