# wikipedia_client/src/wikipedia_client/core/network_utils.py
"""
Utilitaires réseau: capacité HTTP enfichable et implémentation requests.

Le client Wikipedia ne dépend que du protocole HttpClient; n'importe quel
objet qui sait faire un GET avec des paramètres et renvoyer le corps texte
peut être utilisé (utile pour les tests ou un transport asynchrone).
"""

import logging
import random
import time
from functools import wraps
from typing import Callable, List, Optional, Protocol, Tuple

import requests

from ..config import (
    API_TIMEOUT,
    INITIAL_BACKOFF,
    JITTER,
    MAX_BACKOFF,
    MAX_RETRIES,
)

logger = logging.getLogger(__name__)

Params = List[Tuple[str, str]]


class HttpClient(Protocol):
    """Capacité HTTP consommée par le client Wikipedia."""

    def user_agent(self, agent: str) -> None:  # pragma: no cover
        """Définit le User-Agent envoyé avec chaque requête."""
        ...

    def get(self, base_url: str, params: Params) -> str:  # pragma: no cover
        """
        Effectue un GET et retourne le corps de la réponse.

        Raises:
            requests.RequestException ou OSError: si l'appel n'a pas pu
                aboutir (convertis en HttpError par Wikipedia.query).
                Toute autre exception est propagée telle quelle.
        """
        ...


def retry_backoff(
    max_retries: int = MAX_RETRIES,
    initial_backoff: float = INITIAL_BACKOFF,
    max_backoff: float = MAX_BACKOFF,
    jitter: float = JITTER,
    allowed_exceptions: tuple = (requests.RequestException,),
):
    """Decorator for retrying functions with exponential backoff + jitter."""

    def deco(func: Callable):
        @wraps(func)
        def wrapper(*args, **kwargs):
            backoff = initial_backoff
            for attempt in range(1, max_retries + 1):
                try:
                    logger.debug("Attempt %d for %s", attempt, func.__name__)
                    return func(*args, **kwargs)
                except allowed_exceptions as e:
                    if attempt >= max_retries:
                        logger.debug("Giving up on %s after %d attempt(s)", func.__name__, attempt)
                        raise
                    sleep_time = backoff * (1 + random.uniform(-jitter, jitter))
                    sleep_time = max(0.0, min(max_backoff, sleep_time))
                    logger.warning(
                        "Error on attempt %d for %s: %s -- backing off %.2fs",
                        attempt,
                        func.__name__,
                        e,
                        sleep_time,
                    )
                    time.sleep(sleep_time)
                    backoff = min(max_backoff, backoff * 2)

        return wrapper

    return deco


class RequestsHttpClient:
    """Implémentation par défaut de HttpClient basée sur requests.Session."""

    def __init__(
        self,
        timeout: float = API_TIMEOUT,
        max_retries: int = MAX_RETRIES,
        session: Optional[requests.Session] = None,
    ):
        self.timeout = timeout
        self.max_retries = max(1, max_retries)
        self.session = session or requests.Session()
        self._get_with_retry = retry_backoff(max_retries=self.max_retries)(self._get)

    def user_agent(self, agent: str) -> None:
        self.session.headers.update({"User-Agent": agent})

    def get(self, base_url: str, params: Params) -> str:
        """Effectue une requête HTTP GET (retry uniquement si max_retries > 1)."""
        return self._get_with_retry(base_url, params)

    def _get(self, base_url: str, params: Params) -> str:
        logger.debug("HTTP GET %s params=%s", base_url, params)
        r = self.session.get(base_url, params=params, timeout=self.timeout)
        r.raise_for_status()
        return r.text
