# wikipedia_client/src/wikipedia_client/core/wikipedia.py
"""
Client de l'API "action=query" de Wikipedia.

Responsabilité: porter la configuration (URL templatée par la langue,
limites de résultats), exécuter une requête logique par appel et exposer
les recherches qui renvoient des listes de titres.
"""

import logging
import os
from decimal import Decimal
from typing import Any, Iterable, List, Optional, Tuple

import requests

from ..config import (
    DEFAULT_LANGUAGE,
    DEFAULT_POST_LANGUAGE_URL,
    DEFAULT_PRE_LANGUAGE_URL,
    DEFAULT_USER_AGENT,
    IMAGES_RESULTS,
    LANGUAGE_URL_MARKER,
    LATITUDE_RANGE,
    LONGITUDE_RANGE,
    MAX_IMAGE_PAGES,
    MAX_REDIRECTS,
    RADIUS_RANGE,
    SEARCH_RESULTS,
    USER_AGENT_ENV_VAR,
)
from .errors import HttpError, InvalidParameter
from .json_path import parse_document
from .network_utils import HttpClient, RequestsHttpClient
from .page import Page
from .results import extract_titles

logger = logging.getLogger(__name__)


def _format_coordinate(value: float) -> str:
    """Notation décimale fixe, sans exposant ni zéros finaux (1e-05 -> 0.00001)."""
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


class Wikipedia:
    """
    Configuration du client et exécuteur de requêtes.

    Tous les attributs sont modifiables à tout moment: l'URL de base est
    recalculée à chaque requête.
    """

    def __init__(self, client: Optional[HttpClient] = None):
        if client is None:
            client = RequestsHttpClient()
            client.user_agent(os.getenv(USER_AGENT_ENV_VAR) or DEFAULT_USER_AGENT)
        self.client = client
        self.pre_language_url = DEFAULT_PRE_LANGUAGE_URL
        self.language = DEFAULT_LANGUAGE
        self.post_language_url = DEFAULT_POST_LANGUAGE_URL
        self.search_results = SEARCH_RESULTS
        self.images_results = IMAGES_RESULTS
        self.max_redirects = MAX_REDIRECTS
        self.max_image_pages = MAX_IMAGE_PAGES

    def base_url(self) -> str:
        return f"{self.pre_language_url}{self.language}{self.post_language_url}"

    def set_base_url(self, base_url: str) -> None:
        """
        Découpe un modèle d'URL autour du marqueur {language}.

        Sans marqueur, le modèle entier devient le préfixe et la langue
        est vidée; avec marqueur, la langue courante est conservée.
        """
        index = base_url.find(LANGUAGE_URL_MARKER)
        if index == -1:
            self.pre_language_url = base_url
            self.language = ""
            self.post_language_url = ""
            return
        self.pre_language_url = base_url[:index]
        self.post_language_url = base_url[index + len(LANGUAGE_URL_MARKER):]

    def query(self, params: Iterable[Tuple[str, str]]) -> Any:
        """
        Exécute une requête et retourne le document JSON parsé.

        Args:
            params: Paramètres propres à l'opération (format et action
                sont ajoutés ici)

        Raises:
            HttpError: échec du transport
            JsonError: corps de réponse non JSON
        """
        args = list(params)
        args.append(("format", "json"))
        args.append(("action", "query"))
        url = self.base_url()
        logger.debug("Wikipedia query %s params=%s", url, args)
        try:
            body = self.client.get(url, args)
        except (requests.RequestException, OSError) as e:
            logger.debug("Transport failure for %s: %s", url, e)
            raise HttpError(str(e)) from e
        return parse_document(body)

    def search(self, query: str) -> List[str]:
        """Recherche plein texte; retourne les titres trouvés."""
        data = self.query([
            ("list", "search"),
            ("srprop", ""),
            ("srlimit", str(self.search_results)),
            ("srsearch", query),
        ])
        return extract_titles(data, "search")

    def geosearch(self, latitude: float, longitude: float, radius: int) -> List[str]:
        """
        Recherche les pages situées autour d'un point.

        Args:
            latitude: Entre -90 et 90
            longitude: Entre -180 et 180
            radius: Rayon en mètres, entre 10 et 10000

        Raises:
            InvalidParameter: avant toute requête si un argument est hors bornes
        """
        if not LATITUDE_RANGE[0] <= latitude <= LATITUDE_RANGE[1]:
            raise InvalidParameter("latitude", latitude)
        if not LONGITUDE_RANGE[0] <= longitude <= LONGITUDE_RANGE[1]:
            raise InvalidParameter("longitude", longitude)
        if not RADIUS_RANGE[0] <= radius <= RADIUS_RANGE[1]:
            raise InvalidParameter("radius", radius)

        data = self.query([
            ("list", "geosearch"),
            ("gsradius", str(radius)),
            ("gscoord", f"{_format_coordinate(latitude)}|{_format_coordinate(longitude)}"),
            ("gslimit", str(self.search_results)),
        ])
        return extract_titles(data, "geosearch")

    def random_count(self, count: int) -> List[str]:
        data = self.query([
            ("list", "random"),
            ("rnnamespace", "0"),
            ("rnlimit", str(count)),
        ])
        return extract_titles(data, "random")

    def random(self) -> Optional[str]:
        """Retourne le titre d'une page au hasard, ou None."""
        titles = self.random_count(1)
        return titles[0] if titles else None

    def page_from_title(self, title: str) -> Page:
        return Page.from_title(self, title)

    def page_from_pageid(self, pageid: str) -> Page:
        return Page.from_pageid(self, pageid)
