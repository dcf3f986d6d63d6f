# wikipedia_client/src/wikipedia_client/core/page.py
"""
Résolution d'une page Wikipedia (par titre ou par pageid).

Responsabilité unique: construire les paramètres d'identification, exécuter
les requêtes de contenu (texte, résumé, HTML, coordonnées, images) et suivre
les redirections signalées par le serveur.
"""

import logging
from typing import TYPE_CHECKING, Any, Callable, List, Optional, Tuple, TypeVar

from .continuation import ImagesIter
from .errors import JsonPathError, RedirectError
from .json_path import extract, find
from .models import PageIdentifier

if TYPE_CHECKING:
    from .wikipedia import Wikipedia

logger = logging.getLogger(__name__)

T = TypeVar("T")

CONTENT_PARAMS = [
    ("prop", "extracts|revisions"),
    ("explaintext", ""),
    ("rvprop", "ids"),
    ("redirects", ""),
]

SUMMARY_PARAMS = [
    ("prop", "extracts"),
    ("explaintext", ""),
    ("exintro", ""),
    ("redirects", ""),
]

HTML_PARAMS = [
    ("prop", "revisions"),
    ("rvprop", "content"),
    ("rvlimit", "1"),
    ("rvparse", ""),
    ("redirects", ""),
]

COORDINATES_PARAMS = [
    ("prop", "coordinates"),
    ("colimit", "max"),
    ("redirects", ""),
]


def _redirect_target(data: Any) -> Optional[str]:
    return find(data, "query", "redirects", 0, "to", expected=str)


def _first_page_id(data: Any) -> str:
    """Clé de la première page de query.pages (la requête vise une seule page)."""
    pages = extract(data, "query", "pages", expected=dict)
    for pageid in pages:
        return pageid
    raise JsonPathError(("query", "pages"))


class Page:
    """
    Poignée vers une page: référence (non possédée) vers le client Wikipedia
    et identifiant de la page. Aucun état réseau: chaque méthode fait un
    aller-retour complet.
    """

    def __init__(self, wikipedia: "Wikipedia", identifier: PageIdentifier):
        self.wikipedia = wikipedia
        self.identifier = identifier

    @classmethod
    def from_title(cls, wikipedia: "Wikipedia", title: str) -> "Page":
        return cls(wikipedia, PageIdentifier.from_title(title))

    @classmethod
    def from_pageid(cls, wikipedia: "Wikipedia", pageid: str) -> "Page":
        return cls(wikipedia, PageIdentifier.from_pageid(pageid))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Page):
            return NotImplemented
        return self.identifier == other.identifier

    def __hash__(self) -> int:
        return hash(self.identifier)

    def __repr__(self) -> str:
        kind, value = self.identifier.query_param()
        return f"Page({kind}={value!r})"

    def _query(self, params: List[Tuple[str, str]]) -> Any:
        return self.wikipedia.query(params + [self.identifier.query_param()])

    def _resolve(self, params: List[Tuple[str, str]], parse: Callable[[Any], T]) -> T:
        """
        Exécute la requête puis suit les redirections, chaque saut étant
        refait depuis zéro sur une nouvelle Page adressée par titre.

        Raises:
            RedirectError: au-delà de wikipedia.max_redirects sauts
        """
        page = self
        hops = 0
        while True:
            data = page._query(params)
            target = _redirect_target(data)
            if target is None:
                return parse(data)
            if hops >= self.wikipedia.max_redirects:
                raise RedirectError(target, hops + 1)
            logger.info("Following redirect %r -> %r", page.identifier.value, target)
            page = Page.from_title(self.wikipedia, target)
            hops += 1

    def get_content(self) -> str:
        """Texte brut complet de la page."""
        return self._resolve(CONTENT_PARAMS, _parse_extract)

    def get_summary(self) -> str:
        """Texte brut de l'introduction de la page."""
        return self._resolve(SUMMARY_PARAMS, _parse_extract)

    def get_html_content(self) -> str:
        """HTML rendu de la dernière révision."""
        return self._resolve(HTML_PARAMS, _parse_html)

    def get_coordinates(self) -> Optional[Tuple[float, float]]:
        """
        Coordonnées (latitude, longitude) de la page.

        Returns:
            None si la page ne porte pas de coordonnées (ce n'est pas une erreur)
        """
        return self._resolve(COORDINATES_PARAMS, _parse_coordinates)

    def get_images(self) -> ImagesIter:
        """Itérateur paresseux sur les images de la page (voir ImagesIter)."""
        return ImagesIter(self)


def _parse_extract(data: Any) -> str:
    pageid = _first_page_id(data)
    return extract(data, "query", "pages", pageid, "extract", expected=str)


def _parse_html(data: Any) -> str:
    pageid = _first_page_id(data)
    return extract(data, "query", "pages", pageid, "revisions", 0, "*", expected=str)


def _parse_coordinates(data: Any) -> Optional[Tuple[float, float]]:
    pageid = _first_page_id(data)
    coord = find(data, "query", "pages", pageid, "coordinates", 0, expected=dict)
    if coord is None:
        return None
    lat = extract(coord, "lat", expected=(int, float))
    lon = extract(coord, "lon", expected=(int, float))
    return (float(lat), float(lon))
