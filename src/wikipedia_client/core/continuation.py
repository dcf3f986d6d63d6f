# wikipedia_client/src/wikipedia_client/core/continuation.py
"""
Pagination des requêtes par jeton "continue".

Responsabilité unique: enchaîner les appels d'une sous-requête paginée en
reportant le jeton renvoyé par le serveur, jusqu'à ce qu'il n'en renvoie
plus. Sert à l'énumération des images d'une page.
"""

import logging
from collections import deque
from enum import Enum
from typing import TYPE_CHECKING, Any, Deque, Iterable, List, Optional, Tuple

from .errors import JsonPathError
from .json_path import extract, find
from .models import Image

if TYPE_CHECKING:
    from .page import Page
    from .wikipedia import Wikipedia

logger = logging.getLogger(__name__)

Token = List[Tuple[str, str]]


class ContinuationState(Enum):
    FRESH = "fresh"
    CONTINUING = "continuing"
    DONE = "done"


def parse_continue(data: Any) -> Optional[Token]:
    """
    Extrait le jeton de continuation (objet "continue" de premier niveau).

    Returns:
        Liste ordonnée de couples (clé, valeur), ou None si absent

    Raises:
        JsonPathError: si une valeur du jeton n'est pas une chaîne
    """
    cont = find(data, "continue", expected=dict)
    if cont is None:
        return None
    token: Token = []
    for key, value in cont.items():
        if not isinstance(value, str):
            raise JsonPathError(("continue", key))
        token.append((key, value))
    return token


class Continuation:
    """
    Machine à états FRESH -> CONTINUING* -> DONE.

    En FRESH, un paramètre "continue" vide est envoyé pour démarrer
    l'énumération; en CONTINUING, les couples du jeton précédent le sont.
    """

    def __init__(self, wikipedia: "Wikipedia"):
        self.wikipedia = wikipedia
        self.state = ContinuationState.FRESH
        self.token: Optional[Token] = None
        self.requests = 0

    @property
    def done(self) -> bool:
        return self.state is ContinuationState.DONE

    def fetch(self, params: Iterable[Tuple[str, str]]) -> Any:
        """
        Effectue l'appel suivant de la série.

        Raises:
            ValueError: si la série est déjà terminée
        """
        if self.done:
            raise ValueError("Continuation already exhausted")

        args = list(params)
        if self.state is ContinuationState.FRESH:
            args.append(("continue", ""))
        else:
            args.extend(self.token or [])

        data = self.wikipedia.query(args)
        token = parse_continue(data)
        self.requests += 1

        if token is None:
            self.state = ContinuationState.DONE
            self.token = None
        else:
            logger.debug("Continuation token received: %s", token)
            self.state = ContinuationState.CONTINUING
            self.token = token
        return data


def _parse_images(data: Any) -> List[Image]:
    pages = extract(data, "query", "pages", expected=dict)
    images = []
    for pageid in pages:
        base = ("query", "pages", pageid)
        images.append(
            Image(
                url=extract(data, *base, "imageinfo", 0, "url", expected=str),
                title=extract(data, *base, "title", expected=str),
                description_url=extract(data, *base, "imageinfo", 0, "descriptionurl", expected=str),
            )
        )
    return images


class ImagesIter:
    """
    Itérateur paresseux sur les images d'une page.

    Un appel HTTP par page de résultats, uniquement quand le tampon est
    vide. Non redémarrable: chaque avance consomme la même chaîne de jetons.
    """

    def __init__(self, page: "Page"):
        self.page = page
        self._continuation = Continuation(page.wikipedia)
        self._buffer: Deque[Image] = deque()

    def _params(self) -> List[Tuple[str, str]]:
        return [
            ("generator", "images"),
            ("gimlimit", str(self.page.wikipedia.images_results)),
            ("prop", "imageinfo"),
            ("iiprop", "url"),
            self.page.identifier.query_param(),
        ]

    def __iter__(self) -> "ImagesIter":
        return self

    def __next__(self) -> Image:
        while not self._buffer:
            if self._continuation.done:
                raise StopIteration
            max_pages = self.page.wikipedia.max_image_pages
            if max_pages is not None and self._continuation.requests >= max_pages:
                logger.warning(
                    "Stopping image enumeration for %r after %d page(s)",
                    self.page.identifier.value,
                    self._continuation.requests,
                )
                self._continuation.state = ContinuationState.DONE
                raise StopIteration
            data = self._continuation.fetch(self._params())
            self._buffer.extend(_parse_images(data))
        return self._buffer.popleft()
