# wikipedia_client/src/wikipedia_client/core/errors.py
"""
Hiérarchie des erreurs du client Wikipedia.

Toutes les erreurs levées par la bibliothèque dérivent de WikipediaError,
ce qui permet à l'appelant de toutes les intercepter d'un seul bloc.
"""

from typing import Optional, Sequence, Union


class WikipediaError(Exception):
    """Erreur de base du client Wikipedia."""


class HttpError(WikipediaError):
    """L'appel distant n'a pas pu aboutir (erreur de transport)."""


class JsonError(WikipediaError):
    """Le corps de la réponse n'est pas un document JSON valide."""

    def __init__(self, error: Exception):
        super().__init__(f"Invalid JSON response: {error}")
        self.error = error


class JsonPathError(WikipediaError):
    """
    Le JSON est valide mais sa structure ne correspond pas à celle attendue.

    Typiquement: une réponse d'erreur de l'API au lieu du résultat demandé.
    """

    def __init__(self, path: Sequence[Union[str, int]] = ()):
        self.path = tuple(path)
        where = ".".join(str(p) for p in self.path) or "<root>"
        super().__init__(f"Unexpected response shape at {where}")


class InvalidParameter(WikipediaError):
    """Un argument fourni par l'appelant est hors des bornes documentées."""

    def __init__(self, parameter: str, value: Optional[object] = None):
        self.parameter = parameter
        self.value = value
        super().__init__(f"Invalid parameter {parameter}: {value!r}")


class RedirectError(WikipediaError):
    """Trop de redirections successives pour une même opération."""

    def __init__(self, title: str, hops: int):
        self.title = title
        self.hops = hops
        super().__init__(f"Too many redirects ({hops}) while resolving {title!r}")
