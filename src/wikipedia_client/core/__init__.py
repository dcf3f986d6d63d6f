# wikipedia_client/src/wikipedia_client/core/__init__.py
"""
Module Core - Protocole de requête/réponse de l'API Wikipedia.

Ce module construit les paramètres des requêtes, analyse les réponses JSON,
suit les redirections et la pagination, et expose des résultats typés.
"""

# Exports publics
from .continuation import Continuation, ContinuationState, ImagesIter
from .errors import (
    HttpError,
    InvalidParameter,
    JsonError,
    JsonPathError,
    RedirectError,
    WikipediaError,
)
from .models import IdentifierKind, Image, PageIdentifier
from .network_utils import HttpClient, RequestsHttpClient
from .page import Page
from .wikipedia import Wikipedia

__all__ = [
    "Continuation",
    "ContinuationState",
    "HttpClient",
    "HttpError",
    "IdentifierKind",
    "Image",
    "ImagesIter",
    "InvalidParameter",
    "JsonError",
    "JsonPathError",
    "Page",
    "PageIdentifier",
    "RedirectError",
    "RequestsHttpClient",
    "Wikipedia",
    "WikipediaError",
]
