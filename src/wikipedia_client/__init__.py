# wikipedia_client/src/wikipedia_client/__init__.py
"""
Wikipedia Client - client de l'API "action=query" de Wikipedia.

    >>> from wikipedia_client import Wikipedia
    >>> wiki = Wikipedia()
    >>> wiki.search("Parkinson's law of triviality")
"""

import logging

from .core import (
    HttpClient,
    HttpError,
    Image,
    ImagesIter,
    InvalidParameter,
    JsonError,
    JsonPathError,
    Page,
    PageIdentifier,
    RedirectError,
    RequestsHttpClient,
    Wikipedia,
    WikipediaError,
)

# Bibliothèque: la configuration des handlers revient à l'application
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "HttpClient",
    "HttpError",
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
