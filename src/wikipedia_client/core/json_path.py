# wikipedia_client/src/wikipedia_client/core/json_path.py
"""
Analyse des réponses JSON et extraction de champs par chemin.

Chaque site d'appel déclare la forme attendue sous forme d'une suite de clés
(str pour un objet, int pour un tableau) plutôt que de répéter des chaînes
de .get() imbriqués.
"""

import json
from typing import Any, Optional, Tuple, Type, Union

from .errors import JsonError, JsonPathError

PathItem = Union[str, int]

_MISSING = object()


def parse_document(text: str) -> Any:
    """
    Parse le corps d'une réponse.

    Raises:
        JsonError: si le texte n'est pas du JSON valide
    """
    try:
        return json.loads(text)
    except (TypeError, ValueError) as e:
        raise JsonError(e) from e


def _step(node: Any, key: PathItem) -> Any:
    if isinstance(key, int):
        if isinstance(node, list) and -len(node) <= key < len(node):
            return node[key]
        return _MISSING
    if isinstance(node, dict):
        return node.get(key, _MISSING)
    return _MISSING


def _matches(value: Any, expected: Optional[Union[Type, Tuple[Type, ...]]]) -> bool:
    if expected is None:
        return True
    # bool est une sous-classe d'int: on ne l'accepte pas comme nombre
    if isinstance(value, bool) and bool not in _as_tuple(expected):
        return False
    return isinstance(value, expected)


def _as_tuple(expected) -> tuple:
    return expected if isinstance(expected, tuple) else (expected,)


def find(document: Any, *path: PathItem, expected=None) -> Any:
    """
    Suit le chemin donné; retourne None si un maillon manque ou si la
    valeur finale n'est pas du type attendu.
    """
    node = document
    for key in path:
        node = _step(node, key)
        if node is _MISSING:
            return None
    if not _matches(node, expected):
        return None
    return node


def extract(document: Any, *path: PathItem, expected=None) -> Any:
    """
    Comme find(), mais lève JsonPathError au lieu de retourner None.

    Args:
        document: Document JSON déjà parsé
        path: Clés (objets) et indices (tableaux) à suivre
        expected: Type (ou tuple de types) attendu pour la valeur finale

    Raises:
        JsonPathError: si un maillon manque ou si le type ne correspond pas
    """
    node = document
    for depth, key in enumerate(path):
        node = _step(node, key)
        if node is _MISSING:
            raise JsonPathError(path[: depth + 1])
    if not _matches(node, expected):
        raise JsonPathError(path)
    return node
