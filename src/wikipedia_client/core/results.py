# wikipedia_client/src/wikipedia_client/core/results.py
"""
Extraction des titres des listes de résultats (search, geosearch, random).
"""

from typing import Any, List

from .json_path import extract


def extract_titles(document: Any, list_name: str) -> List[str]:
    """
    Retourne les titres de query.<list_name>, dans l'ordre du serveur.

    Les éléments sans titre (ou qui ne sont pas des objets) sont ignorés.

    Raises:
        JsonPathError: si query.<list_name> est absent ou n'est pas une liste
    """
    items = extract(document, "query", list_name, expected=list)
    return [
        item["title"]
        for item in items
        if isinstance(item, dict) and isinstance(item.get("title"), str)
    ]
