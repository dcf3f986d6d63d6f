# wikipedia_client/src/wikipedia_client/core/models.py
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class IdentifierKind(Enum):
    """Mode d'adressage d'une page dans une requête."""

    TITLE = "titles"
    PAGEID = "pageids"


@dataclass(frozen=True)
class PageIdentifier:
    """Identifiant d'une page: soit un titre, soit un pageid (jamais les deux)."""

    kind: IdentifierKind
    value: str

    @classmethod
    def from_title(cls, title: str) -> "PageIdentifier":
        return cls(IdentifierKind.TITLE, title)

    @classmethod
    def from_pageid(cls, pageid: str) -> "PageIdentifier":
        return cls(IdentifierKind.PAGEID, str(pageid))

    def query_param(self) -> Tuple[str, str]:
        """Retourne le couple (nom du paramètre, valeur) à envoyer."""
        return (self.kind.value, self.value)


@dataclass(frozen=True)
class Image:
    """Modèle de données pour une image attachée à une page."""

    url: str
    title: str
    description_url: str
