"""
Configuration globale pour pytest.

Fournit des fixtures réutilisables pour tous les tests.
"""

import json
from typing import List, Optional, Tuple

import pytest


class MockClient:
    """
    Capacité HTTP factice: enregistre chaque appel (url, paramètres) et
    rejoue les corps de réponse dans l'ordre où ils ont été ajoutés.
    """

    def __init__(self):
        self.urls: List[str] = []
        self.arguments: List[List[Tuple[str, str]]] = []
        self.responses: List[object] = []
        self.agent: Optional[str] = None

    def user_agent(self, agent: str) -> None:
        self.agent = agent

    def push(self, response) -> None:
        """Ajoute une réponse (dict sérialisé en JSON, str brute ou exception)."""
        if isinstance(response, dict):
            response = json.dumps(response)
        self.responses.append(response)

    def get(self, base_url, params):
        self.urls.append(base_url)
        self.arguments.append(list(params))
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def mock_client() -> MockClient:
    """Retourne une capacité HTTP factice vide."""
    return MockClient()


@pytest.fixture
def wikipedia(mock_client):
    """Retourne un client Wikipedia branché sur mock_client."""
    from wikipedia_client import Wikipedia

    return Wikipedia(client=mock_client)
