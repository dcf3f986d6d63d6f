"""
Tests pour le module core.network_utils.
"""

from unittest.mock import MagicMock, Mock, patch

import pytest
import requests

from wikipedia_client.core.network_utils import RequestsHttpClient, retry_backoff


class TestRetryBackoff:
    """Tests pour retry_backoff."""

    @patch("wikipedia_client.core.network_utils.time.sleep")
    def test_retries_then_succeeds(self, mock_sleep):
        """Test succès après une erreur transitoire."""
        func = Mock(side_effect=[requests.ConnectionError("boom"), "ok"])
        func.__name__ = "func"

        result = retry_backoff(max_retries=3, jitter=0.0)(func)()

        assert result == "ok"
        assert func.call_count == 2
        mock_sleep.assert_called_once_with(1.0)

    @patch("wikipedia_client.core.network_utils.time.sleep")
    def test_single_attempt_by_default(self, mock_sleep):
        """Test aucune nouvelle tentative par défaut."""
        func = Mock(side_effect=requests.ConnectionError("boom"))
        func.__name__ = "func"

        with pytest.raises(requests.ConnectionError):
            retry_backoff()(func)()

        assert func.call_count == 1
        mock_sleep.assert_not_called()

    def test_non_retryable_exception(self):
        """Test exception hors liste: propagée immédiatement."""
        func = Mock(side_effect=KeyError("x"))
        func.__name__ = "func"

        with pytest.raises(KeyError):
            retry_backoff(max_retries=3)(func)()
        assert func.call_count == 1


class TestRequestsHttpClient:
    """Tests pour RequestsHttpClient."""

    def test_get_returns_text(self):
        """Test GET avec paramètres."""
        session = MagicMock()
        session.get.return_value = Mock(text='{"ok": 1}')
        client = RequestsHttpClient(timeout=5, session=session)

        body = client.get("https://en.wikipedia.org/w/api.php", [("a", "b")])

        assert body == '{"ok": 1}'
        session.get.assert_called_once_with(
            "https://en.wikipedia.org/w/api.php", params=[("a", "b")], timeout=5
        )
        session.get.return_value.raise_for_status.assert_called_once()

    def test_get_http_status_error(self):
        """Test statut HTTP en erreur."""
        session = MagicMock()
        response = Mock()
        response.raise_for_status.side_effect = requests.HTTPError("503")
        session.get.return_value = response
        client = RequestsHttpClient(session=session)

        with pytest.raises(requests.HTTPError):
            client.get("https://en.wikipedia.org/w/api.php", [])

    def test_user_agent_header(self):
        """Test en-tête User-Agent."""
        client = RequestsHttpClient()
        client.user_agent("hello world")

        assert client.session.headers["User-Agent"] == "hello world"

    @patch("wikipedia_client.core.network_utils.time.sleep")
    def test_get_retries_transport_errors(self, mock_sleep):
        """Test nouvelle tentative quand max_retries > 1."""
        session = MagicMock()
        session.get.side_effect = [requests.ConnectionError("boom"), Mock(text="{}")]
        client = RequestsHttpClient(max_retries=2, session=session)

        body = client.get("https://en.wikipedia.org/w/api.php", [])

        assert body == "{}"
        assert session.get.call_count == 2
        mock_sleep.assert_called_once()

    def test_get_single_attempt_by_default(self):
        """Test aucune nouvelle tentative par défaut."""
        session = MagicMock()
        session.get.side_effect = requests.ConnectionError("boom")
        client = RequestsHttpClient(session=session)

        with pytest.raises(requests.ConnectionError):
            client.get("https://en.wikipedia.org/w/api.php", [])
        assert session.get.call_count == 1

    def test_max_retries_floor(self):
        """Test au moins une tentative."""
        assert RequestsHttpClient(max_retries=0).max_retries == 1
