# tests/test_label_client.py
"""
Tests for the requests-based openFDA client. The HTTP session is mocked.

Run with: pytest tests/test_label_client.py -v
"""

from unittest.mock import MagicMock, patch

import pytest
import requests

from src.label_client import (
    DEFAULT_BASE_URL,
    OpenFDAClient,
    UpstreamRequestError,
    create_label_client,
)


def _response(status_code=200, payload=None, json_error=None):
    response = MagicMock()
    response.status_code = status_code
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(f"{status_code} Error")
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def client():
    c = OpenFDAClient(timeout=7)
    yield c
    c.close()


class TestOpenFDAClientSearch:
    """Test a single label search"""

    def test_sends_search_limit_and_timeout(self, client):
        with patch.object(client.session, "get", return_value=_response(payload={"results": [{"id": 1}]})) as get:
            results = client.search('openfda.brand_name:"Advil"', limit=1)

        assert results == [{"id": 1}]
        get.assert_called_once_with(
            DEFAULT_BASE_URL,
            params={"search": 'openfda.brand_name:"Advil"', "limit": 1},
            timeout=7,
        )

    def test_api_key_is_sent_when_configured(self):
        c = OpenFDAClient(api_key="secret")
        with patch.object(c.session, "get", return_value=_response(payload={"results": []})) as get:
            c.search("openfda.generic_name:aspirin")
        assert get.call_args.kwargs["params"]["api_key"] == "secret"

    def test_missing_results_key_is_empty(self, client):
        with patch.object(client.session, "get", return_value=_response(payload={"meta": {}})):
            assert client.search("openfda.brand_name:x") == []

    def test_http_error_raises(self, client):
        with patch.object(client.session, "get", return_value=_response(status_code=404)):
            with pytest.raises(UpstreamRequestError):
                client.search("openfda.brand_name:nothing")

    def test_timeout_raises(self, client):
        with patch.object(client.session, "get", side_effect=requests.exceptions.Timeout("too slow")):
            with pytest.raises(UpstreamRequestError):
                client.search("openfda.brand_name:slow")

    def test_connection_error_raises(self, client):
        with patch.object(client.session, "get", side_effect=requests.exceptions.ConnectionError("down")):
            with pytest.raises(UpstreamRequestError):
                client.search("openfda.brand_name:down")

    def test_bad_json_raises(self, client):
        bad_json = requests.exceptions.JSONDecodeError("Expecting value", "<html>", 0)
        with patch.object(client.session, "get", return_value=_response(json_error=bad_json)):
            with pytest.raises(UpstreamRequestError):
                client.search("openfda.brand_name:html")


class TestCreateLabelClient:
    """Test building the client from params.yaml"""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("OPENFDA_API_KEY", raising=False)
        c = create_label_client()
        assert c.base_url == DEFAULT_BASE_URL
        assert c.timeout == 10
        assert c.api_key is None

    def test_from_config(self, monkeypatch):
        monkeypatch.delenv("OPENFDA_API_KEY", raising=False)
        c = create_label_client({"base_url": "http://localhost:9/label.json", "timeout_seconds": 3, "api_key": "k"})
        assert c.base_url == "http://localhost:9/label.json"
        assert c.timeout == 3.0
        assert c.api_key == "k"

    def test_env_api_key_wins(self, monkeypatch):
        monkeypatch.setenv("OPENFDA_API_KEY", "from-env")
        c = create_label_client({"api_key": "from-yaml"})
        assert c.api_key == "from-env"
