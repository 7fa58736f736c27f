"""
Tests for the remote vault HTTP client.

All HTTP calls are mocked; no network access required.
"""

from unittest.mock import MagicMock

import httpx
import pytest

from genvault.api_client import (
    RemoteVaultAPI,
    TransportError,
    UnspecifiedServerError,
    VaultAPIError,
)
from genvault.models import Draft, GeneratorOptions, VaultEntry


# ===================================================================
# Fixtures & helpers
# ===================================================================

def _mock_response(status_code=200, json_data=None, json_error=False):
    resp = MagicMock(spec=httpx.Response)
    resp.status_code = status_code
    if json_error:
        resp.json.side_effect = ValueError("Expecting value")
    else:
        resp.json.return_value = json_data
    return resp


@pytest.fixture
def http_client():
    return MagicMock(spec=httpx.Client)


@pytest.fixture
def api(http_client):
    return RemoteVaultAPI(base_url="https://vault.test", client=http_client)


# ===================================================================
# fetch_entries
# ===================================================================

class TestFetchEntries:

    def test_returns_entries_in_server_order(self, api, http_client):
        http_client.request.return_value = _mock_response(json_data=[
            {"_id": "b", "siteName": "Zeta", "link": "z", "password": "1"},
            {"_id": "a", "siteName": "Alpha", "link": "a", "password": "2"},
        ])

        entries = api.fetch_entries("user-1")

        http_client.request.assert_called_once_with("GET", "/api/entries/user-1", json=None)
        assert [e.id for e in entries] == ["b", "a"]
        assert entries[0] == VaultEntry(id="b", site_name="Zeta", link="z", password="1")

    def test_user_id_is_path_escaped(self, api, http_client):
        http_client.request.return_value = _mock_response(json_data=[])
        api.fetch_entries("a/b c")
        http_client.request.assert_called_once_with("GET", "/api/entries/a%2Fb%20c", json=None)

    def test_non_list_body_is_server_error(self, api, http_client):
        http_client.request.return_value = _mock_response(json_data={"entries": []})
        with pytest.raises(UnspecifiedServerError):
            api.fetch_entries("user-1")

    def test_entry_without_id_is_server_error(self, api, http_client):
        http_client.request.return_value = _mock_response(json_data=[{"siteName": "x"}])
        with pytest.raises(UnspecifiedServerError):
            api.fetch_entries("user-1")

    def test_non_object_entry_is_server_error(self, api, http_client):
        http_client.request.return_value = _mock_response(json_data=["oops"])
        with pytest.raises(UnspecifiedServerError):
            api.fetch_entries("user-1")

    @pytest.mark.parametrize("entry", [
        {"_id": "1", "siteName": 42},
        {"_id": "1", "siteName": "GitHub", "link": ["https://github.com"]},
        {"_id": "1", "siteName": "GitHub", "password": 1234},
    ])
    def test_non_string_field_is_server_error(self, api, http_client, entry):
        http_client.request.return_value = _mock_response(json_data=[entry])
        with pytest.raises(UnspecifiedServerError):
            api.fetch_entries("user-1")

    def test_invalid_json_is_server_error(self, api, http_client):
        http_client.request.return_value = _mock_response(json_error=True)
        with pytest.raises(UnspecifiedServerError):
            api.fetch_entries("user-1")


# ===================================================================
# save_entry
# ===================================================================

class TestSaveEntry:

    def test_posts_draft_body(self, api, http_client):
        http_client.request.return_value = _mock_response(status_code=201, json_error=True)
        draft = Draft(site_name="GitHub", link="https://github.com", password="pw")

        assert api.save_entry("user-1", draft) is None

        http_client.request.assert_called_once_with(
            "POST", "/api/save/user-1",
            json={"siteName": "GitHub", "link": "https://github.com", "password": "pw"},
        )

    def test_empty_draft_is_sent_as_is(self, api, http_client):
        http_client.request.return_value = _mock_response(json_data={})
        api.save_entry("user-1", Draft())
        _, kwargs = http_client.request.call_args
        assert kwargs["json"] == {"siteName": "", "link": "", "password": ""}

    def test_error_status_carries_payload(self, api, http_client):
        http_client.request.return_value = _mock_response(
            status_code=500, json_data={"error": "db down"}
        )
        with pytest.raises(UnspecifiedServerError) as exc_info:
            api.save_entry("user-1", Draft())
        assert exc_info.value.status_code == 500
        assert exc_info.value.detail == "db down"
        assert "db down" in str(exc_info.value)

    def test_error_status_without_payload(self, api, http_client):
        http_client.request.return_value = _mock_response(status_code=404, json_error=True)
        with pytest.raises(UnspecifiedServerError) as exc_info:
            api.save_entry("user-1", Draft())
        assert exc_info.value.status_code == 404
        assert exc_info.value.detail is None


# ===================================================================
# generate_password
# ===================================================================

class TestGeneratePassword:

    def test_sends_options_and_returns_password(self, api, http_client):
        http_client.request.return_value = _mock_response(json_data={"password": "aB3$..."})

        password = api.generate_password(GeneratorOptions(letters=8, numbers=4, symbols=2))

        assert password == "aB3$..."
        http_client.request.assert_called_once_with(
            "POST", "/api/generate", json={"letters": 8, "numbers": 4, "symbols": 2},
        )

    @pytest.mark.parametrize("body", [{}, {"password": 123}, ["aB3$"], None])
    def test_unexpected_body_is_server_error(self, api, http_client, body):
        http_client.request.return_value = _mock_response(json_data=body)
        with pytest.raises(UnspecifiedServerError):
            api.generate_password(GeneratorOptions())


# ===================================================================
# Transport failures & lifecycle
# ===================================================================

class TestTransport:

    @pytest.mark.parametrize("exc", [
        httpx.ConnectError("refused"),
        httpx.ReadTimeout("timed out"),
        httpx.TooManyRedirects("loop"),
        httpx.DecodingError("bad gzip"),
    ])
    def test_transport_errors_are_wrapped(self, api, http_client, exc):
        http_client.request.side_effect = exc
        with pytest.raises(TransportError) as exc_info:
            api.fetch_entries("user-1")
        assert exc_info.value.__cause__ is exc

    def test_both_kinds_share_a_base_class(self):
        assert issubclass(TransportError, VaultAPIError)
        assert issubclass(UnspecifiedServerError, VaultAPIError)

    def test_context_manager_closes_client(self, http_client):
        with RemoteVaultAPI(client=http_client):
            pass
        http_client.close.assert_called_once()

    def test_default_client_uses_base_url(self):
        with RemoteVaultAPI(base_url="https://vault.test/") as api:
            assert api.base_url == "https://vault.test"
            assert api._client.base_url.host == "vault.test"
            assert api._client.headers["Accept"] == "application/json"
