"""
HTTP client for the remote GenVault service.

Three endpoints:
    GET  /api/entries/{user_id}   -> JSON array of entries
    POST /api/save/{user_id}      -> body ignored
    POST /api/generate            -> {"password": "..."}

Every failure is raised as a VaultAPIError subclass so callers only need to
handle one hierarchy.
"""

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

from . import config
from .models import VaultEntry, Draft, GeneratorOptions

logger = logging.getLogger(__name__)


class VaultAPIError(Exception):
    """Base class for all remote vault failures."""


class TransportError(VaultAPIError):
    """The request never produced a usable HTTP response (connection,
    timeout, redirect loop, undecodable content encoding)."""


class UnspecifiedServerError(VaultAPIError):
    """Non-2xx status, or a 2xx body that is not the expected JSON shape."""

    def __init__(self, message: str, status_code: Optional[int] = None,
                 detail: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


class RemoteVaultAPI:
    """Client for the remote vault service.

    Usage::

        with RemoteVaultAPI() as api:
            entries = api.fetch_entries("user-42")
    """

    def __init__(self, base_url: str = config.API_BASE_URL,
                 timeout: float = config.REQUEST_TIMEOUT_SECONDS,
                 client: Optional[httpx.Client] = None):
        """
        Args:
            base_url: Service root, e.g. https://genvault-backend.vercel.app
            timeout: Per-request timeout in seconds
            client: Pre-built httpx client; one is created when omitted
        """
        self.base_url = base_url.rstrip("/")
        self._client = client or httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            headers=self._build_headers(),
        )

    def __enter__(self) -> 'RemoteVaultAPI':
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    # ------------------------------------------------------------------
    # Endpoints
    # ------------------------------------------------------------------

    def fetch_entries(self, user_id: str) -> List[VaultEntry]:
        """
        Fetch every entry stored for a user, in the order the service
        returns them.
        """
        path = config.ENTRIES_PATH.format(user_id=self._quote(user_id))
        data = self._request("GET", path)
        if not isinstance(data, list):
            raise UnspecifiedServerError(
                f"Expected a JSON array from {path}, got {type(data).__name__}"
            )
        try:
            return [VaultEntry.from_dict(item) for item in data]
        except (KeyError, TypeError, AttributeError) as e:
            raise UnspecifiedServerError(f"Malformed entry in response from {path}: {e}") from e

    def save_entry(self, user_id: str, draft: Draft) -> None:
        """Store a new entry for a user. The response body is ignored."""
        path = config.SAVE_PATH.format(user_id=self._quote(user_id))
        self._request("POST", path, json=draft.to_dict(), expect_json=False)

    def generate_password(self, options: GeneratorOptions) -> str:
        """Ask the service for a password with the given character counts."""
        data = self._request("POST", config.GENERATE_PATH, json=options.to_dict())
        password = data.get("password") if isinstance(data, dict) else None
        if not isinstance(password, str):
            raise UnspecifiedServerError(
                f"Response from {config.GENERATE_PATH} has no 'password' string"
            )
        return password

    # ------------------------------------------------------------------
    # HTTP helpers
    # ------------------------------------------------------------------

    def _build_headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/json",
            "User-Agent": config.USER_AGENT,
        }

    @staticmethod
    def _quote(user_id: str) -> str:
        return quote(user_id, safe="")

    def _request(self, method: str, path: str, json: Optional[Dict[str, Any]] = None,
                 expect_json: bool = True) -> Any:
        """
        Send one request and decode the JSON body.
        Raises:
            TransportError: no response was received
            UnspecifiedServerError: non-2xx status or undecodable body
        """
        logger.debug(f"{method} {path}")
        try:
            resp = self._client.request(method, path, json=json)
        # RequestError also covers TooManyRedirects and DecodingError
        except httpx.RequestError as e:
            raise TransportError(f"{method} {path} failed: {e}") from e

        if not 200 <= resp.status_code < 300:
            detail = self._error_detail(resp)
            message = f"{method} {path} returned HTTP {resp.status_code}"
            if detail:
                message = f"{message}: {detail}"
            raise UnspecifiedServerError(message, status_code=resp.status_code, detail=detail)

        if not expect_json:
            return None
        try:
            return resp.json()
        except ValueError as e:
            raise UnspecifiedServerError(
                f"{method} {path} returned a non-JSON body", status_code=resp.status_code
            ) from e

    @staticmethod
    def _error_detail(resp: httpx.Response) -> Optional[str]:
        """Pull the 'error' field out of a JSON error payload, if any."""
        try:
            payload = resp.json()
        except ValueError:
            return None
        if isinstance(payload, dict) and payload.get("error"):
            return str(payload["error"])
        return None
