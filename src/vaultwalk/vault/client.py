"""Thin HTTP wrapper around the Vault key-value API.

All calls go to ``<address>/v1/<path>`` with the ``X-Vault-Token`` header.
Listing uses the non-standard ``LIST`` verb; secrets are stored as a JSON
object with a single ``secret`` field.

Raises ``VaultClientError`` on transport failures, non-success statuses and
response bodies that do not carry the expected ``data`` envelope.
"""

import json
import logging
from typing import Any

import httpx

from vaultwalk.errors import StoreError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0  # seconds

_API_PREFIX = "v1/"


class VaultClientError(StoreError):
    """Raised when a Vault request fails or returns an unusable body."""


class VaultClient:
    """Issues blocking requests against a Vault server.

    Args:
        address: Base address of the server, e.g. ``https://vault.example.com``.
        token: Access token sent with every request.
        timeout: Per-request timeout in seconds.
    """

    def __init__(self, address: str, token: str, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._address = address.rstrip("/") + "/"
        self._http = httpx.Client(
            base_url=self._address,
            headers={"X-Vault-Token": token.strip(), "Content-Type": "application/json"},
            timeout=timeout,
        )

    def list_secrets(self, path: str) -> list[str]:
        """Return the raw keys under a directory path.

        Vault answers 404 for a prefix with no children, which is reported
        as an empty listing rather than an error.
        """
        response = self._request("LIST", path, missing_ok=True)
        if response is None:
            return []
        data = self._data(response)
        keys = data.get("keys")
        if not isinstance(keys, list):
            raise VaultClientError(f"Vault response did not contain keys: {data!r}")
        return [str(key) for key in keys]

    def get_secret(self, path: str) -> str | None:
        """Return the ``secret`` field stored at a leaf path.

        Leaves written by other tools may not follow the single-field
        layout; their whole data object is returned as compact JSON.
        """
        response = self._request("GET", path)
        if response is None:
            raise VaultClientError(f"Vault returned no response for {path}")
        data = self._data(response)
        if "secret" in data:
            secret = data["secret"]
            return None if secret is None else str(secret)
        return json.dumps(data, separators=(",", ":"), sort_keys=True)

    def write_secret(self, path: str, secret: str) -> None:
        """Create or overwrite the secret at a leaf path."""
        self._request("POST", path, body={"secret": secret})

    def delete_secret(self, path: str) -> None:
        self._request("DELETE", path)

    def close(self) -> None:
        self._http.close()

    def _request(
        self,
        method: str,
        path: str,
        body: dict[str, Any] | None = None,
        missing_ok: bool = False,
    ) -> httpx.Response | None:
        """Send one request, returning the response or raising VaultClientError."""
        url = _API_PREFIX + path.lstrip("/")
        logger.debug("%s %s", method, url)
        try:
            response = self._http.request(method, url, json=body)
        except httpx.HTTPError as exc:
            raise VaultClientError(f"Vault request failed: {exc}") from exc

        if missing_ok and response.status_code == 404:
            return None
        if not response.is_success:
            raise VaultClientError(
                f"Vault request failed `{response.text or 'Could not read vault response.'}`"
            )
        return response

    @staticmethod
    def _data(response: httpx.Response) -> dict[str, Any]:
        try:
            payload = response.json()
        except ValueError as exc:
            raise VaultClientError(f"Vault response is not valid JSON: {exc}") from exc
        data = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(data, dict):
            raise VaultClientError(f"Vault response did not contain data: {payload!r}")
        return data
