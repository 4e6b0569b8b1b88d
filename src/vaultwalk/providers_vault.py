"""Vault-backed secret store.

Implements the ``SecretStore`` protocol on top of ``VaultClient``.  Responses
are cached one layer up, in ``ResponseCache``.
"""

from vaultwalk.config import Settings
from vaultwalk.vault.client import VaultClient


class VaultStore:
    """SecretStore backed by a real Vault server over HTTP."""

    def __init__(self, settings: Settings, client: VaultClient | None = None) -> None:
        self._client = client or VaultClient(settings.address, settings.token)

    # ------------------------------------------------------------------
    # SecretStore protocol
    # ------------------------------------------------------------------

    def list(self, path: str) -> list[str]:
        return self._client.list_secrets(path)

    def read(self, path: str) -> str | None:
        return self._client.get_secret(path)

    def write(self, path: str, value: str) -> None:
        self._client.write_secret(path, value)

    def delete(self, path: str) -> None:
        self._client.delete_secret(path)

    def close(self) -> None:
        self._client.close()
