"""Secret store protocol and the in-memory implementation."""

from typing import Protocol

from vaultwalk.constants import MOCK_DATA, SEPARATOR


class SecretStore(Protocol):
    """Protocol that all secret backends must satisfy.

    Paths are full store paths without a leading separator, e.g.
    ``secret/apps/``.  Every method may raise a ``StoreError``.
    """

    def list(self, path: str) -> list[str]:
        """Return the raw child keys of a directory; sub-directories end with ``/``."""
        ...

    def read(self, path: str) -> str | None:
        """Return the value stored at a leaf path, or None if it holds no value."""
        ...

    def write(self, path: str, value: str) -> None:
        """Create or overwrite the value at a leaf path."""
        ...

    def delete(self, path: str) -> None:
        """Remove a leaf. No-op if the path does not exist."""
        ...


class MockStore:
    """Deterministic in-memory store keyed by full secret path.

    Directories are implied by the keys, exactly like prefixes in the real
    store: a directory exists while at least one secret lives under it.
    """

    def __init__(self, data: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(MOCK_DATA if data is None else data)
        self.calls: list[tuple[str, str]] = []

    def list(self, path: str) -> list[str]:
        self.calls.append(("list", path))
        children: set[str] = set()
        for key in self._data:
            if not key.startswith(path):
                continue
            rest = key[len(path) :]
            head, sep, _ = rest.partition(SEPARATOR)
            if head:
                children.add(head + sep)
        return sorted(children)

    def read(self, path: str) -> str | None:
        self.calls.append(("read", path))
        return self._data.get(path)

    def write(self, path: str, value: str) -> None:
        self.calls.append(("write", path))
        self._data[path] = value

    def delete(self, path: str) -> None:
        self.calls.append(("delete", path))
        self._data.pop(path, None)

    def __contains__(self, path: object) -> bool:
        return path in self._data
