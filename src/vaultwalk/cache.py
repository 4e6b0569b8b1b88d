"""Response cache sitting between the navigator and the secret store.

Pure navigation revisits the same directories over and over; the cache keeps
the last successful result of every ``(verb, path)`` call so those visits
cost no round-trip.  Entries never expire.  They are dropped wholesale by
``invalidate_all`` or overwritten by a read made with ``allow_cache=False``,
which is how every mutation refreshes what it touched.  Failed calls are
never cached.
"""

import logging
from typing import Literal, cast

from vaultwalk.providers import SecretStore

logger = logging.getLogger(__name__)

Verb = Literal["LIST", "GET"]
CacheKey = tuple[str, str]


class ResponseCache:
    """Read-through cache keyed on the exact verb and path."""

    def __init__(self, store: SecretStore) -> None:
        self._store = store
        self._entries: dict[CacheKey, list[str] | str | None] = {}
        self.hits = 0
        self.misses = 0

    def read(self, verb: Verb, path: str, allow_cache: bool = True) -> list[str] | str | None:
        """Return the store's answer for ``verb`` on ``path``.

        With ``allow_cache`` a previously stored answer is returned without
        touching the store.  Otherwise the store is called and, on success,
        its answer replaces whatever was cached.  Errors propagate untouched.
        """
        key = (verb, path)
        if allow_cache and key in self._entries:
            self.hits += 1
            logger.debug("cache hit %s %s", verb, path)
            return self._entries[key]

        self.misses += 1
        logger.debug("cache miss %s %s (allow_cache=%s)", verb, path, allow_cache)
        result = self._fetch(verb, path)
        self._entries[key] = result
        return result

    def list_keys(self, path: str, allow_cache: bool = True) -> list[str]:
        return cast(list[str], self.read("LIST", path, allow_cache))

    def get_value(self, path: str, allow_cache: bool = True) -> str | None:
        return cast(str | None, self.read("GET", path, allow_cache))

    def invalidate_all(self) -> None:
        logger.debug("dropping %d cached responses", len(self._entries))
        self._entries.clear()

    def _fetch(self, verb: Verb, path: str) -> list[str] | str | None:
        if verb == "LIST":
            return list(self._store.list(path))
        if verb == "GET":
            return self._store.read(path)
        raise ValueError(f"Unsupported verb: {verb}")

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
