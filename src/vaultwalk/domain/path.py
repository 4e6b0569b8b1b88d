"""The current location in the store, modelled as a stack of entries.

Every element but the last is a directory.  The stack remembers its length at
construction time (``root_len``) and refuses to pop below it, so the user can
never walk above the path the session was started on.
"""

from collections.abc import Iterator

from vaultwalk.constants import MAX_DEPTH, SEPARATOR
from vaultwalk.errors import AppError
from vaultwalk.models import Entry


class PathError(AppError):
    """Raised when a push would break the path invariants."""


class VaultPath:
    """Ordered stack of Entry segments with a floor at ``root_len``."""

    def __init__(self, entries: list[Entry] | None = None, root_len: int | None = None) -> None:
        self._entries: list[Entry] = list(entries or [])
        self.root_len = len(self._entries) if root_len is None else root_len

    @classmethod
    def decode(cls, raw: str) -> "VaultPath":
        """Parse ``a/b/c`` style text into a path.

        The separator stays attached to each segment it terminates; empty
        segments produced by leading, trailing or doubled separators are
        dropped.  Only a final segment without a separator is a leaf.
        """
        entries: list[Entry] = []
        segment = ""
        for char in raw:
            segment += char
            if char == SEPARATOR:
                if segment != SEPARATOR:
                    entries.append(Entry.decode(segment))
                segment = ""
        if segment:
            entries.append(Entry.decode(segment))
        return cls(entries)

    def joined(self) -> str:
        """Return the store path prefix for this location."""
        return "".join(entry.encode() for entry in self._entries)

    def display_width(self) -> int:
        """Width of the rendered path: every name plus one separator column."""
        return sum(len(entry.name) + 1 for entry in self._entries)

    def child(self, name: str) -> str:
        """Return the full store path of ``name`` inside this location."""
        return self.joined() + name

    def can_push(self) -> bool:
        return len(self._entries) < MAX_DEPTH

    def can_pop(self) -> bool:
        return len(self._entries) > self.root_len

    def push(self, entry: Entry) -> None:
        if not entry.is_directory:
            raise PathError(f"'{entry.name}' is not a directory")
        if not self.can_push():
            raise PathError(f"Path is already {MAX_DEPTH} levels deep")
        self._entries.append(entry)

    def pop(self) -> Entry | None:
        """Remove and return the last entry, or None when already at the floor."""
        if not self.can_pop():
            return None
        return self._entries.pop()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VaultPath):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"VaultPath({self.joined()!r}, root_len={self.root_len})"
