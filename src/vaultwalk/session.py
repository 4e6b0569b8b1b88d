"""The directory listing currently on screen and what is selected in it."""

from dataclasses import dataclass, field

from vaultwalk.models import Entry


@dataclass
class ListingSession:
    """Listing of one directory, the selected row and the resolved secret.

    ``entries`` is replaced wholesale on every reload and never edited in
    place.  ``selected_secret`` is only meaningful for a leaf selection and is
    recomputed by the controller whenever the selection, the path or the
    listing changes.
    """

    entries: tuple[Entry, ...] = ()
    selected_index: int = 0
    selected_secret: str | None = None
    scroll_offset: int = field(default=0, compare=False)

    def replace(self, entries: list[Entry], select: str | None = None) -> None:
        """Install a fresh listing, selecting ``select`` by name when present.

        When the name is gone (it was just deleted, or its directory emptied)
        the cursor lands on the slot it used to occupy.  Without a name the
        previous index is kept and clamped to the new bounds.
        """
        self.entries = tuple(entries)
        if select is None:
            index = self.selected_index
        else:
            index = self.index_of(select)
            if index is None:
                index = sum(1 for entry in self.entries if entry.name < select)
        self.selected_index = self._clamp(index)
        self.selected_secret = None

    def index_of(self, name: str) -> int | None:
        for i, entry in enumerate(self.entries):
            if entry.name == name:
                return i
        return None

    def names(self) -> set[str]:
        return {entry.name for entry in self.entries}

    def move(self, delta: int) -> bool:
        """Move the selection by ``delta`` rows, clamped; True if it changed."""
        index = self._clamp(self.selected_index + delta)
        changed = index != self.selected_index
        self.selected_index = index
        return changed

    def restore(self, index: int) -> None:
        """Put the selection back on a remembered index, clamped to the listing."""
        self.selected_index = self._clamp(index)
        self.selected_secret = None

    def select(self, index: int) -> None:
        """Set the selection without clamping; one-past-end marks a placeholder row."""
        self.selected_index = index

    @property
    def selected(self) -> Entry | None:
        """The entry under the cursor, or None when the list is empty or the
        cursor sits on a placeholder row."""
        if 0 <= self.selected_index < len(self.entries):
            return self.entries[self.selected_index]
        return None

    @property
    def is_empty(self) -> bool:
        return not self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def _clamp(self, index: int) -> int:
        if not self.entries:
            return 0
        return min(max(index, 0), len(self.entries) - 1)
