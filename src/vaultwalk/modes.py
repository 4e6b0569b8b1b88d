"""Modal input state machine.

The navigator is always in exactly one mode.  ``Browsing`` accepts movement
and action keys; every other mode owns the single line of input the user is
typing and returns to ``Browsing`` on submit or cancel.  Each non-browsing
mode remembers the selection held when it was entered so a cancel (or a
rejected submission) can put the cursor back exactly where it was.

Store I/O is not done here; the controller performs the mutation a
submission asks for.
"""

from dataclasses import dataclass
from enum import Enum, auto

from vaultwalk.constants import CONFIRM_ANSWER, SEPARATOR
from vaultwalk.errors import AppError
from vaultwalk.models import Entry


class ModeError(AppError):
    """Raised when a transition is refused or a submission is invalid."""


class EditOrigin(Enum):
    """Which flow led into value entry."""

    INSERT = auto()
    UPDATE = auto()


@dataclass(frozen=True)
class Browsing:
    prompt = ""


@dataclass(frozen=True)
class CreatingKey:
    previous_index: int

    prompt = "New key:"


@dataclass(frozen=True)
class RenamingKey:
    entry: Entry
    previous_index: int

    @property
    def prompt(self) -> str:
        return f"Rename {self.entry.name} to:"


@dataclass(frozen=True)
class EditingValue:
    origin: EditOrigin
    key: str
    previous_index: int

    @property
    def prompt(self) -> str:
        if self.origin is EditOrigin.INSERT:
            return f"Value for {self.key}:"
        return f"New value for {self.key}:"


@dataclass(frozen=True)
class ConfirmingDelete:
    entry: Entry
    previous_index: int

    @property
    def prompt(self) -> str:
        return f"Delete {self.entry.name}? Type '{CONFIRM_ANSWER}' to confirm:"


Mode = Browsing | CreatingKey | RenamingKey | EditingValue | ConfirmingDelete


def validate_key_name(text: str) -> str:
    """Return the cleaned key name or raise ModeError."""
    key = text.strip()
    if not key:
        raise ModeError("key must not be empty")
    if key.endswith(SEPARATOR):
        raise ModeError("use key names, not directories")
    if any(not segment for segment in key.split(SEPARATOR)):
        raise ModeError("key must not contain empty path segments")
    return key


class ModeStateMachine:
    """Guarded transitions between the input modes."""

    def __init__(self) -> None:
        self._mode: Mode = Browsing()
        self._buffer = ""

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def is_browsing(self) -> bool:
        return isinstance(self._mode, Browsing)

    @property
    def buffered_key(self) -> str | None:
        """The key being created, live only while creating or inserting its value."""
        match self._mode:
            case CreatingKey():
                return self._buffer
            case EditingValue(origin=EditOrigin.INSERT, key=key):
                return key
            case _:
                return None

    @property
    def has_placeholder(self) -> bool:
        """True while a virtual "new entry" row is rendered after the listing."""
        return self.buffered_key is not None

    def type_key(self, text: str) -> None:
        """Record the text typed so far while creating a key."""
        if isinstance(self._mode, CreatingKey):
            self._buffer = text

    def begin_create(self, selected_index: int) -> None:
        self._require_browsing()
        self._mode = CreatingKey(previous_index=selected_index)
        self._buffer = ""

    def submit_key(self, text: str) -> EditingValue:
        """Accept the typed key name and move on to entering its value.

        An invalid name drops back to Browsing before ModeError is raised.
        """
        mode = self._mode
        if not isinstance(mode, CreatingKey):
            raise ModeError("Not creating a key")
        try:
            key = validate_key_name(text)
        except ModeError:
            self._reset()
            raise
        self._mode = EditingValue(EditOrigin.INSERT, key, mode.previous_index)
        self._buffer = ""
        return self._mode

    def begin_update(self, entry: Entry | None, selected_index: int) -> EditingValue:
        leaf = self._require_leaf(entry, "update")
        self._mode = EditingValue(EditOrigin.UPDATE, leaf.name, selected_index)
        return self._mode

    def begin_rename(self, entry: Entry | None, selected_index: int) -> RenamingKey:
        leaf = self._require_leaf(entry, "rename")
        self._mode = RenamingKey(leaf, selected_index)
        return self._mode

    def begin_delete(self, entry: Entry | None, selected_index: int) -> ConfirmingDelete:
        leaf = self._require_leaf(entry, "delete")
        self._mode = ConfirmingDelete(leaf, selected_index)
        return self._mode

    def finish(self) -> Mode:
        """Leave the current mode after a submission; returns the mode left."""
        mode = self._mode
        self._reset()
        return mode

    def cancel(self) -> int | None:
        """Abandon the current mode; returns the selection to restore, if any."""
        mode = self._mode
        self._reset()
        if isinstance(mode, Browsing):
            return None
        return mode.previous_index

    def _reset(self) -> None:
        self._mode = Browsing()
        self._buffer = ""

    def _require_browsing(self) -> None:
        if not self.is_browsing:
            raise ModeError("Finish or cancel the current input first")

    def _require_leaf(self, entry: Entry | None, verb: str) -> Entry:
        self._require_browsing()
        if entry is None:
            raise ModeError(f"Nothing selected to {verb}")
        if entry.is_directory:
            raise ModeError(f"Cannot {verb} '{entry.name}': it is a directory")
        return entry
