"""Navigation controller: the single owner of the browsing session.

Input actions and line submissions come in from the UI; the controller
updates the path, the listing and the input mode, talks to the store (reads
through the response cache) and leaves a status message for the UI to show.
Store and policy errors are raised to the caller, which reports them on the
status line and carries on.
"""

import logging
from enum import Enum, auto

from vaultwalk.cache import ResponseCache
from vaultwalk.clipboard import Clipboard
from vaultwalk.constants import CONFIRM_ANSWER, MAX_DEPTH, SEPARATOR
from vaultwalk.domain.path import VaultPath
from vaultwalk.errors import AppError, StoreError
from vaultwalk.models import Action, Entry, StatusMessage
from vaultwalk.modes import (
    Browsing,
    ConfirmingDelete,
    CreatingKey,
    EditingValue,
    EditOrigin,
    Mode,
    ModeError,
    ModeStateMachine,
    RenamingKey,
    validate_key_name,
)
from vaultwalk.providers import SecretStore
from vaultwalk.session import ListingSession

logger = logging.getLogger(__name__)


class NavigationError(AppError):
    """Raised when a navigation or mutation request cannot be honoured."""


class Request(Enum):
    """What the UI should do after an action has been handled."""

    RENDER = auto()
    OPEN_HELP = auto()
    QUIT = auto()


class NavigationController:
    """Drives PathStack, ResponseCache, ListingSession and ModeStateMachine.

    Args:
        store: Backend implementing the SecretStore protocol.
        path: Path the session starts on; the user cannot walk above it.
        clipboard: Optional clipboard; copy actions report when it is missing.
    """

    def __init__(
        self,
        store: SecretStore,
        path: str | VaultPath,
        clipboard: Clipboard | None = None,
    ) -> None:
        self._store = store
        self.cache = ResponseCache(store)
        self.path = path if isinstance(path, VaultPath) else VaultPath.decode(path)
        self.listing = ListingSession()
        self.machine = ModeStateMachine()
        self.clipboard = clipboard
        self.status: StatusMessage | None = None

    # ------------------------------------------------------------------
    # Read-only views for the UI
    # ------------------------------------------------------------------

    @property
    def mode(self) -> Mode:
        return self.machine.mode

    @property
    def total_items(self) -> int:
        """Rows to render: the listing plus the placeholder while creating."""
        return len(self.listing) + (1 if self.machine.has_placeholder else 0)

    @property
    def prompt_default(self) -> str:
        """Initial text for the line input of the current mode."""
        match self.mode:
            case RenamingKey(entry=entry):
                return entry.name
            case EditingValue(origin=EditOrigin.UPDATE):
                return self.listing.selected_secret or ""
            case _:
                return ""

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Load the listing of the start path."""
        logger.info("starting at %s", self.path.joined())
        self._reload()

    def handle(self, action: Action) -> Request:
        """Apply one input action.  Actions other than quit are inert while typing."""
        if action is Action.QUIT:
            return Request.QUIT
        if not self.machine.is_browsing:
            return Request.RENDER

        match action:
            case Action.MOVE_DOWN:
                self._move(1)
            case Action.MOVE_UP:
                self._move(-1)
            case Action.ENTER_DIRECTORY:
                self._descend()
            case Action.LEAVE_DIRECTORY:
                self._ascend()
            case Action.CLEAR_CACHE:
                self._clear_cache()
            case Action.COPY_PATH:
                self._copy_path()
            case Action.COPY_SECRET:
                self._copy_secret()
            case Action.ADD_KEY:
                self.machine.begin_create(self.listing.selected_index)
                self.listing.select(len(self.listing))
                self.listing.selected_secret = None
            case Action.RENAME_KEY:
                self.machine.begin_rename(self.listing.selected, self.listing.selected_index)
            case Action.UPDATE_VALUE:
                self.machine.begin_update(self.listing.selected, self.listing.selected_index)
            case Action.DELETE_KEY:
                self.machine.begin_delete(self.listing.selected, self.listing.selected_index)
            case Action.OPEN_HELP:
                return Request.OPEN_HELP
        return Request.RENDER

    def type_key(self, text: str) -> None:
        """Track what the user has typed so far for a new key."""
        self.machine.type_key(text)

    def submit(self, text: str) -> None:
        """Complete the line input of the current mode."""
        match self.mode:
            case Browsing():
                return
            case CreatingKey(previous_index=previous):
                self._submit_new_key(text, previous)
            case EditingValue(origin=EditOrigin.INSERT, key=key, previous_index=previous):
                self.machine.finish()
                self._insert(key, text, previous)
            case EditingValue(origin=EditOrigin.UPDATE, key=key):
                self.machine.finish()
                self._update(key, text)
            case RenamingKey(entry=entry):
                self.machine.finish()
                self._rename(entry.name, text)
            case ConfirmingDelete(entry=entry):
                self.machine.finish()
                if text.strip().lower() == CONFIRM_ANSWER:
                    self._delete(entry.name)
                else:
                    self.status = StatusMessage(f"{entry.name} was not deleted")

    def cancel(self) -> None:
        """Abandon the current input and put the selection back."""
        previous = self.machine.cancel()
        if previous is not None:
            self._restore(previous)

    def fail(self, exc: Exception) -> None:
        """Report an error raised while handling an action."""
        if not self.machine.is_browsing:
            self.cancel()
        logger.warning("%s: %s", type(exc).__name__, exc)
        self.status = StatusMessage.error(str(exc))

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def _move(self, delta: int) -> None:
        if self.listing.move(delta):
            self._resolve_secret()

    def _descend(self) -> None:
        entry = self.listing.selected
        if entry is None or not entry.is_directory:
            return
        if not self.path.can_push():
            raise NavigationError(f"Cannot go deeper than {MAX_DEPTH} levels")
        self.path.push(entry)
        try:
            self._reload()
        except StoreError:
            self.path.pop()
            raise

    def _ascend(self) -> None:
        popped = self.path.pop()
        if popped is None:
            return
        try:
            self._reload(select=popped.name)
        except StoreError:
            self.path.push(popped)
            raise

    def _clear_cache(self) -> None:
        self.cache.invalidate_all()
        selected = self.listing.selected
        self._reload(select=selected.name if selected else None, allow_cache=False)
        self.status = StatusMessage("Cache cleared")

    def _copy_path(self) -> None:
        selected = self.listing.selected
        text = self.path.joined() + (selected.encode() if selected else "")
        if self._copy(text):
            self.status = StatusMessage(f"Copied {text}")

    def _copy_secret(self) -> None:
        selected = self.listing.selected
        if selected is None or selected.is_directory or self.listing.selected_secret is None:
            raise NavigationError("No secret selected")
        if self._copy(self.listing.selected_secret):
            self.status = StatusMessage(f"Copied secret of {selected.name}")

    def _copy(self, text: str) -> bool:
        if self.clipboard is None:
            self.status = StatusMessage.error("Clipboard is not available")
            return False
        try:
            self.clipboard.copy(text)
        except OSError as exc:
            logger.debug("clipboard copy failed", exc_info=True)
            self.status = StatusMessage.error(f"Clipboard is not available: {exc}")
            return False
        return True

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def _submit_new_key(self, text: str, previous: int) -> None:
        try:
            key = validate_key_name(text)
            if key in self.listing.names():
                raise ModeError(f"'{key}' already exists, use update instead")
            self.machine.submit_key(key)
        except ModeError:
            self.machine.cancel()
            self._restore(previous)
            raise

    def _insert(self, key: str, value: str, previous: int) -> None:
        try:
            self._store.write(self.path.child(key), value)
        except StoreError:
            self._restore(previous)
            raise
        self._refresh_nested(key)
        logger.info("created %s", self.path.child(key))
        # A nested key shows up as its first directory.
        self._reload(select=key.split(SEPARATOR, 1)[0], allow_cache=False)
        self.status = StatusMessage(f"Created {key}")

    def _update(self, key: str, value: str) -> None:
        self._store.write(self.path.child(key), value)
        logger.info("updated %s", self.path.child(key))
        self._reload(select=key, allow_cache=False)
        self.status = StatusMessage(f"Updated {key}")

    def _rename(self, old: str, text: str) -> None:
        """Copy the value to the new key, then delete the old one.

        The two writes are not atomic.  If the delete fails the new key has
        already been written; both keys are left in place and the failure is
        reported.
        """
        new = validate_key_name(text)
        if new == old:
            self.status = StatusMessage(f"{old} unchanged")
            return
        if new in self.listing.names():
            raise NavigationError(f"Cannot rename {old}: '{new}' already exists")

        value = self.cache.get_value(self.path.child(old), allow_cache=False)
        self._store.write(self.path.child(new), value or "")
        self._refresh_nested(new)
        try:
            self._store.delete(self.path.child(old))
        except StoreError as exc:
            logger.error("rename left both %s and %s in place", old, new)
            self._reload(select=new, allow_cache=False)
            raise NavigationError(
                f"Wrote {new} but could not delete {old}; both keys exist: {exc}"
            ) from exc
        logger.info("renamed %s to %s", self.path.child(old), self.path.child(new))
        self._reload(select=new.split(SEPARATOR, 1)[0], allow_cache=False)
        self.status = StatusMessage(f"Renamed {old} to {new}")

    def _delete(self, name: str) -> None:
        self._store.delete(self.path.child(name))
        logger.info("deleted %s", self.path.child(name))
        self._reload(select=name, allow_cache=False)
        # Never leave the user in an empty directory above the root floor.
        while self.listing.is_empty:
            vacated = self.path.pop()
            if vacated is None:
                break
            self._reload(select=vacated.name, allow_cache=False)
        self.status = StatusMessage(f"Deleted {name}")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _reload(self, select: str | None = None, allow_cache: bool = True) -> None:
        """Fetch the listing of the current path and resolve the selection."""
        keys = self.cache.list_keys(self.path.joined(), allow_cache=allow_cache)
        self.listing.replace([Entry.decode(key) for key in keys], select=select)
        self._resolve_secret(allow_cache=allow_cache)

    def _refresh_nested(self, key: str) -> None:
        """Re-read cached listings and value below this directory touched by writing ``key``."""
        *directories, _ = key.split(SEPARATOR)
        prefix = self.path.joined()
        for directory in directories:
            prefix += directory + SEPARATOR
            if ("LIST", prefix) in self.cache:
                self.cache.list_keys(prefix, allow_cache=False)
        if directories and ("GET", self.path.child(key)) in self.cache:
            self.cache.get_value(self.path.child(key), allow_cache=False)

    def _resolve_secret(self, allow_cache: bool = True) -> None:
        self.listing.selected_secret = None
        entry = self.listing.selected
        if entry is None or entry.is_directory:
            return
        self.listing.selected_secret = self.cache.get_value(
            self.path.child(entry.name), allow_cache=allow_cache
        )

    def _restore(self, index: int) -> None:
        self.listing.restore(index)
        self._resolve_secret()
