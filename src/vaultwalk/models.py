"""Domain models."""

from dataclasses import dataclass
from enum import Enum, auto

from vaultwalk.constants import SEPARATOR


@dataclass(frozen=True)
class Entry:
    """One segment of a store path: a directory (prefix) or a leaf secret."""

    name: str
    is_directory: bool = False

    @classmethod
    def decode(cls, raw: str) -> "Entry":
        """Build an Entry from a raw listing key; a trailing separator marks a directory."""
        is_directory = raw.endswith(SEPARATOR)
        return cls(name=raw.removesuffix(SEPARATOR) if is_directory else raw, is_directory=is_directory)

    def encode(self) -> str:
        """Return the raw key form, with the separator re-attached for directories."""
        return self.name + SEPARATOR if self.is_directory else self.name


class Action(Enum):
    """Discrete input actions, independent of the concrete key bindings."""

    MOVE_DOWN = auto()
    MOVE_UP = auto()
    ENTER_DIRECTORY = auto()
    LEAVE_DIRECTORY = auto()
    CLEAR_CACHE = auto()
    COPY_PATH = auto()
    COPY_SECRET = auto()
    ADD_KEY = auto()
    RENAME_KEY = auto()
    UPDATE_VALUE = auto()
    DELETE_KEY = auto()
    OPEN_HELP = auto()
    QUIT = auto()


class Severity(Enum):
    INFO = "info"
    ERROR = "error"


@dataclass(frozen=True)
class StatusMessage:
    """The single line shown at the bottom of the screen."""

    text: str
    severity: Severity = Severity.INFO

    @classmethod
    def error(cls, text: str) -> "StatusMessage":
        return cls(text=text, severity=Severity.ERROR)
