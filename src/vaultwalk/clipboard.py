"""Clipboard capability."""

from typing import Protocol

from textual.app import App


class Clipboard(Protocol):
    def copy(self, text: str) -> None:
        """Replace the clipboard contents with plain text."""
        ...


class TextualClipboard:
    """Copies through the terminal (OSC 52) via the running Textual app.

    Terminals that do not support OSC 52 silently ignore the request.
    """

    def __init__(self, app: App) -> None:
        self._app = app

    def copy(self, text: str) -> None:
        self._app.copy_to_clipboard(text)
