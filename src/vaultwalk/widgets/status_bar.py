"""One-line status bar at the bottom of the screen."""

from textual.widgets import Static

from vaultwalk.models import Severity, StatusMessage


class StatusBar(Static):
    """Shows the most recent informational or error message.

    Only one message is visible at a time; showing the message already on
    screen again is a no-op so repeated errors do not flicker.
    """

    def __init__(self, *, id: str | None = None, classes: str | None = None) -> None:
        super().__init__("", id=id, classes=classes)
        self.message: StatusMessage | None = None

    def show(self, message: StatusMessage | None) -> bool:
        """Display ``message``; returns False when it was already displayed."""
        if message == self.message:
            return False
        self.message = message
        self.set_class(message is not None and message.severity is Severity.ERROR, "error")
        self.update(message.text if message else "")
        return True
