"""Inline line-input bar used by every non-browsing mode."""

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Input, Label


class PromptBar(Horizontal):
    """A label and an input, shown only while the user is typing.

    ``open`` reveals the bar and focuses the input; ``close`` hides it again.
    The app closes it whenever the navigator is back in browsing mode, so it
    never outlives the mode that opened it.
    """

    def compose(self) -> ComposeResult:
        yield Label("", id="prompt-label")
        yield Input(id="prompt-input")

    def on_mount(self) -> None:
        self.display = False

    @property
    def is_open(self) -> bool:
        return bool(self.display)

    def open(self, prompt: str, value: str = "") -> None:
        self.query_one("#prompt-label", Label).update(prompt)
        input_widget = self.query_one("#prompt-input", Input)
        input_widget.value = value
        input_widget.cursor_position = len(value)
        self.display = True
        input_widget.focus()

    def close(self) -> None:
        self.display = False
        self.query_one("#prompt-input", Input).value = ""
