"""Help overlay listing the key bindings."""

from rich.table import Table
from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Static

from vaultwalk.constants import APP_TITLE, HELP_SECTIONS


def help_table() -> Table:
    """Two-column grid of keys and what they do, one block per section."""
    table = Table.grid(padding=(0, 3))
    table.add_column(style="bold cyan", no_wrap=True)
    table.add_column()
    for title, rows in HELP_SECTIONS:
        if table.row_count:
            table.add_row("", "")
        table.add_row(Text(title, style="bold underline"), "")
        for keys, description in rows:
            table.add_row(keys, description)
    return table


class HelpScreen(ModalScreen[None]):
    """Modal overlay; any of its bindings or a click closes it."""

    BINDINGS = [
        Binding("escape,?,q", "dismiss", show=False),
    ]

    def compose(self) -> ComposeResult:
        with Vertical(id="help-container"):
            yield Static(Text(f"{APP_TITLE} keys", style="bold"), id="help-title")
            yield Static(help_table(), id="help-text")

    def on_click(self) -> None:
        self.dismiss()
