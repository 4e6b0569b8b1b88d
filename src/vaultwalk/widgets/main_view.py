"""Main view: the listing stacked above the prompt and status lines."""

from textual.app import ComposeResult
from textual.containers import Vertical

from vaultwalk.controller import NavigationController
from vaultwalk.widgets.listing_view import ListingView
from vaultwalk.widgets.prompt_bar import PromptBar
from vaultwalk.widgets.status_bar import StatusBar


class MainView(Vertical):
    """Composes the listing, the inline prompt and the status bar into one panel."""

    def __init__(self, controller: NavigationController, *, id: str | None = None) -> None:
        super().__init__(id=id)
        self._controller = controller

    def compose(self) -> ComposeResult:
        yield ListingView(self._controller, id="listing")
        yield PromptBar(id="prompt")
        yield StatusBar(id="status")
