"""Main application entry point."""

from collections.abc import Callable

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, Input

from vaultwalk.clipboard import TextualClipboard
from vaultwalk.config import load_theme, save_theme
from vaultwalk.constants import APP_TITLE, DEFAULT_PATH
from vaultwalk.controller import NavigationController, Request
from vaultwalk.errors import AppError, StoreError
from vaultwalk.models import Action
from vaultwalk.providers import MockStore, SecretStore
from vaultwalk.screens.help import HelpScreen
from vaultwalk.widgets.listing_view import ListingView
from vaultwalk.widgets.main_view import MainView
from vaultwalk.widgets.prompt_bar import PromptBar
from vaultwalk.widgets.status_bar import StatusBar


class VaultwalkApp(App):
    """Walk a Vault key-value store like a directory tree."""

    CSS_PATH = "app.tcss"
    TITLE = APP_TITLE

    BINDINGS = [
        Binding("q", "navigate('quit')", "Quit"),
        Binding("ctrl+c", "navigate('quit')", show=False, priority=True),
        Binding("?", "navigate('open_help')", "Help"),
        Binding("j", "navigate('move_down')", show=False),
        Binding("down", "navigate('move_down')", show=False),
        Binding("k", "navigate('move_up')", show=False),
        Binding("up", "navigate('move_up')", show=False),
        Binding("l", "navigate('enter_directory')", show=False),
        Binding("right", "navigate('enter_directory')", show=False),
        Binding("enter", "navigate('enter_directory')", show=False),
        Binding("h", "navigate('leave_directory')", show=False),
        Binding("left", "navigate('leave_directory')", show=False),
        Binding("backspace", "navigate('leave_directory')", show=False),
        Binding("a", "navigate('add_key')", "Add"),
        Binding("r", "navigate('rename_key')", "Rename"),
        Binding("u", "navigate('update_value')", "Update"),
        Binding("d", "navigate('delete_key')", "Delete"),
        Binding("c", "navigate('clear_cache')", "Reload"),
        Binding("p", "navigate('copy_path')", "Copy path"),
        Binding("y", "navigate('copy_secret')", "Copy"),
        Binding("escape", "cancel_input", show=False),
    ]

    def __init__(
        self,
        store: SecretStore | None = None,
        path: str = DEFAULT_PATH,
        _use_config: bool = False,
    ) -> None:
        super().__init__()
        self._use_config = _use_config
        store = store if store is not None else MockStore()
        self._using_mock = isinstance(store, MockStore)
        self._controller = NavigationController(
            store,
            path,
            clipboard=TextualClipboard(self),
        )

    @property
    def controller(self) -> NavigationController:
        return self._controller

    def compose(self) -> ComposeResult:
        yield Header()
        yield MainView(self._controller, id="main")
        yield Footer()

    def on_mount(self) -> None:
        if self._use_config:
            saved_theme = load_theme()
            if saved_theme:
                self.theme = saved_theme
        self._update_subtitle()
        self._guarded(self._controller.start)

    def watch_theme(self, theme: str) -> None:
        """Persist theme changes whenever the theme is changed."""
        if self._use_config:
            save_theme(theme)

    def _update_subtitle(self) -> None:
        backend = "mock" if self._using_mock else "Vault"
        self.sub_title = f"{self._controller.path.joined()} · {backend}"

    def _guarded(self, handler: Callable[..., Request | None], *args: object) -> Request:
        """Run one controller call, turning store and policy errors into a status line."""
        try:
            return handler(*args) or Request.RENDER
        except (StoreError, AppError) as exc:
            self._controller.fail(exc)
            return Request.RENDER
        finally:
            self._sync()

    def _sync(self) -> None:
        """Bring every widget in line with the controller's state."""
        controller = self._controller
        prompt = self.query_one("#prompt", PromptBar)
        if controller.machine.is_browsing:
            if prompt.is_open:
                prompt.close()
            self.query_one("#listing", ListingView).focus()
        elif not prompt.is_open:
            prompt.open(controller.mode.prompt, controller.prompt_default)
        self.query_one("#status", StatusBar).show(controller.status)
        self.query_one("#listing", ListingView).refresh()
        self._update_subtitle()

    def action_navigate(self, name: str) -> None:
        """Dispatch a key binding to the controller as an Action."""
        request = self._guarded(self._controller.handle, Action[name.upper()])
        if request is Request.QUIT:
            self.exit()
        elif request is Request.OPEN_HELP:
            self.push_screen(HelpScreen())

    def action_cancel_input(self) -> None:
        if not self._controller.machine.is_browsing:
            self._guarded(self._controller.cancel)

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "prompt-input":
            self._controller.type_key(event.value)
            self.query_one("#listing", ListingView).refresh()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id != "prompt-input":
            return
        event.stop()
        # Close first so a follow-up mode (key -> value) reopens with a fresh prompt.
        self.query_one("#prompt", PromptBar).close()
        self._guarded(self._controller.submit, event.value)


def main() -> None:
    from vaultwalk.cli import app

    app()


if __name__ == "__main__":
    main()
