"""Command-line entry point: resolve credentials, set up logging, run the app."""

import logging
from pathlib import Path
from typing import Optional

import typer
from textual.logging import TextualHandler

from vaultwalk.app import VaultwalkApp
from vaultwalk.config import ConfigError, resolve_settings
from vaultwalk.constants import ADDRESS_ENV_VAR, APP_TITLE, DEFAULT_PATH, TOKEN_ENV_VAR
from vaultwalk.providers_vault import VaultStore

app = typer.Typer(
    help="Browse and edit a Vault key-value store like a directory tree.",
    add_completion=False,
)

# Module-level defaults for Typer arguments
_PATH_HELP = f"Path to start on; defaults to the config file or {DEFAULT_PATH}"
_ADDRESS_HELP = f"Vault address; defaults to ${ADDRESS_ENV_VAR}"
_TOKEN_HELP = f"Vault token; defaults to ${TOKEN_ENV_VAR} or ~/.vault-token"

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(log_file: Path | None = None, verbose: bool = False) -> None:
    """Route log records away from the terminal the UI is drawing on.

    Records go to the Textual devtools console, or to ``log_file`` when given.
    """
    handler: logging.Handler = (
        logging.FileHandler(log_file, encoding="utf-8") if log_file else TextualHandler()
    )
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.DEBUG if verbose else logging.INFO)
    # httpx logs every request at INFO.
    logging.getLogger("httpx").setLevel(logging.WARNING)


@app.command()
def main(
    path: Optional[str] = typer.Argument(None, help=_PATH_HELP),  # noqa: B008
    address: Optional[str] = typer.Option(  # noqa: B008
        None, "--address", "-a", help=_ADDRESS_HELP
    ),
    token: Optional[str] = typer.Option(None, "--token", "-t", help=_TOKEN_HELP),  # noqa: B008
    mock: bool = typer.Option(  # noqa: B008
        False, "--mock", help="Browse built-in sample data instead of a server"
    ),
    log_file: Optional[Path] = typer.Option(  # noqa: B008
        None, "--log-file", help="Write logs to this file"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug messages"),  # noqa: B008
) -> None:
    """Open an interactive session on PATH."""
    configure_logging(log_file, verbose)

    if mock:
        VaultwalkApp(path=path or DEFAULT_PATH, _use_config=True).run()
        return

    try:
        settings = resolve_settings(address=address, token=token, path=path)
    except ConfigError as exc:
        typer.echo(f"{APP_TITLE}: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    store = VaultStore(settings)
    try:
        VaultwalkApp(store, settings.path, _use_config=True).run()
    finally:
        store.close()


if __name__ == "__main__":
    app()
