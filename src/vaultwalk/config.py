"""Config file loading, credential resolution, and persistence.

Schema on disk (~/.config/vaultwalk/config.json):

    {
        "address": "https://vault.example.com",
        "path": "secret/",
        "token_file": "~/.vault-token",
        "theme": "textual-dark"
    }

Every field is optional.  Keys prefixed with "_" are reserved (e.g.
"_example") and are stripped on load.

Settings are resolved per field: explicit command-line value first, then the
environment (VAULT_ADDR / VAULT_TOKEN), then the config file, then the
built-in default.
"""

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, ValidationError

from vaultwalk.constants import ADDRESS_ENV_VAR, DEFAULT_PATH, DEFAULT_TOKEN_FILE, TOKEN_ENV_VAR
from vaultwalk.errors import VaultwalkError

logger = logging.getLogger(__name__)

CONFIG_PATH = Path("~/.config/vaultwalk/config.json").expanduser()

_README_PATH = Path("~/.config/vaultwalk/README.md").expanduser()

_README_CONTENT = """\
# vaultwalk configuration

Edit `config.json` in this directory to set defaults for vaultwalk.
Command-line flags and the VAULT_ADDR / VAULT_TOKEN environment variables
take precedence over anything set here.

## Schema

```json
{
    "address": "https://vault.example.com",
    "path": "secret/",
    "token_file": "~/.vault-token",
    "theme": "textual-dark"
}
```

Keys prefixed with `_` (e.g. `_example`) are ignored by vaultwalk.
"""


class FileConfig(BaseModel):
    """Defaults read from config.json."""

    address: str | None = None
    path: str | None = None
    token_file: str | None = None
    theme: str | None = None


class Settings(BaseModel):
    """Everything needed to open a session against a store."""

    address: str
    token: str
    path: str = DEFAULT_PATH


class ConfigError(VaultwalkError):
    """Raised when config.json is malformed or credentials cannot be resolved."""


def load_config() -> FileConfig:
    """Load and validate the config file.

    Creates the config directory, an empty config.json, and a README on first
    run.  Returns an empty FileConfig if the file is empty.  Raises ConfigError
    if the file exists but is malformed.
    """
    if not CONFIG_PATH.exists():
        _bootstrap()
        return FileConfig()

    text = CONFIG_PATH.read_text()
    if not text.strip():
        return FileConfig()

    try:
        raw: object = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"config.json is not valid JSON: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError("config.json must be a JSON object at the top level")

    # Strip reserved/comment keys.
    fields = {k: v for k, v in raw.items() if not k.startswith("_")}
    try:
        return FileConfig.model_validate(fields)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config.json: {exc}") from exc


def save_config(config: FileConfig) -> None:
    """Persist config to disk, creating directories as needed."""
    CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_PATH.write_text(json.dumps(config.model_dump(exclude_none=True), indent=2))


def read_token_file(path: str | Path) -> str:
    """Return the token stored in a credential file, without surrounding whitespace."""
    token_path = Path(path).expanduser()
    try:
        token = token_path.read_text().strip()
    except OSError as exc:
        raise ConfigError(f"Could not read token file {token_path}: {exc.strerror}") from exc
    if not token:
        raise ConfigError(f"Token file {token_path} is empty")
    return token


def resolve_settings(
    address: str | None = None,
    token: str | None = None,
    path: str | None = None,
    environ: Mapping[str, str] | None = None,
    file_config: FileConfig | None = None,
) -> Settings:
    """Merge flags, environment, config file and defaults into Settings.

    Raises ConfigError when no address is available from any source or the
    token cannot be read.
    """
    env = os.environ if environ is None else environ
    file_config = file_config if file_config is not None else load_config()

    address = address or env.get(ADDRESS_ENV_VAR) or file_config.address
    if not address:
        raise ConfigError(
            f"No Vault address: pass --address, set {ADDRESS_ENV_VAR}, or add it to {CONFIG_PATH}"
        )

    token = token or env.get(TOKEN_ENV_VAR)
    if not token:
        token = read_token_file(file_config.token_file or DEFAULT_TOKEN_FILE)

    return Settings(
        address=address,
        token=token.strip(),
        path=path or file_config.path or DEFAULT_PATH,
    )


def _bootstrap() -> None:
    """Create the config directory, an empty config.json, and a README."""
    CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_PATH.write_text("{}\n")
    if not _README_PATH.exists():
        _README_PATH.write_text(_README_CONTENT)


def load_theme() -> str | None:
    """Return the saved theme name, or None when unset or the config is unreadable."""
    try:
        return load_config().theme
    except ConfigError as exc:
        logger.warning("ignoring saved theme: %s", exc)
        return None


def save_theme(theme: str) -> None:
    """Record the theme in config.json, keeping every other setting."""
    try:
        config = load_config()
    except ConfigError as exc:
        logger.warning("not saving theme: %s", exc)
        return
    if config.theme != theme:
        save_config(config.model_copy(update={"theme": theme}))
