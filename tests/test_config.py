"""Unit tests for config loading, credential resolution, and persistence."""

import json
from pathlib import Path

import pytest

from vaultwalk.config import (
    ConfigError,
    FileConfig,
    load_config,
    load_theme,
    read_token_file,
    resolve_settings,
    save_config,
    save_theme,
)
from vaultwalk.constants import DEFAULT_PATH


def _write(path: Path, data: object) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data))


@pytest.fixture
def cfg_path(tmp_path: Path, monkeypatch) -> Path:
    path = tmp_path / "config.json"
    monkeypatch.setattr("vaultwalk.config.CONFIG_PATH", path)
    monkeypatch.setattr("vaultwalk.config._README_PATH", tmp_path / "README.md")
    return path


class TestLoadConfig:
    def test_returns_empty_when_file_missing(self, tmp_path: Path, cfg_path: Path):
        """
        Given no config file exists
        When load_config is called
        Then it returns an empty FileConfig and creates the file and README
        """
        result = load_config()

        assert result == FileConfig()
        assert cfg_path.exists()
        assert (tmp_path / "README.md").exists()

    def test_bootstrapped_file_is_valid_json(self, cfg_path: Path):
        load_config()
        assert json.loads(cfg_path.read_text()) == {}

    def test_blank_file_returns_empty(self, cfg_path: Path):
        cfg_path.write_text("   \n")
        assert load_config() == FileConfig()

    def test_valid_config_is_parsed(self, cfg_path: Path):
        """
        Given a config.json setting every field
        When load_config is called
        Then each field is carried into the FileConfig
        """
        _write(
            cfg_path,
            {"address": "https://vault.test", "path": "kv/", "token_file": "/tmp/tok"},
        )

        result = load_config()

        assert result.address == "https://vault.test"
        assert result.path == "kv/"
        assert result.token_file == "/tmp/tok"

    def test_underscore_keys_are_stripped(self, cfg_path: Path):
        """
        Given config.json contains a key starting with '_'
        When load_config is called
        Then that key is ignored and the rest is loaded
        """
        _write(cfg_path, {"_example": {"address": "x"}, "path": "kv/"})
        assert load_config() == FileConfig(path="kv/")

    def test_invalid_json_raises_config_error(self, cfg_path: Path):
        cfg_path.write_text("{not valid json}")
        with pytest.raises(ConfigError, match="not valid JSON"):
            load_config()

    def test_non_object_root_raises_config_error(self, cfg_path: Path):
        _write(cfg_path, [])
        with pytest.raises(ConfigError, match="top level"):
            load_config()

    def test_wrong_field_type_raises_config_error(self, cfg_path: Path):
        _write(cfg_path, {"address": 42})
        with pytest.raises(ConfigError, match="Invalid config.json"):
            load_config()


class TestSaveConfig:
    def test_round_trip(self, cfg_path: Path):
        original = FileConfig(address="https://vault.test", path="kv/")
        save_config(original)
        assert load_config() == original

    def test_unset_fields_are_omitted(self, cfg_path: Path):
        save_config(FileConfig(path="kv/"))
        assert json.loads(cfg_path.read_text()) == {"path": "kv/"}

    def test_creates_parent_directory(self, tmp_path: Path, monkeypatch):
        nested = tmp_path / "nested" / "dir" / "config.json"
        monkeypatch.setattr("vaultwalk.config.CONFIG_PATH", nested)
        save_config(FileConfig())
        assert nested.exists()


class TestReadTokenFile:
    def test_strips_whitespace(self, tmp_path: Path):
        token_file = tmp_path / "token"
        token_file.write_text("  s.abc123\n")
        assert read_token_file(token_file) == "s.abc123"

    def test_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="Could not read token file"):
            read_token_file(tmp_path / "absent")

    def test_empty_file_raises(self, tmp_path: Path):
        token_file = tmp_path / "token"
        token_file.write_text("\n")
        with pytest.raises(ConfigError, match="empty"):
            read_token_file(token_file)


class TestResolveSettings:
    def test_flags_win_over_everything(self):
        """
        Given an address and token in flags, environment and config file
        When settings are resolved
        Then the flag values are used
        """
        settings = resolve_settings(
            address="https://flag",
            token="flag-token",
            path="flag/",
            environ={"VAULT_ADDR": "https://env", "VAULT_TOKEN": "env-token"},
            file_config=FileConfig(address="https://file", path="file/"),
        )
        assert settings.address == "https://flag"
        assert settings.token == "flag-token"
        assert settings.path == "flag/"

    def test_environment_wins_over_file(self):
        settings = resolve_settings(
            environ={"VAULT_ADDR": "https://env", "VAULT_TOKEN": "env-token\n"},
            file_config=FileConfig(address="https://file", path="file/"),
        )
        assert settings.address == "https://env"
        assert settings.token == "env-token"
        assert settings.path == "file/"

    def test_token_file_from_config(self, tmp_path: Path):
        """
        Given no token flag or VAULT_TOKEN
        When settings are resolved with a token_file in the config
        Then the token is read from that file
        """
        token_file = tmp_path / "token"
        token_file.write_text("file-token")
        settings = resolve_settings(
            environ={},
            file_config=FileConfig(address="https://file", token_file=str(token_file)),
        )
        assert settings.token == "file-token"
        assert settings.path == DEFAULT_PATH

    def test_missing_address_raises(self):
        with pytest.raises(ConfigError, match="No Vault address"):
            resolve_settings(token="t", environ={}, file_config=FileConfig())

    def test_unreadable_token_file_raises(self, tmp_path: Path):
        with pytest.raises(ConfigError):
            resolve_settings(
                environ={"VAULT_ADDR": "https://env"},
                file_config=FileConfig(token_file=str(tmp_path / "absent")),
            )


class TestTheme:
    def test_round_trip(self, cfg_path: Path):
        """
        Given a config.json with an address set
        When a theme is saved and loaded back
        Then the theme is returned and the address is kept
        """
        _write(cfg_path, {"address": "https://vault.test"})
        assert load_theme() is None

        save_theme("nord")

        assert load_theme() == "nord"
        assert load_config().address == "https://vault.test"

    def test_invalid_config_is_ignored(self, cfg_path: Path):
        cfg_path.write_text("[broken")
        assert load_theme() is None
        save_theme("nord")
        assert cfg_path.read_text() == "[broken"
