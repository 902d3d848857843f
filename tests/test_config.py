from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from conftest import API_KEY, SERVER_URL, VALID_CONFIG
from core.config import get_config_file, load_settings
from core.errors import (
    ConfigFileInvalidError,
    ConfigFileMissingError,
    HomeDirectoryNotFoundError,
)


def test_config_file_lives_under_home(isolated_env: Path) -> None:
    assert get_config_file() == isolated_env / ".config" / "fallo" / "config.toml"


def test_load_settings_reads_both_fields(write_config) -> None:
    write_config(VALID_CONFIG)

    settings = load_settings()

    assert settings.api_key == API_KEY
    assert settings.server_url == SERVER_URL


def test_server_url_is_kept_verbatim(write_config) -> None:
    write_config('api_key = "k"\nserver_url = "https://fallo.example/"\n')

    assert load_settings().server_url == "https://fallo.example/"


def test_settings_are_immutable(write_config) -> None:
    write_config(VALID_CONFIG)
    settings = load_settings()

    with pytest.raises(ValidationError):
        settings.api_key = "other"


def test_missing_file(isolated_env: Path) -> None:
    with pytest.raises(ConfigFileMissingError) as excinfo:
        load_settings()

    assert excinfo.value.path == get_config_file()


def test_missing_file_wins_over_environment(monkeypatch) -> None:
    monkeypatch.setenv("FALLO_API_KEY", "from-env")
    monkeypatch.setenv("FALLO_SERVER_URL", "https://env.example")

    with pytest.raises(ConfigFileMissingError):
        load_settings()


@pytest.mark.parametrize(
    "text",
    [
        f'server_url = "{SERVER_URL}"\n',
        f'api_key = "{API_KEY}"\n',
        "",
        'api_key = "k"\nserver_url = ""\n',
        "api_key = 12\nserver_url = true\n",
        "this is = = not toml",
    ],
)
def test_invalid_or_incomplete_file(write_config, text: str) -> None:
    write_config(text)

    with pytest.raises(ConfigFileInvalidError):
        load_settings()


def test_environment_overrides_file(write_config, monkeypatch) -> None:
    write_config(f'server_url = "{SERVER_URL}"\n')
    monkeypatch.setenv("FALLO_API_KEY", "from-env")

    settings = load_settings()

    assert settings.api_key == "from-env"
    assert settings.server_url == SERVER_URL


def test_unknown_keys_are_ignored(write_config) -> None:
    write_config(VALID_CONFIG + 'color = "always"\n')

    assert load_settings().api_key == API_KEY


def test_missing_home_is_its_own_error(monkeypatch) -> None:
    def _no_home(cls) -> Path:
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(Path, "home", classmethod(_no_home))

    with pytest.raises(HomeDirectoryNotFoundError):
        load_settings()
