"""Tests for configuration loading."""

from pathlib import Path

import pytest

from alertdesk.config import (
    CONFIG_ENV_VAR,
    DEFAULT_DB_PATH,
    AppConfig,
    ConfigError,
    get_config_path,
    load_config,
    write_template_config,
)
from alertdesk.store import STORAGE_KEY


def test_missing_file_gives_defaults(tmp_path: Path):
    config = load_config(tmp_path / "absent.toml")

    assert config == AppConfig()
    assert config.storage.path == DEFAULT_DB_PATH
    assert config.storage.key == STORAGE_KEY
    assert config.log.level == "WARNING"


def test_reads_sections(tmp_path: Path):
    path = tmp_path / "config.toml"
    path.write_text(
        '[storage]\npath = "~/alerts/test.db"\nkey = "@mine"\n\n[logging]\nlevel = "debug"\n'
    )

    config = load_config(path)

    assert config.storage.path == Path.home() / "alerts" / "test.db"
    assert config.storage.key == "@mine"
    assert config.log.level == "DEBUG"


def test_partial_file_keeps_other_defaults(tmp_path: Path):
    path = tmp_path / "config.toml"
    path.write_text('[logging]\nlevel = "INFO"\n')

    config = load_config(path)

    assert config.storage.key == STORAGE_KEY
    assert config.log.level == "INFO"


@pytest.mark.parametrize(
    "content",
    ["[storage\npath = 1", '[logging]\nlevel = "LOUD"\n', '[storage]\nkey = ""\n'],
)
def test_invalid_file_raises(tmp_path: Path, content: str):
    path = tmp_path / "config.toml"
    path.write_text(content)

    with pytest.raises(ConfigError):
        load_config(path)


def test_template_round_trips(tmp_path: Path):
    path = write_template_config(tmp_path / "sub" / "config.toml")

    assert path.exists()
    assert load_config(path) == AppConfig()


def test_env_var_overrides_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "other.toml"))
    assert get_config_path() == tmp_path / "other.toml"
