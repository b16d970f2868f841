from __future__ import annotations

from pathlib import Path

import pytest

from family_chart import config as config_module
from family_chart.core.exceptions import ConfigError


@pytest.fixture(autouse=True)
def _fresh_config():
    config_module.reset_config()
    yield
    config_module.reset_config()


def test_project_config_loads() -> None:
    cfg = config_module.get_config()
    assert cfg.logging.get("file") == "family_chart.log"
    assert cfg.parser.get("encoding") == "utf-8"
    assert cfg.debug is False


def test_get_config_is_cached() -> None:
    assert config_module.get_config() is config_module.get_config()


def test_env_override(tmp_path: Path, monkeypatch) -> None:
    cfg_file = tmp_path / "custom.yml"
    cfg_file.write_text("debug: true\nparser:\n  encoding: latin-1\n", encoding="utf-8")
    monkeypatch.setenv(config_module.CONFIG_ENV_VAR, str(cfg_file))

    cfg = config_module.get_config()
    assert cfg.debug is True
    assert cfg.parser["encoding"] == "latin-1"
    assert cfg.logging == {}


def test_env_override_missing_file_raises(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv(config_module.CONFIG_ENV_VAR, str(tmp_path / "nope.yml"))
    with pytest.raises(ConfigError):
        config_module.load_config()


def test_non_mapping_config_raises(tmp_path: Path, monkeypatch) -> None:
    cfg_file = tmp_path / "list.yml"
    cfg_file.write_text("- a\n- b\n", encoding="utf-8")
    monkeypatch.setenv(config_module.CONFIG_ENV_VAR, str(cfg_file))
    with pytest.raises(ConfigError):
        config_module.load_config()


def test_loaded_config_records_its_source(tmp_path: Path, monkeypatch) -> None:
    cfg_file = tmp_path / "custom.yml"
    cfg_file.write_text("debug: false\n", encoding="utf-8")
    monkeypatch.setenv(config_module.CONFIG_ENV_VAR, str(cfg_file))
    assert config_module.load_config().source == cfg_file


def test_missing_default_file_runs_on_defaults(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv(config_module.CONFIG_ENV_VAR, raising=False)
    monkeypatch.setattr(config_module, "CONFIG_PATH", tmp_path / "absent.yml")

    cfg = config_module.load_config()
    assert cfg.source is None
    assert cfg.logging == {}
    assert cfg.debug is False
