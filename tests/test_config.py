"""Tests for configuration loading and validation."""

from pathlib import Path

import pytest
import yaml

from mod_updater.config.settings import UpdaterConfig
from mod_updater.exceptions import ConfigError


def test_defaults():
    config = UpdaterConfig()

    assert config.manifest_url == "https://axolotlsmp.com/api/mods"
    assert config.content_url == "https://axolotlsmp.com/cdn"
    assert config.backup_path == Path.home() / "AxolotlSMP_Backups" / "mods_backup"
    assert config.instance_keyword == "axolotlsmp"
    assert config.log_file is None


def test_yaml_round_trip(tmp_path):
    path = tmp_path / "conf" / "config.yaml"
    original = UpdaterConfig(base_url="http://localhost:8000", backup_root=tmp_path / "b",
                             log_file=tmp_path / "log" / "updater.log")

    original.to_yaml(path)
    loaded = UpdaterConfig.from_yaml(path)

    assert loaded == original
    assert yaml.safe_load(path.read_text())["backup_root"] == str(tmp_path / "b")


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")

    assert UpdaterConfig.from_yaml(path) == UpdaterConfig()


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        UpdaterConfig.from_yaml(tmp_path / "nope.yaml")


def test_invalid_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("base_url: [unclosed")

    with pytest.raises(ConfigError, match="Invalid YAML"):
        UpdaterConfig.from_yaml(path)


def test_non_mapping_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- just\n- a list\n")

    with pytest.raises(ConfigError, match="mapping"):
        UpdaterConfig.from_yaml(path)


@pytest.mark.parametrize("field, value", [
    ("base_url", "ftp://mods.example.com"),
    ("backup_name", "../escape"),
    ("log_level", "LOUD"),
    ("request_timeout", 0),
    ("instance_keyword", "  "),
])
def test_invalid_values(tmp_path, field, value):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({field: value}))

    with pytest.raises(ConfigError, match="Invalid configuration"):
        UpdaterConfig.from_yaml(path)


def test_normalisation(tmp_path):
    config = UpdaterConfig(
        base_url="https://mods.example.com/",
        manifest_endpoint="api/mods/",
        backup_root="~/somewhere",
        log_level="debug",
    )

    assert config.base_url == "https://mods.example.com"
    assert config.manifest_endpoint == "/api/mods"
    assert config.backup_root == Path.home() / "somewhere"
    assert config.log_level == "DEBUG"


def test_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("MOD_UPDATER_BASE_URL", "http://10.0.0.5:8080")
    monkeypatch.setenv("MOD_UPDATER_BACKUP_ROOT", str(tmp_path))
    monkeypatch.setenv("MOD_UPDATER_INSTANCE_KEYWORD", "mypack")
    monkeypatch.delenv("MOD_UPDATER_LOG_LEVEL", raising=False)

    config = UpdaterConfig.from_env()

    assert config.base_url == "http://10.0.0.5:8080"
    assert config.backup_root == tmp_path
    assert config.instance_keyword == "mypack"
    assert config.log_level == "INFO"


def test_from_env_invalid(monkeypatch):
    monkeypatch.setenv("MOD_UPDATER_LOG_LEVEL", "chatty")

    with pytest.raises(ConfigError):
        UpdaterConfig.from_env()


def test_load_prefers_file(tmp_path):
    path = tmp_path / "config.yaml"
    UpdaterConfig(base_url="http://file.example").to_yaml(path)

    assert UpdaterConfig.load(path).base_url == "http://file.example"


def test_load_explicit_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        UpdaterConfig.load(tmp_path / "missing.yaml")


def test_load_falls_back_to_env(monkeypatch, tmp_path):
    monkeypatch.setattr("mod_updater.config.settings.DEFAULT_CONFIG_PATH", tmp_path / "none.yaml")
    monkeypatch.setenv("MOD_UPDATER_BASE_URL", "http://env.example")

    assert UpdaterConfig.load().base_url == "http://env.example"
