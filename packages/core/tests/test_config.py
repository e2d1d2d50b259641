"""Tests for configuration loading."""

import pytest

from factorlog_core.config import load_config


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    monkeypatch.delenv("FACTORLOG_STORE", raising=False)
    monkeypatch.delenv("FACTORLOG_STORE_PATH", raising=False)


def test_defaults_applied_when_no_config_file(tmp_path):
    config = load_config(config_path=str(tmp_path / "nonexistent.yml"))
    assert config["store"] == "json"
    assert config["store_path"] is None
    assert config["history_limit"] == 200


def test_config_file_overrides_defaults(tmp_path):
    cfg = tmp_path / ".factorlog.yml"
    cfg.write_text("store: sqlite\nstore_path: data/records.db\nhistory_limit: 50\n")
    config = load_config(config_path=str(cfg))
    assert config["store"] == "sqlite"
    assert config["store_path"] == "data/records.db"
    assert config["history_limit"] == 50


def test_empty_config_file_uses_defaults(tmp_path):
    cfg = tmp_path / ".factorlog.yml"
    cfg.write_text("")
    assert load_config(config_path=str(cfg))["store"] == "json"


def test_cli_overrides_config_file(tmp_path):
    cfg = tmp_path / ".factorlog.yml"
    cfg.write_text("store: sqlite\n")
    config = load_config(config_path=str(cfg), cli_overrides={"store": "memory"})
    assert config["store"] == "memory"


def test_none_cli_overrides_ignored(tmp_path):
    cfg = tmp_path / ".factorlog.yml"
    cfg.write_text("store: sqlite\n")
    config = load_config(config_path=str(cfg), cli_overrides={"store": None})
    assert config["store"] == "sqlite"


def test_env_vars_override_file(tmp_path, monkeypatch):
    cfg = tmp_path / ".factorlog.yml"
    cfg.write_text("store: sqlite\nstore_path: a.db\n")
    monkeypatch.setenv("FACTORLOG_STORE", "json")
    monkeypatch.setenv("FACTORLOG_STORE_PATH", "/tmp/records")
    config = load_config(config_path=str(cfg))
    assert config["store"] == "json"
    assert config["store_path"] == "/tmp/records"


@pytest.mark.parametrize("limit", ["0", "-1", "lots", "true"])
def test_invalid_history_limit_raises(tmp_path, limit):
    cfg = tmp_path / ".factorlog.yml"
    cfg.write_text(f"history_limit: {limit}\n")
    with pytest.raises(ValueError):
        load_config(config_path=str(cfg))


def test_non_mapping_config_raises(tmp_path):
    cfg = tmp_path / ".factorlog.yml"
    cfg.write_text("- just\n- a list\n")
    with pytest.raises(ValueError):
        load_config(config_path=str(cfg))
