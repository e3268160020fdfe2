"""Tests for configuration loading and validation."""

import logging

from qrsignal.config import Config, load_config, validate_config
from qrsignal.rules import DEFAULT_RULES


def test_load_config_defaults(tmp_path):
    config = load_config()
    assert config.history_size == 20
    assert config.verify_destination is False
    assert config.cache_size == 0
    assert config.log_level == "INFO"
    assert config.rules == DEFAULT_RULES
    assert validate_config(config) == []


def test_load_config_from_env(monkeypatch, tmp_path):
    config_dir = tmp_path / "conf"
    config_dir.mkdir()
    (config_dir / "rules.yaml").write_text("shorteners: [cutt.ly]\n")
    monkeypatch.setenv("QRSIGNAL_CONFIG_DIR", str(config_dir))
    monkeypatch.setenv("QRSIGNAL_HISTORY_SIZE", "10")
    monkeypatch.setenv("QRSIGNAL_VERIFY_DESTINATION", "true")
    monkeypatch.setenv("QRSIGNAL_CACHE_SIZE", "64")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = load_config()
    assert config.config_dir == config_dir
    assert config.rules_path == config_dir / "rules.yaml"
    assert config.history_size == 10
    assert config.verify_destination is True
    assert config.cache_size == 64
    assert config.log_level == "DEBUG"
    assert config.rules.shorteners == ("cutt.ly",)


def test_invalid_integer_falls_back(monkeypatch, caplog):
    monkeypatch.setenv("QRSIGNAL_HISTORY_SIZE", "lots")
    with caplog.at_level(logging.WARNING):
        config = load_config()
    assert config.history_size == 20
    assert "QRSIGNAL_HISTORY_SIZE" in caplog.text


def test_validate_config_errors():
    config = Config(history_size=5, cache_size=-1, log_level="loud")
    errors = validate_config(config)
    assert len(errors) == 3
    assert any("HISTORY_SIZE" in e for e in errors)
    assert any("CACHE_SIZE" in e for e in errors)
    assert any("LOG_LEVEL" in e for e in errors)


def test_build_collaborators():
    config = Config(history_size=12, cache_size=8, verify_destination=True)
    analyzer = config.build_analyzer()
    assert analyzer.cache.max_entries == 8
    assert analyzer.website.verify_destination is True
    assert config.build_history().capacity == 12
