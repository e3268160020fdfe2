"""Global pytest configuration."""

from __future__ import annotations

import pytest

from qrsignal.analyzer import QrAnalyzer, WebsiteAnalyzer
from qrsignal.rules import DEFAULT_RULES


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """Keep tests independent of the developer's environment and ./config."""
    for name in (
        "QRSIGNAL_CONFIG_DIR",
        "QRSIGNAL_HISTORY_SIZE",
        "QRSIGNAL_VERIFY_DESTINATION",
        "QRSIGNAL_CACHE_SIZE",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("QRSIGNAL_CONFIG_DIR", str(tmp_path / "config"))


@pytest.fixture
def rules():
    return DEFAULT_RULES


@pytest.fixture
def analyzer(rules):
    """Analyzer with the default rule tables and no memoization."""
    return QrAnalyzer(rules)


@pytest.fixture
def website(rules):
    return WebsiteAnalyzer(rules)
