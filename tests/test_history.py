"""Tests for the bounded scan history."""

import pytest

from qrsignal.history import ScanHistory


def _results(analyzer, count):
    return [analyzer.analyze(f"tel:{i}") for i in range(count)]


def test_newest_first(analyzer):
    history = ScanHistory(capacity=10)
    first, second = _results(analyzer, 2)
    history.add(first)
    history.add(second)
    assert history.items() == [second, first]
    assert history.latest() is second


def test_evicts_oldest(analyzer):
    history = ScanHistory(capacity=10)
    results = _results(analyzer, 12)
    for result in results:
        history.add(result)
    assert len(history) == 10
    assert history.items()[0] is results[-1]
    assert history.items()[-1] is results[2]


def test_clear_and_empty_latest(analyzer):
    history = ScanHistory()
    assert history.capacity == 20
    assert history.latest() is None
    history.add(analyzer.analyze("tel:1"))
    history.clear()
    assert len(history) == 0


def test_to_dicts(analyzer):
    history = ScanHistory()
    history.add(analyzer.analyze("https://bit.ly/x"))
    history.add(analyzer.analyze("WIFI:S:Home;;"))
    dicts = history.to_dicts()
    assert [d["type"] for d in dicts] == ["Wi-Fi", "Website"]
    assert list(history)[0].type.value == "Wi-Fi"


@pytest.mark.parametrize("capacity", [0, -1, "10", True, 2.5])
def test_invalid_capacity(capacity):
    with pytest.raises(ValueError):
        ScanHistory(capacity=capacity)
