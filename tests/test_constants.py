from qrsignal.constants import PROTOCOL_TYPES, URL_TYPES, QrType, Signal


def test_signal_display_order():
    ordered = sorted(Signal, key=lambda s: s.rank)
    assert ordered == [Signal.EMERALD, Signal.INDIGO, Signal.AMBER, Signal.AMETHYST, Signal.CRIMSON]


def test_type_labels():
    assert str(QrType.WIFI) == "Wi-Fi"
    assert QrType("App Download") is QrType.APP_DOWNLOAD
    assert str(Signal.AMBER) == "AMBER"


def test_branch_groups_are_disjoint():
    assert not URL_TYPES & PROTOCOL_TYPES
    assert QrType.FILE not in URL_TYPES | PROTOCOL_TYPES
