"""Centralized constants for qrsignal.

Enums shared by the classifier, the analyzers and the presentation helpers.
"""

from enum import Enum


class QrType(str, Enum):
    """Structural type of a decoded QR payload (value is the display label)."""

    WEBSITE = "Website"
    PAYMENT = "Payment"
    WIFI = "Wi-Fi"
    CONTACT = "Contact"
    EMAIL = "Email"
    PHONE = "Phone"
    APP_DOWNLOAD = "App Download"
    FILE = "File"
    UNKNOWN = "Unknown"

    def __str__(self) -> str:
        return self.value


URL_TYPES = frozenset({QrType.WEBSITE, QrType.PAYMENT, QrType.APP_DOWNLOAD})
PROTOCOL_TYPES = frozenset({QrType.WIFI, QrType.CONTACT, QrType.EMAIL, QrType.PHONE})


class Signal(str, Enum):
    """Risk signal assigned to a payload."""

    EMERALD = "EMERALD"  # Transparent, nothing unusual
    INDIGO = "INDIGO"  # Device-local action (join Wi-Fi, call, email)
    AMBER = "AMBER"  # Obscured: shortener or tracking
    AMETHYST = "AMETHYST"  # Transactional: login or payment surface
    CRIMSON = "CRIMSON"  # Critical: IP logger, malformed, embedded file

    @property
    def rank(self) -> int:
        """Display rank, EMERALD lowest."""
        return SIGNAL_RANK[self]

    def __str__(self) -> str:
        return self.value


SIGNAL_RANK = {
    Signal.EMERALD: 0,
    Signal.INDIGO: 1,
    Signal.AMBER: 2,
    Signal.AMETHYST: 3,
    Signal.CRIMSON: 4,
}

DEFAULT_HISTORY_SIZE = 20
MIN_HISTORY_SIZE = 10
MAX_HISTORY_SIZE = 20
