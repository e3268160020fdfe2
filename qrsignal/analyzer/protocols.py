"""Analysis for device-local payloads: Wi-Fi, contact cards, email and phone."""

from __future__ import annotations

import re

from ..constants import PROTOCOL_TYPES, QrType, Signal
from ..models import AnalysisFields

SSID_PATTERN = re.compile(r"S:([^;]+);")

UNKNOWN_NETWORK = "an unknown network"
UNKNOWN_RECIPIENT = "an unspecified recipient"
UNKNOWN_NUMBER = "an unspecified number"


def _strip_prefix(content: str, prefix: str) -> str:
    if content[: len(prefix)].lower() == prefix:
        return content[len(prefix):]
    return content


def extract_ssid(content: str) -> str | None:
    """First ``S:<name>;`` segment of a WIFI: payload."""
    match = SSID_PATTERN.search(content)
    return match.group(1) if match else None


def extract_email_address(content: str) -> str:
    """Address between ``mailto:`` and the first ``?``."""
    return _strip_prefix(content, "mailto:").split("?", 1)[0].strip()


def extract_phone_number(content: str) -> str:
    return _strip_prefix(content, "tel:").strip()


def analyze_simple(content: str, qr_type: QrType) -> AnalysisFields:
    """Flat INDIGO verdict with one extracted field per type."""
    if qr_type not in PROTOCOL_TYPES:
        raise ValueError(f"Not a device-action type: {qr_type}")

    if qr_type == QrType.WIFI:
        ssid = extract_ssid(content) or UNKNOWN_NETWORK
        description = "Contains credentials to join a Wi-Fi network."
        action = f'Your device will ask to connect to the network named "{ssid}".'
        awareness = "This will automatically connect you to the Wi-Fi network. Only join networks you trust."
    elif qr_type == QrType.CONTACT:
        description = "This is a vCard with contact information."
        action = "Your device will offer to save a new contact."
        awareness = "Review the details (name, number, email) before adding it to your address book."
    elif qr_type == QrType.EMAIL:
        address = extract_email_address(content) or UNKNOWN_RECIPIENT
        description = "This QR code will start a new email."
        action = f"It will open your email app with a new draft addressed to {address}."
        awareness = "The body and subject may be pre-filled. Check the content before sending."
    else:
        number = extract_phone_number(content) or UNKNOWN_NUMBER
        description = "This contains a phone number to call."
        action = f"Your device will prompt you to call the number {number}."
        awareness = "Check that you recognize the number before placing the call."

    return AnalysisFields(
        type=qr_type,
        signal=Signal.INDIGO,
        description=description,
        action=action,
        awareness=awareness,
    )
