"""Payload type classification."""

from __future__ import annotations

import logging

from ..constants import QrType
from ..rules import DEFAULT_RULES, RuleTables
from ..utils.domains import host_matches
from ..utils.urls import MalformedUrlError, ParsedUrl, parse_strict_url

logger = logging.getLogger(__name__)

WEB_SCHEMES = ("http://", "https://")

# Checked in order after the web schemes; QR payload prefixes never overlap.
PREFIX_TYPES: tuple[tuple[str, QrType], ...] = (
    ("wifi:", QrType.WIFI),
    ("begin:vcard", QrType.CONTACT),
    ("mailto:", QrType.EMAIL),
    ("tel:", QrType.PHONE),
    ("data:application", QrType.FILE),
)


def is_transactional(url: ParsedUrl, rules: RuleTables) -> bool:
    """Payment-provider host or a login/payment path segment."""
    if host_matches(url.host, rules.payment_providers):
        return True
    keywords = set(rules.transactional_keywords)
    return any(segment in keywords for segment in url.path_segments)


def routes_through_provider(url: ParsedUrl, rules: RuleTables) -> bool:
    """A path segment naming a payment provider, e.g. ``/r/paypal.me/alice``."""
    return any(host_matches(segment, rules.payment_providers) for segment in url.path_segments)


def is_app_download(url: ParsedUrl, rules: RuleTables) -> bool:
    """App-store scheme or host, or a direct package download."""
    if url.scheme in rules.app_store_schemes:
        return True
    if host_matches(url.host, rules.app_store_hosts):
        return True
    path = url.path.lower()
    return any(path.endswith(suffix) for suffix in rules.app_file_suffixes)


def _classify_url(content: str, rules: RuleTables) -> QrType:
    try:
        url = parse_strict_url(content)
    except MalformedUrlError:
        # The website analyzer turns this into the malformed-data verdict.
        return QrType.WEBSITE
    if is_transactional(url, rules) or routes_through_provider(url, rules):
        return QrType.PAYMENT
    if is_app_download(url, rules):
        return QrType.APP_DOWNLOAD
    return QrType.WEBSITE


def classify(content: str, rules: RuleTables = DEFAULT_RULES) -> QrType:
    """Assign exactly one QrType to a trimmed payload. Never raises."""
    lowered = content.lower()

    if lowered.startswith(WEB_SCHEMES):
        qr_type = _classify_url(content, rules)
    elif any(lowered.startswith(f"{scheme}://") for scheme in rules.app_store_schemes):
        qr_type = QrType.APP_DOWNLOAD
    else:
        qr_type = next(
            (t for prefix, t in PREFIX_TYPES if lowered.startswith(prefix)),
            QrType.UNKNOWN,
        )

    logger.debug("Classified payload as %s", qr_type.value)
    return qr_type
