"""Rule tables for payload classification.

The domain and keyword lists are plain data. The classifier and the website
analyzer receive a ``RuleTables`` instance instead of reading module globals,
so deployments can swap or extend the lists via ``config/rules.yaml``
without touching code.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Iterable, Mapping, Optional

import yaml

logger = logging.getLogger(__name__)


DEFAULT_SHORTENERS: tuple[str, ...] = (
    "bit.ly",
    "t.co",
    "goo.gl",
    "tinyurl.com",
    "is.gd",
    "buff.ly",
    "adf.ly",
    "rebrand.ly",
)

DEFAULT_TRACKING_PARAMS: tuple[str, ...] = (
    "utm_source",
    "utm_medium",
    "utm_campaign",
    "utm_term",
    "utm_content",
    "gclid",
    "fbclid",
    "mc_cid",
    "mc_eid",
)

DEFAULT_IP_LOGGERS: tuple[str, ...] = (
    "grabify.link",
    "iplogger.org",
    "blasze.com",
    "tracking-link.com",
    "short-link.org",
)

DEFAULT_PAYMENT_PROVIDERS: tuple[str, ...] = (
    "paypal.me",
    "cash.app",
    "venmo.com",
    "stripe.link",
    "checkout.stripe.com",
)

DEFAULT_TRANSACTIONAL_KEYWORDS: tuple[str, ...] = (
    "login",
    "signin",
    "auth",
    "oauth",
    "account",
    "secure",
    "wallet",
)

DEFAULT_APP_STORE_HOSTS: tuple[str, ...] = (
    "play.google.com",
    "apps.apple.com",
)

DEFAULT_APP_STORE_SCHEMES: tuple[str, ...] = (
    "market",
    "itms-apps",
)

DEFAULT_APP_FILE_SUFFIXES: tuple[str, ...] = (".apk",)


def _normalize_entries(values: Iterable[object]) -> tuple[str, ...]:
    """Lowercase, strip and dedupe entries, preserving first-seen order."""
    seen: dict[str, None] = {}
    for value in values:
        item = str(value or "").strip().lower()
        if item and item not in seen:
            seen[item] = None
    return tuple(seen)


@dataclass(frozen=True)
class RuleTables:
    """Category -> patterns tables used by the classifier and analyzers."""

    shorteners: tuple[str, ...] = DEFAULT_SHORTENERS
    tracking_params: tuple[str, ...] = DEFAULT_TRACKING_PARAMS
    ip_loggers: tuple[str, ...] = DEFAULT_IP_LOGGERS
    payment_providers: tuple[str, ...] = DEFAULT_PAYMENT_PROVIDERS
    transactional_keywords: tuple[str, ...] = DEFAULT_TRANSACTIONAL_KEYWORDS
    app_store_hosts: tuple[str, ...] = DEFAULT_APP_STORE_HOSTS
    app_store_schemes: tuple[str, ...] = DEFAULT_APP_STORE_SCHEMES
    app_file_suffixes: tuple[str, ...] = DEFAULT_APP_FILE_SUFFIXES

    @classmethod
    def categories(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, object],
        base: Optional["RuleTables"] = None,
    ) -> "RuleTables":
        """Build tables from a category -> list mapping, layered over ``base``.

        Categories missing from ``data`` keep the ``base`` values. Unknown
        categories and non-list values are logged and ignored.
        """
        base = base or DEFAULT_RULES
        known = set(cls.categories())
        overrides: dict[str, tuple[str, ...]] = {}
        for name, raw in (data or {}).items():
            if name not in known:
                logger.warning("Ignoring unknown rule category: %s", name)
                continue
            if raw is None:
                continue
            if isinstance(raw, str) or not isinstance(raw, Iterable):
                logger.warning("Rule category %s must be a list, got %s", name, type(raw).__name__)
                continue
            overrides[name] = _normalize_entries(raw)
        return replace(base, **overrides)

    def to_dict(self) -> dict[str, list[str]]:
        return {name: list(getattr(self, name)) for name in self.categories()}


DEFAULT_RULES = RuleTables()


def load_rules(path: Optional[Path], base: Optional[RuleTables] = None) -> RuleTables:
    """Load rule overrides from a YAML file (optional).

    A missing or unreadable file yields ``base`` (the defaults when not given).
    """
    base = base or DEFAULT_RULES
    if path is None:
        return base
    path = Path(path)
    if not path.exists():
        logger.debug("Rules file not found, using defaults: %s", path)
        return base

    try:
        data = yaml.safe_load(path.read_text()) or {}
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("Failed to parse %s: %s", path.name, exc)
        return base

    if not isinstance(data, dict):
        logger.warning("Rules file %s must contain a mapping of categories", path.name)
        return base

    rules = RuleTables.from_mapping(data, base=base)
    logger.info("Loaded rule tables from %s", path)
    return rules
