"""Hostname matching utilities."""

from __future__ import annotations

from typing import Iterable, Optional

import tldextract

# Bundled public-suffix snapshot only; never fetch the live list.
_extract = tldextract.TLDExtract(suffix_list_urls=(), cache_dir=None)


def normalize_host(value: str) -> str:
    """Lowercase a hostname and drop a trailing root dot."""
    return (value or "").strip().lower().rstrip(".")


def host_matches(host: str, domains: Iterable[str]) -> Optional[str]:
    """
    Return the first entry of ``domains`` that covers ``host``.

    An entry covers a host when they are equal or the host is a subdomain of
    it. Matching is on label boundaries: ``t.co`` covers ``x.t.co`` but not
    ``microsoft.com``.
    """
    host = normalize_host(host)
    if not host:
        return None
    for domain in domains:
        entry = normalize_host(domain)
        if entry and (host == entry or host.endswith("." + entry)):
            return domain
    return None


def registered_domain(host: str) -> str:
    """Return the registrable domain for a host (best-effort)."""
    host = normalize_host(host)
    if not host:
        return ""
    extracted = _extract(host)
    if extracted.domain and extracted.suffix:
        return f"{extracted.domain}.{extracted.suffix}"
    return host
