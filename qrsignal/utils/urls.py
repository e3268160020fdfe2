"""Strict URL parsing for scanned payloads."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass, field
from typing import Iterable, Optional
from urllib.parse import parse_qsl, unquote, urlsplit

import idna

from .domains import normalize_host

FORBIDDEN_HOST_CHARS = frozenset(" \t\n\r\x00#%/:<>?@[\\]^|")


class MalformedUrlError(ValueError):
    """Raised when a payload cannot be parsed as an absolute URL."""


@dataclass(frozen=True)
class ParsedUrl:
    """The parts of a URL the analyzers look at."""

    scheme: str
    host: str
    path: str = ""
    query: str = ""
    port: Optional[int] = None
    query_params: tuple[tuple[str, str], ...] = field(default_factory=tuple)

    @property
    def path_segments(self) -> list[str]:
        """Non-empty, percent-decoded, lowercased path segments."""
        return [unquote(seg).lower() for seg in self.path.split("/") if seg]

    @property
    def param_names(self) -> list[str]:
        """Query parameter names in the order they appear (may repeat)."""
        return [name for name, _ in self.query_params]


def _ascii_host(host: str) -> str:
    """Validate a hostname and return its ASCII form.

    Percent-escapes are decoded first, so ``bit%2Ely`` is ``bit.ly``. An
    escape that does not decode (``%zz``) leaves a ``%`` behind and is rejected.
    """
    if "%" in host:
        host = normalize_host(unquote(host))
    if host.isascii():
        if any(ch in FORBIDDEN_HOST_CHARS for ch in host):
            raise MalformedUrlError(f"Forbidden character in host: {host!r}")
        if not host.strip("."):
            raise MalformedUrlError(f"Empty host: {host!r}")
        return host
    try:
        return idna.encode(host, uts46=True).decode("ascii")
    except (idna.IDNAError, UnicodeError) as exc:
        raise MalformedUrlError(f"Invalid internationalized host: {host!r}") from exc


def parse_strict_url(content: str, schemes: Optional[Iterable[str]] = None) -> ParsedUrl:
    """
    Parse an absolute URL, rejecting anything a browser would refuse.

    - A scheme and a non-empty host are required
    - The port, if present, must be numeric and in range
    - IPv6 literals must be valid addresses
    - Non-ASCII hosts are converted with IDNA (UTS-46 mapping)

    Raises MalformedUrlError on any failure.
    """
    raw = (content or "").strip()
    try:
        parts = urlsplit(raw)
        port = parts.port
    except ValueError as exc:
        raise MalformedUrlError(str(exc)) from exc

    scheme = parts.scheme.lower()
    if not scheme:
        raise MalformedUrlError("Missing scheme")
    if schemes is not None and scheme not in {s.lower() for s in schemes}:
        raise MalformedUrlError(f"Unsupported scheme: {scheme}")

    host = normalize_host(parts.hostname or "")
    if not host:
        raise MalformedUrlError("Missing host")

    if "[" in parts.netloc:
        try:
            ipaddress.IPv6Address(host)
        except ValueError as exc:
            raise MalformedUrlError(f"Invalid IPv6 host: {host!r}") from exc
    else:
        host = _ascii_host(host)

    return ParsedUrl(
        scheme=scheme,
        host=host,
        path=parts.path,
        query=parts.query,
        port=port,
        query_params=tuple(parse_qsl(parts.query, keep_blank_values=True)),
    )
