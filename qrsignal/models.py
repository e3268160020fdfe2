"""Analysis data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from .constants import QrType, Signal


@dataclass(frozen=True)
class UrlFindings:
    """Fields only the URL branch produces."""

    root_domain: str
    registered_domain: str = ""
    hidden_variables: tuple[str, ...] = ()


@dataclass(frozen=True)
class AnalysisFields:
    """Output of a single type-specific analyzer, before assembly."""

    type: QrType
    signal: Signal
    description: str
    action: str
    awareness: str
    url: Optional[UrlFindings] = None


@dataclass(frozen=True)
class AnalysisResult:
    """Immutable classification of one scanned payload."""

    qr_content: str
    type: QrType
    signal: Signal
    description: str
    action: str
    awareness: str
    root_domain: Optional[str] = None
    registered_domain: Optional[str] = None
    hidden_variables: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def assemble(cls, qr_content: str, fields: AnalysisFields) -> "AnalysisResult":
        """Merge analyzer output with the trimmed payload."""
        url = fields.url
        return cls(
            qr_content=qr_content,
            type=fields.type,
            signal=fields.signal,
            description=fields.description,
            action=fields.action,
            awareness=fields.awareness,
            root_domain=url.root_domain if url else None,
            registered_domain=(url.registered_domain or None) if url else None,
            hidden_variables=url.hidden_variables if url else (),
        )

    @property
    def is_url(self) -> bool:
        return self.root_domain is not None

    def to_dict(self) -> dict[str, Any]:
        """Render the result using the presentation layer's key names."""
        data: dict[str, Any] = {
            "qrContent": self.qr_content,
            "type": self.type.value,
            "signal": self.signal.value,
            "description": self.description,
            "action": self.action,
            "awareness": self.awareness,
        }
        if self.is_url:
            data["rootDomain"] = self.root_domain
            if self.registered_domain:
                data["registeredDomain"] = self.registered_domain
            data["hiddenVariables"] = list(self.hidden_variables)
        return data
