"""Orchestrates classification and analysis of a scanned payload."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from ..cache import ResultCache
from ..constants import PROTOCOL_TYPES, URL_TYPES, QrType, Signal
from ..models import AnalysisFields, AnalysisResult
from ..rules import DEFAULT_RULES, RuleTables
from .classifier import classify
from .protocols import analyze_simple
from .website import MALFORMED, WebsiteAnalyzer

logger = logging.getLogger(__name__)

EMPTY = AnalysisFields(
    type=QrType.UNKNOWN,
    signal=Signal.CRIMSON,
    description="The QR code is empty.",
    action="No action will be taken.",
    awareness="No content was provided.",
)

FILE_VERDICT = AnalysisFields(
    type=QrType.FILE,
    signal=Signal.CRIMSON,
    description="Contains an embedded file for download.",
    action="Your device will prompt you to download a file.",
    awareness=(
        "This is a high-risk action. The file could be malicious. "
        "Do not open files from sources you do not trust completely."
    ),
)

UNKNOWN_VERDICT = AnalysisFields(
    type=QrType.UNKNOWN,
    signal=Signal.AMBER,
    description="Contains plain text or an unrecognized data format.",
    action="Your device will show the raw text or offer a web search.",
    awareness=(
        "This is not a standard scannable action. It could be a simple message, "
        "a unique code, or a private key. Be cautious if you don't recognize it."
    ),
)

Handler = Callable[[str, QrType], AnalysisFields]


class QrAnalyzer:
    """Turns a raw QR payload into an AnalysisResult.

    ``analyze`` is total: every input maps to a result and nothing is raised
    to the caller. Identical input yields an identical result, which is what
    makes the optional ``cache_size`` memoization safe.
    """

    def __init__(
        self,
        rules: RuleTables = DEFAULT_RULES,
        verify_destination: bool = False,
        cache_size: int = 0,
    ):
        self.rules = rules
        self.website = WebsiteAnalyzer(rules, verify_destination=verify_destination)
        self.cache = ResultCache(max_entries=cache_size, namespace="analysis") if cache_size else None

        def fixed(verdict: AnalysisFields) -> Handler:
            return lambda content, qr_type: verdict

        self._handlers: dict[QrType, Handler] = {
            **{qr_type: self.website.analyze for qr_type in URL_TYPES},
            **{qr_type: analyze_simple for qr_type in PROTOCOL_TYPES},
            QrType.FILE: fixed(FILE_VERDICT),
            QrType.UNKNOWN: fixed(UNKNOWN_VERDICT),
        }
        missing = set(QrType) - set(self._handlers)
        if missing:
            raise RuntimeError(f"No analyzer registered for: {sorted(t.value for t in missing)}")

    def analyze(self, raw_content: object) -> AnalysisResult:
        """Classify and analyze one payload."""
        content = "" if raw_content is None else str(raw_content)
        content = content.strip()
        if not content:
            return AnalysisResult.assemble("", EMPTY)

        if self.cache is not None:
            return self.cache.get_or_set(content, lambda: self._analyze(content))
        return self._analyze(content)

    def _analyze(self, content: str) -> AnalysisResult:
        try:
            qr_type = classify(content, self.rules)
            fields = self._handlers[qr_type](content, qr_type)
        except Exception:
            logger.exception("Unexpected failure analyzing payload; treating as malformed")
            fields = MALFORMED

        logger.debug("Payload analyzed: type=%s signal=%s", fields.type.value, fields.signal.value)
        return AnalysisResult.assemble(content, fields)


_default_analyzer: Optional[QrAnalyzer] = None


def analyze_qr_content(raw_content: object, rules: Optional[RuleTables] = None) -> AnalysisResult:
    """Analyze a payload with the default rule tables (or the given ones)."""
    global _default_analyzer
    if rules is not None:
        return QrAnalyzer(rules).analyze(raw_content)
    if _default_analyzer is None:
        _default_analyzer = QrAnalyzer()
    return _default_analyzer.analyze(raw_content)
