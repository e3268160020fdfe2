"""Heuristic risk classification for decoded QR-code payloads."""

from .analyzer import QrAnalyzer, analyze_qr_content, classify
from .constants import QrType, Signal
from .history import ScanHistory
from .models import AnalysisResult
from .rules import DEFAULT_RULES, RuleTables, load_rules

__version__ = "0.1.0"

__all__ = [
    "QrAnalyzer",
    "analyze_qr_content",
    "classify",
    "QrType",
    "Signal",
    "ScanHistory",
    "AnalysisResult",
    "DEFAULT_RULES",
    "RuleTables",
    "load_rules",
]
