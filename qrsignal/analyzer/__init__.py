"""Analyzer modules for qrsignal."""

from .classifier import classify
from .engine import QrAnalyzer, analyze_qr_content
from .protocols import analyze_simple
from .website import WebsiteAnalyzer

__all__ = [
    "classify",
    "QrAnalyzer",
    "analyze_qr_content",
    "analyze_simple",
    "WebsiteAnalyzer",
]
