"""Risk analysis for URL payloads (Website, Payment, App Download)."""

from __future__ import annotations

import logging

from ..constants import QrType, Signal
from ..models import AnalysisFields, UrlFindings
from ..rules import DEFAULT_RULES, RuleTables
from ..utils.domains import host_matches, registered_domain
from ..utils.urls import MalformedUrlError, ParsedUrl, parse_strict_url
from .classifier import is_transactional

logger = logging.getLogger(__name__)

VERIFY_DESTINATION = "Always be sure you trust the destination domain."
NOTHING_UNUSUAL = "Nothing unusual was found in this link."
IP_LOGGER_WARNING = "This link is from a service known for IP logging. We recommend not to open it."
TRANSACTIONAL_WARNING = (
    "This appears to be a payment or login page. "
    "Ensure the site is secure (HTTPS) before entering info."
)
SHORTENER_WARNING = (
    "It uses a URL shortener ({host}), which hides the final destination. Proceed with caution."
)
TRACKING_WARNING = "This link includes tracking parameters to monitor your activity."
APP_INSTALL_WARNING = "Only install apps from trusted developers and official app stores."

DESCRIPTIONS = {
    QrType.PAYMENT: "This is a link for a payment or account login.",
    QrType.APP_DOWNLOAD: "This is a link to download an app.",
}
WEBSITE_DESCRIPTION = "This is a link to a website."

MALFORMED = AnalysisFields(
    type=QrType.UNKNOWN,
    signal=Signal.CRIMSON,
    description="This QR code contains malformed data.",
    action="No action can be taken.",
    awareness="The content is not a valid URL or known data type.",
)


class WebsiteAnalyzer:
    """Applies the URL rule tables to a payload in fixed priority order.

    Priority: IP logger (CRIMSON), then transactional surface (AMETHYST),
    then shortener / tracking parameters (AMBER). A lower-priority rule is
    only evaluated while the running signal is still below what it would
    set, so an earlier verdict is never downgraded.
    """

    def __init__(self, rules: RuleTables = DEFAULT_RULES, verify_destination: bool = False):
        self.rules = rules
        self.verify_destination = verify_destination

    def analyze(self, content: str, qr_type: QrType) -> AnalysisFields:
        schemes = ("http", "https", *self.rules.app_store_schemes)
        try:
            url = parse_strict_url(content, schemes=schemes)
        except MalformedUrlError as exc:
            logger.debug("Malformed URL payload: %s", exc)
            return MALFORMED

        host = url.host
        reasons: list[str] = []
        hidden_variables: list[str] = []
        signal = Signal.EMERALD

        # Critical
        logger_host = host_matches(host, self.rules.ip_loggers)
        if logger_host:
            signal = Signal.CRIMSON
            reasons.append(IP_LOGGER_WARNING)
            logger.debug("IP logger host matched: %s", logger_host)

        # Transactional
        if signal != Signal.CRIMSON and is_transactional(url, self.rules):
            signal = Signal.AMETHYST
            qr_type = QrType.PAYMENT
            reasons.append(TRANSACTIONAL_WARNING)

        # Obscured
        if signal == Signal.EMERALD:
            if host_matches(host, self.rules.shorteners):
                signal = Signal.AMBER
                reasons.append(SHORTENER_WARNING.format(host=host))

            hidden_variables = self._find_tracking_params(url)
            if hidden_variables:
                signal = Signal.AMBER
                reasons.append(TRACKING_WARNING)

        if qr_type == QrType.APP_DOWNLOAD:
            reasons.append(APP_INSTALL_WARNING)

        return AnalysisFields(
            type=qr_type,
            signal=signal,
            description=DESCRIPTIONS.get(qr_type, WEBSITE_DESCRIPTION),
            action=self._action(url),
            awareness=self._compose_awareness(reasons),
            url=UrlFindings(
                root_domain=host,
                registered_domain=registered_domain(host),
                hidden_variables=tuple(hidden_variables),
            ),
        )

    def _find_tracking_params(self, url: ParsedUrl) -> list[str]:
        """Tracking parameter names in query order, each name once."""
        tracking = set(self.rules.tracking_params)
        found: list[str] = []
        seen: set[str] = set()
        for name in url.param_names:
            key = name.lower()
            if key in tracking and key not in seen:
                seen.add(key)
                found.append(name)
        return found

    def _action(self, url: ParsedUrl) -> str:
        if url.scheme in self.rules.app_store_schemes:
            return "It will open the app store on your device."
        return f"It will open your browser and go to {url.host}."

    def _compose_awareness(self, reasons: list[str]) -> str:
        sentences = list(reasons) or [NOTHING_UNUSUAL]
        if self.verify_destination:
            sentences.insert(0, VERIFY_DESTINATION)
        return " ".join(sentences)
