"""Configuration management for qrsignal."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from .analyzer import QrAnalyzer
from .constants import DEFAULT_HISTORY_SIZE, MAX_HISTORY_SIZE, MIN_HISTORY_SIZE
from .history import ScanHistory
from .rules import DEFAULT_RULES, RuleTables, load_rules

logger = logging.getLogger(__name__)

RULES_FILENAME = "rules.yaml"
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class Config:
    """Application configuration loaded from environment."""

    config_dir: Path = field(default_factory=lambda: Path("./config"))

    # Analysis
    verify_destination: bool = False  # Prepend "trust the destination" to URL awareness
    cache_size: int = 0  # 0 disables memoization

    # History
    history_size: int = DEFAULT_HISTORY_SIZE

    log_level: str = "INFO"

    # Rule tables (override via config/rules.yaml)
    rules: RuleTables = field(default_factory=lambda: DEFAULT_RULES)

    def __post_init__(self):
        self.config_dir = Path(self.config_dir)
        self.log_level = (self.log_level or "INFO").strip().upper()

    @property
    def rules_path(self) -> Path:
        return self.config_dir / RULES_FILENAME

    def build_analyzer(self) -> QrAnalyzer:
        return QrAnalyzer(
            rules=self.rules,
            verify_destination=self.verify_destination,
            cache_size=self.cache_size,
        )

    def build_history(self) -> ScanHistory:
        return ScanHistory(capacity=self.history_size)


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Invalid integer for %s: %r (using %s)", name, raw, default)
        return default


def load_config() -> Config:
    """Load configuration from environment variables."""
    load_dotenv()

    config_dir = Path(os.getenv("QRSIGNAL_CONFIG_DIR", "./config"))
    return Config(
        config_dir=config_dir,
        verify_destination=_env_bool("QRSIGNAL_VERIFY_DESTINATION", False),
        cache_size=_env_int("QRSIGNAL_CACHE_SIZE", 0),
        history_size=_env_int("QRSIGNAL_HISTORY_SIZE", DEFAULT_HISTORY_SIZE),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        rules=load_rules(config_dir / RULES_FILENAME),
    )


def validate_config(config: Config) -> list[str]:
    """Validate configuration and return list of error messages."""
    errors: list[str] = []
    if not MIN_HISTORY_SIZE <= config.history_size <= MAX_HISTORY_SIZE:
        errors.append(
            f"QRSIGNAL_HISTORY_SIZE must be between {MIN_HISTORY_SIZE} and {MAX_HISTORY_SIZE}"
        )
    if config.cache_size < 0:
        errors.append("QRSIGNAL_CACHE_SIZE must not be negative")
    if config.log_level not in LOG_LEVELS:
        errors.append(f"LOG_LEVEL must be one of {', '.join(sorted(LOG_LEVELS))}")
    if not config.rules.tracking_params:
        logger.info("No tracking parameters configured; tracking detection is disabled")
    return errors
