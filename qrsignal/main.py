"""Command-line entry point: analyze QR payloads from arguments or stdin."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Iterable, Optional, TextIO

from .config import load_config, validate_config
from .constants import Signal
from .models import AnalysisResult
from .rules import load_rules

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    # stderr, so --json output on stdout stays parseable
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )


def format_result(result: AnalysisResult) -> str:
    """Human-readable report for one result."""
    lines = [
        f"Payload:     {result.qr_content or '(empty)'}",
        f"Type:        {result.type.value}",
        f"Signal:      {result.signal.value}",
        f"Description: {result.description}",
        f"Action:      {result.action}",
        f"Awareness:   {result.awareness}",
    ]
    if result.is_url:
        lines.append(f"Root domain: {result.root_domain}")
        if result.registered_domain and result.registered_domain != result.root_domain:
            lines.append(f"Registered:  {result.registered_domain}")
        if result.hidden_variables:
            lines.append(f"Tracking:    {', '.join(result.hidden_variables)}")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="qrsignal",
        description="Classify decoded QR payloads and report their risk signal.",
    )
    parser.add_argument("payloads", nargs="*", help="Payloads to analyze (default: one per line on stdin)")
    parser.add_argument("--json", action="store_true", help="Print one JSON object per payload")
    parser.add_argument("--rules", type=Path, help="YAML file with rule table overrides")
    parser.add_argument(
        "--verify-destination",
        action="store_true",
        default=None,
        help="Prepend the 'trust the destination' caution to URL results",
    )
    parser.add_argument("--history", action="store_true", help="Print the scan history at the end")
    parser.add_argument(
        "--fail-on",
        choices=[s.value for s in Signal],
        type=str.upper,
        help="Exit with status 3 if any payload's signal ranks at or above this one",
    )
    return parser


def _read_payloads(args: argparse.Namespace, stdin: TextIO) -> Iterable[str]:
    if args.payloads:
        return args.payloads
    return (line.rstrip("\n") for line in stdin if line.strip())


def main(argv: Optional[list[str]] = None, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> int:
    """Entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.rules is not None and not args.rules.is_file():
        parser.error(f"rules file not found: {args.rules}")
    config = load_config()
    configure_logging(config.log_level)

    errors = validate_config(config)
    if errors:
        for error in errors:
            logger.error(error)
        return 1

    if args.rules is not None:
        config.rules = load_rules(args.rules, base=config.rules)
    if args.verify_destination is not None:
        config.verify_destination = args.verify_destination

    analyzer = config.build_analyzer()
    history = config.build_history()
    threshold = Signal(args.fail_on) if args.fail_on else None
    tripped = False

    for index, payload in enumerate(_read_payloads(args, stdin)):
        result = analyzer.analyze(payload)
        history.add(result)
        if threshold is not None and result.signal.rank >= threshold.rank:
            tripped = True
        if args.json:
            stdout.write(json.dumps(result.to_dict()) + "\n")
        else:
            if index:
                stdout.write("\n")
            stdout.write(format_result(result) + "\n")

    if args.history:
        if args.json:
            stdout.write(json.dumps({"history": history.to_dicts()}) + "\n")
        else:
            stdout.write(f"\nHistory ({len(history)}/{history.capacity}, newest first):\n")
            for result in history:
                stdout.write(f"  [{result.signal.value}] {result.type.value}: {result.qr_content}\n")

    if tripped:
        logger.warning("At least one payload reached signal %s", threshold.value)
        return 3
    return 0


if __name__ == "__main__":
    sys.exit(main())
