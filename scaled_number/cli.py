"""Command-line interface for parsing, rendering and formatting scaled values.

Usage:
    python -m scaled_number parse "1,234.5" --decimals 6
    python -m scaled_number render 1234500000 --decimals 6
    python -m scaled_number format 1203912 --style compact
"""

from __future__ import annotations

import argparse
import logging
import sys

import structlog

from scaled_number.constants import DEFAULT_DECIMALS
from scaled_number.errors import ScaledNumberError
from scaled_number.formatting.config import FormatConfig
from scaled_number.formatting.locale_formatter import DefaultLocaleFormatter
from scaled_number.value import ScaledValue

logger = structlog.get_logger()

STYLES = ("crypto", "currency", "compact", "percent")


def configure_logging(verbose: bool) -> None:
    """Send structlog output to stderr so stdout carries only results."""
    log_level = logging.DEBUG if verbose else logging.WARNING
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scaled-number",
        description="Exact fixed-point decimal conversions",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_cmd = subparsers.add_parser("parse", help="Parse decimal text into the plain JSON form")
    parse_cmd.add_argument("text", help="Decimal text, e.g. 1,234.5 or 3.4e-5")
    parse_cmd.add_argument("--decimals", type=int, default=DEFAULT_DECIMALS)

    render_cmd = subparsers.add_parser("render", help="Render a raw scaled integer as decimal text")
    render_cmd.add_argument("value", help="Raw scaled integer, e.g. 1234500000")
    render_cmd.add_argument("--decimals", type=int, default=DEFAULT_DECIMALS)

    format_cmd = subparsers.add_parser("format", help="Format decimal text for display")
    format_cmd.add_argument("text", help="Decimal text to format")
    format_cmd.add_argument("--decimals", type=int, default=DEFAULT_DECIMALS)
    format_cmd.add_argument("--style", choices=STYLES, default="crypto")
    format_cmd.add_argument(
        "--price",
        type=float,
        default=1.0,
        help="Unit price applied by currency styles (default: 1.0)",
    )
    return parser


def run_command(args: argparse.Namespace) -> str:
    """Execute a parsed command and return the text to print."""
    if args.command == "parse":
        return ScaledValue.from_unscaled(args.text, args.decimals).to_plain().model_dump_json()

    if args.command == "render":
        return ScaledValue.from_plain({"value": args.value, "decimals": args.decimals}).to_string()

    value = ScaledValue.from_unscaled(args.text, args.decimals)
    formatter = DefaultLocaleFormatter(FormatConfig.from_env())
    if args.style == "currency":
        return value.to_currency_string(args.price, formatter)
    if args.style == "compact":
        return value.to_compact_currency_string(args.price, formatter)
    if args.style == "percent":
        return value.to_percent_string(formatter)
    return value.to_crypto_string(formatter)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        output = run_command(args)
    except (ScaledNumberError, ValueError) as err:
        logger.error("command_failed", command=args.command, error=str(err))
        print(f"Error: {err}")
        return 1

    print(output)
    return 0
