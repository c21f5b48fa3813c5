"""Command-line interface for formatting and comparing decimal numbers.

Usage:
    bignumber format 1.249 --precision 1 --truncate
    bignumber format 1.25 --precision 1 --rounding half_even
    bignumber compare 1.5 1.50
    python -m bignumber compare 100 99.999 --verbose
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

import structlog

from bignumber.config import RoundingMode
from bignumber.errors import BigNumberError
from bignumber.number import BigNumber

logger = structlog.get_logger()

EXIT_OK = 0
EXIT_INVALID_INPUT = 2

_COMPARISON_SYMBOLS = {-1: "<", 0: "=", 1: ">"}


def configure_logging(verbose: bool) -> None:
    """Route structlog output to the console, DEBUG when verbose else WARNING."""
    log_level = logging.DEBUG if verbose else logging.WARNING
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bignumber",
        description="Exact decimal formatting and comparison",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug events to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    format_parser = subparsers.add_parser("format", help="Print a number, optionally at a fixed precision")
    format_parser.add_argument("value", help="Decimal number, e.g. -007.50")
    format_parser.add_argument(
        "--precision",
        "-p",
        type=int,
        default=None,
        help="Number of fractional digits (default: keep the number's own scale)",
    )
    format_parser.add_argument(
        "--truncate",
        action="store_true",
        help="Drop surplus digits instead of rounding",
    )
    format_parser.add_argument(
        "--rounding",
        choices=[mode.value for mode in RoundingMode],
        default=None,
        help="Rounding mode used when digits are dropped (default: $BIGNUMBER_ROUNDING or half_up)",
    )

    compare_parser = subparsers.add_parser("compare", help="Print <, = or > for two numbers")
    compare_parser.add_argument("left", help="Left-hand decimal number")
    compare_parser.add_argument("right", help="Right-hand decimal number")

    return parser


def _run_format(args: argparse.Namespace) -> str:
    number = BigNumber(args.value)
    if args.precision is None:
        return str(number)
    return number.to_fixed(
        args.precision,
        should_round=not args.truncate,
        rounding=args.rounding,
    )


def _run_compare(args: argparse.Namespace) -> str:
    result = BigNumber(args.left).compare(args.right)
    logger.debug("bignumber_compared", left=args.left, right=args.right, result=result)
    return _COMPARISON_SYMBOLS[result]


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    try:
        if args.command == "format":
            output = _run_format(args)
        else:
            output = _run_compare(args)
    except BigNumberError as err:
        logger.warning("bignumber_cli_invalid_input", command=args.command, error=str(err))
        print(f"error: {err}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    print(output)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
