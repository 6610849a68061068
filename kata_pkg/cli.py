"""Command line interface for Kata.

Usage examples::

    kata braces "~/{Downloads,Pictures}/*.{jpg,gif,png}"
    kata zigzag 4
    kata dominoes 0,1 1,1
    kata --format json ranges 0 1 2 5 7 8 9
    kata ocr scan.txt
    kata wrap -c 26 "The String global object is a constructor for strings."
    kata poker 4H 5H 6H 7H 8H
    kata rectangles figure.txt
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from . import config
from .api import run_kata
from .logging_config import get_logger, setup_logging
from .types import KataResult

logger = get_logger("cli")

_HEALTH_SCAN = (
    "    _  _     _  _  _  _  _ \n"
    "  | _| _||_||_ |_   ||_||_|\n"
    "  ||_  _|  | _||_|  ||_| _|\n"
)


def _tile(token: str) -> tuple[int, int]:
    """argparse type for ``x,y`` / ``x|y`` domino tiles."""
    for separator in (",", "|"):
        if separator in token:
            left, _, right = token.partition(separator)
            try:
                return int(left), int(right)
            except ValueError:
                break
    raise argparse.ArgumentTypeError(f"invalid domino {token!r} (expected x,y)")


def _read_source(path: str | None) -> str:
    if path is None or path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def _format_human(result: KataResult) -> str:
    value = result.value
    if result.kata == "zigzag":
        width = len(str(len(value) ** 2 - 1))
        return "\n".join(" ".join(str(cell).rjust(width) for cell in row) for row in value)
    if result.kata in ("braces", "wrap"):
        return "\n".join(value)
    if result.kata == "rectangles":
        return "\n".join(value).rstrip("\n")
    if isinstance(value, bool):
        return "yes" if value else "no"
    return str(value)


def _emit(result: KataResult, output_format: str) -> int:
    if output_format == "json":
        print(json.dumps(result.to_dict(), ensure_ascii=False))
    elif result.ok:
        text = _format_human(result)
        if text:
            print(text)
    else:
        print(f"Error [{result.code}]: {result.error}", file=sys.stderr)
    return 0 if result.ok else 1


def health_check() -> int:
    """Run every exercise on a known input and report the outcome."""
    checks: list[tuple[str, KataResult, Any]] = [
        ("Brace expansion", run_kata("braces", "{a,b}"), ["a", "b"]),
        ("Zig-zag matrix", run_kata("zigzag", 2), [[0, 1], [2, 3]]),
        ("Domino row", run_kata("dominoes", [(0, 1), (1, 1)]), True),
        ("Range compression", run_kata("ranges", [0, 1, 2, 3, 4, 5]), "0-5"),
        ("Range parsing", run_kata("parse-ranges", "0-2,5"), [0, 1, 2, 5]),
        ("OCR parsing", run_kata("ocr", _HEALTH_SCAN), 123456789),
        ("Text wrapping", run_kata("wrap", "a bb ccc", 4), ["a bb", "ccc"]),
        ("Poker ranking", run_kata("poker", ["4♥", "5♥", "6♥", "7♥", "8♥"]), "STRAIGHT_FLUSH"),
        (
            "Rectangle decomposition",
            run_kata("rectangles", "+--+\n|  |\n+--+\n"),
            ["+--+\n|  |\n+--+\n"],
        ),
    ]
    checks_passed = 0
    checks_failed = 0
    print("Kata health check")
    print("-" * 50)
    for label, result, expected in checks:
        value = sorted(result.value) if result.kata == "braces" and result.ok else result.value
        if result.ok and value == expected:
            print(f"[OK] {label} works")
            checks_passed += 1
        else:
            print(f"[FAIL] {label} check failed: {result}")
            checks_failed += 1

    try:
        import numpy

        print(f"[OK] NumPy {numpy.__version__} available")
        checks_passed += 1
    except ImportError:
        print("[FAIL] NumPy not available (required for zig-zag matrices)")
        print("  To install: pip install numpy")
        checks_failed += 1

    print("-" * 50)
    print(f"Results: {checks_passed} passed, {checks_failed} failed")
    return 1 if checks_failed else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kata", description="String, array and grid exercises"
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=config.LOG_LEVEL,
        help="Set logging level",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Run health check and verify dependencies",
    )
    parser.add_argument(
        "--max-input-length",
        type=int,
        help=f"Override maximum text input length (default: {config.MAX_INPUT_LENGTH})",
    )

    sub = parser.add_subparsers(dest="kata", metavar="KATA")

    p = sub.add_parser("braces", help="Expand {a,b} brace groups")
    p.add_argument("text")

    p = sub.add_parser("zigzag", help="Print the n x n zig-zag matrix")
    p.add_argument("n", type=int)

    p = sub.add_parser("dominoes", help="Check whether tiles can form one row")
    p.add_argument("tiles", nargs="*", type=_tile, metavar="X,Y")

    p = sub.add_parser("ranges", help="Compress ascending integers into ranges")
    p.add_argument("numbers", nargs="*", type=int, metavar="N")

    p = sub.add_parser("parse-ranges", help="Expand a range string such as 0-2,5")
    p.add_argument("text")

    p = sub.add_parser("ocr", help="Read a scanned bank account number")
    p.add_argument("file", nargs="?", help="Scan file (stdin when omitted)")

    p = sub.add_parser("wrap", help="Wrap text at word boundaries")
    p.add_argument("text")
    p.add_argument("-c", "--columns", type=int, default=config.WRAP_COLUMNS)
    p.add_argument(
        "--long-words",
        choices=config.WRAP_LONG_WORD_POLICIES,
        help=f"Policy for words wider than the columns (default: {config.WRAP_LONG_WORDS})",
    )

    p = sub.add_parser("poker", help="Rank a five-card poker hand")
    p.add_argument("cards", nargs="+", metavar="CARD")

    p = sub.add_parser("rectangles", help="Split an ASCII figure into rectangles")
    p.add_argument("file", nargs="?", help="Figure file (stdin when omitted)")

    return parser


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for Kata CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, 1 for rejected input, 2 for usage errors)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, log_file=args.log_file)

    if args.max_input_length and args.max_input_length > 0:
        config.MAX_INPUT_LENGTH = int(args.max_input_length)

    if args.version:
        print(config.VERSION)
        return 0
    if args.health_check:
        return health_check()
    if args.kata is None:
        parser.print_help()
        return 2

    logger.debug("Running %s", args.kata)
    try:
        if args.kata == "braces":
            result = run_kata("braces", args.text)
        elif args.kata == "zigzag":
            result = run_kata("zigzag", args.n)
        elif args.kata == "dominoes":
            result = run_kata("dominoes", args.tiles)
        elif args.kata == "ranges":
            result = run_kata("ranges", args.numbers)
        elif args.kata == "parse-ranges":
            result = run_kata("parse-ranges", args.text)
        elif args.kata == "ocr":
            result = run_kata("ocr", _read_source(args.file))
        elif args.kata == "wrap":
            result = run_kata("wrap", args.text, args.columns, long_words=args.long_words)
        elif args.kata == "poker":
            result = run_kata("poker", args.cards)
        else:
            result = run_kata("rectangles", _read_source(args.file))
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return _emit(result, args.format)


if __name__ == "__main__":
    sys.exit(main_entry())
