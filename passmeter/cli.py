"""PassMeter command-line interface.

Usage examples:
    python -m passmeter generate -n 20 -c 5
    python -m passmeter generate --no-symbols
    python -m passmeter score 'Ab3!Ab3!Ab3!'
"""

import argparse
import logging
import sys

from passmeter import InvalidSelectionError, generate_password, strength_report
from passmeter.config import clamp_length, get_settings

logger = logging.getLogger(__name__)

METER_CELLS = 20


def _add_class_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--no-uppercase", action="store_true")
    parser.add_argument("--no-lowercase", action="store_true")
    parser.add_argument("--no-digits", action="store_true")
    parser.add_argument("--no-symbols", action="store_true")


def _class_flags(args: argparse.Namespace) -> dict[str, bool]:
    return {
        "uppercase": not args.no_uppercase,
        "lowercase": not args.no_lowercase,
        "digits": not args.no_digits,
        "symbols": not args.no_symbols,
    }


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()

    parser = argparse.ArgumentParser(
        prog="passmeter",
        description="Generate random passwords and rate their strength.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command")

    # ── generate ───────────────────────────────────────────────────────
    gen_p = sub.add_parser("generate", help="Generate random passwords")
    gen_p.add_argument(
        "-n", "--length", type=int, default=settings.default_length,
        help=(
            f"Password length, clamped to {settings.min_length}-"
            f"{settings.max_length} (default: {settings.default_length})"
        ),
    )
    gen_p.add_argument(
        "-c", "--count", type=int, default=1,
        help="Number of passwords to generate (default: 1)",
    )
    _add_class_flags(gen_p)

    # ── score ──────────────────────────────────────────────────────────
    score_p = sub.add_parser(
        "score", help="Rate passwords against the requested character classes",
    )
    score_p.add_argument("passwords", nargs="+", help="Passwords to rate")
    _add_class_flags(score_p)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.command == "generate":
        return _cmd_generate(args)
    if args.command == "score":
        return _cmd_score(args)

    parser.print_help()
    return 0


def _cmd_generate(args: argparse.Namespace) -> int:
    length = clamp_length(args.length)
    if length != args.length:
        logger.info("Clamped length %d to %d", args.length, length)

    flags = _class_flags(args)
    for _ in range(args.count):
        try:
            pwd = generate_password(length, **flags)
        except InvalidSelectionError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 2
        report = strength_report(pwd, **flags)
        print(f"  {pwd}  ({report['label']}, {report['score']}/100)")

    return 0


def _cmd_score(args: argparse.Namespace) -> int:
    flags = _class_flags(args)
    weak = False
    for pwd in args.passwords:
        report = strength_report(pwd, **flags)
        filled = report["score"] * METER_CELLS // 100
        bar = "#" * filled + "-" * (METER_CELLS - filled)
        print(f"  [{bar}] {report['score']:>3}/100  {report['label']:<11}  '{pwd}'")
        if report["missing_classes"]:
            missing = ", ".join(report["missing_classes"])
            print(f"            ! missing requested classes: {missing}")
        if report["label"] == "Weak":
            weak = True

    return 1 if weak else 0


if __name__ == "__main__":
    sys.exit(main())
