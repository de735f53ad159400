"""passforge command-line interface.

Usage examples:
    python -m passforge generate -n 20 -c 5
    python -m passforge generate --no-symbols
    python -m passforge passphrase -w 8 -s .
    python -m passforge check mypassword
    python -m passforge check -f passwords.txt
"""

import argparse
import logging
import sys

from passforge import (
    CharsetOptions,
    PassforgeError,
    analyse_strength,
    calculate_entropy,
    calculate_password_entropy,
    clamp_word_count,
    generate_passphrase,
    generate_password,
)
from passforge.config import get_settings, log_level, validate_settings
from passforge.logging_config import setup_logging

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    try:
        validate_settings(settings)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    parser = argparse.ArgumentParser(
        prog="passforge",
        description="Generate secure passwords and passphrases, and score password strength.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log debug information to stderr (never the secrets themselves)",
    )
    sub = parser.add_subparsers(dest="command")

    # ── generate ───────────────────────────────────────────────────────
    gen_p = sub.add_parser("generate", help="Generate secure passwords")
    gen_p.add_argument(
        "-n", "--length", default=settings.DEFAULT_LENGTH,
        help=f"Password length, clamped to 6-64 (default: {settings.DEFAULT_LENGTH})",
    )
    gen_p.add_argument("--no-lowercase", action="store_true")
    gen_p.add_argument("--no-uppercase", action="store_true")
    gen_p.add_argument("--no-digits", action="store_true")
    gen_p.add_argument("--no-symbols", action="store_true")
    gen_p.add_argument(
        "-c", "--count", type=int, default=1,
        help="Number of passwords to generate (default: 1)",
    )

    # ── passphrase ─────────────────────────────────────────────────────
    phrase_p = sub.add_parser("passphrase", help="Generate word-based passphrases")
    phrase_p.add_argument(
        "-w", "--words", default=settings.DEFAULT_WORD_COUNT,
        help=f"Number of words, clamped to 3-12 (default: {settings.DEFAULT_WORD_COUNT})",
    )
    phrase_p.add_argument(
        "-s", "--separator", default=settings.DEFAULT_SEPARATOR,
        help=f"Word separator, at most 10 characters (default: {settings.DEFAULT_SEPARATOR!r})",
    )
    phrase_p.add_argument(
        "-c", "--count", type=int, default=1,
        help="Number of passphrases to generate (default: 1)",
    )

    # ── check ──────────────────────────────────────────────────────────
    check_p = sub.add_parser("check", help="Score the strength of passwords")
    check_p.add_argument("passwords", nargs="*", help="Passwords to check")
    check_p.add_argument(
        "-f", "--file",
        help="Read passwords from a file (one per line)",
    )

    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else log_level(settings))

    try:
        if args.command == "generate":
            return _cmd_generate(args)
        if args.command == "passphrase":
            return _cmd_passphrase(args)
        if args.command == "check":
            return _cmd_check(args)
    except PassforgeError as exc:
        logger.debug("Command %s failed: %s", args.command, exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    parser.print_help()
    return 0


def _strength_bar(score: int, width: int = 20) -> str:
    filled = round(score * width / 100)
    return "#" * filled + "-" * (width - filled)


def _cmd_generate(args: argparse.Namespace) -> int:
    options = CharsetOptions(
        lower=not args.no_lowercase,
        upper=not args.no_uppercase,
        numbers=not args.no_digits,
        symbols=not args.no_symbols,
    )
    bits = calculate_password_entropy(args.length, options)
    for _ in range(args.count):
        pwd = generate_password(args.length, options)
        report = analyse_strength(pwd)
        print(f"  {pwd}  ({report['label']}, {report['score']}/100, {bits:.1f} bits)")

    return 0


def _cmd_passphrase(args: argparse.Namespace) -> int:
    for _ in range(args.count):
        print(f"  {generate_passphrase(args.words, args.separator)}")

    print(f"  Entropy: ~{calculate_entropy(clamp_word_count(args.words)):.1f} bits")
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    passwords = list(args.passwords)

    if args.file:
        with open(args.file) as f:
            passwords.extend(line.strip() for line in f if line.strip())

    if not passwords:
        print("Error: provide passwords as arguments or via --file", file=sys.stderr)
        return 1

    for pwd in passwords:
        report = analyse_strength(pwd)
        print(f"  [{_strength_bar(report['score'])}] {report['score']:>3}/100  "
              f"{report['label']:<11}  '{pwd}'")

    return 0


if __name__ == "__main__":
    sys.exit(main())
