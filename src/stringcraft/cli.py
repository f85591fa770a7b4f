"""Command line interface for the stringcraft utilities."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Sequence

from .config import FormatterConfig
from .format import Formatter, SprintfError
from .wrapper import FUNCTIONS, chain


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="String formatting and manipulation utilities")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug information to stderr")
    subparsers = parser.add_subparsers(dest="command", required=True)

    sprintf_parser = subparsers.add_parser("sprintf", help="render a printf style template")
    sprintf_parser.add_argument("template", help="Template such as '%%s costs %%.2f'")
    sprintf_parser.add_argument("arguments", nargs="*", help="Values consumed by the directives")
    sprintf_parser.add_argument(
        "--float-precision",
        type=int,
        help="Default precision for the f, e and g conversions",
    )
    sprintf_parser.add_argument(
        "--integer-bits",
        type=int,
        help="Width of the unsigned form used by b, o, x, X, u and c",
    )

    chain_parser = subparsers.add_parser(
        "chain", help="apply string functions to TEXT one after the other"
    )
    chain_parser.add_argument("text", help="The subject string")
    chain_parser.add_argument(
        "functions",
        nargs="*",
        metavar="FUNCTION",
        help="Function names such as trim, kebab_case or words",
    )

    return parser


def _write_value(value: Any) -> None:
    if isinstance(value, (list, tuple)):
        for item in value:
            sys.stdout.write(f"{item}\n")
        return
    text = "" if value is None else str(value)
    sys.stdout.write(text)
    if not text.endswith("\n"):
        sys.stdout.write("\n")


def _handle_sprintf(args: argparse.Namespace) -> int:
    try:
        config = FormatterConfig.from_mapping(
            {"float_precision": args.float_precision, "integer_bits": args.integer_bits}
        )
    except ValueError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 2

    formatter = Formatter(config)
    try:
        rendered = formatter.vprintf(args.template, args.arguments)
    except SprintfError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1

    _write_value(rendered)
    return 0


def _handle_chain(args: argparse.Namespace) -> int:
    unknown = [name for name in args.functions if name not in FUNCTIONS]
    if unknown:
        sys.stderr.write(f"error: unknown function(s): {', '.join(unknown)}\n")
        return 2

    wrapped = chain(args.text)
    for name in args.functions:
        wrapped = getattr(wrapped, name)()
    _write_value(wrapped.value())
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    if args.command == "sprintf":
        return _handle_sprintf(args)
    if args.command == "chain":
        return _handle_chain(args)
    parser.error("no command provided")
    return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
