"""Perch CLI — inspect and try out console route definitions.

Entry point registered as ``perch`` in ``pyproject.toml``::

    [project.scripts]
    perch = "perch.cli:main"
"""

import argparse
import logging
import sys


def _key_value(text: str) -> tuple[str, str]:
    key, sep, value = text.partition("=")
    if not sep or not key:
        msg = f"expected KEY=VALUE, got {text!r}"
        raise argparse.ArgumentTypeError(msg)
    return key, value


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``perch`` command."""
    parser = argparse.ArgumentParser(
        prog="perch",
        description="Perch — console route grammar compiler and matcher.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log why a match failed",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- perch parse ------------------------------------------------------
    parse_parser = subparsers.add_parser("parse", help="Show the compiled parts of a route")
    parse_parser.add_argument("definition", help='Route definition (e.g. "foo <bar>")')

    # -- perch match ------------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Match tokens against a route")
    match_parser.add_argument("definition", help='Route definition (e.g. "foo <bar>")')
    match_parser.add_argument(
        "tokens",
        nargs="*",
        help="Tokens to match; put them after -- when they start with a dash",
    )
    match_parser.add_argument(
        "--constraint",
        action="append",
        type=_key_value,
        default=[],
        metavar="NAME=REGEX",
        help="Regex a bound value must match (repeatable)",
    )
    match_parser.add_argument(
        "--default",
        action="append",
        type=_key_value,
        default=[],
        metavar="KEY=VALUE",
        help="Default parameter value (repeatable)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "parse":
        from perch.cli._parse import run_parse

        run_parse(args)
    elif args.command == "match":
        from perch.cli._match import run_match

        run_match(args)
