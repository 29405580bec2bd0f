"""``perch match`` — match tokens against a route definition.

Prints the bound parameters as ``key=value`` lines. Exits with code 1 on
no-match and 2 if the route cannot be built.
"""

import argparse
import sys

from perch.errors import PerchError
from perch.routing.part import ParamValue
from perch.routing.route import ConsoleRoute


def _format(value: ParamValue) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def run_match(args: argparse.Namespace) -> None:
    """Build a route from ``args`` and match ``args.tokens`` against it."""
    try:
        route = ConsoleRoute(
            args.definition,
            constraints=dict(args.constraint),
            defaults=dict(args.default),
        )
    except PerchError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc

    match = route.match_tokens(args.tokens)
    if match is None:
        print("No match.", file=sys.stderr)
        raise SystemExit(1)

    for key in sorted(match.params):
        print(f"{key}={_format(match.params[key])}")
