"""``perch parse`` — print the compiled parts of a route definition."""

import argparse
import sys

from perch.errors import GrammarSyntaxError
from perch.routing.grammar import compile_definition
from perch.routing.part import Part


def _kind(part: Part) -> str:
    if part.alternatives is not None:
        return "alternatives"
    if part.literal:
        return "literal"
    if part.has_value:
        return "value"
    return "flag"


def _detail(part: Part) -> str:
    details: list[str] = []
    if part.named:
        details.append(f"-{part.name}" if part.short else f"--{part.name}")
    if part.alternatives is not None:
        details.append(" | ".join(part.alternatives))
    if part.value_type:
        details.append(f"type={part.value_type}")
    return "  ".join(details)


def run_parse(args: argparse.Namespace) -> None:
    """Compile ``args.definition`` and print a table of its parts.

    Exits with code 2 if the definition cannot be compiled.
    """
    try:
        parts = compile_definition(args.definition)
    except GrammarSyntaxError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc

    if not parts:
        print("Empty route definition.")
        return

    # Build rows: (name, style, kind, required, detail)
    rows = [
        (
            part.name,
            "positional" if part.positional else "named",
            _kind(part),
            "yes" if part.required else "no",
            _detail(part),
        )
        for part in parts
    ]

    headers = ("NAME", "STYLE", "KIND", "REQUIRED", "DETAIL")
    widths = [max(len(h), *(len(r[i]) for r in rows)) for i, h in enumerate(headers[:-1])]
    fmt = "  ".join(f"{{:<{w}}}" for w in widths) + "  {}"
    print(fmt.format(*headers).rstrip())
    print("-" * min(sum(widths) + 2 * len(widths) + 6, 80))
    for row in rows:
        print(fmt.format(*row).rstrip())
