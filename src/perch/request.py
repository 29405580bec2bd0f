"""Console request — the argument tokens of one command invocation."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ConsoleRequest:
    """Immutable console request.

    ``params`` holds the arguments already split off the command line,
    without the program name::

        request = ConsoleRequest.from_argv(["app.py", "deploy", "--force"])
        request.params  # ("deploy", "--force")
    """

    params: tuple[str, ...] = ()
    script_name: str = ""

    @classmethod
    def from_argv(cls, argv: Sequence[str] | None = None) -> ConsoleRequest:
        """Build a request from *argv* (defaults to ``sys.argv``)."""
        args = list(sys.argv if argv is None else argv)
        if not args:
            return cls()
        return cls(params=tuple(args[1:]), script_name=args[0])
