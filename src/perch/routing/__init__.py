"""Routing — console route grammar compiler and matcher.

Definitions are compiled once when a route is created; the immutable
parts are then matched against each invocation's argument tokens.
"""

from perch.routing.grammar import compile_definition
from perch.routing.matcher import match_parts
from perch.routing.part import ParamValue, Part, RouteMatch
from perch.routing.route import ConsoleRoute

__all__ = [
    "ConsoleRoute",
    "ParamValue",
    "Part",
    "RouteMatch",
    "compile_definition",
    "match_parts",
]
