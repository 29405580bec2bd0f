"""Perch — console route grammar compiler and matcher.

Compiles a human-readable route definition into immutable parts, then
matches command-line tokens against them.

Basic usage::

    from perch import ConsoleRoute

    route = ConsoleRoute("backup <db> [--compress] [--level=]")
    match = route.match_tokens(["backup", "main", "--level", "9"])
    if match is not None:
        match.params  # {"backup": True, "db": "main", "level": "9"}

A route that does not match returns ``None``; only an unparseable
definition raises (``GrammarSyntaxError``).
"""

import importlib

# Declare free-threading support (PEP 703)
_Py_mod_gil = 0

__version__ = "0.1.0-dev"

# Public name -> (module, attribute)
_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "ConfigurationError": ("perch.errors", "ConfigurationError"),
    "ConsoleRequest": ("perch.request", "ConsoleRequest"),
    "ConsoleRoute": ("perch.routing.route", "ConsoleRoute"),
    "FilterChain": ("perch.chains", "FilterChain"),
    "GrammarSyntaxError": ("perch.errors", "GrammarSyntaxError"),
    "Part": ("perch.routing.part", "Part"),
    "PerchError": ("perch.errors", "PerchError"),
    "RouteMatch": ("perch.routing.part", "RouteMatch"),
    "RouteOptions": ("perch.config", "RouteOptions"),
    "ValidatorChain": ("perch.chains", "ValidatorChain"),
    "compile_definition": ("perch.routing.grammar", "compile_definition"),
    "match_parts": ("perch.routing.matcher", "match_parts"),
}

__all__ = [
    "ConfigurationError",
    "ConsoleRequest",
    "ConsoleRoute",
    "FilterChain",
    "GrammarSyntaxError",
    "Part",
    "PerchError",
    "RouteMatch",
    "RouteOptions",
    "ValidatorChain",
    "compile_definition",
    "match_parts",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import perch`` fast while providing a clean top-level API.
    """
    target = _LAZY_IMPORTS.get(name)
    if target is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    module_name, attr = target
    return getattr(importlib.import_module(module_name), attr)
