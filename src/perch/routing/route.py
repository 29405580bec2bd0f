"""Console route — a compiled definition plus its match-time options."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType
from typing import Any

from perch.chains import FilterChain, ValidatorChain
from perch.config import RouteOptions
from perch.errors import ConfigurationError
from perch.request import ConsoleRequest
from perch.routing.grammar import compile_definition
from perch.routing.matcher import match_parts
from perch.routing.part import ParamValue, Part, RouteMatch

logger = logging.getLogger("perch.routing")


def _compile_constraints(
    constraints: Mapping[str, str | re.Pattern[str]],
) -> dict[str, re.Pattern[str]]:
    compiled: dict[str, re.Pattern[str]] = {}
    for name, pattern in constraints.items():
        try:
            compiled[name] = re.compile(pattern)
        except (re.error, TypeError) as exc:
            msg = f"Invalid constraint for {name!r}: {exc}"
            raise ConfigurationError(msg) from exc
    return compiled


def _as_callables(items: Iterable[Any], kind: str) -> list[Any]:
    members = list(items)
    for member in members:
        if not callable(member):
            msg = f"Cannot use {type(member).__name__} as one of the {kind} for ConsoleRoute"
            raise ConfigurationError(msg)
    return members


def _filter_chain(filters: Any) -> FilterChain | None:
    if filters is None or isinstance(filters, FilterChain):
        return filters
    if isinstance(filters, Mapping) and "filters" in filters:
        return FilterChain(_as_callables(filters["filters"], "filters"))
    if isinstance(filters, Iterable) and not isinstance(filters, (str, bytes, Mapping)):
        return FilterChain(_as_callables(filters, "filters"))
    msg = f"Cannot use {type(filters).__name__} as filters for ConsoleRoute"
    raise ConfigurationError(msg)


def _validator_chain(validators: Any) -> ValidatorChain | None:
    if validators is None or isinstance(validators, ValidatorChain):
        return validators
    if isinstance(validators, Mapping) and "validators" in validators:
        return ValidatorChain(_as_callables(validators["validators"], "validators"))
    if isinstance(validators, Iterable) and not isinstance(validators, (str, bytes, Mapping)):
        return ValidatorChain(_as_callables(validators, "validators"))
    msg = f"Cannot use {type(validators).__name__} as validators for ConsoleRoute"
    raise ConfigurationError(msg)


class ConsoleRoute:
    """A console route: compiled once, matched once per invocation.

    Usage::

        route = ConsoleRoute(
            "user (add|remove):action <name> [--force]",
            constraints={"name": r"^[a-z]+$"},
            defaults={"force": False},
        )
        match = route.match(ConsoleRequest.from_argv())
        if match is not None:
            match.params  # {"action": "add", "add": True, "remove": False, ...}

    Parts, constraints, defaults, and aliases are read-only after
    construction, so a single route can be matched from several threads.
    """

    __slots__ = (
        "_aliases",
        "_assembled_params",
        "_constraints",
        "_defaults",
        "_parts",
        "definition",
        "filters",
        "validators",
    )

    def __init__(
        self,
        route: str,
        constraints: Mapping[str, str | re.Pattern[str]] | None = None,
        defaults: Mapping[str, ParamValue] | None = None,
        aliases: Mapping[str, str] | None = None,
        filters: Any = None,
        validators: Any = None,
    ) -> None:
        self.definition = route
        self._constraints = MappingProxyType(_compile_constraints(constraints or {}))
        self._defaults = MappingProxyType(dict(defaults or {}))
        self._aliases = MappingProxyType(dict(aliases or {}))
        self.filters = _filter_chain(filters)
        self.validators = _validator_chain(validators)
        self._assembled_params: dict[str, Any] = {}
        self._parts = compile_definition(route)

    @classmethod
    def factory(cls, options: RouteOptions | Mapping[str, Any]) -> ConsoleRoute:
        """Create a route from a ``RouteOptions`` or an options mapping.

        Raises ``ConfigurationError`` if the mapping has no ``route``.
        """
        if not isinstance(options, RouteOptions):
            options = RouteOptions.from_mapping(options)
        return cls(
            options.route,
            constraints=options.constraints,
            defaults=options.defaults,
            aliases=options.aliases,
            filters=options.filters,
            validators=options.validators,
        )

    @property
    def parts(self) -> tuple[Part, ...]:
        return self._parts

    @property
    def constraints(self) -> Mapping[str, re.Pattern[str]]:
        return self._constraints

    @property
    def defaults(self) -> Mapping[str, ParamValue]:
        return self._defaults

    @property
    def aliases(self) -> Mapping[str, str]:
        return self._aliases

    def match(self, request: object) -> RouteMatch | None:
        """Match a console request.

        Returns ``None`` when *request* is not a ``ConsoleRequest`` or
        its params do not satisfy the route.
        """
        if not isinstance(request, ConsoleRequest):
            return None
        return self.match_tokens(request.params)

    def match_tokens(self, tokens: Sequence[str]) -> RouteMatch | None:
        """Match a raw token list (argv without the program name)."""
        params = match_parts(
            self._parts,
            tokens,
            constraints=self._constraints,
            defaults=self._defaults,
            aliases=self._aliases,
        )
        if params is None:
            return None
        logger.debug("Matched %r with %r", self.definition, params)
        return RouteMatch(route=self, params=params)

    def assemble(
        self,
        params: Mapping[str, Any] | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> None:
        """Reset the assembled params. Console routes build no command line."""
        self._assembled_params = {}

    def get_assembled_params(self) -> dict[str, Any]:
        return self._assembled_params

    def __repr__(self) -> str:
        return f"ConsoleRoute({self.definition!r})"
