"""Console route configuration.

RouteOptions is a frozen dataclass — the typed form of the options
mapping accepted by ``ConsoleRoute.factory()``.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from perch.errors import ConfigurationError

_MAPPING_KEYS = ("constraints", "defaults", "aliases")


@dataclass(frozen=True, slots=True)
class RouteOptions:
    """Options for one console route. Immutable after creation.

    Only ``route`` is required::

        options = RouteOptions(route="deploy <env>", defaults={"env": "dev"})
    """

    route: str
    constraints: Mapping[str, str | re.Pattern[str]] = field(default_factory=dict)
    defaults: Mapping[str, Any] = field(default_factory=dict)
    aliases: Mapping[str, str] = field(default_factory=dict)
    filters: Any = None
    validators: Any = None

    @classmethod
    def from_mapping(cls, options: Any) -> RouteOptions:
        """Build options from a plain mapping, e.g. loaded from a config file.

        Raises ``ConfigurationError`` if *options* is not a mapping or has
        no ``route`` entry. Missing mapping keys default to empty.
        """
        if not isinstance(options, Mapping):
            msg = f"Route options must be a mapping, got {type(options).__name__}"
            raise ConfigurationError(msg)
        if options.get("route") is None:
            msg = 'Missing "route" in options mapping'
            raise ConfigurationError(msg)

        kwargs: dict[str, Any] = {key: options.get(key) or {} for key in _MAPPING_KEYS}
        return cls(
            route=options["route"],
            filters=options.get("filters"),
            validators=options.get("validators"),
            **kwargs,
        )
