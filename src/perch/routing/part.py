"""Part and RouteMatch frozen dataclasses."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeAlias

if TYPE_CHECKING:
    from perch.routing.route import ConsoleRoute

# A bound parameter: raw token, flag/literal boolean, or None for an
# unselected value alternative
ParamValue: TypeAlias = str | bool | None


@dataclass(frozen=True, slots=True)
class Part:
    """One compiled unit of a console route definition.

    Value:        ``<file>``       (positional, has_value)
    Literal:      ``status``       (positional, literal)
    Flag:         ``[--verbose]``  (named)
    Alternatives: ``(start|stop)`` (alternatives is not None)

    ``value_type`` is the ``n``/``s`` tag of ``-x=n`` style short params,
    carried as metadata only.
    """

    name: str
    positional: bool
    literal: bool = False
    required: bool = True
    has_value: bool = False
    short: bool = False
    alternatives: tuple[str, ...] | None = None
    value_type: str | None = None

    @property
    def named(self) -> bool:
        return not self.positional


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful console route match."""

    route: ConsoleRoute
    params: Mapping[str, ParamValue]

    def get(self, name: str, default: Any = None) -> Any:
        return self.params.get(name, default)
