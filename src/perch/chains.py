"""Filter and validator chains attached to a console route.

A filter is any ``(str) -> str`` callable. A validator follows the same
protocol as a form validation rule::

    def rule(value: str) -> str | None:
        '''Return error message, or None if valid.'''

The route only stores its chains; callers run them over matched values::

    route = ConsoleRoute("deploy <env>", validators=[one_of("dev", "prod")])
    match = route.match_tokens(["deploy", "prod"])
    if match and route.validators.is_valid(match.get("env")):
        ...
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from typing import TypeAlias

# Type aliases for chain members
Filter: TypeAlias = Callable[[str], str]
Validator: TypeAlias = Callable[[str], str | None]


class FilterChain:
    """Ordered filters applied one after another."""

    __slots__ = ("_filters",)

    def __init__(self, filters: Iterable[Filter] = ()) -> None:
        self._filters: list[Filter] = list(filters)

    def attach(self, f: Filter) -> FilterChain:
        self._filters.append(f)
        return self

    def filter(self, value: str) -> str:
        for f in self._filters:
            value = f(value)
        return value

    def __len__(self) -> int:
        return len(self._filters)


class ValidatorChain:
    """Ordered validation rules, all of which run on every value."""

    __slots__ = ("_validators",)

    def __init__(self, validators: Iterable[Validator] = ()) -> None:
        self._validators: list[Validator] = list(validators)

    def attach(self, v: Validator) -> ValidatorChain:
        self._validators.append(v)
        return self

    def validate(self, value: str) -> list[str]:
        """Return the error messages for *value* (empty when valid)."""
        errors: list[str] = []
        for validator in self._validators:
            error = validator(value)
            if error is not None:
                errors.append(error)
        return errors

    def is_valid(self, value: str) -> bool:
        return not self.validate(value)

    def __len__(self) -> int:
        return len(self._validators)


# ---------------------------------------------------------------------------
# Built-in rules
# ---------------------------------------------------------------------------


def matches(pattern: str, message: str | None = None) -> Validator:
    """Value must match the given regex pattern."""
    compiled = re.compile(pattern)

    def check(value: str) -> str | None:
        if not compiled.search(value):
            return message or f"Must match pattern: {pattern}"
        return None

    return check


def one_of(*choices: str) -> Validator:
    """Value must be one of the given choices."""
    allowed = frozenset(choices)

    def check(value: str) -> str | None:
        if value not in allowed:
            options = ", ".join(sorted(allowed))
            return f"Must be one of: {options}"
        return None

    return check
