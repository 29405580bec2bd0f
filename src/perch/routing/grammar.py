"""Console route grammar compiler.

Turns a route definition string into an ordered tuple of ``Part`` records.
The definition is scanned left to right; at every position the lexical
forms below are tried in order and the first one that matches wins.
Several forms are prefixes of others, so the order is load-bearing::

    --name  --name=value          mandatory long param
    [--name]                      optional long flag
    [--name=]  [--name=value]     optional long param
    -x  -x=n  -x=s                mandatory short param
    [-x]  [-x=n]  [-x=s]          optional short param
    [ a | b ]:group               optional literal alternatives
    ( a | b ):group               mandatory literal alternatives
    ( --a | -b ):group            mandatory flag alternatives
    [ --a | -b ]:group            optional flag alternatives
    [name]                        optional literal
    [NAME]  [<name>]              optional value
    <name>                        mandatory value
    NAME                          mandatory value
    name                          mandatory literal
"""

import itertools
import logging
import re
from collections.abc import Callable, Iterator
from typing import TypeAlias

from perch.errors import GrammarSyntaxError
from perch.routing.part import Part

logger = logging.getLogger("perch.routing")

# Shared counter for synthesised alternative group names
_Counter: TypeAlias = Iterator[int]
_Builder: TypeAlias = Callable[[re.Match[str], _Counter], Part]

_NAME = r"[a-zA-Z0-9][a-zA-Z0-9_\-]+"
_LITERAL = r"[a-z0-9][a-zA-Z0-9_]*"
_FLAG = r"-+[a-zA-Z0-9][a-zA-Z0-9_\-]*"
_END = r"(?:\ +|$)"
_GROUP = r"(?::(?P<group>[a-zA-Z0-9]+))?"


def _form(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern, re.VERBOSE)


def _split_options(options: str, *, strip_dashes: bool = False) -> tuple[str, ...]:
    names = [o for o in re.split(r" *\| *", options.strip()) if o]
    if strip_dashes:
        names = [o.lstrip("-") for o in names]
    # dict.fromkeys keeps declaration order
    return tuple(dict.fromkeys(names))


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


def _long(required: bool) -> _Builder:
    def build(m: re.Match[str], counter: _Counter) -> Part:
        return Part(
            name=m["name"],
            positional=False,
            required=required,
            has_value=bool(m.groupdict().get("has_value")),
        )

    return build


def _short(required: bool) -> _Builder:
    def build(m: re.Match[str], counter: _Counter) -> Part:
        return Part(
            name=m["name"],
            positional=False,
            required=required,
            short=True,
            has_value=m["type"] is not None,
            value_type=m["type"],
        )

    return build


def _literal_alternatives(required: bool, prefix: str) -> _Builder:
    def build(m: re.Match[str], counter: _Counter) -> Part:
        return Part(
            name=m["group"] or f"{prefix}{next(counter)}",
            positional=True,
            literal=True,
            required=required,
            alternatives=_split_options(m["options"]),
        )

    return build


def _flag_alternatives(required: bool) -> _Builder:
    def build(m: re.Match[str], counter: _Counter) -> Part:
        return Part(
            name=m["group"] or f"unnamedGroupAt{next(counter)}",
            positional=False,
            required=required,
            alternatives=_split_options(m["options"], strip_dashes=True),
        )

    return build


def _positional(*, literal: bool, required: bool, lower: bool = False) -> _Builder:
    def build(m: re.Match[str], counter: _Counter) -> Part:
        name = m["name"]
        return Part(
            name=name.lower() if lower else name,
            positional=True,
            literal=literal,
            required=required,
            has_value=not literal,
        )

    return build


# ---------------------------------------------------------------------------
# Lexical forms, in precedence order
# ---------------------------------------------------------------------------

LEXICAL_FORMS: tuple[tuple[re.Pattern[str], _Builder], ...] = (
    (
        _form(rf"--(?P<name>{_NAME})(?P<has_value>=\S*?)?{_END}"),
        _long(required=True),
    ),
    (
        _form(rf"\[\ *?--(?P<name>{_NAME})\ *?\]{_END}"),
        _long(required=False),
    ),
    (
        _form(rf"\[\ *?--(?P<name>{_NAME})(?P<has_value>=\S*?)?\ *?\]{_END}"),
        _long(required=False),
    ),
    (
        _form(rf"-(?P<name>[a-zA-Z0-9])(?:=(?P<type>[ns]))?{_END}"),
        _short(required=True),
    ),
    (
        _form(rf"\[\ *?-(?P<name>[a-zA-Z0-9])(?:=(?P<type>[ns]))?\ *?\]{_END}"),
        _short(required=False),
    ),
    # At least one "|" so that [name] falls through to the optional literal
    (
        _form(
            rf"""
            \[
                (?P<options>\ *{_LITERAL}\ *(?:\|\ *{_LITERAL}\ *)+)
            \]
            {_GROUP}{_END}
            """
        ),
        _literal_alternatives(required=False, prefix="unnamedGroup"),
    ),
    (
        _form(
            rf"""
            \(
                (?P<options>\ *{_LITERAL}\ *(?:\|\ *{_LITERAL}\ *)*)
            \)
            {_GROUP}{_END}
            """
        ),
        _literal_alternatives(required=True, prefix="unnamedGroupAt"),
    ),
    (
        _form(
            rf"""
            \(
                (?P<options>\ *{_FLAG}\ *(?:\|\ *{_FLAG}\ *)*)
            \)
            {_GROUP}{_END}
            """
        ),
        _flag_alternatives(required=True),
    ),
    (
        _form(
            rf"""
            \[
                (?P<options>\ *{_FLAG}\ *(?:\|\ *{_FLAG}\ *)*)
            \]
            {_GROUP}{_END}
            """
        ),
        _flag_alternatives(required=False),
    ),
    (
        _form(rf"\[\ *(?P<name>{_LITERAL})\ *\]{_END}"),
        _positional(literal=True, required=False),
    ),
    (
        _form(rf"\[(?P<name>[A-Z0-9_]+)\]{_END}"),
        _positional(literal=False, required=False, lower=True),
    ),
    (
        _form(rf"\[\ *<(?P<name>[a-zA-Z0-9_]+)>\ *\]{_END}"),
        _positional(literal=False, required=False, lower=True),
    ),
    (
        _form(rf"<\ *(?P<name>[a-zA-Z0-9_]+)\ *>{_END}"),
        _positional(literal=False, required=True),
    ),
    (
        _form(rf"(?P<name>[A-Z0-9_]+){_END}"),
        _positional(literal=False, required=True, lower=True),
    ),
    (
        _form(rf"(?P<name>{_LITERAL}){_END}"),
        _positional(literal=True, required=True),
    ),
)


def compile_definition(definition: str) -> tuple[Part, ...]:
    """Compile a console route definition into its parts.

    Examples::

        "foo <bar>"   -> (Part("foo", literal), Part("bar", value))
        "[--verbose]" -> (Part("verbose", named, required=False),)
        "(start|stop):action"
                      -> (Part("action", alternatives=("start", "stop")),)

    Raises ``GrammarSyntaxError`` with the unconsumed remainder when no
    lexical form matches at the current position.
    """
    text = definition.strip()
    counter = itertools.count(1)
    parts: list[Part] = []
    pos = 0

    while pos < len(text):
        for pattern, build in LEXICAL_FORMS:
            m = pattern.match(text, pos)
            if m is not None:
                break
        else:
            raise GrammarSyntaxError(text[pos:], definition)

        parts.append(build(m, counter))
        pos = m.end()

    logger.debug("Compiled %r into %d parts", definition, len(parts))
    return tuple(parts)
