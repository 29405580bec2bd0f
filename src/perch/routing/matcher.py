"""Console route matcher.

Matches a list of argument tokens against compiled parts. Named parts
(flags) are found anywhere in the token list and removed; whatever is
left is matched positionally, left to right. Matching is all-or-nothing:
every failure returns ``None`` and nothing partial ever surfaces.
"""

import logging
import re
from collections.abc import Mapping, Sequence

from perch.routing.part import ParamValue, Part

logger = logging.getLogger("perch.routing")

_FLAG_RE = re.compile(r"^-+")


def _names_for(name: str, aliases: Mapping[str, str]) -> list[str]:
    """Return *name* followed by every alias that points at it."""
    return [name, *(alias for alias, target in aliases.items() if target == name)]


def _recognition_pattern(part: Part, aliases: Mapping[str, str]) -> re.Pattern[str]:
    """Build the regex that recognises *part* in a single token.

    The ``name`` group captures which spelling matched, ``value`` an
    inline ``=value``.
    """
    value = r"(?:=(?P<value>.*))?" if part.has_value else ""

    if part.alternatives is not None:
        spellings = [n for alt in part.alternatives for n in _names_for(alt, aliases)]
        names = "|".join(re.escape(n) for n in spellings)
        return re.compile(rf"^-+(?P<name>{names}){value}$", re.IGNORECASE | re.DOTALL)

    dashes = "-" if part.short else "-{2,}"
    own = rf"{dashes}(?P<name>{re.escape(part.name)})"
    extra = [re.escape(a) for a in _names_for(part.name, aliases)[1:]]
    if extra:
        own = rf"(?:{own}|-+(?P<alias>{'|'.join(extra)}))"
    return re.compile(rf"^{own}{value}$", re.IGNORECASE | re.DOTALL)


def _canonical(matched: str, part: Part, aliases: Mapping[str, str]) -> str:
    """Map a matched spelling back to the declared alternative."""
    folded = matched.casefold()
    for alt in part.alternatives or ():
        if alt.casefold() == folded:
            return alt
    for alias, target in aliases.items():
        if alias.casefold() == folded:
            return target
    return matched


def _satisfies(
    part: Part, value: str, constraints: Mapping[str, re.Pattern[str]]
) -> bool:
    constraint = constraints.get(part.name)
    if not part.has_value or constraint is None:
        return True
    return constraint.search(value) is not None


def match_parts(
    parts: Sequence[Part],
    tokens: Sequence[str],
    constraints: Mapping[str, re.Pattern[str]] | None = None,
    defaults: Mapping[str, ParamValue] | None = None,
    aliases: Mapping[str, str] | None = None,
) -> dict[str, ParamValue] | None:
    """Match *tokens* against compiled *parts*.

    Returns the bound parameters merged over *defaults*, or ``None`` when
    the tokens do not satisfy the parts. Never raises for a mismatch.

    Example::

        parts = compile_definition("[--verbose] <file>")
        match_parts(parts, ["--verbose", "data.txt"])
        # {"verbose": True, "file": "data.txt"}
    """
    constraints = constraints or {}
    aliases = aliases or {}
    remaining = list(tokens)
    matches: dict[str, ParamValue] = {}

    named = [p for p in parts if p.named]
    positional = [p for p in parts if p.positional]

    # -- Named pass ---------------------------------------------------------
    for part in named:
        pattern = _recognition_pattern(part, aliases)
        for index, token in enumerate(remaining):
            m = pattern.match(token)
            if m is not None:
                break
        else:
            if part.required:
                logger.debug("No match: required flag %r not found", part.name)
                return None
            continue

        del remaining[index]

        value: ParamValue = True
        if part.has_value:
            value = m["value"]
            if not value:
                # Value comes from the token that followed the flag
                if index >= len(remaining):
                    logger.debug("No match: flag %r expects a value", part.name)
                    return None
                value = remaining.pop(index)
            if not _satisfies(part, value, constraints):
                logger.debug("No match: %r fails its constraint", part.name)
                return None

        matches[part.name] = value

        if part.alternatives is not None:
            chosen = _canonical(m["name"], part, aliases)
            for alt in part.alternatives:
                if alt == chosen:
                    matches[alt] = value
                else:
                    matches[alt] = None if part.has_value else False

    # -- Unrecognised flags -------------------------------------------------
    for token in remaining:
        if _FLAG_RE.match(token):
            logger.debug("No match: unrecognised flag %r", token)
            return None

    # -- Positional pass ----------------------------------------------------
    position = 0
    for part in positional:
        if position >= len(remaining):
            if part.required:
                logger.debug("No match: missing positional %r", part.name)
                return None
            break

        token = remaining[position]

        if part.literal:
            allowed = part.alternatives if part.alternatives is not None else (part.name,)
            if token not in allowed:
                logger.debug("No match: %r is not one of %r", token, allowed)
                return None

        if not _satisfies(part, token, constraints):
            logger.debug("No match: %r fails its constraint", part.name)
            return None

        if part.has_value:
            matches[part.name] = token
        elif part.alternatives is not None:
            for alt in part.alternatives:
                matches[alt] = alt == token
            matches[part.name] = token
        else:
            matches[part.name] = True

        position += 1

    if position < len(remaining):
        logger.debug("No match: extraneous arguments %r", remaining[position:])
        return None

    return {**(defaults or {}), **matches}
