"""Resolution of ``var(--name, fallback)`` indirection inside the token table."""

from __future__ import annotations

import re
from typing import Mapping

MAX_RESOLVE_DEPTH = 5

_VAR_REFERENCE = re.compile(r"var\(\s*--([^) ,]+)(?:\s*,\s*([^)]+))?\s*\)")


def resolve_var(value: str, table: Mapping[str, str]) -> str:
    """Dereference the ``var()`` references in ``value`` against ``table``.

    One reference is substituted per step: the table value when the name
    is known, otherwise the fallback.  A reference to an unknown name
    without a fallback stops resolution and the partially resolved text is
    returned.  A value that still holds a reference after
    ``MAX_RESOLVE_DEPTH`` substitutions (a cycle, or a chain that is simply
    too deep) is returned as given, trimmed.
    """
    if not value:
        return value
    current = value
    for depth in range(MAX_RESOLVE_DEPTH + 1):
        match = _VAR_REFERENCE.search(current)
        if match is None:
            return current.strip()
        if depth == MAX_RESOLVE_DEPTH:
            break
        name, fallback = match.group(1), match.group(2)
        if name in table:
            replacement = table[name]
        elif fallback is not None:
            replacement = fallback
        else:
            return current.strip()
        current = current[: match.start()] + replacement + current[match.end():]
    return value.strip()


__all__ = ["MAX_RESOLVE_DEPTH", "resolve_var"]
