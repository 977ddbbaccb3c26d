"""Classification of metadata token keys."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, Iterable, List, Mapping, Optional

SHADE_VALUES = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950)
DEFAULT_BREAKPOINTS = ("sm", "md", "lg", "xl", "2xl")

_SHADE_SUFFIX = re.compile(r"^(.*?)-(\d{1,3})$")


class TokenKind(Enum):
    """What a single ``meta.min.css`` custom property declares."""

    UTILITY_FLAG = auto()
    COLOR_SHADE = auto()
    COLOR_DEFAULT = auto()
    SINGLE_COLOR = auto()
    VARIANT = auto()
    BREAKPOINT = auto()
    UNRECOGNIZED = auto()


# Checked in order; ``single-color-`` and ``config-color-`` never start with ``color-``.
_KEY_PREFIXES = (
    ("config-color-", TokenKind.UTILITY_FLAG),
    ("single-color-", TokenKind.SINGLE_COLOR),
    ("color-", TokenKind.COLOR_DEFAULT),
    ("variant-", TokenKind.VARIANT),
    ("breakpoint-", TokenKind.BREAKPOINT),
)


@dataclass(slots=True)
class ClassifiedToken:
    """A token key tagged with its meaning.

    ``name`` is the key with the namespace and kind prefix removed; for
    shade overrides it is the color family and ``shade`` holds the rung.
    """

    key: str
    kind: TokenKind
    name: str
    value: str
    shade: Optional[int] = None


def classify_token(key: str, value: str, namespace: str = "las-") -> ClassifiedToken:
    bare = key[len(namespace):] if namespace and key.startswith(namespace) else key
    for prefix, kind in _KEY_PREFIXES:
        if not bare.startswith(prefix):
            continue
        rest = bare[len(prefix):]
        if kind is TokenKind.COLOR_DEFAULT:
            match = _SHADE_SUFFIX.match(rest)
            if match and int(match.group(2)) in SHADE_VALUES:
                return ClassifiedToken(key, TokenKind.COLOR_SHADE, match.group(1), value, int(match.group(2)))
        return ClassifiedToken(key, kind, rest, value)
    return ClassifiedToken(key, TokenKind.UNRECOGNIZED, bare, value)


def classify_tokens(table: Mapping[str, str], namespace: str = "las-") -> List[ClassifiedToken]:
    return [classify_token(key, value, namespace) for key, value in table.items()]


def group_by_kind(tokens: Iterable[ClassifiedToken]) -> Dict[TokenKind, List[ClassifiedToken]]:
    grouped: Dict[TokenKind, List[ClassifiedToken]] = {kind: [] for kind in TokenKind}
    for token in tokens:
        grouped[token.kind].append(token)
    return grouped


__all__ = [
    "SHADE_VALUES",
    "DEFAULT_BREAKPOINTS",
    "TokenKind",
    "ClassifiedToken",
    "classify_token",
    "classify_tokens",
    "group_by_kind",
]
