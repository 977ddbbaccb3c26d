"""Shared protocol helpers for the LASCSS language server."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote

from lsprotocol.types import MarkupContent, MarkupKind, Position, Range

_HEX_COLOR = re.compile(r"^#?(?:[0-9a-fA-F]{6}|[0-9a-fA-F]{3})$")
_RGB_COLOR = re.compile(r"^rgb\(|^[0-9.]+\s+[0-9.]+\s+[0-9.]+", re.IGNORECASE)

_SWATCH_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="32" height="16">'
    '<rect width="32" height="16" rx="2" ry="2" fill="{fill}"/>'
    "</svg>"
)


@dataclass(slots=True)
class CompletionContext:
    """The partial class being typed and the range it occupies."""

    token: str
    replace_range: Range

    @classmethod
    def at(cls, position: Position, token: str) -> "CompletionContext":
        start = Position(line=position.line, character=max(position.character - len(token), 0))
        return cls(token=token, replace_range=Range(start=start, end=position))


def is_color_literal(value: str) -> bool:
    color = value.strip()
    return bool(_HEX_COLOR.match(color) or _RGB_COLOR.match(color))


def color_documentation(value: str) -> Optional[MarkupContent]:
    """Markdown with a small swatch for colour details, ``None`` otherwise."""
    if not is_color_literal(value):
        return None
    color = value.strip()
    uri = "data:image/svg+xml;utf8," + quote(_SWATCH_SVG.format(fill=color), safe="")
    return MarkupContent(kind=MarkupKind.Markdown, value=f"![color]({uri})\n\n`{color}`")


__all__ = [
    "CompletionContext",
    "color_documentation",
    "is_color_literal",
]
