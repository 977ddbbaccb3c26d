"""Document level state tracking for the LASCSS language server."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from lsprotocol.types import Position
from pygls.uris import to_fs_path

# Characters that can appear in a (possibly variant-prefixed) utility class.
_CLASS_TAIL = re.compile(r"[\w:/\-\[\]]+$")
_CLASS_HEAD = re.compile(r"^[\w:/\-\[\]]+")


@dataclass
class DocumentState:
    """Text of an open document plus the helpers completion needs."""

    uri: str
    text: str
    version: int
    language_id: Optional[str] = None
    path: Path = field(init=False)
    lines: List[str] = field(init=False)

    def __post_init__(self) -> None:
        self.path = self._resolve_path()
        self._set_text(self.text)

    def update(self, text: str, version: int) -> None:
        self._set_text(text)
        self.version = version

    def line_prefix(self, position: Position) -> str:
        if position.line >= len(self.lines):
            return ""
        return self.lines[position.line][: position.character]

    def class_prefix_at(self, position: Position) -> str:
        """The partial class name that ends at ``position``."""
        match = _CLASS_TAIL.search(self.line_prefix(position))
        return match.group(0) if match else ""

    def class_at(self, position: Position) -> str:
        """The whole class name surrounding ``position``."""
        if position.line >= len(self.lines):
            return ""
        line = self.lines[position.line]
        if position.character > len(line):
            return ""
        right = _CLASS_HEAD.search(line[position.character:])
        return self.class_prefix_at(position) + (right.group(0) if right else "")

    def offset_at(self, position: Position) -> int:
        line_index = min(max(position.line, 0), len(self.lines) - 1)
        start_offset = 0
        for idx in range(line_index):
            start_offset += len(self.lines[idx]) + 1
        column = min(max(position.character, 0), len(self.lines[line_index]))
        return start_offset + column

    def _resolve_path(self) -> Path:
        try:
            return Path(to_fs_path(self.uri))
        except (TypeError, ValueError):
            return Path(self.uri)

    def _set_text(self, text: str) -> None:
        self.text = text
        self.lines = text.split("\n")


__all__ = ["DocumentState"]
