from __future__ import annotations

from pathlib import Path
from typing import List

import pytest
from lsprotocol.types import TextDocumentItem

from lascss_intellisense.errors import LasError
from lascss_intellisense.lsp.workspace import LascssWorkspace

from tests.conftest import PROJECT_DIR

SOURCE_DIR = PROJECT_DIR / "src"


def _make_uri(path: Path) -> str:
    return path.resolve().as_uri()


@pytest.fixture()
def reported() -> List[LasError]:
    return []


@pytest.fixture()
def workspace(reported: List[LasError]) -> LascssWorkspace:
    root_uri = _make_uri(PROJECT_DIR)
    ws = LascssWorkspace(root_uri, reporter=reported.append)
    ws.set_root(root_uri)
    return ws


def open_document(
    workspace: LascssWorkspace,
    filename: str,
    *,
    text: str | None = None,
    language_id: str = "html",
    version: int = 1,
) -> TextDocumentItem:
    path = SOURCE_DIR / filename
    if text is None:
        text = path.read_text(encoding="utf-8")
    item = TextDocumentItem(
        uri=_make_uri(path),
        language_id=language_id,
        version=version,
        text=text,
    )
    workspace.did_open(item)
    return item


def position_after(snippet: str, text: str) -> tuple[int, int]:
    for idx, line in enumerate(text.split("\n")):
        col = line.find(snippet)
        if col != -1:
            return idx, col + len(snippet)
    raise AssertionError(f"Snippet '{snippet}' not found in document")


__all__ = ["workspace", "reported", "open_document", "position_after", "SOURCE_DIR"]
