from __future__ import annotations

from pathlib import Path
from typing import List

from lsprotocol.types import (
    CompletionItemKind,
    Position,
    TextDocumentIdentifier,
    TextDocumentItem,
    TextDocumentPositionParams,
)

from lascss_intellisense.config import CompletionSettings
from lascss_intellisense.errors import InstallationNotFoundError, LasError
from lascss_intellisense.lsp.workspace import CLASS_DETAIL, VARIANT_DETAIL, LascssWorkspace

from tests.lsp.conftest import open_document, position_after


def _complete(workspace: LascssWorkspace, uri: str, line: int, character: int):
    params = TextDocumentPositionParams(
        text_document=TextDocumentIdentifier(uri=uri),
        position=Position(line=line, character=character),
    )
    return workspace.completion(params)


def test_partial_class_completes_to_shades(workspace: LascssWorkspace) -> None:
    document = open_document(workspace, "index.html")
    line, character = position_after('class="bg-red-5', document.text)
    completions = _complete(workspace, document.uri, line, character)
    by_label = {item.label: item for item in completions.items}

    assert "bg-red-500" in by_label
    assert "bg-red-50" in by_label
    assert all(label.startswith("bg-red-5") for label in by_label)
    assert len(by_label) == len(completions.items)
    assert completions.is_incomplete is False


def test_colour_items_carry_swatch_documentation(workspace: LascssWorkspace) -> None:
    document = open_document(workspace, "index.html")
    line, character = position_after('class="bg-red-5', document.text)
    items = {item.label: item for item in _complete(workspace, document.uri, line, character).items}

    shade = items["bg-red-50"]
    assert shade.kind == CompletionItemKind.Color
    assert shade.detail.startswith("#")
    assert "data:image/svg+xml" in shade.documentation.value
    assert shade.text_edit.range.start == Position(line=line, character=character - len("bg-red-5"))
    assert shade.text_edit.range.end == Position(line=line, character=character)
    assert shade.text_edit.new_text == "bg-red-50"
    assert shade.sort_text == "1-001-bg-red-50"


def test_utility_declaration_is_the_class_detail(workspace: LascssWorkspace) -> None:
    document = open_document(workspace, "index.html")
    line, character = position_after('class="bg-red-5', document.text)
    items = {item.label: item for item in _complete(workspace, document.uri, line, character).items}
    assert items["bg-red-500"].detail == "background-color:var(--las-color-red-500);"
    assert items["bg-red-500"].kind == CompletionItemKind.Keyword


def test_variant_prefixed_token_completes_with_variant(workspace: LascssWorkspace) -> None:
    document = open_document(workspace, "index.html")
    line, character = position_after("hover:bg-red-7", document.text)
    items = {item.label: item for item in _complete(workspace, document.uri, line, character).items}
    assert "hover:bg-red-700" in items
    assert items["hover:bg-red-700"].detail == "#b91c1c"


def test_variant_names_are_offered(workspace: LascssWorkspace) -> None:
    document = open_document(workspace, "inline.html", text='<p class="ho"></p>')
    line, character = position_after('class="ho', document.text)
    items = {item.label: item for item in _complete(workspace, document.uri, line, character).items}
    variant = items["hover:"]
    assert variant.kind == CompletionItemKind.Module
    assert variant.detail == VARIANT_DETAIL
    assert variant.sort_text == "0-variant-hover:"


def test_utility_only_class_with_escaped_slash(workspace: LascssWorkspace) -> None:
    document = open_document(workspace, "index.html")
    line, character = position_after('class="w-1', document.text)
    items = {item.label: item for item in _complete(workspace, document.uri, line, character).items}
    assert items["w-1/2"].detail == "width:50%;"


def test_class_without_detail_uses_generic_label(workspace: LascssWorkspace) -> None:
    document = open_document(workspace, "inline.html", text='<p class="bg-odd"></p>')
    catalog = workspace.catalog_for(workspace.document(document.uri))
    catalog.classes.append("bg-oddity")
    line, character = position_after('class="bg-odd', document.text)
    items = {item.label: item for item in _complete(workspace, document.uri, line, character).items}
    assert items["bg-oddity"].detail == CLASS_DETAIL
    assert items["bg-oddity"].documentation is None


def test_unsupported_language_gets_no_items(workspace: LascssWorkspace) -> None:
    document = open_document(workspace, "script.py", text="bg-red-5", language_id="python")
    completions = _complete(workspace, document.uri, 0, len("bg-red-5"))
    assert completions.items == []


def test_unknown_document_gets_no_items(workspace: LascssWorkspace) -> None:
    assert _complete(workspace, "file:///nowhere/unknown.html", 0, 0).items == []


def test_missing_installation_is_reported_once(tmp_path: Path) -> None:
    reported: List[LasError] = []
    workspace = LascssWorkspace(
        tmp_path.as_uri(),
        settings=CompletionSettings(package_name="lascss-does-not-exist"),
        reporter=reported.append,
    )
    uri = (tmp_path / "page.html").as_uri()
    workspace.did_open(TextDocumentItem(uri=uri, language_id="html", version=1, text="bg-"))
    for _ in range(3):
        assert _complete(workspace, uri, 0, 3).items == []
    assert len(reported) == 1
    assert isinstance(reported[0], InstallationNotFoundError)
