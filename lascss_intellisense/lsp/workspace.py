"""Workspace level state for the LASCSS language server."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Set

from lsprotocol.types import (
    CompletionItem,
    CompletionItemKind,
    CompletionList,
    Hover,
    HoverParams,
    MarkupContent,
    MarkupKind,
    Position,
    Range,
    TextDocumentContentChangeEvent,
    TextDocumentItem,
    TextDocumentPositionParams,
    TextEdit,
)
from pygls.uris import to_fs_path

from ..catalog import CatalogCache, CatalogResolver, Reporter
from ..config import CompletionSettings
from ..core.generator import Catalog
from .protocol import CompletionContext, color_documentation
from .state import DocumentState

_VARIANT_PREFIX = re.compile(r"^([a-zA-Z0-9_-]+:)(.*)$")

VARIANT_DETAIL = "LASCSS variant"
CLASS_DETAIL = "LASCSS class"


class LascssWorkspace:
    """Open documents plus the catalog resolver shared by every request."""

    def __init__(
        self,
        root_uri: Optional[str] = None,
        settings: Optional[CompletionSettings] = None,
        reporter: Optional[Reporter] = None,
    ) -> None:
        self.logger = logging.getLogger("lascss_intellisense.lsp.workspace")
        self.root_uri = root_uri
        self.root_path = self._resolve_root(root_uri)
        self.cache = CatalogCache()
        self.resolver = CatalogResolver(settings, cache=self.cache, reporter=reporter)
        self._open_documents: Dict[str, DocumentState] = {}

    @property
    def settings(self) -> CompletionSettings:
        return self.resolver.settings

    def set_root(self, root_uri: Optional[str]) -> None:
        self.root_uri = root_uri
        self.root_path = self._resolve_root(root_uri)

    def configure(self, settings: CompletionSettings) -> None:
        self.resolver.settings = settings
        self.cache.clear()

    def clear_cache(self) -> None:
        self.cache.clear()
        self.logger.info("LASCSS catalog cache cleared")

    # ------------------------------------------------------------------
    # Document lifecycle
    # ------------------------------------------------------------------
    def did_open(self, item: TextDocumentItem) -> DocumentState:
        document = DocumentState(uri=item.uri, text=item.text, version=item.version, language_id=item.language_id)
        self._open_documents[item.uri] = document
        return document

    def did_change(
        self,
        uri: str,
        version: int,
        changes: Sequence[TextDocumentContentChangeEvent],
    ) -> Optional[DocumentState]:
        document = self._open_documents.get(uri)
        if document is None:
            return None
        document.update(self._apply_content_changes(document, changes), version)
        return document

    def did_close(self, uri: str) -> None:
        self._open_documents.pop(uri, None)

    def document(self, uri: str) -> Optional[DocumentState]:
        return self._open_documents.get(uri)

    def catalog_for(self, document: DocumentState) -> Optional[Catalog]:
        return self.resolver.catalog_for(document.path, self.root_path)

    # ------------------------------------------------------------------
    # Completion
    # ------------------------------------------------------------------
    def completion(self, params: TextDocumentPositionParams) -> CompletionList:
        document = self.document(params.text_document.uri)
        if document is None or not self.settings.supports_language(document.language_id):
            return CompletionList(is_incomplete=False, items=[])
        catalog = self.catalog_for(document)
        if catalog is None:
            return CompletionList(is_incomplete=False, items=[])
        context = CompletionContext.at(params.position, document.class_prefix_at(params.position))
        items: List[CompletionItem] = []
        seen: Set[str] = set()
        for item in self._completion_items(catalog, context):
            if item.label in seen:
                continue
            seen.add(item.label)
            items.append(item)
        return CompletionList(is_incomplete=False, items=items)

    def _completion_items(self, catalog: Catalog, context: CompletionContext) -> Iterable[CompletionItem]:
        yield from self._variant_completions(catalog, context)
        yield from self._variant_class_completions(catalog, context)
        yield from self._class_completions(catalog, context)

    def _variant_completions(self, catalog: Catalog, context: CompletionContext) -> List[CompletionItem]:
        results: List[CompletionItem] = []
        for variant in catalog.variants:
            label = f"{variant}:"
            if not label.startswith(context.token):
                continue
            results.append(
                CompletionItem(
                    label=label,
                    kind=CompletionItemKind.Module,
                    detail=VARIANT_DETAIL,
                    filter_text=label,
                    sort_text=f"0-variant-{label}",
                    preselect=True,
                    text_edit=TextEdit(range=context.replace_range, new_text=label),
                )
            )
        return results

    def _variant_class_completions(self, catalog: Catalog, context: CompletionContext) -> List[CompletionItem]:
        # Variant-prefixed forms of utility classes are not all present in the catalog.
        match = _VARIANT_PREFIX.match(context.token)
        if match is None or match.group(1)[:-1] not in catalog.variants:
            return []
        prefix, suffix = match.group(1), match.group(2)
        results: List[CompletionItem] = []
        for base in catalog.classes:
            if ":" in base or not base.startswith(suffix):
                continue
            label = f"{prefix}{base}"
            detail = catalog.details.get(base) or catalog.details.get(label)
            results.append(self._class_item(label, detail, len(base) - len(suffix), context))
        return results

    def _class_completions(self, catalog: Catalog, context: CompletionContext) -> List[CompletionItem]:
        return [
            self._class_item(name, catalog.details.get(name), len(name) - len(context.token), context)
            for name in catalog.classes
            if name.startswith(context.token)
        ]

    def _class_item(
        self,
        label: str,
        detail: Optional[str],
        closeness: int,
        context: CompletionContext,
    ) -> CompletionItem:
        documentation = color_documentation(detail) if detail else None
        return CompletionItem(
            label=label,
            kind=CompletionItemKind.Color if documentation else CompletionItemKind.Keyword,
            detail=detail or CLASS_DETAIL,
            documentation=documentation,
            filter_text=label,
            sort_text=f"1-{max(closeness, 0):03d}-{label}",
            preselect=True,
            text_edit=TextEdit(range=context.replace_range, new_text=label),
        )

    # ------------------------------------------------------------------
    # Hover
    # ------------------------------------------------------------------
    def hover(self, params: HoverParams) -> Optional[Hover]:
        document = self.document(params.text_document.uri)
        if document is None or not self.settings.supports_language(document.language_id):
            return None
        name = document.class_at(params.position)
        if not name:
            return None
        catalog = self.catalog_for(document)
        if catalog is None:
            return None
        detail = catalog.details.get(name)
        if detail is None:
            return None
        swatch = color_documentation(detail)
        text = f"**{name}**\n\n" + (swatch.value if swatch else f"`{detail}`")
        start = document.class_prefix_at(params.position)
        hover_range = Range(
            start=Position(line=params.position.line, character=params.position.character - len(start)),
            end=Position(line=params.position.line, character=params.position.character - len(start) + len(name)),
        )
        return Hover(contents=MarkupContent(kind=MarkupKind.Markdown, value=text), range=hover_range)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _apply_content_changes(
        self,
        document: DocumentState,
        changes: Sequence[TextDocumentContentChangeEvent],
    ) -> str:
        text = document.text
        for change in changes:
            change_range = getattr(change, "range", None)
            if change_range is None:
                text = change.text
            else:
                start = document.offset_at(change_range.start)
                end = document.offset_at(change_range.end)
                text = text[:start] + change.text + text[end:]
            # Later ranges are relative to the text after this change.
            document.update(text, document.version)
        return text

    def _resolve_root(self, root_uri: Optional[str]) -> Path:
        if root_uri:
            try:
                return Path(to_fs_path(root_uri))
            except (TypeError, ValueError):
                return Path(root_uri)
        return Path.cwd()


__all__ = ["LascssWorkspace", "CLASS_DETAIL", "VARIANT_DETAIL"]
