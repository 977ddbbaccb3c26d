"""Completion handlers."""

from __future__ import annotations

from lsprotocol.types import CompletionOptions, CompletionParams


def register(server) -> None:
    workspace = server.lascss_workspace
    options = CompletionOptions(trigger_characters=list(workspace.settings.trigger_characters))

    @server.feature("textDocument/completion", options)
    async def _completion(ls, params: CompletionParams):
        return workspace.completion(params)
