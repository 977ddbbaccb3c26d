"""Workspace commands."""

from __future__ import annotations

CLEAR_CACHE_COMMAND = "lascss.clearCache"


def register(server) -> None:
    workspace = server.lascss_workspace

    @server.command(CLEAR_CACHE_COMMAND)
    def _clear_cache(ls, *args) -> None:  # noqa: ARG001
        workspace.clear_cache()
