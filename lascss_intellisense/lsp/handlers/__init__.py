"""Handler registration helpers."""

from __future__ import annotations

from . import commands, completion, documents, hover


def register_all(server) -> None:
    documents.register(server)
    completion.register(server)
    hover.register(server)
    commands.register(server)


__all__ = ["register_all"]
