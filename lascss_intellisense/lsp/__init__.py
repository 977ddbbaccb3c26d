"""Language Server Protocol implementation for LASCSS."""

from .server import LascssLanguageServer, create_server

__all__ = [
    "LascssLanguageServer",
    "create_server",
]
