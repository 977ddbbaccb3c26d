"""pygls based Language Server entrypoint."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Optional

from lsprotocol.types import InitializedParams, InitializeParams, MessageType
from pygls.server import LanguageServer

from lascss_intellisense import __version__

from ..config import CompletionSettings, load_settings, settings_from_mapping
from ..errors import ConfigError, LasError
from .handlers import register_all
from .workspace import LascssWorkspace

logger = logging.getLogger(__name__)


class LascssLanguageServer(LanguageServer):
    """Concrete LanguageServer with LASCSS-specific state."""

    def __init__(self, settings: Optional[CompletionSettings] = None) -> None:
        super().__init__(name="lascss-lsp", version=__version__)
        self.lascss_workspace = LascssWorkspace(settings=settings, reporter=self._report_error)
        self._initialization_options: Any = None
        register_all(self)
        self._register_lifecycle_handlers()

    def _report_error(self, error: LasError) -> None:
        self.show_message(f"LASCSS: {error.message}", msg_type=MessageType.Error)

    def _load_settings(self, root: Path) -> CompletionSettings:
        settings = load_settings(root)
        if isinstance(self._initialization_options, dict):
            settings = settings_from_mapping(self._initialization_options, settings, source="initializationOptions")
        return settings

    def _register_lifecycle_handlers(self) -> None:
        workspace = self.lascss_workspace

        @self.feature("initialize")
        def _on_initialize(ls: "LascssLanguageServer", params: InitializeParams) -> None:
            ls._initialization_options = params.initialization_options

        @self.feature("initialized")
        async def _on_initialized(ls: "LascssLanguageServer", params: InitializedParams) -> None:  # noqa: ARG001
            workspace.set_root(ls.workspace.root_uri)
            try:
                workspace.configure(ls._load_settings(workspace.root_path))
            except ConfigError as exc:
                ls.show_message(exc.format(), msg_type=MessageType.Warning)
            logger.info("LASCSS workspace initialised at %s", workspace.root_path)


def create_server(settings: Optional[CompletionSettings] = None) -> LascssLanguageServer:
    return LascssLanguageServer(settings)


def main() -> None:
    server = create_server()
    logger.info("Starting LASCSS LSP (pid=%s)", os.getpid())
    server.start_io()


if __name__ == "__main__":  # pragma: no cover
    main()
