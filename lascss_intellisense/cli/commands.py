"""
Command handlers for the LASCSS CLI.

Each handler receives the parsed ``argparse.Namespace`` (with the resolved
``settings`` attached by ``main``) and reports failures through
``handle_cli_exception``.
"""

import argparse
import json
import os
import sys
from pathlib import Path

from ..catalog import build_catalog, find_installation, merge_catalog
from ..core.generator import Catalog, generate_classes_with_details
from ..core.parser import parse_meta_vars, parse_utility_classes
from ..errors import ArtifactNotFoundError
from .errors import (
    CLIDependencyError,
    CLIFileNotFoundError,
    CLIRuntimeError,
    CLIValidationError,
    handle_cli_exception,
)


def _catalog_from_files(args: argparse.Namespace) -> Catalog:
    settings = args.settings
    generated = generate_classes_with_details(parse_meta_vars(args.meta), settings.namespace)
    utility = parse_utility_classes(args.utility) if args.utility else {}
    return merge_catalog(generated, utility)


def _catalog_from_workspace(args: argparse.Namespace) -> Catalog:
    settings = args.settings
    workspace = Path(args.workspace)
    installation = find_installation(workspace, settings.package_name)
    if installation is None:
        raise CLIFileNotFoundError(
            f"{settings.package_name} not found from {workspace}",
            hint=f"Run 'npm install {settings.package_name}' or pass --meta/--utility explicitly",
        )
    return build_catalog(installation, settings)


def _filter_catalog(catalog: Catalog, prefix: str) -> Catalog:
    classes = [name for name in catalog.classes if name.startswith(prefix)]
    details = {name: catalog.details[name] for name in classes if name in catalog.details}
    return Catalog(classes=classes, details=details, variants=list(catalog.variants))


def cmd_catalog(args: argparse.Namespace) -> None:
    """
    Handle the 'catalog' subcommand: print the merged completion catalog.

    Examples:
        >>> cmd_catalog(args)  # doctest: +SKIP
        {"classes": ["bg-red-50", ...], "details": {...}, "variants": [...]}
    """
    try:
        if args.utility and not args.meta:
            raise CLIValidationError("--utility requires --meta", hint="Pass both generated stylesheets")
        try:
            catalog = _catalog_from_files(args) if args.meta else _catalog_from_workspace(args)
        except ArtifactNotFoundError as exc:
            raise CLIFileNotFoundError(exc.message, hint=exc.hint, context={"path": exc.path}) from exc

        if args.prefix:
            catalog = _filter_catalog(catalog, args.prefix)

        if args.classes_only:
            for name in catalog.classes:
                print(name)
        else:
            print(json.dumps(catalog.to_dict(), indent=2))
    except Exception as exc:
        handle_cli_exception(exc, verbose=getattr(args, "verbose", False))


def cmd_lsp(args: argparse.Namespace) -> None:
    """
    Handle the 'lsp' subcommand to launch the LASCSS language server.

    Starts the server over stdio for editor integration.
    """
    try:
        try:
            from lascss_intellisense.lsp.server import create_server
        except ImportError as exc:
            raise CLIDependencyError(
                "pygls is not installed",
                hint="Install with: pip install lascss-intellisense",
            ) from exc

        server = create_server(args.settings)
        print(f"Starting LASCSS language server (pid={os.getpid()})", file=sys.stderr)

        try:
            server.start_io()
        except KeyboardInterrupt:
            print("Language server interrupted by user.", file=sys.stderr)
        except Exception as exc:
            raise CLIRuntimeError(
                f"Language server stopped unexpectedly: {exc}",
            ) from exc

    except Exception as exc:
        handle_cli_exception(exc, verbose=getattr(args, "verbose", False))


__all__ = ["cmd_catalog", "cmd_lsp"]
