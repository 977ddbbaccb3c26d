"""
LASCSS CLI entry point.

Dispatches the ``lsp`` and ``catalog`` subcommands after resolving the
workspace settings and configuring logging.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from lascss_intellisense import __version__
from lascss_intellisense.config import load_settings
from lascss_intellisense.errors import ConfigError

from .commands import cmd_catalog, cmd_lsp
from .errors import handle_cli_exception


def _configure_logging(args) -> None:
    """Configure the package logger from --log-level or LASCSS_LOG_LEVEL."""
    log_level = (
        getattr(args, 'log_level', None) or
        os.getenv('LASCSS_LOG_LEVEL', 'warning')
    ).lower()

    level_map = {
        'debug': logging.DEBUG,
        'info': logging.INFO,
        'warn': logging.WARNING,
        'warning': logging.WARNING,
        'error': logging.ERROR,
    }

    numeric_level = level_map.get(log_level, logging.WARNING)

    package_logger = logging.getLogger('lascss_intellisense')
    package_logger.setLevel(numeric_level)

    # Logs go to stderr; stdout carries catalog output and the LSP stream.
    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
        package_logger.propagate = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="LASCSS class completion catalog and language server",
        prog="lascss-intellisense"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        '--config',
        default=None,
        help='Path to a lascss.toml (or JSON .lascssrc) configuration file'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Print full tracebacks and detailed CLI errors (or set LASCSS_VERBOSE=1)'
    )
    parser.add_argument(
        '--workspace',
        default=str(Path.cwd()),
        help='Workspace root directory (defaults to current working directory)'
    )
    parser.add_argument(
        '--log-level',
        choices=['debug', 'info', 'warn', 'error'],
        default=None,
        help='Set logging level (or set LASCSS_LOG_LEVEL)'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    lsp_parser = subparsers.add_parser('lsp', help='Start the language server on stdio')
    lsp_parser.set_defaults(func=cmd_lsp)

    catalog_parser = subparsers.add_parser(
        'catalog',
        help='Print the completion catalog as JSON'
    )
    catalog_parser.add_argument('--meta', help='Explicit meta.min.css path (skips installation lookup)')
    catalog_parser.add_argument('--utility', help='Explicit utility.min.css path (requires --meta)')
    catalog_parser.add_argument('--prefix', default='', help='Only include classes starting with this prefix')
    catalog_parser.add_argument(
        '--classes-only', action='store_true',
        help='Print one class name per line instead of JSON'
    )
    catalog_parser.set_defaults(func=cmd_catalog)

    return parser


def main(argv: Optional[list] = None) -> None:
    """
    Main CLI entrypoint with subcommand support.

    Examples:
        >>> main(['catalog', '--prefix', 'bg-red'])  # doctest: +SKIP
        >>> main(['lsp'])  # doctest: +SKIP
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args)

    if not getattr(args, 'func', None):
        parser.print_help()
        sys.exit(1)

    try:
        args.settings = load_settings(
            Path(args.workspace).resolve(),
            Path(args.config).resolve() if args.config else None,
        )
    except ConfigError as exc:
        handle_cli_exception(exc, verbose=args.verbose)

    args.func(args)


__all__ = ["main", "build_parser"]
