"""Lexical extraction of the two generated LASCSS stylesheets.

Both stylesheets come from the framework's own build and are minified, so a
pair of regular expressions is enough: no general CSS parsing is attempted.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Dict, Union

from ..errors import ArtifactNotFoundError, ArtifactUnreadableError

logger = logging.getLogger(__name__)

_META_VAR = re.compile(r"--([\w-]+):\s*([^;]+);")
# Class names may contain escaped slashes and brackets (``w-1\/2``, ``w-[10px]``).
_UTILITY_RULE = re.compile(r"\.([a-zA-Z0-9\\/\-\[\]:]+)\{([^}]*)\}")

PathLike = Union[str, Path]


def parse_meta_vars_text(content: str) -> Dict[str, str]:
    """Return every ``--name: value;`` declaration as ``{name: value}``.

    Declarations are collected regardless of the enclosing block; a later
    declaration of the same name wins.
    """
    variables: Dict[str, str] = {}
    for match in _META_VAR.finditer(content):
        variables[match.group(1)] = match.group(2).strip()
    return variables


def parse_utility_classes_text(content: str) -> Dict[str, str]:
    """Return ``{class name: first declaration}`` for every class rule.

    The first declaration keeps its trailing semicolon.  A rule with an
    empty body maps to the raw body text.
    """
    classes: Dict[str, str] = {}
    for match in _UTILITY_RULE.finditer(content):
        class_name = match.group(1).replace("\\/", "/")
        body = match.group(2) or ""
        declarations = [part.strip() for part in body.split(";") if part.strip()]
        classes[class_name] = f"{declarations[0]};" if declarations else body
    return classes


def _read_artifact(path: PathLike) -> str:
    file_path = Path(path)
    if not file_path.is_file():
        raise ArtifactNotFoundError(f"File not found: {file_path}", path=str(file_path))
    try:
        return file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ArtifactUnreadableError(f"Cannot read {file_path.name}: {exc}", path=str(file_path)) from exc


def parse_meta_vars(path: PathLike) -> Dict[str, str]:
    """Load the token table from a ``meta.min.css`` file."""
    table = parse_meta_vars_text(_read_artifact(path))
    logger.debug("Parsed %d tokens from %s", len(table), path)
    return table


def parse_utility_classes(path: PathLike) -> Dict[str, str]:
    """Load the class declarations from a ``utility.min.css`` file."""
    classes = parse_utility_classes_text(_read_artifact(path))
    logger.debug("Parsed %d utility classes from %s", len(classes), path)
    return classes


__all__ = [
    "parse_meta_vars",
    "parse_meta_vars_text",
    "parse_utility_classes",
    "parse_utility_classes_text",
]
