"""Workspace configuration support for the LASCSS language server and CLI."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import tomllib

from .errors import ConfigError

CONFIG_FILENAMES = ("lascss.toml", ".lascssrc")

DEFAULT_LANGUAGES = (
    "html",
    "css",
    "scss",
    "sass",
    "less",
    "stylus",
    "postcss",
    "javascript",
    "typescript",
    "javascriptreact",
    "typescriptreact",
    "vue",
    "svelte",
    "astro",
    "angular",
)


@dataclass
class CompletionSettings:
    """Where to find the framework and which documents get completions."""

    package_name: str = "lascss"
    meta_file: str = "dist/meta.min.css"
    utility_file: str = "dist/utility.min.css"
    # Token keys in meta.min.css carry this namespace (``--las-color-red-500``).
    namespace: str = "las-"
    languages: List[str] = field(default_factory=lambda: list(DEFAULT_LANGUAGES))
    trigger_characters: List[str] = field(default_factory=lambda: ["-", ":", " "])

    def supports_language(self, language_id: Optional[str]) -> bool:
        if not language_id:
            return True
        return language_id in self.languages


_STRING_FIELDS = {"package_name", "meta_file", "utility_file", "namespace"}
_LIST_FIELDS = {"languages", "trigger_characters"}


def _read_json_config(path: Path) -> Dict[str, Any]:
    content = path.read_text(encoding="utf-8")
    try:
        return json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in configuration file: {exc}", path=str(path)) from exc


def _read_toml_config(path: Path) -> Dict[str, Any]:
    with path.open("rb") as handle:
        try:
            return tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML in configuration file: {exc}", path=str(path)) from exc


def settings_from_mapping(
    data: Mapping[str, Any],
    base: Optional[CompletionSettings] = None,
    *,
    source: Optional[str] = None,
) -> CompletionSettings:
    """Overlay ``data`` on ``base`` (or the defaults), validating every value.

    Unknown keys are ignored so that editors may send extra options.
    """
    if not isinstance(data, Mapping):
        raise ConfigError("Configuration must be a table of settings.", path=source)
    section = data.get("lascss")
    if isinstance(section, Mapping):
        data = section
    known = {item.name for item in fields(CompletionSettings)}
    updates: Dict[str, Any] = {}
    for key, value in data.items():
        if key not in known:
            continue
        if key in _STRING_FIELDS:
            if not isinstance(value, str):
                raise ConfigError(f"Setting '{key}' must be a string.", path=source)
            updates[key] = value
        elif key in _LIST_FIELDS:
            if isinstance(value, str):
                value = [value]
            if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
                raise ConfigError(f"Setting '{key}' must be a list of strings.", path=source)
            updates[key] = list(value)
    return replace(base or CompletionSettings(), **updates)


def locate_config_file(root: Path, explicit: Optional[Path] = None) -> Optional[Path]:
    if explicit is not None:
        return explicit if explicit.exists() else None
    for candidate in CONFIG_FILENAMES:
        path = root / candidate
        if path.exists():
            return path
    return None


def load_settings(root: Path, explicit: Optional[Path] = None) -> CompletionSettings:
    config_path = locate_config_file(root, explicit)
    if config_path is None:
        return CompletionSettings()
    if config_path.suffix == ".toml":
        data = _read_toml_config(config_path)
    else:
        data = _read_json_config(config_path)
    return settings_from_mapping(data, source=str(config_path))


__all__ = [
    "CompletionSettings",
    "DEFAULT_LANGUAGES",
    "CONFIG_FILENAMES",
    "locate_config_file",
    "load_settings",
    "settings_from_mapping",
]
