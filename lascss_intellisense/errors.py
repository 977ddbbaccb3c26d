"""Error model for LASCSS catalog loading."""

from __future__ import annotations

from typing import Optional


class LasError(Exception):
    """Base class for failures surfaced to the editor or CLI user."""

    code: Optional[str] = None
    hint: Optional[str] = None

    def __init__(
        self,
        message: str,
        *,
        path: Optional[str] = None,
        code: Optional[str] = None,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        if code is not None:
            self.code = code
        if hint is not None:
            self.hint = hint

    def format(self) -> str:
        components = [self.message]
        meta_parts = []
        if self.path:
            meta_parts.append(self.path)
        if self.code:
            meta_parts.append(self.code)
        if meta_parts:
            components[-1] = f"{components[-1]} ({'; '.join(meta_parts)})"
        if self.hint:
            components.append(f"Hint: {self.hint}")
        return " ".join(part for part in components if part)


class InstallationNotFoundError(LasError):
    """Raised when no ``node_modules/lascss`` directory can be located."""

    code = "LASCSS_NOT_FOUND"
    hint = "Install the framework with: npm install lascss"


class ArtifactNotFoundError(LasError):
    """Raised when a generated stylesheet is missing from the installation."""

    code = "LASCSS_ARTIFACT_MISSING"
    hint = "Rebuild the framework so that dist/meta.min.css and dist/utility.min.css exist."


class ArtifactUnreadableError(LasError):
    """Raised when a generated stylesheet exists but cannot be read as UTF-8 text."""

    code = "LASCSS_ARTIFACT_UNREADABLE"
    hint = "Rebuild the framework; the generated stylesheet looks corrupted."


class ConfigError(LasError):
    """Raised when the workspace configuration file is malformed."""

    code = "LASCSS_CONFIG_ERROR"


__all__ = [
    "LasError",
    "InstallationNotFoundError",
    "ArtifactNotFoundError",
    "ArtifactUnreadableError",
    "ConfigError",
]
