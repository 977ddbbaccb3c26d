"""
Error handling for the LASCSS CLI.

This module provides the exception hierarchy for CLI operations together
with the top-level handler that formats errors and exits.
"""

import os
import sys
import traceback
from typing import Any, Dict, Optional


# Maximum length for traceback output in CLI
_CLI_TRACE_LIMIT = 4000


class CLIError(Exception):
    """
    Base exception for all CLI operations.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code for programmatic handling
        hint: Optional suggestion for resolving the error
        context: Additional metadata about the error
    """

    def __init__(
        self,
        message: str,
        *,
        code: str,
        hint: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.hint = hint
        self.context = context or {}

    def __str__(self) -> str:
        return self.message


class CLIValidationError(CLIError):
    """Invalid command arguments or options."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault('code', 'CLI_VALIDATION_ERROR')
        super().__init__(message, **kwargs)


class CLIRuntimeError(CLIError):
    """Errors during command execution."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault('code', 'CLI_RUNTIME_ERROR')
        super().__init__(message, **kwargs)


class CLIFileNotFoundError(CLIError):
    """
    Required file or directory not found.

    Raised when:
    - No node_modules/lascss installation is found from the workspace
    - meta.min.css or utility.min.css is missing
    """

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault('code', 'CLI_FILE_NOT_FOUND')
        super().__init__(message, **kwargs)


class CLIDependencyError(CLIError):
    """Missing or incompatible dependencies (pygls for the ``lsp`` command)."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault('code', 'CLI_DEPENDENCY_ERROR')
        super().__init__(message, **kwargs)


def format_cli_error(
    exc: BaseException,
    *,
    verbose: bool = False,
    include_traceback: bool = False
) -> str:
    """
    Format exception for CLI display with context and hints.

    Examples:
        >>> try:
        ...     raise CLIValidationError("Unknown prefix", hint="Use a utility name such as bg")
        ... except Exception as e:
        ...     print(format_cli_error(e))
        Error [CLI_VALIDATION_ERROR]: Unknown prefix
        Hint: Use a utility name such as bg
    """
    lines = []

    if isinstance(exc, CLIError):
        lines.append(f"Error [{exc.code}]: {exc.message}")
        if exc.hint:
            lines.append(f"Hint: {exc.hint}")
        if verbose and exc.context:
            lines.append("\nContext:")
            for key, value in exc.context.items():
                lines.append(f"  {key}: {value}")
    else:
        formatter = getattr(exc, "format", None)
        if callable(formatter):
            lines.append(f"Error: {formatter()}")
        else:
            lines.append(f"Error: {exc.__class__.__name__}: {exc}")

    if include_traceback:
        lines.append("\nTraceback:")
        lines.append(format_traceback_excerpt())

    return "\n".join(lines)


def format_traceback_excerpt() -> str:
    """
    Format current exception traceback with size limit.

    Note:
        Should only be called within an exception handler context.
    """
    trace = traceback.format_exc().strip()
    if len(trace) <= _CLI_TRACE_LIMIT:
        return trace
    return f"{trace[:_CLI_TRACE_LIMIT - 3]}..."


def _env_flag(name: str) -> bool:
    val = os.getenv(name)
    if val is None:
        return False
    return val.strip().lower() in {"1", "true", "yes", "on"}


def cli_verbose_enabled(verbose_flag: bool = False) -> bool:
    """
    Determine whether verbose error output is enabled.

    Respects an explicit flag and the LASCSS_VERBOSE/LASCSS_DEBUG
    environment variables.
    """
    return verbose_flag or _env_flag("LASCSS_VERBOSE") or _env_flag("LASCSS_DEBUG")


def cli_reraise_enabled() -> bool:
    """Re-raise instead of exiting when LASCSS_RERAISE or LASCSS_DEBUG is set."""
    return _env_flag("LASCSS_RERAISE") or _env_flag("LASCSS_DEBUG")


def handle_cli_exception(
    exc: BaseException,
    *,
    verbose: bool = False,
    exit_code: int = 1
) -> None:
    """
    Handle exception at CLI top-level with proper formatting and exit.

    Note:
        This function calls sys.exit() and does not return.
    """
    verbose_effective = cli_verbose_enabled(verbose)
    if cli_reraise_enabled():
        raise exc

    error_message = format_cli_error(
        exc,
        verbose=verbose_effective,
        include_traceback=verbose_effective
    )
    print(error_message, file=sys.stderr)
    sys.exit(exit_code)
