"""
Error kinds raised while resolving, loading and storing configuration.

Each error carries a human-readable message and, where the user can do
something about it, a suggestion the CLI prints as the next step.
"""

from __future__ import annotations

from pathlib import Path
from typing import TypeVar


class TheWayError(ValueError):
    """Base class for configuration failures."""

    def __init__(self, message: str, *, suggestion: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion

    def __str__(self) -> str:
        return self.message


class Homeless(TheWayError):
    """Raised when no per-user project directory can be determined."""

    def __init__(self) -> None:
        super().__init__("Couldn't find home directory")


class ConfigError(TheWayError):
    """Raised on resolution, provisioning and store failures."""


class NoDefaultCopyCommand(TheWayError):
    """Raised when the platform has no known clipboard command."""

    def __init__(self) -> None:
        super().__init__(
            "Couldn't find a default copy command for this platform",
            suggestion="Set `copy_cmd` in the configuration file by hand.",
        )


class StoreError(TheWayError):
    """Raised when a configuration file cannot be parsed into a record."""

    def __init__(self, path: Path, cause: Exception) -> None:
        super().__init__(f"Couldn't parse config file {path}: {cause}")
        self.path = path
        self.cause = cause


E = TypeVar("E", bound=TheWayError)


def with_suggestion(error: E, suggestion: str) -> E:
    """Attach *suggestion* to *error* and return it."""
    error.suggestion = suggestion
    return error
