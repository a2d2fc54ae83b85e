"""projdata exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathlib import Path


class ProjdataError(Exception):
    """Base exception for projdata errors."""


class ValidationError(ProjdataError, ValueError):
    """Raised when project metadata fails validation.

    Attributes:
        field: The metadata field that failed validation.
        value: The offending value.
        problem_id: Stable identifier for the kind of problem.
        solution: Suggested fix, shown alongside the message.
    """

    def __init__(
        self,
        message: str,
        *,
        field: str,
        value: str,
        problem_id: str,
        solution: str,
    ) -> None:
        """Initialize with error message and validation context."""
        super().__init__(message)
        self.field: str = field
        self.value: str = value
        self.problem_id: str = problem_id
        self.solution: str = solution


class TemplateNotFoundError(ProjdataError, LookupError):
    """Raised when no template exists for the requested output language.

    Attributes:
        language: The language that has no template.
    """

    def __init__(self, message: str, *, language: str) -> None:
        super().__init__(message)
        self.language: str = language


class ConfigError(ProjdataError):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when configuration cannot be loaded or parsed."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize with error message and optional location context."""
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column


class ConfigValidationError(ConfigError):
    """Raised when configuration fails validation."""

    def __init__(
        self,
        message: str,
        *,
        key: str,
        value: Any,  # pyright: ignore[reportAny,reportExplicitAny]
        expected: str,
        source: str | None = None,
    ) -> None:
        """Initialize with error message and validation context."""
        super().__init__(message)
        self.key: str = key
        self.value: Any = value  # pyright: ignore[reportExplicitAny]
        self.expected: str = expected
        self.source: str | None = source
