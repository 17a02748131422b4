"""Diagnostic codes and data structures.

Defines error codes, categories and the structured diagnostic message
carried by every ScopeError.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization for ScopeError.

    Inherits from ``StrEnum`` so that ``str(category)`` and direct string
    comparisons work without accessing ``.value``.

    Categories:
        CONSTRUCTION: View could not be created (bad target)
        ASSIGNMENT: Write rejected by the view (reserved accessor)
    """

    CONSTRUCTION = "construction"
    ASSIGNMENT = "assignment"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Construction errors (view creation)
        2000-2999: Assignment errors (write resolution)
    """

    # Construction errors (1000-1999)
    INVALID_TARGET = 1001

    # Assignment errors (2000-2999)
    RESERVED_ASSIGNMENT = 2001

    @property
    def category(self) -> ErrorCategory:
        """Category derived from the code's numeric range."""
        if self.value < 2000:
            return ErrorCategory.CONSTRUCTION
        return ErrorCategory.ASSIGNMENT


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for humans and for tools that log or display scope errors.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        help_url: Documentation reference for this error
        key: Scope key involved in the error (assignment errors)
        expected_type: Expected kind of value (construction errors)
        received_type: Actual type received (construction errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    help_url: str | None = None
    key: str | None = None
    expected_type: str | None = None
    received_type: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    @property
    def category(self) -> ErrorCategory:
        """Error category of this diagnostic's code."""
        return self.code.category

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output with
        control-character escaping (log injection prevention).

        Example output:
            error[RESERVED_ASSIGNMENT]: Cannot assign to reserved key '$this'
              = key: $this
              = help: Assign to a regular key, or mutate the target directly
              = note: see docs/errors.md#reserved-assignment

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
