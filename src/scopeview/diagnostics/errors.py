"""Scope view exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
Both concrete errors also derive from TypeError: a primitive target and an
assignment to a read-only accessor are type errors from the caller's point
of view, and code catching TypeError keeps working.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, ErrorCategory

__all__ = [
    "InvalidTargetError",
    "ReservedAssignmentError",
    "ScopeError",
]


class ScopeError(Exception):
    """Base exception for all scope view errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize ScopeError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)

    @property
    def category(self) -> ErrorCategory | None:
        """Error category, when a diagnostic is attached."""
        if self.diagnostic is None:
            return None
        return self.diagnostic.category


class InvalidTargetError(ScopeError, TypeError):
    """A view was requested over a primitive value.

    Raised synchronously by create_view(); no partial view is returned.

    Attributes:
        target_type: Name of the rejected value's type
    """

    def __init__(self, message: str | Diagnostic, *, target_type: str = "") -> None:
        """Initialize InvalidTargetError.

        Args:
            message: Error message string OR Diagnostic object
            target_type: Name of the rejected value's type
        """
        super().__init__(message)
        self.target_type = target_type


class ReservedAssignmentError(ScopeError, TypeError):
    """Assignment to one of the read-only reserved accessors.

    Only the failing assignment is affected; the view stays usable.

    Attributes:
        key: The reserved name that was assigned to
    """

    def __init__(self, message: str | Diagnostic, *, key: str = "") -> None:
        """Initialize ReservedAssignmentError.

        Args:
            message: Error message string OR Diagnostic object
            key: The reserved name that was assigned to
        """
        super().__init__(message)
        self.key = key
