"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from scopeview.constants import DOCS_URL, RESERVED_KEYS

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Keeps messages testable and documents every error case in one place.
    """

    @staticmethod
    def invalid_target(value: object) -> Diagnostic:
        """Target is a primitive value and cannot be wrapped.

        Args:
            value: The rejected target

        Returns:
            Diagnostic for INVALID_TARGET
        """
        type_name = type(value).__name__
        msg = f"Cannot create a scope view over primitive value of type '{type_name}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_TARGET,
            message=msg,
            hint="Wrap the value in a dict or object and pass that as the target",
            help_url=f"{DOCS_URL}#invalid-target",
            expected_type="mapping, sequence or object",
            received_type=type_name,
        )

    @staticmethod
    def reserved_assignment(key: str) -> Diagnostic:
        """Write attempted on a read-only reserved accessor.

        Args:
            key: The reserved name

        Returns:
            Diagnostic for RESERVED_ASSIGNMENT
        """
        msg = f"Cannot assign to reserved key '{key}'"
        reserved = ", ".join(sorted(RESERVED_KEYS))
        return Diagnostic(
            code=DiagnosticCode.RESERVED_ASSIGNMENT,
            message=msg,
            hint=f"{reserved} are read-only; assign to a regular key or mutate the target",
            help_url=f"{DOCS_URL}#reserved-assignment",
            key=key,
        )
