"""Diagnostic system for scope view errors.

Provides structured error diagnostics with codes, hints, and help references.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory
from .errors import InvalidTargetError, ReservedAssignmentError, ScopeError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "InvalidTargetError",
    "OutputFormat",
    "ReservedAssignmentError",
    "ScopeError",
]
