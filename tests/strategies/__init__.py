"""Hypothesis strategies for scopeview property-based testing.

Strategies are organized by domain:

- scope: keys, stored values, targets (accepted and rejected), view chains
- diagnostics: Diagnostic, DiagnosticCode and formatter configurations

Usage:
    from tests.strategies import scope_chains, primitive_values
    from tests.strategies.diagnostics import diagnostics
"""

from .diagnostics import diagnostic_codes, diagnostics, formatters
from .scope import (
    ScopeChain,
    any_keys,
    container_targets,
    contextual_keys,
    plain_keys,
    primitive_values,
    reserved_keys,
    scope_chains,
    shared_keys,
    stored_values,
)

__all__ = [
    "ScopeChain",
    "any_keys",
    "container_targets",
    "contextual_keys",
    "diagnostic_codes",
    "diagnostics",
    "formatters",
    "plain_keys",
    "primitive_values",
    "reserved_keys",
    "scope_chains",
    "shared_keys",
    "stored_values",
]
