"""Shared constants for scopeview.

Single source of truth for the reserved accessor names, the contextual
variable sigil and the table of primitive types that cannot be wrapped.
Placing them here keeps view.py, access.py and diagnostics free of
circular imports.

Constants are grouped by concern:
- Reserved accessors: names intercepted before normal resolution
- Contextual variables: naming convention for view-local bindings
- Target validation: types rejected by create_view()
- Diagnostics: documentation links used in error hints

Python 3.13+. Standard library only.
"""

import numbers

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Reserved accessors
    "THIS_KEY",
    "PARENT_KEY",
    "PARENTS_KEY",
    "CONTEXTUAL_KEY",
    "RESERVED_KEYS",
    # Contextual variables
    "CONTEXTUAL_SIGIL",
    # Target validation
    "PRIMITIVE_TYPES",
    # Diagnostics
    "DOCS_URL",
]

# ============================================================================
# RESERVED ACCESSORS
# ============================================================================
#
# These four names are answered by the view itself and never reach the
# contextual overlay, the target or the parent chain. They are read-only:
# assigning to any of them raises ReservedAssignmentError.
#
#   $this        the wrapped target, returned verbatim (not re-wrapped)
#   $parent      the direct parent (None when absent)
#   $parents     fresh list of ancestors, nearest first
#   $contextual  the view's own overlay mapping, same object on every read
#
# ============================================================================

THIS_KEY: str = "$this"
PARENT_KEY: str = "$parent"
PARENTS_KEY: str = "$parents"
CONTEXTUAL_KEY: str = "$contextual"

RESERVED_KEYS: frozenset[str] = frozenset(
    {THIS_KEY, PARENT_KEY, PARENTS_KEY, CONTEXTUAL_KEY}
)

# ============================================================================
# CONTEXTUAL VARIABLES
# ============================================================================

# Keys starting with the sigil that are not found anywhere are created in
# the writing view's own overlay instead of its target ($index, $item, ...).
# The overlay itself accepts any key; the sigil only drives write placement.
CONTEXTUAL_SIGIL: str = "$"

# ============================================================================
# TARGET VALIDATION
# ============================================================================

# Values of these types are scalars, not containers; a view over them has no
# key space to resolve against. numbers.Number covers Decimal, Fraction and
# any other registered numeric type.
PRIMITIVE_TYPES: tuple[type, ...] = (
    type(None),
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    bytearray,
    numbers.Number,
)

# ============================================================================
# DIAGNOSTICS
# ============================================================================

# Relative to the repository root; rendered in the "= note:" line.
DOCS_URL: str = "docs/errors.md"
