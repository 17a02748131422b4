"""scopeview - layered scope resolution for template engines.

Wraps a target object in a view that resolves keys through a private
overlay of contextual variables, then the target, then a chain of parent
scopes. Loop variables such as ``$index`` shadow outer names without
copying or merging any object.

Public API:
    create_view - Create a ScopeView over a target
    ScopeView - The view type (Mapping protocol plus item assignment)
    Resolution - Provenance record returned by ScopeView.lookup()
    ResolutionOrigin - Tier that answered a lookup

Exceptions:
    ScopeError - Base exception class
    InvalidTargetError - Primitive value passed as target
    ReservedAssignmentError - Write to $this, $parent, $parents or $contextual

Submodules:
    scopeview.constants - Reserved names and the contextual sigil
    scopeview.access - Key-space adapters for mappings, sequences and objects
    scopeview.diagnostics - Error codes, templates and formatting
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import InvalidTargetError, ReservedAssignmentError, ScopeError
from .view import Resolution, ResolutionOrigin, ScopeView, create_view

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("scopeview")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "InvalidTargetError",
    "Resolution",
    "ResolutionOrigin",
    "ReservedAssignmentError",
    "ScopeError",
    "ScopeView",
    "__version__",
    "create_view",
]
