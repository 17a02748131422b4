"""Scope view: layered key resolution over a target and its ancestors.

A ScopeView wraps a target object and answers reads, presence tests and
writes by searching three tiers in order:

    1. the view's own contextual overlay ($index, $item, ...)
    2. the target itself
    3. the parent chain (another ScopeView, or any plain container)

Four reserved keys are answered before any tier is consulted and are
read-only:

    $this        the target, verbatim
    $parent      the direct parent, or None
    $parents     fresh list of ancestors, nearest first
    $contextual  the overlay mapping itself

Reads fall through to ancestors. Writes are asymmetric: an existing key is
overwritten wherever it lives, a new sigil-prefixed key lands in the
writing view's overlay, and any other new key is created on the writing
view's target. A write never introduces a new key into an ancestor.

Architecture:
    The parent is modeled as a sum type (None | ScopeView | plain container)
    and matched structurally. Chains are walked iteratively, so resolution
    is O(depth) and deep chains never approach the recursion limit.

Thread Safety:
    None. Views are meant for a single in-process rendering pass.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterator, Mapping, MutableMapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from scopeview.access import KeyAccess, access_for
from scopeview.constants import (
    CONTEXTUAL_KEY,
    CONTEXTUAL_SIGIL,
    PARENT_KEY,
    PARENTS_KEY,
    PRIMITIVE_TYPES,
    RESERVED_KEYS,
    THIS_KEY,
)
from scopeview.diagnostics import (
    ErrorTemplate,
    InvalidTargetError,
    ReservedAssignmentError,
)

__all__ = [
    "Resolution",
    "ResolutionOrigin",
    "ScopeView",
    "create_view",
]

logger = logging.getLogger(__name__)

_MISSING: Any = object()


class ResolutionOrigin(StrEnum):
    """Tier that answered a lookup."""

    RESERVED = "reserved"
    CONTEXTUAL = "contextual"
    TARGET = "target"
    PARENT = "parent"


@dataclass(frozen=True, slots=True)
class Resolution:
    """Result of ScopeView.lookup().

    Attributes:
        value: Resolved value (may be None; presence is what counts)
        origin: Tier that held the key
        depth: Parent hops from the queried view (0 = the view itself)
    """

    value: Any
    origin: ResolutionOrigin
    depth: int


def _is_contextual_name(key: Hashable) -> bool:
    return isinstance(key, str) and key.startswith(CONTEXTUAL_SIGIL)


def _describe_parent(parent: object) -> str:
    match parent:
        case None:
            return "none"
        case ScopeView():
            return "view"
        case _:
            return type(parent).__name__


class ScopeView(Mapping[Hashable, Any]):
    """Layered view over a target, its contextual overlay and its ancestors.

    Supports the Mapping protocol for reads (``view[key]``, ``key in view``,
    ``view.get(key)``, iteration over visible keys) plus ``view[key] = value``
    for writes. ``view[key]`` raises KeyError for unresolvable keys;
    ``resolve()`` returns a default instead.

    Iteration yields own keys only. On object targets, class attributes,
    methods and properties resolve and test as present but are not
    iterated, so ``key in view`` can be True for a key missing from
    ``list(view)`` and ``len(view)``. Inherited dunder names such as
    ``__class__`` are never visible.

    Target, parent and overlay are fixed at construction. Only the overlay's
    contents and the containers' own keys ever change.

    Example:
        >>> outer = ScopeView({"title": "Menu", "items": ["tea", "coffee"]})
        >>> inner = outer.child({"item": "tea"}, {"$index": 0})
        >>> inner["title"], inner["item"], inner["$index"]
        ('Menu', 'tea', 0)
        >>> inner["$parent"] is outer
        True
    """

    __slots__ = ("_access", "_contextual", "_parent", "_target")

    _access: KeyAccess
    _contextual: MutableMapping[Hashable, Any]
    _parent: Any
    _target: Any

    def __init__(
        self,
        target: Any,
        parent: Any = None,
        contextual: MutableMapping[Hashable, Any] | None = None,
    ) -> None:
        """Wrap a target.

        Args:
            target: Mapping, sequence or object to resolve keys against
            parent: Optional ancestor, another ScopeView or any container
            contextual: Optional overlay, used by reference; a fresh dict
                is allocated when omitted

        Raises:
            InvalidTargetError: If target is None, a bool, a number
                (NaN included), or a str/bytes value
        """
        if isinstance(target, PRIMITIVE_TYPES):
            raise InvalidTargetError(
                ErrorTemplate.invalid_target(target),
                target_type=type(target).__name__,
            )
        overlay: MutableMapping[Hashable, Any] = {} if contextual is None else contextual
        object.__setattr__(self, "_target", target)
        object.__setattr__(self, "_parent", parent)
        object.__setattr__(self, "_contextual", overlay)
        object.__setattr__(self, "_access", access_for(target))
        logger.debug(
            "Created scope view over %s (parent: %s, contextual keys: %d)",
            type(target).__name__,
            _describe_parent(parent),
            len(overlay),
        )

    def __setattr__(self, name: str, value: object) -> None:
        msg = f"'{type(self).__name__}' attributes are read-only; assign keys with view[key] = value"
        raise AttributeError(msg)

    def __delattr__(self, name: str) -> None:
        msg = f"'{type(self).__name__}' attributes cannot be deleted"
        raise AttributeError(msg)

    # ------------------------------------------------------------------
    # Reserved accessors
    # ------------------------------------------------------------------

    @property
    def target(self) -> Any:
        """The wrapped target ($this)."""
        return self._target

    @property
    def parent(self) -> Any:
        """The direct parent ($parent), or None."""
        return self._parent

    @property
    def parents(self) -> list[Any]:
        """Ancestors nearest first ($parents); a new list on every access.

        A ScopeView parent contributes itself and its own ancestors. A plain
        parent is the last link of the chain.
        """
        chain: list[Any] = []
        level = self._parent
        while level is not None:
            chain.append(level)
            if not isinstance(level, ScopeView):
                break
            level = level._parent
        return chain

    @property
    def contextual(self) -> MutableMapping[Hashable, Any]:
        """The view's own overlay ($contextual), same object on every read."""
        return self._contextual

    @property
    def depth(self) -> int:
        """Number of ancestors."""
        return len(self.parents)

    def _reserved(self, key: str) -> Any:
        if key == THIS_KEY:
            return self._target
        if key == PARENT_KEY:
            return self._parent
        if key == PARENTS_KEY:
            return self.parents
        if key == CONTEXTUAL_KEY:
            return self._contextual
        raise AssertionError(key)

    # ------------------------------------------------------------------
    # Read resolution
    # ------------------------------------------------------------------

    def lookup(self, key: Hashable) -> Resolution | None:
        """Resolve a key and report which tier answered.

        Order: reserved accessor, own overlay, own target, then each ancestor
        in turn (overlay, target) until a plain parent ends the chain.

        Returns:
            Resolution, or None when no tier holds the key
        """
        if key in RESERVED_KEYS:
            return Resolution(self._reserved(key), ResolutionOrigin.RESERVED, 0)  # type: ignore[arg-type]
        level: Any = self
        depth = 0
        while True:
            overlay = level._contextual
            if key in overlay:
                return Resolution(overlay[key], ResolutionOrigin.CONTEXTUAL, depth)
            access = level._access
            if access.has(level._target, key):
                return Resolution(access.get(level._target, key), ResolutionOrigin.TARGET, depth)
            level = level._parent
            depth += 1
            match level:
                case None:
                    return None
                case ScopeView():
                    continue
                case _:
                    plain = access_for(level)
                    if plain.has(level, key):
                        return Resolution(plain.get(level, key), ResolutionOrigin.PARENT, depth)
                    return None

    def resolve(self, key: Hashable, default: Any = None) -> Any:
        """Read a key, returning default when it resolves nowhere."""
        found = self.lookup(key)
        if found is None:
            return default
        return found.value

    def __getitem__(self, key: Hashable) -> Any:
        value = self.resolve(key, _MISSING)
        if value is _MISSING:
            raise KeyError(key)
        return value

    # ------------------------------------------------------------------
    # Presence
    # ------------------------------------------------------------------

    def contains(self, key: Hashable) -> bool:
        """Report whether a key resolves anywhere in this scope.

        ``$this``, ``$parents`` and ``$contextual`` are always present;
        ``$parent`` only when a parent was supplied.
        """
        if key in RESERVED_KEYS:
            return key != PARENT_KEY or self._parent is not None
        level: Any = self
        while True:
            if key in level._contextual or level._access.has(level._target, key):
                return True
            level = level._parent
            match level:
                case None:
                    return False
                case ScopeView():
                    continue
                case _:
                    return access_for(level).has(level, key)

    def __contains__(self, key: object) -> bool:
        return self.contains(key)  # type: ignore[arg-type]

    # ------------------------------------------------------------------
    # Write resolution
    # ------------------------------------------------------------------

    def assign(self, key: Hashable, value: Any) -> None:
        """Write a key.

        Order:
            1. reserved accessors are read-only
            2. key in own overlay: overwrite there
            3. key owned by own target: overwrite there
            4. sigil-prefixed key: create in own overlay
            5. key visible through the parent: write where an ancestor
               holds it
            6. otherwise: create on own target

        An ancestor whose target only inherits the key (class attribute,
        say) receives it as a new own key unless a higher ancestor holds it.

        Raises:
            ReservedAssignmentError: If key is a reserved accessor
        """
        if key in RESERVED_KEYS:
            logger.debug("Rejected assignment to reserved key %s", key)
            raise ReservedAssignmentError(
                ErrorTemplate.reserved_assignment(key),  # type: ignore[arg-type]
                key=key,  # type: ignore[arg-type]
            )
        if key in self._contextual:
            self._contextual[key] = value
            logger.debug("Assigned %r in contextual overlay", key)
            return
        if self._access.has_own(self._target, key):
            self._access.set(self._target, key, value)
            logger.debug("Assigned %r on target", key)
            return
        if _is_contextual_name(key):
            self._contextual[key] = value
            logger.debug("Created contextual variable %r", key)
            return

        owner: ScopeView = self
        level = self._parent
        depth = 1
        while level is not None:
            if not isinstance(level, ScopeView):
                plain = access_for(level)
                if plain.has(level, key):
                    plain.set(level, key, value)
                    logger.debug("Assigned %r on plain parent at depth %d", key, depth)
                    return
                break
            if key in level._contextual:
                level._contextual[key] = value
                logger.debug("Assigned %r in contextual overlay at depth %d", key, depth)
                return
            if level._access.has(level._target, key):
                if level._access.has_own(level._target, key):
                    level._access.set(level._target, key, value)
                    logger.debug("Assigned %r on target at depth %d", key, depth)
                    return
                owner = level
            level = level._parent
            depth += 1

        owner._access.set(owner._target, key, value)
        logger.debug("Created %r on target of %s", key, "this view" if owner is self else "ancestor")

    def __setitem__(self, key: Hashable, value: Any) -> None:
        self.assign(key, value)

    # ------------------------------------------------------------------
    # Mapping protocol
    # ------------------------------------------------------------------

    def __iter__(self) -> Iterator[Hashable]:
        """Yield visible data keys, nearest scope first, without duplicates."""
        seen: set[Hashable] = set()
        level: Any = self
        while True:
            if isinstance(level, ScopeView):
                sources = (iter(level._contextual), level._access.keys(level._target))
            else:
                sources = (access_for(level).keys(level),)
            for source in sources:
                for key in source:
                    if key not in seen and key not in RESERVED_KEYS:
                        seen.add(key)
                        yield key
            if not isinstance(level, ScopeView) or level._parent is None:
                return
            level = level._parent

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(target={self._target!r}, "
            f"contextual={self._contextual!r}, depth={self.depth})"
        )

    # ------------------------------------------------------------------
    # Scope construction
    # ------------------------------------------------------------------

    def child(
        self,
        target: Any,
        contextual: MutableMapping[Hashable, Any] | None = None,
    ) -> ScopeView:
        """Create a nested scope whose parent is this view.

        Example:
            >>> rows = ScopeView({"items": [{"name": "a"}, {"name": "b"}]})
            >>> [rows.child(item, {"$index": i})["$index"]
            ...  for i, item in enumerate(rows["items"])]
            [0, 1]
        """
        return ScopeView(target, self, contextual)


def create_view(
    target: Any,
    parent: Any = None,
    contextual: MutableMapping[Hashable, Any] | None = None,
) -> ScopeView:
    """Create a scope view over target.

    Args:
        target: Mapping, sequence or object; primitives are rejected
        parent: Optional ancestor scope (ScopeView or plain container)
        contextual: Optional overlay of view-local variables

    Returns:
        New ScopeView

    Raises:
        InvalidTargetError: If target is a primitive value
    """
    return ScopeView(target, parent, contextual)
