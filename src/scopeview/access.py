"""Uniform key-space access over arbitrary containers.

A scope view resolves keys against targets and plain parents of three
shapes. Each shape gets a stateless adapter exposing the same five
operations, so the resolution code never inspects container types itself:

    has(obj, key)         own-or-inherited presence
    has_own(obj, key)     own presence (write step "overwrite in place")
    get(obj, key)         read a present key
    set(obj, key, value)  write, creating the key when absent
    keys(obj)             own keys in iteration order

Shapes:
    Mapping   keys are mapping keys; presence is ``key in obj`` for both
              has and has_own (a ChainMap's inner maps count as own)
    Sequence  keys are non-negative int indices below len(obj);
              set() at index len(obj) appends
    Object    keys are attribute names; own means the instance __dict__
              or a populated __slots__ member, inherited means hasattr();
              inherited dunder names (__class__, __doc__, ...) are absent

Errors raised by the container itself (IndexError past the end of a list,
TypeError on an immutable mapping, AttributeError from a read-only
property) propagate unchanged.

Python 3.13+.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable, Iterator, Mapping, MutableSequence, Sequence
from types import MemberDescriptorType
from typing import Any

__all__ = [
    "AttributeAccess",
    "KeyAccess",
    "MappingAccess",
    "SequenceAccess",
    "access_for",
]


def _is_dunder(name: str) -> bool:
    return len(name) > 4 and name.startswith("__") and name.endswith("__")


class KeyAccess(ABC):
    """Base adapter; concrete shapes implement every operation."""

    __slots__ = ()

    kind: str = "abstract"

    @abstractmethod
    def has(self, obj: Any, key: Hashable) -> bool:
        ...

    @abstractmethod
    def has_own(self, obj: Any, key: Hashable) -> bool:
        ...

    @abstractmethod
    def get(self, obj: Any, key: Hashable) -> Any:
        ...

    @abstractmethod
    def set(self, obj: Any, key: Hashable, value: Any) -> None:
        ...

    @abstractmethod
    def keys(self, obj: Any) -> Iterator[Hashable]:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class MappingAccess(KeyAccess):
    """Adapter for dict-like containers."""

    __slots__ = ()

    kind = "mapping"

    def has(self, obj: Mapping[Any, Any], key: Hashable) -> bool:
        return key in obj

    def has_own(self, obj: Mapping[Any, Any], key: Hashable) -> bool:
        return key in obj

    def get(self, obj: Mapping[Any, Any], key: Hashable) -> Any:
        return obj[key]

    def set(self, obj: Any, key: Hashable, value: Any) -> None:
        obj[key] = value

    def keys(self, obj: Mapping[Any, Any]) -> Iterator[Hashable]:
        return iter(obj)


class SequenceAccess(KeyAccess):
    """Adapter for list-like containers indexed by position."""

    __slots__ = ()

    kind = "sequence"

    def has(self, obj: Sequence[Any], key: Hashable) -> bool:
        # bool is an int subclass, but True is not an index
        return type(key) is int and 0 <= key < len(obj)

    def has_own(self, obj: Sequence[Any], key: Hashable) -> bool:
        return self.has(obj, key)

    def get(self, obj: Sequence[Any], key: Hashable) -> Any:
        return obj[key]  # type: ignore[index]

    def set(self, obj: Any, key: Hashable, value: Any) -> None:
        if isinstance(obj, MutableSequence) and key == len(obj) and type(key) is int:
            obj.append(value)
            return
        obj[key] = value

    def keys(self, obj: Sequence[Any]) -> Iterator[Hashable]:
        return iter(range(len(obj)))


class AttributeAccess(KeyAccess):
    """Adapter for plain objects, keyed by attribute name."""

    __slots__ = ()

    kind = "object"

    def has(self, obj: object, key: Hashable) -> bool:
        if self.has_own(obj, key):
            return True
        return isinstance(key, str) and not _is_dunder(key) and hasattr(obj, key)

    def has_own(self, obj: object, key: Hashable) -> bool:
        if not isinstance(key, str):
            return False
        instance_dict = getattr(obj, "__dict__", None)
        if isinstance(instance_dict, dict) and key in instance_dict:
            return True
        slot = getattr(type(obj), key, None)
        return isinstance(slot, MemberDescriptorType) and hasattr(obj, key)

    def get(self, obj: object, key: Hashable) -> Any:
        return getattr(obj, key)  # type: ignore[call-overload]

    def set(self, obj: object, key: Hashable, value: Any) -> None:
        setattr(obj, key, value)  # type: ignore[call-overload]

    def keys(self, obj: object) -> Iterator[Hashable]:
        instance_dict = getattr(obj, "__dict__", None)
        if isinstance(instance_dict, dict):
            yield from list(instance_dict)
        for cls in type(obj).__mro__:
            slots = cls.__dict__.get("__slots__", ())
            if isinstance(slots, str):
                slots = (slots,)
            for name in slots:
                if self.has_own(obj, name):
                    yield name


_MAPPING = MappingAccess()
_SEQUENCE = SequenceAccess()
_ATTRIBUTE = AttributeAccess()


def access_for(obj: object) -> KeyAccess:
    """Pick the adapter matching a container's shape."""
    match obj:
        case Mapping():
            return _MAPPING
        case str() | bytes() | bytearray():
            return _ATTRIBUTE
        case Sequence():
            return _SEQUENCE
        case _:
            return _ATTRIBUTE
