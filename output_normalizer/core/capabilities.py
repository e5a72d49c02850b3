"""Capability checks used to classify values during normalization.

Each predicate is pure. The engine composes them in a fixed priority
order: scalar, array-like, then for objects collection-like, iterable-like
and self-serializing.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable, Mapping, Sequence
from enum import Enum
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel

_SCALAR_TYPES = (str, bytes, int, float)
_ARRAY_TYPES = (dict, list, tuple)
_TEXT_TYPES = (str, bytes, bytearray)


@runtime_checkable
class JsonSerializable(Protocol):
    """Objects that render their own plain representation."""

    def __json__(self) -> Any:
        ...


def is_scalar(value: Any) -> bool:
    """Check if a value is returned unchanged by the normalizer."""
    return value is None or isinstance(value, _SCALAR_TYPES)


def is_array_like(value: Any) -> bool:
    """Check if a value is a builtin dict, list or tuple."""
    return isinstance(value, _ARRAY_TYPES)


def is_collection_like(value: Any) -> bool:
    """Check if a value is a non-builtin sequence or mapping object."""
    if is_scalar(value) or is_array_like(value):
        return False
    return isinstance(value, (Sequence, Mapping))


def is_iterable_like(value: Any) -> bool:
    """Check if a value is some other enumerable object.

    Pydantic models define __iter__ over their fields and Flag members
    iterate over their bits; both are treated as plain objects.
    """
    if is_scalar(value) or is_array_like(value) or isinstance(value, (BaseModel, Enum)):
        return False
    return isinstance(value, Iterable)


def is_self_serializing(value: Any) -> bool:
    """Check if a value exposes a __json__ hook."""
    return not isinstance(value, type) and isinstance(value, JsonSerializable)


def collection_to_array(value: Any) -> dict[Any, Any] | list[Any]:
    """Convert a collection-like object to a dict or list."""
    if isinstance(value, Mapping):
        return dict(value.items())
    return list(value)


def is_collection_type(tp: Any) -> bool:
    """Check if a declared type holds many values (text types excluded)."""
    if not isinstance(tp, type) or issubclass(tp, _TEXT_TYPES):
        return False
    return issubclass(tp, Collection)
