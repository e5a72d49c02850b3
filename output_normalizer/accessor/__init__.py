"""Property accessor - name-based reflection over objects."""

from __future__ import annotations

from output_normalizer.accessor.accessor import Getter, ObjectAccessor, PropertyAccessor, Setter
from output_normalizer.accessor.introspect import (
    ClassMetadata,
    PropertyMetadata,
    flatten_annotation,
    inspect_class,
)

__all__ = [
    "PropertyAccessor",
    "ObjectAccessor",
    "Getter",
    "Setter",
    "ClassMetadata",
    "PropertyMetadata",
    "flatten_annotation",
    "inspect_class",
]
