"""Output normalizer - declarative shaping of domain objects into plain data."""

from __future__ import annotations

from output_normalizer.accessor import Getter, ObjectAccessor, PropertyAccessor, Setter
from output_normalizer.core.capabilities import JsonSerializable
from output_normalizer.core.config import NormalizerConfig
from output_normalizer.core.engine import OutputNormalizer
from output_normalizer.core.exceptions import (
    AccessorError,
    CircularReferenceError,
    InvalidOutputClassError,
    MappingError,
    MaxDepthExceededError,
    OutputNormalizerError,
    PropertyNotFoundError,
    PropertyNotWritableError,
    TraversalError,
)
from output_normalizer.core.keys import to_snake_case
from output_normalizer.object_normalizer import (
    DateTimeNormalizer,
    DecimalNormalizer,
    EnumNormalizer,
    ObjectNormalizer,
    UUIDNormalizer,
    default_object_normalizers,
)
from output_normalizer.output import EntityToId, Output, is_output_class
from output_normalizer.output_modifier import OutputModifier

__all__ = [
    # Engine
    "OutputNormalizer",
    "NormalizerConfig",
    # Output shapes
    "Output",
    "is_output_class",
    "EntityToId",
    "JsonSerializable",
    # Strategies
    "ObjectNormalizer",
    "OutputModifier",
    "DateTimeNormalizer",
    "DecimalNormalizer",
    "EnumNormalizer",
    "UUIDNormalizer",
    "default_object_normalizers",
    # Accessor
    "PropertyAccessor",
    "ObjectAccessor",
    "Getter",
    "Setter",
    # Keys
    "to_snake_case",
    # Exceptions
    "OutputNormalizerError",
    "MappingError",
    "InvalidOutputClassError",
    "TraversalError",
    "CircularReferenceError",
    "MaxDepthExceededError",
    "AccessorError",
    "PropertyNotFoundError",
    "PropertyNotWritableError",
]
