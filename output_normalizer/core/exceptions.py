"""Output normalizer exception hierarchy.

Errors raised by user getters, setters and strategies are never wrapped;
only failures detected by the normalizer itself use these types.
"""

from __future__ import annotations


class OutputNormalizerError(Exception):
    """Base exception for all output normalizer errors."""


# --- Mapping ---


class MappingError(OutputNormalizerError):
    """Base for shape-mapping errors."""


class InvalidOutputClassError(MappingError):
    """Raised when a target class is not an Output shape."""

    def __init__(self, source_class: str, target_class: str, required_class: str) -> None:
        self.source_class = source_class
        self.target_class = target_class
        self.required_class = required_class
        super().__init__(
            f'Can not map "{source_class}" to "{target_class}", '
            f'allowed only instances of "{required_class}"'
        )


# --- Traversal ---


class TraversalError(OutputNormalizerError):
    """Base for errors raised while walking the input graph."""


class CircularReferenceError(TraversalError):
    """Raised when a value is reached again on its own normalization path."""

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(f"Circular reference detected while normalizing {type_name}")


class MaxDepthExceededError(TraversalError):
    """Raised when the input nests deeper than the configured limit."""

    def __init__(self, max_depth: int) -> None:
        self.max_depth = max_depth
        super().__init__(f"Maximum normalization depth of {max_depth} exceeded")


# --- Accessor ---


class AccessorError(OutputNormalizerError):
    """Base for property accessor errors."""


class PropertyNotFoundError(AccessorError):
    """Raised when an object exposes no readable property of the given name."""

    def __init__(self, class_name: str, property_name: str) -> None:
        self.class_name = class_name
        self.property_name = property_name
        super().__init__(f"{class_name} has no readable property '{property_name}'")


class PropertyNotWritableError(AccessorError):
    """Raised when writing a property that has no setter."""

    def __init__(self, class_name: str, property_name: str) -> None:
        self.class_name = class_name
        self.property_name = property_name
        super().__init__(f"Property '{property_name}' of {class_name} is not writable")
