"""Output shapes and property directives."""

from __future__ import annotations

from output_normalizer.output.attributes import EntityToId
from output_normalizer.output.base import Output, is_output_class

__all__ = [
    "Output",
    "is_output_class",
    "EntityToId",
]
