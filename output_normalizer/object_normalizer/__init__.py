"""Object normalizers - per-type overrides of generic normalization."""

from __future__ import annotations

from output_normalizer.object_normalizer.datetime_normalizer import DateTimeNormalizer
from output_normalizer.object_normalizer.decimal_normalizer import DecimalNormalizer
from output_normalizer.object_normalizer.enum_normalizer import EnumNormalizer
from output_normalizer.object_normalizer.protocol import ObjectNormalizer
from output_normalizer.object_normalizer.uuid_normalizer import UUIDNormalizer


def default_object_normalizers() -> list[ObjectNormalizer]:
    """The built-in normalizers, in their default order."""
    return [DateTimeNormalizer(), EnumNormalizer(), UUIDNormalizer(), DecimalNormalizer()]


__all__ = [
    "ObjectNormalizer",
    "DateTimeNormalizer",
    "DecimalNormalizer",
    "EnumNormalizer",
    "UUIDNormalizer",
    "default_object_normalizers",
]
