"""Shared test fixtures."""

from __future__ import annotations

import pytest

from output_normalizer.accessor import PropertyAccessor
from output_normalizer.core.engine import OutputNormalizer
from output_normalizer.object_normalizer import default_object_normalizers


@pytest.fixture
def normalizer() -> OutputNormalizer:
    """Normalizer with the built-in object normalizers and no modifiers."""
    return OutputNormalizer(default_object_normalizers())


@pytest.fixture
def accessor() -> PropertyAccessor:
    return PropertyAccessor()
