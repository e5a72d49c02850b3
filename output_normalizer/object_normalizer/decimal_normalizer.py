"""Decimals normalize to their exact string form."""

from __future__ import annotations

from decimal import Decimal
from typing import Any


class DecimalNormalizer:
    """Normalize Decimal values.

    Args:
        as_float: Emit floats instead of strings. Floats are native JSON
            numbers but may lose precision.
    """

    def __init__(self, as_float: bool = False) -> None:
        self._as_float = as_float

    def supports(self, obj: Any) -> bool:
        return isinstance(obj, Decimal)

    def normalize(self, obj: Decimal) -> str | float:
        if self._as_float:
            return float(obj)
        return str(obj)
