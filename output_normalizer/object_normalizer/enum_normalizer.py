"""Enum members normalize to their value."""

from __future__ import annotations

from enum import Enum
from typing import Any


class EnumNormalizer:
    def supports(self, obj: Any) -> bool:
        return isinstance(obj, Enum)

    def normalize(self, obj: Enum) -> Any:
        return obj.value
