"""UUIDs normalize to their canonical string."""

from __future__ import annotations

from typing import Any
from uuid import UUID


class UUIDNormalizer:
    def supports(self, obj: Any) -> bool:
        return isinstance(obj, UUID)

    def normalize(self, obj: UUID) -> str:
        return str(obj)
