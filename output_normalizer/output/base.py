"""Output shape marker."""

from __future__ import annotations

from typing import Any


class Output:
    """Marker base for response shapes.

    Subclasses must be constructible without arguments. They can be
    dataclasses, pydantic models or plain classes:

        @dataclass
        class UserOutput(Output):
            id: int = 0
            name: str = ""
    """


def is_output_class(cls: Any) -> bool:
    """Check if cls can be used as a shape-mapping target."""
    return isinstance(cls, type) and issubclass(cls, Output)
