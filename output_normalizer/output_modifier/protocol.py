"""Output modifier protocol.

Output modifiers run after an object has been mapped onto an Output shape.
Every modifier that supports the (output, source) pair is applied, in
registration order, and may mutate the output in place.
"""

from __future__ import annotations

from typing import Any, Protocol

from output_normalizer.output.base import Output


class OutputModifier(Protocol):
    """Base output modifier protocol."""

    def supports(self, output: Output, source: Any) -> bool:
        """Check if this modifier applies to the mapped output and its source."""
        ...

    def modify(self, output: Output, source: Any) -> None:
        """Mutate the mapped output using the original source object."""
        ...
