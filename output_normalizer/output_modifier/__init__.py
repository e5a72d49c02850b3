"""Output modifiers - post-mapping hooks."""

from __future__ import annotations

from output_normalizer.output_modifier.protocol import OutputModifier

__all__ = ["OutputModifier"]
