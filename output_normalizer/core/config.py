"""Normalizer configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field


class NormalizerConfig(BaseModel):
    """Configuration for the normalization engine.

    max_depth bounds the nesting depth of the input graph; None disables
    the limit. detect_cycles makes the engine raise on objects that are
    reached again on their own path instead of recursing forever.
    """

    max_depth: int | None = Field(default=128, ge=1)
    detect_cycles: bool = True
