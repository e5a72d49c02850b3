"""Object normalizer protocol.

Object normalizers take over the normalization of the objects they support.
The engine asks them in registration order; the first one that supports an
object produces its output verbatim.
"""

from __future__ import annotations

from typing import Any, Protocol


class ObjectNormalizer(Protocol):
    """Base object normalizer protocol."""

    def supports(self, obj: Any) -> bool:
        """Check if this normalizer handles the given object."""
        ...

    def normalize(self, obj: Any) -> Any:
        """Produce the plain representation of a supported object."""
        ...
