"""Key transformation for normalized output.

    "userName"      -> "user_name"
    "HTTPSEnabled"  -> "https_enabled"
    "user-name"     -> "user_name"
    "prénom"        -> "prénom"
"""

from __future__ import annotations

import re
from functools import lru_cache

_SEPARATORS = re.compile(r"[\W_]+")
_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")


@lru_cache(maxsize=4096)
def to_snake_case(key: str) -> str:
    """Convert a camelCase, PascalCase, kebab or spaced key to snake_case."""
    value = _SEPARATORS.sub("_", key)
    value = _ACRONYM_BOUNDARY.sub(r"\1_\2", value)
    value = _WORD_BOUNDARY.sub(r"\1_\2", value)
    return value.strip("_").lower()
