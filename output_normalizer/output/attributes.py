"""Per-property directives attached with typing.Annotated."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class EntityToId:
    """Replace a related entity (or a collection of them) with its identifier.

    Attach it to a field or property annotation:

        author: Annotated[User | None, EntityToId()] = None
        tags: Annotated[list[Tag], EntityToId(property="slug")]

    Args:
        property: Identifier property read from the related object.
        suffix: Appended to the output key. None derives it from the
            identifier name ("author" -> "author_id", "tags" -> "tags_slugs"
            for collections), a string is appended as given, False appends
            nothing.
    """

    property: str = "id"
    suffix: str | Literal[False] | None = None
