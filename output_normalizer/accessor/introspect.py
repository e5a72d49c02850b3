"""Class introspection for the property accessor.

Builds an ordered, immutable description of the readable and writable
properties a class declares. Results are cached per class.
"""

from __future__ import annotations

import dataclasses
import functools
import inspect
import logging
import types
import typing
from dataclasses import dataclass
from typing import Annotated, Any, ClassVar, Union, get_args, get_origin

from pydantic import BaseModel

logger = logging.getLogger(__name__)

_NONE_TYPE = type(None)


@dataclass(frozen=True)
class PropertyMetadata:
    """Description of a single named property of a class."""

    name: str
    readable: bool
    writable: bool
    read_types: tuple[type, ...] = ()
    write_types: tuple[type, ...] = ()
    attributes: tuple[Any, ...] = ()
    instance_field: bool = False  # plain annotated attribute, may be unset on an instance


@dataclass(frozen=True)
class ClassMetadata:
    """Ordered property descriptions of a class."""

    cls: type
    properties: tuple[PropertyMetadata, ...]

    def names(self) -> set[str]:
        return {prop.name for prop in self.properties}


def _is_public(name: str) -> bool:
    return not name.startswith("_")


def flatten_annotation(annotation: Any) -> tuple[tuple[type, ...], tuple[Any, ...]]:
    """Split an annotation into its concrete types and Annotated metadata.

    Unions are flattened, generic aliases reduced to their origin
    (list[User] -> list), and anything that is not a class is dropped.
    """
    found_types: list[type] = []
    attributes: list[Any] = []

    def _walk(tp: Any) -> None:
        origin = get_origin(tp)
        if origin is Annotated:
            inner, *extras = get_args(tp)
            attributes.extend(extras)
            _walk(inner)
        elif origin is Union or origin is types.UnionType:
            for member in get_args(tp):
                _walk(member)
        elif tp is Any:
            return
        elif tp is None:
            found_types.append(_NONE_TYPE)
        elif isinstance(origin, type):
            found_types.append(origin)
        elif isinstance(tp, type):
            found_types.append(tp)

    _walk(annotation)
    return tuple(dict.fromkeys(found_types)), tuple(attributes)


def _resolve_hints(obj: Any) -> dict[str, Any]:
    """Resolve annotations with Annotated extras kept.

    Unresolvable forward references fall back to the raw annotations with
    string entries dropped.
    """
    try:
        return typing.get_type_hints(obj, include_extras=True)
    except (NameError, TypeError, AttributeError):
        logger.debug("Could not resolve type hints of %r, using raw annotations", obj)
    raw: dict[str, Any] = {}
    owners = reversed(obj.__mro__) if isinstance(obj, type) else [obj]
    for owner in owners:
        for name, annotation in inspect.get_annotations(owner).items():
            if not isinstance(annotation, str):
                raw[name] = annotation
    return raw


def _is_class_var(annotation: Any) -> bool:
    return annotation is ClassVar or get_origin(annotation) is ClassVar


def _pydantic_fields(cls: type[BaseModel]) -> list[PropertyMetadata]:
    writable = not cls.model_config.get("frozen", False)
    result = []
    for name, info in cls.model_fields.items():
        if not _is_public(name):
            continue
        field_types, extras = flatten_annotation(info.annotation)
        result.append(
            PropertyMetadata(
                name=name,
                readable=True,
                writable=writable,
                read_types=field_types,
                write_types=field_types,
                attributes=extras + tuple(info.metadata),
            )
        )
    return result


def _dataclass_fields(cls: type) -> list[PropertyMetadata]:
    hints = _resolve_hints(cls)
    writable = not cls.__dataclass_params__.frozen  # type: ignore[attr-defined]
    result = []
    for f in dataclasses.fields(cls):
        if not _is_public(f.name):
            continue
        field_types, extras = flatten_annotation(hints.get(f.name, Any))
        result.append(
            PropertyMetadata(
                name=f.name,
                readable=True,
                writable=writable,
                read_types=field_types,
                write_types=field_types,
                attributes=extras,
            )
        )
    return result


def _annotated_fields(cls: type) -> list[PropertyMetadata]:
    hints = _resolve_hints(cls)
    result = []
    for name, annotation in hints.items():
        if not _is_public(name) or _is_class_var(annotation):
            continue
        field_types, extras = flatten_annotation(annotation)
        result.append(
            PropertyMetadata(
                name=name,
                readable=True,
                writable=True,
                read_types=field_types,
                write_types=field_types,
                attributes=extras,
                instance_field=True,
            )
        )
    return result


def _own_classes(cls: type) -> list[type]:
    """MRO base-first, without object and pydantic internals."""
    return [
        klass
        for klass in reversed(cls.__mro__)
        if klass is not object and not klass.__module__.startswith("pydantic")
    ]


def _property_metadata(name: str, attr: Any) -> PropertyMetadata:
    if isinstance(attr, functools.cached_property):
        cached_types, extras = flatten_annotation(_resolve_hints(attr.func).get("return", Any))
        return PropertyMetadata(
            name=name, readable=True, writable=False, read_types=cached_types, attributes=extras
        )

    read_types: tuple[type, ...] = ()
    write_types: tuple[type, ...] = ()
    attributes: tuple[Any, ...] = ()
    if attr.fget is not None:
        read_types, extras = flatten_annotation(_resolve_hints(attr.fget).get("return", Any))
        attributes += extras
    if attr.fset is not None:
        hints = _resolve_hints(attr.fset)
        hints.pop("return", None)
        if hints:
            write_types, extras = flatten_annotation(next(iter(hints.values())))
            attributes += extras
    return PropertyMetadata(
        name=name,
        readable=attr.fget is not None,
        writable=attr.fset is not None,
        read_types=read_types,
        write_types=write_types,
        attributes=attributes,
    )


@functools.lru_cache(maxsize=1024)
def inspect_class(cls: type) -> ClassMetadata:
    """Collect the ordered properties of a class.

    Order: declared fields (pydantic model_fields, dataclass fields or
    public annotations), then properties and cached properties in
    declaration order, base classes first. A property overriding a field
    keeps the field's position.
    """
    if issubclass(cls, BaseModel):
        fields = _pydantic_fields(cls)
    elif dataclasses.is_dataclass(cls):
        fields = _dataclass_fields(cls)
    else:
        fields = _annotated_fields(cls)

    ordered: dict[str, PropertyMetadata] = {prop.name: prop for prop in fields}
    for klass in _own_classes(cls):
        for name, attr in vars(klass).items():
            if _is_public(name) and isinstance(attr, (property, functools.cached_property)):
                ordered[name] = _property_metadata(name, attr)

    metadata = ClassMetadata(cls=cls, properties=tuple(ordered.values()))
    logger.debug(
        "Introspected %s: %s", cls.__qualname__, [prop.name for prop in metadata.properties]
    )
    return metadata
