"""Property accessor.

Exposes the readable ("getters") and writable ("setters") properties of an
object by name, each with its declared types and attached metadata.
"""

from __future__ import annotations

from typing import Any, TypeVar

from output_normalizer.accessor.introspect import PropertyMetadata, inspect_class
from output_normalizer.core.exceptions import PropertyNotFoundError, PropertyNotWritableError

A = TypeVar("A")


class _BoundProperty:
    def __init__(self, obj: Any, metadata: PropertyMetadata) -> None:
        self._obj = obj
        self._metadata = metadata

    @property
    def name(self) -> str:
        return self._metadata.name

    @property
    def attributes(self) -> tuple[Any, ...]:
        return self._metadata.attributes

    def has_attribute(self, kind: type) -> bool:
        """Check if an attribute of the given class is attached."""
        return any(isinstance(attr, kind) for attr in self._metadata.attributes)

    def get_attribute(self, kind: type[A]) -> A | None:
        """Return the first attached attribute of the given class, or None."""
        for attr in self._metadata.attributes:
            if isinstance(attr, kind):
                return attr
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({type(self._obj).__name__}.{self.name})"


class Getter(_BoundProperty):
    """A readable property bound to an object."""

    @property
    def types(self) -> tuple[type, ...]:
        return self._metadata.read_types

    def get_value(self) -> Any:
        return getattr(self._obj, self.name)


class Setter(_BoundProperty):
    """A writable property bound to an object."""

    @property
    def types(self) -> tuple[type, ...]:
        return self._metadata.write_types

    def set_value(self, value: Any) -> None:
        setattr(self._obj, self.name, value)


def _instance_attribute_names(obj: Any) -> list[str]:
    names = list(getattr(obj, "__dict__", {}))
    for klass in type(obj).__mro__:
        slots = vars(klass).get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        names.extend(slot for slot in slots if hasattr(obj, slot))
    return [name for name in dict.fromkeys(names) if not name.startswith("_")]


class ObjectAccessor:
    """Getters and setters of a single object.

    Order is the class declaration order (see inspect_class), followed by
    public instance attributes that the class does not declare.
    """

    def __init__(self, obj: Any) -> None:
        self._obj = obj
        metadata = inspect_class(type(obj))
        declared = metadata.names()
        extra = [
            PropertyMetadata(name=name, readable=True, writable=True)
            for name in _instance_attribute_names(obj)
            if name not in declared
        ]
        self._getters = {
            p.name: Getter(obj, p)
            for p in [*metadata.properties, *extra]
            if p.readable and (not p.instance_field or hasattr(obj, p.name))
        }
        self._setters = {
            p.name: Setter(obj, p) for p in [*metadata.properties, *extra] if p.writable
        }

    @property
    def getters(self) -> list[Getter]:
        return list(self._getters.values())

    @property
    def setters(self) -> list[Setter]:
        return list(self._setters.values())

    def has_getter(self, name: str) -> bool:
        return name in self._getters

    def has_setter(self, name: str) -> bool:
        return name in self._setters

    def get_getter(self, name: str) -> Getter:
        try:
            return self._getters[name]
        except KeyError:
            raise PropertyNotFoundError(type(self._obj).__name__, name) from None

    def get_setter(self, name: str) -> Setter:
        try:
            return self._setters[name]
        except KeyError:
            raise PropertyNotWritableError(type(self._obj).__name__, name) from None

    def get_value(self, name: str) -> Any:
        """Read a property by name.

        Raises:
            PropertyNotFoundError: If the object has no such readable property.
        """
        return self.get_getter(name).get_value()

    def set_value(self, name: str, value: Any) -> None:
        """Write a property by name.

        Raises:
            PropertyNotWritableError: If the object has no such writable property.
        """
        self.get_setter(name).set_value(value)


class PropertyAccessor:
    """Factory for object accessors.

    Class introspection is cached, so creating an accessor per object is cheap.
    """

    def create_accessor(self, obj: Any) -> ObjectAccessor:
        return ObjectAccessor(obj)
