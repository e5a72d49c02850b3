"""Normalization engine.

The OutputNormalizer turns arbitrary values into plain dict / list / scalar
trees. Objects are optionally mapped onto an Output shape first, then
offered to the registered object normalizers, and finally flattened through
the property accessor.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from contextlib import contextmanager
from typing import Any, TypeVar

from output_normalizer.accessor.accessor import Getter, PropertyAccessor
from output_normalizer.core.capabilities import (
    collection_to_array,
    is_array_like,
    is_collection_like,
    is_collection_type,
    is_iterable_like,
    is_scalar,
    is_self_serializing,
)
from output_normalizer.core.config import NormalizerConfig
from output_normalizer.core.exceptions import (
    CircularReferenceError,
    InvalidOutputClassError,
    MaxDepthExceededError,
)
from output_normalizer.core.keys import to_snake_case
from output_normalizer.object_normalizer import ObjectNormalizer, default_object_normalizers
from output_normalizer.output.attributes import EntityToId
from output_normalizer.output.base import Output, is_output_class
from output_normalizer.output_modifier.protocol import OutputModifier

logger = logging.getLogger(__name__)

OutputT = TypeVar("OutputT", bound=Output)


class _Traversal:
    """Per-call traversal state: active path and nesting depth."""

    def __init__(self, config: NormalizerConfig) -> None:
        self._max_depth = config.max_depth
        self._detect_cycles = config.detect_cycles
        self._depth = 0
        self._normalizing: set[int] = set()
        self._mapping: set[int] = set()

    @contextmanager
    def visit(self, value: Any, *, mapping: bool = False) -> Iterator[None]:
        path = self._mapping if mapping else self._normalizing
        key = id(value)
        if self._detect_cycles and key in path:
            raise CircularReferenceError(type(value).__qualname__)
        if self._max_depth is not None and self._depth >= self._max_depth:
            raise MaxDepthExceededError(self._max_depth)

        path.add(key)
        self._depth += 1
        try:
            yield
        finally:
            self._depth -= 1
            path.discard(key)


def _declares_many(getter: Getter, value: Any) -> bool:
    """Check if an entity-to-id getter holds a collection of entities."""
    if getter.types:
        return any(is_collection_type(tp) for tp in getter.types)
    return is_array_like(value) or is_collection_like(value)


class OutputNormalizer:
    """Normalize domain data into JSON-ready values.

    Args:
        object_normalizers: Ordered object normalizers; the first that
            supports an object wins.
        output_modifiers: Ordered output modifiers; all that support a
            mapped output are applied.
        accessor: Property accessor used for mapping and flattening.
        config: Traversal limits.
    """

    def __init__(
        self,
        object_normalizers: Iterable[ObjectNormalizer] = (),
        output_modifiers: Iterable[OutputModifier] = (),
        accessor: PropertyAccessor | None = None,
        config: NormalizerConfig | None = None,
    ) -> None:
        self._object_normalizers = tuple(object_normalizers)
        self._output_modifiers = tuple(output_modifiers)
        self._accessor = accessor or PropertyAccessor()
        self._config = config or NormalizerConfig()

    @classmethod
    def from_config(
        cls,
        config: NormalizerConfig,
        object_normalizers: Iterable[ObjectNormalizer] | None = None,
        output_modifiers: Iterable[OutputModifier] = (),
    ) -> OutputNormalizer:
        """Create a normalizer from a NormalizerConfig.

        Args:
            config: NormalizerConfig instance
            object_normalizers: Defaults to the built-in normalizers
            output_modifiers: Output modifiers in application order

        Returns:
            OutputNormalizer instance
        """
        if object_normalizers is None:
            object_normalizers = default_object_normalizers()
        return cls(object_normalizers, output_modifiers, config=config)

    @property
    def object_normalizers(self) -> tuple[ObjectNormalizer, ...]:
        return self._object_normalizers

    @property
    def output_modifiers(self) -> tuple[OutputModifier, ...]:
        return self._output_modifiers

    def normalize(self, data: Any, output_class: type[Output] | None = None) -> Any:
        """Normalize any value into a plain tree.

        Args:
            data: Scalar, dict / list / tuple, or object.
            output_class: Output shape every object in data is mapped onto
                before normalization. Collections pass it on to their items.

        Raises:
            InvalidOutputClassError: If output_class is not an Output shape.
            CircularReferenceError: If data contains a reference cycle.
            MaxDepthExceededError: If data nests deeper than config.max_depth.
        """
        return self._normalize(data, output_class, _Traversal(self._config))

    def map_object_to_output(self, source: Any, target_class: type[OutputT]) -> OutputT:
        """Map source onto a new target_class instance by property name.

        Raises:
            InvalidOutputClassError: If target_class is not an Output shape.
        """
        return self._map_object_to_output(source, target_class, _Traversal(self._config))

    def normalize_object_properties(self, obj: Any) -> dict[Any, Any]:
        """Flatten an object's readable properties into a dict."""
        traversal = _Traversal(self._config)
        with traversal.visit(obj):
            return self._normalize_object_properties(obj, traversal)

    def _normalize(
        self, data: Any, output_class: type[Output] | None, traversal: _Traversal
    ) -> Any:
        if is_scalar(data):
            return data
        if is_array_like(data):
            return self._normalize_array(data, output_class, traversal)
        return self._normalize_object(data, output_class, traversal)

    def _normalize_object(
        self, obj: Any, output_class: type[Output] | None, traversal: _Traversal
    ) -> Any:
        with traversal.visit(obj):
            if is_collection_like(obj):
                return self._normalize(collection_to_array(obj), output_class, traversal)
            if is_iterable_like(obj):
                return self._normalize(list(obj), output_class, traversal)

            if output_class is not None:
                obj = self._map_object_to_output(obj, output_class, traversal)

            for object_normalizer in self._object_normalizers:
                if object_normalizer.supports(obj):
                    logger.debug(
                        "Normalizing %s with %s",
                        type(obj).__qualname__,
                        type(object_normalizer).__qualname__,
                    )
                    return object_normalizer.normalize(obj)

            if is_self_serializing(obj):
                return obj.__json__()
            if is_collection_like(obj):
                return []

            return self._normalize_object_properties(obj, traversal)

    def _normalize_array(
        self,
        array: dict[Any, Any] | list[Any] | tuple[Any, ...],
        output_class: type[Output] | None,
        traversal: _Traversal,
    ) -> dict[Any, Any] | list[Any]:
        items = array.items() if isinstance(array, dict) else enumerate(array)
        output: dict[Any, Any] = {}

        with traversal.visit(array):
            for key, value in items:
                if isinstance(key, str):
                    key = to_snake_case(key)
                output[key] = self._normalize(value, output_class, traversal)

        # Without string keys the array is a plain sequence
        if not any(isinstance(key, str) for key in output):
            return list(output.values())
        return output

    def _normalize_object_properties(self, obj: Any, traversal: _Traversal) -> dict[Any, Any]:
        output: dict[Any, Any] = {}
        accessor = self._accessor.create_accessor(obj)

        for getter in accessor.getters:
            key = to_snake_case(getter.name)
            value = getter.get_value()

            entity_to_id = getter.get_attribute(EntityToId)
            if entity_to_id is not None:
                suffix = entity_to_id.suffix

                if _declares_many(getter, value):
                    if suffix is None:
                        suffix = entity_to_id.property + "s"
                    if isinstance(value, Mapping):
                        value = value.values()
                    value = [
                        self._accessor.create_accessor(item).get_value(entity_to_id.property)
                        for item in value or ()
                    ]
                else:
                    if suffix is None:
                        suffix = entity_to_id.property
                    if not value:
                        value = None
                    else:
                        value = self._accessor.create_accessor(value).get_value(
                            entity_to_id.property
                        )

                if suffix:
                    key += "_" + to_snake_case(suffix)

            output[key] = self._normalize(value, None, traversal)

        return output

    def _map_object_to_output(
        self, source: Any, target_class: type[OutputT], traversal: _Traversal
    ) -> OutputT:
        if not is_output_class(target_class):
            raise InvalidOutputClassError(
                type(source).__qualname__,
                getattr(target_class, "__qualname__", repr(target_class)),
                Output.__qualname__,
            )

        with traversal.visit(source, mapping=True):
            target = target_class()
            source_accessor = self._accessor.create_accessor(source)
            target_accessor = self._accessor.create_accessor(target)
            logger.debug("Mapping %s to %s", type(source).__qualname__, target_class.__qualname__)

            for setter in target_accessor.setters:
                if not source_accessor.has_getter(setter.name):
                    continue

                value = source_accessor.get_value(setter.name)

                if not (is_scalar(value) or is_array_like(value) or isinstance(value, Output)):
                    for tp in setter.types:
                        if is_output_class(tp):
                            value = self._map_object_to_output(value, tp, traversal)
                            break

                setter.set_value(value)

            for output_modifier in self._output_modifiers:
                if output_modifier.supports(target, source):
                    logger.debug(
                        "Applying %s to %s",
                        type(output_modifier).__qualname__,
                        target_class.__qualname__,
                    )
                    output_modifier.modify(target, source)

        return target
