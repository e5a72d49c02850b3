"""Unit tests for the property accessor and class introspection."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import Annotated, Any, Optional

import pytest
from pydantic import BaseModel, ConfigDict

from output_normalizer.accessor import PropertyAccessor, flatten_annotation, inspect_class
from output_normalizer.core.exceptions import PropertyNotFoundError, PropertyNotWritableError
from output_normalizer.output.attributes import EntityToId


@dataclass
class Author:
    id: int
    name: str


@dataclass
class Article:
    id: int
    title: str
    author: Annotated[Author | None, EntityToId()] = None
    tags: list[str] = field(default_factory=list)
    _revision: int = 0

    @property
    def slug(self) -> str:
        return self.title.lower().replace(" ", "-")


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lng: float


class Profile:
    def __init__(self) -> None:
        self.nickname = "neo"
        self._token = "secret"
        self.level = 3

    @property
    def label(self) -> str:
        return f"{self.nickname}#{self.level}"


class Counter:
    def __init__(self) -> None:
        self._count = 0

    @property
    def count(self) -> int:
        return self._count

    @count.setter
    def count(self, value: int) -> None:
        self._count = value


class Point:
    __slots__ = ("x", "y")

    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y


class Annotated2D:
    x: int
    y: int = 0


class Report:
    def __init__(self, rows: list[int]) -> None:
        self.rows = rows

    @cached_property
    def total(self) -> int:
        return sum(self.rows)


class AuthorModel(BaseModel):
    id: int
    name: str


class CommentModel(BaseModel):
    id: int
    body: str
    author: Annotated[AuthorModel, EntityToId()]


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int


class TestDataclassAccess:
    def test_getter_order(self, accessor: PropertyAccessor) -> None:
        obj = accessor.create_accessor(Article(1, "Hello World"))
        assert [g.name for g in obj.getters] == ["id", "title", "author", "tags", "slug"]

    def test_setters_exclude_read_only_properties(self, accessor: PropertyAccessor) -> None:
        obj = accessor.create_accessor(Article(1, "Hello World"))
        assert [s.name for s in obj.setters] == ["id", "title", "author", "tags"]

    def test_private_names_hidden(self, accessor: PropertyAccessor) -> None:
        obj = accessor.create_accessor(Article(1, "Hello World"))
        assert not obj.has_getter("_revision")
        assert not obj.has_setter("_revision")

    def test_get_and_set_value(self, accessor: PropertyAccessor) -> None:
        article = Article(1, "Hello World")
        obj = accessor.create_accessor(article)
        assert obj.get_value("slug") == "hello-world"
        obj.set_value("title", "Other")
        assert article.title == "Other"

    def test_declared_types(self, accessor: PropertyAccessor) -> None:
        obj = accessor.create_accessor(Article(1, "Hello"))
        assert obj.get_getter("author").types == (Author, type(None))
        assert obj.get_getter("tags").types == (list,)
        assert obj.get_getter("slug").types == (str,)

    def test_attributes(self, accessor: PropertyAccessor) -> None:
        obj = accessor.create_accessor(Article(1, "Hello"))
        author = obj.get_getter("author")
        assert author.has_attribute(EntityToId)
        assert author.get_attribute(EntityToId) == EntityToId()
        assert not obj.get_getter("title").has_attribute(EntityToId)
        assert obj.get_getter("title").get_attribute(EntityToId) is None

    def test_frozen_dataclass_has_no_setters(self, accessor: PropertyAccessor) -> None:
        obj = accessor.create_accessor(Coordinates(1.0, 2.0))
        assert obj.setters == []
        with pytest.raises(PropertyNotWritableError):
            obj.set_value("lat", 3.0)

    def test_missing_getter(self, accessor: PropertyAccessor) -> None:
        obj = accessor.create_accessor(Article(1, "Hello"))
        with pytest.raises(PropertyNotFoundError) as exc_info:
            obj.get_value("missing")
        assert exc_info.value.property_name == "missing"
        assert exc_info.value.class_name == "Article"


class TestPlainClassAccess:
    def test_properties_then_instance_attributes(self, accessor: PropertyAccessor) -> None:
        obj = accessor.create_accessor(Profile())
        assert [g.name for g in obj.getters] == ["label", "nickname", "level"]
        assert [s.name for s in obj.setters] == ["nickname", "level"]

    def test_property_setter(self, accessor: PropertyAccessor) -> None:
        counter = Counter()
        obj = accessor.create_accessor(counter)
        assert [s.name for s in obj.setters] == ["count"]
        assert obj.get_setter("count").types == (int,)
        obj.set_value("count", 5)
        assert counter.count == 5

    def test_slots(self, accessor: PropertyAccessor) -> None:
        obj = accessor.create_accessor(Point(1, 2))
        assert [g.name for g in obj.getters] == ["x", "y"]
        assert obj.get_value("y") == 2

    def test_unset_annotated_attribute_is_writable_only(self, accessor: PropertyAccessor) -> None:
        obj = accessor.create_accessor(Annotated2D())
        assert [g.name for g in obj.getters] == ["y"]
        assert [s.name for s in obj.setters] == ["x", "y"]

    def test_cached_property_is_read_only(self, accessor: PropertyAccessor) -> None:
        obj = accessor.create_accessor(Report([1, 2, 3]))
        assert obj.get_value("total") == 6
        assert obj.get_getter("total").types == (int,)
        assert not obj.has_setter("total")


class TestPydanticAccess:
    def test_field_order_and_metadata(self, accessor: PropertyAccessor) -> None:
        comment = CommentModel(id=1, body="Nice", author=AuthorModel(id=7, name="Bob"))
        obj = accessor.create_accessor(comment)
        assert [g.name for g in obj.getters] == ["id", "body", "author"]
        assert obj.get_getter("author").types == (AuthorModel,)
        assert obj.get_getter("author").has_attribute(EntityToId)

    def test_set_value(self, accessor: PropertyAccessor) -> None:
        author = AuthorModel(id=7, name="Bob")
        accessor.create_accessor(author).set_value("name", "Robert")
        assert author.name == "Robert"

    def test_frozen_model(self, accessor: PropertyAccessor) -> None:
        obj = accessor.create_accessor(FrozenModel(id=1))
        assert obj.has_getter("id")
        assert not obj.has_setter("id")


class TestIntrospection:
    def test_class_metadata_is_cached(self) -> None:
        assert inspect_class(Article) is inspect_class(Article)

    @pytest.mark.parametrize(
        ("annotation", "types", "attributes"),
        [
            (int, (int,), ()),
            (list[int], (list,), ()),
            (int | str, (int, str), ()),
            (Optional[Annotated[Author, EntityToId()]], (Author, type(None)), (EntityToId(),)),
            (Annotated[list[Author], EntityToId(property="uuid")], (list,), (EntityToId("uuid"),)),
            (Any, (), ()),
            (None, (type(None),), ()),
        ],
    )
    def test_flatten_annotation(
        self, annotation: Any, types: tuple[type, ...], attributes: tuple[Any, ...]
    ) -> None:
        assert flatten_annotation(annotation) == (types, attributes)
