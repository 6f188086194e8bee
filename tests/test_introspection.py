from dataclasses import dataclass, field
from typing import ClassVar

import pytest
from graphql import Undefined

from typegraphql import TypeDescriptor, UnsupportedKindError, describe, embedded, gql
from typegraphql.introspection import iter_fields
from typegraphql.tags import FieldMetadata


@dataclass
class Base:
    created: str


@dataclass
class Record:
    label: str = gql("title,nullable", description="Shown title")
    scores: list[list[int]] = field(default_factory=list)
    note: str | None = None
    base: Base = embedded(default_factory=lambda: Base(""))
    counter: int = field(default=0, init=False)
    registry: ClassVar[str] = "unused"


@dataclass
class Dangling:
    target: "Missing"  # noqa: F821


def test_fields_follow_declaration_order() -> None:
    names = [member.declared_name for member in iter_fields(describe(Record))]

    assert names == ["label", "scores", "note", "base", "counter"]


def test_field_descriptor_record() -> None:
    owner = describe(Record)
    label, scores, note, base, counter = iter_fields(owner)

    assert label.owner == owner
    assert label.descriptor == TypeDescriptor(str)
    assert label.metadata == FieldMetadata(
        name="title", renamed=True, nullable=True, id=False, description="Shown title"
    )
    assert label.default is Undefined

    assert scores.descriptor == TypeDescriptor(int)
    assert scores.dimensions == 2
    assert not scores.optional
    # default_factory is not a static default
    assert scores.default is Undefined

    assert note.optional
    assert note.default is None

    assert base.embedded
    assert not label.embedded

    assert counter.default == 0


def test_unresolvable_annotation() -> None:
    with pytest.raises(UnsupportedKindError, match="cannot resolve annotation") as exc_info:
        list(iter_fields(describe(Dangling)))

    assert exc_info.value.type_name == "Dangling"
