"""Member enumeration for dataclasses."""

import dataclasses
import typing
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from graphql import Undefined

from typegraphql.descriptor import TypeDescriptor, unwrap
from typegraphql.errors import UnsupportedKindError
from typegraphql.tags import EMBEDDED_KEY, TAG_KEY, FieldMetadata, extract_metadata


@dataclass(frozen=True)
class FieldDescriptor:
    """One member of a dataclass, ready for compilation."""

    declared_name: str
    owner: TypeDescriptor
    descriptor: TypeDescriptor
    dimensions: int
    optional: bool
    embedded: bool
    metadata: FieldMetadata
    default: Any = Undefined


def _member_default(field: dataclasses.Field[Any]) -> Any:
    if field.default is dataclasses.MISSING:
        return Undefined
    return field.default


def iter_fields(owner: TypeDescriptor, tag_key: str = TAG_KEY) -> Iterator[FieldDescriptor]:
    """
    Enumerate the members of a dataclass in declaration order.

    Args:
        owner: Descriptor of the dataclass
        tag_key: Metadata key holding the field tag

    Yields:
        FieldDescriptor: One entry per dataclass field

    Raises:
        UnsupportedKindError: If an annotation cannot be resolved
    """
    cls = owner.type
    try:
        hints = typing.get_type_hints(cls, include_extras=True)
    except NameError as e:
        raise UnsupportedKindError(owner.name, f"cannot resolve annotation ({e})") from e

    for field in dataclasses.fields(cls):
        descriptor, dimensions, optional = unwrap(hints.get(field.name, field.type))
        yield FieldDescriptor(
            declared_name=field.name,
            owner=owner,
            descriptor=descriptor,
            dimensions=dimensions,
            optional=optional,
            embedded=bool(field.metadata.get(EMBEDDED_KEY, False)),
            metadata=extract_metadata(field.name, field.metadata, tag_key, where=f"{owner.name}.{field.name}"),
            default=_member_default(field),
        )
