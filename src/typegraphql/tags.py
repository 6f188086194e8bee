"""Field tags: per-member metadata carried by dataclass fields.

A tag is a string stored under the ``graphql`` key of a field's metadata:

    name: str = field(metadata={"graphql": "fullName,nullable"})

The first token overrides the exposed field name (empty keeps the declared
name); the remaining tokens are options. ``nullable`` drops the NonNull
wrapper and ``id`` forces the ID scalar.
"""

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from typegraphql.errors import InvalidTagError

TAG_KEY = "graphql"
TAG_NULLABLE = "nullable"
TAG_ID = "id"
TAG_OPTIONS = frozenset({TAG_NULLABLE, TAG_ID})

DESCRIPTION_KEY = "description"
EMBEDDED_KEY = "embedded"


@dataclass(frozen=True)
class FieldTag:
    name: str | None = None
    nullable: bool = False
    id: bool = False


@dataclass(frozen=True)
class FieldMetadata:
    name: str
    renamed: bool = False
    nullable: bool = False
    id: bool = False
    description: str | None = None


def parse_tag(raw: str | None, where: str = "") -> FieldTag:
    """
    Parse a field tag string.

    Args:
        raw: The tag, e.g. ``"name,nullable,id"``; None or empty yields defaults
        where: Location used in error messages, e.g. ``"Owner.field"``

    Returns:
        FieldTag: The parsed tag

    Raises:
        InvalidTagError: If the tag carries an unknown option
    """
    if not raw:
        return FieldTag()

    name, *options = [token.strip() for token in raw.split(",")]
    for option in options:
        if option and option not in TAG_OPTIONS:
            raise InvalidTagError(where, raw, option)

    return FieldTag(
        name=name or None,
        nullable=TAG_NULLABLE in options,
        id=TAG_ID in options,
    )


def extract_metadata(
    declared_name: str,
    metadata: Mapping[str, Any],
    tag_key: str = TAG_KEY,
    where: str = "",
) -> FieldMetadata:
    """Read the exposed name, nullability, ID flag and description of a member."""
    tag = parse_tag(metadata.get(tag_key), where or declared_name)
    return FieldMetadata(
        name=tag.name or declared_name,
        renamed=tag.name is not None,
        nullable=tag.nullable,
        id=tag.id,
        description=metadata.get(DESCRIPTION_KEY),
    )


def gql(tag: str | None = None, *, description: str | None = None, tag_key: str = TAG_KEY, **kwargs: Any) -> Any:
    """
    Declare a dataclass field carrying a tag and an optional description.

    Extra keyword arguments are passed to ``dataclasses.field``.
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    if tag is not None:
        metadata[tag_key] = tag
    if description is not None:
        metadata[DESCRIPTION_KEY] = description
    return dataclasses.field(metadata=metadata, **kwargs)


def embedded(**kwargs: Any) -> Any:
    """Declare a dataclass field whose own fields are promoted into its owner."""
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[EMBEDDED_KEY] = True
    return dataclasses.field(metadata=metadata, **kwargs)
