"""Built-in scalar mapping for primitive Python kinds."""

from datetime import datetime
from typing import Any, NewType, get_origin

from graphql import (
    GraphQLBoolean,
    GraphQLError,
    GraphQLFloat,
    GraphQLInt,
    GraphQLScalarType,
    GraphQLString,
    StringValueNode,
    ValueNode,
    print_ast,
)
from graphql.pyutils import inspect


def serialize_datetime(output_value: Any) -> str:
    if isinstance(output_value, datetime):
        return output_value.isoformat()
    raise GraphQLError("DateTime cannot represent value: " + inspect(output_value))


def parse_datetime_value(input_value: Any) -> datetime:
    if not isinstance(input_value, str):
        raise GraphQLError("DateTime cannot represent a non string value: " + inspect(input_value))
    try:
        return datetime.fromisoformat(input_value)
    except ValueError as e:
        raise GraphQLError(f"DateTime cannot represent value: {inspect(input_value)}") from e


def parse_datetime_literal(value_node: ValueNode, _variables: Any = None) -> datetime:
    if not isinstance(value_node, StringValueNode):
        raise GraphQLError("DateTime cannot represent a non string value: " + print_ast(value_node), value_node)
    return parse_datetime_value(value_node.value)


GraphQLDateTime = GraphQLScalarType(
    name="DateTime",
    description="The `DateTime` scalar type represents a date and time as an ISO-8601 string.",
    serialize=serialize_datetime,
    parse_value=parse_datetime_value,
    parse_literal=parse_datetime_literal,
)

BUILTIN_SCALARS: dict[type, GraphQLScalarType] = {
    bool: GraphQLBoolean,
    int: GraphQLInt,
    float: GraphQLFloat,
    str: GraphQLString,
    bytes: GraphQLString,
    bytearray: GraphQLString,
    datetime: GraphQLDateTime,
}


def scalar_for_kind(kind: Any) -> GraphQLScalarType | None:
    """
    Find the built-in scalar for a primitive kind.

    Subclasses map to the scalar of their nearest built-in base (``bool`` wins
    over ``int``), and a ``NewType`` maps to the scalar of its supertype.

    Args:
        kind: The Python type to map

    Returns:
        GraphQLScalarType | None: The scalar, or None if the kind has no mapping
    """
    while isinstance(kind, NewType):
        kind = kind.__supertype__
    if get_origin(kind) is not None or not isinstance(kind, type):
        return None
    for base in kind.__mro__:
        if base in BUILTIN_SCALARS:
            return BUILTIN_SCALARS[base]
    return None
