from collections.abc import Mapping
from enum import Enum
from typing import Any

from graphql import GraphQLEnumType, GraphQLEnumValue, GraphQLNamedType, GraphQLScalarType

from typegraphql import log
from typegraphql.descriptor import TypeDescriptor, unwrap
from typegraphql.errors import DuplicateTypeError, UnsupportedKindError
from typegraphql.probes import get_description, get_name
from typegraphql.scalars import BUILTIN_SCALARS


class Side(str, Enum):
    OUTPUT = "output"
    INPUT = "input"


class TypeRegistry:
    """
    Memoized GraphQL types of one compiler session.

    Output and input types are kept apart: a dataclass compiles to a
    GraphQLObjectType on the output side and to a GraphQLInputObjectType on
    the input side. Custom scalars and enums are shared by both sides.

    The registry is not thread-safe. A single instance must not be mutated from
    several threads at once; hold a lock around the whole session or give each
    thread its own registry.
    """

    def __init__(self, strict: bool = False) -> None:
        self.strict = strict
        self._types: dict[Side, dict[TypeDescriptor, GraphQLNamedType]] = {side: {} for side in Side}
        for kind, scalar in BUILTIN_SCALARS.items():
            self._store_shared(TypeDescriptor(kind), scalar)

    def lookup(self, side: Side, entity: Any) -> GraphQLNamedType | None:
        """Named type stored for a base type; sequences are never stored, so they miss."""
        descriptor, dimensions, _ = unwrap(entity)
        if dimensions:
            return None
        return self._types[Side(side)].get(descriptor)

    def contains(self, side: Side, entity: Any) -> bool:
        return self.lookup(side, entity) is not None

    def is_registered(self, entity: Any) -> bool:
        return any(self.contains(side, entity) for side in Side)

    def store(self, side: Side, descriptor: TypeDescriptor, node: GraphQLNamedType) -> None:
        self._types[side][descriptor] = node

    def _store_shared(self, descriptor: TypeDescriptor, node: GraphQLNamedType) -> None:
        for side in Side:
            self.store(side, descriptor, node)

    def _registrable(self, entity: Any) -> TypeDescriptor:
        descriptor, dimensions, _ = unwrap(entity)
        if dimensions:
            raise UnsupportedKindError(descriptor.name, "sequences cannot be registered, register the element type")
        return descriptor

    def _register(self, entity: Any, node: GraphQLNamedType) -> bool:
        descriptor = self._registrable(entity)
        if self.is_registered(descriptor):
            if self.strict:
                raise DuplicateTypeError(descriptor.name)
            log.debug(f"Type {descriptor.name} is already registered, keeping the first registration")
            return False

        self._store_shared(descriptor, node)
        log.debug(f"Registered {node.name} for type {descriptor.name}")
        return True

    def register_scalar(self, entity: Any, scalar: GraphQLScalarType) -> bool:
        """
        Map a type to a custom scalar on both sides.

        Args:
            entity: The type (or a value of it) to map
            scalar: The GraphQL scalar to use for it

        Returns:
            bool: True if registered, False if the type was already known

        Raises:
            DuplicateTypeError: If the registry is strict and the type is already known
        """
        return self._register(entity, scalar)

    def register_enum(self, entity: Any, enum: GraphQLEnumType) -> bool:
        """Map a type to a prebuilt GraphQL enum on both sides."""
        return self._register(entity, enum)

    def register_enum_values(self, entity: Any, values: Mapping[str, Any]) -> bool:
        """
        Build a GraphQL enum for a type from a name-to-value mapping and register it.

        The enum is named and described by the type's ``graphql_name`` and
        ``graphql_description`` hooks when present.
        """
        descriptor = self._registrable(entity)
        enum = GraphQLEnumType(
            name=get_name(descriptor),
            values={name: GraphQLEnumValue(value) for name, value in values.items()},
            description=get_description(descriptor) or None,
        )
        return self._register(descriptor, enum)
