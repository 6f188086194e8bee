"""
Type-graph compiler: Python dataclasses to graphql-core types.

The compiler walks a dataclass, decides for each member whether it is a
primitive, a nested dataclass or a sequence, and emits the matching GraphQL
type. Compiled types are memoized in a TypeRegistry so every Python type maps
to a single GraphQL type per side.

Cycles are detected with an ancestor path: the immutable, ordered record of
types being compiled along the current recursion path. It is extended on
descent and never shared between siblings, so a type reached twice through
different members (a diamond) is reused from the registry, while a type that
contains itself fails with CircularReferenceError naming the whole path.
"""

from dataclasses import dataclass
from enum import EnumMeta
from typing import Any

from graphql import (
    GraphQLArgument,
    GraphQLEnumType,
    GraphQLEnumValue,
    GraphQLField,
    GraphQLID,
    GraphQLInputField,
    GraphQLInputObjectType,
    GraphQLList,
    GraphQLNamedType,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLType,
    Undefined,
    is_enum_type,
    is_non_null_type,
)

from typegraphql import log
from typegraphql.config import CompilerConfig, convert_name
from typegraphql.descriptor import TypeDescriptor, is_composite, unwrap
from typegraphql.errors import (
    CircularReferenceError,
    DuplicateFieldError,
    InvalidRootTypeError,
    TypeGraphError,
    UnsupportedKindError,
)
from typegraphql.introspection import FieldDescriptor, iter_fields
from typegraphql.probes import get_default, get_description, get_name, is_id
from typegraphql.registry import Side, TypeRegistry
from typegraphql.scalars import scalar_for_kind


@dataclass(frozen=True)
class Ancestors:
    """Types being compiled on the current path, in descent order."""

    chain: tuple[TypeDescriptor, ...] = ()
    members: frozenset[TypeDescriptor] = frozenset()

    def __contains__(self, descriptor: object) -> bool:
        return descriptor in self.members

    def extend(self, descriptor: TypeDescriptor) -> "Ancestors":
        return Ancestors(self.chain + (descriptor,), self.members | {descriptor})

    def loop_error(self, descriptor: TypeDescriptor) -> CircularReferenceError:
        names = tuple(ancestor.name for ancestor in self.chain) + (descriptor.name,)
        return CircularReferenceError(descriptor.name, names)


@dataclass(frozen=True)
class CompiledField:
    type: GraphQLType
    description: str | None = None
    default_value: Any = Undefined


def wrap_list(node: GraphQLType, dimensions: int) -> GraphQLType:
    for _ in range(dimensions):
        node = GraphQLList(node)
    return node


class TypeGraphCompiler:
    """
    Compile Python types into GraphQL types for one session.

    Args:
        registry: Registry to read and populate; a fresh one is created if omitted
        config: Compiler settings; defaults apply if omitted
    """

    def __init__(self, registry: TypeRegistry | None = None, config: CompilerConfig | None = None) -> None:
        self.config = config or CompilerConfig()
        self.registry = registry if registry is not None else TypeRegistry(strict=self.config.strict_registration)

    def compile(self, side: Side, entity: Any, ancestors: Ancestors = Ancestors()) -> GraphQLType:
        """
        Compile a type (or the type of a value) for the given side.

        Sequences compile to nested GraphQLList types around their element type.

        Args:
            side: Side.OUTPUT for object types, Side.INPUT for input types
            entity: A value, type or typing construct
            ancestors: Types already being compiled on the current path

        Returns:
            GraphQLType: The compiled type

        Raises:
            CircularReferenceError: If a type contains itself
            UnsupportedKindError: If a type has no GraphQL mapping
        """
        side = Side(side)
        descriptor, dimensions, _ = unwrap(entity)
        try:
            node = self._compile(side, descriptor, ancestors)
        except TypeGraphError as e:
            log.error(f"Failed to compile {side.value} type {descriptor.name}: {e}")
            raise
        log.info(f"Compiled {side.value} type {descriptor.name}")
        return wrap_list(node, dimensions)

    def compile_object(self, entity: Any) -> GraphQLObjectType:
        """Compile a dataclass (or an instance of one) into a GraphQLObjectType."""
        descriptor = self._root(entity)
        node = self.compile(Side.OUTPUT, descriptor)
        if not isinstance(node, GraphQLObjectType):
            raise InvalidRootTypeError(descriptor.name)
        return node

    def compile_input(self, entity: Any) -> GraphQLInputObjectType:
        """Compile a dataclass (or an instance of one) into a GraphQLInputObjectType."""
        descriptor = self._root(entity)
        node = self.compile(Side.INPUT, descriptor)
        if not isinstance(node, GraphQLInputObjectType):
            raise InvalidRootTypeError(descriptor.name)
        return node

    def compile_arguments(self, entity: Any) -> dict[str, GraphQLArgument]:
        """
        Compile the members of a dataclass into a GraphQL argument map.

        Each member becomes one argument instead of a field of a wrapping input
        object. Embedded members are flattened into the map.

        Args:
            entity: A dataclass or an instance of one

        Returns:
            dict[str, GraphQLArgument]: Arguments keyed by exposed name

        Raises:
            InvalidRootTypeError: If the entity is not a dataclass
        """
        descriptor = self._root(entity)
        try:
            fields = self._compile_fields(Side.INPUT, descriptor, Ancestors().extend(descriptor))
        except TypeGraphError as e:
            log.error(f"Failed to compile arguments of {descriptor.name}: {e}")
            raise

        log.info(f"Compiled {len(fields)} arguments from {descriptor.name}")
        return {
            name: GraphQLArgument(field.type, default_value=field.default_value, description=field.description)
            for name, field in fields.items()
        }

    def _root(self, entity: Any) -> TypeDescriptor:
        descriptor, dimensions, _ = unwrap(entity)
        if dimensions or not is_composite(descriptor):
            log.error(f"Cannot compile {descriptor.name}: root type must be a dataclass")
            raise InvalidRootTypeError(descriptor.name)
        return descriptor

    def _compile(self, side: Side, descriptor: TypeDescriptor, ancestors: Ancestors) -> GraphQLNamedType:
        cached = self.registry.lookup(side, descriptor)
        if cached is not None:
            log.debug(f"Reusing {side.value} type {cached.name} for {descriptor.name}")
            return cached

        if descriptor in ancestors:
            raise ancestors.loop_error(descriptor)

        ancestors = ancestors.extend(descriptor)
        if is_composite(descriptor):
            node = self._build_composite(side, descriptor, ancestors)
        else:
            node = self._build_leaf(side, descriptor)

        if is_enum_type(node):
            # Enums look the same on both sides and must stay a single named type
            for each_side in Side:
                self.registry.store(each_side, descriptor, node)
        else:
            self.registry.store(side, descriptor, node)
        log.debug(f"Built {side.value} type {node.name} for {descriptor.name}")
        return node

    def _build_composite(self, side: Side, descriptor: TypeDescriptor, ancestors: Ancestors) -> GraphQLNamedType:
        fields = self._compile_fields(side, descriptor, ancestors)
        name = get_name(descriptor)
        description = get_description(descriptor) or None

        if side is Side.OUTPUT:
            return GraphQLObjectType(
                name,
                {
                    field_name: GraphQLField(field.type, description=field.description)
                    for field_name, field in fields.items()
                },
                description=description,
            )

        return GraphQLInputObjectType(
            name + self.config.input_suffix,
            {
                field_name: GraphQLInputField(
                    field.type, default_value=field.default_value, description=field.description
                )
                for field_name, field in fields.items()
            },
            description=description,
        )

    def _build_leaf(self, side: Side, descriptor: TypeDescriptor) -> GraphQLNamedType:
        target = descriptor.type
        if isinstance(target, EnumMeta):
            return self._build_enum(descriptor)

        scalar = scalar_for_kind(target)
        if scalar is None:
            raise UnsupportedKindError(descriptor.name)

        if (side is Side.OUTPUT or self.config.id_on_input) and is_id(descriptor):
            return GraphQLID
        return scalar

    def _build_enum(self, descriptor: TypeDescriptor) -> GraphQLEnumType:
        return GraphQLEnumType(
            name=get_name(descriptor),
            values={name: GraphQLEnumValue(member) for name, member in descriptor.type.__members__.items()},
            description=get_description(descriptor) or None,
        )

    def _compile_fields(
        self, side: Side, descriptor: TypeDescriptor, ancestors: Ancestors
    ) -> dict[str, CompiledField]:
        fields: dict[str, CompiledField] = {}

        for member in iter_fields(descriptor, self.config.tag_key):
            if member.embedded:
                promoted = self._compile_embedded(side, member, ancestors)
            else:
                promoted = {self._field_name(member): self._compile_member(side, member, ancestors)}

            for name, field in promoted.items():
                if name in fields:
                    raise DuplicateFieldError(descriptor.name, name)
                fields[name] = field

        return fields

    def _compile_embedded(
        self, side: Side, member: FieldDescriptor, ancestors: Ancestors
    ) -> dict[str, CompiledField]:
        if member.dimensions or not is_composite(member.descriptor):
            raise UnsupportedKindError(
                member.descriptor.name,
                f"embedded member '{member.declared_name}' of {member.owner.name} must be a dataclass",
            )
        if member.descriptor in ancestors:
            raise ancestors.loop_error(member.descriptor)

        return self._compile_fields(side, member.descriptor, ancestors.extend(member.descriptor))

    def _compile_member(self, side: Side, member: FieldDescriptor, ancestors: Ancestors) -> CompiledField:
        metadata = member.metadata

        node: GraphQLType
        if metadata.id:
            node = GraphQLID
        else:
            node = self._compile(side, member.descriptor, ancestors)

        node = wrap_list(node, member.dimensions)
        if not (metadata.nullable or member.optional) and not is_non_null_type(node):
            node = GraphQLNonNull(node)

        default_value = Undefined
        if side is Side.INPUT:
            default_value = member.default
            if default_value is Undefined:
                default_value = get_default(member.descriptor)

        return CompiledField(
            type=node,
            description=metadata.description or get_description(member.descriptor) or None,
            default_value=default_value,
        )

    def _field_name(self, member: FieldDescriptor) -> str:
        metadata = member.metadata
        if metadata.renamed or self.config.field_case is None:
            return metadata.name
        return convert_name(metadata.name, self.config.field_case)
