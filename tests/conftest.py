from collections.abc import Callable
from datetime import datetime
from typing import Any

import pytest
from graphql import (
    GraphQLBoolean,
    GraphQLFloat,
    GraphQLInt,
    GraphQLList,
    GraphQLNonNull,
    GraphQLScalarType,
    GraphQLString,
    GraphQLType,
)
from hypothesis import strategies as st
from hypothesis.strategies import composite

from typegraphql import CompilerConfig, TypeGraphCompiler, TypeRegistry
from typegraphql.scalars import GraphQLDateTime

PRIMITIVE_KINDS: list[tuple[type, GraphQLScalarType]] = [
    (bool, GraphQLBoolean),
    (int, GraphQLInt),
    (float, GraphQLFloat),
    (str, GraphQLString),
    (bytes, GraphQLString),
    (datetime, GraphQLDateTime),
]


def unwrap_non_null(graphql_type: GraphQLType) -> GraphQLType:
    """Assert that a type is NonNull and return what it wraps."""
    assert isinstance(graphql_type, GraphQLNonNull), f"expected NonNull, got {graphql_type}"
    return graphql_type.of_type


def unwrap_list(graphql_type: GraphQLType) -> GraphQLType:
    """Assert that a type is a List and return what it wraps."""
    assert isinstance(graphql_type, GraphQLList), f"expected List, got {graphql_type}"
    return graphql_type.of_type


@pytest.fixture
def registry() -> TypeRegistry:
    return TypeRegistry()


@pytest.fixture
def compiler(registry: TypeRegistry) -> TypeGraphCompiler:
    return TypeGraphCompiler(registry)


@pytest.fixture
def make_compiler() -> Callable[..., TypeGraphCompiler]:
    def _make(**settings: Any) -> TypeGraphCompiler:
        return TypeGraphCompiler(config=CompilerConfig(**settings))

    return _make


@composite
def nested_sequence_strategy(
    draw: Callable[[st.SearchStrategy[Any]], Any],
) -> tuple[Any, int, GraphQLScalarType]:
    """Generate a sequence annotation of random depth around a random primitive kind.

    e.g. list[tuple[int, ...]] -> (annotation, 2, GraphQLInt)
    """
    kind, scalar = draw(st.sampled_from(PRIMITIVE_KINDS))
    depth = draw(st.integers(min_value=0, max_value=5))
    annotation: Any = kind
    for _ in range(depth):
        wrapper = draw(st.sampled_from(["list", "tuple", "frozenset"]))
        if wrapper == "list":
            annotation = list[annotation]
        elif wrapper == "tuple":
            annotation = tuple[annotation, ...]
        else:
            annotation = frozenset[annotation]
    return annotation, depth, scalar
