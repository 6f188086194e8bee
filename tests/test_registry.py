from datetime import datetime
from typing import NewType

import pytest
from graphql import GraphQLEnumType, GraphQLInt, GraphQLScalarType, GraphQLString

from typegraphql import DuplicateTypeError, Side, TypeRegistry, UnsupportedKindError
from typegraphql.scalars import GraphQLDateTime

Email = NewType("Email", str)

EmailType = GraphQLScalarType(name="Email", description="An e-mail address")
OtherEmailType = GraphQLScalarType(name="OtherEmail")


class Status(str):
    @classmethod
    def graphql_name(cls) -> str:
        return "Status"

    @classmethod
    def graphql_description(cls) -> str:
        return "Lifecycle status"


class TestBuiltins:
    @pytest.mark.parametrize("side", list(Side))
    def test_builtins_are_seeded_on_both_sides(self, registry: TypeRegistry, side: Side) -> None:
        assert registry.lookup(side, int) is GraphQLInt
        assert registry.lookup(side, str) is GraphQLString
        assert registry.lookup(side, datetime) is GraphQLDateTime

    def test_lookup_accepts_values(self, registry: TypeRegistry) -> None:
        assert registry.lookup(Side.OUTPUT, "text") is GraphQLString
        assert registry.lookup("input", 3) is GraphQLInt

    def test_unknown_type_is_absent(self, registry: TypeRegistry) -> None:
        assert registry.lookup(Side.OUTPUT, complex) is None
        assert not registry.contains(Side.INPUT, complex)
        assert not registry.is_registered(complex)

    @pytest.mark.parametrize("side", list(Side))
    def test_sequences_are_absent(self, registry: TypeRegistry, side: Side) -> None:
        assert registry.lookup(side, list[int]) is None
        assert registry.lookup(side, list[list[str]]) is None
        assert not registry.contains(side, tuple[int, ...])
        assert not registry.is_registered(list[int])

    def test_sequences_cannot_be_registered(self, registry: TypeRegistry) -> None:
        with pytest.raises(UnsupportedKindError, match="register the element type"):
            registry.register_scalar(list[Email], EmailType)
        with pytest.raises(UnsupportedKindError):
            registry.register_enum_values(list[Status], {"ACTIVE": "active"})

        assert registry.lookup(Side.OUTPUT, Email) is None


class TestCustomTypes:
    def test_scalar_is_registered_on_both_sides(self, registry: TypeRegistry) -> None:
        assert registry.register_scalar(Email, EmailType)

        assert registry.lookup(Side.OUTPUT, Email) is EmailType
        assert registry.lookup(Side.INPUT, Email) is EmailType
        # The supertype is left untouched
        assert registry.lookup(Side.OUTPUT, str) is GraphQLString

    def test_first_registration_wins(self, registry: TypeRegistry) -> None:
        registry.register_scalar(Email, EmailType)

        assert not registry.register_scalar(Email, OtherEmailType)
        assert registry.lookup(Side.OUTPUT, Email) is EmailType

    def test_builtin_cannot_be_replaced(self, registry: TypeRegistry) -> None:
        assert not registry.register_scalar(str, EmailType)
        assert registry.lookup(Side.INPUT, str) is GraphQLString

    def test_strict_registry_rejects_duplicates(self) -> None:
        registry = TypeRegistry(strict=True)
        registry.register_scalar(Email, EmailType)

        with pytest.raises(DuplicateTypeError) as exc_info:
            registry.register_scalar(Email, OtherEmailType)

        assert exc_info.value.type_name == "Email"
        assert registry.lookup(Side.OUTPUT, Email) is EmailType

    def test_register_enum(self, registry: TypeRegistry) -> None:
        enum = GraphQLEnumType("Status", {"ACTIVE": "active", "INACTIVE": "inactive"})

        assert registry.register_enum(Status, enum)
        assert registry.lookup(Side.OUTPUT, Status) is enum
        assert registry.lookup(Side.INPUT, Status) is enum

    def test_register_enum_values(self, registry: TypeRegistry) -> None:
        registry.register_enum_values(Status, {"A": Status("a")})

        enum = registry.lookup(Side.OUTPUT, Status)
        assert isinstance(enum, GraphQLEnumType)
        assert enum.name == "Status"
        assert enum.description == "Lifecycle status"
        assert list(enum.values) == ["A"]
        assert enum.values["A"].value == Status("a")

    def test_register_enum_values_is_idempotent(self, registry: TypeRegistry) -> None:
        registry.register_enum_values(Status, {"A": "a"})
        first = registry.lookup(Side.OUTPUT, Status)

        assert not registry.register_enum_values(Status, {"B": "b"})
        assert registry.lookup(Side.OUTPUT, Status) is first
