"""Optional hooks a Python type may implement to customize its GraphQL rendering.

The hooks are looked up on the class itself, so they are written as
classmethods or staticmethods:

    @dataclass
    class Input:
        id: int

        @classmethod
        def graphql_name(cls) -> str:
            return "input"

A type "has" a capability when it satisfies the protocol; no base class is
required. A hook written as a plain instance method, or one returning the
wrong type, raises InvalidHookError.
"""

import inspect
from typing import Any, Protocol, runtime_checkable

from graphql import Undefined

from typegraphql.descriptor import TypeDescriptor
from typegraphql.errors import InvalidHookError


@runtime_checkable
class Named(Protocol):
    @classmethod
    def graphql_name(cls) -> str: ...


@runtime_checkable
class Described(Protocol):
    @classmethod
    def graphql_description(cls) -> str: ...


@runtime_checkable
class Defaulted(Protocol):
    @classmethod
    def graphql_default(cls) -> Any: ...


@runtime_checkable
class Identified(Protocol):
    @classmethod
    def graphql_is_id(cls) -> bool: ...


def _call_hook(descriptor: TypeDescriptor, hook: str) -> Any:
    target = descriptor.type
    raw = inspect.getattr_static(target, hook)
    if isinstance(target, type) and not isinstance(raw, (classmethod, staticmethod)):
        raise InvalidHookError(descriptor.name, hook, "must be a classmethod or staticmethod")
    return getattr(target, hook)()


def _call_str_hook(descriptor: TypeDescriptor, hook: str) -> str:
    value = _call_hook(descriptor, hook)
    if not isinstance(value, str):
        raise InvalidHookError(descriptor.name, hook, f"must return a str, got {type(value).__name__}")
    return value


def get_name(descriptor: TypeDescriptor) -> str:
    """Name of the type, taken from ``graphql_name`` when implemented."""
    if isinstance(descriptor.type, Named):
        return _call_str_hook(descriptor, "graphql_name")
    return descriptor.name


def get_description(descriptor: TypeDescriptor) -> str:
    """Description of the type, or an empty string."""
    if isinstance(descriptor.type, Described):
        return _call_str_hook(descriptor, "graphql_description")
    return ""


def get_default(descriptor: TypeDescriptor) -> Any:
    """Default value of the type, or ``Undefined`` when it has none."""
    if isinstance(descriptor.type, Defaulted):
        return _call_hook(descriptor, "graphql_default")
    return Undefined


def is_id(descriptor: TypeDescriptor) -> bool:
    """Whether the type asks to be exposed as the ID scalar."""
    if isinstance(descriptor.type, Identified):
        return bool(_call_hook(descriptor, "graphql_is_id"))
    return False
