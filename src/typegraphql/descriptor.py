"""Canonical identities for Python types.

A TypeDescriptor is the exclusive key of the type registry. Indirection layers
(``Annotated``, ``Optional``, ``type`` aliases) are stripped before the
descriptor is built, so ``Annotated[Foo, ...]``, ``Foo | None`` and ``Foo`` all
share one identity. ``NewType`` is kept distinct so it can be registered as a
custom scalar.
"""

import collections.abc
import dataclasses
import types
import typing
from dataclasses import dataclass
from datetime import datetime
from typing import Annotated, Any, NewType, Union, get_args, get_origin

SEQUENCE_ORIGINS = frozenset(
    {
        list,
        tuple,
        set,
        frozenset,
        collections.abc.Sequence,
        collections.abc.MutableSequence,
        collections.abc.Set,
        collections.abc.MutableSet,
        collections.abc.Collection,
        collections.abc.Iterable,
    }
)

UNION_ORIGINS = (Union, types.UnionType)

_TYPE_ALIAS_TYPE = getattr(typing, "TypeAliasType", None)


@dataclass(frozen=True)
class TypeDescriptor:
    """Identity of a Python type with all indirection removed."""

    type: Any

    @property
    def name(self) -> str:
        name = getattr(self.type, "__name__", None)
        return name if isinstance(name, str) else repr(self.type)

    def __repr__(self) -> str:
        return f"TypeDescriptor({self.name})"


def is_type_like(entity: Any) -> bool:
    """Tell a type or typing construct apart from a live value."""
    if isinstance(entity, type | NewType):
        return True
    if _TYPE_ALIAS_TYPE is not None and isinstance(entity, _TYPE_ALIAS_TYPE):
        return True
    return get_origin(entity) is not None


def strip_indirection(annotation: Any) -> tuple[Any, bool]:
    """
    Remove ``Annotated``, ``Optional`` and ``type`` alias layers.

    Args:
        annotation: A type or typing construct

    Returns:
        tuple[Any, bool]: The stripped annotation and whether an ``Optional`` layer was removed
    """
    optional = False
    while True:
        origin = get_origin(annotation)
        if origin is Annotated:
            annotation = get_args(annotation)[0]
        elif origin in UNION_ORIGINS:
            members = [arg for arg in get_args(annotation) if arg is not type(None)]
            if len(members) != 1:
                # Only ``X | None`` is an indirection; real unions are left for the kind check
                return annotation, optional
            optional = True
            annotation = members[0]
        elif _TYPE_ALIAS_TYPE is not None and isinstance(annotation, _TYPE_ALIAS_TYPE):
            annotation = annotation.__value__
        else:
            return annotation, optional


def sequence_element(annotation: Any) -> Any | None:
    """Return the element annotation of a homogeneous sequence, or None."""
    origin = get_origin(annotation)
    if origin not in SEQUENCE_ORIGINS:
        return None

    args = get_args(annotation)
    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return args[0]
        return None
    if len(args) == 1:
        return args[0]
    return None


def unwrap(entity: Any) -> tuple[TypeDescriptor, int, bool]:
    """
    Build the descriptor of the innermost element type of ``entity``.

    Live values are described by their class. Every sequence layer adds one
    dimension; indirection is stripped at every level.

    Args:
        entity: A live value, a type, a typing construct or a TypeDescriptor

    Returns:
        tuple[TypeDescriptor, int, bool]: The base descriptor, the sequence dimension,
        and whether the outermost layer was ``Optional``
    """
    if isinstance(entity, TypeDescriptor):
        return entity, 0, False

    annotation = entity if is_type_like(entity) else type(entity)
    annotation, optional = strip_indirection(annotation)

    dimensions = 0
    element = sequence_element(annotation)
    while element is not None:
        dimensions += 1
        annotation, _ = strip_indirection(element)
        element = sequence_element(annotation)

    return TypeDescriptor(annotation), dimensions, optional


def describe(entity: Any) -> TypeDescriptor:
    """Return the base TypeDescriptor for a value, type or typing construct."""
    descriptor, _, _ = unwrap(entity)
    return descriptor


def is_composite(descriptor: TypeDescriptor) -> bool:
    """Whether the descriptor denotes a structural composite (a dataclass)."""
    target = descriptor.type
    return isinstance(target, type) and dataclasses.is_dataclass(target) and not issubclass(target, datetime)
