from typegraphql.logger import get_logger

__author__ = """typegraphql contributors"""
__version__ = "0.3.0"

log = get_logger("typegraphql")

from typegraphql.compiler import CompiledField, TypeGraphCompiler  # noqa: E402
from typegraphql.config import CaseFormat, CompilerConfig, load_compiler_config  # noqa: E402
from typegraphql.descriptor import TypeDescriptor, describe, unwrap  # noqa: E402
from typegraphql.errors import (  # noqa: E402
    CircularReferenceError,
    DuplicateFieldError,
    DuplicateTypeError,
    InvalidHookError,
    InvalidRootTypeError,
    InvalidTagError,
    TypeGraphError,
    UnsupportedKindError,
)
from typegraphql.probes import Defaulted, Described, Identified, Named  # noqa: E402
from typegraphql.registry import Side, TypeRegistry  # noqa: E402
from typegraphql.scalars import GraphQLDateTime  # noqa: E402
from typegraphql.tags import embedded, gql  # noqa: E402

__all__ = [
    "CaseFormat",
    "CircularReferenceError",
    "CompiledField",
    "CompilerConfig",
    "Defaulted",
    "Described",
    "DuplicateFieldError",
    "DuplicateTypeError",
    "GraphQLDateTime",
    "Identified",
    "InvalidHookError",
    "InvalidRootTypeError",
    "InvalidTagError",
    "Named",
    "Side",
    "TypeDescriptor",
    "TypeGraphCompiler",
    "TypeGraphError",
    "TypeRegistry",
    "UnsupportedKindError",
    "describe",
    "embedded",
    "gql",
    "load_compiler_config",
    "log",
    "unwrap",
]
