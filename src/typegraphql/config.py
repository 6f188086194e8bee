"""Compiler settings, loadable from a YAML file.

    # typegraphql.yaml
    tagKey: gql
    fieldCase: camelCase
    inputSuffix: Input
"""

from enum import Enum
from pathlib import Path
from typing import Any, cast

import yaml
from caseconverter import camelcase, kebabcase, macrocase, pascalcase, snakecase
from pydantic import BaseModel, ConfigDict, Field

from typegraphql import log


class CaseFormat(str, Enum):
    CAMEL_CASE = "camelCase"
    PASCAL_CASE = "PascalCase"
    SNAKE_CASE = "snake_case"
    KEBAB_CASE = "kebab-case"
    MACRO_CASE = "MACROCASE"


FIELD_NAME_CONVERTERS = {
    CaseFormat.CAMEL_CASE: camelcase,
    CaseFormat.PASCAL_CASE: pascalcase,
    CaseFormat.SNAKE_CASE: snakecase,
    CaseFormat.KEBAB_CASE: kebabcase,
    CaseFormat.MACRO_CASE: macrocase,
}


def convert_name(name: str, target_case: CaseFormat) -> str:
    """Rewrite a declared member name into the exposed field case, e.g. ``created_at`` to ``createdAt``."""
    return str(FIELD_NAME_CONVERTERS[target_case](name))


class CompilerConfig(BaseModel):
    """Settings of a TypeGraphCompiler session."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    tag_key: str = Field("graphql", alias="tagKey")
    strict_registration: bool = Field(False, alias="strictRegistration")
    field_case: CaseFormat | None = Field(None, alias="fieldCase")
    input_suffix: str = Field("", alias="inputSuffix")
    id_on_input: bool = Field(False, alias="idOnInput")


def load_compiler_config(config_path: Path | None) -> CompilerConfig:
    """
    Read compiler settings from YAML; keys use the camelCase aliases or the field names.

    Without a path, or with an empty document, every setting keeps its default.

    Raises:
        TypeError: If the document is not a mapping
        ValidationError: If a key is unknown or a value is invalid
    """
    if config_path is None:
        return CompilerConfig()

    with config_path.open("r", encoding="utf-8") as f:
        document = yaml.safe_load(f)

    if not document:
        log.debug(f"Compiler config {config_path} is empty, using defaults")
        return CompilerConfig()
    if not isinstance(document, dict):
        raise TypeError(f"Compiler config {config_path} must be a mapping, got {type(document).__name__}")

    config = CompilerConfig.model_validate(cast(dict[str, Any], document))
    log.debug(f"Loaded compiler config from {config_path}")
    return config
