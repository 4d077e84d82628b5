# Copyright 2026 tfschemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""``Default`` schema fragments for static and custom defaults."""

from __future__ import annotations

from dataclasses import dataclass

from tfschemagen.identifiers import go_quote
from tfschemagen.schema.imports import (
    BOOL_DEFAULT_IMPORT,
    FLOAT64_DEFAULT_IMPORT,
    INT64_DEFAULT_IMPORT,
    STRING_DEFAULT_IMPORT,
    Imports,
    custom_code_imports,
    imports_of,
)
from tfschemagen.spec.types import (
    BoolDefault,
    CustomDefault,
    Float64Default,
    Int64Default,
    StringDefault,
)

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class DefaultCustom:
    """A default given only as custom Go source."""

    default: CustomDefault | None = None

    def schema(self) -> str:
        if self.default is None or self.default.custom is None:
            return ""
        return f"Default: {self.default.custom.schema_definition},\n"

    def imports(self) -> Imports:
        if self.default is None:
            return Imports()
        return custom_code_imports(self.default.custom)


@dataclass(frozen=True)
class DefaultBool:
    default: BoolDefault | None = None

    def schema(self) -> str:
        return _static_or_custom(self.default, "booldefault.StaticBool", _go_bool)

    def imports(self) -> Imports:
        return _static_or_custom_imports(self.default, BOOL_DEFAULT_IMPORT)


@dataclass(frozen=True)
class DefaultFloat64:
    default: Float64Default | None = None

    def schema(self) -> str:
        return _static_or_custom(self.default, "float64default.StaticFloat64", repr)

    def imports(self) -> Imports:
        return _static_or_custom_imports(self.default, FLOAT64_DEFAULT_IMPORT)


@dataclass(frozen=True)
class DefaultInt64:
    default: Int64Default | None = None

    def schema(self) -> str:
        return _static_or_custom(self.default, "int64default.StaticInt64", str)

    def imports(self) -> Imports:
        return _static_or_custom_imports(self.default, INT64_DEFAULT_IMPORT)


@dataclass(frozen=True)
class DefaultString:
    default: StringDefault | None = None

    def schema(self) -> str:
        return _static_or_custom(self.default, "stringdefault.StaticString", go_quote)

    def imports(self) -> Imports:
        return _static_or_custom_imports(self.default, STRING_DEFAULT_IMPORT)


# ################
# Implementation
# ################

StaticDefault = BoolDefault | Float64Default | Int64Default | StringDefault


def _go_bool(value: bool) -> str:
    return "true" if value else "false"


def _static_or_custom(default: StaticDefault | None, static_func: str, literal) -> str:
    """Static defaults take precedence over custom ones."""
    if default is None:
        return ""
    if default.static is not None:
        return f"Default: {static_func}({literal(default.static)}),\n"
    if default.custom is not None:
        return f"Default: {default.custom.schema_definition},\n"
    return ""


def _static_or_custom_imports(default: StaticDefault | None, static_import: str) -> Imports:
    if default is None:
        return Imports()
    if default.static is not None:
        return imports_of(static_import)
    return custom_code_imports(default.custom)
