# Copyright 2026 tfschemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""``CustomType`` schema fragments.

A member's custom type comes from, in order of precedence, an explicit custom
type override, a generated type for an associated external type, or nothing.
Nested objects always get a generated type.
"""

from __future__ import annotations

from dataclasses import dataclass

from tfschemagen.identifiers import to_pascal_case
from tfschemagen.schema.assoc_ext_type import AssocExtType
from tfschemagen.schema.element_types import element_type_string
from tfschemagen.schema.imports import Imports, custom_type_imports
from tfschemagen.spec.types import CustomType, ElementType

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class CustomTypePrimitive:
    """Custom type of a bool, float64, int64, number or string attribute."""

    custom_type: CustomType | None
    assoc_ext_type: AssocExtType | None
    name: str

    def schema(self) -> str:
        if self.custom_type is not None:
            return f"CustomType: {self.custom_type.type},\n"
        if self.assoc_ext_type is not None:
            return f"CustomType: {to_pascal_case(self.name)}Type{{}},\n"
        return ""

    def value_type(self) -> str:
        if self.custom_type is not None:
            return self.custom_type.value_type
        if self.assoc_ext_type is not None:
            return f"{to_pascal_case(self.name)}Value"
        return ""

    def imports(self) -> Imports:
        return custom_type_imports(self.custom_type)


@dataclass(frozen=True)
class CustomTypeCollection:
    """Custom type of a list, map or set attribute.

    ``kind`` is ``"List"``, ``"Map"`` or ``"Set"``. The element type is only
    resolved when the generated wrapper type is emitted.
    """

    custom_type: CustomType | None
    assoc_ext_type: AssocExtType | None
    kind: str
    element_type: ElementType
    name: str

    def schema(self) -> str:
        if self.custom_type is not None:
            return f"CustomType: {self.custom_type.type},\n"
        if self.assoc_ext_type is not None:
            pascal = to_pascal_case(self.name)
            return (
                f"CustomType: {pascal}Type{{\ntypes.{self.kind}Type{{\n"
                f"ElemType: {element_type_string(self.element_type)},\n}},\n}},\n"
            )
        return ""

    def value_type(self) -> str:
        if self.custom_type is not None:
            return self.custom_type.value_type
        if self.assoc_ext_type is not None:
            return f"{to_pascal_case(self.name)}Value"
        return ""

    def imports(self) -> Imports:
        return custom_type_imports(self.custom_type)


@dataclass(frozen=True)
class CustomTypeObject:
    """Custom type of an object attribute."""

    custom_type: CustomType | None
    assoc_ext_type: AssocExtType | None
    name: str

    def schema(self) -> str:
        if self.custom_type is not None:
            return f"CustomType: {self.custom_type.type},\n"
        if self.assoc_ext_type is not None:
            pascal = to_pascal_case(self.name)
            return (
                f"CustomType: {pascal}Type{{\ntypes.ObjectType{{\n"
                f"AttrTypes: {pascal}Value{{}}.AttributeTypes(ctx),\n}},\n}},\n"
            )
        return ""

    def value_type(self) -> str:
        if self.custom_type is not None:
            return self.custom_type.value_type
        if self.assoc_ext_type is not None:
            return f"{to_pascal_case(self.name)}Value"
        return ""

    def imports(self) -> Imports:
        return custom_type_imports(self.custom_type)


@dataclass(frozen=True)
class CustomTypeNestedObject:
    """Custom type of a nested object; a generated ``<Name>Type`` unless overridden."""

    custom_type: CustomType | None
    name: str

    def schema(self) -> str:
        if self.custom_type is not None:
            return f"CustomType: {self.custom_type.type},\n"
        pascal = to_pascal_case(self.name)
        return (
            f"CustomType: {pascal}Type{{\nObjectType: types.ObjectType{{\n"
            f"AttrTypes: {pascal}Value{{}}.AttributeTypes(ctx),\n}},\n}},\n"
        )

    def value_type(self) -> str:
        if self.custom_type is not None:
            return self.custom_type.value_type
        return f"{to_pascal_case(self.name)}Value"

    def imports(self) -> Imports:
        return custom_type_imports(self.custom_type)


@dataclass(frozen=True)
class CustomTypeNestedCollection:
    """Custom type of the collection wrapping a nested object; only when overridden."""

    custom_type: CustomType | None

    def schema(self) -> str:
        if self.custom_type is None:
            return ""
        return f"CustomType: {self.custom_type.type},\n"

    def imports(self) -> Imports:
        if self.custom_type is None:
            return Imports()
        return custom_type_imports(self.custom_type)
