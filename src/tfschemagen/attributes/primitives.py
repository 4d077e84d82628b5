# Copyright 2026 tfschemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Bool, Float64, Int64, Number and String attribute variants."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tfschemagen.convert import (
    ComputedOptionalRequired,
    CustomTypePrimitive,
    DefaultBool,
    DefaultCustom,
    DefaultFloat64,
    DefaultInt64,
    DefaultString,
    DeprecationMessage,
    Description,
    PlanModifiers,
    Sensitive,
    Validators,
)
from tfschemagen.identifiers import go_quote, to_pascal_case
from tfschemagen.schema.assoc_ext_type import AssocExtType
from tfschemagen.schema.conversion import ToFromConversion
from tfschemagen.schema.element_types import SCALAR_FROM_FUNCS, SCALAR_TO_FUNCS
from tfschemagen.schema.errors import NilSpecError
from tfschemagen.schema.imports import Imports, associated_external_type_imports
from tfschemagen.schema.members import GeneratorAttribute, GeneratorSchemaType, ModelField
from tfschemagen.schema.renderers import CustomPrimitive, ToFromPrimitive
from tfschemagen.spec import schema as spec

if TYPE_CHECKING:
    from tfschemagen.schema.registry import TemplateRegistry

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class _PrimitiveAttribute(GeneratorAttribute):
    """Shared behaviour of the scalar attribute variants.

    Subclasses only bind the framework kind, the schema type tag and the
    default fragment type.
    """

    custom_type: CustomTypePrimitive
    computed_optional_required: ComputedOptionalRequired
    sensitive: Sensitive
    description: Description
    deprecation_message: DeprecationMessage
    plan_modifiers: PlanModifiers
    validators: Validators
    default: DefaultBool | DefaultFloat64 | DefaultInt64 | DefaultString | DefaultCustom
    assoc_ext_type: AssocExtType | None = None

    _kind = ""
    _schema_type = GeneratorSchemaType.BOOL_ATTRIBUTE
    _default_fragment = DefaultCustom

    @classmethod
    def from_spec(cls, name: str, attribute):
        if attribute is None:
            raise NilSpecError(f"{cls._kind}Attribute")
        assoc_ext_type = AssocExtType.from_spec(attribute.associated_external_type)
        return cls(
            custom_type=CustomTypePrimitive(attribute.custom_type, assoc_ext_type, name),
            computed_optional_required=ComputedOptionalRequired(attribute.computed_optional_required),
            sensitive=Sensitive(attribute.sensitive),
            description=Description(attribute.description),
            deprecation_message=DeprecationMessage(attribute.deprecation_message),
            plan_modifiers=PlanModifiers.from_spec(cls._kind, attribute.plan_modifiers),
            validators=Validators.from_spec(cls._kind, attribute.validators),
            default=cls._default_fragment(attribute.default),
            assoc_ext_type=assoc_ext_type,
        )

    def generator_schema_type(self) -> GeneratorSchemaType:
        return self._schema_type

    def imports(self) -> Imports:
        imports = Imports()
        imports.append(self.custom_type.imports())
        imports.append(self.plan_modifiers.imports())
        imports.append(self.validators.imports())
        imports.append(self.default.imports())
        if self.assoc_ext_type is not None:
            imports.append(associated_external_type_imports(), self.assoc_ext_type.imports())
        return imports

    def schema(self, name: str, templates: TemplateRegistry) -> str:
        return (
            f"{go_quote(name)}: schema.{self._kind}Attribute{{\n"
            + self.custom_type.schema()
            + self.computed_optional_required.schema()
            + self.sensitive.schema()
            + self.description.schema()
            + self.deprecation_message.schema()
            + self.plan_modifiers.schema()
            + self.validators.schema()
            + self.default.schema()
            + "},"
        )

    def model_field(self, name: str) -> ModelField:
        value_type = self.custom_type.value_type() or f"types.{self._kind}"
        return ModelField(name=to_pascal_case(name), tfsdk_name=name, value_type=value_type)

    def attr_type(self, name: str) -> str:
        if self.assoc_ext_type is not None:
            return f"{to_pascal_case(name)}Type{{}}"
        return f"basetypes.{self._kind}Type{{}}"

    def attr_value(self, name: str) -> str:
        if self.assoc_ext_type is not None:
            return f"{to_pascal_case(name)}Value"
        return f"basetypes.{self._kind}Value"

    def to(self) -> ToFromConversion:
        if self.assoc_ext_type is not None:
            return ToFromConversion(assoc_ext_type=self.assoc_ext_type)
        return ToFromConversion(default=SCALAR_TO_FUNCS[self._kind])

    def from_(self) -> ToFromConversion:
        if self.assoc_ext_type is not None:
            return ToFromConversion(assoc_ext_type=self.assoc_ext_type)
        return ToFromConversion(default=SCALAR_FROM_FUNCS[self._kind])

    def custom_type_and_value(self, name: str, templates: TemplateRegistry) -> str:
        if self.assoc_ext_type is None:
            return ""
        return CustomPrimitive(name, self._kind).render(templates)

    def to_from_functions(self, name: str, templates: TemplateRegistry) -> str:
        if self.assoc_ext_type is None:
            return ""
        return ToFromPrimitive(
            name=name,
            kind=self._kind,
            assoc_ext_type=self.assoc_ext_type,
            to_func=_VALUE_TO_FUNCS[self._kind],
            from_func=_VALUE_FROM_FUNCS[self._kind],
        ).render(templates)


@dataclass(frozen=True)
class BoolAttribute(_PrimitiveAttribute):
    _kind = "Bool"
    _schema_type = GeneratorSchemaType.BOOL_ATTRIBUTE
    _default_fragment = DefaultBool

    @classmethod
    def from_spec(cls, name: str, attribute: spec.BoolAttribute | None) -> BoolAttribute:
        return super().from_spec(name, attribute)


@dataclass(frozen=True)
class Float64Attribute(_PrimitiveAttribute):
    _kind = "Float64"
    _schema_type = GeneratorSchemaType.FLOAT64_ATTRIBUTE
    _default_fragment = DefaultFloat64

    @classmethod
    def from_spec(cls, name: str, attribute: spec.Float64Attribute | None) -> Float64Attribute:
        return super().from_spec(name, attribute)


@dataclass(frozen=True)
class Int64Attribute(_PrimitiveAttribute):
    _kind = "Int64"
    _schema_type = GeneratorSchemaType.INT64_ATTRIBUTE
    _default_fragment = DefaultInt64

    @classmethod
    def from_spec(cls, name: str, attribute: spec.Int64Attribute | None) -> Int64Attribute:
        return super().from_spec(name, attribute)


@dataclass(frozen=True)
class NumberAttribute(_PrimitiveAttribute):
    """Number attributes accept custom defaults only."""

    _kind = "Number"
    _schema_type = GeneratorSchemaType.NUMBER_ATTRIBUTE
    _default_fragment = DefaultCustom

    @classmethod
    def from_spec(cls, name: str, attribute: spec.NumberAttribute | None) -> NumberAttribute:
        return super().from_spec(name, attribute)


@dataclass(frozen=True)
class StringAttribute(_PrimitiveAttribute):
    _kind = "String"
    _schema_type = GeneratorSchemaType.STRING_ATTRIBUTE
    _default_fragment = DefaultString

    @classmethod
    def from_spec(cls, name: str, attribute: spec.StringAttribute | None) -> StringAttribute:
        return super().from_spec(name, attribute)


# ################
# Implementation
# ################

# Accessors used by the generated conversion functions of externally typed scalars.
_VALUE_TO_FUNCS = {
    "Bool": "ValueBool",
    "Float64": "ValueFloat64",
    "Int64": "ValueInt64",
    "Number": "ValueBigFloat",
    "String": "ValueString",
}

_VALUE_FROM_FUNCS = {
    "Bool": "BoolValue",
    "Float64": "Float64Value",
    "Int64": "Int64Value",
    "Number": "NumberValue",
    "String": "StringValue",
}
