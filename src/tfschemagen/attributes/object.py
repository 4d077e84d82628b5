# Copyright 2026 tfschemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""The object attribute variant."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from tfschemagen.convert import (
    ComputedOptionalRequired,
    CustomTypeObject,
    DefaultCustom,
    DeprecationMessage,
    Description,
    ObjectAttributeTypes,
    PlanModifiers,
    Sensitive,
    Validators,
)
from tfschemagen.identifiers import go_quote, to_pascal_case
from tfschemagen.schema.assoc_ext_type import AssocExtType
from tfschemagen.schema.conversion import ObjectField, ToFromConversion
from tfschemagen.schema.element_types import attr_types_string, contains_number, object_field_from, object_field_to
from tfschemagen.schema.errors import NilSpecError
from tfschemagen.schema.imports import MATH_BIG_IMPORT, Imports, associated_external_type_imports, imports_of
from tfschemagen.schema.members import GeneratorAttribute, GeneratorSchemaType, ModelField
from tfschemagen.schema.renderers import CustomObject, ToFromObject
from tfschemagen.spec import schema as spec
from tfschemagen.spec.types import ObjectAttributeType

if TYPE_CHECKING:
    from tfschemagen.schema.registry import TemplateRegistry

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class ObjectAttribute(GeneratorAttribute):
    """An attribute holding a fixed set of typed fields, kept in declared order."""

    custom_type: CustomTypeObject
    computed_optional_required: ComputedOptionalRequired
    sensitive: Sensitive
    description: Description
    deprecation_message: DeprecationMessage
    plan_modifiers: PlanModifiers
    validators: Validators
    default: DefaultCustom
    attribute_types: list[ObjectAttributeType] = field(default_factory=list)
    assoc_ext_type: AssocExtType | None = None

    @classmethod
    def from_spec(cls, name: str, attribute: spec.ObjectAttribute | None) -> ObjectAttribute:
        if attribute is None:
            raise NilSpecError("ObjectAttribute")
        assoc_ext_type = AssocExtType.from_spec(attribute.associated_external_type)
        return cls(
            custom_type=CustomTypeObject(attribute.custom_type, assoc_ext_type, name),
            computed_optional_required=ComputedOptionalRequired(attribute.computed_optional_required),
            sensitive=Sensitive(attribute.sensitive),
            description=Description(attribute.description),
            deprecation_message=DeprecationMessage(attribute.deprecation_message),
            plan_modifiers=PlanModifiers.from_spec("Object", attribute.plan_modifiers),
            validators=Validators.from_spec("Object", attribute.validators),
            default=DefaultCustom(attribute.default),
            attribute_types=list(attribute.attribute_types),
            assoc_ext_type=assoc_ext_type,
        )

    def generator_schema_type(self) -> GeneratorSchemaType:
        return GeneratorSchemaType.OBJECT_ATTRIBUTE

    def imports(self) -> Imports:
        imports = Imports()
        imports.append(self.custom_type.imports())
        if self.custom_type.custom_type is None:
            imports.append(ObjectAttributeTypes(self.attribute_types).imports())
        imports.append(self.plan_modifiers.imports())
        imports.append(self.validators.imports())
        imports.append(self.default.imports())
        if self.assoc_ext_type is None:
            # The generated nested to-conversions store number fields as *big.Float.
            if contains_number(self.attribute_types):
                imports.append(imports_of(MATH_BIG_IMPORT))
        else:
            imports.append(associated_external_type_imports(), self.assoc_ext_type.imports())
        return imports

    def schema(self, name: str, templates: TemplateRegistry) -> str:
        type_schema = self.custom_type.schema() or ObjectAttributeTypes(self.attribute_types).schema()
        return (
            f"{go_quote(name)}: schema.ObjectAttribute{{\n"
            + type_schema
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
        value_type = self.custom_type.value_type() or "types.Object"
        return ModelField(name=to_pascal_case(name), tfsdk_name=name, value_type=value_type)

    def attr_type(self, name: str) -> str:
        if self.assoc_ext_type is not None:
            pascal = to_pascal_case(name)
            return (
                f"{pascal}Type{{\nbasetypes.ObjectType{{\n"
                f"AttrTypes: {pascal}Value{{}}.AttributeTypes(ctx),\n}},\n}}"
            )
        return (
            "basetypes.ObjectType{\nAttrTypes: map[string]attr.Type{\n"
            f"{attr_types_string(self.attribute_types)}\n}},\n}}"
        )

    def attr_value(self, name: str) -> str:
        if self.assoc_ext_type is not None:
            return f"{to_pascal_case(name)}Value"
        return "basetypes.ObjectValue"

    def to(self) -> ToFromConversion:
        if self.assoc_ext_type is not None:
            return ToFromConversion(assoc_ext_type=self.assoc_ext_type)
        return ToFromConversion(object_type=self._to_fields())

    def from_(self) -> ToFromConversion:
        if self.assoc_ext_type is not None:
            return ToFromConversion(assoc_ext_type=self.assoc_ext_type)
        return ToFromConversion(object_type=self._from_fields())

    def custom_type_and_value(self, name: str, templates: TemplateRegistry) -> str:
        if self.assoc_ext_type is None:
            return ""
        return CustomObject(name, attr_types_string(self.attribute_types)).render(templates)

    def to_from_functions(self, name: str, templates: TemplateRegistry) -> str:
        if self.assoc_ext_type is None:
            return ""
        return ToFromObject(
            name=name,
            assoc_ext_type=self.assoc_ext_type,
            to_fields=self._to_fields(),
            from_fields=self._from_fields(),
        ).render(templates)

    def _to_fields(self) -> dict[str, ObjectField]:
        return {a.name: object_field_to(a) for a in self.attribute_types}

    def _from_fields(self) -> dict[str, ObjectField]:
        return {a.name: object_field_from(a) for a in self.attribute_types}
