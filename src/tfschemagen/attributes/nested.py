# Copyright 2026 tfschemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""List, Map, Set and Single nested attribute variants.

Nested attributes own full child attribute definitions. Their custom type and
value pairs are always generated; conversion functions only when the nested
object has an associated external type.

List- and map-nested attributes define no ``to``/``from_`` conversion, while
set-nested and single-nested attributes define them but always raise
:class:`~tfschemagen.schema.errors.UnimplementedFeatureError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tfschemagen.attributes.nested_objects import NestedAttributeObject, members_schema
from tfschemagen.convert import (
    ComputedOptionalRequired,
    CustomTypeNestedCollection,
    CustomTypeNestedObject,
    DefaultCustom,
    DeprecationMessage,
    Description,
    PlanModifiers,
    Sensitive,
    Validators,
)
from tfschemagen.identifiers import go_quote, to_pascal_case
from tfschemagen.schema.assoc_ext_type import AssocExtType
from tfschemagen.schema.conversion import ToFromConversion
from tfschemagen.schema.errors import NilSpecError, UnimplementedFeatureError
from tfschemagen.schema.imports import Imports, attr_imports, custom_type_imports
from tfschemagen.schema.members import (
    GeneratorAttribute,
    GeneratorAttributes,
    GeneratorBlocks,
    GeneratorSchemaType,
    ModelField,
)
from tfschemagen.schema.renderers import CustomNestedObject, ToFromNestedObject
from tfschemagen.spec import schema as spec

if TYPE_CHECKING:
    from tfschemagen.schema.registry import TemplateRegistry

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class _NestedCollectionAttribute(GeneratorAttribute):
    nested_object: NestedAttributeObject
    custom_type: CustomTypeNestedCollection
    computed_optional_required: ComputedOptionalRequired
    sensitive: Sensitive
    description: Description
    deprecation_message: DeprecationMessage
    plan_modifiers: PlanModifiers
    validators: Validators
    default: DefaultCustom

    _kind = ""
    _schema_type = GeneratorSchemaType.LIST_NESTED_ATTRIBUTE

    @classmethod
    def from_spec(cls, name: str, attribute):
        if attribute is None:
            raise NilSpecError(f"{cls._kind}NestedAttribute")
        return cls(
            nested_object=NestedAttributeObject.from_spec(name, attribute.nested_object),
            custom_type=CustomTypeNestedCollection(attribute.custom_type),
            computed_optional_required=ComputedOptionalRequired(attribute.computed_optional_required),
            sensitive=Sensitive(attribute.sensitive),
            description=Description(attribute.description),
            deprecation_message=DeprecationMessage(attribute.deprecation_message),
            plan_modifiers=PlanModifiers.from_spec(cls._kind, attribute.plan_modifiers),
            validators=Validators.from_spec(cls._kind, attribute.validators),
            default=DefaultCustom(attribute.default),
        )

    def generator_schema_type(self) -> GeneratorSchemaType:
        return self._schema_type

    def equal(self, other: object) -> bool:
        if type(other) is not type(self):
            return False
        return (
            self.nested_object.equal(other.nested_object)
            and self.custom_type == other.custom_type
            and self.computed_optional_required == other.computed_optional_required
            and self.sensitive == other.sensitive
            and self.description == other.description
            and self.deprecation_message == other.deprecation_message
            and self.plan_modifiers == other.plan_modifiers
            and self.validators == other.validators
            and self.default == other.default
        )

    def imports(self) -> Imports:
        imports = Imports()
        imports.append(custom_type_imports(self.custom_type.custom_type))
        imports.append(self.default.imports())
        imports.append(self.plan_modifiers.imports())
        imports.append(self.validators.imports())
        imports.append(self.nested_object.imports())
        imports.append(attr_imports())
        if self.nested_object.assoc_ext_type is not None:
            imports.append(self.nested_object.assoc_ext_type.imports())
        return imports

    def schema(self, name: str, templates: TemplateRegistry) -> str:
        return (
            f"{go_quote(name)}: schema.{self._kind}NestedAttribute{{\n"
            + self.nested_object.schema(templates)
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
        value_type = f"types.{self._kind}"
        if self.custom_type.custom_type is not None:
            value_type = self.custom_type.custom_type.value_type
        return ModelField(name=to_pascal_case(name), tfsdk_name=name, value_type=value_type)

    def attr_type(self, name: str) -> str:
        return f"basetypes.{self._kind}Type{{\nElemType: {to_pascal_case(name)}Value{{}}.Type(ctx),\n}}"

    def attr_value(self, name: str) -> str:
        return f"basetypes.{self._kind}Value"

    def get_attributes(self) -> GeneratorAttributes:
        return self.nested_object.attributes

    def get_blocks(self) -> GeneratorBlocks:
        return GeneratorBlocks()

    def custom_type_and_value(self, name: str, templates: TemplateRegistry) -> str:
        attributes = self.nested_object.attributes
        nested_object = CustomNestedObject(name, attributes.attr_types(), attributes.attr_values())
        return nested_object.render(templates) + attributes.custom_type_and_value(templates)

    def to_from_functions(self, name: str, templates: TemplateRegistry) -> str:
        assoc_ext_type = self.nested_object.assoc_ext_type
        if assoc_ext_type is None:
            return ""
        attributes = self.nested_object.attributes
        to_from = ToFromNestedObject(name, assoc_ext_type, attributes.to_funcs(), attributes.from_funcs())
        return to_from.render(templates) + attributes.to_from_functions(templates)


@dataclass(frozen=True)
class ListNestedAttribute(_NestedCollectionAttribute):
    _kind = "List"
    _schema_type = GeneratorSchemaType.LIST_NESTED_ATTRIBUTE

    @classmethod
    def from_spec(cls, name: str, attribute: spec.ListNestedAttribute | None) -> ListNestedAttribute:
        return super().from_spec(name, attribute)


@dataclass(frozen=True)
class MapNestedAttribute(_NestedCollectionAttribute):
    _kind = "Map"
    _schema_type = GeneratorSchemaType.MAP_NESTED_ATTRIBUTE

    @classmethod
    def from_spec(cls, name: str, attribute: spec.MapNestedAttribute | None) -> MapNestedAttribute:
        return super().from_spec(name, attribute)


@dataclass(frozen=True)
class SetNestedAttribute(_NestedCollectionAttribute):
    _kind = "Set"
    _schema_type = GeneratorSchemaType.SET_NESTED_ATTRIBUTE

    @classmethod
    def from_spec(cls, name: str, attribute: spec.SetNestedAttribute | None) -> SetNestedAttribute:
        return super().from_spec(name, attribute)

    def to(self) -> ToFromConversion:
        raise UnimplementedFeatureError("set nested type is not yet implemented")

    def from_(self) -> ToFromConversion:
        raise UnimplementedFeatureError("set nested type is not yet implemented")


@dataclass(frozen=True)
class SingleNestedAttribute(GeneratorAttribute):
    """An attribute holding exactly one nested object, declared inline."""

    attributes: GeneratorAttributes
    custom_type: CustomTypeNestedObject
    computed_optional_required: ComputedOptionalRequired
    sensitive: Sensitive
    description: Description
    deprecation_message: DeprecationMessage
    plan_modifiers: PlanModifiers
    validators: Validators
    default: DefaultCustom
    assoc_ext_type: AssocExtType | None = None

    @classmethod
    def from_spec(cls, name: str, attribute: spec.SingleNestedAttribute | None) -> SingleNestedAttribute:
        from tfschemagen.attributes.dispatch import new_attributes

        if attribute is None:
            raise NilSpecError("SingleNestedAttribute")
        return cls(
            attributes=new_attributes(attribute.attributes),
            custom_type=CustomTypeNestedObject(attribute.custom_type, name),
            computed_optional_required=ComputedOptionalRequired(attribute.computed_optional_required),
            sensitive=Sensitive(attribute.sensitive),
            description=Description(attribute.description),
            deprecation_message=DeprecationMessage(attribute.deprecation_message),
            plan_modifiers=PlanModifiers.from_spec("Object", attribute.plan_modifiers),
            validators=Validators.from_spec("Object", attribute.validators),
            default=DefaultCustom(attribute.default),
            assoc_ext_type=AssocExtType.from_spec(attribute.associated_external_type),
        )

    def generator_schema_type(self) -> GeneratorSchemaType:
        return GeneratorSchemaType.SINGLE_NESTED_ATTRIBUTE

    def equal(self, other: object) -> bool:
        if not isinstance(other, SingleNestedAttribute):
            return False
        return self.attributes.equal(other.attributes) and all(
            getattr(self, f) == getattr(other, f)
            for f in (
                "custom_type",
                "computed_optional_required",
                "sensitive",
                "description",
                "deprecation_message",
                "plan_modifiers",
                "validators",
                "default",
                "assoc_ext_type",
            )
        )

    def imports(self) -> Imports:
        imports = Imports()
        imports.append(self.custom_type.imports())
        imports.append(self.default.imports())
        imports.append(self.plan_modifiers.imports())
        imports.append(self.validators.imports())
        imports.append(self.attributes.imports())
        imports.append(attr_imports())
        if self.assoc_ext_type is not None:
            imports.append(self.assoc_ext_type.imports())
        return imports

    def schema(self, name: str, templates: TemplateRegistry) -> str:
        return (
            f"{go_quote(name)}: schema.SingleNestedAttribute{{\n"
            + members_schema(templates, self.attributes, always_attributes=True)
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
        return ModelField(name=to_pascal_case(name), tfsdk_name=name, value_type=self.custom_type.value_type())

    def attr_type(self, name: str) -> str:
        pascal = to_pascal_case(name)
        return f"{pascal}Type{{\nbasetypes.ObjectType{{\nAttrTypes: {pascal}Value{{}}.AttributeTypes(ctx),\n}},\n}}"

    def attr_value(self, name: str) -> str:
        return f"{to_pascal_case(name)}Value"

    def get_attributes(self) -> GeneratorAttributes:
        return self.attributes

    def get_blocks(self) -> GeneratorBlocks:
        return GeneratorBlocks()

    def custom_type_and_value(self, name: str, templates: TemplateRegistry) -> str:
        nested_object = CustomNestedObject(name, self.attributes.attr_types(), self.attributes.attr_values())
        return nested_object.render(templates) + self.attributes.custom_type_and_value(templates)

    def to_from_functions(self, name: str, templates: TemplateRegistry) -> str:
        if self.assoc_ext_type is None:
            return ""
        to_from = ToFromNestedObject(
            name, self.assoc_ext_type, self.attributes.to_funcs(), self.attributes.from_funcs()
        )
        return to_from.render(templates) + self.attributes.to_from_functions(templates)

    def to(self) -> ToFromConversion:
        raise UnimplementedFeatureError("single nested type is not yet implemented")

    def from_(self) -> ToFromConversion:
        raise UnimplementedFeatureError("single nested type is not yet implemented")
