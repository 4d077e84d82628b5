# Copyright 2026 tfschemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""List, Set and Single nested block variants.

Blocks behave like nested attributes but their objects may hold further
blocks. Set-nested and single-nested blocks cannot yet take part in the
conversion of an enclosing externally typed object.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tfschemagen.attributes.nested_objects import NestedBlockObject, members_schema
from tfschemagen.convert import (
    ComputedOptionalRequired,
    CustomTypeNestedCollection,
    CustomTypeNestedObject,
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
    GeneratorAttributes,
    GeneratorBlock,
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
class _NestedCollectionBlock(GeneratorBlock):
    nested_object: NestedBlockObject
    custom_type: CustomTypeNestedCollection
    computed_optional_required: ComputedOptionalRequired
    sensitive: Sensitive
    description: Description
    deprecation_message: DeprecationMessage
    plan_modifiers: PlanModifiers
    validators: Validators

    _kind = ""
    _schema_type = GeneratorSchemaType.LIST_NESTED_BLOCK

    @classmethod
    def from_spec(cls, name: str, block):
        if block is None:
            raise NilSpecError(f"{cls._kind}NestedBlock")
        return cls(
            nested_object=NestedBlockObject.from_spec(name, block.nested_object),
            custom_type=CustomTypeNestedCollection(block.custom_type),
            computed_optional_required=ComputedOptionalRequired(block.computed_optional_required),
            sensitive=Sensitive(block.sensitive),
            description=Description(block.description),
            deprecation_message=DeprecationMessage(block.deprecation_message),
            plan_modifiers=PlanModifiers.from_spec(cls._kind, block.plan_modifiers),
            validators=Validators.from_spec(cls._kind, block.validators),
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
        )

    def imports(self) -> Imports:
        imports = Imports()
        imports.append(custom_type_imports(self.custom_type.custom_type))
        imports.append(self.plan_modifiers.imports())
        imports.append(self.validators.imports())
        imports.append(self.nested_object.imports())
        imports.append(attr_imports())
        if self.nested_object.assoc_ext_type is not None:
            imports.append(self.nested_object.assoc_ext_type.imports())
        return imports

    def schema(self, name: str, templates: TemplateRegistry) -> str:
        return (
            f"{go_quote(name)}: schema.{self._kind}NestedBlock{{\n"
            + self.nested_object.schema(templates)
            + self.custom_type.schema()
            + self.computed_optional_required.schema()
            + self.sensitive.schema()
            + self.description.schema()
            + self.deprecation_message.schema()
            + self.plan_modifiers.schema()
            + self.validators.schema()
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
        return self.nested_object.blocks

    def custom_type_and_value(self, name: str, templates: TemplateRegistry) -> str:
        return _custom_type_and_value(name, self.get_attributes(), self.get_blocks(), templates)

    def to_from_functions(self, name: str, templates: TemplateRegistry) -> str:
        assoc_ext_type = self.nested_object.assoc_ext_type
        if assoc_ext_type is None:
            return ""
        return _to_from_functions(name, assoc_ext_type, self.get_attributes(), self.get_blocks(), templates)


@dataclass(frozen=True)
class ListNestedBlock(_NestedCollectionBlock):
    _kind = "List"
    _schema_type = GeneratorSchemaType.LIST_NESTED_BLOCK

    @classmethod
    def from_spec(cls, name: str, block: spec.ListNestedBlock | None) -> ListNestedBlock:
        return super().from_spec(name, block)


@dataclass(frozen=True)
class SetNestedBlock(_NestedCollectionBlock):
    _kind = "Set"
    _schema_type = GeneratorSchemaType.SET_NESTED_BLOCK

    @classmethod
    def from_spec(cls, name: str, block: spec.SetNestedBlock | None) -> SetNestedBlock:
        return super().from_spec(name, block)

    def to(self) -> ToFromConversion:
        raise UnimplementedFeatureError("set nested type is not yet implemented")

    def from_(self) -> ToFromConversion:
        raise UnimplementedFeatureError("set nested type is not yet implemented")


@dataclass(frozen=True)
class SingleNestedBlock(GeneratorBlock):
    """A block holding exactly one object, with attributes and blocks declared inline."""

    attributes: GeneratorAttributes
    blocks: GeneratorBlocks
    custom_type: CustomTypeNestedObject
    computed_optional_required: ComputedOptionalRequired
    sensitive: Sensitive
    description: Description
    deprecation_message: DeprecationMessage
    plan_modifiers: PlanModifiers
    validators: Validators
    assoc_ext_type: AssocExtType | None = None

    @classmethod
    def from_spec(cls, name: str, block: spec.SingleNestedBlock | None) -> SingleNestedBlock:
        from tfschemagen.attributes.dispatch import new_attributes, new_blocks

        if block is None:
            raise NilSpecError("SingleNestedBlock")
        return cls(
            attributes=new_attributes(block.attributes),
            blocks=new_blocks(block.blocks),
            custom_type=CustomTypeNestedObject(block.custom_type, name),
            computed_optional_required=ComputedOptionalRequired(block.computed_optional_required),
            sensitive=Sensitive(block.sensitive),
            description=Description(block.description),
            deprecation_message=DeprecationMessage(block.deprecation_message),
            plan_modifiers=PlanModifiers.from_spec("Object", block.plan_modifiers),
            validators=Validators.from_spec("Object", block.validators),
            assoc_ext_type=AssocExtType.from_spec(block.associated_external_type),
        )

    def generator_schema_type(self) -> GeneratorSchemaType:
        return GeneratorSchemaType.SINGLE_NESTED_BLOCK

    def equal(self, other: object) -> bool:
        if not isinstance(other, SingleNestedBlock):
            return False
        return (
            self.attributes.equal(other.attributes)
            and self.blocks.equal(other.blocks)
            and self.custom_type == other.custom_type
            and self.computed_optional_required == other.computed_optional_required
            and self.sensitive == other.sensitive
            and self.description == other.description
            and self.deprecation_message == other.deprecation_message
            and self.plan_modifiers == other.plan_modifiers
            and self.validators == other.validators
            and self.assoc_ext_type == other.assoc_ext_type
        )

    def imports(self) -> Imports:
        imports = Imports()
        imports.append(self.custom_type.imports())
        imports.append(self.plan_modifiers.imports())
        imports.append(self.validators.imports())
        imports.append(self.attributes.imports())
        imports.append(self.blocks.imports())
        imports.append(attr_imports())
        if self.assoc_ext_type is not None:
            imports.append(self.assoc_ext_type.imports())
        return imports

    def schema(self, name: str, templates: TemplateRegistry) -> str:
        return (
            f"{go_quote(name)}: schema.SingleNestedBlock{{\n"
            + members_schema(templates, self.attributes, self.blocks)
            + self.custom_type.schema()
            + self.computed_optional_required.schema()
            + self.sensitive.schema()
            + self.description.schema()
            + self.deprecation_message.schema()
            + self.plan_modifiers.schema()
            + self.validators.schema()
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
        return self.blocks

    def custom_type_and_value(self, name: str, templates: TemplateRegistry) -> str:
        return _custom_type_and_value(name, self.attributes, self.blocks, templates)

    def to_from_functions(self, name: str, templates: TemplateRegistry) -> str:
        if self.assoc_ext_type is None:
            return ""
        return _to_from_functions(name, self.assoc_ext_type, self.attributes, self.blocks, templates)

    def to(self) -> ToFromConversion:
        raise UnimplementedFeatureError("single nested type is not yet implemented")

    def from_(self) -> ToFromConversion:
        raise UnimplementedFeatureError("single nested type is not yet implemented")


# ################
# Implementation
# ################


def _custom_type_and_value(
    name: str, attributes: GeneratorAttributes, blocks: GeneratorBlocks, templates: TemplateRegistry
) -> str:
    """The object's own type/value pair, then those of attributes, then those of blocks."""
    nested_object = CustomNestedObject(
        name,
        {**attributes.attr_types(), **blocks.attr_types()},
        {**attributes.attr_values(), **blocks.attr_values()},
    )
    return (
        nested_object.render(templates)
        + attributes.custom_type_and_value(templates)
        + blocks.custom_type_and_value(templates)
    )


def _to_from_functions(
    name: str,
    assoc_ext_type: AssocExtType,
    attributes: GeneratorAttributes,
    blocks: GeneratorBlocks,
    templates: TemplateRegistry,
) -> str:
    to_from = ToFromNestedObject(
        name,
        assoc_ext_type,
        {**attributes.to_funcs(), **blocks.to_funcs()},
        {**attributes.from_funcs(), **blocks.from_funcs()},
    )
    return to_from.render(templates) + attributes.to_from_functions(templates) + blocks.to_from_functions(templates)
