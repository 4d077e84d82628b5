# Copyright 2026 tfschemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""List, Map and Set attribute variants."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tfschemagen.convert import (
    ComputedOptionalRequired,
    CustomTypeCollection,
    DefaultCustom,
    DeprecationMessage,
    Description,
    ElementTypeFragment,
    PlanModifiers,
    Sensitive,
    Validators,
)
from tfschemagen.identifiers import go_quote, to_pascal_case
from tfschemagen.schema.assoc_ext_type import AssocExtType
from tfschemagen.schema.conversion import CollectionFields, ToFromConversion
from tfschemagen.schema.element_types import (
    element_type_from_func,
    element_type_go_type,
    element_type_imports,
    element_type_string,
    element_type_value_type,
)
from tfschemagen.schema.errors import NilSpecError
from tfschemagen.schema.imports import Imports, associated_external_type_imports
from tfschemagen.schema.members import GeneratorAttribute, GeneratorSchemaType, ModelField
from tfschemagen.schema.renderers import CustomCollection, ToFromCollection
from tfschemagen.spec import schema as spec
from tfschemagen.spec.types import ElementType

if TYPE_CHECKING:
    from tfschemagen.schema.registry import TemplateRegistry

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class _CollectionAttribute(GeneratorAttribute):
    """Shared behaviour of list, map and set attributes.

    The element type is resolved lazily so that a variant can always be
    constructed; resolution errors surface from the call that needs the
    resolved expression.
    """

    custom_type: CustomTypeCollection
    element_type: ElementType
    computed_optional_required: ComputedOptionalRequired
    sensitive: Sensitive
    description: Description
    deprecation_message: DeprecationMessage
    plan_modifiers: PlanModifiers
    validators: Validators
    default: DefaultCustom
    assoc_ext_type: AssocExtType | None = None

    _kind = ""
    _schema_type = GeneratorSchemaType.LIST_ATTRIBUTE

    @classmethod
    def from_spec(cls, name: str, attribute):
        if attribute is None:
            raise NilSpecError(f"{cls._kind}Attribute")
        assoc_ext_type = AssocExtType.from_spec(attribute.associated_external_type)
        return cls(
            custom_type=CustomTypeCollection(
                attribute.custom_type, assoc_ext_type, cls._kind, attribute.element_type, name
            ),
            element_type=attribute.element_type,
            computed_optional_required=ComputedOptionalRequired(attribute.computed_optional_required),
            sensitive=Sensitive(attribute.sensitive),
            description=Description(attribute.description),
            deprecation_message=DeprecationMessage(attribute.deprecation_message),
            plan_modifiers=PlanModifiers.from_spec(cls._kind, attribute.plan_modifiers),
            validators=Validators.from_spec(cls._kind, attribute.validators),
            default=DefaultCustom(attribute.default),
            assoc_ext_type=assoc_ext_type,
        )

    def generator_schema_type(self) -> GeneratorSchemaType:
        return self._schema_type

    def imports(self) -> Imports:
        imports = Imports()
        imports.append(self.custom_type.imports())
        if self.custom_type.custom_type is None:
            imports.append(element_type_imports(self.element_type))
        imports.append(self.plan_modifiers.imports())
        imports.append(self.validators.imports())
        imports.append(self.default.imports())
        if self.assoc_ext_type is not None:
            imports.append(associated_external_type_imports(), self.assoc_ext_type.imports())
        return imports

    def schema(self, name: str, templates: TemplateRegistry) -> str:
        custom_type = self.custom_type.schema()
        element_type = "" if custom_type else ElementTypeFragment(self.element_type).schema()
        return (
            f"{go_quote(name)}: schema.{self._kind}Attribute{{\n"
            + custom_type
            + element_type
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
        base = f"basetypes.{self._kind}Type{{\nElemType: {element_type_string(self.element_type)},\n}}"
        if self.assoc_ext_type is not None:
            return f"{to_pascal_case(name)}Type{{\n{base},\n}}"
        return base

    def attr_value(self, name: str) -> str:
        if self.assoc_ext_type is not None:
            return f"{to_pascal_case(name)}Value"
        return f"basetypes.{self._kind}Value"

    def collection_type(self) -> dict[str, str] | None:
        """The element type and value-from function, or None when externally typed."""
        if self.assoc_ext_type is not None:
            return None
        return {
            "ElementType": element_type_string(self.element_type),
            "TypeValueFunc": f"types.{self._kind}ValueFrom",
        }

    def to(self) -> ToFromConversion:
        if self.assoc_ext_type is not None:
            return ToFromConversion(assoc_ext_type=self.assoc_ext_type)
        go_type = element_type_go_type(self.element_type)
        if self._kind == "Map":
            go_type = f"map[string]{go_type}"
        else:
            go_type = f"[]{go_type}"
        return ToFromConversion(collection_type=CollectionFields(go_type=go_type))

    def from_(self) -> ToFromConversion:
        if self.assoc_ext_type is not None:
            return ToFromConversion(assoc_ext_type=self.assoc_ext_type)
        return ToFromConversion(
            collection_type=CollectionFields(
                element_type=element_type_string(self.element_type),
                type_value_from=f"types.{self._kind}ValueFrom",
            )
        )

    def custom_type_and_value(self, name: str, templates: TemplateRegistry) -> str:
        if self.assoc_ext_type is None:
            return ""
        return CustomCollection(name, self._kind, element_type_string(self.element_type)).render(templates)

    def to_from_functions(self, name: str, templates: TemplateRegistry) -> str:
        if self.assoc_ext_type is None:
            return ""
        return ToFromCollection(
            name=name,
            kind=self._kind,
            assoc_ext_type=self.assoc_ext_type,
            element_type=element_type_string(self.element_type),
            element_value=element_type_value_type(self.element_type),
            element_from=element_type_from_func(self.element_type),
        ).render(templates)


@dataclass(frozen=True)
class ListAttribute(_CollectionAttribute):
    _kind = "List"
    _schema_type = GeneratorSchemaType.LIST_ATTRIBUTE

    @classmethod
    def from_spec(cls, name: str, attribute: spec.ListAttribute | None) -> ListAttribute:
        return super().from_spec(name, attribute)


@dataclass(frozen=True)
class MapAttribute(_CollectionAttribute):
    _kind = "Map"
    _schema_type = GeneratorSchemaType.MAP_ATTRIBUTE

    @classmethod
    def from_spec(cls, name: str, attribute: spec.MapAttribute | None) -> MapAttribute:
        return super().from_spec(name, attribute)


@dataclass(frozen=True)
class SetAttribute(_CollectionAttribute):
    _kind = "Set"
    _schema_type = GeneratorSchemaType.SET_ATTRIBUTE

    @classmethod
    def from_spec(cls, name: str, attribute: spec.SetAttribute | None) -> SetAttribute:
        return super().from_spec(name, attribute)
