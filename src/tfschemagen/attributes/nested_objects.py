# Copyright 2026 tfschemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""The objects wrapped by list, map and set nested attributes and blocks.

A nested object owns its child members and carries plan modifiers and
validators scoped to the object itself, distinct from those of the collection
wrapping it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tfschemagen.convert import CustomTypeNestedObject, PlanModifiers, Validators
from tfschemagen.schema.assoc_ext_type import AssocExtType
from tfschemagen.schema.imports import Imports
from tfschemagen.schema.members import GeneratorAttributes, GeneratorBlocks
from tfschemagen.spec import schema as spec

if TYPE_CHECKING:
    from tfschemagen.schema.registry import TemplateRegistry

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class NestedAttributeObject:
    attributes: GeneratorAttributes
    custom_type: CustomTypeNestedObject
    plan_modifiers: PlanModifiers
    validators: Validators
    assoc_ext_type: AssocExtType | None = None

    @classmethod
    def from_spec(cls, name: str, nested_object: spec.NestedAttributeObject) -> NestedAttributeObject:
        from tfschemagen.attributes.dispatch import new_attributes

        return cls(
            attributes=new_attributes(nested_object.attributes),
            custom_type=CustomTypeNestedObject(nested_object.custom_type, name),
            plan_modifiers=PlanModifiers.from_spec("Object", nested_object.plan_modifiers),
            validators=Validators.from_spec("Object", nested_object.validators),
            assoc_ext_type=AssocExtType.from_spec(nested_object.associated_external_type),
        )

    def equal(self, other: object) -> bool:
        if not isinstance(other, NestedAttributeObject):
            return False
        return (
            self.attributes.equal(other.attributes)
            and self.custom_type == other.custom_type
            and self.plan_modifiers == other.plan_modifiers
            and self.validators == other.validators
            and self.assoc_ext_type == other.assoc_ext_type
        )

    def imports(self) -> Imports:
        """Object custom type, then object hooks, then children."""
        imports = Imports()
        imports.append(self.custom_type.imports())
        imports.append(self.plan_modifiers.imports())
        imports.append(self.validators.imports())
        imports.append(self.attributes.imports())
        return imports

    def schema(self, templates: TemplateRegistry) -> str:
        return _nested_object_schema("Attribute", self, None, templates)


@dataclass(frozen=True)
class NestedBlockObject:
    """Like :class:`NestedAttributeObject`, but may also hold child blocks."""

    attributes: GeneratorAttributes
    blocks: GeneratorBlocks
    custom_type: CustomTypeNestedObject
    plan_modifiers: PlanModifiers
    validators: Validators
    assoc_ext_type: AssocExtType | None = None

    @classmethod
    def from_spec(cls, name: str, nested_object: spec.NestedBlockObject) -> NestedBlockObject:
        from tfschemagen.attributes.dispatch import new_attributes, new_blocks

        return cls(
            attributes=new_attributes(nested_object.attributes),
            blocks=new_blocks(nested_object.blocks),
            custom_type=CustomTypeNestedObject(nested_object.custom_type, name),
            plan_modifiers=PlanModifiers.from_spec("Object", nested_object.plan_modifiers),
            validators=Validators.from_spec("Object", nested_object.validators),
            assoc_ext_type=AssocExtType.from_spec(nested_object.associated_external_type),
        )

    def equal(self, other: object) -> bool:
        if not isinstance(other, NestedBlockObject):
            return False
        return (
            self.attributes.equal(other.attributes)
            and self.blocks.equal(other.blocks)
            and self.custom_type == other.custom_type
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
        return imports

    def schema(self, templates: TemplateRegistry) -> str:
        return _nested_object_schema("Block", self, self.blocks, templates)


def members_schema(
    templates: TemplateRegistry,
    attributes: GeneratorAttributes,
    blocks: GeneratorBlocks | None = None,
    always_attributes: bool = False,
) -> str:
    """``Attributes`` and ``Blocks`` map fields, each omitted when empty unless *always_attributes*."""
    text = templates.render("members.go.j2", **_members_context(attributes, blocks, always_attributes, templates))
    return text + "\n" if text else ""


# ################
# Implementation
# ################


def _members_context(
    attributes: GeneratorAttributes,
    blocks: GeneratorBlocks | None,
    always_attributes: bool,
    templates: TemplateRegistry,
) -> dict[str, object]:
    return {
        "attributes": attributes.schema(templates),
        "blocks": blocks.schema(templates) if blocks else "",
        "always_attributes": always_attributes,
    }


def _nested_object_schema(
    object_kind: str,
    nested_object: NestedAttributeObject | NestedBlockObject,
    blocks: GeneratorBlocks | None,
    templates: TemplateRegistry,
) -> str:
    # Attribute objects always declare their attribute map, even when empty.
    text = templates.render(
        "nested_object.go.j2",
        object_kind=object_kind,
        custom_type=nested_object.custom_type.schema(),
        plan_modifiers=nested_object.plan_modifiers.schema(),
        validators=nested_object.validators.schema(),
        **_members_context(nested_object.attributes, blocks, blocks is None, templates),
    )
    return text + "\n"
