# Copyright 2026 tfschemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Construction of generator members and schemas from the input specification.

Every attribute and block spec carries exactly one populated kind field. The
kind tables below are the single place that maps a kind field to its variant;
nested variants recurse back through :func:`new_attributes` and
:func:`new_blocks`.
"""

from __future__ import annotations

import logging

from tfschemagen.attributes.blocks import ListNestedBlock, SetNestedBlock, SingleNestedBlock
from tfschemagen.attributes.collections import ListAttribute, MapAttribute, SetAttribute
from tfschemagen.attributes.nested import (
    ListNestedAttribute,
    MapNestedAttribute,
    SetNestedAttribute,
    SingleNestedAttribute,
)
from tfschemagen.attributes.object import ObjectAttribute
from tfschemagen.attributes.primitives import (
    BoolAttribute,
    Float64Attribute,
    Int64Attribute,
    NumberAttribute,
    StringAttribute,
)
from tfschemagen.schema.errors import AmbiguousKindError, DuplicateNameError, UnknownKindError
from tfschemagen.schema.generator import GeneratorSchema
from tfschemagen.schema.members import GeneratorAttribute, GeneratorAttributes, GeneratorBlock, GeneratorBlocks
from tfschemagen.spec.schema import AttributeSpec, BlockSpec, SchemaSpec

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

ATTRIBUTE_KINDS = (
    ("bool_", BoolAttribute),
    ("float64", Float64Attribute),
    ("int64", Int64Attribute),
    ("list_", ListAttribute),
    ("list_nested", ListNestedAttribute),
    ("map_", MapAttribute),
    ("map_nested", MapNestedAttribute),
    ("number", NumberAttribute),
    ("object_", ObjectAttribute),
    ("set_", SetAttribute),
    ("set_nested", SetNestedAttribute),
    ("single_nested", SingleNestedAttribute),
    ("string", StringAttribute),
)

BLOCK_KINDS = (
    ("list_nested", ListNestedBlock),
    ("set_nested", SetNestedBlock),
    ("single_nested", SingleNestedBlock),
)


def new_attribute(attribute_spec: AttributeSpec) -> GeneratorAttribute:
    """Build the attribute variant matching the populated kind field.

    Raises:
        UnknownKindError: If no kind field is populated.
        AmbiguousKindError: If more than one kind field is populated.
    """
    return _dispatch("attribute", attribute_spec, ATTRIBUTE_KINDS)


def new_block(block_spec: BlockSpec) -> GeneratorBlock:
    """Build the block variant matching the populated kind field.

    Raises:
        UnknownKindError: If no kind field is populated.
        AmbiguousKindError: If more than one kind field is populated.
    """
    return _dispatch("block", block_spec, BLOCK_KINDS)


def new_attributes(attribute_specs: list[AttributeSpec]) -> GeneratorAttributes:
    attributes = GeneratorAttributes()
    for attribute_spec in attribute_specs:
        if attribute_spec.name in attributes:
            raise DuplicateNameError("attribute", attribute_spec.name)
        attributes[attribute_spec.name] = new_attribute(attribute_spec)
    return attributes


def new_blocks(block_specs: list[BlockSpec]) -> GeneratorBlocks:
    blocks = GeneratorBlocks()
    for block_spec in block_specs:
        if block_spec.name in blocks:
            raise DuplicateNameError("block", block_spec.name)
        blocks[block_spec.name] = new_block(block_spec)
    return blocks


def new_schema(schema_spec: SchemaSpec) -> GeneratorSchema:
    """Build the generator schema for one resource, data source or provider."""
    return GeneratorSchema(
        attributes=new_attributes(schema_spec.attributes),
        blocks=new_blocks(schema_spec.blocks),
        description=schema_spec.description,
        markdown_description=schema_spec.markdown_description,
        deprecation_message=schema_spec.deprecation_message,
    )


def new_schemas(schema_specs: dict[str, SchemaSpec]) -> dict[str, GeneratorSchema]:
    """Build every schema, aborting on the first member that cannot be constructed.

    Raises:
        DuplicateNameError: If two generated Go types of one schema would share a name.
    """
    schemas: dict[str, GeneratorSchema] = {}
    for name, schema_spec in schema_specs.items():
        logger.debug("Building schema %r", name)
        schema = new_schema(schema_spec)
        _check_generated_type_names(name, schema)
        schemas[name] = schema
    return schemas


# ################
# Implementation
# ################


def _dispatch(category: str, member_spec: AttributeSpec | BlockSpec, kinds):
    populated = [(field_name, variant) for field_name, variant in kinds if getattr(member_spec, field_name) is not None]
    if not populated:
        raise UnknownKindError(category, member_spec)
    if len(populated) > 1:
        raise AmbiguousKindError(category, [field_name.rstrip("_") for field_name, _ in populated])
    field_name, variant = populated[0]
    logger.debug("Dispatching %s %r to %s", category, member_spec.name, variant.__name__)
    return variant.from_spec(member_spec.name, getattr(member_spec, field_name))


def _check_generated_type_names(name: str, schema: GeneratorSchema) -> None:
    for category, names in (("model", schema.model_names(name)), ("custom type", schema.custom_type_names())):
        seen: set[str] = set()
        for type_name in names:
            if type_name in seen:
                raise DuplicateNameError(category, type_name)
            seen.add(type_name)
