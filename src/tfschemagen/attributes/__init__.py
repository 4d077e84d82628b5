# Copyright 2026 tfschemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Attribute and block variants, and the dispatcher that builds them from specs."""

from tfschemagen.attributes.blocks import ListNestedBlock, SetNestedBlock, SingleNestedBlock
from tfschemagen.attributes.collections import ListAttribute, MapAttribute, SetAttribute
from tfschemagen.attributes.dispatch import (
    new_attribute,
    new_attributes,
    new_block,
    new_blocks,
    new_schema,
    new_schemas,
)
from tfschemagen.attributes.nested import (
    ListNestedAttribute,
    MapNestedAttribute,
    SetNestedAttribute,
    SingleNestedAttribute,
)
from tfschemagen.attributes.nested_objects import NestedAttributeObject, NestedBlockObject
from tfschemagen.attributes.object import ObjectAttribute
from tfschemagen.attributes.primitives import (
    BoolAttribute,
    Float64Attribute,
    Int64Attribute,
    NumberAttribute,
    StringAttribute,
)

__all__ = [
    "BoolAttribute",
    "Float64Attribute",
    "Int64Attribute",
    "ListAttribute",
    "ListNestedAttribute",
    "ListNestedBlock",
    "MapAttribute",
    "MapNestedAttribute",
    "NestedAttributeObject",
    "NestedBlockObject",
    "NumberAttribute",
    "ObjectAttribute",
    "SetAttribute",
    "SetNestedAttribute",
    "SetNestedBlock",
    "SingleNestedAttribute",
    "SingleNestedBlock",
    "StringAttribute",
    "new_attribute",
    "new_attributes",
    "new_block",
    "new_blocks",
    "new_schema",
    "new_schemas",
]
