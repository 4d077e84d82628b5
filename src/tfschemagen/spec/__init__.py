# Copyright 2026 tfschemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Input specification models and loader."""

from tfschemagen.spec.loader import SpecificationError, load_specification, parse_specification
from tfschemagen.spec.schema import (
    AttributeSpec,
    BlockSpec,
    BoolAttribute,
    DataSourceSpec,
    Float64Attribute,
    Int64Attribute,
    ListAttribute,
    ListNestedAttribute,
    ListNestedBlock,
    MapAttribute,
    MapNestedAttribute,
    NestedAttributeObject,
    NestedBlockObject,
    NumberAttribute,
    ObjectAttribute,
    ProviderSpec,
    ResourceSpec,
    SchemaSpec,
    SetAttribute,
    SetNestedAttribute,
    SetNestedBlock,
    SingleNestedAttribute,
    SingleNestedBlock,
    Specification,
    StringAttribute,
)
from tfschemagen.spec.types import (
    AssociatedExternalType,
    BoolDefault,
    CodeImport,
    CollectionElement,
    ComputedOptionalRequired,
    CustomCode,
    CustomDefault,
    CustomType,
    ElementType,
    Float64Default,
    Int64Default,
    ObjectAttributeType,
    ObjectElement,
    PlanModifier,
    PrimitiveElement,
    StringDefault,
    Validator,
)

__all__ = [
    # Building blocks
    "AssociatedExternalType",
    "BoolDefault",
    "CodeImport",
    "CollectionElement",
    "ComputedOptionalRequired",
    "CustomCode",
    "CustomDefault",
    "CustomType",
    "ElementType",
    "Float64Default",
    "Int64Default",
    "ObjectAttributeType",
    "ObjectElement",
    "PlanModifier",
    "PrimitiveElement",
    "StringDefault",
    "Validator",
    # Attributes and blocks
    "AttributeSpec",
    "BlockSpec",
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
    # Schemas
    "DataSourceSpec",
    "ProviderSpec",
    "ResourceSpec",
    "SchemaSpec",
    "Specification",
    # Loading
    "SpecificationError",
    "load_specification",
    "parse_specification",
]
