# Copyright 2026 tfschemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Generator output model, element type resolution, imports and rendering."""

from tfschemagen.schema.assoc_ext_type import AssocExtType
from tfschemagen.schema.conversion import CollectionFields, ObjectField, ToFromConversion
from tfschemagen.schema.errors import (
    AmbiguousKindError,
    DuplicateNameError,
    GeneratorError,
    NilSpecError,
    UnconvertibleTypeError,
    UnimplementedFeatureError,
    UnknownKindError,
    UnsupportedConversionError,
)
from tfschemagen.schema.generator import GeneratorSchema, GeneratorSchemas, GeneratorType, GoCode
from tfschemagen.schema.imports import Imports
from tfschemagen.schema.members import (
    Convertible,
    GeneratorAttribute,
    GeneratorAttributes,
    GeneratorBlock,
    GeneratorBlocks,
    GeneratorSchemaType,
    ModelField,
    NestedMember,
)
from tfschemagen.schema.registry import TemplateRegistry

__all__ = [
    "AmbiguousKindError",
    "AssocExtType",
    "CollectionFields",
    "Convertible",
    "DuplicateNameError",
    "GeneratorAttribute",
    "GeneratorAttributes",
    "GeneratorBlock",
    "GeneratorBlocks",
    "GeneratorError",
    "GeneratorSchema",
    "GeneratorSchemaType",
    "GeneratorSchemas",
    "GeneratorType",
    "GoCode",
    "Imports",
    "ModelField",
    "NestedMember",
    "NilSpecError",
    "ObjectField",
    "TemplateRegistry",
    "ToFromConversion",
    "UnconvertibleTypeError",
    "UnimplementedFeatureError",
    "UnknownKindError",
    "UnsupportedConversionError",
]
