# Copyright 2026 tfschemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema text fragments shared by attribute and block variants."""

from tfschemagen.convert.common import ComputedOptionalRequired, DeprecationMessage, Description, Sensitive
from tfschemagen.convert.custom_types import (
    CustomTypeCollection,
    CustomTypeNestedCollection,
    CustomTypeNestedObject,
    CustomTypeObject,
    CustomTypePrimitive,
)
from tfschemagen.convert.defaults import DefaultBool, DefaultCustom, DefaultFloat64, DefaultInt64, DefaultString
from tfschemagen.convert.element_type import ElementTypeFragment, ObjectAttributeTypes
from tfschemagen.convert.hooks import PlanModifiers, Validators

__all__ = [
    "ComputedOptionalRequired",
    "CustomTypeCollection",
    "CustomTypeNestedCollection",
    "CustomTypeNestedObject",
    "CustomTypeObject",
    "CustomTypePrimitive",
    "DefaultBool",
    "DefaultCustom",
    "DefaultFloat64",
    "DefaultInt64",
    "DefaultString",
    "DeprecationMessage",
    "Description",
    "ElementTypeFragment",
    "ObjectAttributeTypes",
    "PlanModifiers",
    "Sensitive",
    "Validators",
]
