# Copyright 2026 tfschemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""``ElementType`` and ``AttributeTypes`` schema fragments."""

from __future__ import annotations

from dataclasses import dataclass, field

from tfschemagen.schema.element_types import (
    attr_types_imports,
    attr_types_string,
    element_type_imports,
    element_type_string,
)
from tfschemagen.schema.imports import Imports
from tfschemagen.spec.types import ElementType, ObjectAttributeType

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class ElementTypeFragment:
    """The ``ElementType`` field of a list, map or set attribute."""

    element_type: ElementType

    def element_type_string(self) -> str:
        return element_type_string(self.element_type)

    def schema(self) -> str:
        return f"ElementType: {self.element_type_string()},\n"

    def imports(self) -> Imports:
        return element_type_imports(self.element_type)


@dataclass(frozen=True)
class ObjectAttributeTypes:
    """The ``AttributeTypes`` field of an object attribute, in declared order."""

    attribute_types: list[ObjectAttributeType] = field(default_factory=list)

    def attribute_types_string(self) -> str:
        return attr_types_string(self.attribute_types)

    def schema(self) -> str:
        if not self.attribute_types:
            return ""
        return f"AttributeTypes: map[string]attr.Type{{\n{self.attribute_types_string()}\n}},\n"

    def imports(self) -> Imports:
        return attr_types_imports(self.attribute_types)
