# Copyright 2026 tfschemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Renderers for custom type/value declarations and to/from conversion functions.

Each renderer is keyed only on a member name and the shape of its value; the
Go text comes from the :class:`~tfschemagen.schema.registry.TemplateRegistry`
passed to :meth:`render`.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from tfschemagen.identifiers import FrameworkIdentifier, to_camel_case, to_pascal_case
from tfschemagen.schema.assoc_ext_type import AssocExtType
from tfschemagen.schema.conversion import ObjectField, ToFromConversion
from tfschemagen.schema.registry import TemplateRegistry

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class CustomPrimitive:
    """Type/value pair wrapping a bool, float64, int64, number or string."""

    name: str
    kind: str

    def render(self, templates: TemplateRegistry) -> str:
        return templates.render_block("custom_primitive.go.j2", name=to_pascal_case(self.name), kind=self.kind)


@dataclass(frozen=True)
class CustomCollection:
    """Type/value pair wrapping a list, map or set."""

    name: str
    kind: str
    element_type: str

    def render(self, templates: TemplateRegistry) -> str:
        return templates.render_block(
            "custom_collection.go.j2",
            name=to_pascal_case(self.name),
            kind=self.kind,
            element_type=self.element_type,
        )


@dataclass(frozen=True)
class CustomObject:
    """Type/value pair wrapping an object attribute."""

    name: str
    attribute_types: str

    def render(self, templates: TemplateRegistry) -> str:
        return templates.render_block(
            "custom_object.go.j2",
            name=to_pascal_case(self.name),
            attribute_types=self.attribute_types,
        )


@dataclass(frozen=True)
class CustomNestedObject:
    """Type/value pair for a nested object.

    Args:
        name: The nested member's name.
        attr_types: Child name to framework type expression.
        attr_values: Child name to framework value type.
    """

    name: str
    attr_types: dict[str, str] = field(default_factory=dict)
    attr_values: dict[str, str] = field(default_factory=dict)

    def render(self, templates: TemplateRegistry) -> str:
        attributes = [
            {
                "name": child,
                "var": to_camel_case(child),
                "field": FrameworkIdentifier(child).to_prefix_pascal_case(self.name),
                "type": self.attr_types[child],
                "value": self.attr_values[child],
            }
            for child in sorted(self.attr_values)
        ]
        return templates.render_block(
            "custom_nested_object.go.j2",
            name=to_pascal_case(self.name),
            attributes=attributes,
        )


@dataclass(frozen=True)
class ToFromPrimitive:
    name: str
    kind: str
    assoc_ext_type: AssocExtType
    to_func: str
    from_func: str

    def render(self, templates: TemplateRegistry) -> str:
        return templates.render_block(
            "to_from_primitive.go.j2",
            name=to_pascal_case(self.name),
            kind=self.kind,
            assoc=self.assoc_ext_type,
            to_func=self.to_func,
            from_func=self.from_func,
        )


@dataclass(frozen=True)
class ToFromCollection:
    """Conversion of a list, map or set of scalars, element by element."""

    name: str
    kind: str
    assoc_ext_type: AssocExtType
    element_type: str
    element_value: str
    element_from: str

    def render(self, templates: TemplateRegistry) -> str:
        return templates.render_block(
            "to_from_collection.go.j2",
            name=to_pascal_case(self.name),
            kind=self.kind,
            assoc=self.assoc_ext_type,
            element_type=self.element_type,
            element_value=self.element_value,
            element_from=self.element_from,
        )


@dataclass(frozen=True)
class ToFromObject:
    """Conversion of an object attribute, field by field, in sorted field order."""

    name: str
    assoc_ext_type: AssocExtType
    to_fields: dict[str, ObjectField] = field(default_factory=dict)
    from_fields: dict[str, ObjectField] = field(default_factory=dict)

    def render(self, templates: TemplateRegistry) -> str:
        fields = [
            {
                "name": f,
                "pascal": to_pascal_case(f),
                "var": f"{to_camel_case(self.name)}Field{to_pascal_case(f)}",
                "to_field": self.to_fields[f],
                "from_field": self.from_fields[f],
            }
            for f in sorted(self.to_fields)
        ]
        return templates.render_block(
            "to_from_object.go.j2",
            name=to_pascal_case(self.name),
            assoc=self.assoc_ext_type,
            fields=fields,
        )


@dataclass(frozen=True)
class ToFromNestedObject:
    """Conversion of a nested object, delegating per child conversion."""

    name: str
    assoc_ext_type: AssocExtType
    to_funcs: dict[str, ToFromConversion] = field(default_factory=dict)
    from_funcs: dict[str, ToFromConversion] = field(default_factory=dict)

    def render(self, templates: TemplateRegistry) -> str:
        return templates.render_block(
            "to_from_nested_object.go.j2",
            name=to_pascal_case(self.name),
            assoc=self.assoc_ext_type,
            to_fields=self._fields(self.to_funcs),
            from_fields=self._fields(self.from_funcs),
        )

    def _fields(self, conversions: dict[str, ToFromConversion]) -> list[dict[str, object]]:
        return [
            {
                "name": child,
                "pascal": to_pascal_case(child),
                "field": FrameworkIdentifier(child).to_prefix_pascal_case(self.name),
                "var": to_camel_case(child),
                "conversion": conversions[child],
                "object_fields": [
                    {"name": f, "pascal": to_pascal_case(f), "field": conversions[child].object_type[f]}
                    for f in sorted(conversions[child].object_type)
                ],
            }
            for child in sorted(conversions)
        ]
