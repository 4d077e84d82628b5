# Copyright 2026 tfschemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""The capability interface shared by attribute and block variants.

Every variant is an immutable dataclass implementing :class:`GeneratorMember`.
Nested variants additionally implement :class:`NestedMember`, and variants that
can convert to or from an external type implement :class:`Convertible`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from tfschemagen.schema.conversion import ToFromConversion
from tfschemagen.schema.errors import UnimplementedFeatureError
from tfschemagen.schema.imports import Imports

if TYPE_CHECKING:
    from tfschemagen.schema.registry import TemplateRegistry

# ###############
# Public Interface
# ###############


class GeneratorSchemaType(Enum):
    """The closed set of attribute and block kinds."""

    BOOL_ATTRIBUTE = "BoolAttribute"
    FLOAT64_ATTRIBUTE = "Float64Attribute"
    INT64_ATTRIBUTE = "Int64Attribute"
    LIST_ATTRIBUTE = "ListAttribute"
    LIST_NESTED_ATTRIBUTE = "ListNestedAttribute"
    MAP_ATTRIBUTE = "MapAttribute"
    MAP_NESTED_ATTRIBUTE = "MapNestedAttribute"
    NUMBER_ATTRIBUTE = "NumberAttribute"
    OBJECT_ATTRIBUTE = "ObjectAttribute"
    SET_ATTRIBUTE = "SetAttribute"
    SET_NESTED_ATTRIBUTE = "SetNestedAttribute"
    SINGLE_NESTED_ATTRIBUTE = "SingleNestedAttribute"
    STRING_ATTRIBUTE = "StringAttribute"
    LIST_NESTED_BLOCK = "ListNestedBlock"
    SET_NESTED_BLOCK = "SetNestedBlock"
    SINGLE_NESTED_BLOCK = "SingleNestedBlock"


@dataclass(frozen=True)
class ModelField:
    """One field of a generated model struct."""

    name: str
    tfsdk_name: str
    value_type: str


class GeneratorMember(ABC):
    """Behaviour common to all attribute and block variants."""

    @abstractmethod
    def generator_schema_type(self) -> GeneratorSchemaType: ...

    @abstractmethod
    def imports(self) -> Imports: ...

    @abstractmethod
    def schema(self, name: str, templates: TemplateRegistry) -> str: ...

    @abstractmethod
    def model_field(self, name: str) -> ModelField: ...

    @abstractmethod
    def attr_type(self, name: str) -> str:
        """Framework type expression of this member inside a generated object type."""

    @abstractmethod
    def attr_value(self, name: str) -> str:
        """Framework value type of this member inside a generated object value."""

    def equal(self, other: object) -> bool:
        """Return True only for the same concrete variant with identical resolved fields."""
        return type(other) is type(self) and self == other

    def custom_type_and_value(self, name: str, templates: TemplateRegistry) -> str:
        return ""

    def to_from_functions(self, name: str, templates: TemplateRegistry) -> str:
        return ""


class GeneratorAttribute(GeneratorMember):
    """A schema attribute variant."""


class GeneratorBlock(GeneratorMember):
    """A schema block variant."""


@runtime_checkable
class NestedMember(Protocol):
    """A member that owns child attributes (and possibly blocks)."""

    def get_attributes(self) -> GeneratorAttributes: ...

    def get_blocks(self) -> GeneratorBlocks: ...


@runtime_checkable
class Convertible(Protocol):
    """A member that describes its own conversion to and from an external type."""

    def to(self) -> ToFromConversion: ...

    def from_(self) -> ToFromConversion: ...


class _GeneratorMembers(dict):
    """Name to member mapping; text is always emitted in sorted key order."""

    def sorted_keys(self) -> list[str]:
        return sorted(self)

    def schema(self, templates: TemplateRegistry) -> str:
        out = ""
        for key in self.sorted_keys():
            text = self[key].schema(key, templates)
            if not text.startswith("\n"):
                text = "\n" + text
            out += text
        return out

    def imports(self) -> Imports:
        imports = Imports()
        for key in self.sorted_keys():
            imports.append(self[key].imports())
        return imports

    def equal(self, other: object) -> bool:
        if not isinstance(other, _GeneratorMembers) or self.keys() != other.keys():
            return False
        return all(self[key].equal(other[key]) for key in self)

    def model_fields(self) -> list[ModelField]:
        return [self[key].model_field(key) for key in self.sorted_keys()]

    def attr_types(self) -> dict[str, str]:
        return {key: self[key].attr_type(key) for key in self.sorted_keys()}

    def attr_values(self) -> dict[str, str]:
        return {key: self[key].attr_value(key) for key in self.sorted_keys()}

    def nested(self) -> dict[str, NestedMember]:
        """Members that own children, in sorted key order."""
        return {key: self[key] for key in self.sorted_keys() if isinstance(self[key], NestedMember)}

    def custom_type_and_value(self, templates: TemplateRegistry) -> str:
        return "".join(self[key].custom_type_and_value(key, templates) for key in self.sorted_keys())

    def to_from_functions(self, templates: TemplateRegistry) -> str:
        out = ""
        for key in self.sorted_keys():
            try:
                out += self[key].to_from_functions(key, templates)
            except UnimplementedFeatureError as exc:
                raise exc.nested(key) from exc
        return out

    def to_funcs(self) -> dict[str, ToFromConversion]:
        """Conversions towards the external type for every convertible member."""
        return self._conversions(lambda member: member.to())

    def from_funcs(self) -> dict[str, ToFromConversion]:
        """Conversions from the external type for every convertible member."""
        return self._conversions(lambda member: member.from_())

    def _conversions(self, convert) -> dict[str, ToFromConversion]:
        conversions: dict[str, ToFromConversion] = {}
        for key in self.sorted_keys():
            member = self[key]
            if not isinstance(member, Convertible):
                continue
            try:
                conversions[key] = convert(member)
            except UnimplementedFeatureError as exc:
                raise exc.nested(key) from exc
        return conversions


class GeneratorAttributes(_GeneratorMembers):
    """Attributes of one schema level, keyed by name."""


class GeneratorBlocks(_GeneratorMembers):
    """Blocks of one schema level, keyed by name."""
