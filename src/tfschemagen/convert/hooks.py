# Copyright 2026 tfschemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""``PlanModifiers`` and ``Validators`` schema fragments."""

from __future__ import annotations

from dataclasses import dataclass, field

from tfschemagen.schema.imports import PLAN_MODIFIER_IMPORT, VALIDATOR_IMPORT, Imports, imports_of
from tfschemagen.spec.types import CustomCode, PlanModifier, Validator

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class _CustomHooks:
    """Custom hook definitions rendered as a typed Go slice.

    ``type_name`` is the framework element type (``Bool``, ``List``, ``Object``, ...).
    Equality ignores the order in which definitions were declared.
    """

    type_name: str
    custom: list[CustomCode] = field(default_factory=list)

    _field_name = ""
    _package = ""
    _package_import = ""

    def _definitions(self) -> list[str]:
        return [c.schema_definition for c in self.custom if c.schema_definition]

    def schema(self) -> str:
        definitions = self._definitions()
        if not definitions:
            return ""
        body = "".join(f"{d},\n" for d in definitions)
        return f"{self._field_name}: []{self._package}.{self.type_name}{{\n{body}}},\n"

    def imports(self) -> Imports:
        imports = Imports()
        if not self._definitions():
            return imports
        imports.append(imports_of(self._package_import))
        for custom in self.custom:
            imports.add(*custom.imports)
        return imports

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.type_name == other.type_name and _sorted(self.custom) == _sorted(other.custom)

    def __hash__(self) -> int:
        return hash((type(self), self.type_name, tuple(c.schema_definition for c in _sorted(self.custom))))


class PlanModifiers(_CustomHooks):
    _field_name = "PlanModifiers"
    _package = "planmodifier"
    _package_import = PLAN_MODIFIER_IMPORT

    @classmethod
    def from_spec(cls, type_name: str, plan_modifiers: list[PlanModifier]) -> PlanModifiers:
        return cls(type_name, [p.custom for p in plan_modifiers if p.custom is not None])


class Validators(_CustomHooks):
    _field_name = "Validators"
    _package = "validator"
    _package_import = VALIDATOR_IMPORT

    @classmethod
    def from_spec(cls, type_name: str, validators: list[Validator]) -> Validators:
        return cls(type_name, [v.custom for v in validators if v.custom is not None])


# ################
# Implementation
# ################


def _sorted(custom: list[CustomCode]) -> list[CustomCode]:
    return sorted(custom, key=lambda c: c.schema_definition)
