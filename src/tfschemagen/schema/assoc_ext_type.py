# Copyright 2026 tfschemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Helpers around an associated external type."""

from __future__ import annotations

from dataclasses import dataclass

from tfschemagen.schema.imports import BASE_TYPES_IMPORT, Imports, imports_of
from tfschemagen.spec.types import AssociatedExternalType, CodeImport

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class AssocExtType:
    """An external Go type that generated conversion functions target.

    Attributes:
        type: The Go type expression, e.g. ``*apisdk.Type``.
        import_: The import providing that type, if any.
    """

    type: str
    import_: CodeImport | None = None

    @classmethod
    def from_spec(cls, spec: AssociatedExternalType | None) -> AssocExtType | None:
        if spec is None:
            return None
        return cls(type=spec.type, import_=spec.import_)

    def imports(self) -> Imports:
        """The external type's own import plus ``basetypes`` when the import has a path."""
        if self.import_ is None or not self.import_.path:
            return Imports()
        imports = Imports([self.import_])
        imports.append(imports_of(BASE_TYPES_IMPORT))
        return imports

    def type_reference(self) -> str:
        """The type without a leading pointer, e.g. ``*apisdk.Type`` -> ``apisdk.Type``."""
        return self.type.removeprefix("*")

    def to_pascal_case(self) -> str:
        """Pascal-cased type reference used in method names, e.g. ``ApisdkType``."""
        parts = self.type_reference().split(".")
        return "".join(part[:1].upper() + part[1:] for part in parts)

    def to_camel_case(self) -> str:
        pascal = self.to_pascal_case()
        return pascal[:1].lower() + pascal[1:]
