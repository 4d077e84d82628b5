# Copyright 2026 tfschemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Order-preserving, deduplicated Go import collection."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from tfschemagen.spec.types import CodeImport, CustomCode, CustomType

# ###############
# Public Interface
# ###############

CONTEXT_IMPORT = "context"
FMT_IMPORT = "fmt"
STRINGS_IMPORT = "strings"
MATH_BIG_IMPORT = "math/big"

_FRAMEWORK = "github.com/hashicorp/terraform-plugin-framework"

ATTR_IMPORT = f"{_FRAMEWORK}/attr"
BASE_TYPES_IMPORT = f"{_FRAMEWORK}/types/basetypes"
DIAG_IMPORT = f"{_FRAMEWORK}/diag"
TYPES_IMPORT = f"{_FRAMEWORK}/types"
TFTYPES_IMPORT = "github.com/hashicorp/terraform-plugin-go/tftypes"
PLAN_MODIFIER_IMPORT = f"{_FRAMEWORK}/resource/schema/planmodifier"
VALIDATOR_IMPORT = f"{_FRAMEWORK}/schema/validator"

BOOL_DEFAULT_IMPORT = f"{_FRAMEWORK}/resource/schema/booldefault"
FLOAT64_DEFAULT_IMPORT = f"{_FRAMEWORK}/resource/schema/float64default"
INT64_DEFAULT_IMPORT = f"{_FRAMEWORK}/resource/schema/int64default"
STRING_DEFAULT_IMPORT = f"{_FRAMEWORK}/resource/schema/stringdefault"


class Imports:
    """A list of imports deduplicated by path, in first-seen order.

    Adding a path that is already present is a no-op and never reorders the
    existing entries. Imports with an empty path are ignored.
    """

    def __init__(self, imports: Iterable[CodeImport] = ()) -> None:
        self._imports: list[CodeImport] = []
        self._paths: set[str] = set()
        self.add(*imports)

    def add(self, *imports: CodeImport) -> None:
        """Add individual imports, skipping paths that are empty or already present."""
        for imp in imports:
            if not imp.path or imp.path in self._paths:
                continue
            self._paths.add(imp.path)
            self._imports.append(imp)

    def append(self, *others: Imports) -> None:
        """Add every import of each of *others*, preserving their order."""
        for other in others:
            self.add(*other.all())

    def all(self) -> list[CodeImport]:
        """Return a copy of the collected imports in first-seen order."""
        return list(self._imports)

    def paths(self) -> list[str]:
        return [imp.path for imp in self._imports]

    def __len__(self) -> int:
        return len(self._imports)

    def __iter__(self) -> Iterator[CodeImport]:
        return iter(list(self._imports))

    def __contains__(self, path: object) -> bool:
        return path in self._paths

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Imports):
            return NotImplemented
        return self._imports == other._imports

    def __repr__(self) -> str:
        return f"Imports({self.paths()!r})"


def imports_of(*paths: str) -> Imports:
    """Build an Imports collection from bare paths."""
    return Imports(CodeImport(path=p) for p in paths)


def associated_external_type_imports() -> Imports:
    """Imports needed by generated custom type/value and conversion code."""
    return imports_of(FMT_IMPORT, DIAG_IMPORT, ATTR_IMPORT, TFTYPES_IMPORT, BASE_TYPES_IMPORT)


def attr_imports() -> Imports:
    return imports_of(ATTR_IMPORT)


def custom_type_imports(custom_type: CustomType | None) -> Imports:
    """Imports for a custom type override, or the base ``types`` package when absent."""
    if custom_type is None:
        return imports_of(TYPES_IMPORT)
    if custom_type.import_ is None:
        return Imports()
    return Imports([custom_type.import_])


def custom_code_imports(custom: CustomCode | None) -> Imports:
    """Imports declared by a custom default, plan modifier or validator."""
    if custom is None:
        return Imports()
    return Imports(custom.imports)
