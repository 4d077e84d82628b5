# Copyright 2026 tfschemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Errors raised while building or rendering generator schemas."""

from __future__ import annotations

# ###############
# Public Interface
# ###############


class GeneratorError(Exception):
    """Base class for all errors raised by the schema generator."""


class NilSpecError(GeneratorError):
    """A kind-specific constructor received no spec payload."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"{kind} spec is None")
        self.kind = kind


class UnknownKindError(GeneratorError):
    """No kind field is populated on an attribute or block spec.

    Attributes:
        category: ``"attribute"`` or ``"block"``.
        spec: The offending spec, kept for diagnostics.
    """

    def __init__(self, category: str, spec: object) -> None:
        super().__init__(f"{category} type not defined: {spec!r}")
        self.category = category
        self.spec = spec


class UnconvertibleTypeError(GeneratorError):
    """An element type has no native Go storage type."""


class UnsupportedConversionError(GeneratorError):
    """An element type cannot provide a single-kind conversion."""


class UnimplementedFeatureError(GeneratorError):
    """A conversion that is not yet supported was requested.

    The error records the dotted path of the member that triggered it. Each
    enclosing nested member prepends its own name via :meth:`nested`.
    """

    def __init__(self, message: str, path: list[str] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path: list[str] = list(path or [])

    def nested(self, parent: str) -> UnimplementedFeatureError:
        """Return a copy of this error with *parent* prepended to its path."""
        return UnimplementedFeatureError(self.message, [parent, *self.path])

    @property
    def dotted_path(self) -> str:
        return ".".join(self.path)

    def __str__(self) -> str:
        if self.path:
            return f"{self.dotted_path}: {self.message}"
        return self.message


class AmbiguousKindError(GeneratorError):
    """More than one kind field is populated on an attribute or block spec."""

    def __init__(self, category: str, kinds: list[str]) -> None:
        super().__init__(f"{category} has more than one type defined: {', '.join(kinds)}")
        self.category = category
        self.kinds = kinds


class DuplicateNameError(GeneratorError):
    """Two members of the same schema level share a name."""

    def __init__(self, category: str, name: str) -> None:
        super().__init__(f"duplicate {category} name: {name}")
        self.category = category
        self.name = name
