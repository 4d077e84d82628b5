# Copyright 2026 tfschemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema fragments for flags and documentation strings."""

from __future__ import annotations

from dataclasses import dataclass

from tfschemagen.identifiers import go_quote
from tfschemagen.spec.types import ComputedOptionalRequired as _Cor

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class ComputedOptionalRequired:
    """Emits the ``Required``/``Optional``/``Computed`` flags of a member."""

    value: _Cor | None = None

    def is_required(self) -> bool:
        return self.value == _Cor.REQUIRED

    def is_optional(self) -> bool:
        return self.value in (_Cor.OPTIONAL, _Cor.COMPUTED_OPTIONAL)

    def is_computed(self) -> bool:
        return self.value in (_Cor.COMPUTED, _Cor.COMPUTED_OPTIONAL)

    def schema(self) -> str:
        out = ""
        if self.is_required():
            out += "Required: true,\n"
        if self.is_optional():
            out += "Optional: true,\n"
        if self.is_computed():
            out += "Computed: true,\n"
        return out


@dataclass(frozen=True)
class Sensitive:
    sensitive: bool = False

    def schema(self) -> str:
        return "Sensitive: true,\n" if self.sensitive else ""


@dataclass(frozen=True)
class Description:
    """Emits both ``Description`` and ``MarkdownDescription`` from one string."""

    description: str | None = None

    def schema(self) -> str:
        if not self.description:
            return ""
        quoted = go_quote(self.description)
        return f"Description: {quoted},\nMarkdownDescription: {quoted},\n"


@dataclass(frozen=True)
class DeprecationMessage:
    message: str | None = None

    def schema(self) -> str:
        if not self.message:
            return ""
        return f"DeprecationMessage: {go_quote(self.message)},\n"
