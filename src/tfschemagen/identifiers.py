# Copyright 2026 tfschemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Identifier validation and case conversion for Terraform Plugin Framework names."""

from __future__ import annotations

import json
import re

# ###############
# Public Interface
# ###############


class FrameworkIdentifier(str):
    """A schema member name with helpers for validation and Go naming.

    Valid identifiers follow the Terraform Plugin Framework attribute naming
    rules: lower case letters, digits and underscores, not starting with a digit.

    Example:
        >>> FrameworkIdentifier("example_resource_thing").to_pascal_case()
        'ExampleResourceThing'
    """

    def valid(self) -> bool:
        """Return whether the identifier is a valid framework identifier."""
        return is_valid_identifier(self)

    def to_pascal_case(self) -> str:
        """Return the PascalCase form, e.g. ``example_thing`` -> ``ExampleThing``."""
        return to_pascal_case(self)

    def to_camel_case(self) -> str:
        """Return the camelCase form, e.g. ``example_thing`` -> ``exampleThing``."""
        return to_camel_case(self)

    def to_prefix_pascal_case(self, prefix: str) -> str:
        """Return the PascalCase form, prefixed when it clashes with a generated method name."""
        pascal = to_pascal_case(self)
        if pascal in _RESERVED_METHOD_NAMES:
            return to_pascal_case(prefix) + pascal
        return pascal


def is_valid_identifier(name: str) -> bool:
    """Return True if *name* matches ``^[a-z_][a-z0-9_]*$``."""
    return _IDENTIFIER_RE.fullmatch(name) is not None


def to_pascal_case(name: str) -> str:
    """Upper-case the first letter and every letter or digit that follows an underscore."""
    return _SNAKE_LETTERS_RE.sub(lambda m: m.group(0).replace("_", "").upper(), name)


def to_camel_case(name: str) -> str:
    """Return the PascalCase form of *name* with its first character lower-cased."""
    pascal = to_pascal_case(name)
    if not pascal:
        return pascal
    return pascal[0].lower() + pascal[1:]


def go_quote(value: str) -> str:
    """Quote *value* as a Go interpreted string literal."""
    return json.dumps(value, ensure_ascii=False)


# ################
# Implementation
# ################

_IDENTIFIER_RE = re.compile(r"[a-z_][a-z0-9_]*")

_SNAKE_LETTERS_RE = re.compile(r"(^[a-z])|_[a-z0-9]")

# Methods generated on custom value types. A nested attribute whose PascalCase
# name matches one of these would shadow the method on the value struct.
_RESERVED_METHOD_NAMES = frozenset(
    {
        "AttributeTypes",
        "Equal",
        "IsNull",
        "IsUnknown",
        "String",
        "ToObjectValue",
        "ToTerraformValue",
        "Type",
    }
)
