# Copyright 2026 tfschemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for identifier validation and case conversion."""

import pytest

from tfschemagen.identifiers import (
    FrameworkIdentifier,
    go_quote,
    is_valid_identifier,
    to_camel_case,
    to_pascal_case,
)

# ###############
# Public Interface
# ###############


@pytest.mark.parametrize("name", ["enabled", "_private", "list_nested_attribute", "attr2"])
def test_valid_identifiers(name: str) -> None:
    assert is_valid_identifier(name)
    assert FrameworkIdentifier(name).valid()


@pytest.mark.parametrize("name", ["", "Enabled", "2attr", "with-dash", "with space"])
def test_invalid_identifiers(name: str) -> None:
    assert not is_valid_identifier(name)


@pytest.mark.parametrize(
    ("name", "pascal", "camel"),
    [
        ("enabled", "Enabled", "enabled"),
        ("list_nested_attribute", "ListNestedAttribute", "listNestedAttribute"),
        ("attr_2", "Attr2", "attr2"),
    ],
)
def test_case_conversion(name: str, pascal: str, camel: str) -> None:
    assert to_pascal_case(name) == pascal
    assert to_camel_case(name) == camel
    assert FrameworkIdentifier(name).to_pascal_case() == pascal
    assert FrameworkIdentifier(name).to_camel_case() == camel


def test_prefix_pascal_case_avoids_generated_method_names() -> None:
    """A child named like a generated value method is prefixed with the parent name."""
    assert FrameworkIdentifier("type").to_prefix_pascal_case("list_nested") == "ListNestedType"
    assert FrameworkIdentifier("name").to_prefix_pascal_case("list_nested") == "Name"


def test_go_quote_escapes() -> None:
    assert go_quote("plain") == '"plain"'
    assert go_quote('say "hi"\n') == '"say \\"hi\\"\\n"'
