# Copyright 2026 tfschemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for end-to-end file generation."""

from pathlib import Path

import pytest

from tfschemagen.config import GenerateOptions, GeneratorConfig
from tfschemagen.generate import GenerationError, SchemaKind, build_schemas, generate_files, write_files
from tfschemagen.schema import AmbiguousKindError, DuplicateNameError, GeneratorType, TemplateRegistry
from tfschemagen.spec import parse_specification

SPECIFICATION = """\
provider:
  name: example
  schema:
    attributes:
      - name: endpoint
        string:
          computed_optional_required: optional
resources:
  - name: thing
    schema:
      attributes:
        - name: rules
          list_nested:
            computed_optional_required: optional
            nested_object:
              attributes:
                - name: enabled
                  bool:
                    computed_optional_required: optional
  - name: bare
datasources:
  - name: lookup
    schema:
      attributes:
        - name: id
          string:
            computed_optional_required: required
"""

# ###############
# Helpers
# ###############


@pytest.fixture(scope="module")
def templates() -> TemplateRegistry:
    return TemplateRegistry()


# ###############
# Building Schemas
# ###############


def test_build_all_schemas_in_kind_order() -> None:
    groups = build_schemas(parse_specification(SPECIFICATION))

    assert [group.generator_type for group in groups] == [
        GeneratorType.PROVIDER,
        GeneratorType.RESOURCE,
        GeneratorType.DATA_SOURCE,
    ]
    assert list(groups[0].by_name) == ["example"]
    assert sorted(groups[1].by_name) == ["bare", "thing"]
    assert list(groups[2].by_name) == ["lookup"]


def test_resource_without_schema_gets_empty_schema() -> None:
    resources = build_schemas(parse_specification(SPECIFICATION), SchemaKind.RESOURCES)[0]

    assert not resources.by_name["bare"].attributes
    assert not resources.by_name["bare"].blocks


def test_provider_without_schema_is_skipped() -> None:
    groups = build_schemas(parse_specification("provider:\n  name: example\n"), SchemaKind.PROVIDER)

    assert len(groups) == 1
    assert groups[0].by_name == {}


def test_missing_provider_produces_no_group() -> None:
    assert build_schemas(parse_specification("resources: []\n"), SchemaKind.PROVIDER) == []


@pytest.mark.parametrize(
    "kind, generator_type",
    [
        (SchemaKind.RESOURCES, GeneratorType.RESOURCE),
        (SchemaKind.DATA_SOURCES, GeneratorType.DATA_SOURCE),
        (SchemaKind.PROVIDER, GeneratorType.PROVIDER),
    ],
)
def test_build_single_kind(kind: SchemaKind, generator_type: GeneratorType) -> None:
    groups = build_schemas(parse_specification(SPECIFICATION), kind)

    assert [group.generator_type for group in groups] == [generator_type]


def test_build_aborts_on_invalid_member() -> None:
    text = """\
resources:
  - name: thing
    schema:
      attributes:
        - name: broken
          bool: {}
          string: {}
"""
    with pytest.raises(AmbiguousKindError):
        build_schemas(parse_specification(text))


@pytest.mark.parametrize("section, category", [("resources", "resource"), ("datasources", "data source")])
def test_build_rejects_duplicate_schema_names(section: str, category: str) -> None:
    """A second entry with the same name must not replace the first."""
    text = f"""\
{section}:
  - name: thing
    schema:
      attributes:
        - name: a
          bool: {{}}
  - name: thing
    schema:
      attributes:
        - name: b
          bool: {{}}
"""
    with pytest.raises(DuplicateNameError, match=f"duplicate {category} name: thing"):
        build_schemas(parse_specification(text))


def test_same_name_across_kinds_is_allowed() -> None:
    text = """\
resources:
  - name: thing
datasources:
  - name: thing
"""
    groups = build_schemas(parse_specification(text))

    assert [list(group.by_name) for group in groups] == [["thing"], ["thing"]]


# ###############
# Generating Files
# ###############


def test_generate_files_paths(templates: TemplateRegistry) -> None:
    files = generate_files(parse_specification(SPECIFICATION), GeneratorConfig(), templates)

    assert sorted(files) == [
        Path("datasource_lookup/lookup_data_source_gen.go"),
        Path("provider_example/example_provider_gen.go"),
        Path("resource_bare/bare_resource_gen.go"),
        Path("resource_thing/thing_resource_gen.go"),
    ]
    assert "func ThingResourceSchema(ctx context.Context) schema.Schema {" in files[
        Path("resource_thing/thing_resource_gen.go")
    ]
    assert "package datasource_lookup\n" in files[Path("datasource_lookup/lookup_data_source_gen.go")]


def test_generate_files_with_package_override(templates: TemplateRegistry) -> None:
    config = GeneratorConfig(package_name="provider")
    files = generate_files(parse_specification(SPECIFICATION), config, templates, SchemaKind.RESOURCES)

    assert sorted(files) == [Path("provider/bare_resource_gen.go"), Path("provider/thing_resource_gen.go")]
    assert all("package provider\n" in text for text in files.values())


def test_generate_files_honours_section_flags(templates: TemplateRegistry) -> None:
    config = GeneratorConfig(generate=GenerateOptions(custom_types=False, to_from_functions=False))
    files = generate_files(parse_specification(SPECIFICATION), config, templates, SchemaKind.RESOURCES)
    text = files[Path("resource_thing/thing_resource_gen.go")]

    assert "type RulesModel struct {" in text
    assert "type RulesType struct {" not in text


# ###############
# Writing Files
# ###############


def test_write_files_creates_package_directories(tmp_path: Path) -> None:
    files = {
        Path("resource_thing/thing_resource_gen.go"): "package resource_thing\n",
        Path("datasource_thing/thing_data_source_gen.go"): "package datasource_thing\n",
    }

    written = write_files(files, tmp_path)

    assert written == [
        tmp_path / "datasource_thing" / "thing_data_source_gen.go",
        tmp_path / "resource_thing" / "thing_resource_gen.go",
    ]
    assert (tmp_path / "resource_thing" / "thing_resource_gen.go").read_text(encoding="utf-8") == (
        "package resource_thing\n"
    )


def test_write_files_overwrites_existing_output(tmp_path: Path) -> None:
    target = tmp_path / "resource_thing" / "thing_resource_gen.go"
    target.parent.mkdir()
    target.write_text("stale", encoding="utf-8")

    write_files({Path("resource_thing/thing_resource_gen.go"): "fresh"}, tmp_path)

    assert target.read_text(encoding="utf-8") == "fresh"


def test_write_files_wraps_os_errors(tmp_path: Path) -> None:
    blocker = tmp_path / "resource_thing"
    blocker.write_text("not a directory", encoding="utf-8")

    with pytest.raises(GenerationError, match="Cannot write generated file"):
        write_files({Path("resource_thing/thing_resource_gen.go"): "package resource_thing\n"}, tmp_path)


def test_write_files_without_overwrite_keeps_existing_output(tmp_path: Path) -> None:
    """Nothing is written when any target already exists."""
    existing = tmp_path / "b.go"
    existing.write_text("kept", encoding="utf-8")

    with pytest.raises(GenerationError, match="already exists"):
        write_files({Path("a.go"): "new", Path("b.go"): "new"}, tmp_path, overwrite=False)

    assert existing.read_text(encoding="utf-8") == "kept"
    assert not (tmp_path / "a.go").exists()
