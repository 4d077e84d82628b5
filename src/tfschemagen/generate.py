# Copyright 2026 tfschemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""End-to-end generation: specification in, one Go file per schema out.

Files land in ``<output-directory>/<package>/<name>_<type>_gen.go`` where the
package defaults to ``<type>_<name>`` (``resource_thing``, ``datasource_thing``,
``provider_thing``) unless the configuration fixes a single package name.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

from tfschemagen.attributes.dispatch import new_schemas
from tfschemagen.config import GeneratorConfig
from tfschemagen.schema.errors import DuplicateNameError
from tfschemagen.schema.generator import GeneratorSchemas, GeneratorType
from tfschemagen.schema.registry import TemplateRegistry
from tfschemagen.spec import DataSourceSpec, ResourceSpec, SchemaSpec, Specification

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class GenerationError(Exception):
    """Raised when generated files cannot be written."""


class SchemaKind(Enum):
    """Which schemas of a specification to generate."""

    ALL = "all"
    RESOURCES = "resources"
    DATA_SOURCES = "data-sources"
    PROVIDER = "provider"


def build_schemas(
    specification: Specification,
    kind: SchemaKind = SchemaKind.ALL,
    package_name: str | None = None,
) -> list[GeneratorSchemas]:
    """Build the generator schemas of every selected kind.

    Resources and data sources without a schema get an empty one. A provider
    without a schema is skipped.

    Raises:
        DuplicateNameError: If two resources or two data sources share a name.
        GeneratorError: On the first member that cannot be constructed.
    """
    groups: list[GeneratorSchemas] = []
    if kind in (SchemaKind.ALL, SchemaKind.PROVIDER) and specification.provider is not None:
        provider = specification.provider
        specs = {provider.name: provider.schema_} if provider.schema_ is not None else {}
        groups.append(GeneratorSchemas(new_schemas(specs), GeneratorType.PROVIDER, package_name))
    if kind in (SchemaKind.ALL, SchemaKind.RESOURCES):
        specs = _named_specs("resource", specification.resources)
        groups.append(GeneratorSchemas(new_schemas(specs), GeneratorType.RESOURCE, package_name))
    if kind in (SchemaKind.ALL, SchemaKind.DATA_SOURCES):
        specs = _named_specs("data source", specification.datasources)
        groups.append(GeneratorSchemas(new_schemas(specs), GeneratorType.DATA_SOURCE, package_name))
    return groups


def generate_files(
    specification: Specification,
    config: GeneratorConfig,
    templates: TemplateRegistry,
    kind: SchemaKind = SchemaKind.ALL,
) -> dict[Path, str]:
    """Render every selected schema into Go source, keyed by path relative to the output directory."""
    files: dict[Path, str] = {}
    for group in build_schemas(specification, kind, config.package_name):
        rendered = group.files(
            templates,
            custom_types=config.generate.custom_types,
            to_from_functions=config.generate.to_from_functions,
        )
        for name in sorted(group.by_name):
            file_name = group.file_name(name)
            files[Path(group.package(name)) / file_name] = rendered[file_name]
    return files


def write_files(files: dict[Path, str], output_directory: Path, overwrite: bool = True) -> list[Path]:
    """Write rendered files below *output_directory*, creating package directories as needed.

    Args:
        files: File contents keyed by path relative to *output_directory*.
        output_directory: Root of the written tree.
        overwrite: Replace files that already exist. When false, an existing
            file fails the call before anything is written.

    Returns:
        The written paths, in sorted order.

    Raises:
        GenerationError: If a file exists and *overwrite* is false, or a
            directory or file cannot be written.
    """
    if not overwrite:
        for relative in sorted(files):
            if (output_directory / relative).exists():
                raise GenerationError(f"File '{output_directory / relative}' already exists")
    written: list[Path] = []
    for relative in sorted(files):
        path = output_directory / relative
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(files[relative], encoding="utf-8")
        except OSError as exc:
            raise GenerationError(f"Cannot write generated file '{path}': {exc}") from exc
        logger.info("Wrote %s", path)
        written.append(path)
    return written


# ################
# Implementation
# ################


def _named_specs(category: str, entries: list[ResourceSpec] | list[DataSourceSpec]) -> dict[str, SchemaSpec]:
    specs: dict[str, SchemaSpec] = {}
    for entry in entries:
        if entry.name in specs:
            raise DuplicateNameError(category, entry.name)
        specs[entry.name] = entry.schema_ or SchemaSpec()
    return specs
