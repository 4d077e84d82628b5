# Copyright 2026 tfschemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Output aggregates: one :class:`GeneratorSchema` per resource, data source or provider.

A schema is walked independently for its schema function, its model structs,
its import set, its custom type/value declarations and its conversion
functions. Every walk iterates members in sorted name order, so output is
deterministic across runs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from tfschemagen.identifiers import to_pascal_case
from tfschemagen.schema.errors import UnimplementedFeatureError
from tfschemagen.schema.imports import (
    CONTEXT_IMPORT,
    FMT_IMPORT,
    STRINGS_IMPORT,
    TYPES_IMPORT,
    Imports,
    associated_external_type_imports,
    imports_of,
)
from tfschemagen.schema.members import GeneratorAttributes, GeneratorBlocks, ModelField, NestedMember
from tfschemagen.schema.registry import TemplateRegistry

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class GeneratorType(Enum):
    """What a schema describes; selects the framework schema package and naming."""

    RESOURCE = "Resource"
    DATA_SOURCE = "DataSource"
    PROVIDER = "Provider"

    @property
    def package_prefix(self) -> str:
        """Prefix of default package names, e.g. ``resource`` in ``resource_thing``."""
        return self.value.lower()

    @property
    def file_suffix(self) -> str:
        return _FILE_SUFFIXES[self]

    @property
    def schema_import(self) -> str:
        """Import path of the framework ``schema`` package for this kind of schema."""
        return f"github.com/hashicorp/terraform-plugin-framework/{self.package_prefix}/schema"


@dataclass(frozen=True)
class GoCode:
    """Generated Go code for one schema.

    Attributes:
        package_name: The Go package the code belongs to.
        notable_exports: Exported identifiers callers are expected to use.
        code: The generated source, UTF-8 encoded.
    """

    package_name: str
    notable_exports: list[str]
    code: bytes


@dataclass(frozen=True)
class GeneratorSchema:
    """The generated representation of one schema."""

    attributes: GeneratorAttributes = field(default_factory=GeneratorAttributes)
    blocks: GeneratorBlocks = field(default_factory=GeneratorBlocks)
    description: str | None = None
    markdown_description: str | None = None
    deprecation_message: str | None = None

    def imports(self) -> Imports:
        """``context``, then the custom type helpers when nested members exist, then member imports."""
        imports = imports_of(CONTEXT_IMPORT)
        if self.attributes.nested() or self.blocks.nested():
            imports.append(
                imports_of(FMT_IMPORT, STRINGS_IMPORT),
                associated_external_type_imports(),
                imports_of(TYPES_IMPORT),
            )
        imports.append(self.attributes.imports(), self.blocks.imports())
        return imports

    def schema(self, name: str, generator_type: GeneratorType, templates: TemplateRegistry) -> str:
        """Render the ``<Name><Type>Schema`` function."""
        return templates.render(
            "schema.go.j2",
            name=name,
            generator_type=generator_type.value,
            attributes=self.attributes.schema(templates),
            blocks=self.blocks.schema(templates),
            description=self.description,
            markdown_description=self.markdown_description,
            deprecation_message=self.deprecation_message,
        )

    def models(self, name: str, templates: TemplateRegistry) -> str:
        """Render ``<Name>Model`` followed by one model struct per nested object, recursively."""
        models = [_render_model(f"{to_pascal_case(name)}Model", self.attributes, self.blocks, templates)]
        models.extend(_nested_models(self.attributes, self.blocks, templates))
        return "\n\n".join(models)

    def model_fields(self) -> list[ModelField]:
        return self.attributes.model_fields() + self.blocks.model_fields()

    def model_names(self, name: str) -> list[str]:
        """Names of every struct rendered by :meth:`models`; may hold duplicates."""
        return [f"{to_pascal_case(name)}Model"] + [
            f"{type_name}Model" for type_name, is_nested in _generated_types(self.attributes, self.blocks) if is_nested
        ]

    def custom_type_names(self) -> list[str]:
        """Names of every ``<Name>Type``/``<Name>Value`` pair, depth first; may hold duplicates."""
        return [type_name for type_name, _ in _generated_types(self.attributes, self.blocks)]

    def custom_type_value(self, templates: TemplateRegistry) -> str:
        return self.attributes.custom_type_and_value(templates) + self.blocks.custom_type_and_value(templates)

    def to_from_functions(self, templates: TemplateRegistry) -> str:
        """Render conversion functions, skipping members whose conversion is not yet implemented."""
        out = ""
        for members in (self.attributes, self.blocks):
            for key in members.sorted_keys():
                try:
                    out += members[key].to_from_functions(key, templates)
                except UnimplementedFeatureError as exc:
                    logger.error("Skipping conversion functions: %s", exc.nested(key))
        return out


@dataclass(frozen=True)
class GeneratorSchemas:
    """All schemas of one :class:`GeneratorType`, keyed by name.

    Args:
        by_name: Schema name to schema.
        generator_type: What the schemas describe.
        package_name: Package for every schema; defaults to ``<type>_<name>``.
    """

    by_name: dict[str, GeneratorSchema]
    generator_type: GeneratorType
    package_name: str | None = None

    def package(self, name: str) -> str:
        return self.package_name or f"{self.generator_type.package_prefix}_{name}"

    def file_name(self, name: str) -> str:
        return f"{name}_{self.generator_type.file_suffix}_gen.go"

    def schemas(self, templates: TemplateRegistry) -> dict[str, GoCode]:
        return self._code(
            lambda name, schema: schema.schema(name, self.generator_type, templates),
            lambda name: [f"{to_pascal_case(name)}{self.generator_type.value}Schema"],
        )

    def models(self, templates: TemplateRegistry) -> dict[str, GoCode]:
        return self._code(
            lambda name, schema: schema.models(name, templates),
            lambda name: [f"{to_pascal_case(name)}Model"],
        )

    def custom_type_value(self, templates: TemplateRegistry) -> dict[str, GoCode]:
        return self._code(lambda name, schema: schema.custom_type_value(templates), lambda name: [])

    def to_from_functions(self, templates: TemplateRegistry) -> dict[str, GoCode]:
        return self._code(lambda name, schema: schema.to_from_functions(templates), lambda name: [])

    def files(
        self,
        templates: TemplateRegistry,
        *,
        custom_types: bool = True,
        to_from_functions: bool = True,
    ) -> dict[str, str]:
        """Render one complete Go source file per schema, keyed by file name."""
        files: dict[str, str] = {}
        for name in sorted(self.by_name):
            schema = self.by_name[name]
            imports = imports_of(self.generator_type.schema_import)
            imports.append(schema.imports())
            sections = [schema.schema(name, self.generator_type, templates), schema.models(name, templates)]
            if custom_types:
                sections.append(schema.custom_type_value(templates))
            if to_from_functions:
                sections.append(schema.to_from_functions(templates))
            files[self.file_name(name)] = templates.render(
                "file.go.j2",
                package_name=self.package(name),
                imports=imports.all(),
                sections=sections,
            ) + "\n"
            logger.debug("Rendered %s schema %r", self.generator_type.value, name)
        return files

    def _code(self, render, exports) -> dict[str, GoCode]:
        return {
            name: GoCode(
                package_name=self.package(name),
                notable_exports=exports(name),
                code=render(name, self.by_name[name]).encode("utf-8"),
            )
            for name in sorted(self.by_name)
        }


# ################
# Implementation
# ################

_FILE_SUFFIXES = {
    GeneratorType.RESOURCE: "resource",
    GeneratorType.DATA_SOURCE: "data_source",
    GeneratorType.PROVIDER: "provider",
}


def _render_model(
    name: str, attributes: GeneratorAttributes, blocks: GeneratorBlocks, templates: TemplateRegistry
) -> str:
    fields = attributes.model_fields() + blocks.model_fields()
    return templates.render("model.go.j2", name=name, fields=fields)


def _nested_models(
    attributes: GeneratorAttributes, blocks: GeneratorBlocks, templates: TemplateRegistry
) -> list[str]:
    nested: dict[str, NestedMember] = {**attributes.nested(), **blocks.nested()}
    models: list[str] = []
    for key in sorted(nested):
        member = nested[key]
        models.append(
            _render_model(f"{to_pascal_case(key)}Model", member.get_attributes(), member.get_blocks(), templates)
        )
        models.extend(_nested_models(member.get_attributes(), member.get_blocks(), templates))
    return models


def _generated_types(attributes: GeneratorAttributes, blocks: GeneratorBlocks) -> list[tuple[str, bool]]:
    """Pascal key of every member with a generated type pair, flagged when it also gets a model."""
    types: list[tuple[str, bool]] = []
    for members in (attributes, blocks):
        for key in members.sorted_keys():
            member = members[key]
            if isinstance(member, NestedMember):
                types.append((to_pascal_case(key), True))
                types.extend(_generated_types(member.get_attributes(), member.get_blocks()))
            elif getattr(member, "assoc_ext_type", None) is not None:
                types.append((to_pascal_case(key), False))
    return types
