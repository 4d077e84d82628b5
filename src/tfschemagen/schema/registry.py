# Copyright 2026 tfschemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Compiled Jinja2 templates for generated Go boilerplate.

A :class:`TemplateRegistry` is built once and handed explicitly to every call
that renders code. Templates ship inside the package under ``templates/``; an
optional override directory is searched first so individual templates can be
replaced without forking the package.
"""

from __future__ import annotations

import logging
from pathlib import Path

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader, StrictUndefined, Template

from tfschemagen.identifiers import go_quote, to_camel_case, to_pascal_case

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

TEMPLATE_NAMES = (
    "file.go.j2",
    "schema.go.j2",
    "model.go.j2",
    "members.go.j2",
    "nested_object.go.j2",
    "custom_primitive.go.j2",
    "custom_collection.go.j2",
    "custom_object.go.j2",
    "custom_nested_object.go.j2",
    "to_from_primitive.go.j2",
    "to_from_collection.go.j2",
    "to_from_object.go.j2",
    "to_from_nested_object.go.j2",
    "scaffold_resource.go.j2",
    "scaffold_data_source.go.j2",
    "scaffold_provider.go.j2",
)


class TemplateRegistry:
    """An immutable set of compiled templates.

    Args:
        override_directory: Optional directory whose templates take precedence
            over the packaged ones.

    Raises:
        jinja2.TemplateError: If a template cannot be found or compiled.
    """

    def __init__(self, override_directory: Path | None = None) -> None:
        loaders = []
        if override_directory is not None:
            loaders.append(FileSystemLoader(str(override_directory)))
        loaders.append(PackageLoader("tfschemagen.schema", "templates"))

        env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        env.filters["pascal"] = to_pascal_case
        env.filters["camel"] = to_camel_case
        env.filters["go_quote"] = go_quote

        self._templates: dict[str, Template] = {name: env.get_template(name) for name in TEMPLATE_NAMES}
        self.override_directory = override_directory
        logger.debug("Compiled %d templates (override directory: %s)", len(self._templates), override_directory)

    def render(self, template_name: str, **context: object) -> str:
        """Render *template_name* with *context*, without surrounding blank lines."""
        return self._templates[template_name].render(**context).strip("\n")

    def render_block(self, template_name: str, **context: object) -> str:
        """Render a template as a block of declarations preceded by a blank line."""
        return "\n" + self.render(template_name, **context) + "\n"
