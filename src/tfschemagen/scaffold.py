# Copyright 2026 tfschemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Starter Go files for a new resource, data source or provider.

Scaffolded files are hand-maintained once written, so they are never
overwritten unless asked for explicitly.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

from tfschemagen.generate import GenerationError
from tfschemagen.identifiers import FrameworkIdentifier
from tfschemagen.schema.registry import TemplateRegistry

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class ScaffoldKind(Enum):
    """The kinds of starter code that can be scaffolded."""

    RESOURCE = "resource"
    DATA_SOURCE = "data-source"
    PROVIDER = "provider"

    @property
    def label(self) -> str:
        """Human-readable kind, used in error messages."""
        return self.value.replace("-", " ")

    @property
    def template_name(self) -> str:
        return f"scaffold_{self.value.replace('-', '_')}.go.j2"

    def default_file_name(self, name: str) -> str:
        """Return ``<name>_resource.go``, ``<name>_data_source.go`` or ``provider.go``."""
        if self is ScaffoldKind.PROVIDER:
            return "provider.go"
        return f"{name}_{self.value.replace('-', '_')}.go"


def scaffold_files(
    kind: ScaffoldKind,
    name: str,
    templates: TemplateRegistry,
    package_name: str = "provider",
    output_file: str | None = None,
) -> dict[Path, str]:
    """Render the starter file for *name*, keyed by path relative to the output directory.

    Raises:
        GenerationError: If *name* is not a valid framework identifier.
    """
    if not FrameworkIdentifier(name).valid():
        raise GenerationError(f"'{name}' is not a valid Terraform {kind.label} identifier")

    file_name = output_file or kind.default_file_name(name)
    logger.debug("Scaffolding %s '%s' into %s", kind.label, name, file_name)
    text = templates.render(kind.template_name, package_name=package_name, name=name)
    return {Path(file_name): text + "\n"}
