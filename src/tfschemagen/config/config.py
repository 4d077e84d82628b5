# Copyright 2026 tfschemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the generator configuration file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############


class GeneratorConfigError(Exception):
    """Raised when a generator configuration file is invalid or cannot be loaded."""


@dataclass
class GenerateOptions:
    """Which optional sections are rendered into each generated file."""

    custom_types: bool = True
    to_from_functions: bool = True


@dataclass
class GeneratorConfig:
    """The parsed generator configuration.

    Attributes:
        output_directory: Directory generated packages are written to. Relative
            paths are resolved against the directory holding the config file.
        package_name: Package used for every generated file instead of the
            default ``<type>_<name>`` package per schema.
        templates_directory: Directory whose templates override the packaged ones.
        generate: Optional sections to render.
    """

    output_directory: str = "."
    package_name: str | None = None
    templates_directory: str | None = None
    generate: GenerateOptions = field(default_factory=GenerateOptions)


def load_generator_config(path: Path) -> GeneratorConfig:
    """Load and parse a generator configuration file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        A GeneratorConfig instance populated from the file.

    Raises:
        GeneratorConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise GeneratorConfigError(f"Generator config file not found: {path}") from None
    except OSError as exc:
        raise GeneratorConfigError(f"Cannot read generator config file: {exc}") from exc

    return _parse_generator_config(text, source_label=str(path))


# ################
# Implementation
# ################


def _parse_generator_config(text: str, source_label: str = "<string>") -> GeneratorConfig:
    """Parse generator config YAML text into a GeneratorConfig.

    An empty document yields the defaults.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise GeneratorConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return GeneratorConfig()
    if not isinstance(data, dict):
        raise GeneratorConfigError(f"{source_label}: generator config must be a YAML mapping")

    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise GeneratorConfigError(f"{source_label}: unknown field(s): {', '.join(unknown)}")

    config = GeneratorConfig()
    if "output-directory" in data:
        config.output_directory = _require_string(data, "output-directory", source_label)
    if "package-name" in data:
        config.package_name = _require_string(data, "package-name", source_label)
    if "templates-directory" in data:
        config.templates_directory = _require_string(data, "templates-directory", source_label)
    if "generate" in data:
        config.generate = _parse_generate_options(data["generate"], source_label)
    return config


def _require_string(mapping: dict[str, object], key: str, source_label: str) -> str:
    """Extract a string field from a mapping, raising GeneratorConfigError if it is not a non-empty string."""
    value = mapping[key]
    if not isinstance(value, str) or not value:
        raise GeneratorConfigError(f"{source_label}: '{key}' must be a non-empty string")
    return value


def _require_bool(mapping: dict[str, object], key: str, source_label: str) -> bool:
    value = mapping[key]
    if not isinstance(value, bool):
        raise GeneratorConfigError(f"{source_label}: '{key}' must be true or false")
    return value


def _parse_generate_options(entry: object, source_label: str) -> GenerateOptions:
    location = f"{source_label}: generate"

    if not isinstance(entry, dict):
        raise GeneratorConfigError(f"{location} must be a YAML mapping")

    unknown = sorted(set(entry) - {"custom-types", "to-from-functions"})
    if unknown:
        raise GeneratorConfigError(f"{location}: unknown field(s): {', '.join(unknown)}")

    options = GenerateOptions()
    if "custom-types" in entry:
        options.custom_types = _require_bool(entry, "custom-types", location)
    if "to-from-functions" in entry:
        options.to_from_functions = _require_bool(entry, "to-from-functions", location)
    return options


_KNOWN_KEYS = {"output-directory", "package-name", "templates-directory", "generate"}
