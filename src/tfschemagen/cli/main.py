# Copyright 2026 tfschemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the tfschemagen command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from jinja2 import TemplateError

from tfschemagen.config import GeneratorConfig, GeneratorConfigError, load_generator_config
from tfschemagen.generate import GenerationError, SchemaKind, build_schemas, generate_files, write_files
from tfschemagen.scaffold import ScaffoldKind, scaffold_files
from tfschemagen.schema.errors import GeneratorError
from tfschemagen.schema.registry import TemplateRegistry
from tfschemagen.spec import SpecificationError, load_specification

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the tfschemagen CLI."""
    parser = argparse.ArgumentParser(
        prog="tfschemagen",
        description="tfschemagen: Terraform Plugin Framework schema code generator",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # generate subcommand
    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate Go schema code from a specification",
        description="Generate schema, model, custom type and conversion Go code for every schema in a specification.",
    )
    generate_parser.add_argument("spec", help="Path to the specification file (JSON or YAML)")
    generate_parser.add_argument(
        "--config",
        help="Path to a generator configuration file",
    )
    generate_parser.add_argument(
        "--output",
        help="Directory to write generated packages to (overrides the configuration)",
    )
    generate_parser.add_argument(
        "--kind",
        choices=[kind.value for kind in SchemaKind],
        default=SchemaKind.ALL.value,
        help="Which schemas to generate (default: all)",
    )
    generate_parser.add_argument(
        "--package",
        help="Package name for every generated file (overrides the configuration)",
    )

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Validate a specification",
        description="Validate a specification and build every schema without writing files.",
    )
    check_parser.add_argument("spec", help="Path to the specification file (JSON or YAML)")

    # scaffold subcommand
    scaffold_parser = subparsers.add_parser(
        "scaffold",
        help="Create a starter Go file for a resource, data source or provider",
        description="Create a hand-editable starter Go file. Existing files are kept unless --force is given.",
    )
    scaffold_parser.add_argument("kind", choices=[kind.value for kind in ScaffoldKind], help="What to scaffold")
    scaffold_parser.add_argument("name", help="Terraform name, e.g. example_thing")
    scaffold_parser.add_argument(
        "--output",
        default=".",
        help="Directory to write the file to (default: current directory)",
    )
    scaffold_parser.add_argument(
        "--output-file",
        help="File name to write (default: <name>_resource.go, <name>_data_source.go or provider.go)",
    )
    scaffold_parser.add_argument(
        "--package",
        default="provider",
        help="Go package name of the file (default: provider)",
    )
    scaffold_parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite the file if it already exists",
    )

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "generate":
        return _cmd_generate(args)
    if args.command == "check":
        return _cmd_check(args)
    if args.command == "scaffold":
        return _cmd_scaffold(args)
    return 0


def _cmd_generate(args: argparse.Namespace) -> int:
    """Handle the generate subcommand."""
    config = GeneratorConfig()
    base_directory = Path.cwd()
    if args.config:
        config_path = Path(args.config).resolve()
        try:
            config = load_generator_config(config_path)
        except GeneratorConfigError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        base_directory = config_path.parent

    if args.package:
        config.package_name = args.package
    output_directory = Path(args.output) if args.output else base_directory / config.output_directory
    templates_directory = base_directory / config.templates_directory if config.templates_directory else None

    try:
        specification = load_specification(Path(args.spec))
        templates = TemplateRegistry(templates_directory)
        files = generate_files(specification, config, templates, SchemaKind(args.kind))
        written = write_files(files, output_directory)
    except (SpecificationError, GeneratorError, GenerationError, TemplateError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if not written:
        print("No schemas found in the specification.")
        return 0

    print(f"Generated {len(written)} file(s) in '{output_directory}'.")
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    try:
        specification = load_specification(Path(args.spec))
        groups = build_schemas(specification)
    except (SpecificationError, GeneratorError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    count = sum(len(group.by_name) for group in groups)
    print(f"Checked {count} schema(s). No issues found.")
    return 0


def _cmd_scaffold(args: argparse.Namespace) -> int:
    """Handle the scaffold subcommand."""
    try:
        files = scaffold_files(
            ScaffoldKind(args.kind),
            args.name,
            TemplateRegistry(),
            package_name=args.package,
            output_file=args.output_file,
        )
        written = write_files(files, Path(args.output), overwrite=args.force)
    except (GenerationError, TemplateError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for path in written:
        print(f"Created '{path}'.")
    return 0
