# Copyright 2026 Wiremap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the wiremap command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from yachalk import chalk

from wiremap.generator.build import GenerationError, generate, write_files
from wiremap.generator.loader import IRLoadError, load_service
from wiremap.options.config import GeneratorOptions, GeneratorOptionsError, load_generator_options
from wiremap.rendering.roles import Perspective
from wiremap.validation.checks import validate

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the wiremap CLI."""
    parser = argparse.ArgumentParser(
        prog="wiremap",
        description="wiremap: TypeScript DTO, mapper and Express handler generator",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log generation progress to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Validate a service IR document",
        description="Report warnings and errors found in a service IR document.",
    )
    check_parser.add_argument("ir_file", metavar="IR_FILE", help="Service IR document (.json, .yaml or .yml)")

    # generate subcommand
    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate TypeScript code from a service IR document",
        description="Validate a service IR document and write the generated TypeScript artifacts.",
    )
    generate_parser.add_argument("ir_file", metavar="IR_FILE", help="Service IR document (.json, .yaml or .yml)")
    generate_parser.add_argument(
        "--config",
        help="Generator options file (YAML)",
    )
    generate_parser.add_argument(
        "--role",
        choices=[p.value for p in Perspective],
        help="Generate code for the client or the server (overrides the options file)",
    )
    generate_parser.add_argument(
        "--output",
        default=_DEFAULT_OUTPUT_DIR,
        help=f"Output directory (default: {_DEFAULT_OUTPUT_DIR})",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################

_DEFAULT_OUTPUT_DIR = "./generated"


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "check":
        return _cmd_check(args)
    if args.command == "generate":
        return _cmd_generate(args)
    return 0


def _error(message: str) -> None:
    print(f"{chalk.red('Error:')} {message}", file=sys.stderr)


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    try:
        service = load_service(Path(args.ir_file))
    except IRLoadError as exc:
        _error(str(exc))
        return 1

    result = validate(service)
    for warning in result.warnings:
        print(f"{chalk.yellow('Warning:')} {warning.message}")
    for error in result.errors:
        _error(error.message)

    if result.has_errors:
        return 1

    print(chalk.green("No issues found."))
    return 0


def _cmd_generate(args: argparse.Namespace) -> int:
    """Handle the generate subcommand."""
    try:
        service = load_service(Path(args.ir_file))
        options = load_generator_options(Path(args.config)) if args.config else GeneratorOptions()
    except (IRLoadError, GeneratorOptionsError) as exc:
        _error(str(exc))
        return 1

    if args.role is not None:
        options.role = Perspective(args.role)

    for warning in validate(service).warnings:
        print(f"{chalk.yellow('Warning:')} {warning.message}")

    try:
        files = generate(service, options)
    except GenerationError as exc:
        _error(str(exc))
        return 1

    output_dir = Path(args.output)
    try:
        written = write_files(files, output_dir)
    except OSError as exc:
        _error(f"cannot write output: {exc}")
        return 1

    print(chalk.green(f"Generated {len(written)} file(s) in '{output_dir}'."))
    return 0
