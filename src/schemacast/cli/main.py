# Copyright 2026 Schemacast Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the Schemacast command-line interface."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from schemacast.codec import Codec, InputFormat, parse_text, render_text
from schemacast.config import CONFIG_FILE_NAME, CastConfig, ConfigError, load_config
from schemacast.errors import SchemacastError
from schemacast.model.loader import load_descriptor_table
from schemacast.model.table import DescriptorTable
from schemacast.schemas.resource import RESOURCE_SCHEMA_TABLE, ROOT_TYPE

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the Schemacast CLI."""
    parser = argparse.ArgumentParser(
        prog="schemacast",
        description="Schemacast - descriptor-driven validation and conversion of structured data",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    decode_parser = subparsers.add_parser(
        "decode",
        help="Decode a document into its typed form",
        description="Validate a document against a type and print the typed value as JSON.",
    )
    _add_conversion_arguments(decode_parser)

    encode_parser = subparsers.add_parser(
        "encode",
        help="Encode a typed value back into a document",
        description="Validate a typed value against a type and print its serialized form.",
    )
    _add_conversion_arguments(encode_parser)
    encode_parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Indentation of the output (default: from config, or 2)",
    )

    check_parser = subparsers.add_parser(
        "check",
        help="Check that a document conforms to a type",
        description="Validate a document against a type without printing it.",
    )
    _add_conversion_arguments(check_parser)

    types_parser = subparsers.add_parser(
        "types",
        help="List the types of the descriptor table",
        description="Print the name of every type in the active descriptor table.",
    )
    _add_table_arguments(types_parser)

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


def _add_table_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        default=None,
        help=f"Configuration file (default: {CONFIG_FILE_NAME} in the current directory, if present)",
    )
    parser.add_argument(
        "--table",
        default=None,
        help="Descriptor table document (default: the built-in resource schema table)",
    )


def _add_conversion_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("file", help="Input file")
    parser.add_argument("--type", "-t", dest="type_name", default=None, help="Name of the type to convert")
    parser.add_argument(
        "--format",
        "-f",
        dest="input_format",
        choices=[f.value for f in InputFormat],
        default=None,
        help="Input notation (default: from config, or json)",
    )
    _add_table_arguments(parser)


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    try:
        if args.command == "decode":
            return _cmd_decode(args)
        if args.command == "encode":
            return _cmd_encode(args)
        if args.command == "check":
            return _cmd_check(args)
        if args.command == "types":
            return _cmd_types(args)
    except (ConfigError, SchemacastError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


def _cmd_decode(args: argparse.Namespace) -> int:
    """Handle the decode subcommand."""
    path = Path(args.file)
    if not path.exists():
        print(f"Error: file '{path}' does not exist.", file=sys.stderr)
        return 1

    config = _load_config(args)
    codec, type_name = _codec_and_type(args, config)
    tree = _read_input(path, args, config)
    value = codec.decode(tree, type_name)
    print(render_text(value))
    return 0


def _cmd_encode(args: argparse.Namespace) -> int:
    """Handle the encode subcommand."""
    path = Path(args.file)
    if not path.exists():
        print(f"Error: file '{path}' does not exist.", file=sys.stderr)
        return 1

    config = _load_config(args)
    codec, type_name = _codec_and_type(args, config)
    tree = _read_input(path, args, config)
    indent = args.indent if args.indent is not None else config.indent
    print(codec.encode_text(tree, type_name, indent=indent))
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    path = Path(args.file)
    if not path.exists():
        print(f"Error: file '{path}' does not exist.", file=sys.stderr)
        return 1

    config = _load_config(args)
    codec, type_name = _codec_and_type(args, config)
    tree = _read_input(path, args, config)
    codec.decode(tree, type_name)
    print("No issues found.")
    return 0


def _cmd_types(args: argparse.Namespace) -> int:
    """Handle the types subcommand."""
    config = _load_config(args)
    table = _load_table(args, config)
    for name in sorted(table):
        print(name)
    return 0


def _load_config(args: argparse.Namespace) -> CastConfig:
    if args.config is not None:
        return load_config(Path(args.config))
    default_path = Path.cwd() / CONFIG_FILE_NAME
    if default_path.exists():
        return load_config(default_path)
    return CastConfig()


def _load_table(args: argparse.Namespace, config: CastConfig) -> DescriptorTable:
    if args.table is not None:
        return load_descriptor_table(Path(args.table))
    if config.descriptor_table is not None:
        return load_descriptor_table(config.descriptor_table)
    return RESOURCE_SCHEMA_TABLE


def _codec_and_type(args: argparse.Namespace, config: CastConfig) -> tuple[Codec, str]:
    table = _load_table(args, config)
    type_name = args.type_name or config.root_type
    if type_name is None:
        if table is not RESOURCE_SCHEMA_TABLE:
            raise ConfigError("No type given. Pass --type or set 'root-type' in the config file.")
        type_name = ROOT_TYPE
    return Codec(table), type_name


def _read_input(path: Path, args: argparse.Namespace, config: CastConfig) -> Any:
    input_format = InputFormat(args.input_format) if args.input_format else config.input_format
    return parse_text(path.read_text(encoding="utf-8"), input_format)
