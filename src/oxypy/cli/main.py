# Copyright 2026 Oxy Python Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the oxypy command-line interface."""

import argparse
import sys
from pathlib import Path

from oxypy.cli.render import render_error, render_tokens
from oxypy.config import CONFIG_FILE_NAME, ConfigError, OxyConfig, find_config, load_config, save_config
from oxypy.parser.lexer import LexError, lex

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the oxypy CLI."""
    parser = argparse.ArgumentParser(
        prog="oxypy",
        description="Oxy Python - lexical scanner for a Python-like language",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # lex subcommand
    lex_parser = subparsers.add_parser(
        "lex",
        help="Print the tokens of a source file or inline text",
        description="Scan source text and print the resulting tokens.",
    )
    source_group = lex_parser.add_mutually_exclusive_group()
    source_group.add_argument(
        "file",
        nargs="?",
        help="Source file to lex (default: standard input)",
    )
    source_group.add_argument(
        "-c",
        dest="text",
        metavar="TEXT",
        help="Lex TEXT instead of reading a file",
    )
    lex_parser.add_argument(
        "--format",
        dest="output_format",
        choices=["text", "json"],
        default=None,
        help="Output format (default: from config, else text)",
    )
    lex_parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored diagnostics",
    )
    lex_parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Path to a config file (default: {CONFIG_FILE_NAME} in the current directory)",
    )

    # init subcommand
    init_parser = subparsers.add_parser(
        "init",
        help="Create a default configuration file",
        description=f"Write a default {CONFIG_FILE_NAME} into a directory.",
    )
    init_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory to write the configuration into (default: current directory)",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "lex":
        return _cmd_lex(args)
    if args.command == "init":
        return _cmd_init(args)
    return 0


def _cmd_lex(args: argparse.Namespace) -> int:
    """Handle the lex subcommand."""
    try:
        config = _resolve_config(args.config)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    output_format = args.output_format or config.output_format
    color = config.color and not args.no_color

    if args.text is not None:
        source = args.text
    elif args.file is not None:
        path = Path(args.file)
        try:
            source = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            print(f"Error: cannot read '{path}': {exc}", file=sys.stderr)
            return 1
    else:
        try:
            source = sys.stdin.read()
        except (OSError, UnicodeDecodeError) as exc:
            print(f"Error: cannot read standard input: {exc}", file=sys.stderr)
            return 1

    # Newlines are not part of the token set; drop the one left by files and echo.
    source = source.removesuffix("\n")

    try:
        tokens = lex(source)
    except LexError as exc:
        print(render_error(source, exc, color=color), file=sys.stderr)
        return 1

    if tokens or output_format == "json":
        print(render_tokens(tokens, output_format))
    return 0


def _cmd_init(args: argparse.Namespace) -> int:
    """Handle the init subcommand."""
    directory = Path(args.directory).resolve()

    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return 1

    config_file = directory / CONFIG_FILE_NAME

    if config_file.exists():
        print(f"Error: configuration already exists at '{config_file}'.", file=sys.stderr)
        return 1

    try:
        save_config(OxyConfig(), config_file)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Wrote default configuration to '{config_file}'.")
    return 0


def _resolve_config(path: Path | None) -> OxyConfig:
    """Load the explicit config file if given, else look in the current directory."""
    if path is not None:
        return load_config(path)
    return find_config(Path.cwd())
