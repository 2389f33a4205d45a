# Copyright 2026 Oxy Python Contributors
# SPDX-License-Identifier: Apache-2.0

"""Rendering of token listings and lexical diagnostics for the CLI."""

import json
from collections.abc import Callable
from typing import Any

from yachalk import chalk

from oxypy.config import OutputFormat
from oxypy.parser.lexer import LexError, Location, Token

# ###############
# Public Interface
# ###############


def render_tokens(tokens: list[Token], output_format: OutputFormat) -> str:
    """Render a token list as plain text (one token per line) or as a JSON array."""
    if output_format == "json":
        return json.dumps([_token_to_dict(tok) for tok in tokens], indent=2)
    return "\n".join(_token_to_line(tok) for tok in tokens)


def render_error(source: str, error: LexError, color: bool = True) -> str:
    """Render a lexical error with the offending source line and a caret marker.

    Example::

        error: Line 1, column 3: Unexpected character: '@'
          |
        1 | a @ b
          |   ^

    The caret is placed by character column, so wide (East Asian) characters
    before the error shift it left of the offending character on a terminal.
    """
    lines = source.split("\n")
    line_no = error.start.line
    text = lines[line_no - 1] if line_no <= len(lines) else ""
    gutter = " " * len(str(line_no))
    width = max(error.end.column - error.start.column + 1, 1)
    caret = " " * (error.start.column - 1) + "^" * width

    blue = _styler(chalk.blue, color)
    red = _styler(chalk.red.bold, color)
    return "\n".join(
        [
            f"{red('error')}: {error}",
            blue(f"{gutter} |"),
            f"{blue(f'{line_no} |')} {_printable(text)}",
            f"{blue(f'{gutter} |')} {red(caret)}",
        ]
    )


# ################
# Implementation
# ################


def _location_to_dict(loc: Location) -> dict[str, int]:
    return {"line": loc.line, "column": loc.column}


def _token_to_dict(tok: Token) -> dict[str, Any]:
    return {
        "type": tok.type.name,
        "value": tok.value,
        "start": _location_to_dict(tok.start),
        "end": _location_to_dict(tok.end),
    }


def _token_to_line(tok: Token) -> str:
    span = f"{tok.start.line}:{tok.start.column}-{tok.end.line}:{tok.end.column}"
    return f"{span:<12} {tok.type.name:<9} {tok.value!r}"


def _printable(text: str) -> str:
    """Replace tabs so the caret line stays aligned with the source line."""
    return text.replace("\t", " ")


def _styler(style: Callable[[str], str], enabled: bool) -> Callable[[str], str]:
    if enabled:
        return style
    return lambda text: text
