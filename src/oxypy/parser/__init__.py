# Copyright 2026 Oxy Python Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexer for Oxy Python source text."""

from oxypy.parser.lexer import (
    KEYWORDS,
    LexError,
    Location,
    Scanner,
    Token,
    TokenType,
    UnexpectedTokenError,
    lex,
    lookup_keyword,
)

__all__ = [
    "KEYWORDS",
    "LexError",
    "Location",
    "Scanner",
    "Token",
    "TokenType",
    "UnexpectedTokenError",
    "lex",
    "lookup_keyword",
]
