# Copyright 2026 Oxy Python Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for Oxy Python source text.

Converts raw source text into a sequence of tokens for subsequent parsing.
"""

import enum
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

# ###############
# Public Interface
# ###############


class TokenType(enum.Enum):
    """All token types produced by the Oxy Python lexer."""

    # Arithmetic operators
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    STARSTAR = "**"
    SLASH = "/"

    # Identifiers
    NAME = "NAME"

    # Keywords
    IF = "if"
    ELSE = "else"

    # Layout (reserved, never produced by the scanner)
    INDENT = "INDENT"
    DEDENT = "DEDENT"


@dataclass(frozen=True)
class Location:
    """A single character position in the source text.

    Attributes:
        line: 1-based line number.
        column: 1-based column number.
    """

    line: int
    column: int


@dataclass(frozen=True)
class Token:
    """A lexical token with its source span.

    Attributes:
        type: The kind of token.
        value: The exact source text of the token (the identifier text for NAME).
        start: Location of the first character of the token.
        end: Location of the last character of the token (inclusive).
    """

    type: TokenType
    value: str
    start: Location
    end: Location


class LexError(Exception):
    """Base class for errors raised while scanning.

    Attributes:
        start: Location where the offending text begins.
        end: Location where the offending text ends (inclusive).
    """

    def __init__(self, message: str, start: Location, end: Location) -> None:
        super().__init__(f"Line {start.line}, column {start.column}: {message}")
        self.start = start
        self.end = end


class UnexpectedTokenError(LexError):
    """Raised when the scanner encounters a character it does not recognize.

    Attributes:
        char: The unrecognized character.
    """

    def __init__(self, char: str, start: Location, end: Location) -> None:
        super().__init__(f"Unexpected character: {char!r}", start, end)
        self.char = char


KEYWORDS: Mapping[str, TokenType] = MappingProxyType(
    {
        "if": TokenType.IF,
        "else": TokenType.ELSE,
    }
)


def lookup_keyword(text: str) -> TokenType:
    """Return the keyword token type for *text*, or NAME if it is not reserved.

    Matching is exact and case-sensitive.
    """
    return KEYWORDS.get(text, TokenType.NAME)


def lex(source: str) -> list[Token]:
    """Tokenize Oxy Python source text into a list of tokens.

    Spaces are consumed and not included in the output. Scanning stops at
    the first unrecognized character; no tokens are returned in that case.

    Args:
        source: The text to scan.

    Returns:
        A list of Token objects in source order. Empty input yields an empty list.

    Raises:
        UnexpectedTokenError: On any character outside the recognized set,
            including tabs and newlines.
    """
    return list(Scanner(source))


class Scanner:
    """Incremental scanner over an owned copy of the source text.

    Each call to :meth:`next_token` produces the next token, or ``None`` once
    the input is exhausted. Iterating a scanner yields all remaining tokens.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._line = 1
        self._column = 1

    def __iter__(self) -> Iterator[Token]:
        while (token := self.next_token()) is not None:
            yield token

    @property
    def location(self) -> Location:
        """The location of the character under the cursor."""
        return Location(self._line, self._column)

    def next_token(self) -> Token | None:
        """Scan and return the next token, or ``None`` at end of input.

        Raises:
            UnexpectedTokenError: If the current character is not recognized.
        """
        self._skip_spaces()
        if self._at_end():
            return None

        ch = self._current()
        start = self.location

        if ch in _SINGLE_CHAR_TOKENS:
            self._advance()
            return self._make_token(_SINGLE_CHAR_TOKENS[ch], ch, start)
        if ch == "*":
            if self._peek() == "*":
                self._advance()  # *
                self._advance()  # *
                return self._make_token(TokenType.STARSTAR, "**", start)
            self._advance()
            return self._make_token(TokenType.STAR, "*", start)
        if ch.isalpha():
            # The character that ends the run stays current for the next call.
            text = self._take_while(str.isalpha)
            return self._make_token(lookup_keyword(text), text, start)
        raise UnexpectedTokenError(ch, start, start)

    # ------------------------------------------------------------------
    # Low-level character access helpers
    # ------------------------------------------------------------------

    def _at_end(self) -> bool:
        return self._pos >= len(self._source)

    def _current(self) -> str:
        """Character under the cursor. Callers check _at_end() first."""
        return self._source[self._pos]

    def _peek(self) -> str:
        """Character after the cursor, or '' when the cursor is on the last one."""
        return self._source[self._pos + 1 : self._pos + 2]

    def _advance(self) -> str:
        """Consume the current character and return it.

        Only the column moves: no character advances the line counter.
        """
        ch = self._source[self._pos]
        self._pos += 1
        self._column += 1
        return ch

    def _take_while(self, predicate: Callable[[str], bool]) -> str:
        """Consume characters while *predicate* holds and return them.

        The first non-matching character is left unconsumed.
        """
        start = self._pos
        while not self._at_end() and predicate(self._current()):
            self._advance()
        return self._source[start : self._pos]

    def _skip_spaces(self) -> None:
        self._take_while(_is_space)

    def _make_token(self, token_type: TokenType, value: str, start: Location) -> Token:
        """Build a token ending on the character just before the cursor."""
        end = Location(self._line, self._column - 1)
        return Token(token_type, value, start, end)


# ################
# Implementation
# ################

_SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "/": TokenType.SLASH,
}


def _is_space(ch: str) -> bool:
    return ch == " "
