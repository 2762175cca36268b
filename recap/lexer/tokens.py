"""
Token definitions for the Recap lexer.

The vocabulary is deliberately small: a token is a classified slice of the
input buffer. New token shapes get a new ``TokenType`` member and a new
grammar case, nothing else.

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Any, Optional


class TokenType(Enum):
    """Enumeration of all token types in Recap."""

    WORD = auto()                   # hello, World (ASCII letters only)


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Only position-tracking views produce one; plain views report ``None``.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of buffer

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token.

    ``lexeme`` is the matched text, verbatim. ``view`` is the slice of the
    buffer it came from; it is left out of comparisons so that the same text
    tokenized through different view types yields equal tokens.
    """
    type: TokenType
    lexeme: str
    view: Any = field(default=None, compare=False, repr=False)

    @classmethod
    def word(cls, text: str) -> "Token":
        return cls(TokenType.WORD, text)

    @property
    def location(self) -> Optional[SourceLocation]:
        if self.view is None:
            return None
        return self.view.location()

    @property
    def span(self) -> Optional[tuple]:
        """Offset range ``(start, end)`` of the token in its buffer."""
        if self.view is None:
            return None
        return (self.view.offset, self.view.end)

    def __str__(self) -> str:
        return f"{self.type.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        location = self.location
        if location is not None:
            return f"Token({self.type.name}, {self.lexeme!r}, {location!r})"
        return f"Token({self.type.name}, {self.lexeme!r})"
