"""
Recap Lexer Package

Implements the lexical front end of Recap: a lazy tokenizer that turns a
line (or block) typed at the shell into classified tokens.

Key Features:
- Pull-based tokenization, one token per ``next()``
- Whitespace and ``//`` end-of-line comments skipped between tokens
- One grammar over two view types: plain (fast) and located (line/column)
- Offset-range errors with an "expected ..." context chain

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation
from .views import TextView, PlainView, LocatedView
from .grammar import Grammar, TokenCase, Mismatch, Incomplete
from .lexer import Tokenizer, tokenize, tokenize_string
from .errors import ErrorKind, LexerError, Diagnostic, Label

__all__ = [
    "Tokenizer",
    "tokenize",
    "tokenize_string",
    "Token",
    "TokenType",
    "SourceLocation",
    "TextView",
    "PlainView",
    "LocatedView",
    "Grammar",
    "TokenCase",
    "Mismatch",
    "Incomplete",
    "ErrorKind",
    "LexerError",
    "Diagnostic",
    "Label",
]
