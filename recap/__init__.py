"""
Recap

An interactive front end for a small stack language: a lazy lexer with
precise diagnostics, a placeholder memory machine, and a shell tying the
two together.

Architecture:
    recap/
    ├── lexer/           # Tokenization and lexical analysis
    ├── memory/          # Fixed-capacity machine memory
    └── repl/            # Shell, configuration, diagnostic rendering

Author: xwest
License: MIT
"""

__version__ = "0.1.0-alpha"
__author__ = "xwest"
__email__ = "xwest@users.noreply.github.com"
__license__ = "MIT"

from .lexer import Tokenizer, Token, TokenType, tokenize, tokenize_string
from .memory import Machine

__all__ = [
    "Tokenizer",
    "Token",
    "TokenType",
    "tokenize",
    "tokenize_string",
    "Machine",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
