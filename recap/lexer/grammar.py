"""
Grammar rules for the Recap lexer.

Rules are plain functions from a view to ``(result, rest)``. A rule that
cannot match raises ``Mismatch`` (the input is wrong) or ``Incomplete``
(the input ran out in the middle of a construct). These exceptions are
internal control flow: the tokenizer turns them into error values.

Author: xwest
"""

import string
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from .tokens import Token, TokenType
from .views import TextView


WHITESPACE = frozenset(" \t\r\n")
LINE_TERMINATORS = frozenset("\r\n")
ALPHABETIC = frozenset(string.ascii_letters)

COMMENT_MARKER = "//"


def is_whitespace(char: str) -> bool:
    return char in WHITESPACE


def is_alphabetic(char: str) -> bool:
    return char in ALPHABETIC


def is_not_line_terminator(char: str) -> bool:
    return char not in LINE_TERMINATORS


class GrammarError(Exception):
    """Base for rule failures; never escapes the tokenizer."""

    def __init__(self, view: TextView, expected: str):
        super().__init__(f"expected {expected}")
        self.view = view
        self.expected = expected
        self.context: List[Tuple[TextView, str]] = []

    def within(self, view: TextView, description: str) -> "GrammarError":
        self.context.append((view, description))
        return self


class Mismatch(GrammarError):
    """The input at ``view`` does not have the expected shape."""


class Incomplete(GrammarError):
    """The input ended before the construct starting at ``view`` was finished."""


Rule = Callable[[TextView], Tuple[Token, TextView]]


# ============================================================================
# Insignificant text
# ============================================================================

def eol_comment(view: TextView) -> TextView:
    """Consume ``//`` and the rest of the line, leaving the terminator."""
    if not view.starts_with(COMMENT_MARKER):
        raise Mismatch(view, "comment")
    body = view.advance(len(COMMENT_MARKER))
    return body.advance(body.take_while(is_not_line_terminator))


def skip_insignificant(view: TextView) -> TextView:
    """Drop any mixture of whitespace and end-of-line comments. Never fails."""
    while True:
        spaces = view.take_while(is_whitespace)
        if spaces:
            view = view.advance(spaces)
        elif view.starts_with(COMMENT_MARKER):
            view = eol_comment(view)
        else:
            return view


# ============================================================================
# Token shapes
# ============================================================================

def word(view: TextView) -> Tuple[Token, TextView]:
    """A maximal run of ASCII letters, kept verbatim."""
    length = view.take_while(is_alphabetic)
    if not length:
        raise Mismatch(view, "alphabetic character")
    head, rest = view.split_at(length)
    return Token(TokenType.WORD, head.fragment, head), rest


@dataclass(frozen=True)
class TokenCase:
    """One alternative of the token grammar, selected by its leading character."""
    name: str
    starts: Callable[[str], bool]
    rule: Rule
    expected: str


WORD_CASE = TokenCase("word", is_alphabetic, word, "alphabetic character")


class Grammar:
    """
    Dispatch table of token shapes.

    The first case whose ``starts`` predicate accepts the leading character
    owns the match. When none does, the failure names every case's
    expectation. Either way a failure carries an outer ``token`` context.
    """

    def __init__(self, cases: Optional[Sequence[TokenCase]] = None):
        self.cases = list(cases) if cases is not None else [WORD_CASE]
        if not self.cases:
            raise ValueError("a grammar needs at least one token case")

    @property
    def expected(self) -> str:
        return " or ".join(case.expected for case in self.cases)

    def token(self, view: TextView) -> Tuple[Token, TextView]:
        if view:
            leading = view.source[view.start]
            for case in self.cases:
                if case.starts(leading):
                    try:
                        return case.rule(view)
                    except GrammarError as e:
                        raise e.within(view, "token")
        raise Mismatch(view, self.expected).within(view, "token")

    def wrapped(self, view: TextView) -> Tuple[Token, TextView]:
        """Skip, match one token, skip again."""
        token, rest = self.token(skip_insignificant(view))
        return token, skip_insignificant(rest)


DEFAULT_GRAMMAR = Grammar()
