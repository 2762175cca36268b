"""
Recap Lexer - pulls tokens out of a buffer one at a time

The tokenizer is lazy on purpose: the shell prints every token (and the
final diagnostic) as soon as it is produced instead of waiting for the
whole line to be lexed.

xwest
"""

import logging
from typing import Callable, Iterator, List, Optional, TypeVar, Union

from .tokens import Token
from .views import TextView, PlainView, LocatedView
from .grammar import Grammar, Mismatch, Incomplete, DEFAULT_GRAMMAR
from .errors import ErrorKind, LexerError, default_error_factory


logger = logging.getLogger(__name__)

E = TypeVar("E")
ErrorFactory = Callable[[ErrorKind, int, int, str], E]


class Tokenizer(Iterator[Union[Token, E]]):
    """
    Stateful cursor over a text view.

    Each ``next()`` yields a ``Token`` or, at most once and always last, an
    error value built by ``error_factory``. After that, or after the last
    token, the tokenizer is done for good; lex again with a new one.
    """

    def __init__(
        self,
        view: TextView,
        grammar: Optional[Grammar] = None,
        error_factory: Optional[ErrorFactory] = None
    ):
        """
        Args:
            view: Whole-buffer view to tokenize (plain or located)
            grammar: Token grammar, the word-only grammar by default
            error_factory: Callable ``(kind, start, end, expected)`` building
                the error value; the result must support ``append``
        """
        self.view = view
        self.grammar = grammar or DEFAULT_GRAMMAR
        self.error_factory = error_factory or default_error_factory
        self.done = False

    @property
    def remaining(self) -> TextView:
        return self.view

    def __iter__(self) -> "Tokenizer":
        return self

    def __next__(self) -> Union[Token, E]:
        if self.done:
            raise StopIteration

        try:
            token, rest = self.grammar.wrapped(self.view)
        except Incomplete as e:
            self.done = True
            logger.debug("incomplete input at offset %d, expected %s", self.view.offset, e.expected)
            return self._error(ErrorKind.END_OF_INPUT, self.view, e)
        except Mismatch as e:
            self.done = True
            if not e.view:
                # Only insignificant text was left
                logger.debug("end of input at offset %d", e.view.offset)
                raise StopIteration
            logger.debug("unexpected character at offset %d, expected %s", e.view.offset, e.expected)
            return self._error(ErrorKind.UNEXPECTED_CHARACTER, e.view, e)

        self.view = rest
        self.done = not rest
        logger.debug("token %s, done=%s", token, self.done)
        return token

    def _error(self, kind: ErrorKind, view: TextView, failure) -> E:
        error = self.error_factory(kind, view.offset, view.end, failure.expected)
        for outer, description in failure.context:
            error = error.append(outer.offset, outer.end, description)
        return error

    def tokens(self) -> Iterator[Token]:
        """
        Iterate over tokens only, raising the error if one turns up.

        Only usable when the error factory builds exceptions (the default
        one does); any other error value is reported as a ``TypeError``.
        """
        for item in self:
            if isinstance(item, Token):
                yield item
            elif isinstance(item, BaseException):
                raise item
            else:
                raise TypeError(f"error value {item!r} is not an exception and cannot be raised")


def tokenize(
    source: str,
    *,
    located: bool = True,
    filename: str = "<stdin>",
    grammar: Optional[Grammar] = None,
    error_factory: Optional[ErrorFactory] = None
) -> Tokenizer:
    """
    Build a tokenizer over a whole buffer.

    Args:
        source: Text to tokenize; must not change while the tokenizer lives
        located: Track line/column on every view (slower, richer tokens)
        filename: Name carried in source locations
        grammar: Token grammar override
        error_factory: Error value constructor override
    """
    if located:
        view = LocatedView(source, filename=filename)
    else:
        view = PlainView(source)
    return Tokenizer(view, grammar=grammar, error_factory=error_factory)


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string eagerly.

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
    """
    return list(tokenize(source, filename=filename).tokens())
