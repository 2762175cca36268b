"""
Error handling for the Recap lexer.

Lexer errors are plain values carrying an offset range and an
"expected <construct>" description. Outer constructs can be appended to
build a context chain, innermost failure first. Converting offsets into
lines and columns is the renderer's job, not ours.

Author: xwest
"""

from enum import Enum
from typing import Optional, List
from dataclasses import dataclass, field


class ErrorKind(Enum):
    """Lexer failure categories; the value is the diagnostic code."""
    UNEXPECTED_CHARACTER = "L001"
    END_OF_INPUT = "L002"


@dataclass
class Label:
    """A labelled offset range inside the source."""
    start: int
    end: int
    message: str
    primary: bool = True


@dataclass
class Diagnostic:
    """Renderer input: a headline plus labelled ranges."""
    message: str
    labels: List[Label] = field(default_factory=list)
    severity: str = "error"  # "error", "warning", "note"
    code: Optional[str] = None

    @property
    def primary_label(self) -> Optional[Label]:
        for label in self.labels:
            if label.primary:
                return label
        return None

    def __str__(self) -> str:
        code = f"[{self.code}]" if self.code else ""
        result = f"{self.severity}{code}: {self.message}\n"
        for label in self.labels:
            marker = "^" if label.primary else "-"
            result += f"  {marker} {label.start}..{label.end}: {label.message}\n"
        return result


class LexerError(Exception):
    """
    A failed tokenization.

    The tokenizer yields these as its final item instead of raising them, so
    a consumer can render everything produced before the failure.
    """

    def __init__(self, kind: ErrorKind, start: int, end: int, expected: str):
        self.kind = kind
        self.start = start
        self.end = end
        self.expected = expected
        self.context: List[Label] = []
        super().__init__(self.message)

    @property
    def message(self) -> str:
        return f"expected {self.expected}"

    @property
    def code(self) -> str:
        return self.kind.value

    def append(self, start: int, end: int, description: str) -> "LexerError":
        """Record an outer construct that was being matched when this failed."""
        self.context.append(Label(start, end, f"while expecting {description}", primary=False))
        return self

    def to_diagnostic(self) -> Diagnostic:
        headline = ERROR_MESSAGES[self.kind]
        labels = [Label(self.start, self.end, self.message)] + list(self.context)
        return Diagnostic(message=headline, labels=labels, code=self.code)

    def __eq__(self, other):
        if not isinstance(other, LexerError):
            return NotImplemented
        return (self.kind, self.start, self.end, self.expected, self.context) == \
            (other.kind, other.start, other.end, other.expected, other.context)

    __hash__ = Exception.__hash__

    def __repr__(self) -> str:
        return f"LexerError({self.kind.name}, {self.start}..{self.end}, {self.message!r})"

    def __str__(self) -> str:
        return str(self.to_diagnostic())


ERROR_MESSAGES = {
    ErrorKind.UNEXPECTED_CHARACTER: "parse error",
    ErrorKind.END_OF_INPUT: "unexpected end of input",
}


def default_error_factory(kind: ErrorKind, start: int, end: int, expected: str) -> LexerError:
    """Build the stock error value; tokenizers accept any callable of this shape."""
    return LexerError(kind, start, end, expected)
