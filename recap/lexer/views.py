"""
Text views over a source buffer.

A view is an index range into the caller's string. Views never copy the
buffer; slicing happens only when a fragment is asked for. All grammar code
is written against the ``TextView`` interface, so the same rules run over
the fast ``PlainView`` and the position-tracking ``LocatedView`` and reach
identical decisions.

Author: xwest
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Callable, Optional, Tuple, TypeVar

from .tokens import SourceLocation


V = TypeVar("V", bound="TextView")


class TextView(ABC):
    """Capability interface shared by every view type."""

    source: str
    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start

    def __bool__(self) -> bool:
        return self.end > self.start

    @property
    def offset(self) -> int:
        """Absolute offset of the first character in the buffer."""
        return self.start

    @property
    def fragment(self) -> str:
        return self.source[self.start:self.end]

    def take_while(self, predicate: Callable[[str], bool]) -> int:
        """Length of the longest prefix whose characters all satisfy ``predicate``."""
        source = self.source
        pos = self.start
        while pos < self.end and predicate(source[pos]):
            pos += 1
        return pos - self.start

    def starts_with(self, prefix: str) -> bool:
        return self.source.startswith(prefix, self.start, self.end)

    def split_at(self: V, count: int) -> Tuple[V, V]:
        """Split into the first ``count`` characters and the rest."""
        if count < 0 or count > len(self):
            raise ValueError(f"cannot split a view of length {len(self)} at {count}")
        return self._head(count), self._tail(count)

    def advance(self: V, count: int) -> V:
        return self.split_at(count)[1]

    @abstractmethod
    def _head(self: V, count: int) -> V:
        ...

    @abstractmethod
    def _tail(self: V, count: int) -> V:
        ...

    @abstractmethod
    def location(self) -> Optional[SourceLocation]:
        ...


@dataclass(frozen=True)
class PlainView(TextView):
    """Fast view: no line/column bookkeeping."""
    source: str
    start: int = 0
    end: Optional[int] = None

    def __post_init__(self):
        if self.end is None:
            object.__setattr__(self, "end", len(self.source))

    def _head(self, count: int) -> "PlainView":
        return PlainView(self.source, self.start, self.start + count)

    def _tail(self, count: int) -> "PlainView":
        return PlainView(self.source, self.start + count, self.end)

    def location(self) -> Optional[SourceLocation]:
        return None

    def __repr__(self) -> str:
        return f"PlainView({self.fragment!r}, offset={self.start})"


@dataclass(frozen=True)
class LocatedView(TextView):
    """
    View that also knows the 1-based line and column of its first character.

    Line/column are advanced incrementally on every split, so the cost is
    proportional to the text consumed, not to the buffer size.
    """
    source: str
    start: int = 0
    end: Optional[int] = None
    line: int = 1
    column: int = 1
    filename: str = "<stdin>"

    def __post_init__(self):
        if self.end is None:
            object.__setattr__(self, "end", len(self.source))

    def _head(self, count: int) -> "LocatedView":
        return replace(self, end=self.start + count)

    def _tail(self, count: int) -> "LocatedView":
        split = self.start + count
        newlines = self.source.count("\n", self.start, split)
        if newlines:
            line = self.line + newlines
            column = split - self.source.rfind("\n", self.start, split)
        else:
            line = self.line
            column = self.column + count
        return replace(self, start=split, line=line, column=column)

    def location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.column, self.start)

    def __repr__(self) -> str:
        return f"LocatedView({self.fragment!r}, {self.location()})"
