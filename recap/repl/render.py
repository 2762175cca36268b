"""
Terminal rendering of lexer diagnostics.

Diagnostics only carry offsets; this module maps them onto lines and
columns and draws codespan-style reports:

    error[L001]: parse error
      ┌─ stdin:1:7
      │
    1 │ hello 1
      │       ^ expected alphabetic character
      │       - while expecting token
"""

from bisect import bisect_right
from typing import Dict, List, Tuple

from rich.console import Console
from rich.text import Text

from ..lexer.errors import Diagnostic, Label


SEVERITY_STYLES = {
    "error": "bold red",
    "warning": "bold yellow",
    "note": "bold green",
}
PRIMARY_STYLE = "red"
SECONDARY_STYLE = "blue"
GUTTER_STYLE = "blue"


class LineIndex:
    """Offset to line/column lookup for one source text."""

    def __init__(self, source: str):
        self.source = source
        self.line_starts = [0]
        for i, char in enumerate(source):
            if char == "\n":
                self.line_starts.append(i + 1)

    def line_of(self, offset: int) -> int:
        """0-based line index containing ``offset``."""
        return bisect_right(self.line_starts, offset) - 1

    def location(self, offset: int) -> Tuple[int, int]:
        """1-based ``(line, column)`` of ``offset``."""
        line = self.line_of(offset)
        return line + 1, offset - self.line_starts[line] + 1

    def line_bounds(self, line: int) -> Tuple[int, int]:
        start = self.line_starts[line]
        if line + 1 < len(self.line_starts):
            end = self.line_starts[line + 1] - 1
        else:
            end = len(self.source)
        if end > start and self.source[end - 1] == "\r":
            end -= 1
        return start, end

    def line_text(self, line: int) -> str:
        start, end = self.line_bounds(line)
        return self.source[start:end]


def render_diagnostic(source: str, diagnostic: Diagnostic, filename: str = "stdin") -> Text:
    """Build the rich ``Text`` for one diagnostic."""
    index = LineIndex(source)
    text = Text()

    code = f"[{diagnostic.code}]" if diagnostic.code else ""
    text.append(f"{diagnostic.severity}{code}", style=SEVERITY_STYLES.get(diagnostic.severity, "bold"))
    text.append(f": {diagnostic.message}\n", style="bold")

    if not diagnostic.labels:
        return text

    by_line: Dict[int, List[Label]] = {}
    for label in diagnostic.labels:
        by_line.setdefault(index.line_of(label.start), []).append(label)
    width = len(str(max(by_line) + 1))
    blank = " " * width

    anchor = diagnostic.primary_label or diagnostic.labels[0]
    line, column = index.location(anchor.start)
    text.append(f"{blank} ┌─ ", style=GUTTER_STYLE)
    text.append(f"{filename}:{line}:{column}\n")
    text.append(f"{blank} │\n", style=GUTTER_STYLE)

    for line_no in sorted(by_line):
        line_start, line_end = index.line_bounds(line_no)
        text.append(f"{line_no + 1:>{width}} │ ", style=GUTTER_STYLE)
        text.append(index.line_text(line_no) + "\n")
        for label in by_line[line_no]:
            # Ranges running past the end of the line are cut at the line end
            span = max(1, min(label.end, line_end) - label.start)
            marker, style = ("^", PRIMARY_STYLE) if label.primary else ("-", SECONDARY_STYLE)
            text.append(f"{blank} │ ", style=GUTTER_STYLE)
            text.append(" " * (label.start - line_start))
            text.append(f"{marker * span} {label.message}\n", style=style)

    return text


def emit(console: Console, source: str, diagnostic: Diagnostic, filename: str = "stdin") -> None:
    """Print one diagnostic."""
    console.print(render_diagnostic(source, diagnostic, filename), end="", soft_wrap=True)
