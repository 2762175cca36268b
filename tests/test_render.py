"""
Tests for lexer errors and their terminal rendering.

Author: xwest
"""

import io
import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from rich.console import Console

from recap.lexer import tokenize, ErrorKind, LexerError, Diagnostic, Label
from recap.repl.render import LineIndex, render_diagnostic, emit


def first_error(source):
    return [item for item in tokenize(source) if isinstance(item, LexerError)][0]


class TestLexerError(unittest.TestCase):

    def test_append_builds_chain(self):
        error = LexerError(ErrorKind.UNEXPECTED_CHARACTER, 4, 5, "digit")
        same = error.append(2, 5, "number").append(0, 5, "expression")
        self.assertIs(same, error)
        self.assertEqual(
            [label.message for label in error.context],
            ["while expecting number", "while expecting expression"],
        )

    def test_to_diagnostic(self):
        diagnostic = first_error("hello 1").to_diagnostic()
        self.assertEqual(diagnostic.message, "parse error")
        self.assertEqual(diagnostic.code, "L001")
        self.assertEqual(diagnostic.primary_label, Label(6, 7, "expected alphabetic character"))
        self.assertEqual(len(diagnostic.labels), 2)

    def test_end_of_input_code(self):
        error = LexerError(ErrorKind.END_OF_INPUT, 0, 3, "closing quote")
        self.assertEqual(error.code, "L002")
        self.assertEqual(error.to_diagnostic().message, "unexpected end of input")

    def test_str_is_readable(self):
        text = str(first_error("x 1"))
        self.assertIn("error[L001]: parse error", text)
        self.assertIn("2..3: expected alphabetic character", text)


class TestLineIndex(unittest.TestCase):

    def setUp(self):
        self.index = LineIndex("ab\r\ncd\n\nxyz")

    def test_location(self):
        self.assertEqual(self.index.location(0), (1, 1))
        self.assertEqual(self.index.location(5), (2, 2))
        self.assertEqual(self.index.location(7), (3, 1))
        self.assertEqual(self.index.location(10), (4, 3))

    def test_end_of_source(self):
        self.assertEqual(self.index.location(11), (4, 4))

    def test_line_text_drops_terminators(self):
        self.assertEqual(self.index.line_text(0), "ab")
        self.assertEqual(self.index.line_text(2), "")
        self.assertEqual(self.index.line_text(3), "xyz")


class TestRenderDiagnostic(unittest.TestCase):

    def render(self, source, diagnostic):
        console = Console(file=io.StringIO(), color_system=None, width=40)
        emit(console, source, diagnostic)
        return console.file.getvalue()

    def test_single_line(self):
        output = self.render("hello 1", first_error("hello 1").to_diagnostic())
        self.assertEqual(output, (
            "error[L001]: parse error\n"
            "  ┌─ stdin:1:7\n"
            "  │\n"
            "1 │ hello 1\n"
            "  │       ^ expected alphabetic character\n"
            "  │       - while expecting token\n"
        ))

    def test_range_clamped_to_line(self):
        source = "hello\n  12\nworld"
        output = self.render(source, first_error(source).to_diagnostic())
        self.assertIn("  ┌─ stdin:2:3\n", output)
        self.assertIn("2 │   12\n", output)
        self.assertIn("  │   ^^ expected alphabetic character\n", output)
        self.assertNotIn("world", output)

    def test_empty_range_gets_a_marker(self):
        diagnostic = Diagnostic("unexpected end of input", [Label(3, 3, "expected more input")], code="L002")
        output = self.render("abc", diagnostic)
        self.assertIn("  │    ^ expected more input\n", output)

    def test_wide_gutter(self):
        source = "\n" * 11 + "a ?"
        output = self.render(source, first_error(source).to_diagnostic())
        self.assertIn("   ┌─ stdin:12:3\n", output)
        self.assertIn("12 │ a ?\n", output)

    def test_no_labels(self):
        text = render_diagnostic("", Diagnostic("nothing to point at"))
        self.assertEqual(text.plain, "error: nothing to point at\n")

    def test_filename(self):
        text = render_diagnostic("1", first_error("1").to_diagnostic(), filename="input.rc")
        self.assertIn("┌─ input.rc:1:1", text.plain)


if __name__ == '__main__':
    unittest.main()
