#!/usr/bin/env python3
"""
Main test runner for the Recap front end.

Runs a quick smoke check of the lexer and renderer, then the unit tests
under tests/.

Author: xwest
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)

def run_smoke_check():
    """Tokenize a couple of lines the way the shell does."""

    print("🚀 Recap Test Suite")
    print("=" * 60)

    try:
        from rich.console import Console
        from recap.lexer import tokenize, Token
        from recap.repl.render import emit

        print("✅ All modules imported successfully")
        print()

    except ImportError as e:
        print(f"❌ Failed to import modules: {e}")
        return False

    console = Console(highlight=False)

    print("Testing tokenization...")
    source = "hello //greeting\n  world // trailing"
    items = list(tokenize(source))
    if items != [Token.word("hello"), Token.word("world")]:
        print(f"❌ Unexpected tokens: {items}")
        return False
    print(f"     ✅ {len(items)} tokens from {source!r}")

    print("Testing diagnostics...")
    source = "hello 42"
    items = list(tokenize(source))
    error = items[-1]
    if isinstance(error, Token):
        print("❌ Expected an error for a bare number")
        return False
    emit(console, source, error.to_diagnostic())
    print("     ✅ Diagnostic rendered")
    print()
    return True


def run_all_tests():
    """Run the smoke check and every unit test."""
    if not run_smoke_check():
        return False

    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=2).run(suite)

    print()
    if result.wasSuccessful():
        print("🎉 All tests PASSED!")
    else:
        print(f"❌ {len(result.failures)} failures, {len(result.errors)} errors")
    return result.wasSuccessful()

if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
