"""
Recap Shell Package

The interactive front end: configuration, diagnostic rendering and the
read-tokenize-print loop.
"""

from .config import ShellConfig
from .render import LineIndex, render_diagnostic, emit
from .shell import main, run_shell, evaluate_line

__all__ = [
    "ShellConfig",
    "LineIndex",
    "render_diagnostic",
    "emit",
    "main",
    "run_shell",
    "evaluate_line",
]
