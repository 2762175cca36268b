"""
Shell configuration.

Every field can come from a command-line option or an environment
variable; see ``recap.repl.shell.main``.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..memory import DEFAULT_CAPACITY


COLOR_CHOICES = ("auto", "always", "never")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ShellConfig:
    """Configuration for an interactive session"""
    history_file: Optional[str] = "history.txt"   # None disables history
    color: str = "always"
    memory_cells: int = DEFAULT_CAPACITY
    located: bool = True
    filename: str = "stdin"
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.color not in COLOR_CHOICES:
            raise ValueError(f"color must be one of {COLOR_CHOICES}, got {self.color!r}")
        if self.memory_cells < 0:
            raise ValueError(f"memory_cells must be non-negative, got {self.memory_cells}")
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}, got {self.log_level!r}")

    @property
    def numeric_log_level(self) -> int:
        return getattr(logging, self.log_level)
