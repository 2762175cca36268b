"""
Interactive Recap shell.

Reads a line, tokenizes it and prints each token (or a rendered
diagnostic) as soon as the lexer produces it. Line editing and history
come from the standard ``readline`` module where the platform has one.
"""

import logging
import os
from typing import Callable, Optional

import click
from rich.console import Console

from .. import __version__
from ..lexer import Token, tokenize
from ..memory import Machine
from .config import ShellConfig, COLOR_CHOICES, LOG_LEVELS
from .render import emit

try:
    import readline
    HAS_READLINE = True
except ImportError:
    readline = None
    HAS_READLINE = False


logger = logging.getLogger(__name__)

# \001 and \002 keep readline from counting escape codes as prompt width
COLORED_PROMPT = "\001\x1b[1;32m\002{}\001\x1b[0m\002"


class History:
    """Persistent line history backed by ``readline``."""

    def __init__(self, path: Optional[str]):
        self.path = path
        self.added = 0
        if self.enabled:
            # input() must not record lines behind our back; add() decides
            readline.set_auto_history(False)

    @property
    def enabled(self) -> bool:
        return HAS_READLINE and self.path is not None

    def load(self) -> bool:
        if not self.enabled:
            return False
        try:
            readline.read_history_file(self.path)
        except OSError:
            return False
        return True

    def add(self, line: str) -> None:
        # Lines starting with a space stay out of the history
        if not self.enabled or not line.strip() or line.startswith(" "):
            return
        readline.add_history(line)
        self.added += 1

    def save(self) -> None:
        if not self.enabled or not self.added:
            return
        if not os.path.exists(self.path):
            open(self.path, "a").close()
        readline.append_history_file(self.added, self.path)
        logger.debug("appended %d history entries to %s", self.added, self.path)
        self.added = 0


def make_console(color: str) -> Console:
    if color == "always":
        return Console(force_terminal=True, highlight=False)
    if color == "never":
        return Console(no_color=True, color_system=None, highlight=False)
    return Console(highlight=False)


def evaluate_line(console: Console, line: str, config: ShellConfig) -> int:
    """
    Tokenize one submitted line, printing as we go.

    Returns:
        Number of tokens printed
    """
    count = 0
    for item in tokenize(line, located=config.located, filename=config.filename):
        if isinstance(item, Token):
            console.print(repr(item), markup=False, soft_wrap=True)
            count += 1
        else:
            emit(console, line, item.to_diagnostic(), config.filename)
    return count


def run_shell(
    config: ShellConfig,
    console: Optional[Console] = None,
    read_line: Callable[[str], str] = input
) -> None:
    """Run the read-tokenize-print loop until interrupted or end of file."""
    console = console or make_console(config.color)
    history = History(config.history_file)
    if not history.load():
        console.print("No previous history.")

    machine = Machine(config.memory_cells)
    logger.info("started with %r", machine)

    count = 1
    try:
        while True:
            prompt = f"{count}> "
            if config.color != "never":
                prompt = COLORED_PROMPT.format(prompt)
            try:
                line = read_line(prompt)
            except KeyboardInterrupt:
                console.print("Interrupted")
                break
            except EOFError:
                console.print("Encountered Eof")
                break
            history.add(line)
            evaluate_line(console, line, config)
            count += 1
    finally:
        history.save()


@click.command()
@click.option("--history-file", envvar="RECAP_HISTORY", default="history.txt", show_default=True,
              type=click.Path(dir_okay=False), help="File the line history is loaded from and appended to.")
@click.option("--no-history", is_flag=True, help="Neither load nor save line history.")
@click.option("--color", envvar="RECAP_COLOR", default="always", show_default=True,
              type=click.Choice(COLOR_CHOICES), help="When to colour prompts and diagnostics.")
@click.option("--memory-cells", envvar="RECAP_MEMORY_CELLS", default=100, show_default=True,
              type=click.IntRange(min=0), help="Capacity of the machine memory.")
@click.option("--plain", is_flag=True, help="Tokenize without line/column tracking.")
@click.option("--log-level", envvar="RECAP_LOG", default="WARNING", show_default=True,
              type=click.Choice(LOG_LEVELS, case_sensitive=False))
@click.version_option(__version__, prog_name="recap")
def main(history_file, no_history, color, memory_cells, plain, log_level):
    """Interactive Recap tokenizer shell."""
    config = ShellConfig(
        history_file=None if no_history else history_file,
        color=color,
        memory_cells=memory_cells,
        located=not plain,
        log_level=log_level,
    )
    logging.basicConfig(level=config.numeric_log_level, format="%(levelname)s %(name)s: %(message)s")
    run_shell(config)


if __name__ == "__main__":
    main()
