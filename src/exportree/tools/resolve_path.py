"""Resolve and validate the directory a tree starts from."""

import logging
import os
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Optional

from rich.prompt import Prompt

try:
    import readline
except ImportError:     # Windows: no line editing, the prompt still works
    readline = None

logger = logging.getLogger(__name__)


PROMPT_TEXT = "Enter the path to start from (press Tab for autocomplete)"


class StartPathError(ValueError):
    """The starting path is missing or is not a directory."""


def complete_path(text: str) -> list[str]:
    """List completions for a partially typed path.

    Entries of ``dirname(text)`` whose names start with ``basename(text)``,
    joined back onto the dirname. A directory that cannot be listed has no
    completions.
    """
    directory, base = os.path.split(text)
    try:
        with os.scandir(os.path.expanduser(directory) or ".") as it:
            names = sorted(entry.name for entry in it if entry.name.startswith(base))
    except OSError:
        return []
    return [os.path.join(directory, name) for name in names]


@contextmanager
def _path_completion():
    """Install Tab completion of paths for the duration of a prompt."""
    if readline is None or not sys.stdin.isatty():
        yield
        return

    previous_completer = readline.get_completer()
    previous_delims = readline.get_completer_delims()
    matches: list[str] = []

    def completer(text: str, state: int) -> Optional[str]:
        if state == 0:
            matches[:] = complete_path(text)
        return matches[state] if state < len(matches) else None

    readline.set_completer(completer)
    # Whole line is one path; `/` must not split it
    readline.set_completer_delims("\t\n")
    readline.parse_and_bind("tab: complete")
    try:
        yield
    finally:
        readline.set_completer(previous_completer)
        readline.set_completer_delims(previous_delims)


def prompt_for_path() -> str:
    """Ask for a starting path on the terminal; empty input means `.`."""
    with _path_completion():
        try:
            answer = Prompt.ask(PROMPT_TEXT, default="", show_default=False)
        except EOFError:
            logger.debug("No input for the start path prompt, using '.'")
            answer = ""
    return answer.strip() or "."


def resolve_start_path(
    argument: Optional[str],
    path_option: Optional[str],
    prompt: Callable[[], str] = prompt_for_path,
) -> str:
    """Pick the raw starting path: positional argument, then --path, then the prompt."""
    if argument:
        return argument
    if path_option:
        return path_option
    return prompt()


def validate_start_path(raw: str) -> Path:
    """Resolve a raw path to an absolute directory.

    Raises:
        StartPathError: If the path does not exist or is not a directory
    """
    path = Path(raw).expanduser().resolve()

    if not path.exists():
        raise StartPathError(f'Error: The path "{path}" does not exist.')

    if not path.is_dir():
        raise StartPathError(f'Error: "{path}" is not a directory.')

    return path
