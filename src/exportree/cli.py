"""Command-line interface for exportree."""

import logging
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from .tools.ignore import DEFAULT_IGNORE_PATTERNS, IgnoreRules, InvalidIgnorePattern
from .tools.render_tree import TreeConfig, display_name, render_tree
from .tools.resolve_path import StartPathError, prompt_for_path, resolve_start_path, validate_start_path

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="exportree",
    help="Print a directory tree listing the exports of each JavaScript/TypeScript file.",
    add_completion=False,
)
console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False, show_time=False)],
    )


@app.command()
def tree(
    start: Optional[str] = typer.Argument(None, help="Directory to start from (overrides --path)"),
    path: Optional[str] = typer.Option(None, "--path", "-p", help="Path to start from (default: .)"),
    depth: Optional[int] = typer.Option(None, "--depth", "-d", min=0, help="Maximum depth to traverse"),
    ignore: Optional[List[str]] = typer.Option(
        None,
        "--ignore",
        "-i",
        help=f"Regex of entry names to ignore, repeatable; always added to: {', '.join(DEFAULT_IGNORE_PATTERNS)}",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """
    Print the tree of a directory with the exports of each source file.

    Examples:
        exportree ./src
        exportree -p ./packages --depth 2 -i dist -i "\\.d\\.ts$"
    """
    _configure_logging(verbose)

    try:
        rules = IgnoreRules.from_patterns(ignore)
    except InvalidIgnorePattern as e:
        raise typer.BadParameter(str(e), param_hint="'--ignore'") from e

    raw_path = resolve_start_path(start, path, prompt=prompt_for_path)

    try:
        root = validate_start_path(raw_path)
    except StartPathError as e:
        err_console.print(Text(display_name(str(e)), style="red"), soft_wrap=True)
        raise typer.Exit(1)

    logger.debug("Ignore patterns: %s", [p.pattern for p in rules.patterns])

    console.print(Text(f"Generating tree for: {display_name(str(root))}", style="bold"), soft_wrap=True)
    for line in render_tree(root, TreeConfig(ignore=rules, max_depth=depth)):
        console.print(line, soft_wrap=True)


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
