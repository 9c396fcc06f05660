"""Render a directory as a tree annotated with each source file's exports."""

import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterator, Optional, Union

from rich.text import Text

from ..parser import dialect_for_path, parse_exports
from .ignore import IgnoreRules

logger = logging.getLogger(__name__)


# Connector glyphs and the continuation prefixes handed to children
BRANCH = "├── "
CORNER = "└── "
PIPE = "│   "
BLANK = "    "


class EntryKind(Enum):
    DIRECTORY = "directory"
    FILE = "file"
    OTHER = "other"     # symlinks, sockets, fifos; listed but never followed


ENTRY_STYLES = {
    EntryKind.DIRECTORY: "blue",
    EntryKind.FILE: "green",
    EntryKind.OTHER: "magenta",
}
EXPORTS_LABEL_STYLE = "yellow"
EXPORT_STYLE = "cyan"
ERROR_STYLE = "red"


@dataclass(frozen=True)
class TreeConfig:
    """Settings threaded through one traversal."""
    ignore: IgnoreRules = field(default_factory=IgnoreRules.from_patterns)
    max_depth: Optional[int] = None     # None = unbounded


def display_name(name: str) -> str:
    """Make a file-system name printable.

    Bytes that are not valid UTF-8 come back from the OS as surrogate
    escapes, which no console can encode; they are shown as U+FFFD.
    """
    return name.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def render_tree(root: Union[str, Path], config: Optional[TreeConfig] = None) -> Iterator[Text]:
    """Yield the lines of the tree below ``root``, one styled Text per line.

    Directories deeper than ``config.max_depth`` are named but not opened.
    Entries that cannot be listed or read produce an inline ``[error: ...]``
    line and traversal carries on with the next entry.

    Args:
        root: Directory to start from (depth 0)
        config: Ignore rules and depth limit; defaults apply when omitted

    Yields:
        rich Text lines, without trailing newlines
    """
    config = config or TreeConfig()
    yield from _render_directory(Path(root), config, prefix="", depth=0)


def _render_directory(directory: Path, config: TreeConfig, prefix: str, depth: int) -> Iterator[Text]:
    if config.max_depth is not None and depth > config.max_depth:
        return

    try:
        entries = _list_entries(directory, config.ignore)
    except OSError as e:
        logger.warning("Cannot list %s: %s", directory, e)
        yield _error_line(prefix, e)
        return

    for index, entry in enumerate(entries):
        is_last = index == len(entries) - 1
        connector = CORNER if is_last else BRANCH
        child_prefix = prefix + (BLANK if is_last else PIPE)
        kind = _entry_kind(entry)

        yield Text.assemble(prefix + connector, (display_name(entry.name), ENTRY_STYLES[kind]))

        if kind is EntryKind.DIRECTORY:
            yield from _render_directory(Path(entry.path), config, child_prefix, depth + 1)
        elif kind is EntryKind.FILE and dialect_for_path(entry.name):
            yield from _render_exports(Path(entry.path), child_prefix + BLANK)


def _render_exports(path: Path, indent: str) -> Iterator[Text]:
    try:
        exports = parse_exports(path)
    except OSError as e:
        logger.warning("Cannot read %s: %s", path, e)
        yield _error_line(indent, e)
        return

    if not exports:
        return

    yield Text.assemble(indent, ("Exports:", EXPORTS_LABEL_STYLE))
    for index, name in enumerate(exports):
        connector = CORNER if index == len(exports) - 1 else BRANCH
        yield Text.assemble(indent, (connector + name, EXPORT_STYLE))


def _list_entries(directory: Path, ignore: IgnoreRules) -> list[os.DirEntry]:
    """Non-ignored entries of a directory, sorted by name."""
    with os.scandir(directory) as it:
        entries = [entry for entry in it if not ignore.matches(entry.name)]
    entries.sort(key=lambda entry: entry.name)
    return entries


def _entry_kind(entry: os.DirEntry) -> EntryKind:
    if entry.is_symlink():
        return EntryKind.OTHER
    if entry.is_dir(follow_symlinks=False):
        return EntryKind.DIRECTORY
    if entry.is_file(follow_symlinks=False):
        return EntryKind.FILE
    return EntryKind.OTHER


def _error_line(indent: str, error: OSError) -> Text:
    reason = error.strerror or str(error)
    return Text.assemble(indent, (f"[error: {reason}]", ERROR_STYLE))
