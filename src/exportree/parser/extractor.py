"""Exported-name extractor using tree-sitter."""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Union

from tree_sitter_language_pack import get_parser

from .declarations import DeclarationKind, collect_names
from .languages import DialectSpec, DIALECT_REGISTRY, dialect_for_path

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _parser_for(ts_language: str):
    return get_parser(ts_language)


def extract_exports(content: str, dialect: str, filename: str = "<source>") -> list[str]:
    """Parse source code and collect the names it exports.

    Args:
        content: Raw source code
        dialect: Dialect name (must be in DIALECT_REGISTRY)
        filename: File name used in log messages

    Returns:
        Exported names in document order, duplicates kept. Empty when the
        dialect is unknown or the source does not parse cleanly.
    """
    if dialect not in DIALECT_REGISTRY:
        return []

    spec = DIALECT_REGISTRY[dialect]
    source_bytes = content.encode("utf-8")

    tree = _parser_for(spec.ts_language).parse(source_bytes)

    if tree.root_node.has_error:
        logger.warning("Skipping exports of %s: syntax errors while parsing as %s", filename, dialect)
        return []

    exports: list[str] = []
    _walk_tree(tree.root_node, spec, source_bytes, exports)

    return exports


def parse_exports(path: Union[str, Path]) -> list[str]:
    """Read a file and extract its exports using the dialect of its extension.

    Raises:
        OSError: If the file cannot be read
    """
    path = Path(path)
    dialect = dialect_for_path(path.name)
    if not dialect:
        return []

    content = path.read_text(encoding="utf-8", errors="replace")
    return extract_exports(content, dialect, filename=str(path))


def _walk_tree(root, spec: DialectSpec, source_bytes: bytes, exports: list):
    """Walk the whole AST depth-first in document order collecting exported names.

    Uses an explicit stack; minified bundles nest deeper than the recursion limit.
    """
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "export_statement":
            exports.extend(_exported_names(node, spec, source_bytes))

        # Nested export statements (namespace and module bodies) count too
        stack.extend(reversed(node.children))


def _exported_names(node, spec: DialectSpec, source_bytes: bytes) -> list[str]:
    """Names contributed by one export statement."""
    declaration = node.child_by_field_name("declaration")

    if declaration is None:
        value = node.child_by_field_name("value")
        if value is not None:
            # export default <expression>; only named classes/functions count
            kind = spec.default_value_node_types.get(value.type)
            return collect_names(kind, value, source_bytes)
        # export { ... } / export * from
        return collect_names(DeclarationKind.EXPORT_LIST, node, source_bytes)

    declaration = _unwrap(declaration, spec)
    if declaration is None:
        return []

    kind = spec.declaration_node_types.get(declaration.type)
    return collect_names(kind, declaration, source_bytes)


def _unwrap(declaration, spec: DialectSpec):
    """Strip wrappers such as `declare` down to the real declaration."""
    while declaration is not None and declaration.type in spec.wrapper_node_types:
        declaration = next(
            (
                child for child in declaration.named_children
                if child.type in spec.declaration_node_types
                or child.type in spec.wrapper_node_types
            ),
            None,
        )
    return declaration
