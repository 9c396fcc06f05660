"""Exported declaration kinds and the name collector for each kind."""

from enum import Enum
from typing import Callable, Optional


class DeclarationKind(Enum):
    """Declaration shapes that contribute names when exported."""
    EXPORT_LIST = "export_list"     # export { a, b as c }
    FUNCTION = "function"           # export function f() {}
    VARIABLE = "variable"           # export const a = 1, b = 2
    CLASS = "class"                 # export class C {}
    INTERFACE = "interface"         # export interface I {}
    TYPE_ALIAS = "type_alias"       # export type T = string


def node_text(node, source_bytes: bytes) -> str:
    """Return the source text covered by a node."""
    return source_bytes[node.start_byte:node.end_byte].decode("utf-8")


def _module_export_name(node, source_bytes: bytes) -> str:
    """Name of an export specifier part; string literals lose their quotes."""
    if node.type == "string":
        for child in node.named_children:
            if child.type == "string_fragment":
                return node_text(child, source_bytes)
        return node_text(node, source_bytes)[1:-1]
    return node_text(node, source_bytes)


def _collect_export_list(node, source_bytes: bytes) -> list[str]:
    names = []
    for child in node.named_children:
        if child.type != "export_clause":
            continue
        for specifier in child.named_children:
            if specifier.type != "export_specifier":
                continue
            # The exported name is the alias when one is given
            name_node = specifier.child_by_field_name("alias") or specifier.child_by_field_name("name")
            if name_node:
                names.append(_module_export_name(name_node, source_bytes))
    return names


def _collect_named(node, source_bytes: bytes) -> list[str]:
    name_node = node.child_by_field_name("name")
    if name_node is None:
        return []
    return [node_text(name_node, source_bytes)]


def _collect_variables(node, source_bytes: bytes) -> list[str]:
    names = []
    for declarator in node.named_children:
        if declarator.type != "variable_declarator":
            continue
        name_node = declarator.child_by_field_name("name")
        # Destructuring patterns are not expanded
        if name_node is not None and name_node.type == "identifier":
            names.append(node_text(name_node, source_bytes))
    return names


NAME_COLLECTORS: dict[DeclarationKind, Callable[..., list[str]]] = {
    DeclarationKind.EXPORT_LIST: _collect_export_list,
    DeclarationKind.FUNCTION: _collect_named,
    DeclarationKind.VARIABLE: _collect_variables,
    DeclarationKind.CLASS: _collect_named,
    DeclarationKind.INTERFACE: _collect_named,
    DeclarationKind.TYPE_ALIAS: _collect_named,
}


def collect_names(kind: Optional[DeclarationKind], node, source_bytes: bytes) -> list[str]:
    """Dispatch a declaration node to the collector for its kind.

    Args:
        kind: Declaration kind of ``node``, or None for shapes that never
            contribute (enums, namespaces, default expressions...)
        node: tree-sitter node of the declaration (or the export statement
            itself for export lists)
        source_bytes: Raw source the tree was parsed from

    Returns:
        Names contributed by the node, in document order
    """
    if kind is None:
        return []
    return NAME_COLLECTORS[kind](node, source_bytes)
