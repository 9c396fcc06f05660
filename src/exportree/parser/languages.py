"""Dialect registry with DialectSpec definitions for the ECMAScript family."""

import os
from dataclasses import dataclass
from typing import Optional

from .declarations import DeclarationKind


@dataclass
class DialectSpec:
    """Specification for finding exported declarations in a dialect's AST."""
    # tree-sitter language name (for tree-sitter-language-pack)
    ts_language: str

    # Node types that may appear as the declaration of an export statement
    # Maps node_type -> declaration kind
    declaration_node_types: dict[str, DeclarationKind]

    # Node types that wrap the real declaration (e.g. `declare function f()`)
    wrapper_node_types: list[str]

    # Named expressions after `export default` that count as declarations
    # Maps node_type -> declaration kind
    default_value_node_types: dict[str, DeclarationKind]


# File extension to dialect mapping
DIALECT_EXTENSIONS = {
    ".js": "javascript",
    ".jsx": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".tsx": "tsx",
}


_SHARED_DECLARATIONS = {
    "function_declaration": DeclarationKind.FUNCTION,
    "generator_function_declaration": DeclarationKind.FUNCTION,
    "lexical_declaration": DeclarationKind.VARIABLE,
    "variable_declaration": DeclarationKind.VARIABLE,
    "class_declaration": DeclarationKind.CLASS,
}

_TYPESCRIPT_DECLARATIONS = {
    **_SHARED_DECLARATIONS,
    # Overloads and ambient functions have no body
    "function_signature": DeclarationKind.FUNCTION,
    "abstract_class_declaration": DeclarationKind.CLASS,
    "interface_declaration": DeclarationKind.INTERFACE,
    "type_alias_declaration": DeclarationKind.TYPE_ALIAS,
}

# `export default class C {}` may parse as a value rather than a declaration
_DEFAULT_VALUES = {
    "class": DeclarationKind.CLASS,
    "function": DeclarationKind.FUNCTION,
    "function_expression": DeclarationKind.FUNCTION,
    "generator_function": DeclarationKind.FUNCTION,
}


# JavaScript specification
JAVASCRIPT_SPEC = DialectSpec(
    ts_language="javascript",
    declaration_node_types=dict(_SHARED_DECLARATIONS),
    wrapper_node_types=[],
    default_value_node_types=_DEFAULT_VALUES,
)


# TypeScript specification
TYPESCRIPT_SPEC = DialectSpec(
    ts_language="typescript",
    declaration_node_types=_TYPESCRIPT_DECLARATIONS,
    wrapper_node_types=["ambient_declaration"],
    default_value_node_types=_DEFAULT_VALUES,
)


# TSX is TypeScript with JSX; tree-sitter ships it as a separate grammar
TSX_SPEC = DialectSpec(
    ts_language="tsx",
    declaration_node_types=_TYPESCRIPT_DECLARATIONS,
    wrapper_node_types=["ambient_declaration"],
    default_value_node_types=_DEFAULT_VALUES,
)


# Dialect registry
DIALECT_REGISTRY = {
    "javascript": JAVASCRIPT_SPEC,
    "typescript": TYPESCRIPT_SPEC,
    "tsx": TSX_SPEC,
}


def dialect_for_path(path: str) -> Optional[str]:
    """Return the dialect for a file name, or None when it is not analysed."""
    _, ext = os.path.splitext(path)
    return DIALECT_EXTENSIONS.get(ext)
