"""Parser package for extracting exported names from source code."""

from .declarations import DeclarationKind, collect_names
from .languages import DialectSpec, DIALECT_REGISTRY, DIALECT_EXTENSIONS, dialect_for_path
from .extractor import extract_exports, parse_exports

__all__ = [
    "DeclarationKind",
    "collect_names",
    "DialectSpec",
    "DIALECT_REGISTRY",
    "DIALECT_EXTENSIONS",
    "dialect_for_path",
    "extract_exports",
    "parse_exports",
]
