"""Tests for dialect detection and dialect-specific parsing."""

import pytest
from exportree.parser import dialect_for_path, extract_exports


@pytest.mark.parametrize("name,dialect", [
    ("index.ts", "typescript"),
    ("types.d.ts", "typescript"),
    ("esm.mts", "typescript"),
    ("App.tsx", "tsx"),
    ("main.js", "javascript"),
    ("View.jsx", "javascript"),
    ("config.cjs", "javascript"),
    ("README.md", None),
    ("Makefile", None),
])
def test_dialect_for_path(name, dialect):
    """Test extension to dialect mapping."""
    assert dialect_for_path(name) == dialect


JAVASCRIPT_SOURCE = '''
import { helper } from "./helper";

export class Widget {}
export function* ids() { yield 1; }
export var legacy = helper();
export const View = () => <p>hello</p>;
'''


def test_parse_javascript():
    """Test JavaScript parsing, including JSX."""
    assert extract_exports(JAVASCRIPT_SOURCE, "javascript") == ["Widget", "ids", "legacy", "View"]


TSX_SOURCE = '''
export interface Props {
    title: string;
}

export function Header({ title }: Props) {
    return <h1>{title}</h1>;
}

export default class Page {}
'''


def test_parse_tsx():
    """Test TSX parsing keeps TypeScript declarations."""
    assert extract_exports(TSX_SOURCE, "tsx") == ["Props", "Header", "Page"]
