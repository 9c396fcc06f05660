"""Tests for the export extractor."""

import pytest
from exportree.parser import extract_exports, parse_exports


TYPESCRIPT_SOURCE = '''
export function foo() {}
export const bar = 1, baz = 2;
export class Qux {}
export interface I {}
export type T = string;
export { a, b };
'''


def test_extract_every_declaration_shape_in_document_order():
    """Test that each exported shape contributes, in order of appearance."""
    exports = extract_exports(TYPESCRIPT_SOURCE, "typescript")
    assert exports == ["foo", "bar", "baz", "Qux", "I", "T", "a", "b"]


def test_no_exports_yields_empty_list():
    """Test that a file without export markers has no exports."""
    source = '''
const internal = 1;
function helper() { return internal; }
class Hidden {}
interface Shape { area(): number }
'''
    assert extract_exports(source, "typescript") == []


def test_export_list_uses_alias_and_reexports():
    """Test that aliased specifiers contribute their exported name."""
    source = '''
export { a as b, c } from "./m";
export type { Options } from "./options";
export * from "./everything";
export * as ns from "./namespaced";
'''
    assert extract_exports(source, "typescript") == ["b", "c", "Options"]


def test_destructured_bindings_are_not_expanded():
    """Test that only plain identifier declarators are taken."""
    source = '''
export const { x, y } = point;
export let first = 1, [second] = pair;
'''
    assert extract_exports(source, "typescript") == ["first"]


def test_nested_exports_are_found():
    """Test that exports inside namespace bodies are collected depth-first."""
    source = '''
export namespace Shapes {
    export const circle = 1;
    export function square() {}
}
export const after = 2;
'''
    assert extract_exports(source, "typescript") == ["circle", "square", "after"]


def test_duplicates_are_kept():
    """Test that overload signatures each contribute the function name."""
    source = '''
export function over(a: string): void;
export function over(a: number): void;
export function over(a: any) {}
'''
    assert extract_exports(source, "typescript") == ["over", "over", "over"]


def test_ambient_and_default_declarations():
    """Test declare-wrapped and default-exported declarations."""
    source = '''
export declare function ambient(): void;
export declare const version: string;
export abstract class Base {}
export default function main() {}
'''
    assert extract_exports(source, "typescript") == ["ambient", "version", "Base", "main"]


def test_shapes_that_contribute_nothing():
    """Test that enums and default expressions are not reported."""
    source = '''
export enum Color { Red, Green }
export default 42;
'''
    assert extract_exports(source, "typescript") == []


def test_syntax_error_yields_empty_list():
    """Test that an unparsable file degrades to no exports."""
    source = "export const = ;\nexport function ((( {\n"
    assert extract_exports(source, "typescript") == []


def test_unknown_dialect_returns_empty():
    """Test that unknown dialects return empty list."""
    assert extract_exports("export const a = 1;", "python") == []


def test_parse_exports_reads_file(tmp_path):
    """Test that parse_exports picks the dialect from the extension."""
    source_file = tmp_path / "module.ts"
    source_file.write_text("export type Id = string;\nexport const make = () => 1;\n")

    assert parse_exports(source_file) == ["Id", "make"]


def test_parse_exports_ignores_other_extensions(tmp_path):
    """Test that non-ECMAScript files are not analysed."""
    other = tmp_path / "notes.md"
    other.write_text("export const a = 1;\n")

    assert parse_exports(other) == []


def test_parse_exports_missing_file_raises(tmp_path):
    """Test that read failures propagate to the caller."""
    with pytest.raises(OSError):
        parse_exports(tmp_path / "missing.ts")
