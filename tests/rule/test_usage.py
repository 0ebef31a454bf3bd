"""Tests for rule/usage.py - declaration and reference collection."""

from __future__ import annotations

from collections.abc import Callable

from inlinetypes.parsing.treesitter import SourceFile
from inlinetypes.rule.models import DeclarationKind
from inlinetypes.rule.usage import collect_usage


class TestDeclarations:
    """Declaration recording."""

    def test_alias_and_interface_recorded(self, parse: Callable[..., SourceFile]) -> None:
        """Both declaration shapes land in the index with a zero count."""
        # Given
        source = parse("type A = string;\ninterface B { x: number }\n")

        # When
        index = collect_usage(source)

        # Then
        assert index.declarations["A"].kind is DeclarationKind.ALIAS
        assert index.declarations["B"].kind is DeclarationKind.INTERFACE
        assert index.counts == {"A": 0, "B": 0}

    def test_body_ranges(self, parse: Callable[..., SourceFile]) -> None:
        """Alias body is the right-hand side; interface body keeps its braces."""
        text = "type A = { a: 1 };\ninterface B { b: 2 }\n"
        index = collect_usage(parse(text))

        a_body = index.declarations["A"].body_range
        b_body = index.declarations["B"].body_range
        assert a_body is not None and b_body is not None
        assert text[a_body.start : a_body.end] == "{ a: 1 }"
        assert text[b_body.start : b_body.end] == "{ b: 2 }"

    def test_generic_declarations_not_recorded(self, parse: Callable[..., SourceFile]) -> None:
        index = collect_usage(parse("type Box<T> = { v: T };\ninterface I<T> { v: T }\n"))

        assert index.declarations == {}

    def test_export_statement_marks_exported(self, parse: Callable[..., SourceFile]) -> None:
        index = collect_usage(parse("export type A = string;\ntype B = number;\n"))

        assert index.declarations["A"].is_exported is True
        assert index.declarations["B"].is_exported is False

    def test_export_clause_names(self, parse: Callable[..., SourceFile]) -> None:
        """Only clauses without ``from`` name local declarations."""
        index = collect_usage(
            parse("type A = 1;\ntype B = 2;\nexport { A };\nexport { B } from './b';\n")
        )

        assert index.exported_names == {"A"}

    def test_statement_range_is_program_level(self, parse: Callable[..., SourceFile]) -> None:
        """A declaration nested in a namespace is deleted with its namespace statement."""
        text = "namespace N {\n  type A = string;\n}\n"
        index = collect_usage(parse(text))

        statement = index.declarations["A"].statement_range
        assert statement.start == 0
        assert statement.contains(index.declarations["A"].source_range)
        assert statement.end > index.declarations["A"].source_range.end

    def test_interface_extends_has_no_body(self, parse: Callable[..., SourceFile]) -> None:
        index = collect_usage(parse("interface A extends B { a: 1 }\n"))

        assert index.declarations["A"].body_range is None

    def test_last_declaration_wins(self, parse: Callable[..., SourceFile]) -> None:
        text = "type A = 1;\ntype A = 2;\n"
        index = collect_usage(parse(text))

        body = index.declarations["A"].body_range
        assert body is not None
        assert text[body.start : body.end] == "2"


class TestReferences:
    """Reference counting."""

    def test_counts_every_type_position(self, parse: Callable[..., SourceFile]) -> None:
        """Generic arguments, unions, arrays and return types all count."""
        # Given
        source = parse(
            "type A = string;\n"
            "let x: A;\n"
            "function f(a: Array<A>, b: A | null): A[] { return []; }\n"
        )

        # When
        index = collect_usage(source)

        # Then
        assert index.usage_count("A") == 4
        assert len(index.references["A"]) == 4

    def test_declaring_names_not_counted(self, parse: Callable[..., SourceFile]) -> None:
        """Declaration, class and type parameter names introduce rather than use."""
        index = collect_usage(parse("type A = string;\nclass C<T> {}\n"))

        assert index.usage_count("A") == 0
        assert index.usage_count("C") == 0
        assert index.usage_count("T") == 0

    def test_qualified_name_not_counted(self, parse: Callable[..., SourceFile]) -> None:
        index = collect_usage(parse("type A = string;\nlet x: NS.A;\n"))

        assert index.usage_count("A") == 0

    def test_infer_introduces_name(self, parse: Callable[..., SourceFile]) -> None:
        index = collect_usage(parse("type Unwrap<X> = X extends Promise<infer U> ? U : X;\n"))

        # ``infer U`` declares U; the true branch uses it once
        assert index.usage_count("U") == 1

    def test_self_reference_counts(self, parse: Callable[..., SourceFile]) -> None:
        index = collect_usage(parse("type Tree = { kids: Tree[] };\n"))

        assert index.usage_count("Tree") == 1

    def test_undeclared_names_counted(self, parse: Callable[..., SourceFile]) -> None:
        """References to unknown names are tracked but never reported."""
        index = collect_usage(parse("let x: External;\n"))

        assert index.usage_count("External") == 1
        assert "External" not in index.declarations

    def test_reference_ancestors(self, parse: Callable[..., SourceFile]) -> None:
        index = collect_usage(parse("function f(p: A) {}\n"))

        (reference,) = index.references["A"]
        assert reference.ancestors[0].type == "program"
        assert reference.parent.type == "type_annotation"
