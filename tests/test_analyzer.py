"""
Tests for the literal analyzer.
"""

import pytest

from rowliteral.analyzer import analyze_literal
from rowliteral.errors import FormatError


def test_counts():
    report = analyze_literal('(1,,"","a b")')
    assert report.total_fields == 4
    assert report.null_fields == 1
    assert report.empty_fields == 1
    assert report.quoted_fields == 2
    assert report.fields == ["1", None, "", "a b"]


def test_canonical_literal_has_no_warnings():
    report = analyze_literal('(1,,"","a b")')
    assert report.is_canonical
    assert report.canonical_text == '(1,,"","a b")'
    assert report.warnings == []


def test_unneeded_quotes():
    report = analyze_literal('("a",b)')
    assert not report.is_canonical
    assert report.canonical_text == "(a,b)"
    assert "Field 0 is quoted but does not need to be" in report.warnings
    assert "Literal is not in canonical form" in report.warnings


def test_missing_quotes():
    report = analyze_literal("(a b)")
    assert not report.is_canonical
    assert "Field 0 contains characters that should be quoted" in report.warnings


def test_nested_fields():
    report = analyze_literal('(x,"(1,2)","()",)')
    assert report.nested_fields == [1, 2]
    assert "Field 1 holds a nested composite literal" in report.warnings
    assert "Field 2 holds a nested composite literal" in report.warnings
    assert "Field 0 holds a nested composite literal" not in report.warnings


def test_empty_parens():
    report = analyze_literal("()")
    assert report.total_fields == 1
    assert report.null_fields == 1
    assert report.is_canonical


def test_warnings_are_deduplicated():
    report = analyze_literal('("a","b")')
    assert report.warnings.count("Literal is not in canonical form") == 1


def test_format_errors_propagate():
    with pytest.raises(FormatError):
        analyze_literal("(1,2")


def test_plain_literal_has_no_nesting_hint():
    report = analyze_literal("(1,abc)")
    assert report.nested_fields == []
    assert not any("nested" in w for w in report.warnings)
