"""
Literal Analyzer - inventory and diagnostics for a composite literal.

This module provides a read-only look at how a literal was written:
    - Field counts (NULL, empty string, quoted)
    - Fields that are themselves composite literals (nesting via strings)
    - Whether the text is already in canonical form
    - Warning flags for quoting that differs from canonical output

IMPORTANT: Format errors from the parser are not caught here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from rowliteral.grammar import needs_quoting
from rowliteral.model import Field, Segment
from rowliteral.parser import scan
from rowliteral.serializer import serialize
from rowliteral.validator import validate


@dataclass
class LiteralReport:
    """Analysis report for a single literal."""

    text: str
    total_fields: int = 0
    null_fields: int = 0
    empty_fields: int = 0
    quoted_fields: int = 0

    # Indices of text fields whose content is itself a composite literal
    nested_fields: List[int] = field(default_factory=list)

    is_canonical: bool = False
    canonical_text: str = ""

    fields: List[Field] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)


def _check_quoting(report: LiteralReport, index: int, segment: Segment) -> None:
    if segment.value is None:
        return
    required = needs_quoting(segment.value)
    if segment.quoted and not required:
        report.add_warning(f"Field {index} is quoted but does not need to be")
    elif not segment.quoted and required:
        # Unquoted whitespace, quotes or backslashes are read raw
        report.add_warning(f"Field {index} contains characters that should be quoted")


def analyze_literal(text: str) -> LiteralReport:
    """
    Analyze a composite literal.

    Returns a LiteralReport with counts, nesting hints and warnings.

    Raises:
        TypeError: If text is not a str
        FormatError: If text is not a well-formed literal
    """
    report = LiteralReport(text=text)

    for index, segment in enumerate(scan(text)):
        report.fields.append(segment.value)
        report.total_fields += 1

        if segment.value is None:
            report.null_fields += 1
        elif segment.value == "":
            report.empty_fields += 1

        if segment.quoted:
            report.quoted_fields += 1

        if segment.value and validate(segment.value):
            report.nested_fields.append(index)
            report.add_warning(f"Field {index} holds a nested composite literal")

        _check_quoting(report, index, segment)

    report.canonical_text = serialize(report.fields)
    report.is_canonical = report.canonical_text == text

    if not report.is_canonical:
        report.add_warning("Literal is not in canonical form")

    return report


__all__ = ["LiteralReport", "analyze_literal"]
