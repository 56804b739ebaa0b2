"""
Composite Literal Serializer (Fields → Text).

Produces the canonical literal for a sequence of fields: quotes are
added only where the value would otherwise be ambiguous.

    serialize(['1', None, 'a,b', ''])  ->  '(1,,"a,b","")'

Per field:
    None                -> nothing
    ""                  -> ""
    needs quoting       -> "..." with every " and \\ doubled
    anything else       -> verbatim

Output always parses back to the same fields.
"""

from typing import Iterable, List, Optional

from rowliteral.errors import EmptyInputError
from rowliteral.grammar import OPEN, CLOSE, SEPARATOR, QUOTE, escape, needs_quoting
from rowliteral.model import EmptyPolicy, Field
from rowliteral.parser import parse


def serialize_field(value: Field) -> str:
    """Render a single field as it appears between delimiters."""
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"Composite field must be str or None, not {type(value).__name__}")
    if needs_quoting(value):
        return QUOTE + escape(value) + QUOTE
    return value


def serialize(
    fields: Iterable[Field],
    policy: EmptyPolicy = EmptyPolicy.STRICT,
) -> Optional[str]:
    """
    Serialize fields into a composite literal.

    Args:
        fields: Any finite iterable of None / str, consumed once
        policy: What to do when fields is empty

    Returns:
        Composite literal, or None for empty input under EmptyPolicy.NULL

    Raises:
        EmptyInputError: If fields is empty under EmptyPolicy.STRICT
        TypeError: If a field is neither None nor str
    """
    parts = [serialize_field(value) for value in fields]

    if not parts:
        if policy is EmptyPolicy.NULL:
            return None
        raise EmptyInputError("expected at least one field")

    return _join(parts)


def _join(parts: List[str]) -> str:
    return OPEN + SEPARATOR.join(parts) + CLOSE


def canonicalize(text: str) -> str:
    """
    Rewrite a literal in canonical form.

    '("a",  b)' is accepted by the parser but written back as '(a,"  b")'.
    A parsed literal always has at least one field, so the empty policy
    never applies here.
    """
    return _join([serialize_field(value) for value in parse(text)])


__all__ = [
    "serialize",
    "serialize_field",
    "canonicalize",
]
