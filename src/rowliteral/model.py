"""
Core Literal Model

Defines the values exchanged by the parser and the serializer.

    - Field: None (SQL NULL) or str (text, possibly empty)
    - Segment: one scanned field plus where and how it was written
    - EmptyPolicy: what serializing zero fields produces

ARCHITECTURAL RULE:
    None and "" are different values.
    An empty unquoted field is NULL; an empty string is written as "".
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

Field = Optional[str]


@dataclass(frozen=True)
class Segment:
    """
    A single field as found in the source text.

    Properties:
        value: Decoded field (None for NULL)
        quoted: Whether the field was written between double quotes
        start: Offset of the first character of the field
        end: Offset just past the last character of the field

    For a NULL field start == end.
    """

    value: Field
    quoted: bool
    start: int
    end: int


class EmptyPolicy(Enum):
    """
    Outcome of serializing a sequence with no fields.

    STRICT: raise EmptyInputError
    NULL: return None instead of a literal
    """

    STRICT = "strict"
    NULL = "null"
