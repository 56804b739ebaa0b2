"""
Composite Literal Parser (Text → Fields).

Scans a composite literal left to right and hands out its fields one
at a time:

    list(parse('(1,,"a,b","")'))  ->  ['1', None, 'a,b', '']

Semantics:
    - Lazy: nothing past the current field is looked at until asked for
    - Single pass: a reader cannot be restarted
    - Errors are raised when iteration reaches the faulty position, so a
      caller consuming only a prefix may never see them

The parser is single-level. A nested composite is just a text field
whose content can be fed to parse() again.
"""

from enum import Enum
from typing import Iterator, Optional

from rowliteral.errors import FormatError, FormatErrorReason
from rowliteral.grammar import (
    OPEN,
    CLOSE,
    SEPARATOR,
    QUOTE,
    FIELD_TERMINATORS,
    unescape,
)
from rowliteral.model import Field, Segment


class _State(Enum):
    START = "start"
    FIELD = "field"
    DELIMITER = "delimiter"
    DONE = "done"


class SegmentReader:
    """
    Pull-based scanner producing one Segment per field.

    Each call to next() first settles the delimiter left behind by the
    previous field, then reads the next field.
    """

    def __init__(self, text: str):
        if not isinstance(text, str):
            raise TypeError(f"Composite literal must be str, not {type(text).__name__}")
        self._text = text
        self._pos = 0
        self._state = _State.START

    def __iter__(self) -> "SegmentReader":
        return self

    def __next__(self) -> Segment:
        if self._state is _State.DONE:
            raise StopIteration
        try:
            if self._state is _State.START:
                self._open()
            elif self._state is _State.DELIMITER:
                self._delimiter()
                if self._state is _State.DONE:
                    raise StopIteration
            segment = self._field()
        except FormatError:
            self._state = _State.DONE
            raise
        self._state = _State.DELIMITER
        return segment

    def _fail(self, reason: FormatErrorReason, position: Optional[int] = None) -> FormatError:
        return FormatError(reason, self._pos if position is None else position)

    def _open(self) -> None:
        if not self._text.startswith(OPEN):
            raise self._fail(FormatErrorReason.MISSING_OPEN, 0)
        self._pos = 1
        self._state = _State.FIELD

    def _delimiter(self) -> None:
        if self._pos >= len(self._text):
            raise self._fail(FormatErrorReason.UNEXPECTED_END)

        char = self._text[self._pos]
        if char == SEPARATOR:
            self._pos += 1
            self._state = _State.FIELD
        elif char == CLOSE:
            if self._pos + 1 != len(self._text):
                raise self._fail(FormatErrorReason.TRAILING_CONTENT, self._pos + 1)
            self._pos += 1
            self._state = _State.DONE
        else:
            # Unquoted and NULL fields stop on a delimiter, so only a
            # quoted field can leave anything else behind.
            raise self._fail(FormatErrorReason.UNEXPECTED_AFTER_QUOTE)

    def _field(self) -> Segment:
        if self._pos >= len(self._text):
            raise self._fail(FormatErrorReason.UNEXPECTED_END)

        char = self._text[self._pos]
        if char in FIELD_TERMINATORS:
            return Segment(value=None, quoted=False, start=self._pos, end=self._pos)
        if char == QUOTE:
            return self._quoted_field()
        return self._unquoted_field()

    def _quoted_field(self) -> Segment:
        text = self._text
        start = self._pos
        i = start + 1

        # A quote followed by another quote is a doubled (escaped) quote;
        # the first lone quote closes the field.
        while i < len(text):
            if text[i] == QUOTE:
                if i + 1 < len(text) and text[i + 1] == QUOTE:
                    i += 2
                    continue
                break
            i += 1
        else:
            raise self._fail(FormatErrorReason.UNTERMINATED_QUOTE, start)

        self._pos = i + 1
        return Segment(value=unescape(text[start + 1:i]), quoted=True, start=start, end=i + 1)

    def _unquoted_field(self) -> Segment:
        text = self._text
        start = self._pos
        end = start
        while end < len(text) and text[end] not in FIELD_TERMINATORS:
            end += 1
        if end >= len(text):
            raise self._fail(FormatErrorReason.UNEXPECTED_END, end)

        self._pos = end
        return Segment(value=text[start:end], quoted=False, start=start, end=end)


class FieldReader:
    """Iterator of decoded fields (None or str) over a composite literal."""

    def __init__(self, text: str):
        self._segments = SegmentReader(text)

    def __iter__(self) -> "FieldReader":
        return self

    def __next__(self) -> Field:
        return next(self._segments).value


def scan(text: str) -> SegmentReader:
    """
    Scan a composite literal into Segments.

    Args:
        text: Composite literal, e.g. '(1,"a b",)'

    Returns:
        SegmentReader yielding one Segment per field

    Raises:
        TypeError: If text is not a str (raised immediately)
        FormatError: While iterating, when a malformed construct is reached
    """
    return SegmentReader(text)


def parse(text: str) -> Iterator[Field]:
    """
    Parse a composite literal into its fields.

    Args:
        text: Composite literal, e.g. '(1,"a b",)'

    Returns:
        Lazy iterator of fields; None for NULL, str otherwise

    Raises:
        TypeError: If text is not a str (raised immediately)
        FormatError: While iterating, when a malformed construct is reached
    """
    return FieldReader(text)


__all__ = [
    "parse",
    "scan",
    "FieldReader",
    "SegmentReader",
]
