"""Errors raised by the composite literal codec."""

from enum import Enum


class CompositeError(Exception):
    """Base error for this package."""


class FormatErrorReason(Enum):
    """Why a literal was rejected by the parser."""

    MISSING_OPEN = "expected '(' at start of literal"
    UNTERMINATED_QUOTE = "couldn't find closing double quote"
    UNEXPECTED_AFTER_QUOTE = "expected ',' or ')' after closing double quote"
    UNEXPECTED_END = "unexpected end of input"
    TRAILING_CONTENT = "end of input expected after ')'"


class FormatError(CompositeError):
    """
    Raised when a literal does not follow the composite grammar.

    Properties:
        reason: FormatErrorReason describing the fault
        position: 0-based offset of the offending character in the input
    """

    def __init__(self, reason: FormatErrorReason, position: int):
        self.reason = reason
        self.position = position
        super().__init__(f"{reason.value} at offset {position}")


class EmptyInputError(CompositeError):
    """Raised when serializing a sequence with no fields."""


class ConfigError(CompositeError):
    """Raised when codec configuration is invalid."""
