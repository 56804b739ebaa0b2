r"""
Composite Literal Grammar

Character classes and escaping rules shared by the parser, the
serializer and the validator.

    L        := "(" field ("," field)* ")"
    field    := "" | quoted | unquoted
    quoted   := '"' ( [^"\\] | '""' | '\\\\' )* '"'
    unquoted := [^,()"\\\s]*

An empty field (nothing between delimiters) is NULL. An empty string
must therefore be written quoted: "".

Only doubled quotes and doubled backslashes are understood inside
quotes. Backslash-escaped quotes and backslashes outside quotes are
not supported and may be misread.
"""

import re

OPEN = "("
CLOSE = ")"
SEPARATOR = ","
QUOTE = '"'
BACKSLASH = "\\"

# A field ends at either of these when unquoted
FIELD_TERMINATORS = (SEPARATOR, CLOSE)

# Regex fragments (no anchors, no groups)
QUOTED_FIELD = r'"(?:[^"\\]|""|\\\\)*"'
UNQUOTED_FIELD = r'[^,()"\\\s]*'

_NEEDS_QUOTING_RE = re.compile(r'[,()"\\\s]')
_ESCAPE_RE = re.compile(r'(["\\])')


def needs_quoting(value: str) -> bool:
    """True if value must be quoted to survive a round trip."""
    return value == "" or _NEEDS_QUOTING_RE.search(value) is not None


def escape(value: str) -> str:
    """Double every quote and backslash."""
    return _ESCAPE_RE.sub(r"\1\1", value)


def unescape(content: str) -> str:
    """
    Undo doubling inside a quoted field.

    Doubled quotes are collapsed first, then doubled backslashes.
    """
    return content.replace('""', '"').replace("\\\\", "\\")
