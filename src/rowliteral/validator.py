"""
Composite Literal Validator.

Structural accept/reject check against the grammar without decoding
any field. Cheaper than parsing when only acceptance matters.

NOTE:
    This is a whole-string pattern match, not the parser's scan.
    The two disagree on some malformed input. The parser reads an
    unquoted field up to the next ',' or ')', so '(a b)' and '(a"b)'
    parse fine but do not validate. Do not treat validate(x) as a
    guarantee that parse(x) succeeds, or the reverse.
"""

import re

from rowliteral.grammar import QUOTED_FIELD, UNQUOTED_FIELD

_FIELD = rf"(?:{QUOTED_FIELD}|{UNQUOTED_FIELD})"
_LITERAL_RE = re.compile(rf"\({_FIELD}(?:,{_FIELD})*\)")


def validate(text) -> bool:
    """True if text is structurally a composite literal. Never raises."""
    if not isinstance(text, str):
        return False
    return _LITERAL_RE.fullmatch(text) is not None


__all__ = ["validate"]
