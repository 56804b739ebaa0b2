"""
Tests for CompositeCodec (configuration applied around the primitives).
"""

import pytest

from rowliteral.codec import CompositeCodec
from rowliteral.config import CodecConfig
from rowliteral.errors import EmptyInputError, FormatError
from rowliteral.model import EmptyPolicy


class TestDefaultCodec:
    """Without configuration the codec behaves like the module functions."""

    def test_parse(self):
        assert list(CompositeCodec().parse('(1,,"")')) == ["1", None, ""]

    def test_serialize_empty_raises(self):
        with pytest.raises(EmptyInputError):
            CompositeCodec().serialize([])

    def test_surrounding_whitespace_rejected(self):
        with pytest.raises(FormatError):
            list(CompositeCodec().parse(" (1) "))
        assert CompositeCodec().validate(" (1) ") is False


class TestConfiguredCodec:
    """Configured policies."""

    def test_null_policy(self):
        codec = CompositeCodec(CodecConfig(empty_policy=EmptyPolicy.NULL))
        assert codec.serialize([]) is None
        assert codec.serialize(["a"]) == "(a)"

    def test_strip_whitespace(self):
        codec = CompositeCodec(CodecConfig(strip_whitespace=True))
        assert list(codec.parse("  (1,2)\n")) == ["1", "2"]
        assert codec.validate("  (1,2)\n") is True
        assert [s.value for s in codec.scan(" (a) ")] == ["a"]

    def test_strip_keeps_inner_whitespace(self):
        codec = CompositeCodec(CodecConfig(strip_whitespace=True))
        assert list(codec.parse(' (" a ") ')) == [" a "]

    def test_canonicalize(self):
        codec = CompositeCodec(CodecConfig(strip_whitespace=True))
        assert codec.canonicalize(' ("a","") ') == '(a,"")'

    def test_canonicalize_ignores_empty_policy(self):
        """A parsed literal always has a field, so the result is a string."""
        codec = CompositeCodec(CodecConfig(empty_policy=EmptyPolicy.NULL))
        assert codec.canonicalize("()") == "()"
        assert codec.canonicalize('("")') == '("")'

    def test_non_text_still_type_error(self):
        codec = CompositeCodec(CodecConfig(strip_whitespace=True))
        with pytest.raises(TypeError):
            codec.parse(None)
        assert codec.validate(None) is False
