"""
CompositeCodec - configured entry point bundling parse, serialize and
validate.

    codec = CompositeCodec(CodecConfig(empty_policy=EmptyPolicy.NULL))
    codec.serialize([])          ->  None
    list(codec.parse("(a,)"))    ->  ['a', None]

The module-level functions in parser, serializer and validator remain
the primitives; this class only applies CodecConfig around them.
"""
from __future__ import annotations

from typing import Iterable, Iterator, Optional

from rowliteral.config import CodecConfig
from rowliteral.model import Field
from rowliteral.parser import SegmentReader, parse, scan
from rowliteral.serializer import canonicalize, serialize
from rowliteral.validator import validate


class CompositeCodec:
    """Composite literal codec with a fixed configuration."""

    def __init__(self, config: Optional[CodecConfig] = None):
        self.config = config or CodecConfig()

    def _prepare(self, text):
        if self.config.strip_whitespace and isinstance(text, str):
            return text.strip()
        return text

    def parse(self, text: str) -> Iterator[Field]:
        return parse(self._prepare(text))

    def scan(self, text: str) -> SegmentReader:
        return scan(self._prepare(text))

    def serialize(self, fields: Iterable[Field]) -> Optional[str]:
        return serialize(fields, policy=self.config.empty_policy)

    def validate(self, text) -> bool:
        return validate(self._prepare(text))

    def canonicalize(self, text: str) -> str:
        """Parse text and write it back in canonical form."""
        return canonicalize(self._prepare(text))


__all__ = ["CompositeCodec"]
