"""
Postgres Composite (Row) Literal Codec

Reads and writes the textual form of a composite value:

    (1,,"hello, world","")

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - Database connections or wire protocols
    - Typed values (integers, timestamps, ...)
    - Command-line surfaces

Every field is either NULL (None) or an opaque string.
Callers own any further interpretation.
"""

__version__ = "0.1.0"
