"""
Interchange helpers for decoded field sequences.

Provides lossless JSON/YAML round-trip of fields (None / str) so that
decoded rows can be stored as fixtures or reports. NULL maps to null
in both formats; an empty string stays an empty string.
"""
from __future__ import annotations

import json
from typing import Any, Iterable, List

import yaml

from rowliteral.model import Field


def fields_to_list(fields: Iterable[Field]) -> List[Field]:
    out: List[Field] = []
    for value in fields:
        if value is not None and not isinstance(value, str):
            raise TypeError(f"Unsupported field type: {type(value)}")
        out.append(value)
    return out


def fields_from_list(d: Any) -> List[Field]:
    if not isinstance(d, list):
        raise TypeError(f"Expected a list of fields, got {type(d)}")
    return fields_to_list(d)


def fields_to_json(fields: Iterable[Field]) -> str:
    return json.dumps(fields_to_list(fields))


def fields_from_json(s: str) -> List[Field]:
    d = json.loads(s)
    return fields_from_list(d)


def fields_to_yaml(fields: Iterable[Field]) -> str:
    return yaml.safe_dump(fields_to_list(fields))


def fields_from_yaml(s: str) -> List[Field]:
    d = yaml.safe_load(s)
    return fields_from_list(d)
