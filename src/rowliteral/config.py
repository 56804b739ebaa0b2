"""
Codec configuration.

Settings are plain data, loadable from a dict or a YAML document:

    empty_policy: strict        # or: null
    strip_whitespace: false

Unknown keys are ignored with a warning. Bad values raise ConfigError.
"""
from __future__ import annotations

import warnings
from dataclasses import dataclass, fields
from typing import Any, Dict

import yaml

from rowliteral.errors import ConfigError
from rowliteral.model import EmptyPolicy


@dataclass(frozen=True)
class CodecConfig:
    """
    Options for CompositeCodec.

    Properties:
        empty_policy: Result of serializing zero fields (see EmptyPolicy)
        strip_whitespace: Strip surrounding whitespace from input text
            before parsing or validating
    """

    empty_policy: EmptyPolicy = EmptyPolicy.STRICT
    strip_whitespace: bool = False


def config_to_dict(c: CodecConfig) -> Dict[str, Any]:
    return {"empty_policy": c.empty_policy.value, "strip_whitespace": c.strip_whitespace}


def config_from_dict(d: Dict[str, Any] | None) -> CodecConfig:
    if d is None:
        return CodecConfig()
    if not isinstance(d, dict):
        raise ConfigError(f"Codec config must be a mapping, got {type(d).__name__}")

    known = {f.name for f in fields(CodecConfig)}
    for key in d:
        if key not in known:
            warnings.warn(f"Unknown codec config key ignored: {key!r}", UserWarning)

    kwargs: Dict[str, Any] = {}
    if "empty_policy" in d:
        # An unquoted YAML `null` arrives as None
        policy = d["empty_policy"]
        if policy is None:
            policy = EmptyPolicy.NULL.value
        try:
            kwargs["empty_policy"] = EmptyPolicy(policy)
        except ValueError:
            choices = ", ".join(p.value for p in EmptyPolicy)
            raise ConfigError(f"Invalid empty_policy {policy!r} (expected one of: {choices})")
    if "strip_whitespace" in d:
        if not isinstance(d["strip_whitespace"], bool):
            raise ConfigError(f"strip_whitespace must be a boolean, got {d['strip_whitespace']!r}")
        kwargs["strip_whitespace"] = d["strip_whitespace"]

    return CodecConfig(**kwargs)


def config_to_yaml(c: CodecConfig) -> str:
    return yaml.safe_dump(config_to_dict(c))


def config_from_yaml(s: str) -> CodecConfig:
    try:
        d = yaml.safe_load(s)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid codec config YAML: {e}")
    return config_from_dict(d)


def load_config(filepath: str) -> CodecConfig:
    """
    Load codec configuration from a YAML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ConfigError: If the content is invalid
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            content = f.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"Codec config file not found: {filepath}")

    return config_from_yaml(content)


__all__ = [
    "CodecConfig",
    "config_to_dict",
    "config_from_dict",
    "config_to_yaml",
    "config_from_yaml",
    "load_config",
]
