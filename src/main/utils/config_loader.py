"""YAML source helpers: read documents and flatten them into segmented keys.
Nested mappings become `Outer:Inner` keys, list items become index segments."""
from __future__ import annotations
import yaml
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple
import os

from .config import ConfigurationFormatError

KEY_DELIMITER = ':'


def load_yaml_file(path: str) -> Dict[str, Any]:
    if not os.path.isfile(path):
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, Mapping):
        raise ConfigurationFormatError(f"Configuration file '{path}' must contain a mapping")
    return dict(data)


def format_value(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


def flatten_mapping(data: Mapping[str, Any], prefix: str = '') -> Iterator[Tuple[str, Optional[str]]]:
    for k, v in data.items():
        key = f"{prefix}{KEY_DELIMITER}{k}" if prefix else str(k)
        yield from _flatten_value(key, v)


def _flatten_value(key: str, value: Any) -> Iterator[Tuple[str, Optional[str]]]:
    if isinstance(value, Mapping):
        if not value:
            return
        yield from flatten_mapping(value, key)
    elif isinstance(value, (list, tuple)):
        for i, item in enumerate(value):
            yield from _flatten_value(f"{key}{KEY_DELIMITER}{i}", item)
    else:
        yield key, format_value(value)

__all__ = ["KEY_DELIMITER", "load_yaml_file", "format_value", "flatten_mapping"]
