"""Assemble a ConfigurationTree from ordered sources.
Sources are read at build time; later sources override earlier ones."""
from __future__ import annotations
import os
from typing import Any, Callable, Iterable, List, Mapping, Optional, Tuple

from src.main.utils.config_loader import flatten_mapping, load_yaml_file
from .tree import ConfigurationTree

Pairs = Iterable[Tuple[str, Optional[Any]]]


class ConfigurationBuilder:
    def __init__(self):
        self._sources: List[Callable[[], Pairs]] = []

    def add_in_memory_collection(self, pairs: Pairs) -> "ConfigurationBuilder":
        items = list(pairs.items()) if isinstance(pairs, Mapping) else list(pairs)
        self._sources.append(lambda: items)
        return self

    def add_mapping(self, data: Mapping[str, Any]) -> "ConfigurationBuilder":
        self._sources.append(lambda: list(flatten_mapping(data)))
        return self

    def add_yaml_file(self, path: str, optional: bool = False) -> "ConfigurationBuilder":
        def _read() -> Pairs:
            if optional and not os.path.isfile(path):
                print(f"[configuration] optional YAML source not found, skipping: {path}")
                return []
            return list(flatten_mapping(load_yaml_file(path)))
        self._sources.append(_read)
        return self

    def build(self) -> ConfigurationTree:
        pairs: List[Tuple[str, Optional[Any]]] = []
        for source in self._sources:
            pairs.extend(source())
        return ConfigurationTree(pairs)

__all__ = ["ConfigurationBuilder"]
