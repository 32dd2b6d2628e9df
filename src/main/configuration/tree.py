"""Read-only hierarchical configuration tree.

Keys are segmented with ':' (``Database:Primary:Host``) and compared
case-insensitively. A section is a view of every key under one path; it
exists when it holds a value or has at least one descendant key.
"""
from __future__ import annotations
from collections.abc import Mapping
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple, Type, TypeVar

from src.main.utils.config_loader import KEY_DELIMITER, flatten_mapping, format_value
from .conversion import deserialize

T = TypeVar('T')


def _norm(key: str) -> str:
    return key.casefold()


def _segment_sort_key(segment: str) -> Tuple[int, Any]:
    # numeric segments first, in numeric order
    if segment.isdigit():
        return (0, int(segment))
    return (1, segment.casefold())


class ConfigurationTree(Mapping):
    def __init__(self, pairs: Iterable[Tuple[str, Any]] = ()):
        self._keys: Dict[str, str] = {}
        self._values: Dict[str, Optional[str]] = {}
        for key, value in pairs:
            key = str(key)
            self._keys[_norm(key)] = key
            self._values[_norm(key)] = format_value(value)

    @classmethod
    def from_mapping(cls, data: Mapping) -> "ConfigurationTree":
        return cls(flatten_mapping(data))

    # Mapping protocol over full keys
    def __getitem__(self, key: str) -> Optional[str]:
        return self._values[_norm(key)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._keys.values())

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and _norm(key) in self._values

    def __repr__(self) -> str:
        return f"ConfigurationTree({len(self)} keys)"

    def get_value(self, key: str, default: Optional[str] = None) -> Optional[str]:
        value = self._values.get(_norm(key))
        return default if value is None else value

    def has_descendants(self, path: str) -> bool:
        prefix = _norm(path) + KEY_DELIMITER
        return any(k.startswith(prefix) for k in self._values)

    def child_segments(self, path: Optional[str]) -> List[str]:
        prefix = _norm(path) + KEY_DELIMITER if path else ''
        # casefold can change string length, so index by segment not by offset
        depth = len(path.split(KEY_DELIMITER)) if path else 0
        seen: Dict[str, str] = {}
        for norm_key, key in self._keys.items():
            if not norm_key.startswith(prefix):
                continue
            segment = key.split(KEY_DELIMITER)[depth]
            seen.setdefault(_norm(segment), segment)
        return sorted(seen.values(), key=_segment_sort_key)

    def get_section(self, name: str) -> Optional["ConfigurationSection"]:
        if not name or not name.strip():
            raise ValueError("Section name must be a non-empty string")
        section = ConfigurationSection(self, name)
        return section if section.exists() else None

    def get_children(self) -> List["ConfigurationSection"]:
        return [ConfigurationSection(self, s) for s in self.child_segments(None)]


class ConfigurationSection:
    def __init__(self, tree: ConfigurationTree, path: str):
        self._tree = tree
        self.path = path

    @property
    def key(self) -> str:
        return self.path.rsplit(KEY_DELIMITER, 1)[-1]

    @property
    def value(self) -> Optional[str]:
        return self._tree.get_value(self.path)

    def exists(self) -> bool:
        return self.value is not None or self._tree.has_descendants(self.path)

    def get_section(self, key: str) -> "ConfigurationSection":
        return ConfigurationSection(self._tree, f"{self.path}{KEY_DELIMITER}{key}")

    def get_children(self) -> List["ConfigurationSection"]:
        return [self.get_section(s) for s in self._tree.child_segments(self.path)]

    def to_data(self) -> Any:
        children = self.get_children()
        if not children:
            return self.value
        if all(c.key.isdigit() for c in children):
            return [c.to_data() for c in children]
        return {c.key: c.to_data() for c in children}

    def deserialize_as(self, cls: Type[T]) -> Optional[T]:
        """Bind this section to ``cls``; ``None`` when the section is absent.

        Raises SectionConversionError when the section exists but its
        contents cannot be converted.
        """
        if not self.exists():
            return None
        return deserialize(self.to_data(), cls, self.path)

    def __repr__(self) -> str:
        return f"ConfigurationSection(path={self.path!r}, value={self.value!r})"

__all__ = ['ConfigurationTree', 'ConfigurationSection']
