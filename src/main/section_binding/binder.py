"""Bind a named configuration section to a typed object.

``get_as`` is the lenient lookup (``None`` when the section is missing or
cannot be bound); ``get_required_as`` raises ConfigurationSectionNotFound
instead. The section name defaults to the target class's ``__name__``.
"""
from __future__ import annotations
from collections.abc import Mapping
from typing import Optional, Tuple, Type, TypeVar, Union

from src.main.configuration.conversion import ensure_bindable
from src.main.configuration.tree import ConfigurationTree
from src.main.utils.config import ConfigurationSectionNotFound, SectionConversionError

T = TypeVar('T')

TreeLike = Union[ConfigurationTree, Mapping]


def _as_tree(tree: TreeLike) -> ConfigurationTree:
    if isinstance(tree, ConfigurationTree):
        return tree
    if isinstance(tree, Mapping):
        return ConfigurationTree.from_mapping(tree)
    raise TypeError(f"Expected a ConfigurationTree or mapping, got {type(tree).__name__}")


def effective_name(cls: Type[T], name: Optional[str] = None) -> str:
    return name if name is not None else cls.__name__


def _bind(tree: TreeLike, cls: Type[T], name: Optional[str]) -> Tuple[str, Optional[T], Optional[SectionConversionError]]:
    ensure_bindable(cls)
    section_name = effective_name(cls, name)
    section = _as_tree(tree).get_section(section_name)
    if section is None:
        return section_name, None, None
    try:
        return section_name, section.deserialize_as(cls), None
    except SectionConversionError as e:
        return section_name, None, e


def get_as(tree: TreeLike, cls: Type[T], name: Optional[str] = None) -> Optional[T]:
    return _bind(tree, cls, name)[1]


def get_required_as(tree: TreeLike, cls: Type[T], name: Optional[str] = None) -> T:
    section_name, instance, error = _bind(tree, cls, name)
    if instance is None:
        raise ConfigurationSectionNotFound(section_name, cls) from error
    return instance

__all__ = ['get_as', 'get_required_as', 'effective_name']
