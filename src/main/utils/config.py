"""Configuration error types shared by the tree, the builder and the binder."""
from __future__ import annotations
from typing import Any, Type


class MissingConfigError(RuntimeError):
    pass


class ConfigurationSectionNotFound(MissingConfigError):
    """Raised when a required section is absent or cannot be bound."""

    def __init__(self, section_name: str, target_type: Type[Any]):
        self.section_name = section_name
        self.target_type = target_type
        super().__init__(
            f"Configuration section '{section_name}' of type '{qualified_name(target_type)}' not found."
        )


class ConfigurationFormatError(ValueError):
    pass


class SectionConversionError(ValueError):
    def __init__(self, path: str, target_type: Type[Any], reason: str):
        self.path = path
        self.target_type = target_type
        super().__init__(f"Cannot bind section '{path}' to '{qualified_name(target_type)}': {reason}")


def qualified_name(cls: Type[Any]) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"

__all__ = [
    'MissingConfigError', 'ConfigurationSectionNotFound', 'ConfigurationFormatError',
    'SectionConversionError', 'qualified_name'
]
