from .config import (
    MissingConfigError,
    ConfigurationSectionNotFound,
    ConfigurationFormatError,
    SectionConversionError,
)
from .config_loader import load_yaml_file, flatten_mapping
__all__ = [
    "MissingConfigError",
    "ConfigurationSectionNotFound",
    "ConfigurationFormatError",
    "SectionConversionError",
    "load_yaml_file",
    "flatten_mapping",
]
