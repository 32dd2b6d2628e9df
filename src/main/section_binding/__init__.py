from .binder import get_as, get_required_as, effective_name
from src.main.configuration.tree import ConfigurationTree, ConfigurationSection
from src.main.configuration.builder import ConfigurationBuilder
from src.main.utils.config import ConfigurationSectionNotFound
__all__ = [
    "get_as",
    "get_required_as",
    "effective_name",
    "ConfigurationTree",
    "ConfigurationSection",
    "ConfigurationBuilder",
    "ConfigurationSectionNotFound",
]
