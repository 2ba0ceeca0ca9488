"""Settings module - YAML-backed configuration for profile generation."""

from american_generator.settings.base import LOCALE, GeneratorSettings
from american_generator.settings.loader import SettingsLoader, load_settings

__all__ = [
    "LOCALE",
    "GeneratorSettings",
    "SettingsLoader",
    "load_settings",
]
