"""
Pipeline settings loaded from YAML with environment overrides.
"""

from .settings import PipelineSettings, SettingsLoader, load_settings

__all__ = [
    "PipelineSettings",
    "SettingsLoader",
    "load_settings",
]
