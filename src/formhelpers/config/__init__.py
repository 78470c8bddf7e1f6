"""
Configuration helpers for the form helpers.
"""

from .models import ConfigError, HelperConfig, load_config
from .settings import Settings, get_settings

__all__ = ["ConfigError", "HelperConfig", "load_config", "Settings", "get_settings"]
