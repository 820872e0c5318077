"""Configuration for Pagesmith sites."""

from pagesmith.config.exceptions import ConfigError, ConfigLoadError
from pagesmith.config.settings import CONFIG_FILENAME, SiteSettings

__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "ConfigLoadError",
    "SiteSettings",
]
