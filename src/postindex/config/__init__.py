"""Configuration loading for postindex."""

from postindex.config.exceptions import (
    ConfigError,
    ConfigLoadError,
    ConfigValidationError,
)
from postindex.config.settings import PathsSettings, PostIndexConfig, SiteSettings, load_config

__all__ = [
    "ConfigError",
    "ConfigLoadError",
    "ConfigValidationError",
    "PathsSettings",
    "PostIndexConfig",
    "SiteSettings",
    "load_config",
]
