"""Configuration loading, schema, and defaults."""

from gitwrap.config.loader import ConfigError, load_config
from gitwrap.config.schema import OUTPUT_FORMATS, GitWrapConfig

__all__ = [
    "ConfigError",
    "GitWrapConfig",
    "OUTPUT_FORMATS",
    "load_config",
]
