"""Configuration loading, schema, and defaults."""

from changelog_enforcer.config.loader import ConfigError, load_config
from changelog_enforcer.config.schema import ChangelogEnforcerConfig, EnforcerConfig

__all__ = [
    "ChangelogEnforcerConfig",
    "ConfigError",
    "EnforcerConfig",
    "load_config",
]
