"""
the-way configuration core.

Resolves where the configuration file lives (``$THE_WAY_CONFIG`` first, then
the platform config directory), loads or creates it, makes sure the snippet
database and theme directories exist, and writes changes back.

Example usage:
    >>> from the_way import ConfigManager
    >>> manager = ConfigManager()
    >>> config = manager.load()
    >>> config.theme = "Solarized (dark)"
    >>> manager.store(config)
"""

from .config import ConfigManager, TheWayConfig, provision_dirs
from .errors import (
    ConfigError,
    Homeless,
    NoDefaultCopyCommand,
    StoreError,
    TheWayError,
)
from .location import ENV_CONFIG_PATH, ConfigLocation, ConfigLocator

__all__ = [
    # Lifecycle
    "ConfigManager",
    "TheWayConfig",
    "provision_dirs",
    # Location
    "ConfigLocator",
    "ConfigLocation",
    "ENV_CONFIG_PATH",
    # Errors
    "TheWayError",
    "ConfigError",
    "Homeless",
    "NoDefaultCopyCommand",
    "StoreError",
]
