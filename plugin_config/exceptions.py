"""
Exceptions raised by plugin_config.
"""


class ConfigError(Exception):
    """Base class for configuration errors."""
    pass


class InvalidConfigurationError(ConfigError):
    """Raised when a YAML document cannot be turned into a configuration."""
    pass


class UnsupportedOperationError(ConfigError):
    """Raised when saving or reloading a config that has no backing file."""
    pass


class ResourceNotFoundError(ConfigError):
    """Raised when a plugin has no bundled resource with the requested name."""

    def __init__(self, name: str, plugin_name: str):
        self.name = name
        self.plugin_name = plugin_name
        super().__init__(f"The embedded resource '{name}' cannot be found in {plugin_name}")
