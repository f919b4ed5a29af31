"""Plugin-specific exceptions."""


class PluginError(Exception):
    """Base exception for plugin errors."""


class ConnectionError(PluginError):
    """Raised when a plugin cannot reach its backing service."""


class ConfigurationError(PluginError):
    """Raised when plugin configuration is missing or invalid."""


class PluginNotFoundError(PluginError):
    """Raised when a requested plugin is not registered."""
