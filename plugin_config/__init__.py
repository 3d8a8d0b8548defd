"""
plugin-config - YAML config and language files for game-server plugins

Load, save and reload a plugin's YAML files and render chat messages from
them with placeholders, color codes and a configurable prefix.
"""

__version__ = "1.1.9"

# Lazy imports so `plugin-config --help` stays fast
def __getattr__(name):
    if name == "Config":
        from .config import Config
        return Config
    elif name == "YamlConfiguration":
        from .configuration import YamlConfiguration
        return YamlConfiguration
    elif name == "Plugin":
        from .plugin import Plugin
        return Plugin
    elif name == "ChatColor":
        from .chat_color import ChatColor
        return ChatColor
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

__all__ = ["Config", "YamlConfiguration", "Plugin", "ChatColor", "__version__"]
