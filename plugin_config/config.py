"""
Config - YamlConfiguration wrapper for plugin config and language files

Adds quick creation, saving and reloading of a plugin's config file, plus
helpers for chat messages and list entries.

Usage:
    from plugin_config import Config

    config = Config.default_config(plugin)            # plugins/<name>/config.yml
    lang = Config.default_lang(plugin)                # plugins/<name>/lang.yml

    lang.get_message("messages.test")                 # prefix + message, colored
    lang.get_message("messages.balance", "Alice", 30) # {0} -> Alice, {1} -> 30
    lang.get_message_advanced("messages.join", "player", "Alice")  # %player -> Alice

    config.make_string_list_distinct("player-names").save()

Language files can carry a prefix, located at ``prefix_path``:

    prefix:
      prefix: "&6Example &8> &r"
    messages:
      test: "My test message!"

Unless ``exclude_prefix`` is set, ``get_message("messages.test")`` renders
"&6Example &8> &rMy test message!" with colors translated.
"""

from datetime import datetime, timezone
from pathlib import Path
from typing import IO, Any, Iterable, List, Mapping, Optional, Union

from loguru import logger

from .chat_color import translate_alternate_color_codes
from .configuration import PathLike, YamlConfiguration, to_yaml_string
from .exceptions import InvalidConfigurationError, UnsupportedOperationError
from .lists import distinct
from .plugin import Plugin
from .settings import settings


def _replace_positional(message: str, replacements: Iterable[Any]) -> str:
    """Replace {0}, {1}, ... with the matching replacement."""
    for i, replacement in enumerate(replacements):
        placeholder = "{%d}" % i
        if placeholder in message:
            message = message.replace(placeholder, to_yaml_string(replacement))
    return message


class Config(YamlConfiguration):
    """
    A YAML configuration bound to a file (or stream) and optionally a plugin.

    Mutating methods return the instance so calls can be chained:

        Config.default_config(plugin).add_to_string_list("admins", "Alice").save()
    """

    def __init__(self, config_file: Optional[PathLike] = None, load_now: bool = False):
        """
        Args:
            config_file: The YAML file backing this config
            load_now: Parse the file immediately. Failures are logged and re-raised.
        """
        super().__init__()
        self._config_file: Optional[Path] = Path(config_file) if config_file is not None else None
        self._stream: Optional[IO] = None
        self._plugin: Optional[Plugin] = None
        self._last_reload: Optional[datetime] = None
        self._immediately_loaded = load_now
        self._save_supported = True

        self._prefix_path = settings.prefix_path
        self._exclude_prefix = False

        if load_now and self._config_file is not None:
            try:
                self.load(self._config_file)
            except (OSError, InvalidConfigurationError) as e:
                logger.error(f"Failed to load config {self._config_file}: {e}")
                raise

    @classmethod
    def from_stream(cls, stream: IO) -> "Config":
        """
        Create a config from a text or binary stream, parsed immediately.

        Parse errors are logged and leave the config empty.
        """
        config = cls()
        config._stream = stream
        try:
            config.load_stream(stream)
        except (OSError, InvalidConfigurationError, UnicodeDecodeError) as e:
            logger.error(f"Failed to load config from stream: {e}")
        return config

    @classmethod
    def _from_resource(cls, plugin: Plugin, name: str) -> Optional["Config"]:
        stream = plugin.get_resource(name)
        if stream is None:
            return None
        with stream:
            return cls.from_stream(stream)

    @classmethod
    def default_config(cls, plugin: Plugin, name: str = "config.yml") -> "Config":
        """
        The plugin's config file ``<data folder>/<name>``.

        The bundled resource of the same name provides defaults and is copied
        into the data folder if the file does not exist yet.
        """
        plugin.data_folder.mkdir(parents=True, exist_ok=True)
        return (
            cls(plugin.data_folder / name)
            .set_plugin(plugin)
            .set_defaults(cls._from_resource(plugin, name))
            .save_resource()
            .reload()
        )

    @classmethod
    def default_lang(cls, plugin: Plugin) -> "Config":
        """The plugin's language file, lang.yml."""
        return cls.default_config(plugin, "lang.yml")

    @classmethod
    def wrapper(cls, configuration: Union[YamlConfiguration, Mapping[str, Any]]) -> "Config":
        """
        Wrap an existing configuration to use the message and list helpers on it.

        The wrapped configuration answers all lookups; saving and reloading are
        not supported.
        """
        config = cls().set_defaults(configuration)
        config._save_supported = False
        return config

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def config_file(self) -> Optional[Path]:
        return self._config_file

    @property
    def plugin(self) -> Optional[Plugin]:
        return self._plugin

    @property
    def last_reload(self) -> Optional[datetime]:
        """When reload() last ran (UTC), or None."""
        return self._last_reload

    @property
    def immediately_loaded(self) -> bool:
        """Was this config created with load_now=True."""
        return self._immediately_loaded

    @property
    def save_supported(self) -> bool:
        return self._save_supported

    def set_plugin(self, plugin: Plugin) -> "Config":
        self._plugin = plugin
        plugin.data_folder.mkdir(parents=True, exist_ok=True)
        return self

    def _unsupported(self, message: str) -> "Config":
        if settings.throw_on_unsupported_operation:
            raise UnsupportedOperationError(message)
        logger.warning(f"{message} Ignoring.")
        return self

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save(self, file: Optional[PathLike] = None) -> "Config":
        """
        Write this config to its file, or to ``file`` when given.

        I/O errors when writing the bound file are logged, not raised.
        """
        if file is not None:
            super().save(file)
            return self

        if self._config_file is None or not self._save_supported:
            return self._unsupported("Saving is not supported on this config.")

        try:
            super().save(self._config_file)
        except OSError as e:
            logger.error(f"Failed to save config {self._config_file}: {e}")

        return self

    def reload(self) -> "Config":
        """
        Re-read this config from its file (or stream).

        When a plugin is set and bundles a resource with the file's name, the
        defaults are refreshed from it first, even if the file is missing.
        Errors are logged, never raised.
        """
        if not self._save_supported:
            return self._unsupported("Reloading is not supported on this config.")

        self._last_reload = datetime.now(timezone.utc)
        try:
            if self._config_file is None:
                self._reload_stream()
            else:
                if self._plugin is not None:
                    resource_defaults = self._from_resource(self._plugin, self._config_file.name)
                    if resource_defaults is not None:
                        self.set_defaults(resource_defaults)
                self.load(self._config_file)
        except FileNotFoundError:
            logger.warning(f"Config file not found: {self._config_file}")
        except (OSError, InvalidConfigurationError, UnicodeDecodeError) as e:
            logger.error(f"Failed to reload config {self._config_file or 'stream'}: {e}")

        return self

    def _reload_stream(self) -> None:
        if self._stream is None:
            logger.warning("Nothing to reload: config has neither a file nor a stream")
            return
        if self._stream.closed or not self._stream.seekable():
            logger.warning("Cannot reload config: stream is closed or not seekable")
            return
        self._stream.seek(0)
        self.load_stream(self._stream)

    def create_if_nonexistent(self) -> "Config":
        """Copy the bundled resource into the data folder if the file is missing. Requires a plugin."""
        if not self._save_supported:
            return self._unsupported("Saving is not supported on this config.")

        if self._config_file is not None and not self._config_file.exists():
            self.save_resource()

        return self

    def save_resource(self, replace: bool = False) -> "Config":
        """Copy the plugin's bundled resource with this file's name into the data folder."""
        if self._plugin is None or self._config_file is None or not self._save_supported:
            return self._unsupported("Saving is not supported on this config.")

        self._plugin.save_resource(self._config_file.name, replace)
        return self

    # ------------------------------------------------------------------
    # Messages
    # ------------------------------------------------------------------

    @staticmethod
    def color(message: str, char: Optional[str] = None) -> str:
        """Translate alternate color codes (``&`` by default) into real ones."""
        return translate_alternate_color_codes(char or settings.color_char, message)

    def get_message(self, key: str, *replacements: Any) -> str:
        """The prefixed message at key with {0}, {1}, ... replaced, colors translated."""
        return self.color(self.get_message_raw(key, *replacements))

    def get_message_raw(self, key: str, *replacements: Any) -> str:
        """Like get_message() but without color translation."""
        message = self.get_string(key, f"No entry for {key}")
        if not self._exclude_prefix and key.lower() != self._prefix_path.lower():
            message = (self.get_string(self._prefix_path) or "") + message

        return _replace_positional(message, replacements)

    def get_message_list(self, key: str, *replacements: Any) -> List[str]:
        """Every message of the list at key with {0}, {1}, ... replaced, colors translated. No prefix."""
        return [
            self.color(_replace_positional(message, replacements))
            for message in self.get_string_list(key)
        ]

    def get_message_advanced(self, key: str, *replacements: Any, **named: Any) -> str:
        """
        The message at key with ``%name`` tokens replaced, colors translated.

        Replacements alternate between token name and value:

            get_message_advanced("my.message", "playerName", "JohnDoe", "age", 30)

        replaces %playerName with JohnDoe and %age with 30. Keyword arguments
        work too: ``get_message_advanced("my.message", playerName="JohnDoe")``.
        A name without a value renders as null.
        """
        message = self.get_string(key, f'Message "{key}" does not exist.')

        pairs = []
        for i in range(0, len(replacements), 2):
            value = replacements[i + 1] if i + 1 < len(replacements) else None
            pairs.append((replacements[i], value))
        pairs.extend(named.items())

        for name, value in pairs:
            token = "%" + to_yaml_string(name)
            if token in message:
                message = message.replace(token, to_yaml_string(value))

        return self.color(message)

    def get_prefixed_message_advanced(self, key: str, *replacements: Any, **named: Any) -> str:
        """
        get_message_advanced() with the colored prefix in front.

        Returns the plain get_message_advanced() result when the prefix is excluded.
        """
        message = self.get_message_advanced(key, *replacements, **named)
        if self._exclude_prefix:
            return message

        return self.color(self.get_string(self._prefix_path) or "") + message

    # ------------------------------------------------------------------
    # Prefix
    # ------------------------------------------------------------------

    @property
    def prefix_path(self) -> str:
        """Where in the config the message prefix is located, e.g. "prefix.prefix"."""
        return self._prefix_path

    def set_prefix_path(self, prefix_path: str) -> "Config":
        self._prefix_path = prefix_path
        return self

    @property
    def exclude_prefix(self) -> bool:
        """Should the prefix at prefix_path be left out of messages?"""
        return self._exclude_prefix

    def set_exclude_prefix(self, exclude_prefix: bool) -> "Config":
        self._exclude_prefix = exclude_prefix
        return self

    def auto_exclude_prefix(self) -> "Config":
        """Exclude the prefix when ``prefix.enabled`` is false in the config."""
        return self.set_exclude_prefix(not self.get_boolean("prefix.enabled", True))

    # ------------------------------------------------------------------
    # Lists
    # ------------------------------------------------------------------

    def add_to_string_list(self, key: str, *values: str) -> "Config":
        current = self.get_string_list(key)
        current.extend(values)
        self.set(key, current)
        return self

    def remove_from_string_list(self, key: str, *values: str) -> "Config":
        """Remove the first occurrence of each value."""
        current = self.get_string_list(key)
        for value in values:
            if value in current:
                current.remove(value)
        self.set(key, current)
        return self

    def get_distinct_string_list(self, key: str) -> List[str]:
        return distinct(self.get_string_list(key))

    def make_string_list_distinct(self, key: str) -> "Config":
        """
        Remove duplicate items from the string list at key and write the result back.

        Args:
            key: The list in question, for example "player-names" or "ranks.admin.players"
        """
        self.set(key, self.get_distinct_string_list(key))
        return self

    def add_to_integer_list(self, key: str, *values: int) -> "Config":
        current = self.get_integer_list(key)
        current.extend(values)
        self.set(key, current)
        return self

    def remove_from_integer_list(self, key: str, *values: int) -> "Config":
        """Remove the first occurrence of each value."""
        current = self.get_integer_list(key)
        for value in values:
            if value in current:
                current.remove(value)
        self.set(key, current)
        return self

    def add_to_double_list(self, key: str, *values: float) -> "Config":
        current = self.get_double_list(key)
        current.extend(float(value) for value in values)
        self.set(key, current)
        return self

    def remove_from_double_list(self, key: str, *values: float) -> "Config":
        """Remove the first occurrence of each value."""
        current = self.get_double_list(key)
        for value in values:
            if value in current:
                current.remove(value)
        self.set(key, current)
        return self

    def make_list_distinct(self, key: str) -> "Config":
        """
        Remove duplicate items from the list at key, whatever its item type,
        and write the result back. Does nothing if there is no list at key.

        Args:
            key: The list in question, for example "player-money" or "leaderboard.player-scores"
        """
        current = self.get_list(key)
        if current is None:
            return self

        self.set(key, distinct(current))
        return self

    def __repr__(self) -> str:
        source = self._config_file or ("stream" if self._stream is not None else None)
        return f"Config(source={str(source) if source else None!r}, keys={self.keys()!r})"
