"""
YAML configuration with dotted-path access

A YamlConfiguration holds a nested mapping loaded from YAML and resolves
paths like ``"prefix.prefix"`` through it. An optional defaults
configuration answers lookups for paths that are not set locally.

Usage:
    config = YamlConfiguration()
    config.load("plugins/Example/config.yml")

    config.get_string("messages.welcome")
    config.set("players.limit", 20)
    config.save("plugins/Example/config.yml")
"""

import copy
import os
from pathlib import Path
from typing import IO, Any, Dict, List, Mapping, Optional, Union

import yaml
from loguru import logger

from .exceptions import InvalidConfigurationError

PathLike = Union[str, os.PathLike]

# Sentinel for "no default passed", since None is a valid default
_MISSING = object()


def to_yaml_string(value: Any) -> str:
    """Render a scalar the way it reads in YAML (true/false/null)."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _to_section(mapping: Mapping[Any, Any]) -> Dict[str, Any]:
    """
    Copy a mapping into a section: keys become strings at every depth and
    null values are dropped, so ``levels: {1: ...}`` is reachable as "levels.1".
    """
    section: Dict[str, Any] = {}
    for key, value in mapping.items():
        if value is None:
            continue
        if isinstance(value, Mapping):
            value = _to_section(value)
        section[to_yaml_string(key)] = value
    return section


class YamlConfiguration:
    """
    A configuration backed by a nested dict.

    Paths are separated by '.', so ``config.get("a.b")`` reads ``{"a": {"b": ...}}``.
    """

    path_separator = "."

    def __init__(self, data: Optional[Mapping[str, Any]] = None):
        self._data: Dict[str, Any] = {}
        self._defaults: Optional["YamlConfiguration"] = None
        if data:
            for key, value in data.items():
                self.set(to_yaml_string(key), value)

    # ------------------------------------------------------------------
    # Defaults
    # ------------------------------------------------------------------

    @property
    def defaults(self) -> Optional["YamlConfiguration"]:
        return self._defaults

    def set_defaults(self, defaults: Union["YamlConfiguration", Mapping[str, Any], None]):
        """
        Use another configuration (or a plain mapping) to answer lookups for unset paths.

        Returns:
            self, for chaining
        """
        if defaults is not None and not isinstance(defaults, YamlConfiguration):
            defaults = YamlConfiguration(defaults)
        self._defaults = defaults
        return self

    # ------------------------------------------------------------------
    # Path access
    # ------------------------------------------------------------------

    def _split(self, path: str) -> List[str]:
        return path.split(self.path_separator)

    def _lookup(self, path: str) -> Any:
        node: Any = self._data
        for part in self._split(path):
            if not isinstance(node, dict) or part not in node:
                return _MISSING
            node = node[part]
        return node

    def get(self, path: str, default: Any = _MISSING) -> Any:
        """
        Get the value at a dotted path.

        Unset paths fall back to the defaults configuration, then to default.
        """
        value = self._lookup(path)
        if value is not _MISSING:
            return value
        if self._defaults is not None and self._defaults.contains(path):
            return self._defaults.get(path)
        return None if default is _MISSING else default

    def is_set(self, path: str) -> bool:
        """True if the path has a value in this configuration (defaults ignored)."""
        return self._lookup(path) is not _MISSING

    def contains(self, path: str) -> bool:
        """True if the path has a value here or in the defaults."""
        if self.is_set(path):
            return True
        return self._defaults is not None and self._defaults.contains(path)

    def __contains__(self, path: str) -> bool:
        return self.contains(path)

    def set(self, path: str, value: Any) -> None:
        """
        Set the value at a dotted path, creating intermediate sections.
        Setting None removes the key. Mappings are stored as sections.
        """
        if isinstance(value, YamlConfiguration):
            value = value.to_dict()
        elif isinstance(value, Mapping):
            value = _to_section(value)

        parts = self._split(path)
        node = self._data
        for part in parts[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                if value is None:
                    return
                child = {}
                node[part] = child
            node = child

        if value is None:
            node.pop(parts[-1], None)
        else:
            node[parts[-1]] = value

    def keys(self, deep: bool = False) -> List[str]:
        """Top-level keys, or every dotted path when deep is True."""
        return list(self.get_values(deep).keys())

    def get_values(self, deep: bool = False) -> Dict[str, Any]:
        """Mapping of key (or dotted path when deep) to value."""
        if not deep:
            return dict(self._data)

        values: Dict[str, Any] = {}

        def walk(node: Dict[str, Any], prefix: str) -> None:
            for key, value in node.items():
                path = f"{prefix}{key}"
                values[path] = value
                if isinstance(value, dict):
                    walk(value, path + self.path_separator)

        walk(self._data, "")
        return values

    def to_dict(self) -> Dict[str, Any]:
        """A deep copy of the loaded data."""
        return copy.deepcopy(self._data)

    # ------------------------------------------------------------------
    # Typed getters
    # ------------------------------------------------------------------

    def get_string(self, path: str, default: Optional[str] = None) -> Optional[str]:
        value = self.get(path)
        if value is None or isinstance(value, (dict, list)):
            return default
        return to_yaml_string(value)

    def get_int(self, path: str, default: int = 0) -> int:
        value = self.get(path)
        return int(value) if _is_number(value) else default

    def get_double(self, path: str, default: float = 0.0) -> float:
        value = self.get(path)
        return float(value) if _is_number(value) else default

    def get_boolean(self, path: str, default: bool = False) -> bool:
        value = self.get(path)
        return value if isinstance(value, bool) else default

    def get_list(self, path: str, default: Optional[list] = None) -> Optional[list]:
        value = self.get(path)
        return list(value) if isinstance(value, list) else default

    def get_string_list(self, path: str) -> List[str]:
        """Strings of the list at path; scalars are stringified, nested values skipped."""
        result = []
        for item in self.get_list(path) or []:
            if isinstance(item, str):
                result.append(item)
            elif isinstance(item, (bool, int, float)):
                result.append(to_yaml_string(item))
        return result

    def get_integer_list(self, path: str) -> List[int]:
        """Integers of the list at path; numeric strings are parsed, anything else skipped."""
        result = []
        for item in self.get_list(path) or []:
            if _is_number(item):
                result.append(int(item))
            elif isinstance(item, str):
                try:
                    result.append(int(item.strip()))
                except ValueError:
                    pass
        return result

    def get_double_list(self, path: str) -> List[float]:
        """Floats of the list at path; numeric strings are parsed, anything else skipped."""
        result = []
        for item in self.get_list(path) or []:
            if _is_number(item):
                result.append(float(item))
            elif isinstance(item, str):
                try:
                    result.append(float(item.strip()))
                except ValueError:
                    pass
        return result

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load_from_string(self, contents: str) -> None:
        """
        Replace this configuration with the YAML document in contents.

        Raises:
            InvalidConfigurationError: if the YAML is malformed or not a mapping
        """
        try:
            data = yaml.safe_load(contents)
        except yaml.YAMLError as e:
            raise InvalidConfigurationError(f"Invalid YAML: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise InvalidConfigurationError(
                f"Top level is not a mapping: {type(data).__name__}"
            )

        self._data = _to_section(data)

    def load(self, file: PathLike) -> None:
        """
        Load from a YAML file.

        Raises:
            OSError: if the file cannot be read
            InvalidConfigurationError: if the file is not a valid configuration
        """
        with open(file, encoding="utf-8") as f:
            contents = f.read()
        self.load_from_string(contents)
        logger.debug(f"Loaded configuration from {file}: {list(self._data.keys())}")

    def load_stream(self, stream: IO) -> None:
        """Load from a text or binary stream."""
        contents = stream.read()
        if isinstance(contents, bytes):
            contents = contents.decode("utf-8")
        self.load_from_string(contents)

    @classmethod
    def load_configuration(cls, file: PathLike) -> "YamlConfiguration":
        """
        Create a configuration from a file, logging instead of raising on failure.

        A missing or broken file results in an empty configuration.
        """
        config = cls()
        try:
            config.load(file)
        except FileNotFoundError:
            logger.warning(f"Configuration file not found: {file}")
        except (OSError, InvalidConfigurationError) as e:
            logger.error(f"Cannot load {file}: {e}")
        return config

    # ------------------------------------------------------------------
    # Saving
    # ------------------------------------------------------------------

    def save_to_string(self) -> str:
        """Serialize to block-style YAML, keeping key order."""
        if not self._data:
            return ""
        return yaml.safe_dump(
            self._data,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )

    def save(self, file: PathLike) -> None:
        """
        Write to a YAML file, creating parent directories as needed.

        Raises:
            OSError: if the file cannot be written
        """
        path = Path(file)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(self.save_to_string())
        logger.debug(f"Saved configuration to {path}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"
