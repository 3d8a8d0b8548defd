"""
Plugin resources and data folder

A Plugin owns a data folder (where user-editable config files live) and a
bundle of default resources shipped with the plugin. Resources can come
from a plain directory or from an installed Python package:

    plugin = Plugin("Example", "plugins/Example", resources="resources/")
    plugin = Plugin.from_package("Example", "example_plugin.resources", "plugins/Example")
"""

import shutil
from importlib import resources as importlib_resources
from pathlib import Path
from typing import IO, List, Optional, Union

from loguru import logger

from .configuration import PathLike
from .exceptions import ResourceNotFoundError


class Plugin:
    """
    A plugin's data folder plus its bundled default resources.

    Args:
        name: Plugin name, used in log messages
        data_folder: Directory for the plugin's config files
        resources: Directory (or importlib Traversable) holding bundled defaults
    """

    def __init__(
        self,
        name: str,
        data_folder: PathLike,
        resources: Union[PathLike, "importlib_resources.abc.Traversable", None] = None,
    ):
        self.name = name
        self.data_folder = Path(data_folder)
        if resources is not None and not hasattr(resources, "joinpath"):
            resources = Path(resources)
        self._resources = resources

    @classmethod
    def from_package(cls, name: str, package: str, data_folder: PathLike) -> "Plugin":
        """Create a plugin whose bundled resources are files of an installed package."""
        return cls(name, data_folder, importlib_resources.files(package))

    @staticmethod
    def _parts(name: str) -> List[str]:
        parts = [part for part in name.replace("\\", "/").split("/") if part]
        if ".." in parts:
            raise ValueError(f"Resource name must stay inside the plugin: {name}")
        return parts

    def _resource(self, name: str):
        if self._resources is None:
            return None
        resource = self._resources
        for part in self._parts(name):
            resource = resource.joinpath(part)
        if not resource.is_file():
            return None
        return resource

    def get_resource(self, name: str) -> Optional[IO[bytes]]:
        """
        Open a bundled resource.

        Returns:
            A binary stream the caller must close, or None if there is no such resource

        Raises:
            ValueError: if name contains a ".." segment
        """
        resource = self._resource(name)
        if resource is None:
            return None
        return resource.open("rb")

    def save_resource(self, name: str, replace: bool = False) -> None:
        """
        Copy a bundled resource into the data folder.

        Existing files are kept unless replace is True.

        Raises:
            ValueError: if name is empty or contains a ".." segment
            ResourceNotFoundError: if the plugin has no such resource
        """
        name = "/".join(self._parts(name))
        if not name:
            raise ValueError("Resource name cannot be empty")

        resource = self._resource(name)
        if resource is None:
            raise ResourceNotFoundError(name, self.name)

        target = self.data_folder / name
        if target.exists() and not replace:
            logger.debug(f"Not saving {name} to {target}: file already exists")
            return

        target.parent.mkdir(parents=True, exist_ok=True)
        with resource.open("rb") as src, open(target, "wb") as dst:
            shutil.copyfileobj(src, dst)
        logger.info(f"Saved resource {name} of {self.name} to {target}")

    def __repr__(self) -> str:
        return f"Plugin(name={self.name!r}, data_folder={str(self.data_folder)!r})"
