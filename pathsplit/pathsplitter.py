# Copyright © 2024 Norman Fomferra and contributors
# Permissions are hereby granted under the terms of the MIT License:
# https://opensource.org/licenses/MIT.

import os
from typing import Callable

from .config import Config
from .config import ConfigLike
from .config import merge_configs
from .config import normalize_config
from .config import validate_config
from .log import configure_logging
from .splitter import InvalidPath
from .splitter import PathBoundaryFinder
from .splitter import PathFlavor
from .splitter import new_boundary_finder

PathLike = str | bytes | os.PathLike
"""The possible types used to represent a path."""


class PathSplitter:
    """Splits paths into their directory name and last component.

    The splitting strategy is selected once, when the splitter is created.
    A splitter has no mutable state and can be shared between threads.

    Args:
        config: Splitter configuration.
        kwargs: Additional configuration parameters.
            Can be used to pass or override configuration values in `config`.
    """

    def __init__(self, config: ConfigLike = None, **kwargs):
        config = merge_configs(
            normalize_config(config),
            {k: v for k, v in kwargs.items() if v is not None},
        )
        validate_config(config)
        _config = Config(config)
        configure_logging(_config.logging)
        self._config = _config
        self._finder = new_boundary_finder(_config.flavor, _config.strategy)

    @property
    def config(self) -> Config:
        """The configuration."""
        return self._config

    @property
    def finder(self) -> PathBoundaryFinder:
        """The path boundary finder in use."""
        return self._finder

    @property
    def flavor(self) -> PathFlavor:
        """The path flavor."""
        return self._finder.flavor

    def directory_name(self, path: PathLike) -> str | bytes:
        """Get the directory portion of *path*.

        Args:
            path: A path, may be empty.

        Returns:
            The directory name, `"."` if *path* is empty or has
            no separator. Has the type of *path*, `str` for path-like
            objects.

        Raises:
            InvalidPath: If the directory name cannot be determined.
            TypeError: If *path* is not a str, bytes, or path-like object.
        """
        return self._split(path, self._finder.directory_name)

    def last_component(self, path: PathLike) -> str | bytes:
        """Get the last component of *path*.

        Args:
            path: A non-empty path.

        Returns:
            The last component, the root if *path* is a root.
            Has the type of *path*, `str` for path-like objects.

        Raises:
            InvalidPath: If *path* is empty or the last component
                cannot be determined.
            TypeError: If *path* is not a str, bytes, or path-like object.
        """
        return self._split(path, self._finder.last_component)

    def split_path(self, path: PathLike) -> tuple[str | bytes, str | bytes]:
        """Get both the directory name and the last component of *path*.

        Args:
            path: A non-empty path.

        Returns:
            A pair `(directory_name, last_component)`.
        """
        return self.directory_name(path), self.last_component(path)

    def _split(self, path: PathLike, split_func: Callable[[str], str]) -> str | bytes:
        path = os.fspath(path)
        if isinstance(path, bytes):
            return os.fsencode(self._split(os.fsdecode(path), split_func))
        result = split_func(path)
        if not self._is_valid_result(result):
            raise InvalidPath(f"illegal input path: {path!r}. unexpected failure")
        return result

    def _is_valid_result(self, result: str) -> bool:
        flavor = self._finder.flavor
        if not result or flavor.normalize(result) != result:
            return False
        root, rest = flavor.split_root(result)
        # either a root or a relative path without trailing separator
        return not rest.endswith(flavor.sep)
