# Copyright © 2024 Norman Fomferra and contributors
# Permissions are hereby granted under the terms of the MIT License:
# https://opensource.org/licenses/MIT.

import functools

from .config import Config
from .config import ConfigItem
from .config import ConfigLike
from .config import ConfigList
from .fsutil import FileObj
from .pathsplitter import PathLike
from .pathsplitter import PathSplitter
from .splitter import InvalidPath
from .splitter import PathBoundaryFinder
from .splitter import PathFlavor

__all__ = [
    "Config",
    "ConfigItem",
    "ConfigLike",
    "ConfigList",
    "FileObj",
    "InvalidPath",
    "PathBoundaryFinder",
    "PathFlavor",
    "PathLike",
    "PathSplitter",
    "directory_name",
    "get_default_splitter",
    "last_component",
    "split_path",
]


@functools.cache
def get_default_splitter() -> PathSplitter:
    """Get the splitter for paths of the host environment.
    It is created on first use and shared afterwards.
    """
    return PathSplitter()


def directory_name(path: PathLike) -> str | bytes:
    """Get the directory portion of *path*, like POSIX `dirname`.

    Separators are normalized to the host's native separator
    and trailing separators are removed, except for roots, which
    are returned unchanged. Empty paths and paths without any
    separator yield `"."`.

    Examples (POSIX host):

    * `directory_name("a/b/")` returns `"a"`
    * `directory_name("/a")` returns `"/"`
    * `directory_name("file")` returns `"."`

    Args:
        path: A path given as str, bytes, or path-like object.

    Returns:
        The directory name with the same type as *path*
        (`str` for path-like objects).

    Raises:
        InvalidPath: If the directory name cannot be determined.
    """
    return get_default_splitter().directory_name(path)


def last_component(path: PathLike) -> str | bytes:
    """Get the last component of *path*, like POSIX `basename`.

    Trailing separators are ignored. If *path* is a root,
    the root is returned.

    Args:
        path: A non-empty path given as str, bytes, or path-like object.

    Returns:
        The last component with the same type as *path*
        (`str` for path-like objects).

    Raises:
        InvalidPath: If *path* is empty.
    """
    return get_default_splitter().last_component(path)


def split_path(path: PathLike) -> tuple[str | bytes, str | bytes]:
    """Get both directory name and last component of *path*.

    Args:
        path: A non-empty path given as str, bytes, or path-like object.

    Returns:
        A pair `(directory_name, last_component)`.

    Raises:
        InvalidPath: If *path* is empty.
    """
    return get_default_splitter().split_path(path)
