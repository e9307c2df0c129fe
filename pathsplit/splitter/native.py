# Copyright © 2024 Norman Fomferra and contributors
# Permissions are hereby granted under the terms of the MIT License:
# https://opensource.org/licenses/MIT.

import posixpath

from .abc import InvalidPath
from .abc import PathBoundaryFinder
from .flavor import PathFlavor
from .flavor import POSIX_FLAVOR


class NativeBoundaryFinder(PathBoundaryFinder):
    """Finds path boundaries using the host's path primitive
    [posixpath.split()](https://docs.python.org/3/library/os.path.html#os.path.split).

    Only available for the `posix` flavor.

    Args:
        flavor: The path flavor, must be the `posix` flavor.
    """

    def __init__(self, flavor: PathFlavor = POSIX_FLAVOR):
        if not self.supports(flavor):
            raise ValueError(
                f"no native path primitive available for flavor {flavor.name!r}"
            )
        super().__init__(flavor)

    @classmethod
    def supports(cls, flavor: PathFlavor) -> bool:
        """Check whether a native path primitive exists for *flavor*."""
        return flavor.name == POSIX_FLAVOR.name

    def directory_name(self, path: str) -> str:
        if not path:
            return "."
        stripped = path.rstrip(posixpath.sep)
        if not stripped:
            return path
        head, _ = posixpath.split(stripped)
        return head or "."

    def last_component(self, path: str) -> str:
        if not path:
            raise InvalidPath("cannot get last component of empty path")
        stripped = path.rstrip(posixpath.sep)
        if not stripped:
            return path
        return posixpath.basename(stripped)
