# Copyright © 2024 Norman Fomferra and contributors
# Permissions are hereby granted under the terms of the MIT License:
# https://opensource.org/licenses/MIT.

from .abc import InvalidPath
from .abc import PathBoundaryFinder


class ReferenceBoundaryFinder(PathBoundaryFinder):
    """Finds path boundaries by scanning the path backwards.

    Works for every path flavor and does not depend on any
    host path primitive.
    """

    def directory_name(self, path: str) -> str:
        if not path:
            return "."
        sep = self.flavor.sep
        root, rest = self.flavor.split_root(self.flavor.normalize(path))
        rest = rest.rstrip(sep)
        last_sep = rest.rfind(sep)
        if last_sep < 0:
            # bare filename or root only
            return root or "."
        head = rest[:last_sep].rstrip(sep)
        return root + head

    def last_component(self, path: str) -> str:
        if not path:
            raise InvalidPath("cannot get last component of empty path")
        sep = self.flavor.sep
        root, rest = self.flavor.split_root(self.flavor.normalize(path))
        rest = rest.rstrip(sep)
        if not rest:
            return root
        return rest[rest.rfind(sep) + 1 :]
