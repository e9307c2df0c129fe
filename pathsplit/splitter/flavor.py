# Copyright © 2024 Norman Fomferra and contributors
# Permissions are hereby granted under the terms of the MIT License:
# https://opensource.org/licenses/MIT.

import os
import string
from typing import Literal

FlavorName = Literal["posix"] | Literal["windows"]


class PathFlavor:
    """Describes the separator convention of a host environment.

    Args:
        name: The flavor name.
        sep: The native separator character.
        altseps: Further characters that are treated as separators
            and normalized to *sep*.
    """

    def __init__(self, name: str, sep: str, altseps: tuple[str, ...] = ()):
        self._name = name
        self._sep = sep
        self._altseps = altseps

    def __repr__(self):
        return f"PathFlavor({self._name!r})"

    @property
    def name(self) -> str:
        """The flavor name."""
        return self._name

    @property
    def sep(self) -> str:
        """The native separator character."""
        return self._sep

    @property
    def seps(self) -> str:
        """All separator characters, native separator first."""
        return self._sep + "".join(self._altseps)

    def normalize(self, path: str) -> str:
        """Replace all separator characters in *path* by the native one."""
        for altsep in self._altseps:
            path = path.replace(altsep, self._sep)
        return path

    def split_root(self, path: str) -> tuple[str, str]:
        """Split a normalized *path* into its root and the remainder.

        The root comprises the run of leading separators.
        The remainder never starts with a separator.
        """
        rest = path.lstrip(self._sep)
        return path[: len(path) - len(rest)], rest


class WindowsPathFlavor(PathFlavor):
    """Path flavor whose roots may also carry a drive letter
    (`C:`) or an UNC prefix (`\\\\server\\share`).
    """

    def __init__(self):
        super().__init__("windows", "\\", ("/",))

    def split_root(self, path: str) -> tuple[str, str]:
        drive = self._split_drive(path)
        root, rest = super().split_root(path[len(drive) :])
        return drive + root, rest

    def _split_drive(self, path: str) -> str:
        sep = self._sep
        if path[1:2] == ":" and path[:1] in string.ascii_letters:
            return path[:2]
        if path[:2] == sep * 2 and path[2:3] != sep:
            server_end = path.find(sep, 2)
            if server_end < 0:
                return ""
            share_end = path.find(sep, server_end + 1)
            if share_end < 0:
                share_end = len(path)
            if share_end == server_end + 1:
                # empty share name
                return ""
            return path[:share_end]
        return ""


POSIX_FLAVOR = PathFlavor("posix", "/")
WINDOWS_FLAVOR = WindowsPathFlavor()

_flavors = {
    POSIX_FLAVOR.name: POSIX_FLAVOR,
    WINDOWS_FLAVOR.name: WINDOWS_FLAVOR,
}


def get_host_flavor_name() -> FlavorName:
    return "windows" if os.name == "nt" else "posix"


def get_path_flavor(flavor: FlavorName | PathFlavor | None = None) -> PathFlavor:
    """Get the path flavor for the given name.

    Args:
        flavor: A flavor name, a flavor instance, or `None`
            to get the flavor of the host environment.

    Returns:
        The path flavor.

    Raises:
        ValueError: If *flavor* is not a known flavor name.
    """
    if isinstance(flavor, PathFlavor):
        return flavor
    if flavor is None:
        flavor = get_host_flavor_name()
    try:
        return _flavors[flavor]
    except KeyError:
        raise ValueError(
            f"unknown path flavor {flavor!r},"
            f" must be one of {', '.join(map(repr, _flavors))}"
        )
