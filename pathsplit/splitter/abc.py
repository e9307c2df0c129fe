# Copyright © 2024 Norman Fomferra and contributors
# Permissions are hereby granted under the terms of the MIT License:
# https://opensource.org/licenses/MIT.

from abc import abstractmethod, ABC

from .flavor import PathFlavor


class InvalidPath(ValueError):
    """Raised if a path cannot be split into its components."""


class PathBoundaryFinder(ABC):
    """Path boundary finder interface definition.

    A path boundary finder locates the boundary between the directory
    prefix and the last component of a path given in the separator
    convention of its path flavor.

    A path boundary finder must implement both

    * [directory_name()][pathsplit.splitter.abc.PathBoundaryFinder.directory_name]
    * [last_component()][pathsplit.splitter.abc.PathBoundaryFinder.last_component]

    Implementations must not keep any state between calls.

    Args:
        flavor: The path flavor.
    """

    def __init__(self, flavor: PathFlavor):
        self._flavor = flavor

    @property
    def flavor(self) -> PathFlavor:
        """The path flavor."""
        return self._flavor

    @abstractmethod
    def directory_name(self, path: str) -> str:
        """Get the directory portion of *path*.

        Separators of the path flavor are normalized to its native
        separator. The result carries no trailing separator unless it
        denotes a root. Paths without a separator yield `"."`.

        Args:
            path: A path, may be empty.

        Returns:
            The directory name.
        """

    @abstractmethod
    def last_component(self, path: str) -> str:
        """Get the last component of *path*.

        Trailing separators are ignored. A path that is a root only
        yields the normalized root itself.

        Args:
            path: A non-empty path.

        Returns:
            The last component.

        Raises:
            InvalidPath: If *path* is empty.
        """
