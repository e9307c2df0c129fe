# Copyright © 2024 Norman Fomferra and contributors
# Permissions are hereby granted under the terms of the MIT License:
# https://opensource.org/licenses/MIT.

from .abc import InvalidPath
from .abc import PathBoundaryFinder
from .factory import STRATEGY_NAMES
from .factory import StrategyName
from .factory import new_boundary_finder
from .flavor import FlavorName
from .flavor import PathFlavor
from .flavor import POSIX_FLAVOR
from .flavor import WINDOWS_FLAVOR
from .flavor import get_host_flavor_name
from .flavor import get_path_flavor
from .native import NativeBoundaryFinder
from .reference import ReferenceBoundaryFinder

__all__ = [
    "InvalidPath",
    "PathBoundaryFinder",
    "STRATEGY_NAMES",
    "StrategyName",
    "new_boundary_finder",
    "FlavorName",
    "PathFlavor",
    "POSIX_FLAVOR",
    "WINDOWS_FLAVOR",
    "get_host_flavor_name",
    "get_path_flavor",
    "NativeBoundaryFinder",
    "ReferenceBoundaryFinder",
]
