# Copyright © 2024 Norman Fomferra and contributors
# Permissions are hereby granted under the terms of the MIT License:
# https://opensource.org/licenses/MIT.

from typing import Literal, Type

from .abc import PathBoundaryFinder
from .flavor import FlavorName
from .flavor import PathFlavor
from .flavor import get_path_flavor
from .native import NativeBoundaryFinder
from .reference import ReferenceBoundaryFinder
from ..log import logger

StrategyName = Literal["reference"] | Literal["native"]

_strategies: dict[str, Type[PathBoundaryFinder]] = {
    "reference": ReferenceBoundaryFinder,
    "native": NativeBoundaryFinder,
}

STRATEGY_NAMES = list(_strategies.keys())


def new_boundary_finder(
    flavor: FlavorName | PathFlavor | None = None,
    strategy: StrategyName = "native",
) -> PathBoundaryFinder:
    """Create a new path boundary finder.

    If the `"native"` strategy is requested for a flavor that has no
    native path primitive, the `"reference"` strategy is used instead.

    Args:
        flavor: The path flavor, defaults to the host's flavor.
        strategy: The strategy name, `"reference"` or `"native"`.

    Returns:
        A new path boundary finder.

    Raises:
        ValueError: If *flavor* or *strategy* is unknown.
    """
    path_flavor = get_path_flavor(flavor)
    finder_class = _strategies.get(strategy)
    if finder_class is None:
        raise ValueError(
            f"unknown strategy {strategy!r},"
            f" must be one of {', '.join(map(repr, STRATEGY_NAMES))}"
        )
    if finder_class is NativeBoundaryFinder and not finder_class.supports(
        path_flavor
    ):
        logger.debug(
            f"No native path primitive for flavor {path_flavor.name!r},"
            f" using reference strategy"
        )
        finder_class = ReferenceBoundaryFinder
    logger.debug(
        f"Using {finder_class.__name__} for flavor {path_flavor.name!r}"
    )
    return finder_class(path_flavor)
