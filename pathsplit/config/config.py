# Copyright © 2024 Norman Fomferra and contributors
# Permissions are hereby granted under the terms of the MIT License:
# https://opensource.org/licenses/MIT.

from typing import Any, Dict, Literal

from .defaults import DEFAULT_FLAVOR
from .defaults import DEFAULT_STRATEGY


class Config:
    """Provides access to configuration values.

    Args:
        config_dict: A validated configuration dictionary.
    """

    def __init__(self, config_dict: Dict[str, Any]):
        self._config = config_dict

    @property
    def flavor(self) -> Literal["posix"] | Literal["windows"]:
        """The separator convention of paths.
        Defaults to the convention of the host.
        """
        return self._config.get("flavor") or DEFAULT_FLAVOR

    @property
    def strategy(self) -> Literal["reference"] | Literal["native"]:
        """The name of the strategy used to split paths.
        Defaults to `"native"`.
        """
        return self._config.get("strategy") or DEFAULT_STRATEGY

    @property
    def logging(self) -> dict[str, Any] | str | bool | None:
        """Logging configuration."""
        return self._config.get("logging")
