# Copyright © 2024 Norman Fomferra and contributors
# Permissions are hereby granted under the terms of the MIT License:
# https://opensource.org/licenses/MIT.

from .config import Config
from .defaults import DEFAULT_FLAVOR, DEFAULT_STRATEGY
from .normalize import (
    ConfigItem,
    ConfigLike,
    ConfigList,
    load_config,
    merge_configs,
    normalize_config,
)
from .schema import get_config_schema
from .validate import validate_config

__all__ = [
    "Config",
    "DEFAULT_FLAVOR",
    "DEFAULT_STRATEGY",
    "ConfigItem",
    "ConfigLike",
    "ConfigList",
    "load_config",
    "merge_configs",
    "normalize_config",
    "get_config_schema",
    "validate_config",
]
