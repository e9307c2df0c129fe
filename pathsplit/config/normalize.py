# Copyright © 2024 Norman Fomferra and contributors
# Permissions are hereby granted under the terms of the MIT License:
# https://opensource.org/licenses/MIT.

import io
import json
import os
import string
from typing import Any

import yaml

from ..fsutil.fileobj import FileObj
from ..log import logger

ConfigItem = FileObj | str | dict[str, Any]
"""The possible types used to represent pathsplit configuration."""

ConfigList = list[ConfigItem] | tuple[ConfigItem]
"""A sequence of possible pathsplit configuration types."""

ConfigLike = ConfigItem | ConfigList | None
"""Type for a pathsplit configuration-like object."""

YAML_EXTENSIONS = {".yml", ".yaml", ".YML", ".YAML"}


def normalize_config(config_like: ConfigLike) -> dict[str, Any]:
    """Normalize the configuration-like value `config_like`
    into a configuration dictionary.

    The configuration-like value `config_like`

    * can be a dict (the configuration itself),
    * a str or a FileObj (configuration loaded from URI),
    * a sequence of configuration-like values.
    * or None.

    The values of a sequence will be normalized first, then all
    resulting configuration dictionaries will be merged in to one.

    Args:
        config_like: A configuration-like value.

    Returns:
        The normalized configuration dictionary.
    """
    if isinstance(config_like, dict):
        return config_like
    if config_like is None:
        return {}
    if isinstance(config_like, FileObj):
        return load_config(config_like)
    if isinstance(config_like, str):
        return load_config(FileObj(config_like))
    if isinstance(config_like, (list, tuple)):
        return merge_configs(*[normalize_config(c) for c in config_like])
    raise TypeError(
        "config_like must of type NoneType, FileObj, dict,"
        " str, or a sequence of such values"
    )


def load_config(config_file: FileObj) -> dict[str, Any]:
    """Load a JSON or YAML configuration file.
    Environment variables referred to as `$NAME` or `${NAME}`
    are interpolated before parsing.
    """
    logger.info(f"Reading configuration {config_file.uri}")
    source = config_file.read(mode="r")
    source = string.Template(source).safe_substitute(os.environ)
    stream = io.StringIO(source)
    _, ext = os.path.splitext(config_file.filename)
    if ext in YAML_EXTENSIONS:
        config = yaml.safe_load(stream)
    else:
        config = json.load(stream)
    if not isinstance(config, dict):
        raise TypeError(f"Invalid configuration: {config_file.uri}: object expected")
    return config


def merge_configs(*configs: dict[str, Any]) -> dict[str, Any]:
    """Merge configurations, later ones take precedence.
    Nested dictionaries are merged, all other values replaced.
    """
    merged_config: dict[str, Any] = {}
    for config in configs:
        merged_config = _merge_dicts(merged_config, config)
    return merged_config


def _merge_dicts(dict_1: dict[str, Any], dict_2: dict[str, Any]) -> dict[str, Any]:
    merged = dict(dict_1)
    for key, value in dict_2.items():
        if isinstance(merged.get(key), dict) and isinstance(value, dict):
            merged[key] = _merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
