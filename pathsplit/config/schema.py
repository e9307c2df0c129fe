# Copyright © 2024 Norman Fomferra and contributors
# Permissions are hereby granted under the terms of the MIT License:
# https://opensource.org/licenses/MIT.

import json
from typing import Any, Literal

from .defaults import DEFAULT_FLAVOR
from .defaults import DEFAULT_STRATEGY
from .markdown import schema_to_markdown
from ..log import LOG_LEVELS

LOG_REF_URL = (
    "https://docs.python.org/3/library/logging.config.html"
    "#logging-config-dictschema"
)

FLAVOR_SCHEMA = {
    "description": (
        "The separator convention of paths."
        " `posix` paths use `/` as the only separator."
        " `windows` paths use `\\` and `/` as separators"
        " and may start with a drive letter or an UNC prefix."
        " Defaults to the convention of the host."
    ),
    "enum": ["posix", "windows"],
    "default": DEFAULT_FLAVOR,
}

STRATEGY_SCHEMA = {
    "description": (
        "The strategy used to find the boundary between"
        " directory name and last component."
        " `native` uses the host's path primitive where one is"
        " available for the flavor and falls back to `reference`"
        " otherwise. Both strategies yield identical results."
    ),
    "enum": ["reference", "native"],
    "default": DEFAULT_STRATEGY,
}

DETAILED_LOGGING_SCHEMA = {
    "description": (
        f"Detailed logging configuration. For details refer to the"
        f" [dictionary schema]({LOG_REF_URL})"
        f" of the Python module `logging.config`."
    ),
    "type": "object",
    "properties": dict(
        version={"description": "Logging schema version.", "const": 1},
        formatters={
            "description": "Formatter definitions, keyed by formatter id.",
            "type": "object",
            "additionalProperties": {"type": "object"},
        },
        handlers={
            "description": "Handler definitions, keyed by handler id.",
            "type": "object",
            "additionalProperties": {
                "type": "object",
                "properties": {
                    "class": {
                        "description": "The fully qualified name of the handler class.",
                        "type": "string",
                    },
                    "level": {
                        "description": "The level of the handler.",
                        "enum": LOG_LEVELS,
                    },
                },
                "required": ["class"],
            },
        },
        loggers={
            "description": (
                "Logger definitions, keyed by logger name."
                " The tool's logger has the id `'pathsplit'`."
            ),
            "type": "object",
            "additionalProperties": {
                "type": "object",
                "properties": {
                    "level": {
                        "description": "The level of the logger.",
                        "enum": LOG_LEVELS,
                    },
                    "handlers": {
                        "description": "A list of ids of the handlers for this logger.",
                        "type": "array",
                        "items": {"type": "string"},
                    },
                },
            },
        },
    ),
    "required": ["version"],
    "additionalProperties": True,
}

LOGGING_SCHEMA = {
    "description": "Logging configuration.",
    "oneOf": [
        {
            "description": (
                "Shortform that enables logging to the console"
                ' using log level `"INFO"`.'
            ),
            "type": "boolean",
        },
        {
            "description": (
                "Shortform that enables logging to the console"
                " using the specified log level."
            ),
            "enum": LOG_LEVELS,
        },
        DETAILED_LOGGING_SCHEMA,
    ],
}

CONFIG_SCHEMA_V1 = {
    "title": "Configuration Reference",
    "type": "object",
    "properties": dict(
        version={
            "description": (
                "Configuration schema version."
                " Allows the schema to evolve while still"
                " preserving backwards compatibility."
            ),
            "const": 1,
            "default": 1,
        },
        flavor=FLAVOR_SCHEMA,
        strategy=STRATEGY_SCHEMA,
        logging=LOGGING_SCHEMA,
    ),
    "additionalProperties": False,
}


# noinspection PyShadowingBuiltins
def get_config_schema(
    format: Literal["md"] | Literal["json"] | Literal["dict"] = "dict",
) -> str | dict[str, Any]:
    """Get the configuration schema in the given format.

    Args:
        format: One of "md" (markdown), "json" (JSON Schema), or
            "dict" (JSON Schema object).
    """
    if format == "json":
        return json.dumps(CONFIG_SCHEMA_V1, indent=2)
    elif format == "md":
        return schema_to_markdown(CONFIG_SCHEMA_V1)
    else:
        return dict(CONFIG_SCHEMA_V1)
