# Copyright © 2024 Norman Fomferra and contributors
# Permissions are hereby granted under the terms of the MIT License:
# https://opensource.org/licenses/MIT.

import json
from typing import Any

_UNDEFINED = object()


def schema_to_markdown(schema: dict[str, Any]) -> str:
    """Render a JSON schema as markdown text.
    Top-level properties become second-level headings.
    """
    lines = []
    title = schema.get("title")
    if title:
        lines.extend([f"# {title}", ""])
    for name, property_schema in schema.get("properties", {}).items():
        lines.extend(["", f"## `{name}`", ""])
        lines.extend(_describe(property_schema))
    return "\n".join(lines)


def _describe(schema: dict[str, Any]) -> list[str]:
    lines = []

    _type = schema.get("type")
    if _type:
        types = [_type] if isinstance(_type, str) else _type
        lines.append("Type " + " | ".join(f"_{t}_" for t in types) + ".")

    description = schema.get("description")
    if description:
        lines.append(description)

    one_of = schema.get("oneOf") or schema.get("anyOf")
    if one_of:
        lines.append("Must be one of the following:")
        for sub_schema in one_of:
            sub_lines = _describe(sub_schema)
            if sub_lines:
                lines.extend(["", "  * " + sub_lines[0]])
                lines.extend("    " + line for line in sub_lines[1:])
        lines.append("")

    const = schema.get("const", _UNDEFINED)
    if const is not _UNDEFINED:
        lines.append(f"Its value is `{json.dumps(const)}`.")

    enum = schema.get("enum")
    if enum:
        lines.append(f"Must be one of `{', '.join(json.dumps(v) for v in enum)}`.")

    default = schema.get("default", _UNDEFINED)
    if default is not _UNDEFINED:
        lines.append(f"Defaults to `{json.dumps(default)}`.")

    for name, property_schema in schema.get("properties", {}).items():
        lines.extend(["", f"  * `{name}`:"])
        lines.extend("    " + line for line in _describe(property_schema))

    return lines
