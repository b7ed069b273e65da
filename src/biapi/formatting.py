"""
Rendering of API responses for the terminal.

``json`` mode prints the response as indented JSON; any other mode
prints an indented tree. Rendering never alters the data.
"""

import json
from typing import Any, List

INDENT = "  "


def _scalar(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, dict):
        return "{}"
    if isinstance(value, list):
        return "[]"
    return str(value)


def _is_leaf(value: Any) -> bool:
    return not isinstance(value, (dict, list)) or not value


def _render(value: Any, depth: int) -> List[str]:
    pad = INDENT * depth
    lines = []

    if isinstance(value, dict) and value:
        for key, item in value.items():
            if _is_leaf(item):
                lines.append(f"{pad}{key}: {_scalar(item)}")
            else:
                lines.append(f"{pad}{key}:")
                lines.extend(_render(item, depth + 1))
    elif isinstance(value, list) and value:
        for index, item in enumerate(value, start=1):
            if _is_leaf(item):
                lines.append(f"{pad}- {_scalar(item)}")
            else:
                lines.append(f"{pad}[{index}]")
                lines.extend(_render(item, depth + 1))
    else:
        lines.append(f"{pad}{_scalar(value)}")

    return lines


def format_output(data: Any, mode: str = "pretty") -> str:
    """Render ``data`` as JSON (``mode == "json"``) or as a readable tree."""
    if mode == "json":
        return json.dumps(data, indent=2, ensure_ascii=False)
    return "\n".join(_render(data, 0))
