from __future__ import annotations
from dataclasses import dataclass
from typing import Literal, Sequence

from .errors import PathTemplateError

PartType = Literal["string", "separator", "param"]

WILDCARD = "*"


@dataclass(frozen=True)
class PathPart:
    type: PartType
    text: str


def _is_name_char(char: str) -> bool:
    return char.isascii() and (char.isalnum() or char == "_")


def parse_path(template: str) -> list[PathPart]:
    """Split a route template such as ``/users/:id/*`` into tagged parts."""
    parts: list[PathPart] = []
    text = ""

    def flush():
        nonlocal text
        if text:
            parts.append(PathPart("string", text))
            text = ""

    i = 0
    while i < len(template):
        char = template[i]
        if char == "\\":
            text += template[i:i + 2]
            i += 2
            continue
        if char == "/":
            flush()
            parts.append(PathPart("separator", "/"))
        elif char == ":":
            flush()
            end = i + 1
            while end < len(template) and _is_name_char(template[end]):
                end += 1
            if end == i + 1:
                raise PathTemplateError("Empty param name", template)
            parts.append(PathPart("param", template[i + 1:end]))
            i = end
            continue
        elif char == WILDCARD:
            flush()
            parts.append(PathPart("param", WILDCARD))
        elif char in "+?":
            raise PathTemplateError(f"{char} is not supported", template)
        else:
            text += char
        i += 1

    flush()
    return parts


def param_names(parts: Sequence[PathPart]) -> list[str]:
    """Parameter names in order; wildcards become ``wildcard``, ``wildcard2``, ..."""
    names = []
    wildcard_index = 1
    for part in parts:
        if part.type != "param":
            continue
        if part.text == WILDCARD:
            names.append("wildcard" if wildcard_index == 1 else f"wildcard{wildcard_index}")
            wildcard_index += 1
        else:
            names.append(part.text)
    return names


def _escape_template_text(text: str) -> str:
    return text.replace("`", "\\`").replace("${", "\\${")


def interpolate(parts: Sequence[PathPart]) -> str:
    """Render the parts as the body of a JavaScript template literal."""
    names = iter(param_names(parts))
    out = ""
    for part in parts:
        if part.type == "param":
            out += "${" + next(names) + "}"
        else:
            out += _escape_template_text(part.text)
    return out
