from __future__ import annotations
import json
from typing import Any

from ..errors import SIMPLE_KEY, SchemaAuthoringError
from ..schema import AllOf, AnyOf, ArrayOf, Invalid, Literal, MapOf, Primitive, Refined, Shape, as_schema


def property_key(name: str) -> str:
    if SIMPLE_KEY.fullmatch(name):
        return name
    return json.dumps(name, ensure_ascii=False)


def _grouped(node) -> str:
    text = project(node)
    inner = node
    while isinstance(inner, Refined):
        inner = inner.base
    if isinstance(inner, (AnyOf, AllOf)):
        return f"({text})"
    return text


def project(schema: Any) -> str:
    """Render a schema as a TypeScript type expression."""
    node = as_schema(schema)
    if isinstance(node, Primitive):
        return node.kind
    if isinstance(node, Literal):
        return json.dumps(node.value, ensure_ascii=False)
    if isinstance(node, Invalid):
        raise SchemaAuthoringError(f"Invalid type: {node.item!r}")
    if isinstance(node, ArrayOf):
        return f"{_grouped(node.inner)}[]"
    if isinstance(node, MapOf):
        return f"Record<string, {project(node.inner)}>"
    if isinstance(node, AnyOf):
        return " | ".join(project(v) for v in node.variants)
    if isinstance(node, AllOf):
        return " & ".join(_grouped(v) for v in node.variants)
    if isinstance(node, Refined):
        return project(node.base)
    if isinstance(node, Shape):
        if not node.fields:
            return "{}"
        props = [
            f"{property_key(f.name)}{'?' if f.optional else ''}: {project(f.schema)}"
            for f in node.fields
        ]
        return "{ " + "; ".join(props) + " }"
    raise SchemaAuthoringError(f"Invalid type: {node!r}")
