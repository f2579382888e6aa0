from __future__ import annotations

from ..endpoint import Endpoint
from .common import function_body


def project(endpoint: Endpoint) -> str:
    args = [*endpoint.params, "query" if endpoint.has_query else "", "body" if endpoint.has_body else ""]
    signature = f"export async function {endpoint.name}({', '.join(a for a in args if a)})"
    return f"{signature} {{\n{function_body(endpoint, None)}}}\n"
