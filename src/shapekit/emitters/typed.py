from __future__ import annotations

from ..endpoint import Endpoint
from .common import function_body
from .types import project as project_type

GENERIC_QUERY = "Record<string, string>"
GENERIC_BODY = "any"


def parameters(endpoint: Endpoint) -> list[str]:
    args = [f"{param}: string" for param in endpoint.params]
    if endpoint.has_query:
        args.append(f"query: {GENERIC_QUERY if endpoint.query is True else project_type(endpoint.query)}")
    if endpoint.has_body:
        args.append(f"body: {GENERIC_BODY if endpoint.body is True else project_type(endpoint.body)}")
    return args


def project(endpoint: Endpoint) -> str:
    """Render one endpoint as an exported TypeScript function."""
    signature = f"export async function {endpoint.name}({', '.join(parameters(endpoint))})"
    returns = ""
    if endpoint.has_response and endpoint.response is not True:
        response_type = project_type(endpoint.response)
        signature += f": Promise<{response_type}>"
        returns = response_type
    return f"{signature} {{\n{function_body(endpoint, returns)}}}\n"
