from __future__ import annotations

from ..endpoint import Endpoint

HEADERS = "{ 'Content-Type': 'application/json' }"


def fetch_call(endpoint: Endpoint, typed: bool) -> str:
    url = endpoint.url_template
    if endpoint.has_query:
        url += "?${new URLSearchParams(query as any)}" if typed else "?${new URLSearchParams(query)}"
    init = f"method: '{endpoint.method.upper()}', headers: {HEADERS}"
    if endpoint.has_body:
        init += ", body: JSON.stringify(body)"
    return f"fetch(`{url}`, {{ {init} }})"


def function_body(endpoint: Endpoint, returns: str | None) -> str:
    """Statements of the generated function; ``returns`` is the cast for the parsed response."""
    call = fetch_call(endpoint, typed=returns is not None)
    if not endpoint.has_response:
        return f"  return {call};\n"
    parsed = "response.json()" if not returns else f"(await response.json()) as {returns}"
    return f"  const response = await {call};\n  return {parsed};\n"
