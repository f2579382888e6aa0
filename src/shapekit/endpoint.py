from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Union

from .errors import EndpointError
from .paths import PathPart, interpolate, param_names, parse_path
from .schema import Schema, as_schema

METHODS = ("get", "post", "put", "patch", "delete", "head", "options")
METHODS_WITH_PAYLOAD = ("post", "put", "patch")

# A schema, True for "present but untyped", or None/False for "absent".
Slot = Union[Schema, bool, None]


def _normalize_slot(slot: Any) -> Slot:
    if slot is None or isinstance(slot, bool):
        return slot
    return as_schema(slot)


@dataclass(frozen=True)
class Endpoint:
    name: str
    method: str
    path: str
    body: Slot = None
    query: Slot = None
    response: Slot = None
    parts: tuple[PathPart, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        method = self.method.lower()
        if method not in METHODS:
            raise EndpointError(f"Unsupported method {self.method!r} for endpoint {self.name!r}")
        if not self.name.isidentifier():
            raise EndpointError(f"Endpoint name {self.name!r} is not a valid identifier")
        object.__setattr__(self, "method", method)
        body = self.body
        if body is None and method in METHODS_WITH_PAYLOAD:
            body = True
        object.__setattr__(self, "body", _normalize_slot(body))
        object.__setattr__(self, "query", _normalize_slot(self.query))
        object.__setattr__(self, "response", _normalize_slot(self.response))
        object.__setattr__(self, "parts", tuple(parse_path(self.path)))

    @property
    def params(self) -> list[str]:
        return param_names(self.parts)

    @property
    def url_template(self) -> str:
        return interpolate(self.parts)

    @property
    def has_body(self) -> bool:
        return self.body is not None and self.body is not False

    @property
    def has_query(self) -> bool:
        return self.query is not None and self.query is not False

    @property
    def has_response(self) -> bool:
        return self.response is not None and self.response is not False

    def to_json_obj(self) -> dict:
        from .emitters.types import project

        def describe(slot):
            if isinstance(slot, bool) or slot is None:
                return slot
            return project(slot)

        return {
            "name": self.name,
            "method": self.method,
            "path": self.path,
            "params": self.params,
            "body": describe(self.body),
            "query": describe(self.query),
            "response": describe(self.response),
        }
