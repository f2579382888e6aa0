"""Checks for the two sides of an endpoint.

A server calls :func:`check_request` before handling a call and
:func:`check_response` before sending its payload. Failures carry the
message a handler can return as a 400 body.
"""
from __future__ import annotations
from typing import Any, Callable, Optional, Type

from .endpoint import Endpoint, Slot
from .errors import RequestValidationError, ResponseValidationError, ValidationError
from .validator import validate

ErrorHook = Callable[[ValidationError], Any]

_ABSENT = object()


def _check(slot: Slot, payload: Any, prefix: str, error_type: Type[ValidationError],
           on_error: Optional[ErrorHook]) -> None:
    if slot is None or isinstance(slot, bool):
        return
    try:
        validate(slot, payload)
    except ValidationError as error:
        if on_error is not None:
            on_error(error)
            return
        wrapped = error_type(f"{prefix} {error.message}")
        wrapped.path = error.path
        raise wrapped from error


def check_request(endpoint: Endpoint, body: Any = _ABSENT, query: Any = _ABSENT,
                  on_error: Optional[ErrorHook] = None) -> None:
    if body is not _ABSENT:
        _check(endpoint.body, body, "Error while validating request payload.", RequestValidationError, on_error)
    if query is not _ABSENT:
        _check(endpoint.query, query, "Error while validating request query.", RequestValidationError, on_error)


def check_response(endpoint: Endpoint, payload: Any, on_error: Optional[ErrorHook] = None) -> Any:
    _check(endpoint.response, payload, "Error while validating response payload.", ResponseValidationError,
           on_error)
    return payload
