from __future__ import annotations
import re
from typing import Sequence, Union

Segment = Union[str, int]

SIMPLE_KEY = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def format_path(path: Sequence[Segment]) -> str:
    out = ""
    for segment in path:
        if isinstance(segment, int):
            out += f"[{segment}]"
        elif not isinstance(segment, str):
            out += f"[{segment!r}]"
        elif SIMPLE_KEY.fullmatch(segment):
            out += f".{segment}" if out else segment
        else:
            out += '["' + segment.replace('"', '\\"') + '"]'
    return out


class ShapeKitError(Exception):
    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class ValidationError(ShapeKitError):
    """A value did not match its schema.

    ``reason`` is the bare explanation, ``path`` the tuple of field names and
    indices leading to the offending value, ``message`` the two combined.
    """

    def __init__(self, reason: str, path: Sequence[Segment] = ()):
        self.reason = reason
        location = format_path(path)
        self.message = f"Field {location}. {reason}" if location else reason
        super().__init__(self.message)
        self.path = tuple(path)


class ShapeMismatchError(ValidationError):
    pass

class StructureMismatchError(ValidationError):
    pass

class MissingFieldError(ValidationError):
    pass

class UnexpectedFieldError(ValidationError):
    pass

class UnionExhaustedError(ValidationError):
    pass

class CustomValidationFailed(ValidationError):
    pass

class CustomValidationError(ValidationError):
    pass

class SchemaAuthoringError(ValidationError):
    pass


class RequestValidationError(ValidationError):
    status_code = 400

class ResponseValidationError(ValidationError):
    pass


class PathTemplateError(ShapeKitError):
    pass

class EndpointError(ShapeKitError):
    pass

class ExportError(ShapeKitError):
    pass

class ConfigError(ShapeKitError):
    pass
