"""Recursive validation of runtime values against schema nodes.

``validate`` returns the value it was given, untouched, or raises a
:class:`~shapekit.errors.ValidationError` at the first mismatch. The path
to the offending value is carried down the recursion as a tuple and only
used to build the error message.
"""
from __future__ import annotations
import json
import logging
from collections.abc import Mapping
from typing import Any, Optional

from .errors import (
    CustomValidationError,
    CustomValidationFailed,
    MissingFieldError,
    SchemaAuthoringError,
    Segment,
    ShapeMismatchError,
    StructureMismatchError,
    UnexpectedFieldError,
    UnionExhaustedError,
    ValidationError,
)
from .schema import (
    META_PREFIX,
    AllOf,
    AnyOf,
    ArrayOf,
    Field,
    Invalid,
    Literal,
    MapOf,
    Primitive,
    Refined,
    Shape,
    as_schema,
    kind_of,
    shape_fields,
)

logger = logging.getLogger(__name__)

Path = tuple[Segment, ...]


def quote(value: Any) -> str:
    try:
        return json.dumps(value, ensure_ascii=False)
    except (TypeError, ValueError):
        return repr(value)


def validate(schema: Any, value: Any, *, strict: bool = True) -> Any:
    """Check ``value`` against ``schema`` and return it unchanged.

    With ``strict`` (the default) objects may not carry fields their shape
    does not declare. Fields whose name starts with ``$`` are always refused.
    """
    _validate(as_schema(schema), value, (), strict)
    return value


def is_valid(schema: Any, value: Any, *, strict: bool = True) -> bool:
    return attempt(as_schema(schema), value, strict=strict) is None


def attempt(schema: Any, value: Any, path: Path = (), *, strict: bool = True) -> Optional[ValidationError]:
    """Validate and hand back the failure instead of raising it."""
    try:
        _validate(as_schema(schema), value, path, strict)
    except ValidationError as error:
        return error
    return None


def _validate(node, value: Any, path: Path, strict: bool) -> None:
    if isinstance(node, Primitive):
        _check_primitive(node, value, path)
    elif isinstance(node, Literal):
        _check_literal(node, value, path)
    elif isinstance(node, Invalid):
        raise SchemaAuthoringError(f'Unexpected item of type "{type(node.item).__name__}": {quote(value)}', path)
    elif isinstance(node, ArrayOf):
        if not isinstance(value, (list, tuple)):
            raise StructureMismatchError(f"Expected to be an array but got: {quote(value)}", path)
        for index, item in enumerate(value):
            _validate(node.inner, item, path + (index,), strict)
    elif isinstance(node, MapOf):
        if not isinstance(value, Mapping):
            raise StructureMismatchError(f"Expected to be an object but got: {quote(value)}", path)
        for key, item in value.items():
            _validate(node.inner, item, path + (key,), strict)
    elif isinstance(node, AnyOf):
        _check_union(node, value, path, strict)
    elif isinstance(node, AllOf):
        _check_intersection(node, value, path, strict)
    elif isinstance(node, Refined):
        _check_refined(node, value, path, strict)
    elif isinstance(node, Shape):
        _check_shape(node, value, path, strict)
    else:
        raise SchemaAuthoringError(f'Unexpected item of type "{type(node).__name__}": {quote(value)}', path)


def _check_primitive(node: Primitive, value: Any, path: Path) -> None:
    if kind_of(value) == node.kind:
        return
    if node.kind == "null":
        raise ShapeMismatchError(f"Expected to be null but got: {quote(value)}", path)
    raise ShapeMismatchError(f"Expected to be a {node.kind} but got: {quote(value)}", path)


def _check_literal(node: Literal, value: Any, path: Path) -> None:
    if kind_of(value) == node.kind and value == node.value:
        return
    raise ShapeMismatchError(f"Expected {node.kind} {quote(node.value)} but got: {quote(value)}", path)


def _check_union(node: AnyOf, value: Any, path: Path, strict: bool) -> None:
    # First match wins; the reasons of rejected variants do not reach the message.
    for index, variant in enumerate(node.variants):
        error = attempt(variant, value, path, strict=strict)
        if error is None:
            return
        logger.debug("union variant %d rejected value: %s", index, error.message)
    raise UnionExhaustedError(f"Expected to be an one of union types but got: {quote(value)}", path)


def _check_intersection(node: AllOf, value: Any, path: Path, strict: bool) -> None:
    for variant in node.variants:
        if shape_fields(variant) is None:
            raise SchemaAuthoringError(f"Expected intersection member to be an object type: {variant!r}", path)
        _validate(variant, value, path, False)

    if strict:
        _check_excess_fields(value, shape_fields(node), path)


def _check_refined(node: Refined, value: Any, path: Path, strict: bool) -> None:
    _validate(node.base, value, path, strict)
    if node.predicate is None:
        return
    try:
        outcome = node.predicate(value)
    except Exception as error:
        raise CustomValidationError(str(error), path) from error
    if outcome is False:
        raise CustomValidationFailed(f"Custom validation failed for value: {quote(value)}", path)


def _check_shape(node: Shape, value: Any, path: Path, strict: bool) -> None:
    if not isinstance(value, Mapping):
        raise StructureMismatchError(f"Expected to be an object: {quote(value)}", path)

    for f in node.fields:
        if f.name not in value:
            if f.optional:
                continue
            raise MissingFieldError("Missing required field", path + (f.name,))
        _validate(f.schema, value[f.name], path + (f.name,), strict)

    _check_meta_fields(value, path)
    if strict:
        _check_excess_fields(value, {f.name: f for f in node.fields}, path)


def _check_meta_fields(value: Mapping, path: Path) -> None:
    for key in value:
        if isinstance(key, str) and key.startswith(META_PREFIX):
            raise UnexpectedFieldError(f"Fields starting with {META_PREFIX} are forbidden: {quote(key)}", path)


def _check_excess_fields(value: Mapping, declared: dict[str, Field], path: Path) -> None:
    for key in value:
        if key not in declared:
            raise UnexpectedFieldError(f"Unexpected object property: {quote(key)}", path)
