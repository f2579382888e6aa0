"""Schema algebra.

Schemas are immutable trees of the node classes below. They are usually
written in shorthand and coerced with :func:`as_schema`::

    User = as_schema({"id?": int, "name": str, "tags": ArrayOf(str)})

Construction never fails: an item that is not a schema becomes an
:class:`Invalid` node and is reported when it is validated or projected.
"""
from __future__ import annotations
import typing
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Union

Kind = typing.Literal["string", "number", "boolean", "null"]

META_PREFIX = "$"
OPTIONAL_SUFFIX = "?"
WRAPPED_KEY = "$type"
PREDICATE_KEY = "$validate"

Predicate = Callable[[Any], Any]


def kind_of(value: Any) -> str:
    if value is None: return "null"
    if isinstance(value, bool): return "boolean"
    if isinstance(value, (int, float)): return "number"
    if isinstance(value, str): return "string"
    if isinstance(value, (list, tuple)): return "array"
    if isinstance(value, Mapping): return "object"
    return type(value).__name__


@dataclass(frozen=True)
class Primitive:
    kind: Kind


@dataclass(frozen=True)
class Literal:
    value: Union[str, int, float]

    @property
    def kind(self) -> str:
        return "string" if isinstance(self.value, str) else "number"


@dataclass(frozen=True)
class Field:
    name: str
    schema: "Schema"
    optional: bool = False

    def __post_init__(self):
        object.__setattr__(self, "schema", as_schema(self.schema))

    @classmethod
    def parse(cls, key: str, item: Any) -> "Field":
        """Build a field from a shorthand key, where a trailing ``?`` marks it optional."""
        if not isinstance(key, str):
            return cls(str(key), Invalid(key))
        if key.endswith(OPTIONAL_SUFFIX):
            return cls(key[:-1], item, optional=True)
        return cls(key, item)


@dataclass(frozen=True)
class Shape:
    fields: tuple[Field, ...] = ()

    def __post_init__(self):
        items = self.fields.items() if isinstance(self.fields, Mapping) else self.fields
        by_name: dict[str, Field] = {}
        for item in items:
            f = item if isinstance(item, Field) else Field.parse(*item)
            if f.name.startswith(META_PREFIX):
                continue
            by_name[f.name] = f
        object.__setattr__(self, "fields", tuple(by_name.values()))

    def names(self) -> set[str]:
        return {f.name for f in self.fields}


@dataclass(frozen=True)
class ArrayOf:
    inner: "Schema"

    def __post_init__(self):
        object.__setattr__(self, "inner", as_schema(self.inner))


@dataclass(frozen=True)
class MapOf:
    inner: "Schema"

    def __post_init__(self):
        object.__setattr__(self, "inner", as_schema(self.inner))


@dataclass(frozen=True, init=False)
class AnyOf:
    variants: tuple["Schema", ...]

    def __init__(self, first: Any, second: Any, *rest: Any):
        object.__setattr__(self, "variants", tuple(as_schema(v) for v in (first, second, *rest)))


OneOf = AnyOf


@dataclass(frozen=True, init=False)
class AllOf:
    variants: tuple["Schema", ...]

    def __init__(self, first: Any, second: Any, *rest: Any):
        object.__setattr__(self, "variants", tuple(as_schema(v) for v in (first, second, *rest)))


@dataclass(frozen=True)
class Refined:
    """A base schema plus an optional predicate run on values the base accepts.

    Only a predicate returning exactly ``False`` rejects the value; ``None``
    and any other return value accept it.
    """
    base: "Schema"
    predicate: Optional[Predicate] = field(default=None, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "base", as_schema(self.base))


@dataclass(frozen=True)
class Invalid:
    item: Any = field(compare=False)


Schema = Union[Primitive, Literal, Shape, ArrayOf, MapOf, AnyOf, AllOf, Refined, Invalid]

STRING = Primitive("string")
NUMBER = Primitive("number")
BOOLEAN = Primitive("boolean")
NULL = Primitive("null")

_SCHEMA_TYPES = (Primitive, Literal, Shape, ArrayOf, MapOf, AnyOf, AllOf, Refined, Invalid)
_PRIMITIVE_TYPES = {str: STRING, int: NUMBER, float: NUMBER, bool: BOOLEAN, type(None): NULL}


def as_schema(item: Any) -> Schema:
    if isinstance(item, _SCHEMA_TYPES):
        return item
    if item is None:
        return NULL
    if isinstance(item, type) and item in _PRIMITIVE_TYPES:
        return _PRIMITIVE_TYPES[item]
    if isinstance(item, str) or (isinstance(item, (int, float)) and not isinstance(item, bool)):
        return Literal(item)
    if isinstance(item, Mapping):
        if WRAPPED_KEY in item:
            return Refined(item[WRAPPED_KEY], item.get(PREDICATE_KEY))
        if not all(isinstance(key, str) for key in item):
            return Invalid(item)
        return Shape(item)
    if isinstance(item, (list, tuple)) and len(item) == 1:
        return ArrayOf(item[0])
    return Invalid(item)


def shape_fields(node: Schema) -> Optional[dict[str, Field]]:
    """Declared fields of a shape-like node, or None when the node has no fields.

    Intersections merge their members' fields, later members winning.
    """
    if isinstance(node, Shape):
        return {f.name: f for f in node.fields}
    if isinstance(node, Refined):
        return shape_fields(node.base)
    if isinstance(node, AllOf):
        merged: dict[str, Field] = {}
        for variant in node.variants:
            fields = shape_fields(variant)
            if fields is None:
                return None
            merged.update(fields)
        return merged
    return None
