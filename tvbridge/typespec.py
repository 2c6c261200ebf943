"""JSON notation for type descriptors.

    "string" | "number" | "bool"
    ["list", T] | ["set", T] | ["map", T]
    ["object", {"name": T, ...}]
    ["tuple", [T, ...]]
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Union

from .errors import UnsupportedTypeError
from .json_util import loads
from .types import (
    Bool, Kind, ListType, MapType, Number, ObjectType, SetType, String,
    TupleType, TypeDescriptor, kind_name,
)

_PRIMITIVES = {"string": String, "number": Number, "bool": Bool}
_COLLECTIONS = {"list": ListType, "set": SetType, "map": MapType}


def parse_type(obj: Any) -> TypeDescriptor:
    if isinstance(obj, str):
        if obj in _PRIMITIVES:
            return _PRIMITIVES[obj]
        raise UnsupportedTypeError(obj)
    if not isinstance(obj, list) or len(obj) != 2 or not isinstance(obj[0], str):
        raise UnsupportedTypeError(obj, f"malformed type notation: {obj!r}")

    tag, arg = obj
    if tag in _COLLECTIONS:
        return _COLLECTIONS[tag](parse_type(arg))
    if tag == "object":
        if not isinstance(arg, dict):
            raise UnsupportedTypeError(tag, f"object attributes must be a JSON object, got {arg!r}")
        return ObjectType({name: parse_type(t) for name, t in arg.items()})
    if tag == "tuple":
        if not isinstance(arg, list):
            raise UnsupportedTypeError(tag, f"tuple elements must be a JSON array, got {arg!r}")
        return TupleType(tuple(parse_type(t) for t in arg))
    raise UnsupportedTypeError(tag)


def type_to_json(typ: TypeDescriptor) -> Any:
    kind = getattr(typ, "kind", None)
    if kind in (Kind.STRING, Kind.NUMBER, Kind.BOOL):
        return kind.value
    if kind in (Kind.LIST, Kind.SET, Kind.MAP):
        return [kind.value, type_to_json(typ.element_type)]
    if kind is Kind.OBJECT:
        return ["object", {name: type_to_json(t) for name, t in typ.attribute_types.items()}]
    if kind is Kind.TUPLE:
        return ["tuple", [type_to_json(t) for t in typ.element_types]]
    raise UnsupportedTypeError(kind_name(typ))


def load_type(path: Union[str, Path]) -> TypeDescriptor:
    return parse_type(loads(Path(path).read_bytes()))
