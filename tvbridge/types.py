"""Type descriptors: the closed, recursive set of shapes a typed value may have."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Tuple


class Kind(str, Enum):
    STRING = "string"
    NUMBER = "number"
    BOOL = "bool"
    OBJECT = "object"
    TUPLE = "tuple"
    LIST = "list"
    SET = "set"
    MAP = "map"


PRIMITIVE_KINDS = frozenset({Kind.STRING, Kind.NUMBER, Kind.BOOL})
COLLECTION_KINDS = frozenset({Kind.LIST, Kind.SET, Kind.MAP})


class TypeDescriptor:
    """Base for all descriptors. ``kind`` never changes after construction."""

    kind: Kind

    def is_primitive(self) -> bool:
        return self.kind in PRIMITIVE_KINDS


@dataclass(frozen=True)
class PrimitiveType(TypeDescriptor):
    kind: Kind

    def __post_init__(self):
        # "string" and Kind.STRING must end up the same descriptor
        object.__setattr__(self, "kind", Kind(self.kind))
        if self.kind not in PRIMITIVE_KINDS:
            raise ValueError(f"{self.kind!r} is not a primitive kind")

    def __str__(self) -> str:
        return self.kind.value


String = PrimitiveType(Kind.STRING)
Number = PrimitiveType(Kind.NUMBER)
Bool = PrimitiveType(Kind.BOOL)


@dataclass(frozen=True)
class ObjectType(TypeDescriptor):
    attribute_types: Mapping[str, TypeDescriptor]
    kind: Kind = field(init=False, default=Kind.OBJECT)

    def __post_init__(self):
        # read-only snapshot; callers may keep mutating their own dict
        object.__setattr__(self, "attribute_types", MappingProxyType(dict(self.attribute_types)))

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ObjectType):
            return NotImplemented
        return dict(self.attribute_types) == dict(other.attribute_types)

    def __hash__(self) -> int:
        return hash((Kind.OBJECT, frozenset(self.attribute_types.items())))

    def __str__(self) -> str:
        inner = ", ".join(f"{k}: {v}" for k, v in sorted(self.attribute_types.items()))
        return f"object{{{inner}}}"


@dataclass(frozen=True)
class TupleType(TypeDescriptor):
    element_types: Tuple[TypeDescriptor, ...]
    kind: Kind = field(init=False, default=Kind.TUPLE)

    def __post_init__(self):
        object.__setattr__(self, "element_types", tuple(self.element_types))

    def __str__(self) -> str:
        return f"tuple[{', '.join(str(t) for t in self.element_types)}]"


@dataclass(frozen=True)
class ListType(TypeDescriptor):
    element_type: TypeDescriptor
    kind: Kind = field(init=False, default=Kind.LIST)

    def __str__(self) -> str:
        return f"list[{self.element_type}]"


@dataclass(frozen=True)
class SetType(TypeDescriptor):
    element_type: TypeDescriptor
    kind: Kind = field(init=False, default=Kind.SET)

    def __str__(self) -> str:
        return f"set[{self.element_type}]"


@dataclass(frozen=True)
class MapType(TypeDescriptor):
    """String-keyed, homogeneous values."""
    element_type: TypeDescriptor
    kind: Kind = field(init=False, default=Kind.MAP)

    def __str__(self) -> str:
        return f"map[{self.element_type}]"


def kind_name(typ: Any) -> str:
    """Best-effort label for error messages, even for non-descriptors."""
    kind = getattr(typ, "kind", None)
    if isinstance(kind, Kind):
        return kind.value
    if kind is not None:
        return str(kind)
    return type(typ).__name__
