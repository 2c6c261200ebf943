"""Three-state typed values (unknown / null / known) paired with a descriptor.

Payload shapes for ``KNOWN`` values:

* string / number / bool : the Python scalar
* object / map           : ``dict`` of name -> TypedValue
* tuple / list / set     : ``list`` of TypedValue
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any

from .errors import UnsupportedTypeError, ValueTypeError
from .types import Kind, TypeDescriptor, kind_name


class ValueState(str, Enum):
    UNKNOWN = "unknown"
    NULL = "null"
    KNOWN = "known"


@dataclass(frozen=True)
class TypedValue:
    type: TypeDescriptor
    state: ValueState
    payload: Any = field(default=None)

    # composite payloads are list / dict
    __hash__ = None

    # ── constructors ────────────────────────────────────────────────
    @classmethod
    def known(cls, typ: TypeDescriptor, payload: Any) -> "TypedValue":
        """Validate *payload* against *typ* and wrap it."""
        return cls(typ, ValueState.KNOWN, _check_payload(typ, payload))

    @classmethod
    def null(cls, typ: TypeDescriptor) -> "TypedValue":
        return cls(typ, ValueState.NULL)

    @classmethod
    def unknown(cls, typ: TypeDescriptor) -> "TypedValue":
        return cls(typ, ValueState.UNKNOWN)

    # ── state queries ───────────────────────────────────────────────
    @property
    def is_known(self) -> bool:
        return self.state is not ValueState.UNKNOWN

    @property
    def is_null(self) -> bool:
        return self.state is ValueState.NULL

    def is_fully_known(self) -> bool:
        """True if neither this value nor anything nested in it is unknown."""
        if self.state is ValueState.UNKNOWN:
            return False
        if self.state is ValueState.NULL or self.type.is_primitive():
            return True
        children = self.payload.values() if isinstance(self.payload, dict) else self.payload
        return all(c.is_fully_known() for c in children)

    def __str__(self) -> str:
        if self.state is not ValueState.KNOWN:
            return f"{self.type}<{self.state.value}>"
        return f"{self.type}<{self.payload!r}>"


# ---------------------------------------------------------------------------
# payload validation
# ---------------------------------------------------------------------------
def _check_payload(typ: TypeDescriptor, payload: Any) -> Any:
    kind = getattr(typ, "kind", None)
    if kind is Kind.STRING:
        if not isinstance(payload, str):
            raise ValueTypeError(f"string payload must be str, got {type(payload).__name__}")
        return payload
    if kind is Kind.NUMBER:
        # bool is an int subclass but never a number here
        if isinstance(payload, bool) or not isinstance(payload, (int, float, Decimal)):
            raise ValueTypeError(
                f"number payload must be int, float or Decimal, got {type(payload).__name__}"
            )
        return payload
    if kind is Kind.BOOL:
        if not isinstance(payload, bool):
            raise ValueTypeError(f"bool payload must be bool, got {type(payload).__name__}")
        return payload
    if kind is Kind.OBJECT:
        members = _as_mapping(typ, payload)
        expected = set(typ.attribute_types)
        if set(members) != expected:
            missing = sorted(expected - set(members))
            extra = sorted(set(members) - expected)
            raise ValueTypeError(f"{typ} payload attribute mismatch (missing={missing}, extra={extra})")
        for name, child in members.items():
            _check_child(typ.attribute_types[name], child, name)
        return members
    if kind is Kind.TUPLE:
        items = _as_list(typ, payload)
        if len(items) != len(typ.element_types):
            raise ValueTypeError(
                f"{typ} payload needs {len(typ.element_types)} elements, got {len(items)}"
            )
        for i, (elem_typ, child) in enumerate(zip(typ.element_types, items)):
            _check_child(elem_typ, child, i)
        return items
    if kind in (Kind.LIST, Kind.SET):
        items = _as_list(typ, payload)
        for i, child in enumerate(items):
            _check_child(typ.element_type, child, i)
        return items
    if kind is Kind.MAP:
        members = _as_mapping(typ, payload)
        for key, child in members.items():
            _check_child(typ.element_type, child, key)
        return members
    raise UnsupportedTypeError(kind_name(typ))


def _check_child(expected: TypeDescriptor, child: Any, where) -> None:
    if not isinstance(child, TypedValue):
        raise ValueTypeError(f"element {where!r} is {type(child).__name__}, not TypedValue")
    if child.type != expected:
        raise ValueTypeError(f"element {where!r} has type {child.type}, expected {expected}")


def _as_mapping(typ: TypeDescriptor, payload: Any) -> dict:
    if not isinstance(payload, Mapping):
        raise ValueTypeError(f"{typ} payload must be a mapping, got {type(payload).__name__}")
    if not all(isinstance(k, str) for k in payload):
        raise ValueTypeError(f"{typ} payload keys must be str")
    return dict(payload)


def _as_list(typ: TypeDescriptor, payload: Any) -> list:
    if isinstance(payload, (str, bytes)) or not isinstance(payload, Sequence):
        raise ValueTypeError(f"{typ} payload must be a sequence, got {type(payload).__name__}")
    return list(payload)
