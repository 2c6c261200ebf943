"""Dynamic tree + descriptor -> typed value.

The dynamic tree carries no type of its own, so every step inspects the
runtime container shape (:func:`kind_of`) and checks it against what the
descriptor demands.  Scalars are handed to :meth:`TypedValue.known`
unchanged; the typed value model owns payload checks, the encoder adds the
attribute / position / key context when they fail.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from .config import resolve
from .dynamic import is_sequence, is_string_mapping, kind_of
from .errors import (
    AttributeEncodeError,
    ElementEncodeError,
    EncodeError,
    EntryEncodeError,
    MissingAttributeError,
    NestingDepthError,
    UnexpectedAttributeError,
    UnsupportedShapeError,
    UnsupportedTypeError,
    ValueTypeError,
)
from .types import Kind, MapType, ObjectType, TupleType, TypeDescriptor, kind_name
from .values import TypedValue

LOGGER = logging.getLogger("tvbridge.encoder")
LOGGER.addHandler(logging.NullHandler())

# failures that get positional context; schema errors and depth errors pass through
_WRAPPED = (EncodeError, ValueTypeError)


def _shape(value: Any) -> str:
    kind = kind_of(value)
    return kind.value if kind is not None else type(value).__name__


class ValueEncoder:
    def __init__(
        self,
        missing_attributes: Optional[str] = None,
        extra_attributes: Optional[str] = None,
        max_depth: Optional[int] = None,
        config: Optional[Dict[str, Any]] = None,
    ):
        self.config = resolve(
            config,
            missing_attributes=missing_attributes,
            extra_attributes=extra_attributes,
            max_depth=max_depth,
        )
        self.missing_attributes: str = self.config["missing_attributes"]
        self.extra_attributes: str = self.config["extra_attributes"]
        self.max_depth: int = self.config["max_depth"]

    def encode(self, value: Any, typ: TypeDescriptor) -> TypedValue:
        try:
            return self._encode(value, typ, 0)
        except RecursionError as e:
            raise NestingDepthError(self.max_depth) from e

    # ------------------------------------------------------------------
    def _encode(self, value: Any, typ: TypeDescriptor, depth: int) -> TypedValue:
        if depth > self.max_depth:
            raise NestingDepthError(self.max_depth)

        kind = getattr(typ, "kind", None)
        if not isinstance(kind, Kind):
            raise UnsupportedTypeError(kind_name(typ))
        if value is None:
            return TypedValue.null(typ)

        if kind in (Kind.STRING, Kind.NUMBER, Kind.BOOL):
            return TypedValue.known(typ, value)
        if kind is Kind.OBJECT:
            return self._encode_object(value, typ, depth)
        if kind is Kind.TUPLE:
            return self._encode_tuple(value, typ, depth)
        if kind in (Kind.LIST, Kind.SET):
            return self._encode_list(value, typ, depth)
        if kind is Kind.MAP:
            return self._encode_map(value, typ, depth)
        raise UnsupportedTypeError(kind_name(typ))

    # ── object ──────────────────────────────────────────────────────
    def _encode_object(self, value: Any, typ: ObjectType, depth: int) -> TypedValue:
        if not is_string_mapping(value):
            raise UnsupportedShapeError(f"{typ} needs a str-keyed mapping, got {_shape(value)}")

        if self.extra_attributes == "error":
            extra = sorted(set(value) - set(typ.attribute_types))
            if extra:
                raise UnexpectedAttributeError(extra)

        members: Dict[str, TypedValue] = {}
        for name, attr_typ in typ.attribute_types.items():
            if name not in value:
                if self.missing_attributes == "error":
                    raise MissingAttributeError(name)
                LOGGER.debug("attribute %r absent, encoded as null %s", name, attr_typ)
                members[name] = TypedValue.null(attr_typ)
                continue
            try:
                members[name] = self._encode(value[name], attr_typ, depth + 1)
            except _WRAPPED as e:
                raise AttributeEncodeError(name, e) from e
        return TypedValue.known(typ, members)

    # ── tuple ───────────────────────────────────────────────────────
    def _encode_tuple(self, value: Any, typ: TupleType, depth: int) -> TypedValue:
        if not is_sequence(value):
            raise UnsupportedShapeError(f"{typ} needs a sequence, got {_shape(value)}")
        if len(value) != len(typ.element_types):
            raise UnsupportedShapeError(
                f"{typ} needs {len(typ.element_types)} elements, got {len(value)}"
            )
        items: List[TypedValue] = []
        for i, (item, elem_typ) in enumerate(zip(value, typ.element_types)):
            try:
                items.append(self._encode(item, elem_typ, depth + 1))
            except _WRAPPED as e:
                raise ElementEncodeError(i, e) from e
        return TypedValue.known(typ, items)

    # ── list / set ──────────────────────────────────────────────────
    def _encode_list(self, value: Any, typ: TypeDescriptor, depth: int) -> TypedValue:
        if not is_sequence(value):
            raise UnsupportedShapeError(f"{typ} needs a sequence, got {_shape(value)}")
        elem_typ = typ.element_type
        items: List[TypedValue] = []
        for i, item in enumerate(value):
            try:
                items.append(self._encode(item, elem_typ, depth + 1))
            except _WRAPPED as e:
                raise ElementEncodeError(i, e) from e
        return TypedValue.known(typ, items)

    # ── map ─────────────────────────────────────────────────────────
    def _encode_map(self, value: Any, typ: MapType, depth: int) -> TypedValue:
        if not is_string_mapping(value):
            raise UnsupportedShapeError(f"{typ} needs a str-keyed mapping, got {_shape(value)}")
        members: Dict[str, TypedValue] = {}
        for key, item in value.items():
            try:
                members[key] = self._encode(item, typ.element_type, depth + 1)
            except _WRAPPED as e:
                raise EntryEncodeError(key, e) from e
        return TypedValue.known(typ, members)


_DEFAULT = None


def encode(value: Any, typ: TypeDescriptor) -> TypedValue:
    """Encode with the default settings."""
    global _DEFAULT
    if _DEFAULT is None:
        _DEFAULT = ValueEncoder()
    return _DEFAULT.encode(value, typ)
