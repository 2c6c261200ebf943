"""Typed value -> dynamic tree.

The walk needs nothing but the value itself: every TypedValue carries its own
descriptor, and the descriptor kind picks the branch.

* unknown anywhere in the tree  -> :class:`UnknownValueError`, no partial result
* null                          -> ``None`` (the descriptor is dropped)
* list / set / map              -> :class:`DynamicList` / :class:`DynamicMap`
  tagged with the kind of the first decoded element, untyped when empty
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from .config import resolve
from .dynamic import DynamicList, DynamicMap
from .errors import NestingDepthError, UnknownValueError, UnsupportedTypeError
from .types import Kind, kind_name
from .values import TypedValue, ValueState

LOGGER = logging.getLogger("tvbridge.decoder")
LOGGER.addHandler(logging.NullHandler())


class ValueDecoder:
    def __init__(self, max_depth: Optional[int] = None, config: Optional[Dict[str, Any]] = None):
        self.config = resolve(config, max_depth=max_depth)
        self.max_depth: int = self.config["max_depth"]

    def decode(self, value: TypedValue) -> Any:
        try:
            return self._decode(value, 0)
        except RecursionError as e:
            raise NestingDepthError(self.max_depth) from e

    # ------------------------------------------------------------------
    def _decode(self, value: TypedValue, depth: int) -> Any:
        if depth > self.max_depth:
            raise NestingDepthError(self.max_depth)
        if value.state is ValueState.UNKNOWN:
            raise UnknownValueError()
        if value.state is ValueState.NULL:
            return None

        kind = getattr(value.type, "kind", None)
        if kind in (Kind.STRING, Kind.NUMBER, Kind.BOOL):
            return value.payload
        if kind is Kind.OBJECT:
            return {name: self._decode(v, depth + 1) for name, v in value.payload.items()}
        if kind is Kind.TUPLE:
            return [self._decode(v, depth + 1) for v in value.payload]
        if kind in (Kind.LIST, Kind.SET):
            return self._decode_list(value.payload, depth, kind)
        if kind is Kind.MAP:
            return self._decode_map(value.payload, depth)
        raise UnsupportedTypeError(kind_name(value.type))

    def _decode_list(self, items: List[TypedValue], depth: int, kind: Kind) -> DynamicList:
        if not items:
            LOGGER.debug("empty %s decoded without element evidence", kind.value)
            return DynamicList()
        # set payloads keep their insertion order
        return DynamicList.of(self._decode(v, depth + 1) for v in items)

    def _decode_map(self, members: Dict[str, TypedValue], depth: int) -> DynamicMap:
        if not members:
            LOGGER.debug("empty map decoded without element evidence")
            return DynamicMap()
        return DynamicMap.of({k: self._decode(v, depth + 1) for k, v in members.items()})


_DEFAULT = None


def decode(value: TypedValue) -> Any:
    """Decode with the default settings."""
    global _DEFAULT
    if _DEFAULT is None:
        _DEFAULT = ValueDecoder()
    return _DEFAULT.decode(value)
