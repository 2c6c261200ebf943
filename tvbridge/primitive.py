"""Decoded dynamic tree that remembers where it came from.

Useful when a fully known value has to travel through code that knows
nothing about its schema (an opaque API blob, a debug dump) and later be
turned back into a typed value.  Do not reach for it when the schema is
known ahead of time.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .decoder import ValueDecoder, decode
from .encoder import ValueEncoder, encode
from .errors import MissingTypeError
from .types import TypeDescriptor
from .values import TypedValue


@dataclass
class Primitive:
    value: Any = None
    type: Optional[TypeDescriptor] = None

    @classmethod
    def from_value(cls, tv: TypedValue, decoder: Optional[ValueDecoder] = None) -> "Primitive":
        value = decoder.decode(tv) if decoder else decode(tv)
        # a null value keeps no type information
        return cls(value=value, type=None if tv.is_null else tv.type)

    def to_value(self, encoder: Optional[ValueEncoder] = None) -> TypedValue:
        if self.type is None:
            raise MissingTypeError("no type descriptor retained; cannot re-encode")
        return encoder.encode(self.value, self.type) if encoder else encode(self.value, self.type)
