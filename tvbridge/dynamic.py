"""Dynamic (schema-agnostic) value tags.

A dynamic tree is made of ``None``, ``str``, numbers, ``bool``, sequences and
``str``-keyed mappings.  Homogeneous collections produced by the decoder are
:class:`DynamicList` / :class:`DynamicMap`, which remember the tag of their
elements so that an empty collection is still "empty, untyped" rather than
a guess.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from decimal import Decimal
from enum import Enum
from typing import Any, Iterable, Optional


class DynamicKind(str, Enum):
    NULL = "null"
    STRING = "string"
    NUMBER = "number"
    BOOL = "bool"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


def kind_of(value: Any) -> Optional[DynamicKind]:
    """Return the dynamic tag of *value*, or ``None`` for foreign objects."""
    if value is None:
        return DynamicKind.NULL
    if isinstance(value, bool):
        return DynamicKind.BOOL
    if isinstance(value, str):
        return DynamicKind.STRING
    if isinstance(value, (int, float, Decimal)):
        return DynamicKind.NUMBER
    if isinstance(value, Mapping):
        return DynamicKind.MAPPING
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return DynamicKind.SEQUENCE
    return None


def is_sequence(value: Any) -> bool:
    return kind_of(value) is DynamicKind.SEQUENCE


def is_string_mapping(value: Any) -> bool:
    return kind_of(value) is DynamicKind.MAPPING and all(isinstance(k, str) for k in value)


class DynamicList(list):
    """List tagged with the kind of its elements (``None`` when empty)."""

    def __init__(self, items: Iterable[Any] = (), element_kind: Optional[DynamicKind] = None):
        super().__init__(items)
        self.element_kind = element_kind

    @classmethod
    def of(cls, items: Iterable[Any]) -> "DynamicList":
        """Tag from the first element, trusting the caller that the rest match.

        The tag is exactly ``kind_of(items[0])``: a leading ``None`` gives
        ``DynamicKind.NULL`` even when later elements are strings.
        """
        items = list(items)
        return cls(items, kind_of(items[0]) if items else None)

    @property
    def is_untyped(self) -> bool:
        return self.element_kind is None

    def __repr__(self) -> str:
        tag = self.element_kind.value if self.element_kind else "untyped"
        return f"DynamicList<{tag}>({list.__repr__(self)})"


class DynamicMap(dict):
    """``str``-keyed dict tagged with the kind of its values (``None`` when empty)."""

    def __init__(self, items: Any = (), element_kind: Optional[DynamicKind] = None):
        super().__init__(items)
        self.element_kind = element_kind

    @classmethod
    def of(cls, items: Mapping[str, Any]) -> "DynamicMap":
        """Tag from the first value in iteration order (``NULL`` if that value is ``None``)."""
        first = next(iter(items.values()), None) if items else None
        return cls(items, kind_of(first) if items else None)

    @property
    def is_untyped(self) -> bool:
        return self.element_kind is None

    def __repr__(self) -> str:
        tag = self.element_kind.value if self.element_kind else "untyped"
        return f"DynamicMap<{tag}>({dict.__repr__(self)})"
