"""Type descriptors, typed values and dynamic tags."""
import dataclasses
from decimal import Decimal

import pytest

from tvbridge import (
    Bool, DynamicKind, DynamicList, DynamicMap, Kind, ListType, MapType,
    Number, ObjectType, PrimitiveType, SetType, String, TupleType,
    TypedValue, ValueState, ValueTypeError, encode, kind_of,
)

K = TypedValue.known


# ── descriptors ─────────────────────────────────────────────────────────────
def test_object_type_equality_ignores_attribute_order():
    a = ObjectType({"name": String, "age": Number})
    b = ObjectType({"age": Number, "name": String})
    assert a == b
    assert hash(a) == hash(b)
    assert str(a) == "object{age: number, name: string}"


def test_object_type_is_immutable():
    attrs = {"name": String}
    typ = ObjectType(attrs)
    attrs["age"] = Number
    assert set(typ.attribute_types) == {"name"}
    with pytest.raises(TypeError):
        typ.attribute_types["age"] = Number
    with pytest.raises(dataclasses.FrozenInstanceError):
        typ.kind = Kind.MAP


def test_collection_kinds_are_distinct():
    assert ListType(String) != SetType(String)
    assert ListType(String) == ListType(String)
    assert MapType(ListType(Bool)).kind is Kind.MAP
    assert TupleType([String, Number]).element_types == (String, Number)
    assert str(TupleType((String, MapType(Number)))) == "tuple[string, map[number]]"


def test_primitive_type_rejects_composite_kind():
    with pytest.raises(ValueError):
        PrimitiveType(Kind.OBJECT)
    assert String.is_primitive() and not ListType(String).is_primitive()


# ── typed values ────────────────────────────────────────────────────────────
def test_states():
    assert TypedValue.null(String).is_null
    assert TypedValue.null(String).is_known
    assert not TypedValue.unknown(String).is_known
    assert K(String, "x").state is ValueState.KNOWN


@pytest.mark.parametrize("typ, payload", [
    (String, 1),
    (Number, "1"),
    (Number, True),
    (Bool, 0),
    (ListType(String), "abc"),
    (ListType(String), ["raw"]),
    (ListType(String), [K(Number, 1)]),
    (TupleType((String, Number)), [K(String, "a")]),
    (ObjectType({"a": String}), {}),
    (ObjectType({"a": String}), {"a": K(String, "x"), "b": K(String, "y")}),
    (MapType(Number), {1: K(Number, 1)}),
    (MapType(Number), [K(Number, 1)]),
])
def test_known_rejects_mismatched_payload(typ, payload):
    with pytest.raises(ValueTypeError):
        K(typ, payload)


def test_known_accepts_decimal_and_copies_containers():
    items = [K(Number, Decimal("1.5"))]
    tv = K(ListType(Number), items)
    items.append(K(Number, 2))
    assert len(tv.payload) == 1


def test_is_fully_known():
    typ = ObjectType({"a": ListType(Number)})
    good = K(typ, {"a": K(ListType(Number), [K(Number, 1)])})
    bad = K(typ, {"a": K(ListType(Number), [TypedValue.unknown(Number)])})
    assert good.is_fully_known()
    assert not bad.is_fully_known()
    assert TypedValue.null(typ).is_fully_known()


# ── dynamic tags ────────────────────────────────────────────────────────────
@pytest.mark.parametrize("value, kind", [
    (None, DynamicKind.NULL),
    ("s", DynamicKind.STRING),
    (1, DynamicKind.NUMBER),
    (1.5, DynamicKind.NUMBER),
    (Decimal("2"), DynamicKind.NUMBER),
    (True, DynamicKind.BOOL),
    ([1], DynamicKind.SEQUENCE),
    ((1,), DynamicKind.SEQUENCE),
    ({"a": 1}, DynamicKind.MAPPING),
    (b"raw", None),
    ({1, 2}, None),
    (object(), None),
])
def test_kind_of(value, kind):
    assert kind_of(value) is kind


def test_dynamic_collections_compare_as_builtins():
    assert DynamicList.of(["a"]) == ["a"]
    assert DynamicList.of([]).is_untyped
    assert DynamicMap.of({"a": [1]}).element_kind is DynamicKind.SEQUENCE
    assert DynamicMap.of({}) == {}
    assert "untyped" in repr(DynamicList())


def test_primitive_type_accepts_plain_kind_string():
    typ = PrimitiveType("string")
    assert typ.kind is Kind.STRING
    assert typ == String and hash(typ) == hash(String)
    assert str(typ) == "string"
    assert encode("x", typ) == K(String, "x")
    with pytest.raises(ValueError):
        PrimitiveType("integer")


def test_typed_values_are_not_hashable():
    with pytest.raises(TypeError):
        hash(K(ListType(String), []))
    with pytest.raises(TypeError):
        hash(K(String, "x"))
    assert K(String, "x") == K(String, "x")


def test_leading_null_tags_collection_null():
    assert DynamicList.of([None, "a"]).element_kind is DynamicKind.NULL
    assert DynamicMap.of({"a": None, "b": "x"}).element_kind is DynamicKind.NULL
