"""Encoder: dynamic tree + descriptor → typed value."""
import pytest

from tvbridge import (
    AttributeEncodeError, Bool, ElementEncodeError, EntryEncodeError,
    ListType, MapType, MissingAttributeError, Number, ObjectType, SetType,
    String, TupleType, TypedValue, UnexpectedAttributeError,
    UnsupportedShapeError, UnsupportedTypeError, ValueEncoder, ValueState,
    ValueTypeError, encode,
)

K = TypedValue.known

AB = ObjectType({"a": String, "b": Number})


@pytest.mark.parametrize("typ", [String, Number, Bool, AB, TupleType((String,)),
                                 ListType(String), SetType(Bool), MapType(Number)], ids=str)
def test_none_encodes_to_null_of_given_type(typ):
    tv = encode(None, typ)
    assert tv.state is ValueState.NULL
    assert tv.type == typ


def test_scalars_are_wrapped_unchanged():
    assert encode("x", String) == K(String, "x")
    assert encode(7, Number) == K(Number, 7)
    assert encode(False, Bool) == K(Bool, False)


def test_scalar_mismatch_is_reported_by_value_model():
    with pytest.raises(ValueTypeError):
        encode("not-a-number", Number)


@pytest.mark.parametrize("value", ["x", 1, True, ["a", 1]])
def test_object_needs_mapping(value):
    with pytest.raises(UnsupportedShapeError):
        encode(value, AB)


def test_object_needs_string_keys():
    with pytest.raises(UnsupportedShapeError):
        encode({1: "x", "b": 2}, AB)


def test_object_encodes_every_attribute():
    tv = encode({"a": "x", "b": 2}, AB)
    assert tv == K(AB, {"a": K(String, "x"), "b": K(Number, 2)})


def test_missing_attribute_fails_by_default():
    with pytest.raises(MissingAttributeError) as exc:
        encode({"a": "x"}, AB)
    assert isinstance(exc.value, AttributeEncodeError)
    assert exc.value.path == ["b"]
    assert "'b' is missing" in str(exc.value)


def test_missing_attribute_null_policy():
    tv = ValueEncoder(missing_attributes="null").encode({"a": "x"}, AB)
    assert tv.payload["b"] == TypedValue.null(Number)
    assert tv.payload["a"] == K(String, "x")


def test_extra_attributes_ignored_by_default():
    tv = encode({"a": "x", "b": 1, "zzz": True}, AB)
    assert set(tv.payload) == {"a", "b"}


def test_extra_attributes_error_policy():
    with pytest.raises(UnexpectedAttributeError) as exc:
        ValueEncoder(extra_attributes="error").encode({"a": "x", "b": 1, "zzz": True}, AB)
    assert exc.value.names == ["zzz"]
    assert isinstance(exc.value, UnsupportedShapeError)


def test_invalid_policy_rejected():
    with pytest.raises(ValueError):
        ValueEncoder(missing_attributes="maybe")
    with pytest.raises(ValueError):
        ValueEncoder(extra_attributes="maybe")


def test_tuple_encodes_by_position():
    typ = TupleType((String, Number))
    assert encode(["a", 1], typ) == K(typ, [K(String, "a"), K(Number, 1)])
    assert encode(("a", 1), typ) == K(typ, [K(String, "a"), K(Number, 1)])


@pytest.mark.parametrize("value", [["a"], ["a", 1, 2], {"0": "a"}, "a1"])
def test_tuple_shape_mismatch(value):
    with pytest.raises(UnsupportedShapeError):
        encode(value, TupleType((String, Number)))


def test_nested_error_identifies_tuple_position_and_attribute():
    typ = TupleType((String, ObjectType({"x": Number})))
    with pytest.raises(ElementEncodeError) as exc:
        encode(["ok", {"x": "not-a-number"}], typ)
    err = exc.value
    assert err.step == 1
    assert isinstance(err.cause, AttributeEncodeError)
    assert err.cause.step == "x"
    assert err.path == [1, "x"]
    assert isinstance(err.root_cause, ValueTypeError)
    assert str(err).startswith("[1].x: ")


def test_missing_attribute_inside_list_has_full_path():
    with pytest.raises(ElementEncodeError) as exc:
        encode([{"a": "x", "b": 1}, {"a": "y"}], ListType(AB))
    assert exc.value.path == [1, "b"]
    assert isinstance(exc.value.root_cause, MissingAttributeError)
    assert str(exc.value) == "[1].b: required attribute 'b' is missing"


@pytest.mark.parametrize("typ", [ListType(Number), SetType(Number)], ids=str)
def test_list_and_set_encode_each_element(typ):
    tv = encode([1, 2, 3], typ)
    assert tv.type == typ
    assert [c.payload for c in tv.payload] == [1, 2, 3]


def test_list_element_error_has_index():
    with pytest.raises(ElementEncodeError) as exc:
        encode([1, 2, "three"], ListType(Number))
    assert exc.value.path == [2]


@pytest.mark.parametrize("value", [{"a": 1}, 5, "abc"])
def test_list_needs_sequence(value):
    with pytest.raises(UnsupportedShapeError):
        encode(value, ListType(Number))


def test_map_keys_pass_through():
    typ = MapType(Number)
    assert encode({"x": 1, "y": None}, typ) == K(typ, {"x": K(Number, 1), "y": TypedValue.null(Number)})


def test_map_entry_error_has_key():
    with pytest.raises(EntryEncodeError) as exc:
        encode({"good": 1, "bad": "no"}, MapType(Number))
    assert exc.value.path == ["bad"]


def test_map_needs_string_keyed_mapping():
    with pytest.raises(UnsupportedShapeError):
        encode([1, 2], MapType(Number))
    with pytest.raises(UnsupportedShapeError):
        encode({(1, 2): 1}, MapType(Number))


class _Dynamic:
    kind = "dynamic"


def test_unsupported_descriptor_kind():
    with pytest.raises(UnsupportedTypeError) as exc:
        encode(1, _Dynamic())
    assert "dynamic" in str(exc.value)


def test_unsupported_kind_is_not_wrapped():
    with pytest.raises(UnsupportedTypeError):
        encode([1], ListType(_Dynamic()))
