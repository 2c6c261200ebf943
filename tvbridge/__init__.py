"""tvbridge - convert three-state typed values to and from dynamic value trees."""

__version__ = "0.1.0"

from .types import (
    Kind,
    TypeDescriptor,
    PrimitiveType,
    ObjectType,
    TupleType,
    ListType,
    SetType,
    MapType,
    String,
    Number,
    Bool,
)
from .values import TypedValue, ValueState
from .dynamic import DynamicKind, DynamicList, DynamicMap, kind_of
from .decoder import ValueDecoder, decode
from .encoder import ValueEncoder, encode
from .primitive import Primitive
from .typespec import parse_type, type_to_json, load_type
from .errors import (
    BridgeError,
    DecodeError,
    UnknownValueError,
    EncodeError,
    UnsupportedShapeError,
    UnexpectedAttributeError,
    MissingTypeError,
    NestedEncodeError,
    AttributeEncodeError,
    MissingAttributeError,
    ElementEncodeError,
    EntryEncodeError,
    ValueTypeError,
    UnsupportedTypeError,
    NestingDepthError,
    NumberRangeError,
)

__all__ = [
    "Kind",
    "TypeDescriptor",
    "PrimitiveType",
    "ObjectType",
    "TupleType",
    "ListType",
    "SetType",
    "MapType",
    "String",
    "Number",
    "Bool",
    "TypedValue",
    "ValueState",
    "DynamicKind",
    "DynamicList",
    "DynamicMap",
    "kind_of",
    "ValueDecoder",
    "decode",
    "ValueEncoder",
    "encode",
    "Primitive",
    "parse_type",
    "type_to_json",
    "load_type",
    "BridgeError",
    "DecodeError",
    "UnknownValueError",
    "EncodeError",
    "UnsupportedShapeError",
    "UnexpectedAttributeError",
    "MissingTypeError",
    "NestedEncodeError",
    "AttributeEncodeError",
    "MissingAttributeError",
    "ElementEncodeError",
    "EntryEncodeError",
    "ValueTypeError",
    "UnsupportedTypeError",
    "NestingDepthError",
    "NumberRangeError",
]
