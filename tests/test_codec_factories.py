import decimal
import enum

import pytest

from parambricks import codec
from parambricks.core.exceptions import (
    InvalidParameterError,
    MalformedLiteralError,
    TypeMismatchError,
    UnsupportedTypeError,
)
from parambricks.types import LogicalType


@pytest.mark.parametrize(
    "native_type,expected",
    [
        (bool, LogicalType.BOOL),
        (str, LogicalType.STRING),
        (int, LogicalType.INT64),
        (float, LogicalType.FLOAT64),
    ],
)
def test_infer_type_fixed_mapping(native_type, expected):
    assert codec.infer_type(native_type) is expected


@pytest.mark.parametrize("native_type", [bytes, list, dict, decimal.Decimal, type(None)])
def test_infer_type_rejects_unmapped_classes(native_type):
    with pytest.raises(UnsupportedTypeError, match=native_type.__qualname__):
        codec.infer_type(native_type)


def test_scalar_of_infers_types():
    assert codec.scalar_of(True).type is LogicalType.BOOL
    assert codec.scalar_of(True).value == "true"
    assert codec.scalar_of(42).type is LogicalType.INT64
    assert codec.scalar_of(42).value == "42"
    assert codec.scalar_of(3.14).type is LogicalType.FLOAT64
    assert codec.scalar_of(3.14).value == "3.14"
    assert codec.scalar_of("FR").type is LogicalType.STRING


def test_scalar_of_with_explicit_type():
    tv = codec.scalar_of("2014-08-19", LogicalType.DATE)
    assert tv.type is LogicalType.DATE
    assert tv.value == "2014-08-19"
    assert codec.scalar_of(7, "INT64") == codec.int64(7)


def test_scalar_of_accepts_native_class_as_type():
    assert codec.scalar_of(7, int).type is LogicalType.INT64


def test_scalar_of_propagates_encoding_errors():
    with pytest.raises(UnsupportedTypeError):
        codec.scalar_of(b"raw")
    with pytest.raises(TypeMismatchError):
        codec.scalar_of(True, LogicalType.FLOAT64)
    with pytest.raises(MalformedLiteralError):
        codec.date("2014-13-40")


def test_scalar_of_none_fails_at_build():
    with pytest.raises(InvalidParameterError, match="value must be set"):
        codec.scalar_of(None, LogicalType.STRING)


def test_typed_shortcuts():
    assert codec.bool_(False).value == "false"
    assert codec.int64(-5).value == "-5"
    assert codec.float64(0.5).value == "0.5"
    assert codec.string("x").type is LogicalType.STRING
    assert codec.bytes_(b"\x00\x01\x02").value == "AAEC"
    assert codec.timestamp(1408452095220000).value == "2014-08-19 12:41:35.220000+00:00"
    assert codec.timestamp("2014-08-19 12:41:35.220000+00:00").type is LogicalType.TIMESTAMP
    assert codec.date("2014-08-19").type is LogicalType.DATE
    assert codec.time("12:41:35.220000").type is LogicalType.TIME
    assert codec.datetime_("2014-08-19 12:41:35.220000").type is LogicalType.DATETIME


def test_array_of_int64():
    tv = codec.array_of([1, 2, 3], LogicalType.INT64)

    assert tv.type is LogicalType.ARRAY
    assert tv.element_type is LogicalType.INT64
    assert [e.value for e in tv.elements] == ["1", "2", "3"]
    assert all(e.type is LogicalType.INT64 and e.elements is None for e in tv.elements)


def test_array_of_empty_is_legal():
    tv = codec.array_of([], LogicalType.STRING)

    assert tv.type is LogicalType.ARRAY
    assert tv.element_type is LogicalType.STRING
    assert tv.elements == ()


def test_array_of_infers_element_type_from_first_element():
    tv = codec.array_of(["a", "b"])
    assert tv.element_type is LogicalType.STRING


def test_array_of_accepts_native_class_as_element_type():
    assert codec.array_of([1.0], float).element_type is LogicalType.FLOAT64


def test_array_of_empty_without_element_type_fails():
    with pytest.raises(InvalidParameterError, match="elementType required"):
        codec.array_of([])


def test_array_of_mixed_kinds_fails():
    with pytest.raises(TypeMismatchError):
        codec.array_of([1, "2"], LogicalType.INT64)


def test_array_of_consumes_iterables_in_order():
    tv = codec.array_of((d for d in ["2014-08-19", "2014-08-20"]), LogicalType.DATE)
    assert [e.value for e in tv.elements] == ["2014-08-19", "2014-08-20"]


@pytest.mark.parametrize("element_type", [LogicalType.ARRAY, LogicalType.STRUCT])
def test_array_of_composite_element_type_fails(element_type):
    with pytest.raises(UnsupportedTypeError):
        codec.array_of([1], element_type)
    with pytest.raises(InvalidParameterError):
        codec.array_of([], element_type)


class Color(str, enum.Enum):
    RED = "red"


def test_scalar_of_str_enum_member_keeps_value():
    tv = codec.scalar_of(Color.RED)

    assert tv.type is LogicalType.STRING
    assert tv.value == "red"


@pytest.mark.parametrize("values", ["abc", b"abc", bytearray(b"abc")])
def test_array_of_rejects_single_string_or_bytes(values):
    with pytest.raises(InvalidParameterError, match="sequence of elements"):
        codec.array_of(values, LogicalType.STRING)
