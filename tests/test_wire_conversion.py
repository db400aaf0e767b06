import pytest

from parambricks import codec
from parambricks.core.exceptions import InvalidParameterError, UnknownTypeError
from parambricks.models.wire import TypeDescriptor
from parambricks.types import LogicalType
from parambricks.value import TypedValue


def test_to_wire_scalar():
    payload, descriptor = codec.to_wire(codec.int64(42))

    assert payload == "42"
    assert descriptor.to_dict() == {"type": "INT64"}


def test_to_wire_array_carries_element_type_once():
    payload, descriptor = codec.to_wire(codec.array_of(["a", "b"], LogicalType.STRING))

    assert payload == ["a", "b"]
    assert descriptor.to_dict() == {"type": "ARRAY", "elementType": {"type": "STRING"}}


def test_to_wire_empty_array():
    payload, descriptor = codec.to_wire(codec.array_of([], LogicalType.DATE))

    assert payload == []
    assert descriptor.element_type == TypeDescriptor(type="DATE")


def test_from_wire_scalar_trusts_literal():
    # No temporal re-validation on decode.
    tv = codec.from_wire("not-a-date", {"type": "DATE"})

    assert tv.type is LogicalType.DATE
    assert tv.value == "not-a-date"


def test_from_wire_array():
    tv = codec.from_wire(["1", "2"], {"type": "ARRAY", "elementType": {"type": "INT64"}})

    assert tv == codec.array_of([1, 2], LogicalType.INT64)


def test_from_wire_accepts_snake_case_descriptor():
    tv = codec.from_wire([], {"type": "ARRAY", "element_type": {"type": "BOOL"}})
    assert tv.element_type is LogicalType.BOOL


def test_from_wire_unknown_type_fails():
    with pytest.raises(UnknownTypeError, match="VARCHAR"):
        codec.from_wire("x", {"type": "VARCHAR"})


def test_from_wire_unknown_element_type_fails():
    with pytest.raises(UnknownTypeError):
        codec.from_wire([], TypeDescriptor(type="ARRAY", element_type=TypeDescriptor(type="int")))


def test_from_wire_array_without_element_type_fails():
    with pytest.raises(InvalidParameterError, match="elementType required"):
        codec.from_wire(["1"], {"type": "ARRAY"})


def test_from_wire_array_requires_list_payload():
    with pytest.raises(InvalidParameterError, match="ARRAY payload must be a list"):
        codec.from_wire("1,2", {"type": "ARRAY", "elementType": {"type": "INT64"}})


def test_from_wire_scalar_with_element_type_fails():
    with pytest.raises(InvalidParameterError, match="elementType can't be set"):
        codec.from_wire("1", {"type": "INT64", "elementType": {"type": "INT64"}})


def test_from_wire_nested_array_fails():
    descriptor = {"type": "ARRAY", "elementType": {"type": "ARRAY", "elementType": {"type": "INT64"}}}
    with pytest.raises(InvalidParameterError):
        codec.from_wire([["1"]], descriptor)


def test_from_wire_struct_fails():
    with pytest.raises(InvalidParameterError, match="STRUCT"):
        codec.from_wire("{}", {"type": "STRUCT"})


def test_from_wire_malformed_descriptor_fails():
    with pytest.raises(InvalidParameterError, match="malformed type descriptor"):
        codec.from_wire("1", {"elementType": {"type": "INT64"}})


@pytest.mark.parametrize(
    "tv",
    [
        codec.bool_(True),
        codec.int64(-(2**63)),
        codec.float64(0.1),
        codec.float64(float("inf")),
        codec.string(""),
        codec.string("multi\nline é"),
        codec.bytes_(b"\x00\xff"),
        codec.timestamp(1408452095220000),
        codec.date("2014-08-19"),
        codec.time("00:00:00.000000"),
        codec.datetime_("9999-12-31 23:59:59.999999"),
        codec.array_of([1, 2, 3], LogicalType.INT64),
        codec.array_of([], LogicalType.STRING),
        codec.array_of([b"a", b"b"], LogicalType.BYTES),
        codec.array_of(["2014-08-19 12:41:35.220000+00:00"], LogicalType.TIMESTAMP),
    ],
    ids=lambda tv: f"{tv.type}-{tv.element_type}",
)
def test_round_trip(tv: TypedValue):
    payload, descriptor = codec.to_wire(tv)

    assert codec.from_wire(payload, descriptor) == tv
    assert codec.from_wire(payload, descriptor.to_dict()) == tv
    assert codec.to_wire(codec.from_wire(payload, descriptor)) == (payload, descriptor)


@pytest.mark.parametrize("payload", [[], ["1"]])
def test_from_wire_rejects_element_descriptor_with_element_type(payload):
    descriptor = {"type": "ARRAY", "elementType": {"type": "INT64", "elementType": {"type": "INT64"}}}
    with pytest.raises(InvalidParameterError, match="can't carry an elementType"):
        codec.from_wire(payload, descriptor)


def test_type_descriptor_dict_shape_round_trips():
    data = {"type": "ARRAY", "elementType": {"type": "DATE"}}

    descriptor = TypeDescriptor.from_dict(data)

    assert descriptor.element_type.type == "DATE"
    assert descriptor.to_dict() == data
