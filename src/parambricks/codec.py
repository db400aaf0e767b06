"""
Conversions between native Python values, :class:`TypedValue` and the wire pair.

The wire pair is ``(payload, descriptor)``: ``payload`` is the scalar literal,
or for arrays the ordered list of element payloads; ``descriptor`` is a
:class:`TypeDescriptor` naming the type and, for arrays, the element type.
Element types are carried once, on the array descriptor.

For every valid value ``tv``::

    from_wire(*to_wire(tv)) == tv
"""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Tuple, Type, Union

from pydantic import ValidationError

from parambricks.core.exceptions import InvalidParameterError, UnsupportedTypeError
from parambricks.core.logger import get_logger
from parambricks.encoders.scalar import encode_scalar
from parambricks.models.wire import TypeDescriptor, WirePayload
from parambricks.types import LogicalType
from parambricks.value import TypedValue

log = get_logger(__name__)

# Checked in order; bool must precede int because it subclasses it.
_NATIVE_TYPE_MAP: Tuple[Tuple[type, LogicalType], ...] = (
    (bool, LogicalType.BOOL),
    (str, LogicalType.STRING),
    (int, LogicalType.INT64),
    (float, LogicalType.FLOAT64),
)


def infer_type(native_type: Type[Any]) -> LogicalType:
    """Map a native Python class to its logical type.

    Only bool, str, int and float (and their subclasses) are mapped. Bytes and
    temporal values need an explicit type.
    """
    if isinstance(native_type, type):
        for candidate, logical_type in _NATIVE_TYPE_MAP:
            if issubclass(native_type, candidate):
                return logical_type
    name = getattr(native_type, "__qualname__", repr(native_type))
    raise UnsupportedTypeError(
        reason=f"Unsupported object type for query parameter: {name}",
        details={"native_type": name},
    )


def _resolve_type(type: Union[LogicalType, str, Type[Any]]) -> LogicalType:
    if isinstance(type, (LogicalType, str)):
        return LogicalType.parse(type)
    return infer_type(type)


def scalar_of(value: Any, type: Union[LogicalType, str, Type[Any], None] = None) -> TypedValue:
    """Build a scalar value, inferring the type from ``value`` when not given."""
    logical_type = infer_type(value.__class__) if type is None else _resolve_type(type)
    payload = None if value is None else encode_scalar(value, logical_type)
    return TypedValue.builder().set_value(payload).set_type(logical_type).build()


def array_of(
    values: Iterable[Any],
    element_type: Union[LogicalType, str, Type[Any], None] = None,
) -> TypedValue:
    """Build an ARRAY value, encoding every element as ``element_type``.

    Without ``element_type`` the type is inferred from the first element.
    """
    if isinstance(values, (str, bytes, bytearray)):
        raise InvalidParameterError(
            "ARRAY values must be a sequence of elements, not a single string or bytes value",
            details={"values_type": values.__class__.__name__},
        )
    items = list(values)
    if element_type is None:
        if not items:
            raise InvalidParameterError("elementType required for an empty array")
        element_type = items[0].__class__
    logical_type = _resolve_type(element_type)
    elements = [scalar_of(item, logical_type) for item in items]
    return (
        TypedValue.builder()
        .set_elements(elements)
        .set_type(LogicalType.ARRAY)
        .set_element_type(logical_type)
        .build()
    )


def bool_(value: bool) -> TypedValue:
    return scalar_of(value, LogicalType.BOOL)


def int64(value: int) -> TypedValue:
    return scalar_of(value, LogicalType.INT64)


def float64(value: float) -> TypedValue:
    return scalar_of(value, LogicalType.FLOAT64)


def string(value: str) -> TypedValue:
    return scalar_of(value, LogicalType.STRING)


def bytes_(value: bytes) -> TypedValue:
    return scalar_of(value, LogicalType.BYTES)


def timestamp(value: Union[int, str]) -> TypedValue:
    """TIMESTAMP from epoch microseconds or a ``yyyy-MM-dd HH:mm:ss.SSSSSS±HH:MM`` literal."""
    return scalar_of(value, LogicalType.TIMESTAMP)


def date(value: str) -> TypedValue:
    """DATE from a ``yyyy-MM-dd`` literal, e.g. ``2014-08-19``."""
    return scalar_of(value, LogicalType.DATE)


def time(value: str) -> TypedValue:
    """TIME from a ``HH:mm:ss.SSSSSS`` literal, e.g. ``12:41:35.220000``."""
    return scalar_of(value, LogicalType.TIME)


def datetime_(value: str) -> TypedValue:
    """DATETIME from a ``yyyy-MM-dd HH:mm:ss.SSSSSS`` literal."""
    return scalar_of(value, LogicalType.DATETIME)


def type_descriptor(tv: TypedValue) -> TypeDescriptor:
    if tv.element_type is not None:
        return TypeDescriptor(type=tv.type.value, element_type=TypeDescriptor(type=tv.element_type.value))
    return TypeDescriptor(type=tv.type.value)


def value_payload(tv: TypedValue) -> WirePayload:
    if tv.elements is not None:
        return [value_payload(element) for element in tv.elements]
    return tv.value


def to_wire(tv: TypedValue) -> Tuple[WirePayload, TypeDescriptor]:
    """Split a typed value into its wire payload and type descriptor."""
    return value_payload(tv), type_descriptor(tv)


def from_wire(
    payload: WirePayload,
    descriptor: Union[TypeDescriptor, Mapping[str, Any]],
) -> TypedValue:
    """Rebuild a typed value from a wire pair.

    Scalar literals are trusted as-is; only the type tokens are checked.
    """
    if not isinstance(descriptor, TypeDescriptor):
        try:
            descriptor = TypeDescriptor.from_dict(dict(descriptor))
        except ValidationError as exc:
            raise InvalidParameterError(
                "malformed type descriptor", details={"errors": exc.errors(include_url=False)}
            ) from exc

    logical_type = LogicalType.parse(descriptor.type)
    builder = TypedValue.builder().set_type(logical_type)

    if logical_type != LogicalType.ARRAY:
        if descriptor.element_type is not None:
            raise InvalidParameterError(
                "elementType can't be set if type is not ARRAY",
                details={"type": str(logical_type)},
            )
        return builder.set_value(payload).build()

    if descriptor.element_type is None:
        raise InvalidParameterError("elementType required when type is ARRAY")
    if descriptor.element_type.element_type is not None:
        raise InvalidParameterError(
            "ARRAY element descriptors can't carry an elementType",
            details={"element_type": descriptor.element_type.type},
        )
    if not isinstance(payload, (list, tuple)):
        raise InvalidParameterError(
            "ARRAY payload must be a list of element payloads",
            details={"payload_type": type(payload).__name__},
        )

    element_type = LogicalType.parse(descriptor.element_type.type)
    elements: List[TypedValue] = [from_wire(item, descriptor.element_type) for item in payload]
    log.debug("Decoded ARRAY<%s> parameter with %d elements", element_type, len(elements))
    return builder.set_elements(elements).set_element_type(element_type).build()
