from __future__ import annotations

import base64
from typing import Any, Union

from parambricks.core.exceptions import TypeMismatchError, UnsupportedTypeError
from parambricks.encoders.registry import EncoderRegistry, register_encoder
from parambricks.temporal import format_timestamp_micros, validate_literal
from parambricks.types import LogicalType, NativeKind, native_kind_of, runtime_name

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def _mismatch(type: LogicalType, value: Any) -> TypeMismatchError:
    native = runtime_name(value)
    return TypeMismatchError(
        reason=f"Type {type} incompatible with {native}",
        details={"type": str(type), "native": native},
    )


@register_encoder(LogicalType.BOOL)
def encode_bool(value: Any) -> str:
    if native_kind_of(value) is NativeKind.BOOL:
        return "true" if value else "false"
    raise _mismatch(LogicalType.BOOL, value)


@register_encoder(LogicalType.INT64)
def encode_int64(value: Any) -> str:
    if native_kind_of(value) is NativeKind.INT:
        if not INT64_MIN <= value <= INT64_MAX:
            raise TypeMismatchError(
                reason=f"Integer {value} does not fit in INT64",
                details={"min": INT64_MIN, "max": INT64_MAX},
            )
        return str(int(value))
    raise _mismatch(LogicalType.INT64, value)


@register_encoder(LogicalType.FLOAT64)
def encode_float64(value: Any) -> str:
    if native_kind_of(value) is NativeKind.FLOAT:
        return repr(float(value))
    raise _mismatch(LogicalType.FLOAT64, value)


@register_encoder(LogicalType.STRING)
def encode_string(value: Any) -> str:
    if native_kind_of(value) is NativeKind.STR:
        return str.__str__(value)
    raise _mismatch(LogicalType.STRING, value)


@register_encoder(LogicalType.BYTES)
def encode_bytes(value: Any) -> str:
    if native_kind_of(value) is NativeKind.BYTES:
        return base64.b64encode(bytes(value)).decode("ascii")
    raise _mismatch(LogicalType.BYTES, value)


@register_encoder(LogicalType.TIMESTAMP)
def encode_timestamp(value: Any) -> str:
    kind = native_kind_of(value)
    if kind is NativeKind.INT:
        return format_timestamp_micros(int(value))
    if kind is NativeKind.STR:
        return validate_literal(str.__str__(value), LogicalType.TIMESTAMP)
    raise _mismatch(LogicalType.TIMESTAMP, value)


@register_encoder(LogicalType.DATE)
def encode_date(value: Any) -> str:
    if native_kind_of(value) is NativeKind.STR:
        return validate_literal(str.__str__(value), LogicalType.DATE)
    raise _mismatch(LogicalType.DATE, value)


@register_encoder(LogicalType.TIME)
def encode_time(value: Any) -> str:
    if native_kind_of(value) is NativeKind.STR:
        return validate_literal(str.__str__(value), LogicalType.TIME)
    raise _mismatch(LogicalType.TIME, value)


@register_encoder(LogicalType.DATETIME)
def encode_datetime(value: Any) -> str:
    if native_kind_of(value) is NativeKind.STR:
        return validate_literal(str.__str__(value), LogicalType.DATETIME)
    raise _mismatch(LogicalType.DATETIME, value)


def encode_scalar(value: Any, type: Union[LogicalType, str]) -> str:
    """Encode a native value as the canonical string literal for ``type``.

    Raises:
        UnknownTypeError: ``type`` is not a known type token.
        UnsupportedTypeError: ``type`` is ARRAY or STRUCT.
        TypeMismatchError: the value's runtime kind does not fit ``type``.
        MalformedLiteralError: a temporal string does not match its pattern.
    """
    logical_type = LogicalType.parse(type)
    if logical_type.is_composite:
        raise UnsupportedTypeError(
            reason="cannot encode a composite type as a scalar",
            details={"type": str(logical_type)},
        )
    return EncoderRegistry.get(logical_type)(value)
