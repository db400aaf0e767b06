from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Union

from parambricks.core.exceptions import UnknownTypeError


class LogicalType(str, Enum):
    """Externally recognized parameter types. Values are the wire tokens."""

    BOOL = "BOOL"
    INT64 = "INT64"
    FLOAT64 = "FLOAT64"
    STRING = "STRING"
    BYTES = "BYTES"
    TIMESTAMP = "TIMESTAMP"
    DATE = "DATE"
    TIME = "TIME"
    DATETIME = "DATETIME"
    ARRAY = "ARRAY"
    STRUCT = "STRUCT"  # reserved, never accepted as a parameter type

    @classmethod
    def parse(cls, name: Union[str, "LogicalType"]) -> "LogicalType":
        if isinstance(name, LogicalType):
            return name
        try:
            return cls(name)
        except ValueError as exc:
            raise UnknownTypeError(
                reason=f"Unknown logical type: {name!r}",
                details={"known": [t.value for t in cls]},
            ) from exc

    @property
    def is_composite(self) -> bool:
        return self in (LogicalType.ARRAY, LogicalType.STRUCT)

    def __str__(self) -> str:
        return self.value


SCALAR_TYPES = tuple(t for t in LogicalType if not t.is_composite)


class NativeKind(str, Enum):
    """Closed set of native scalar kinds the codec knows how to encode."""

    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STR = "str"
    BYTES = "bytes"


def native_kind_of(value: Any) -> Optional[NativeKind]:
    # bool subclasses int, so it has to be tested first
    if isinstance(value, bool):
        return NativeKind.BOOL
    if isinstance(value, int):
        return NativeKind.INT
    if isinstance(value, float):
        return NativeKind.FLOAT
    if isinstance(value, str):
        return NativeKind.STR
    if isinstance(value, (bytes, bytearray)):
        return NativeKind.BYTES
    return None


def runtime_name(value: Any) -> str:
    cls = type(value)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"
