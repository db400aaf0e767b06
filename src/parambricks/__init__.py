"""parambricks.

Typed query parameters for remote SQL services.

Pairs native Python values with an explicit logical type (BOOL, INT64,
FLOAT64, STRING, BYTES, TIMESTAMP, DATE, TIME, DATETIME and one level of
ARRAY), validates the pairing, and converts losslessly to and from the wire
pair ``(payload, type descriptor)`` the query service exchanges.
"""

from parambricks.codec import (
    array_of,
    bool_,
    bytes_,
    date,
    datetime_,
    float64,
    from_wire,
    infer_type,
    int64,
    scalar_of,
    string,
    time,
    timestamp,
    to_wire,
)
from parambricks.core.exceptions import (
    InvalidParameterError,
    MalformedLiteralError,
    ParambricksException,
    TypeMismatchError,
    UnknownTypeError,
    UnsupportedTypeError,
)
from parambricks.encoders.scalar import encode_scalar
from parambricks.models.parameter_config import QueryParametersConfig, build_query_parameters
from parambricks.models.wire import TypeDescriptor
from parambricks.parameters import QueryParameters
from parambricks.types import LogicalType
from parambricks.value import TypedValue, TypedValueBuilder

__version__ = "0.1.0"

__all__ = [
    "LogicalType",
    "TypedValue",
    "TypedValueBuilder",
    "TypeDescriptor",
    "QueryParameters",
    "QueryParametersConfig",
    "build_query_parameters",
    "infer_type",
    "encode_scalar",
    "scalar_of",
    "array_of",
    "bool_",
    "int64",
    "float64",
    "string",
    "bytes_",
    "timestamp",
    "date",
    "time",
    "datetime_",
    "to_wire",
    "from_wire",
    "ParambricksException",
    "InvalidParameterError",
    "UnsupportedTypeError",
    "TypeMismatchError",
    "MalformedLiteralError",
    "UnknownTypeError",
]
