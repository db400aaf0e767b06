"""
Temporal literal formats accepted by the query service.

| Type      | Pattern                              | Example                              |
|-----------|--------------------------------------|--------------------------------------|
| TIMESTAMP | ``yyyy-MM-dd HH:mm:ss.SSSSSS±HH:MM`` | ``2014-08-19 12:41:35.220000+00:00`` |
| DATE      | ``yyyy-MM-dd``                       | ``2014-08-19``                       |
| TIME      | ``HH:mm:ss.SSSSSS``                  | ``12:41:35.220000``                  |
| DATETIME  | ``yyyy-MM-dd HH:mm:ss.SSSSSS``       | ``2014-08-19 12:41:35.220000``       |

Validation is strict on field widths and also checks calendar and clock
ranges, so ``2014-13-40`` is rejected even though it has the right shape.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Dict

from parambricks.core.exceptions import MalformedLiteralError, TypeMismatchError
from parambricks.types import LogicalType

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Representable range of datetime in microseconds relative to the epoch.
MIN_TIMESTAMP_MICROS = (datetime(1, 1, 1, tzinfo=timezone.utc) - _EPOCH) // timedelta(microseconds=1)
MAX_TIMESTAMP_MICROS = (
    datetime(9999, 12, 31, 23, 59, 59, 999999, tzinfo=timezone.utc) - _EPOCH
) // timedelta(microseconds=1)


@dataclass(frozen=True)
class TemporalFormat:
    pattern: str
    regex: re.Pattern
    strptime_format: str

    def matches(self, literal: str) -> bool:
        if not self.regex.fullmatch(literal):
            return False
        try:
            datetime.strptime(literal, self.strptime_format)
        except ValueError:
            return False
        return True


TEMPORAL_FORMATS: Dict[LogicalType, TemporalFormat] = {
    LogicalType.TIMESTAMP: TemporalFormat(
        pattern="yyyy-MM-dd HH:mm:ss.SSSSSS±HH:MM",
        regex=re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\.\d{6}[+-]\d{2}:\d{2}", re.ASCII),
        strptime_format="%Y-%m-%d %H:%M:%S.%f%z",
    ),
    LogicalType.DATE: TemporalFormat(
        pattern="yyyy-MM-dd",
        regex=re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII),
        strptime_format="%Y-%m-%d",
    ),
    LogicalType.TIME: TemporalFormat(
        pattern="HH:mm:ss.SSSSSS",
        regex=re.compile(r"\d{2}:\d{2}:\d{2}\.\d{6}", re.ASCII),
        strptime_format="%H:%M:%S.%f",
    ),
    LogicalType.DATETIME: TemporalFormat(
        pattern="yyyy-MM-dd HH:mm:ss.SSSSSS",
        regex=re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\.\d{6}", re.ASCII),
        strptime_format="%Y-%m-%d %H:%M:%S.%f",
    ),
}


def validate_literal(literal: str, type: LogicalType) -> str:
    """Return ``literal`` unchanged if it is a valid ``type`` literal."""
    fmt = TEMPORAL_FORMATS[type]
    if not fmt.matches(literal):
        raise MalformedLiteralError(
            reason=f"Invalid {type} literal {literal!r}, expected format {fmt.pattern!r}",
            details={"type": str(type), "pattern": fmt.pattern},
        )
    return literal


def format_timestamp_micros(micros: int) -> str:
    """Format epoch microseconds as a UTC TIMESTAMP literal, without rounding."""
    if not MIN_TIMESTAMP_MICROS <= micros <= MAX_TIMESTAMP_MICROS:
        raise TypeMismatchError(
            reason=f"TIMESTAMP microseconds {micros} outside the representable range",
            details={"min": MIN_TIMESTAMP_MICROS, "max": MAX_TIMESTAMP_MICROS},
        )
    moment = _EPOCH + timedelta(microseconds=micros)
    # strftime does not zero-pad years below 1000 on every platform
    return (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d} "
        f"{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}.{moment.microsecond:06d}+00:00"
    )
