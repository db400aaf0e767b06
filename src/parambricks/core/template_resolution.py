from __future__ import annotations

from datetime import datetime, timezone
import re
from typing import Any, Mapping


# Only allow simple identifiers so literals such as {{secrets/foo}} or
# ${ENV:x} survive untouched.
_IDENTIFIER = r"[A-Za-z_][A-Za-z0-9_]*"
_PATTERN = re.compile(rf"\{{\{{\s*({_IDENTIFIER})\s*\}}\}}|\$\{{({_IDENTIFIER})\}}")


def default_template_vars(*, now: datetime | None = None) -> dict[str, str]:
    """Clock-derived variables, already in the canonical temporal literal formats."""
    now = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return {
        "now_date": now.strftime("%Y-%m-%d"),
        "now_time": now.strftime("%H:%M:%S.%f"),
        "now_datetime": now.strftime("%Y-%m-%d %H:%M:%S.%f"),
        "now_timestamp": now.strftime("%Y-%m-%d %H:%M:%S.%f") + "+00:00",
    }


def resolve_template_string(value: str, variables: Mapping[str, Any]) -> str:
    if "{{" not in value and "${" not in value:
        return value

    def _repl(match: re.Match[str]) -> str:
        key = match.group(1) or match.group(2)
        if key in variables and variables[key] is not None:
            return str(variables[key])
        return match.group(0)

    return _PATTERN.sub(_repl, value)


def resolve_parameter_literal(obj: Any, variables: Mapping[str, Any]) -> Any:
    """Resolve {{var}} and ${var} inside a configured parameter literal.

    Strings are substituted, lists and tuples are resolved element-wise
    (keeping their container type). Every other value, including bytes and
    numbers, is returned unchanged so native kinds survive for encoding.
    """

    if isinstance(obj, str):
        return resolve_template_string(obj, variables)

    if isinstance(obj, list):
        return [resolve_parameter_literal(x, variables) for x in obj]

    if isinstance(obj, tuple):
        return tuple(resolve_parameter_literal(x, variables) for x in obj)

    return obj
