from __future__ import annotations

import re
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Union

from pydantic import ValidationError

from parambricks.codec import array_of, from_wire, scalar_of, to_wire
from parambricks.core.exceptions import InvalidParameterError
from parambricks.core.logger import get_logger, push_query_id, reset_query_id
from parambricks.models.wire import WireParameter
from parambricks.value import TypedValue

log = get_logger(__name__)

_NAME = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def _check_name(name: Any) -> str:
    if not isinstance(name, str) or not _NAME.fullmatch(name):
        raise InvalidParameterError(
            f"Invalid parameter name {name!r}",
            details={"pattern": _NAME.pattern},
        )
    return name


def _to_typed_value(value: Any) -> TypedValue:
    if isinstance(value, TypedValue):
        return value
    if isinstance(value, (list, tuple)):
        return array_of(value)
    return scalar_of(value)


class QueryParameters(Mapping[str, TypedValue]):
    """Ordered, immutable set of named query parameters.

    Values may be given as :class:`TypedValue` instances or as native values,
    which are typed by inference (lists and tuples become arrays).

    Example:
        >>> params = QueryParameters({"country": "FR", "ids": [1, 2, 3]})
        >>> [p["name"] for p in params.to_wire()]
        ['country', 'ids']
    """

    def __init__(self, values: Mapping[str, Any] | None = None):
        self._values: Dict[str, TypedValue] = {}
        for name, value in (values or {}).items():
            self._values[_check_name(name)] = _to_typed_value(value)

    def __getitem__(self, name: str) -> TypedValue:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"QueryParameters({self._values!r})"

    def to_wire(self, *, query_id: Optional[str] = None) -> List[Dict[str, Any]]:
        """Encode every parameter as a named wire document.

        ``query_id`` tags this call's log records (``query=<id>``).
        """
        token = push_query_id(query_id)
        try:
            documents = []
            for name, value in self._values.items():
                payload, descriptor = to_wire(value)
                parameter = WireParameter(name=name, parameter_type=descriptor, parameter_value=payload)
                documents.append(parameter.to_dict())
            log.debug("Encoded %d query parameters: %s", len(documents), ", ".join(self._values))
            return documents
        finally:
            reset_query_id(token)

    @classmethod
    def from_wire(
        cls,
        documents: Iterable[Union[WireParameter, Mapping[str, Any]]],
        *,
        query_id: Optional[str] = None,
    ) -> "QueryParameters":
        token = push_query_id(query_id)
        try:
            return cls(_decode_documents(documents))
        finally:
            reset_query_id(token)


def _decode_documents(documents: Iterable[Union[WireParameter, Mapping[str, Any]]]) -> Dict[str, TypedValue]:
    values: Dict[str, TypedValue] = {}
    for document in documents:
        if not isinstance(document, WireParameter):
            try:
                document = WireParameter.model_validate(dict(document))
            except ValidationError as exc:
                raise InvalidParameterError(
                    "malformed parameter document",
                    details={"errors": exc.errors(include_url=False)},
                ) from exc
        if document.name in values:
            raise InvalidParameterError(
                f"Duplicate parameter name {document.name!r}",
                details={"name": document.name},
            )
        values[document.name] = from_wire(document.parameter_value, document.parameter_type)
    log.debug("Decoded %d query parameters: %s", len(values), ", ".join(values))
    return values
