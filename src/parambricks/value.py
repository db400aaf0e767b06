from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

from parambricks.core.exceptions import InvalidParameterError
from parambricks.types import LogicalType

TypeLike = Union[LogicalType, str]


def _coerce_type(value: Optional[TypeLike]) -> Optional[LogicalType]:
    if value is None:
        return None
    return LogicalType.parse(value)


@dataclass(frozen=True)
class TypedValue:
    """A query parameter value tagged with its logical type.

    Scalars carry their canonical string encoding in ``value``; arrays carry
    an ordered tuple of scalar ``elements`` that all share ``element_type``.
    Instances are validated on construction and immutable afterwards, so they
    can be shared freely between threads.

    Prefer the factories in :mod:`parambricks.codec` or
    :meth:`TypedValue.builder` over calling the constructor directly.
    """

    value: Optional[str] = None
    elements: Optional[Tuple["TypedValue", ...]] = None
    type: Optional[LogicalType] = None
    element_type: Optional[LogicalType] = None

    def __post_init__(self) -> None:
        if self.elements is not None:
            object.__setattr__(self, "elements", tuple(self.elements))
        object.__setattr__(self, "type", _coerce_type(self.type))
        object.__setattr__(self, "element_type", _coerce_type(self.element_type))
        self._validate()

    def _validate(self) -> None:
        if self.type is None:
            raise InvalidParameterError("type must be set")

        if self.elements is not None:
            if self.type != LogicalType.ARRAY:
                raise InvalidParameterError(
                    "type must be ARRAY if elements is set", details={"type": str(self.type)}
                )
            if self.element_type is None:
                raise InvalidParameterError("elementType required when elements is set")
            if self.value is not None:
                raise InvalidParameterError("value can't be set if elements is set")
        else:
            if self.type == LogicalType.ARRAY:
                raise InvalidParameterError("type can't be ARRAY if elements is not set")
            if self.element_type is not None:
                raise InvalidParameterError(
                    "elementType can't be set if elements is not set",
                    details={"element_type": str(self.element_type)},
                )
            if self.value is None:
                raise InvalidParameterError("value must be set if elements is not set")

        if self.value is not None and not isinstance(self.value, str):
            raise InvalidParameterError(
                "value must be a string", details={"value_type": type(self.value).__name__}
            )

        if self.type == LogicalType.STRUCT:
            raise InvalidParameterError("STRUCT parameters are not supported")
        if self.element_type is not None and self.element_type.is_composite:
            raise InvalidParameterError(
                f"ARRAY of {self.element_type} parameters are not supported",
                details={"element_type": str(self.element_type)},
            )

        for index, element in enumerate(self.elements or ()):
            if not isinstance(element, TypedValue):
                raise InvalidParameterError(
                    "array elements must be TypedValue instances",
                    details={"index": index, "element_type": type(element).__name__},
                )
            if element.type != self.element_type:
                raise InvalidParameterError(
                    f"array element type {element.type} does not match elementType {self.element_type}",
                    details={"index": index},
                )

    @property
    def is_array(self) -> bool:
        return self.type == LogicalType.ARRAY

    @staticmethod
    def builder() -> "TypedValueBuilder":
        return TypedValueBuilder()

    def to_builder(self) -> "TypedValueBuilder":
        """Return a builder seeded with this value's fields (elements copied)."""
        return TypedValueBuilder(
            value=self.value,
            elements=None if self.elements is None else list(self.elements),
            type=self.type,
            element_type=self.element_type,
        )


class TypedValueBuilder:
    """Staged builder for :class:`TypedValue`.

    Setters only store; every invariant is checked once, in :meth:`build`,
    because they span several fields. A builder belongs to one caller at a time.

    Example:
        >>> TypedValue.builder().set_type("INT64").set_value("42").build()
        TypedValue(value='42', elements=None, type=<LogicalType.INT64: 'INT64'>, element_type=None)
    """

    def __init__(
        self,
        *,
        value: Optional[str] = None,
        elements: Optional[List[TypedValue]] = None,
        type: Optional[TypeLike] = None,
        element_type: Optional[TypeLike] = None,
    ):
        self._value = value
        self._elements = elements
        self._type = type
        self._element_type = element_type

    def set_value(self, value: Optional[str]) -> "TypedValueBuilder":
        self._value = value
        return self

    def set_elements(self, elements: Optional[Iterable[TypedValue]]) -> "TypedValueBuilder":
        self._elements = None if elements is None else list(elements)
        return self

    def set_type(self, type: Optional[TypeLike]) -> "TypedValueBuilder":
        self._type = type
        return self

    def set_element_type(self, element_type: Optional[TypeLike]) -> "TypedValueBuilder":
        self._element_type = element_type
        return self

    def build(self) -> TypedValue:
        return TypedValue(
            value=self._value,
            elements=None if self._elements is None else tuple(self._elements),
            type=self._type,
            element_type=self._element_type,
        )
