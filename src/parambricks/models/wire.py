from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

# A scalar literal, or the ordered payloads of an array's elements.
WirePayload = Union[str, List[Any]]


class TypeDescriptor(BaseModel):
    """Wire shape of a parameter type: ``{"type": ..., "elementType": {...}}``.

    ``type`` is kept as the raw token; it is checked against the closed set of
    logical types when the descriptor is decoded, not when it is parsed.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: str
    element_type: Optional[TypeDescriptor] = Field(default=None, alias="elementType")

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TypeDescriptor":
        return cls.model_validate(data)


class WireParameter(BaseModel):
    """A named parameter as submitted to the query service."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    parameter_type: TypeDescriptor = Field(alias="parameterType")
    parameter_value: WirePayload = Field(alias="parameterValue")

    @model_validator(mode="after")
    def _validate_name(self) -> "WireParameter":
        if not self.name:
            raise ValueError("name must be a non-empty string")
        return self

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
