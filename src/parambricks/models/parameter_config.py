from __future__ import annotations

from typing import Annotated, Any, Dict, Iterable, List, Literal, Mapping, Optional, Union

from pydantic import BaseModel, Field, StrictBool, StrictBytes, StrictFloat, StrictInt, StrictStr, model_validator

from parambricks.codec import array_of, scalar_of
from parambricks.core.template_resolution import default_template_vars, resolve_parameter_literal
from parambricks.parameters import QueryParameters
from parambricks.types import LogicalType
from parambricks.value import TypedValue

# Strict types keep the native kind the config author wrote: "1" stays a str
# and 1 stays an int, so the codec rather than pydantic decides compatibility.
ScalarLiteral = Union[StrictBool, StrictInt, StrictFloat, StrictStr, StrictBytes]


class ScalarParameterConfig(BaseModel):
    kind: Literal["scalar"] = "scalar"

    name: str
    type: Optional[LogicalType] = None
    value: ScalarLiteral

    @model_validator(mode="after")
    def _validate_type(self) -> "ScalarParameterConfig":
        if self.type is not None and self.type.is_composite:
            raise ValueError("scalar parameters can't declare type ARRAY or STRUCT; use kind='array'")
        return self

    def to_typed_value(self, variables: Mapping[str, Any]) -> TypedValue:
        return scalar_of(resolve_parameter_literal(self.value, variables), self.type)


class ArrayParameterConfig(BaseModel):
    kind: Literal["array"] = "array"

    name: str
    element_type: Optional[LogicalType] = None
    values: List[ScalarLiteral] = Field(default_factory=list)

    @model_validator(mode="after")
    def _validate_element_type(self) -> "ArrayParameterConfig":
        if self.element_type is not None and self.element_type.is_composite:
            raise ValueError("element_type can't be ARRAY or STRUCT")
        if self.element_type is None and not self.values:
            raise ValueError("element_type is required when values is empty")
        return self

    def to_typed_value(self, variables: Mapping[str, Any]) -> TypedValue:
        return array_of(resolve_parameter_literal(self.values, variables), self.element_type)


ParameterConfig = Annotated[
    Union[ScalarParameterConfig, ArrayParameterConfig],
    Field(discriminator="kind"),
]


class QueryParametersConfig(BaseModel):
    """Declarative parameter block, e.g. from a pipeline YAML/JSON config.

    Example:
        >>> cfg = QueryParametersConfig.model_validate(
        ...     {"parameters": [{"kind": "scalar", "name": "ds", "type": "DATE", "value": "{{now_date}}"}]}
        ... )
    """

    parameters: List[ParameterConfig] = Field(default_factory=list)

    @model_validator(mode="after")
    def _validate_unique_names(self) -> "QueryParametersConfig":
        seen = set()
        for parameter in self.parameters:
            if parameter.name in seen:
                raise ValueError(f"duplicate parameter name {parameter.name!r}")
            seen.add(parameter.name)
        return self


def build_query_parameters(
    configs: Union[QueryParametersConfig, Iterable[Union[ScalarParameterConfig, ArrayParameterConfig]]],
    runtime_vars: Optional[Dict[str, Any]] = None,
) -> QueryParameters:
    """Resolve placeholders in configured literals and encode them.

    ``runtime_vars`` override the clock-derived defaults (``now_date`` etc.).
    """
    if isinstance(configs, QueryParametersConfig):
        configs = configs.parameters
    variables: Dict[str, Any] = {**default_template_vars(), **(runtime_vars or {})}
    return QueryParameters({cfg.name: cfg.to_typed_value(variables) for cfg in configs})
