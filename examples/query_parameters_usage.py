"""
Example: Building query parameters and their wire documents.

This shows the three ways parameters reach the query service:
- Typed factories: explicit logical types in code
- Inference: native Python values typed automatically
- Declarative config: parameters from a pipeline JSON/dict with runtime variables
"""

import json

from parambricks import (
    LogicalType,
    QueryParameters,
    QueryParametersConfig,
    array_of,
    build_query_parameters,
    date,
    from_wire,
    timestamp,
    to_wire,
)
from parambricks.core.logger import configure_root_logger

configure_root_logger("DEBUG")


# =============================================================================
# Example 1: Typed factories
# =============================================================================
params = QueryParameters(
    {
        "logical_date": date("2026-01-18"),
        "since": timestamp(1408452095220000),   # ← epoch microseconds
        "ids": array_of([1, 2, 3], LogicalType.INT64),
        "country": "FR",                        # ← inferred as STRING
    }
)

print(json.dumps(params.to_wire(), indent=2))


# =============================================================================
# Example 2: Decoding values returned by the service
# =============================================================================
payload, descriptor = to_wire(params["ids"])
print(payload, descriptor.to_dict())
assert from_wire(payload, descriptor.to_dict()) == params["ids"]


# =============================================================================
# Example 3: Declarative config with runtime variables
# =============================================================================
config = QueryParametersConfig.model_validate(
    {
        "parameters": [
            {"kind": "scalar", "name": "logical_date", "type": "DATE", "value": "{{logical_date}}"},
            {"kind": "scalar", "name": "loaded_at", "type": "TIMESTAMP", "value": "{{now_timestamp}}"},
            {"kind": "array", "name": "regions", "element_type": "STRING", "values": ["eu", "us"]},
        ]
    }
)

runtime_params = build_query_parameters(config, runtime_vars={"logical_date": "2026-01-18"})
print(json.dumps(runtime_params.to_wire(), indent=2))
