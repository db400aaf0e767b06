from __future__ import annotations

from typing import Any, Callable, ClassVar, Dict, List, Optional

from parambricks.core.exceptions import EncoderRegistryError
from parambricks.types import SCALAR_TYPES, LogicalType

ScalarEncoder = Callable[[Any], str]


class EncoderRegistry:
    """Maps each scalar logical type to the function that encodes native values for it."""

    _registry: ClassVar[Dict[LogicalType, ScalarEncoder]] = {}

    @classmethod
    def register(
        cls,
        *,
        type: LogicalType,
        encoder: ScalarEncoder,
        overwrite: bool = False,
    ) -> None:
        if type.is_composite:
            raise EncoderRegistryError(f"Cannot register a scalar encoder for composite type {type}")
        if not overwrite and type in cls._registry:
            existing = cls._registry[type]
            raise EncoderRegistryError(
                f"Encoder already registered for type={type}: {existing.__qualname__}"
            )
        cls._registry[type] = encoder

    @classmethod
    def get(cls, type: LogicalType) -> ScalarEncoder:
        try:
            return cls._registry[type]
        except KeyError as exc:
            raise EncoderRegistryError(f"No encoder registered for type={type}") from exc

    @classmethod
    def try_get(cls, type: LogicalType) -> Optional[ScalarEncoder]:
        return cls._registry.get(type)

    @classmethod
    def missing(cls) -> List[LogicalType]:
        return [t for t in SCALAR_TYPES if t not in cls._registry]

    @classmethod
    def snapshot(cls) -> Dict[LogicalType, ScalarEncoder]:
        return dict(cls._registry)

    @classmethod
    def restore(cls, snapshot: Dict[LogicalType, ScalarEncoder]) -> None:
        cls._registry.clear()
        cls._registry.update(snapshot)

    @classmethod
    def clear(cls) -> None:
        cls._registry.clear()


def register_encoder(
    type: LogicalType,
    *,
    overwrite: bool = False,
) -> Callable[[ScalarEncoder], ScalarEncoder]:
    def decorator(encoder: ScalarEncoder) -> ScalarEncoder:
        EncoderRegistry.register(type=type, encoder=encoder, overwrite=overwrite)
        return encoder

    return decorator
