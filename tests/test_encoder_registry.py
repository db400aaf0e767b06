import pytest

from parambricks.core.exceptions import EncoderRegistryError
from parambricks.encoders.registry import EncoderRegistry, register_encoder
from parambricks.encoders.scalar import encode_scalar
from parambricks.types import SCALAR_TYPES, LogicalType

_BUILTIN = EncoderRegistry.snapshot()


def setup_function() -> None:
    EncoderRegistry.restore(_BUILTIN)


def teardown_function() -> None:
    EncoderRegistry.restore(_BUILTIN)


def test_builtin_encoders_cover_every_scalar_type():
    assert EncoderRegistry.missing() == []
    assert set(EncoderRegistry.snapshot()) == set(SCALAR_TYPES)


def test_composite_types_have_no_encoder():
    assert EncoderRegistry.try_get(LogicalType.ARRAY) is None
    assert EncoderRegistry.try_get(LogicalType.STRUCT) is None


def test_cannot_register_composite_encoder():
    with pytest.raises(EncoderRegistryError, match="composite"):
        EncoderRegistry.register(type=LogicalType.ARRAY, encoder=str)


def test_duplicate_registration_raises_by_default():
    with pytest.raises(EncoderRegistryError, match="already registered"):

        @register_encoder(LogicalType.STRING)
        def other(value):
            return value


def test_overwrite_allows_re_registration():
    @register_encoder(LogicalType.STRING, overwrite=True)
    def shout(value):
        return value.upper()

    assert EncoderRegistry.get(LogicalType.STRING) is shout
    assert encode_scalar("abc", LogicalType.STRING) == "ABC"


def test_get_missing_raises_helpful_error():
    EncoderRegistry.clear()

    with pytest.raises(EncoderRegistryError, match="No encoder registered"):
        EncoderRegistry.get(LogicalType.BOOL)
    assert LogicalType.BOOL in EncoderRegistry.missing()
