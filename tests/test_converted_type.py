import pytest

from parqcore.converted_type import (
    DecimalConverted,
    GroupConvertedType,
    PrimitiveConvertedType,
    converted_to_group_converted,
    converted_to_primitive_converted,
    group_converted_converted_to,
    logical_to_converted,
    primitive_converted_to_converted,
)
from parqcore.format import (
    BsonType,
    ConvertedType,
    DateType,
    DecimalType,
    EnumType,
    IntegerType,
    JsonType,
    ListType,
    MapType,
    NullType,
    ParquetError,
    StringType,
    TimestampType,
    TimeType,
    TimeUnit,
    UuidType,
)

GROUP_KINDS = [ConvertedType.MAP, ConvertedType.MAP_KEY_VALUE, ConvertedType.LIST]
PRIMITIVE_KINDS = [
    c for c in ConvertedType if c not in GROUP_KINDS and c is not ConvertedType.DECIMAL
]


@pytest.mark.parametrize("converted", PRIMITIVE_KINDS)
def test_primitive_round_trip(converted):
    parsed = converted_to_primitive_converted(converted, None)
    assert primitive_converted_to_converted(parsed) == (converted, None)


def test_decimal_round_trip():
    parsed = converted_to_primitive_converted(ConvertedType.DECIMAL, (18, 2))
    assert parsed == DecimalConverted(18, 2)
    assert primitive_converted_to_converted(parsed) == (ConvertedType.DECIMAL, (18, 2))


def test_decimal_needs_precision_and_scale():
    with pytest.raises(ParquetError, match="precision and scale"):
        converted_to_primitive_converted(ConvertedType.DECIMAL, None)


@pytest.mark.parametrize("converted", GROUP_KINDS)
def test_group_kinds_not_primitive(converted):
    with pytest.raises(ParquetError):
        converted_to_primitive_converted(converted, None)


@pytest.mark.parametrize("converted", GROUP_KINDS)
def test_group_round_trip(converted):
    assert group_converted_converted_to(converted_to_group_converted(converted)) is converted


@pytest.mark.parametrize("converted", [ConvertedType.UTF8, ConvertedType.DECIMAL])
def test_primitive_kinds_not_group(converted):
    with pytest.raises(ParquetError):
        converted_to_group_converted(converted)


@pytest.mark.parametrize(
    "logical, expected",
    [
        (StringType(), PrimitiveConvertedType.UTF8),
        (MapType(), GroupConvertedType.MAP),
        (ListType(), GroupConvertedType.LIST),
        (EnumType(), PrimitiveConvertedType.ENUM),
        (DateType(), PrimitiveConvertedType.DATE),
        (TimeType(False, TimeUnit.MILLIS), PrimitiveConvertedType.TIME_MILLIS),
        (TimeType(True, TimeUnit.MICROS), PrimitiveConvertedType.TIME_MICROS),
        (TimestampType(True, TimeUnit.MILLIS), PrimitiveConvertedType.TIMESTAMP_MILLIS),
        (TimestampType(False, TimeUnit.MICROS), PrimitiveConvertedType.TIMESTAMP_MICROS),
        (IntegerType(8, True), PrimitiveConvertedType.INT_8),
        (IntegerType(64, False), PrimitiveConvertedType.UINT_64),
        (JsonType(), PrimitiveConvertedType.JSON),
        (BsonType(), PrimitiveConvertedType.BSON),
        (DecimalType(scale=2, precision=18), DecimalConverted(18, 2)),
    ],
)
def test_logical_to_converted(logical, expected):
    assert logical_to_converted(logical) == expected


@pytest.mark.parametrize(
    "logical",
    [
        NullType(),
        UuidType(),
        TimeType(True, TimeUnit.NANOS),
        TimestampType(False, TimeUnit.NANOS),
    ],
)
def test_logical_without_converted(logical):
    assert logical_to_converted(logical) is None


def test_unsupported_integer_width():
    with pytest.raises(ParquetError, match="not supported"):
        logical_to_converted(IntegerType(24, True))