import pytest

from parqcore.converted_type import DecimalConverted, PrimitiveConvertedType
from parqcore.format import (
    BsonType,
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
from parqcore.physical_type import PhysicalType
from parqcore.spec import (
    check_converted_invariants,
    check_decimal_invariants,
    check_logical_invariants,
)


def test_decimal_precision_must_be_positive():
    with pytest.raises(ParquetError, match="precision must be larger than 0"):
        check_decimal_invariants(PhysicalType.INT32, 0, 0)


def test_decimal_scale_below_precision():
    with pytest.raises(ParquetError, match="cannot be greater than or equal to precision"):
        check_decimal_invariants(PhysicalType.INT64, 5, 5)


@pytest.mark.parametrize(
    "physical_type, max_precision",
    [
        (PhysicalType.INT32, 9),
        (PhysicalType.INT64, 18),
        (PhysicalType.fixed_len_byte_array(16), 38),
    ],
)
def test_decimal_max_precision(physical_type, max_precision):
    check_decimal_invariants(physical_type, max_precision, 0)
    with pytest.raises(ParquetError, match="Cannot represent"):
        check_decimal_invariants(physical_type, max_precision + 1, 0)


def test_fixed_len_reports_max_precision():
    with pytest.raises(ParquetError, match="The max precision can only be 38"):
        check_decimal_invariants(PhysicalType.fixed_len_byte_array(16), 39, 2)


@pytest.mark.parametrize(
    "physical_type",
    [PhysicalType.BOOLEAN, PhysicalType.FLOAT, PhysicalType.DOUBLE, PhysicalType.INT96],
)
def test_decimal_rejects_other_types(physical_type):
    with pytest.raises(ParquetError, match="DECIMAL can only annotate"):
        check_decimal_invariants(physical_type, 5, 2)


@pytest.mark.parametrize(
    "converted, good, bad",
    [
        (PrimitiveConvertedType.UTF8, PhysicalType.BYTE_ARRAY, PhysicalType.INT32),
        (PrimitiveConvertedType.JSON, PhysicalType.BYTE_ARRAY, PhysicalType.INT64),
        (PrimitiveConvertedType.BSON, PhysicalType.BYTE_ARRAY, PhysicalType.BOOLEAN),
        (PrimitiveConvertedType.ENUM, PhysicalType.BYTE_ARRAY, PhysicalType.INT32),
        (PrimitiveConvertedType.DATE, PhysicalType.INT32, PhysicalType.INT64),
        (PrimitiveConvertedType.INT_8, PhysicalType.INT32, PhysicalType.INT64),
        (PrimitiveConvertedType.UINT_32, PhysicalType.INT32, PhysicalType.BYTE_ARRAY),
        (PrimitiveConvertedType.TIMESTAMP_MILLIS, PhysicalType.INT64, PhysicalType.INT32),
        (PrimitiveConvertedType.UINT_64, PhysicalType.INT64, PhysicalType.INT32),
        (
            PrimitiveConvertedType.INTERVAL,
            PhysicalType.fixed_len_byte_array(12),
            PhysicalType.fixed_len_byte_array(16),
        ),
        (DecimalConverted(9, 2), PhysicalType.INT32, PhysicalType.DOUBLE),
    ],
)
def test_converted_invariants(converted, good, bad):
    check_converted_invariants(good, converted)
    with pytest.raises(ParquetError):
        check_converted_invariants(bad, converted)


def test_converted_message_names_type():
    with pytest.raises(ParquetError, match="UTF8 can only annotate BYTE_ARRAY fields"):
        check_converted_invariants(PhysicalType.INT32, PrimitiveConvertedType.UTF8)


def test_interval_message():
    with pytest.raises(ParquetError, match=r"INTERVAL can only annotate FIXED_LEN_BYTE_ARRAY\(12\)"):
        check_converted_invariants(PhysicalType.BYTE_ARRAY, PrimitiveConvertedType.INTERVAL)


@pytest.mark.parametrize("logical", [MapType(), ListType()])
def test_nested_logical_types_rejected(logical):
    with pytest.raises(ParquetError, match="cannot be applied to a primitive type"):
        check_logical_invariants(PhysicalType.BYTE_ARRAY, logical)


def test_time_millis_on_int64_rejected():
    with pytest.raises(ParquetError, match="Cannot use millisecond unit on INT64 type"):
        check_logical_invariants(PhysicalType.INT64, TimeType(True, TimeUnit.MILLIS))


@pytest.mark.parametrize(
    "logical, good, bad",
    [
        (StringType(), PhysicalType.BYTE_ARRAY, PhysicalType.INT32),
        (EnumType(), PhysicalType.BYTE_ARRAY, PhysicalType.INT64),
        (JsonType(), PhysicalType.BYTE_ARRAY, PhysicalType.DOUBLE),
        (BsonType(), PhysicalType.BYTE_ARRAY, PhysicalType.FLOAT),
        (DateType(), PhysicalType.INT32, PhysicalType.INT64),
        (NullType(), PhysicalType.INT32, PhysicalType.BYTE_ARRAY),
        (TimeType(False, TimeUnit.MILLIS), PhysicalType.INT32, PhysicalType.DOUBLE),
        (TimeType(False, TimeUnit.MICROS), PhysicalType.INT64, PhysicalType.INT32),
        (TimestampType(True, TimeUnit.NANOS), PhysicalType.INT64, PhysicalType.INT32),
        (IntegerType(16, True), PhysicalType.INT32, PhysicalType.INT64),
        (IntegerType(64, False), PhysicalType.INT64, PhysicalType.INT32),
        (UuidType(), PhysicalType.fixed_len_byte_array(16), PhysicalType.BYTE_ARRAY),
        (DecimalType(2, 10), PhysicalType.INT64, PhysicalType.INT32),
    ],
)
def test_logical_invariants(logical, good, bad):
    check_logical_invariants(good, logical)
    with pytest.raises(ParquetError):
        check_logical_invariants(bad, logical)


def test_logical_mismatch_message():
    with pytest.raises(ParquetError, match="Cannot annotate"):
        check_logical_invariants(PhysicalType.fixed_len_byte_array(8), UuidType())