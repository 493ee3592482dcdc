"""Checks that type annotations are compatible with the physical type they annotate."""

from __future__ import annotations

from .converted_type import DecimalConverted, PrimitiveConverted, PrimitiveConvertedType
from .format import (
    BsonType,
    DateType,
    DecimalType,
    EnumType,
    IntegerType,
    JsonType,
    ListType,
    LogicalType,
    MapType,
    NullType,
    ParquetError,
    StringType,
    TimestampType,
    TimeType,
    TimeUnit,
    UuidType,
)
from .physical_type import PhysicalType

_I32_MAX = 2**31 - 1

_BYTE_ARRAY_ONLY = frozenset(
    {PrimitiveConvertedType.UTF8, PrimitiveConvertedType.BSON, PrimitiveConvertedType.JSON}
)

_INT32_ONLY = frozenset(
    {
        PrimitiveConvertedType.DATE,
        PrimitiveConvertedType.TIME_MILLIS,
        PrimitiveConvertedType.UINT_8,
        PrimitiveConvertedType.UINT_16,
        PrimitiveConvertedType.UINT_32,
        PrimitiveConvertedType.INT_8,
        PrimitiveConvertedType.INT_16,
        PrimitiveConvertedType.INT_32,
    }
)

_INT64_ONLY = frozenset(
    {
        PrimitiveConvertedType.TIME_MICROS,
        PrimitiveConvertedType.TIMESTAMP_MILLIS,
        PrimitiveConvertedType.TIMESTAMP_MICROS,
        PrimitiveConvertedType.UINT_64,
        PrimitiveConvertedType.INT_64,
    }
)


def _max_fixed_len_precision(length: int) -> int:
    """Largest number of decimal digits a signed ``length``-byte integer holds."""
    if length < 1:
        return 0
    bits = 8 * length - 1
    if bits > 1023:
        # beyond the range of a double the limit saturates
        return _I32_MAX
    return len(str(2**bits - 1)) - 1


def check_decimal_invariants(physical_type: PhysicalType, precision: int, scale: int) -> None:
    """Raise ParquetError unless a decimal of this precision and scale fits the type."""
    if precision < 1:
        raise ParquetError(f"DECIMAL precision must be larger than 0; It is {precision}")
    if scale >= precision:
        raise ParquetError(
            f"Invalid DECIMAL: scale ({scale}) cannot be greater than or equal to "
            f"precision ({precision})"
        )

    if physical_type == PhysicalType.INT32:
        if not 1 <= precision <= 9:
            raise ParquetError(f"Cannot represent INT32 as DECIMAL with precision {precision}")
    elif physical_type == PhysicalType.INT64:
        if not 1 <= precision <= 18:
            raise ParquetError(f"Cannot represent INT64 as DECIMAL with precision {precision}")
    elif physical_type.length is not None:
        max_precision = _max_fixed_len_precision(physical_type.length)
        if precision > max_precision:
            raise ParquetError(
                f"Cannot represent FIXED_LEN_BYTE_ARRAY as DECIMAL with length "
                f"{physical_type.length} and precision {precision}. "
                f"The max precision can only be {max_precision}"
            )
    elif physical_type != PhysicalType.BYTE_ARRAY:
        raise ParquetError(
            "DECIMAL can only annotate INT32, INT64, BYTE_ARRAY and FIXED_LEN_BYTE_ARRAY"
        )


def check_converted_invariants(
    physical_type: PhysicalType, converted_type: PrimitiveConverted | None
) -> None:
    """Raise ParquetError unless the converted type may annotate the physical type."""
    if converted_type is None:
        return
    if isinstance(converted_type, DecimalConverted):
        check_decimal_invariants(physical_type, converted_type.precision, converted_type.scale)
    elif converted_type in _BYTE_ARRAY_ONLY:
        if physical_type != PhysicalType.BYTE_ARRAY:
            raise ParquetError(f"{converted_type.name} can only annotate BYTE_ARRAY fields")
    elif converted_type in _INT32_ONLY:
        if physical_type != PhysicalType.INT32:
            raise ParquetError(f"{converted_type.name} can only annotate INT32")
    elif converted_type in _INT64_ONLY:
        if physical_type != PhysicalType.INT64:
            raise ParquetError(f"{converted_type.name} can only annotate INT64")
    elif converted_type is PrimitiveConvertedType.INTERVAL:
        if physical_type != PhysicalType.fixed_len_byte_array(12):
            raise ParquetError("INTERVAL can only annotate FIXED_LEN_BYTE_ARRAY(12)")
    elif converted_type is PrimitiveConvertedType.ENUM:
        if physical_type != PhysicalType.BYTE_ARRAY:
            raise ParquetError("ENUM can only annotate BYTE_ARRAY fields")


def _is_compatible(logical_type: LogicalType, physical_type: PhysicalType) -> bool:
    match logical_type:
        case EnumType() | StringType() | JsonType() | BsonType():
            return physical_type == PhysicalType.BYTE_ARRAY
        case DateType() | NullType():
            return physical_type == PhysicalType.INT32
        case TimeType(unit=TimeUnit.MILLIS):
            return physical_type == PhysicalType.INT32
        case TimestampType():
            return physical_type == PhysicalType.INT64
        case IntegerType(bit_width=bit_width):
            return (physical_type == PhysicalType.INT32 and bit_width <= 32) or (
                physical_type == PhysicalType.INT64 and bit_width == 64
            )
        case UuidType():
            return physical_type == PhysicalType.fixed_len_byte_array(16)
    return False


def check_logical_invariants(
    physical_type: PhysicalType, logical_type: LogicalType | None
) -> None:
    """Raise ParquetError unless the logical type may annotate the physical type."""
    if logical_type is None:
        return
    if isinstance(logical_type, (MapType, ListType)):
        raise ParquetError(f"{logical_type!r} cannot be applied to a primitive type")
    if isinstance(logical_type, DecimalType):
        check_decimal_invariants(physical_type, logical_type.precision, logical_type.scale)
        return
    if isinstance(logical_type, TimeType) and physical_type == PhysicalType.INT64:
        if logical_type.unit is TimeUnit.MILLIS:
            raise ParquetError("Cannot use millisecond unit on INT64 type")
        return
    if not _is_compatible(logical_type, physical_type):
        raise ParquetError(f"Cannot annotate {logical_type!r} from {physical_type} fields")