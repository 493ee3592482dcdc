"""Converted (legacy) type annotations for primitive and group fields."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union

from .format import (
    BsonType,
    ConvertedType,
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


class PrimitiveConvertedType(enum.Enum):
    """Converted types that annotate primitive fields, except decimals."""

    UTF8 = ConvertedType.UTF8.value
    ENUM = ConvertedType.ENUM.value
    DATE = ConvertedType.DATE.value
    TIME_MILLIS = ConvertedType.TIME_MILLIS.value
    TIME_MICROS = ConvertedType.TIME_MICROS.value
    TIMESTAMP_MILLIS = ConvertedType.TIMESTAMP_MILLIS.value
    TIMESTAMP_MICROS = ConvertedType.TIMESTAMP_MICROS.value
    UINT_8 = ConvertedType.UINT_8.value
    UINT_16 = ConvertedType.UINT_16.value
    UINT_32 = ConvertedType.UINT_32.value
    UINT_64 = ConvertedType.UINT_64.value
    INT_8 = ConvertedType.INT_8.value
    INT_16 = ConvertedType.INT_16.value
    INT_32 = ConvertedType.INT_32.value
    INT_64 = ConvertedType.INT_64.value
    JSON = ConvertedType.JSON.value
    BSON = ConvertedType.BSON.value
    INTERVAL = ConvertedType.INTERVAL.value


@dataclass(frozen=True)
class DecimalConverted:
    """A decimal annotation: total digits and digits after the point."""

    precision: int
    scale: int


PrimitiveConverted = Union[PrimitiveConvertedType, DecimalConverted]


class GroupConvertedType(enum.Enum):
    """Converted types that annotate group fields."""

    MAP = ConvertedType.MAP.value
    MAP_KEY_VALUE = ConvertedType.MAP_KEY_VALUE.value
    LIST = ConvertedType.LIST.value


def converted_to_primitive_converted(
    ty: ConvertedType, maybe_decimal: tuple[int, int] | None
) -> PrimitiveConverted:
    """Interpret a wire converted type on a primitive field."""
    if ty is ConvertedType.DECIMAL:
        if maybe_decimal is None:
            raise ParquetError("Decimal requires a precision and scale")
        precision, scale = maybe_decimal
        return DecimalConverted(precision, scale)
    try:
        return PrimitiveConvertedType[ty.name]
    except KeyError:
        raise ParquetError(
            f'Converted type "{ty.name}" cannot be applied to a primitive type'
        ) from None


def converted_to_group_converted(ty: ConvertedType) -> GroupConvertedType:
    """Interpret a wire converted type on a group field."""
    try:
        return GroupConvertedType[ty.name]
    except KeyError:
        raise ParquetError(
            f'Converted type "{ty.name}" cannot be applied to a group type'
        ) from None


def primitive_converted_to_converted(
    ty: PrimitiveConverted,
) -> tuple[ConvertedType, tuple[int, int] | None]:
    """Return the wire converted type and, for decimals, (precision, scale)."""
    if isinstance(ty, DecimalConverted):
        return ConvertedType.DECIMAL, (ty.precision, ty.scale)
    return ConvertedType[ty.name], None


def group_converted_converted_to(ty: GroupConvertedType) -> ConvertedType:
    """Return the wire converted type of a group annotation."""
    return ConvertedType[ty.name]


_TIME_UNITS = {
    TimeUnit.MILLIS: PrimitiveConvertedType.TIME_MILLIS,
    TimeUnit.MICROS: PrimitiveConvertedType.TIME_MICROS,
}

_TIMESTAMP_UNITS = {
    TimeUnit.MILLIS: PrimitiveConvertedType.TIMESTAMP_MILLIS,
    TimeUnit.MICROS: PrimitiveConvertedType.TIMESTAMP_MICROS,
}

_INTEGERS = {
    (8, True): PrimitiveConvertedType.INT_8,
    (16, True): PrimitiveConvertedType.INT_16,
    (32, True): PrimitiveConvertedType.INT_32,
    (64, True): PrimitiveConvertedType.INT_64,
    (8, False): PrimitiveConvertedType.UINT_8,
    (16, False): PrimitiveConvertedType.UINT_16,
    (32, False): PrimitiveConvertedType.UINT_32,
    (64, False): PrimitiveConvertedType.UINT_64,
}


def logical_to_converted(
    logical_type: LogicalType,
) -> PrimitiveConverted | GroupConvertedType | None:
    """Map a logical type to its converted type, or None where none exists."""
    match logical_type:
        case StringType():
            return PrimitiveConvertedType.UTF8
        case MapType():
            return GroupConvertedType.MAP
        case ListType():
            return GroupConvertedType.LIST
        case EnumType():
            return PrimitiveConvertedType.ENUM
        case DecimalType(scale=scale, precision=precision):
            return DecimalConverted(precision, scale)
        case DateType():
            return PrimitiveConvertedType.DATE
        case TimeType(unit=unit):
            return _TIME_UNITS.get(unit)
        case TimestampType(unit=unit):
            return _TIMESTAMP_UNITS.get(unit)
        case IntegerType(bit_width=bit_width, is_signed=is_signed):
            try:
                return _INTEGERS[(bit_width, is_signed)]
            except KeyError:
                raise ParquetError(
                    f"Integer type {(bit_width, is_signed)} is not supported"
                ) from None
        case JsonType():
            return PrimitiveConvertedType.JSON
        case BsonType():
            return PrimitiveConvertedType.BSON
        case NullType() | UuidType():
            return None
    raise TypeError(f"not a logical type: {logical_type!r}")