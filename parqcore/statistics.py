"""Typed column statistics and their plain-encoded wire form."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .format import OutOfSpecError, ParquetStatistics, Type
from .native import NativeValue, decode, encode, native_size
from .physical_type import PhysicalType

_PRIMITIVE_TYPES = frozenset({Type.INT32, Type.INT64, Type.INT96, Type.FLOAT, Type.DOUBLE})


class Statistics:
    """Statistics of a page or column chunk; each physical type has its own kind."""

    physical_type: PhysicalType
    null_count: int | None
    distinct_count: int | None


@dataclass
class BinaryStatistics(Statistics):
    """Statistics of a BYTE_ARRAY column."""

    null_count: int | None = None
    distinct_count: int | None = None
    max_value: bytes | None = None
    min_value: bytes | None = None
    descriptor: Any = None

    @property
    def physical_type(self) -> PhysicalType:  # type: ignore[override]
        return PhysicalType.BYTE_ARRAY


@dataclass
class BooleanStatistics(Statistics):
    """Statistics of a BOOLEAN column."""

    null_count: int | None = None
    distinct_count: int | None = None
    max_value: bool | None = None
    min_value: bool | None = None

    @property
    def physical_type(self) -> PhysicalType:  # type: ignore[override]
        return PhysicalType.BOOLEAN


@dataclass
class FixedLenStatistics(Statistics):
    """Statistics of a FIXED_LEN_BYTE_ARRAY column."""

    physical_type: PhysicalType
    null_count: int | None = None
    distinct_count: int | None = None
    max_value: bytes | None = None
    min_value: bytes | None = None

    def __post_init__(self) -> None:
        if self.physical_type.length is None:
            raise ValueError("FixedLenStatistics needs a FIXED_LEN_BYTE_ARRAY type")


@dataclass
class PrimitiveStatistics(Statistics):
    """Statistics of a column of fixed-size native values (ints, floats, INT96)."""

    physical_type: PhysicalType
    null_count: int | None = None
    distinct_count: int | None = None
    max_value: NativeValue | None = None
    min_value: NativeValue | None = None
    descriptor: Any = None

    def __post_init__(self) -> None:
        # raises for types without a fixed-size native representation
        native_size(self.physical_type)


def _check_plain(raw: ParquetStatistics, size: int) -> None:
    if raw.max_value is not None and len(raw.max_value) != size:
        raise OutOfSpecError("The max_value of statistics MUST be plain encoded")
    if raw.min_value is not None and len(raw.min_value) != size:
        raise OutOfSpecError("The min_value of statistics MUST be plain encoded")


def _read_boolean(raw: ParquetStatistics) -> BooleanStatistics:
    _check_plain(raw, 1)
    return BooleanStatistics(
        null_count=raw.null_count,
        distinct_count=raw.distinct_count,
        max_value=None if raw.max_value is None else raw.max_value[0] != 0,
        min_value=None if raw.min_value is None else raw.min_value[0] != 0,
    )


def _read_primitive(
    raw: ParquetStatistics, physical_type: PhysicalType, descriptor: Any
) -> PrimitiveStatistics:
    _check_plain(raw, native_size(physical_type))
    return PrimitiveStatistics(
        physical_type=physical_type,
        null_count=raw.null_count,
        distinct_count=raw.distinct_count,
        max_value=None if raw.max_value is None else decode(raw.max_value, physical_type),
        min_value=None if raw.min_value is None else decode(raw.min_value, physical_type),
        descriptor=descriptor,
    )


def _read_binary(raw: ParquetStatistics, descriptor: Any) -> BinaryStatistics:
    return BinaryStatistics(
        null_count=raw.null_count,
        distinct_count=raw.distinct_count,
        max_value=None if raw.max_value is None else bytes(raw.max_value),
        min_value=None if raw.min_value is None else bytes(raw.min_value),
        descriptor=descriptor,
    )


def _read_fixed_len(raw: ParquetStatistics, physical_type: PhysicalType) -> FixedLenStatistics:
    size = physical_type.length
    assert size is not None
    _check_plain(raw, size)
    return FixedLenStatistics(
        physical_type=physical_type,
        null_count=raw.null_count,
        distinct_count=raw.distinct_count,
        max_value=None if raw.max_value is None else bytes(raw.max_value[:size]),
        min_value=None if raw.min_value is None else bytes(raw.min_value[:size]),
    )


def deserialize_statistics(
    statistics: ParquetStatistics, physical_type: PhysicalType, descriptor: Any = None
) -> Statistics:
    """Decode raw statistics of a column of ``physical_type``.

    Raises OutOfSpecError when a min or max value is not plain encoded.
    """
    kind = physical_type.type
    if kind is Type.BOOLEAN:
        return _read_boolean(statistics)
    if kind in _PRIMITIVE_TYPES:
        return _read_primitive(statistics, physical_type, descriptor)
    if kind is Type.BYTE_ARRAY:
        return _read_binary(statistics, descriptor)
    return _read_fixed_len(statistics, physical_type)


def serialize_statistics(statistics: Statistics) -> ParquetStatistics:
    """Encode typed statistics into their raw, plain-encoded form."""
    if isinstance(statistics, BooleanStatistics):
        max_value = None if statistics.max_value is None else bytes([int(statistics.max_value)])
        min_value = None if statistics.min_value is None else bytes([int(statistics.min_value)])
    elif isinstance(statistics, PrimitiveStatistics):
        kind = statistics.physical_type
        max_value = None if statistics.max_value is None else encode(statistics.max_value, kind)
        min_value = None if statistics.min_value is None else encode(statistics.min_value, kind)
    elif isinstance(statistics, (BinaryStatistics, FixedLenStatistics)):
        max_value = statistics.max_value
        min_value = statistics.min_value
    else:
        raise TypeError(f"not a statistics object: {statistics!r}")
    return ParquetStatistics(
        null_count=statistics.null_count,
        distinct_count=statistics.distinct_count,
        max_value=max_value,
        min_value=min_value,
    )