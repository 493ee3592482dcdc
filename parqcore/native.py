"""Little-endian plain encoding of fixed-size native values."""

from __future__ import annotations

import struct
from typing import Union

from .format import ParquetError, Type
from .physical_type import PhysicalType

NativeValue = Union[int, float, tuple[int, int, int]]

_JULIAN_DAY_OF_EPOCH = 2_440_588
_SECONDS_PER_DAY = 86_400
_NANOS_PER_SECOND = 1_000_000_000

_STRUCTS = {
    Type.INT32: struct.Struct("<i"),
    Type.INT64: struct.Struct("<q"),
    Type.INT96: struct.Struct("<3I"),
    Type.FLOAT: struct.Struct("<f"),
    Type.DOUBLE: struct.Struct("<d"),
}


def int96_to_i64_ns(value: tuple[int, int, int]) -> int:
    """Convert an INT96 timestamp (nanos low, nanos high, Julian day) to ns since the epoch."""
    low, high, day = value
    nanoseconds = (high << 32) + low
    seconds = (day - _JULIAN_DAY_OF_EPOCH) * _SECONDS_PER_DAY
    return seconds * _NANOS_PER_SECOND + nanoseconds


def _struct_for(physical_type: PhysicalType) -> struct.Struct:
    if physical_type.length is None and physical_type.type in _STRUCTS:
        return _STRUCTS[physical_type.type]
    raise ParquetError(f"{physical_type} has no fixed-size native representation")


def native_size(physical_type: PhysicalType) -> int:
    """Number of bytes one plain-encoded value of this type takes."""
    return _struct_for(physical_type).size


def encode(value: NativeValue, physical_type: PhysicalType) -> bytes:
    """Plain-encode a native value as little-endian bytes."""
    packer = _struct_for(physical_type)
    try:
        if physical_type.type is Type.INT96:
            return packer.pack(*value)  # type: ignore[misc]
        return packer.pack(value)
    except struct.error as exc:
        raise ParquetError(f"cannot encode {value!r} as {physical_type}: {exc}") from exc


def decode(chunk: bytes, physical_type: PhysicalType) -> NativeValue:
    """Decode one plain-encoded little-endian value."""
    unpacker = _struct_for(physical_type)
    if len(chunk) != unpacker.size:
        raise ParquetError(
            f"{physical_type} needs {unpacker.size} bytes, got {len(chunk)}"
        )
    values = unpacker.unpack(chunk)
    if physical_type.type is Type.INT96:
        return values
    return values[0]


def compare(a: NativeValue, b: NativeValue, physical_type: PhysicalType) -> int:
    """Order two values: -1, 0 or 1. Unordered floats (NaN) compare equal."""
    _struct_for(physical_type)
    if physical_type.type is Type.INT96:
        a = int96_to_i64_ns(a)  # type: ignore[arg-type]
        b = int96_to_i64_ns(b)  # type: ignore[arg-type]
    if a < b:  # type: ignore[operator]
        return -1
    if a > b:  # type: ignore[operator]
        return 1
    return 0