"""Decoded dictionary pages: the distinct values a dictionary-encoded column refers to."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

from .format import OutOfSpecError, ParquetError, Type
from .native import NativeValue, decode, native_size
from .physical_type import PhysicalType

_LENGTH = struct.Struct("<I")
_PRIMITIVE_TYPES = frozenset({Type.INT32, Type.INT64, Type.INT96, Type.FLOAT, Type.DOUBLE})


class PageDict:
    """A decompressed and decoded dictionary page."""

    physical_type: PhysicalType

    def __len__(self) -> int:
        raise NotImplementedError


def _check_index(index: int, length: int) -> None:
    if not 0 <= index < length:
        raise IndexError(f"dictionary index {index} out of range for {length} values")


@dataclass
class BinaryPageDict(PageDict):
    """Dictionary of variable-length byte strings, stored contiguously with offsets."""

    values: bytes
    offsets: list[int] = field(default_factory=lambda: [0])

    @property
    def physical_type(self) -> PhysicalType:  # type: ignore[override]
        return PhysicalType.BYTE_ARRAY

    def __len__(self) -> int:
        return len(self.offsets) - 1

    def value(self, index: int) -> bytes:
        """Return the byte string at ``index``."""
        _check_index(index, len(self))
        return self.values[self.offsets[index] : self.offsets[index + 1]]


@dataclass
class FixedLenByteArrayPageDict(PageDict):
    """Dictionary of byte strings that all have the same size."""

    values: bytes
    physical_type: PhysicalType
    size: int

    def __len__(self) -> int:
        return len(self.values) // self.size if self.size else 0

    def value(self, index: int) -> bytes:
        """Return the byte string at ``index``."""
        _check_index(index, len(self))
        start = index * self.size
        return self.values[start : start + self.size]


@dataclass
class PrimitivePageDict(PageDict):
    """Dictionary of fixed-size native values."""

    values: list[NativeValue]
    physical_type: PhysicalType

    def __len__(self) -> int:
        return len(self.values)


def _read_binary(buf: bytes, num_values: int) -> BinaryPageDict:
    values = bytearray()
    offsets = [0]
    position = 0
    for _ in range(num_values):
        header_end = position + _LENGTH.size
        if header_end > len(buf):
            raise ParquetError("Dictionary page ended before all lengths were read")
        (slot_length,) = _LENGTH.unpack_from(buf, position)
        end = header_end + slot_length
        if end > len(buf):
            raise ParquetError("Dictionary page ended before all values were read")
        values += buf[header_end:end]
        offsets.append(offsets[-1] + slot_length)
        position = end
    return BinaryPageDict(bytes(values), offsets)


def _read_fixed_len(buf: bytes, physical_type: PhysicalType, num_values: int) -> FixedLenByteArrayPageDict:
    size = physical_type.length
    assert size is not None
    total = size * num_values
    if total > len(buf):
        raise ParquetError(f"Dictionary page needs {total} bytes, got {len(buf)}")
    return FixedLenByteArrayPageDict(bytes(buf[:total]), physical_type, size)


def _read_primitive(buf: bytes, physical_type: PhysicalType, num_values: int) -> PrimitivePageDict:
    size = native_size(physical_type)
    total = size * num_values
    if total > len(buf):
        raise ParquetError(f"Dictionary page needs {total} bytes, got {len(buf)}")
    values = [decode(buf[start : start + size], physical_type) for start in range(0, total, size)]
    return PrimitivePageDict(values, physical_type)


def deserialize_page_dict(
    buf: bytes, num_values: int, is_sorted: bool, physical_type: PhysicalType
) -> PageDict:
    """Decode an uncompressed, plain-encoded dictionary page of ``num_values`` values.

    Raises OutOfSpecError for BOOLEAN, which cannot be dictionary-encoded, and
    ParquetError when the buffer is too short.
    """
    kind = physical_type.type
    if kind is Type.BOOLEAN:
        raise OutOfSpecError("Boolean physical type cannot be dictionary-encoded")
    if kind in _PRIMITIVE_TYPES:
        return _read_primitive(buf, physical_type, num_values)
    if kind is Type.BYTE_ARRAY:
        return _read_binary(buf, num_values)
    return _read_fixed_len(buf, physical_type, num_values)