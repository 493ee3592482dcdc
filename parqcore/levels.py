"""Helpers for the repetition and definition levels of data pages."""

from __future__ import annotations

import struct

from .format import ParquetError

_LENGTH = struct.Struct("<I")


def get_bit_width(max_level: int) -> int:
    """Number of bits needed to store levels up to ``max_level``."""
    if not -(2**15) <= max_level < 2**15:
        raise ValueError(f"level {max_level} does not fit in 16 bits")
    if max_level < 0:
        return 16
    return max_level.bit_length()


def _split_prefixed(buffer: bytes) -> tuple[bytes, bytes]:
    if len(buffer) < _LENGTH.size:
        raise ParquetError("Level buffer is too short to hold its length")
    (length,) = _LENGTH.unpack_from(buffer)
    end = _LENGTH.size + length
    if end > len(buffer):
        raise ParquetError(f"Level buffer declares {length} bytes, but fewer remain")
    return buffer[_LENGTH.size : end], buffer[end:]


def split_buffer_v1(buffer: bytes, has_rep: bool, has_def: bool) -> tuple[bytes, bytes, bytes]:
    """Split a v1 page into (repetition levels, definition levels, values).

    Each level section present is prefixed by its byte length as a little-endian u32.
    """
    rep, buffer = _split_prefixed(buffer) if has_rep else (b"", buffer)
    def_, buffer = _split_prefixed(buffer) if has_def else (b"", buffer)
    return rep, def_, buffer


def split_buffer_v2(
    buffer: bytes, rep_level_buffer_length: int, def_level_buffer_length: int
) -> tuple[bytes, bytes, bytes]:
    """Split a v2 page into (repetition levels, definition levels, values)."""
    if rep_level_buffer_length < 0 or def_level_buffer_length < 0:
        raise ParquetError("Level buffer lengths must not be negative")
    levels_end = rep_level_buffer_length + def_level_buffer_length
    if levels_end > len(buffer):
        raise ParquetError(
            f"Level buffers take {levels_end} bytes, but the page has {len(buffer)}"
        )
    return (
        buffer[:rep_level_buffer_length],
        buffer[rep_level_buffer_length:levels_end],
        buffer[levels_end:],
    )