import math

import pytest

from parqcore.format import ParquetError
from parqcore.native import compare, decode, encode, int96_to_i64_ns, native_size
from parqcore.physical_type import PhysicalType

EPOCH_DAY = 2_440_588


def test_int96_epoch_is_zero():
    assert int96_to_i64_ns((0, 0, EPOCH_DAY)) == 0


def test_int96_adds_low_nanoseconds():
    assert int96_to_i64_ns((5, 0, EPOCH_DAY)) == 5


def test_int96_next_day():
    assert int96_to_i64_ns((0, 0, EPOCH_DAY + 1)) == 86_400 * 1_000_000_000


def test_int32_is_little_endian():
    assert encode(1, PhysicalType.INT32) == b"\x01\x00\x00\x00"


@pytest.mark.parametrize(
    "physical_type, value",
    [
        (PhysicalType.INT32, -7),
        (PhysicalType.INT64, 2**40),
        (PhysicalType.FLOAT, 1.5),
        (PhysicalType.DOUBLE, -0.25),
        (PhysicalType.INT96, (1, 2, 3)),
    ],
)
def test_round_trip(physical_type, value):
    raw = encode(value, physical_type)
    assert len(raw) == native_size(physical_type)
    assert decode(raw, physical_type) == value


def test_int96_size():
    assert native_size(PhysicalType.INT96) == 12


def test_decode_wrong_length():
    with pytest.raises(ParquetError):
        decode(b"\x00\x00\x00", PhysicalType.INT32)


@pytest.mark.parametrize(
    "physical_type",
    [PhysicalType.BOOLEAN, PhysicalType.BYTE_ARRAY, PhysicalType.fixed_len_byte_array(4)],
)
def test_non_native_types_rejected(physical_type):
    with pytest.raises(ParquetError):
        native_size(physical_type)


def test_encode_out_of_range():
    with pytest.raises(ParquetError):
        encode(2**31, PhysicalType.INT32)


def test_compare_integers():
    assert compare(1, 2, PhysicalType.INT64) == -1
    assert compare(2, 1, PhysicalType.INT64) == 1
    assert compare(3, 3, PhysicalType.INT64) == 0


def test_compare_nan_is_equal():
    assert compare(math.nan, 1.0, PhysicalType.DOUBLE) == 0


def test_compare_int96_uses_timestamp():
    earlier = (999, 0, EPOCH_DAY + 1)
    later = (0, 0, EPOCH_DAY + 2)
    assert compare(earlier, later, PhysicalType.INT96) == -1
    assert compare(later, earlier, PhysicalType.INT96) == 1