"""Parquet metadata enumerations and records shared across the package."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union


class ParquetError(Exception):
    """Raised when data or a schema does not follow the Parquet format."""


class OutOfSpecError(ParquetError):
    """Raised when encoded data violates the Parquet specification."""


class Repetition(enum.IntEnum):
    """How often a field may occur in its parent."""

    REQUIRED = 0
    OPTIONAL = 1
    REPEATED = 2


class Type(enum.IntEnum):
    """Physical types as they appear on the wire."""

    BOOLEAN = 0
    INT32 = 1
    INT64 = 2
    INT96 = 3
    FLOAT = 4
    DOUBLE = 5
    BYTE_ARRAY = 6
    FIXED_LEN_BYTE_ARRAY = 7


class ConvertedType(enum.IntEnum):
    """Legacy type annotations as they appear on the wire."""

    UTF8 = 0
    MAP = 1
    MAP_KEY_VALUE = 2
    LIST = 3
    ENUM = 4
    DECIMAL = 5
    DATE = 6
    TIME_MILLIS = 7
    TIME_MICROS = 8
    TIMESTAMP_MILLIS = 9
    TIMESTAMP_MICROS = 10
    UINT_8 = 11
    UINT_16 = 12
    UINT_32 = 13
    UINT_64 = 14
    INT_8 = 15
    INT_16 = 16
    INT_32 = 17
    INT_64 = 18
    JSON = 19
    BSON = 20
    INTERVAL = 21


class Encoding(enum.IntEnum):
    """Value encodings used by data pages."""

    PLAIN = 0
    PLAIN_DICTIONARY = 2
    RLE = 3
    BIT_PACKED = 4
    DELTA_BINARY_PACKED = 5
    DELTA_LENGTH_BYTE_ARRAY = 6
    DELTA_BYTE_ARRAY = 7
    RLE_DICTIONARY = 8
    BYTE_STREAM_SPLIT = 9


class CompressionCodec(enum.IntEnum):
    """Compression codecs a column chunk may use."""

    UNCOMPRESSED = 0
    SNAPPY = 1
    GZIP = 2
    LZO = 3
    BROTLI = 4
    LZ4 = 5
    ZSTD = 6
    LZ4_RAW = 7


class TimeUnit(enum.IntEnum):
    """Resolution of time and timestamp logical types."""

    MILLIS = 1
    MICROS = 2
    NANOS = 3


@dataclass(frozen=True)
class StringType:
    """UTF-8 encoded text."""


@dataclass(frozen=True)
class MapType:
    """A map of keys to values."""


@dataclass(frozen=True)
class ListType:
    """A list of elements."""


@dataclass(frozen=True)
class EnumType:
    """An enumeration stored as text."""


@dataclass(frozen=True)
class DecimalType:
    """A fixed-point decimal with a scale and precision."""

    scale: int
    precision: int


@dataclass(frozen=True)
class DateType:
    """Days since the Unix epoch."""


@dataclass(frozen=True)
class TimeType:
    """Time of day."""

    is_adjusted_to_utc: bool
    unit: TimeUnit


@dataclass(frozen=True)
class TimestampType:
    """An instant relative to the Unix epoch."""

    is_adjusted_to_utc: bool
    unit: TimeUnit


@dataclass(frozen=True)
class IntegerType:
    """An integer of a given width and signedness."""

    bit_width: int
    is_signed: bool


@dataclass(frozen=True)
class NullType:
    """A column that always holds null."""


@dataclass(frozen=True)
class JsonType:
    """An embedded JSON document."""


@dataclass(frozen=True)
class BsonType:
    """An embedded BSON document."""


@dataclass(frozen=True)
class UuidType:
    """A 16-byte UUID."""


LogicalType = Union[
    StringType,
    MapType,
    ListType,
    EnumType,
    DecimalType,
    DateType,
    TimeType,
    TimestampType,
    IntegerType,
    NullType,
    JsonType,
    BsonType,
    UuidType,
]


@dataclass
class SchemaElement:
    """One node of a flattened, depth-first schema."""

    name: str
    type: Type | None = None
    type_length: int | None = None
    repetition_type: Repetition | None = None
    num_children: int | None = None
    converted_type: ConvertedType | None = None
    scale: int | None = None
    precision: int | None = None
    field_id: int | None = None
    logical_type: LogicalType | None = None


@dataclass
class ParquetStatistics:
    """Raw, plain-encoded statistics of a page or column chunk."""

    max: bytes | None = None
    min: bytes | None = None
    null_count: int | None = None
    distinct_count: int | None = None
    max_value: bytes | None = None
    min_value: bytes | None = None