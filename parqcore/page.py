"""Data pages, compressed and uncompressed, and options for writing them."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Union

from .format import CompressionCodec, Encoding, ParquetStatistics
from .page_dict import PageDict
from .physical_type import PhysicalType
from .statistics import Statistics, deserialize_statistics


@dataclass
class DataPageHeader:
    """Header of a v1 data page."""

    num_values: int
    encoding: Encoding
    definition_level_encoding: Encoding = Encoding.RLE
    repetition_level_encoding: Encoding = Encoding.RLE
    statistics: ParquetStatistics | None = None


@dataclass
class DataPageHeaderV2:
    """Header of a v2 data page; levels are stored uncompressed before the values."""

    num_values: int
    num_nulls: int
    num_rows: int
    encoding: Encoding
    definition_levels_byte_length: int
    repetition_levels_byte_length: int
    is_compressed: bool = True
    statistics: ParquetStatistics | None = None


PageHeader = Union[DataPageHeader, DataPageHeaderV2]


def _decode_statistics(
    header: PageHeader, physical_type: PhysicalType, descriptor: Any
) -> Statistics | None:
    if header.statistics is None:
        return None
    return deserialize_statistics(header.statistics, physical_type, descriptor)


@dataclass
class CompressedPage:
    """A compressed, encoded data page."""

    header: PageHeader
    buffer: bytes
    compression: CompressionCodec
    uncompressed_page_size: int
    physical_type: PhysicalType
    dictionary_page: PageDict | None = None
    descriptor: Any = None

    @property
    def uncompressed_size(self) -> int:
        return self.uncompressed_page_size

    def compressed_size(self) -> int:
        """Size of the compressed buffer in bytes."""
        return len(self.buffer)

    def num_values(self) -> int:
        """Number of values, nulls included, in the page."""
        return self.header.num_values

    def statistics(self) -> Statistics | None:
        """Decode the page statistics, or None when the page has none."""
        return _decode_statistics(self.header, self.physical_type, self.descriptor)


@dataclass
class Page:
    """An uncompressed, encoded data page."""

    header: PageHeader
    buffer: bytes
    physical_type: PhysicalType
    dictionary_page: PageDict | None = None
    descriptor: Any = None

    def num_values(self) -> int:
        """Number of values, nulls included, in the page."""
        return self.header.num_values

    def encoding(self) -> Encoding:
        """Encoding of the page values."""
        return self.header.encoding

    def statistics(self) -> Statistics | None:
        """Decode the page statistics, or None when the page has none."""
        return _decode_statistics(self.header, self.physical_type, self.descriptor)


class Version(enum.IntEnum):
    """Version of the file format written."""

    V1 = 1
    V2 = 2


@dataclass(frozen=True)
class WriteOptions:
    """Options for writing a file."""

    write_statistics: bool
    compression: CompressionCodec
    version: Version