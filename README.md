# parqcore

Building blocks for the Parquet columnar file format. It is pure Python and
has no third-party dependencies.

## What it provides

- **Format records** (`parqcore.format`): the enums of the format
  (`Repetition`, `Type`, `ConvertedType`, `Encoding`, `CompressionCodec`,
  `TimeUnit`), the logical-type annotations (`StringType`, `DecimalType`,
  `TimeType`, `TimestampType`, `IntegerType`, `UuidType`, ...), the
  `SchemaElement` and `ParquetStatistics` records, and the errors
  `ParquetError` and `OutOfSpecError`.
- **Physical types** (`parqcore.physical_type`): `PhysicalType`, with
  `PhysicalType.INT32`, `PhysicalType.BYTE_ARRAY` and the other fixed members,
  plus `PhysicalType.fixed_len_byte_array(length)`. `type_to_physical_type`
  and `physical_type_to_type` convert between a physical type and its wire
  type and length.
- **Native values** (`parqcore.native`): `encode` and `decode` plain
  little-endian INT32, INT64, INT96, FLOAT and DOUBLE values. `native_size`
  gives the byte size of one value. `compare` orders two values and treats
  NaN as equal. `int96_to_i64_ns` converts an INT96 timestamp to nanoseconds
  since the epoch.
- **Converted types** (`parqcore.converted_type`): `PrimitiveConvertedType`,
  `DecimalConverted` and `GroupConvertedType`, and the conversions to and from
  the wire `ConvertedType`. `logical_to_converted` maps a logical type to its
  converted type.
- **Type rules** (`parqcore.spec`): `check_decimal_invariants`,
  `check_converted_invariants` and `check_logical_invariants` raise
  `ParquetError` when an annotation does not fit the physical type.
- **Schema trees** (`parqcore.parquet_type`): `PrimitiveType` and `GroupType`
  nodes with a `BasicTypeInfo`. The constructors are `new_root`,
  `from_converted`, `try_from_primitive` (which validates annotations),
  `from_physical` and `try_from_group`. `ParquetType.check_contains` tells
  whether one schema is a projection of another.
- **Schema elements** (`parqcore.thrift_schema`): `to_thrift` flattens a root
  schema depth-first into `SchemaElement` records, and `from_thrift` builds
  the tree back from them.
- **Statistics** (`parqcore.statistics`): `BooleanStatistics`,
  `PrimitiveStatistics`, `BinaryStatistics` and `FixedLenStatistics`.
  `deserialize_statistics` decodes raw statistics and raises
  `OutOfSpecError` when a min or max value is not plain encoded.
  `serialize_statistics` encodes them again.
  `parqcore.reduce.reduce_statistics` merges the statistics of several pages.
  It supports BOOLEAN, INT32, INT64, FLOAT, DOUBLE and BYTE_ARRAY.
- **Pages**: `parqcore.page_dict.deserialize_page_dict` decodes an
  uncompressed, plain-encoded dictionary page into a `PrimitivePageDict`,
  `BinaryPageDict` or `FixedLenByteArrayPageDict`. `parqcore.levels` has
  `get_bit_width`, `split_buffer_v1` and `split_buffer_v2`.
  `parqcore.page` models `CompressedPage` and `Page` with their
  `DataPageHeader` / `DataPageHeaderV2` headers, and the writer settings
  `WriteOptions` and `Version`.

## Example

```python
from parqcore.format import Repetition
from parqcore.physical_type import PhysicalType
from parqcore.parquet_type import new_root, try_from_primitive
from parqcore.thrift_schema import to_thrift, from_thrift

schema = new_root("schema", [
    try_from_primitive("id", PhysicalType.INT64, Repetition.REQUIRED, None, None, None),
])

elements = to_thrift(schema)
assert from_thrift(elements) == schema
```

```python
from parqcore.levels import get_bit_width

get_bit_width(3)    # 2
get_bit_width(256)  # 9
```

## What it does not do

This package does not read or write Parquet files. It does not serialize
anything to the Thrift compact protocol, so it cannot parse file footers or
page headers from bytes. It does not compress or decompress pages, and it
does not decode the RLE / bit-packed contents of level buffers. It supplies
the types, checks and page-level pieces that such a reader or writer would
build on.

## Installation

```
pip install .
```

## Running the tests

```
pip install .[test]
pytest
```