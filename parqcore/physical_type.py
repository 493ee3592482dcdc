"""Physical types, including the sized fixed-length byte array."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .format import ParquetError, Type


@dataclass(frozen=True)
class PhysicalType:
    """A physical type; fixed-length byte arrays carry their length."""

    type: Type
    length: int | None = None

    BOOLEAN: ClassVar[PhysicalType]
    INT32: ClassVar[PhysicalType]
    INT64: ClassVar[PhysicalType]
    INT96: ClassVar[PhysicalType]
    FLOAT: ClassVar[PhysicalType]
    DOUBLE: ClassVar[PhysicalType]
    BYTE_ARRAY: ClassVar[PhysicalType]

    def __post_init__(self) -> None:
        is_fixed = self.type is Type.FIXED_LEN_BYTE_ARRAY
        if is_fixed != (self.length is not None):
            raise ValueError("only FIXED_LEN_BYTE_ARRAY carries a length, and it must")

    @staticmethod
    def fixed_len_byte_array(length: int) -> PhysicalType:
        """Return the fixed-length byte array type of ``length`` bytes."""
        return PhysicalType(Type.FIXED_LEN_BYTE_ARRAY, length)

    def __str__(self) -> str:
        if self.length is None:
            return self.type.name
        return f"{self.type.name}({self.length})"


PhysicalType.BOOLEAN = PhysicalType(Type.BOOLEAN)
PhysicalType.INT32 = PhysicalType(Type.INT32)
PhysicalType.INT64 = PhysicalType(Type.INT64)
PhysicalType.INT96 = PhysicalType(Type.INT96)
PhysicalType.FLOAT = PhysicalType(Type.FLOAT)
PhysicalType.DOUBLE = PhysicalType(Type.DOUBLE)
PhysicalType.BYTE_ARRAY = PhysicalType(Type.BYTE_ARRAY)


def type_to_physical_type(type_: Type, length: int | None) -> PhysicalType:
    """Build a physical type from its wire type and optional length."""
    if type_ is Type.FIXED_LEN_BYTE_ARRAY:
        if length is None:
            raise ParquetError("Length must be defined for FixedLenByteArray")
        return PhysicalType.fixed_len_byte_array(length)
    return PhysicalType(type_)


def physical_type_to_type(physical_type: PhysicalType) -> tuple[Type, int | None]:
    """Split a physical type into its wire type and optional length."""
    return physical_type.type, physical_type.length