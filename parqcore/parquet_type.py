"""Schema tree of primitive leaves and nested groups."""

from __future__ import annotations

from dataclasses import dataclass, field

from .converted_type import GroupConvertedType, PrimitiveConverted
from .format import LogicalType, Repetition
from .physical_type import PhysicalType
from .spec import check_converted_invariants, check_logical_invariants


@dataclass(frozen=True)
class BasicTypeInfo:
    """Information common to every schema node."""

    name: str
    repetition: Repetition
    id: int | None = None
    is_root: bool = False


class ParquetType:
    """A node of a schema: a primitive leaf or a group of fields."""

    basic_info: BasicTypeInfo

    @property
    def name(self) -> str:
        return self.basic_info.name

    @property
    def is_root(self) -> bool:
        return self.basic_info.is_root

    def check_contains(self, sub_type: ParquetType) -> bool:
        """Whether ``sub_type`` is a projection of this schema."""
        basic_match = self.name == sub_type.name and (
            (self.is_root and sub_type.is_root)
            or (
                not self.is_root
                and not sub_type.is_root
                and self.basic_info.repetition == sub_type.basic_info.repetition
            )
        )
        if isinstance(self, PrimitiveType) and isinstance(sub_type, PrimitiveType):
            return basic_match and self.physical_type == sub_type.physical_type
        if isinstance(self, GroupType) and isinstance(sub_type, GroupType):
            by_name = {f.name: f for f in self.fields}
            return all(
                f.name in by_name and by_name[f.name].check_contains(f)
                for f in sub_type.fields
            )
        return False


@dataclass
class PrimitiveType(ParquetType):
    """A leaf field holding values of one physical type."""

    basic_info: BasicTypeInfo
    physical_type: PhysicalType
    converted_type: PrimitiveConverted | None = None
    logical_type: LogicalType | None = None


@dataclass
class GroupType(ParquetType):
    """A nested field made of other fields; the schema root is one too."""

    basic_info: BasicTypeInfo
    fields: list[ParquetType] = field(default_factory=list)
    converted_type: GroupConvertedType | None = None
    logical_type: LogicalType | None = None


def new_root(name: str, fields: list[ParquetType]) -> GroupType:
    """Build the root group of a schema."""
    return GroupType(BasicTypeInfo(name, Repetition.OPTIONAL, None, True), list(fields))


def from_converted(
    name: str,
    fields: list[ParquetType],
    repetition: Repetition | None = None,
    converted_type: GroupConvertedType | None = None,
    id: int | None = None,
) -> GroupType:
    """Build a group; a missing repetition means OPTIONAL."""
    if repetition is None:
        repetition = Repetition.OPTIONAL
    return GroupType(
        BasicTypeInfo(name, repetition, id, False), list(fields), converted_type, None
    )


def try_from_primitive(
    name: str,
    physical_type: PhysicalType,
    repetition: Repetition,
    converted_type: PrimitiveConverted | None = None,
    logical_type: LogicalType | None = None,
    id: int | None = None,
) -> PrimitiveType:
    """Build a primitive field, raising ParquetError on incompatible annotations."""
    check_converted_invariants(physical_type, converted_type)
    check_logical_invariants(physical_type, logical_type)
    return PrimitiveType(
        BasicTypeInfo(name, repetition, id, False), physical_type, converted_type, logical_type
    )


def from_physical(name: str, physical_type: PhysicalType) -> PrimitiveType:
    """Build an optional, unannotated primitive field."""
    return PrimitiveType(BasicTypeInfo(name, Repetition.OPTIONAL, None, False), physical_type)


def try_from_group(
    name: str,
    repetition: Repetition,
    converted_type: GroupConvertedType | None,
    logical_type: LogicalType | None,
    fields: list[ParquetType],
    id: int | None = None,
) -> GroupType:
    """Build a non-root group field."""
    return GroupType(
        BasicTypeInfo(name, repetition, id, False), list(fields), converted_type, logical_type
    )