"""Conversion between a schema tree and its flattened list of schema elements."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .converted_type import (
    converted_to_group_converted,
    converted_to_primitive_converted,
    group_converted_converted_to,
    primitive_converted_to_converted,
)
from .format import ParquetError, SchemaElement
from .parquet_type import (
    GroupType,
    ParquetType,
    PrimitiveType,
    from_converted,
    new_root,
    try_from_primitive,
)
from .physical_type import physical_type_to_type, type_to_physical_type


def to_thrift(schema: ParquetType) -> list[SchemaElement]:
    """Flatten a root schema depth-first into schema elements."""
    if not schema.is_root:
        raise ParquetError("Root schema must be Group type")
    return list(_flatten(schema))


def _flatten(node: ParquetType) -> Iterator[SchemaElement]:
    info = node.basic_info
    if isinstance(node, PrimitiveType):
        type_, type_length = physical_type_to_type(node.physical_type)
        converted, decimal = (
            primitive_converted_to_converted(node.converted_type)
            if node.converted_type is not None
            else (None, None)
        )
        yield SchemaElement(
            name=info.name,
            type=type_,
            type_length=type_length,
            repetition_type=info.repetition,
            num_children=None,
            converted_type=converted,
            precision=decimal[0] if decimal else None,
            scale=decimal[1] if decimal else None,
            field_id=info.id,
            logical_type=node.logical_type,
        )
    elif isinstance(node, GroupType):
        yield SchemaElement(
            name=info.name,
            type=None,
            type_length=None,
            # the root of a schema carries no repetition
            repetition_type=None if info.is_root else info.repetition,
            num_children=len(node.fields),
            converted_type=(
                group_converted_converted_to(node.converted_type)
                if node.converted_type is not None
                else None
            ),
            field_id=info.id,
            logical_type=node.logical_type,
        )
        for child in node.fields:
            yield from _flatten(child)
    else:
        raise TypeError(f"not a schema node: {node!r}")


def from_thrift(elements: Iterable[SchemaElement]) -> ParquetType:
    """Rebuild a schema tree from its depth-first list of elements."""
    remaining = iter(elements)
    nodes = [
        _read_node(element, remaining, is_root=index == 0)
        for index, element in enumerate(remaining)
    ]
    if len(nodes) != 1:
        raise ParquetError(f"Expected exactly one root node, but found {len(nodes)}")
    return nodes[0]


def _read_node(
    element: SchemaElement, remaining: Iterator[SchemaElement], is_root: bool
) -> ParquetType:
    # Some writers set num_children to 0 on primitive types.
    if not element.num_children:
        return _read_primitive(element)

    fields = []
    for _ in range(element.num_children):
        child = next(remaining, None)
        if child is None:
            raise ParquetError(f"Group {element.name!r} has fewer children than declared")
        fields.append(_read_node(child, remaining, is_root=False))

    if is_root:
        return new_root(element.name, fields)
    converted = (
        converted_to_group_converted(element.converted_type)
        if element.converted_type is not None
        else None
    )
    return from_converted(
        element.name, fields, element.repetition_type, converted, element.field_id
    )


def _read_primitive(element: SchemaElement) -> PrimitiveType:
    if element.repetition_type is None:
        raise ParquetError("Repetition level must be defined for a primitive type")
    if element.type is None:
        raise ParquetError("Physical type must be defined for a primitive type")
    physical_type = type_to_physical_type(element.type, element.type_length)

    converted = None
    if element.converted_type is not None:
        if element.precision is not None and element.scale is not None:
            decimal = (element.precision, element.scale)
        elif element.precision is None and element.scale is None:
            decimal = None
        else:
            raise ParquetError("When precision or scale are defined, both must be defined")
        converted = converted_to_primitive_converted(element.converted_type, decimal)

    return try_from_primitive(
        element.name,
        physical_type,
        element.repetition_type,
        converted,
        element.logical_type,
        element.field_id,
    )