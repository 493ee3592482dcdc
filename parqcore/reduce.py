"""Merging of page statistics into column-chunk statistics."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import replace
from typing import TypeVar

from .format import OutOfSpecError, ParquetError, Type
from .statistics import BinaryStatistics, BooleanStatistics, PrimitiveStatistics, Statistics

_T = TypeVar("_T")
_S = TypeVar("_S", bound=Statistics)

_REDUCIBLE_PRIMITIVES = frozenset({Type.INT32, Type.INT64, Type.FLOAT, Type.DOUBLE})


def _merge(a: _T | None, b: _T | None, pick: Callable[[_T, _T], _T]) -> _T | None:
    if a is None:
        return b
    if b is None:
        return a
    return pick(a, b)


def _ord_binary(a: bytes, b: bytes, maximum: bool) -> bytes:
    """Order by the common prefix only; on a tie the first value wins."""
    for x, y in zip(a, b):
        if x > y:
            return a if maximum else b
        if x < y:
            return b if maximum else a
    return a


def _min_bool(a: bool, b: bool) -> bool:
    return b if a and not b else a


def _max_bool(a: bool, b: bool) -> bool:
    return a if a and not b else b


def _fold(
    stats: list[_S],
    pick_min: Callable,
    pick_max: Callable,
) -> _S:
    acc = replace(stats[0])
    for new in stats[1:]:
        acc = replace(
            acc,
            min_value=_merge(acc.min_value, new.min_value, pick_min),
            max_value=_merge(acc.max_value, new.max_value, pick_max),
            null_count=_merge(acc.null_count, new.null_count, lambda x, y: x + y),
            distinct_count=None,
        )
    return acc


def reduce_statistics(stats: Iterable[Statistics | None]) -> Statistics | None:
    """Combine statistics of pages into one, skipping missing entries.

    Returns None when there is nothing to combine. Raises OutOfSpecError
    when the statistics are of different physical types.
    """
    present = [s for s in stats if s is not None]
    if not present:
        return None
    first_type = present[0].physical_type
    if any(s.physical_type != first_type for s in present[1:]):
        raise OutOfSpecError("The statistics do not have the same data_type")

    kind = first_type.type
    if kind is Type.BOOLEAN:
        return _fold(present, _min_bool, _max_bool)  # type: ignore[type-var]
    if kind in _REDUCIBLE_PRIMITIVES:
        return _fold(
            present,  # type: ignore[arg-type]
            lambda x, y: y if x > y else x,
            lambda x, y: y if x < y else x,
        )
    if kind is Type.BYTE_ARRAY:
        return _fold(
            present,  # type: ignore[arg-type]
            lambda x, y: _ord_binary(x, y, False),
            lambda x, y: _ord_binary(x, y, True),
        )
    raise ParquetError(f"Reducing statistics of {first_type} is not supported")


__all__ = [
    "reduce_statistics",
    "BinaryStatistics",
    "BooleanStatistics",
    "PrimitiveStatistics",
]