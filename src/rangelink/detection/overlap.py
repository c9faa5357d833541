"""Overlap classification between a candidate span and found links.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from rangelink.enums import OverlapKind

__all__ = ["OccupiedRange", "OverlapClassification", "classify_overlap"]


@dataclass(frozen=True, slots=True)
class OccupiedRange:
    """Half-open span ``[start, end)`` of text already claimed by a link."""

    start: int
    end: int


@dataclass(frozen=True, slots=True)
class OverlapClassification:
    """Result of classify_overlap.

    Attributes:
        kind: NONE, PARTIAL or ENCOMPASSING
        encompassed_indices: Indices of the fully contained ranges, in
            ascending order (ENCOMPASSING only)
    """

    kind: OverlapKind
    encompassed_indices: tuple[int, ...] = ()


_NONE = OverlapClassification(OverlapKind.NONE)
_PARTIAL = OverlapClassification(OverlapKind.PARTIAL)


def classify_overlap(
    start: int, end: int, occupied: Sequence[OccupiedRange]
) -> OverlapClassification:
    """Classify how ``[start, end)`` overlaps the occupied ranges.

    Any range that overlaps without being fully contained makes the
    result PARTIAL. Otherwise every overlapped range is contained and the
    result is ENCOMPASSING (or NONE when nothing overlaps).

    Example:
        >>> classify_overlap(0, 10, [OccupiedRange(2, 5)]).kind
        <OverlapKind.ENCOMPASSING: 'encompassing'>
        >>> classify_overlap(3, 10, [OccupiedRange(2, 5)]).kind
        <OverlapKind.PARTIAL: 'partial'>
    """
    encompassed: list[int] = []
    for index, occupied_range in enumerate(occupied):
        if start < occupied_range.end and end > occupied_range.start:
            if start <= occupied_range.start and end >= occupied_range.end:
                encompassed.append(index)
            else:
                return _PARTIAL

    if encompassed:
        return OverlapClassification(OverlapKind.ENCOMPASSING, tuple(encompassed))
    return _NONE
