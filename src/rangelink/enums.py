"""Enumerations for RangeLink type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class SelectionCoverage(StrEnum):
    """How much of its line(s) a selection covers.

    StrEnum provides automatic string conversion: str(SelectionCoverage.FULL_LINE) == "FullLine"
    """

    FULL_LINE = "FullLine"
    """Selection spans whole lines: encoded without column positions."""

    PARTIAL_LINE = "PartialLine"
    """Selection covers specific characters: encoded with column positions."""


class SelectionType(StrEnum):
    """Shape of the user's selection.

    StrEnum provides automatic string conversion: str(SelectionType.NORMAL) == "Normal"
    """

    NORMAL = "Normal"
    """Single contiguous range (the primary selection)."""

    RECTANGULAR = "Rectangular"
    """Column/block selection: same columns on consecutive lines (doubled hash)."""


class LinkType(StrEnum):
    """Kind of link produced by the encoder.

    StrEnum provides automatic string conversion: str(LinkType.REGULAR) == "Regular"
    """

    REGULAR = "Regular"
    """Link readable with the producer's delimiter configuration."""

    PORTABLE = "Portable"
    """Link embedding its own delimiters: file.ts#L10~#~L~-~C~"""


class RangeFormat(StrEnum):
    """Whether an anchor carries column positions.

    StrEnum provides automatic string conversion: str(RangeFormat.LINE_ONLY) == "LineOnly"
    """

    LINE_ONLY = "LineOnly"
    """Anchor with lines only: L10-L20"""

    WITH_POSITIONS = "WithPositions"
    """Anchor with lines and columns: L10C5-L20C10"""


class RangeNotation(StrEnum):
    """Caller preference for the anchor notation.

    StrEnum provides automatic string conversion: str(RangeNotation.AUTO) == "Auto"
    """

    AUTO = "Auto"
    """Most compact format: line-only iff every selection covers full lines."""

    ENFORCE_FULL_LINE = "EnforceFullLine"
    """Always line-only, discarding column positions."""

    ENFORCE_POSITIONS = "EnforcePositions"
    """Always with column positions, even for full-line selections."""


class DelimiterField(StrEnum):
    """Name of a configurable delimiter.

    Member order is the canonical validation order.
    """

    LINE = "line"
    POSITION = "position"
    HASH = "hash"
    RANGE = "range"


class DelimiterSource(StrEnum):
    """Where a loaded delimiter value came from."""

    DEFAULT = "default"
    """Setting missing or unset: the built-in default."""

    USER = "user"
    """Value supplied by the user and accepted."""


class OverlapKind(StrEnum):
    """How a quoted candidate overlaps links already found in the text."""

    NONE = "none"
    """No overlap."""

    PARTIAL = "partial"
    """Crosses an existing match: the candidate is skipped."""

    ENCOMPASSING = "encompassing"
    """Fully contains existing matches: they are replaced."""


__all__ = [
    "DelimiterField",
    "DelimiterSource",
    "LinkType",
    "OverlapKind",
    "RangeFormat",
    "RangeNotation",
    "SelectionCoverage",
    "SelectionType",
]
