"""Immutable value objects shared by the RangeLink codec.

Editor-facing types use 0-based coordinates; link-facing types use the
1-based numbers written in link text.

Python 3.13+.
"""

from collections.abc import Callable
from dataclasses import dataclass

from .constants import (
    DEFAULT_DELIMITER_HASH,
    DEFAULT_DELIMITER_LINE,
    DEFAULT_DELIMITER_POSITION,
    DEFAULT_DELIMITER_RANGE,
)
from .enums import (
    DelimiterField,
    LinkType,
    RangeFormat,
    SelectionCoverage,
    SelectionType,
)

__all__ = [
    "DEFAULT_DELIMITERS",
    "ComputedSelection",
    "DelimiterConfig",
    "DetectedLink",
    "EditorPosition",
    "FormattedLink",
    "InputSelection",
    "LineLengthAccessor",
    "LinkPosition",
    "ParsedLink",
    "RawSelection",
    "Selection",
]

type LineLengthAccessor = Callable[[int], int]
"""Returns the length of a 0-based line; raises LookupError if it is gone."""


# ============================================================================
# DELIMITERS
# ============================================================================


@dataclass(frozen=True, slots=True)
class DelimiterConfig:
    """The four configurable link tokens.

    Created once per configuration load and never mutated. Validity is
    checked by ``rangelink.validation.validate_delimiters``, not here, so
    that invalid user settings can still be represented and reported.

    Attributes:
        line: Line prefix (default "L")
        position: Column prefix (default "C")
        hash: Separator between path and range, doubled for rectangular links
        range: Separator between range start and end (default "-")
    """

    line: str = DEFAULT_DELIMITER_LINE
    position: str = DEFAULT_DELIMITER_POSITION
    hash: str = DEFAULT_DELIMITER_HASH
    range: str = DEFAULT_DELIMITER_RANGE

    def get(self, field: DelimiterField) -> str:
        """Value of a delimiter field."""
        match field:
            case DelimiterField.LINE:
                return self.line
            case DelimiterField.POSITION:
                return self.position
            case DelimiterField.HASH:
                return self.hash
            case DelimiterField.RANGE:
                return self.range

    def values(self) -> tuple[str, str, str, str]:
        """Delimiter values in field order (line, position, hash, range)."""
        return (self.line, self.position, self.hash, self.range)

    def as_dict(self) -> dict[str, str]:
        """Delimiters keyed by field name."""
        return {str(field): self.get(field) for field in DelimiterField}


DEFAULT_DELIMITERS = DelimiterConfig()


# ============================================================================
# POSITIONS AND SELECTIONS
# ============================================================================


@dataclass(frozen=True, slots=True, order=True)
class EditorPosition:
    """0-based editor coordinates. Ordered by (line, character)."""

    line: int
    character: int


@dataclass(frozen=True, slots=True)
class LinkPosition:
    """1-based link coordinates.

    ``character`` is None when the link names a whole line.
    """

    line: int
    character: int | None = None


@dataclass(frozen=True, slots=True)
class RawSelection:
    """Selection as reported by the editor, before coverage is known."""

    start: EditorPosition
    end: EditorPosition


@dataclass(frozen=True, slots=True)
class Selection:
    """A normalized selection range with its coverage.

    Attributes:
        start: Start position (0-based)
        end: End position (0-based); trailing newline already removed
        coverage: Whether whole lines are covered
    """

    start: EditorPosition
    end: EditorPosition
    coverage: SelectionCoverage = SelectionCoverage.PARTIAL_LINE

    @property
    def is_single_line(self) -> bool:
        """Start and end on the same line."""
        return self.start.line == self.end.line

    @property
    def is_empty(self) -> bool:
        """Partial-line selection of zero width.

        A full-line selection always spans its line, even when the editor
        reported equal start and end (an empty line).
        """
        return self.coverage is SelectionCoverage.PARTIAL_LINE and self.start == self.end

    @property
    def is_backward(self) -> bool:
        """End precedes start."""
        return self.end < self.start


@dataclass(frozen=True, slots=True)
class InputSelection:
    """Selections handed to the encoder.

    Attributes:
        selections: One selection for NORMAL, one per line for RECTANGULAR
        selection_type: Shape of the selection
    """

    selections: tuple[Selection, ...]
    selection_type: SelectionType = SelectionType.NORMAL

    @property
    def primary(self) -> Selection:
        """First selection (raises IndexError when there is none)."""
        return self.selections[0]

    def is_equivalent(self, other: "InputSelection") -> bool:
        """Check that two selections name the same text region.

        Rectangular selections compare lines and characters and ignore
        coverage. Normal selections compare lines and coverage; characters
        are compared only for partial-line coverage, where they are
        encoded.
        """
        if self.selection_type != other.selection_type:
            return False
        if len(self.selections) != len(other.selections):
            return False
        for mine, theirs in zip(self.selections, other.selections, strict=True):
            if mine.start.line != theirs.start.line or mine.end.line != theirs.end.line:
                return False
            if self.selection_type is SelectionType.RECTANGULAR:
                if (mine.start.character, mine.end.character) != (
                    theirs.start.character,
                    theirs.end.character,
                ):
                    return False
                continue
            if mine.coverage != theirs.coverage:
                return False
            if mine.coverage is SelectionCoverage.PARTIAL_LINE and (
                mine.start.character,
                mine.end.character,
            ) != (theirs.start.character, theirs.end.character):
                return False
        return True


# ============================================================================
# ENCODER OUTPUT
# ============================================================================


@dataclass(frozen=True, slots=True)
class ComputedSelection:
    """1-based numbers the encoder renders.

    ``start_position``/``end_position`` are None for line-only links.
    """

    start_line: int
    end_line: int
    start_position: int | None
    end_position: int | None
    range_format: RangeFormat
    selection_type: SelectionType = SelectionType.NORMAL


@dataclass(frozen=True, slots=True)
class FormattedLink:
    """Result of encoding a selection.

    Attributes:
        link: Link text ready to paste (single-quoted when the path is unsafe)
        raw_link: Unquoted link text
        link_type: Regular or portable
        delimiters: Delimiters the link was written with
        computed_selection: Numbers rendered into the anchor
    """

    link: str
    raw_link: str
    link_type: LinkType
    delimiters: DelimiterConfig
    computed_selection: ComputedSelection

    @property
    def selection_type(self) -> SelectionType:
        return self.computed_selection.selection_type

    @property
    def range_format(self) -> RangeFormat:
        return self.computed_selection.range_format

    def __str__(self) -> str:
        return self.link


# ============================================================================
# DECODER OUTPUT
# ============================================================================


@dataclass(frozen=True, slots=True)
class ParsedLink:
    """Result of decoding a link.

    Coordinates are the 1-based numbers read from the link text; ``end``
    equals ``start`` when the link names a single position or line.

    Attributes:
        path: File path before the hash
        start: Range start
        end: Range end
        link_type: Regular or portable
        selection_type: Normal or rectangular (doubled hash)
        delimiters: Delimiters the link was read with (embedded ones for
            portable links)
    """

    path: str
    start: LinkPosition
    end: LinkPosition
    link_type: LinkType
    selection_type: SelectionType
    delimiters: DelimiterConfig

    @property
    def reference_path(self) -> str:
        """Path as written in the link."""
        return self.path

    @property
    def quoted_path(self) -> str:
        """Path single-quoted when it has characters unsafe for shells."""
        from .syntax.quoting import quote_path  # noqa: PLC0415 - circular

        return quote_path(self.path)

    @property
    def source_delimiters(self) -> DelimiterConfig:
        """Delimiters the link was read with."""
        return self.delimiters

    @property
    def is_line_only(self) -> bool:
        """Neither end carries a column."""
        return self.start.character is None and self.end.character is None

    def to_input_selection(
        self, line_length: LineLengthAccessor | None = None
    ) -> InputSelection:
        """Reconstruct the 0-based selection the link was made from.

        Line-only links become full-line selections whose end character is
        the length of the last line (from ``line_length``) or 0 when no
        accessor is given. Rectangular links become one selection per line.

        Args:
            line_length: Optional accessor for 0-based line lengths

        Returns:
            Equivalent InputSelection
        """
        start_line = self.start.line - 1
        end_line = self.end.line - 1

        def line_end(line: int) -> int:
            return line_length(line) if line_length is not None else 0

        start_char = 0 if self.start.character is None else self.start.character - 1
        if self.selection_type is SelectionType.RECTANGULAR:
            selections = tuple(
                Selection(
                    EditorPosition(line, start_char),
                    EditorPosition(
                        line,
                        line_end(line) if self.end.character is None else self.end.character - 1,
                    ),
                    SelectionCoverage.PARTIAL_LINE,
                )
                for line in range(start_line, end_line + 1)
            )
            return InputSelection(selections, SelectionType.RECTANGULAR)

        if self.is_line_only:
            selection = Selection(
                EditorPosition(start_line, 0),
                EditorPosition(end_line, line_end(end_line)),
                SelectionCoverage.FULL_LINE,
            )
        else:
            end_char = (
                line_end(end_line) if self.end.character is None else self.end.character - 1
            )
            selection = Selection(
                EditorPosition(start_line, start_char),
                EditorPosition(end_line, end_char),
                SelectionCoverage.PARTIAL_LINE,
            )
        return InputSelection((selection,), SelectionType.NORMAL)


@dataclass(frozen=True, slots=True)
class DetectedLink:
    """A RangeLink found in free text.

    Attributes:
        link_text: Link text (without surrounding quotes)
        start_index: Offset of the match (opening quote for quoted links)
        length: Length of the match, quotes included
        parsed: Decoded link
    """

    link_text: str
    start_index: int
    length: int
    parsed: ParsedLink

    @property
    def end_index(self) -> int:
        """Offset just past the match."""
        return self.start_index + self.length
