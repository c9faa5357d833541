"""Normalization of editor selections into an InputSelection.

Editors report a selection of whole lines including the final newline as
ending at character 0 of the following line. The normalizer classifies
coverage and moves such ends back onto the last selected line.

Python 3.13+.
"""

import logging
from collections.abc import Sequence

from rangelink.diagnostics import ErrorTemplate, SelectionError
from rangelink.enums import SelectionCoverage, SelectionType
from rangelink.model import (
    EditorPosition,
    InputSelection,
    LineLengthAccessor,
    RawSelection,
    Selection,
)

__all__ = [
    "is_rectangular_selection",
    "normalize_selection",
    "normalize_selections",
]


def is_rectangular_selection(raw_selections: Sequence[RawSelection]) -> bool:
    """Detect a column (block) selection.

    Editors do not report block mode, so it is inferred: at least two
    selections, identical start and end characters, and start lines that
    are strictly consecutive once sorted (duplicates disqualify).
    """
    if len(raw_selections) < 2:
        return False

    first = raw_selections[0]
    columns = (first.start.character, first.end.character)
    if any((s.start.character, s.end.character) != columns for s in raw_selections):
        return False

    lines = sorted(s.start.line for s in raw_selections)
    return all(current == previous + 1 for previous, current in zip(lines, lines[1:], strict=False))


def _includes_trailing_newline(raw: RawSelection) -> bool:
    return raw.end.line > raw.start.line and raw.end.character == 0


def normalize_selection(raw: RawSelection, line_length: LineLengthAccessor) -> Selection:
    """Classify coverage of one selection and strip its trailing newline.

    Coverage is FULL_LINE iff the selection starts at character 0 and
    ends at or past the end of its last line, or on the line after it at
    character 0.

    Raises:
        LookupError: If ``line_length`` cannot read the end line
        ValueError: If ``line_length`` rejects the end line
    """
    trailing_newline = _includes_trailing_newline(raw)
    end_line_length = line_length(raw.end.line)

    ends_at_line_end = raw.end.character >= end_line_length or trailing_newline
    if raw.start.character == 0 and ends_at_line_end:
        coverage = SelectionCoverage.FULL_LINE
    else:
        coverage = SelectionCoverage.PARTIAL_LINE

    end_line = raw.end.line - 1 if trailing_newline else raw.end.line
    return Selection(
        start=EditorPosition(raw.start.line, raw.start.character),
        end=EditorPosition(end_line, raw.end.character),
        coverage=coverage,
    )


def normalize_selections(
    line_length: LineLengthAccessor,
    raw_selections: Sequence[RawSelection],
    *,
    logger: logging.Logger | None = None,
) -> tuple[InputSelection | None, tuple[SelectionError, ...]]:
    """Turn editor selections into the encoder's InputSelection.

    A rectangular pattern converts every selection, sorted by line;
    otherwise only the first (primary) selection is used.

    Args:
        line_length: Accessor returning the length of a 0-based line
        raw_selections: Selections as reported by the editor
        logger: Logger receiving the out-of-bounds report (module logger
            when omitted)

    Returns:
        Tuple of (InputSelection, errors). SELECTION_EMPTY when there is no
        selection, SELECTION_OUT_OF_BOUNDS when the accessor fails because
        the document changed under the selection.

    Example:
        >>> index = LineIndex("first\\nsecond\\n")
        >>> selection, errors = normalize_selections(
        ...     index, [RawSelection(EditorPosition(0, 0), EditorPosition(1, 0))]
        ... )
        >>> selection.primary.coverage, selection.primary.end.line
        (<SelectionCoverage.FULL_LINE: 'FullLine'>, 0)
    """
    log = logger if logger is not None else logging.getLogger(__name__)

    if not raw_selections:
        return (None, (SelectionError(ErrorTemplate.selection_empty()),))

    rectangular = is_rectangular_selection(raw_selections)
    if rectangular:
        to_convert = sorted(raw_selections, key=lambda s: s.start.line)
    else:
        to_convert = [raw_selections[0]]

    selections: list[Selection] = []
    for raw in to_convert:
        try:
            selections.append(normalize_selection(raw, line_length))
        except (LookupError, ValueError) as e:
            log.error(
                "Document modified during link generation: line %d out of bounds (%s)",
                raw.end.line,
                e,
            )
            return (
                None,
                (SelectionError(ErrorTemplate.selection_out_of_bounds(raw.end.line, str(e))),),
            )

    selection_type = SelectionType.RECTANGULAR if rectangular else SelectionType.NORMAL
    return (InputSelection(tuple(selections), selection_type), ())
