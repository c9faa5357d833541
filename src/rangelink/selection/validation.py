"""Encoder preconditions on InputSelection.

Python 3.13+.
"""

from rangelink.diagnostics import ErrorTemplate, SelectionError
from rangelink.enums import SelectionType
from rangelink.model import InputSelection, Selection

__all__ = ["validate_input_selection"]


def _format_position(selection: Selection, *, end: bool) -> str:
    position = selection.end if end else selection.start
    return f"{position.line}:{position.character}"


def _validate_rectangular(selections: tuple[Selection, ...]) -> SelectionError | None:
    if len(selections) < 2:
        return SelectionError(ErrorTemplate.rectangular_too_few(len(selections)))

    for index, selection in enumerate(selections):
        if not selection.is_single_line:
            return SelectionError(ErrorTemplate.rectangular_multiline(index))

    first = selections[0]
    for index, selection in enumerate(selections[1:], start=1):
        if (selection.start.character, selection.end.character) != (
            first.start.character,
            first.end.character,
        ):
            return SelectionError(ErrorTemplate.rectangular_mismatched_columns(index))

    for index in range(1, len(selections)):
        if selections[index].start.line < selections[index - 1].start.line:
            return SelectionError(ErrorTemplate.rectangular_unsorted(index))

    for previous, current in zip(selections, selections[1:], strict=False):
        if current.start.line != previous.start.line + 1:
            return SelectionError(
                ErrorTemplate.rectangular_non_contiguous(previous.start.line, current.start.line)
            )

    return None


def validate_input_selection(input_selection: InputSelection) -> SelectionError | None:
    """Check that an InputSelection can be encoded.

    Checks, first failure wins: no selections, unknown selection type,
    negative coordinates, backward selection, zero width, several normal
    selections, then the rectangular shape rules (at least two ranges,
    single-line ranges, shared columns, ascending and contiguous lines).

    Args:
        input_selection: Selection to check

    Returns:
        SelectionError for the first failed check, or None if encodable
    """
    selections = input_selection.selections
    if not selections:
        return SelectionError(ErrorTemplate.selection_empty())

    selection_type = input_selection.selection_type
    if selection_type not in (SelectionType.NORMAL, SelectionType.RECTANGULAR):
        return SelectionError(ErrorTemplate.selection_unknown_type(str(selection_type)))

    for index, selection in enumerate(selections):
        for position in (selection.start, selection.end):
            if position.line < 0 or position.character < 0:
                return SelectionError(
                    ErrorTemplate.selection_negative_coordinates(
                        index, position.line, position.character
                    )
                )
        if selection.is_backward:
            return SelectionError(
                ErrorTemplate.selection_backward(
                    index,
                    _format_position(selection, end=False),
                    _format_position(selection, end=True),
                )
            )

    if all(selection.is_empty for selection in selections):
        return SelectionError(ErrorTemplate.selection_zero_width())

    match selection_type:
        case SelectionType.NORMAL:
            if len(selections) != 1:
                return SelectionError(ErrorTemplate.selection_normal_multiple(len(selections)))
            return None
        case SelectionType.RECTANGULAR:
            return _validate_rectangular(selections)
        case _:
            return SelectionError(ErrorTemplate.selection_unknown_type(str(selection_type)))
