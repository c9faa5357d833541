"""Tests for encoder preconditions and range computation."""

from __future__ import annotations

import pytest

from rangelink.diagnostics import DiagnosticCode
from rangelink.enums import RangeFormat, RangeNotation, SelectionCoverage, SelectionType
from rangelink.model import EditorPosition, InputSelection, Selection
from rangelink.selection import (
    compute_range_spec,
    resolve_range_format,
    validate_input_selection,
)


def sel(
    start: tuple[int, int],
    end: tuple[int, int],
    coverage: SelectionCoverage = SelectionCoverage.PARTIAL_LINE,
) -> Selection:
    return Selection(EditorPosition(*start), EditorPosition(*end), coverage)


def rect(*selections: Selection) -> InputSelection:
    return InputSelection(selections, SelectionType.RECTANGULAR)


# ============================================================================
# PRECONDITIONS
# ============================================================================


class TestValidateInputSelection:
    """validate_input_selection checks in order."""

    def test_valid_normal(self) -> None:
        assert validate_input_selection(InputSelection((sel((0, 0), (0, 5)),))) is None

    def test_empty(self) -> None:
        error = validate_input_selection(InputSelection(()))

        assert error is not None
        assert error.code is DiagnosticCode.SELECTION_EMPTY

    def test_negative_coordinates(self) -> None:
        error = validate_input_selection(InputSelection((sel((0, -1), (0, 5)),)))

        assert error is not None
        assert error.code is DiagnosticCode.SELECTION_NEGATIVE_COORDINATES

    def test_backward(self) -> None:
        """End before start is rejected, not swapped."""
        error = validate_input_selection(InputSelection((sel((4, 0), (2, 0)),)))

        assert error is not None
        assert error.code is DiagnosticCode.SELECTION_BACKWARD
        assert "4:0" in error.message

    def test_zero_width(self) -> None:
        error = validate_input_selection(InputSelection((sel((3, 4), (3, 4)),)))

        assert error is not None
        assert error.code is DiagnosticCode.SELECTION_ZERO_WIDTH

    def test_zero_width_full_line_allowed(self) -> None:
        """An empty line selected as a whole is encodable."""
        selection = InputSelection((sel((3, 0), (3, 0), SelectionCoverage.FULL_LINE),))

        assert validate_input_selection(selection) is None

    def test_normal_multiple(self) -> None:
        selection = InputSelection((sel((0, 0), (0, 5)), sel((2, 0), (2, 5))))

        error = validate_input_selection(selection)

        assert error is not None
        assert error.code is DiagnosticCode.SELECTION_NORMAL_MULTIPLE

    @pytest.mark.parametrize(
        ("selection", "code"),
        [
            (
                rect(sel((1, 2), (1, 4))),
                DiagnosticCode.SELECTION_RECTANGULAR_TOO_FEW,
            ),
            (
                rect(sel((1, 2), (2, 4)), sel((2, 2), (2, 4))),
                DiagnosticCode.SELECTION_RECTANGULAR_MULTILINE,
            ),
            (
                rect(sel((1, 2), (1, 4)), sel((2, 2), (2, 5))),
                DiagnosticCode.SELECTION_RECTANGULAR_MISMATCHED_COLUMNS,
            ),
            (
                rect(sel((2, 2), (2, 4)), sel((1, 2), (1, 4))),
                DiagnosticCode.SELECTION_RECTANGULAR_UNSORTED,
            ),
            (
                rect(sel((1, 2), (1, 4)), sel((3, 2), (3, 4))),
                DiagnosticCode.SELECTION_RECTANGULAR_NON_CONTIGUOUS,
            ),
        ],
        ids=["single", "multiline", "columns", "unsorted", "gap"],
    )
    def test_rectangular_shape(self, selection: InputSelection, code: DiagnosticCode) -> None:
        error = validate_input_selection(selection)

        assert error is not None
        assert error.code is code


# ============================================================================
# RANGE FORMAT
# ============================================================================


class TestResolveRangeFormat:
    """Line-only versus with-positions."""

    full = InputSelection((sel((9, 0), (19, 0), SelectionCoverage.FULL_LINE),))
    partial = InputSelection((sel((9, 4), (19, 9)),))

    def test_auto(self) -> None:
        assert resolve_range_format(self.full) is RangeFormat.LINE_ONLY
        assert resolve_range_format(self.partial) is RangeFormat.WITH_POSITIONS

    def test_enforce_full_line(self) -> None:
        notation = RangeNotation.ENFORCE_FULL_LINE

        assert resolve_range_format(self.partial, notation) is RangeFormat.LINE_ONLY

    def test_enforce_positions(self) -> None:
        notation = RangeNotation.ENFORCE_POSITIONS

        assert resolve_range_format(self.full, notation) is RangeFormat.WITH_POSITIONS

    def test_rectangular_always_positions(self) -> None:
        selection = rect(
            sel((1, 0), (1, 4), SelectionCoverage.FULL_LINE),
            sel((2, 0), (2, 4), SelectionCoverage.FULL_LINE),
        )

        notation = RangeNotation.ENFORCE_FULL_LINE
        assert resolve_range_format(selection, notation) is RangeFormat.WITH_POSITIONS


# ============================================================================
# COMPUTED SELECTION
# ============================================================================


class TestComputeRangeSpec:
    """1-based numbers for the encoder."""

    def test_full_line(self) -> None:
        spec, errors = compute_range_spec(
            InputSelection((sel((9, 0), (19, 0), SelectionCoverage.FULL_LINE),))
        )

        assert errors == ()
        assert spec is not None
        assert (spec.start_line, spec.end_line) == (10, 20)
        assert spec.start_position is None
        assert spec.end_position is None

    def test_partial(self) -> None:
        spec, _ = compute_range_spec(InputSelection((sel((9, 4), (19, 9)),)))

        assert spec is not None
        assert (spec.start_line, spec.start_position, spec.end_line, spec.end_position) == (
            10,
            5,
            20,
            10,
        )
        assert spec.range_format is RangeFormat.WITH_POSITIONS

    def test_rectangular_end_line_from_last_range(self) -> None:
        spec, _ = compute_range_spec(
            rect(sel((1, 5), (1, 9)), sel((2, 5), (2, 9)), sel((3, 5), (3, 9)))
        )

        assert spec is not None
        assert (spec.start_line, spec.end_line) == (2, 4)
        assert (spec.start_position, spec.end_position) == (6, 10)
        assert spec.selection_type is SelectionType.RECTANGULAR

    def test_errors_returned(self) -> None:
        spec, errors = compute_range_spec(InputSelection(()))

        assert spec is None
        assert [error.code for error in errors] == [DiagnosticCode.SELECTION_EMPTY]
