"""Selection normalization, validation and range computation.

Python 3.13+.
"""

from rangelink.selection.line_index import LineIndex
from rangelink.selection.normalizer import (
    is_rectangular_selection,
    normalize_selection,
    normalize_selections,
)
from rangelink.selection.range_spec import compute_range_spec, resolve_range_format
from rangelink.selection.validation import validate_input_selection

__all__ = [
    "LineIndex",
    "compute_range_spec",
    "is_rectangular_selection",
    "normalize_selection",
    "normalize_selections",
    "resolve_range_format",
    "validate_input_selection",
]
