"""Hypothesis strategies for RangeLink property-based testing.

Strategies are organized by domain:

- delimiters: valid and invalid DelimiterConfig values
- selections: editor selections of every shape the encoder accepts
- paths: file paths that survive quoting and decoding

Usage:
    from tests.strategies import valid_delimiter_configs, input_selections
    from tests.strategies.paths import link_paths

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - valid_delimiter_configs, input_selections, link_paths
"""

from .delimiters import (
    DELIMITER_ALPHABET,
    delimiter_tokens,
    invalid_delimiter_values,
    valid_delimiter_configs,
)
from .paths import PATH_ALPHABET, link_paths
from .selections import (
    full_line_selections,
    input_selections,
    partial_line_selections,
    rectangular_selections,
)

__all__ = [
    "DELIMITER_ALPHABET",
    "PATH_ALPHABET",
    "delimiter_tokens",
    "full_line_selections",
    "input_selections",
    "invalid_delimiter_values",
    "link_paths",
    "partial_line_selections",
    "rectangular_selections",
    "valid_delimiter_configs",
]
