"""Validation of delimiter configurations.

Python 3.13+.
"""

from rangelink.validation.delimiters import (
    are_delimiters_unique,
    have_substring_conflicts,
    validate_delimiter,
    validate_delimiters,
    validate_substring_conflicts,
    validate_uniqueness,
)

__all__ = [
    "are_delimiters_unique",
    "have_substring_conflicts",
    "validate_delimiter",
    "validate_delimiters",
    "validate_substring_conflicts",
    "validate_uniqueness",
]
