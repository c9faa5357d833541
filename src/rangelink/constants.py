"""Shared constants for RangeLink.

This module provides centralized configuration constants used across the
validation, selection, and syntax packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Default delimiters: Fallback values for every configurable token
- Reserved characters: Characters no delimiter may contain
- Input limits: DoS prevention via size constraints
- Portable links: Separator of the self-describing delimiter block

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Default delimiters
    "DEFAULT_DELIMITER_LINE",
    "DEFAULT_DELIMITER_POSITION",
    "DEFAULT_DELIMITER_HASH",
    "DEFAULT_DELIMITER_RANGE",
    # Reserved characters
    "RESERVED_CHARS",
    "ASCII_DIGITS",
    # Input limits
    "MAX_LINK_LENGTH",
    # Portable links
    "PORTABLE_METADATA_SEPARATOR",
    "PORTABLE_FIELD_COUNT",
    "PORTABLE_LEGACY_FIELD_COUNT",
    # Quoting
    "SAFE_PATH_CHARS",
    "WEB_URL_SCHEMES",
]

# ============================================================================
# DEFAULT DELIMITERS
# ============================================================================

DEFAULT_DELIMITER_LINE: str = "L"
DEFAULT_DELIMITER_POSITION: str = "C"
DEFAULT_DELIMITER_HASH: str = "#"
DEFAULT_DELIMITER_RANGE: str = "-"

# ============================================================================
# RESERVED CHARACTERS
# ============================================================================
#
# Path separators, drive/scheme markers and the portable block separator.
# A delimiter containing any of these could be mistaken for path text or
# would break the portable block split.
#
# ============================================================================

RESERVED_CHARS: tuple[str, ...] = ("~", "|", "/", "\\", ":", ",", "@")

# ASCII digits only. str.isdigit() returns True for Unicode digits such as
# "²" which int() rejects; coordinates are plain ASCII decimals.
ASCII_DIGITS: str = "0123456789"

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum length of a candidate link accepted by the decoder.
# Long absolute paths (~2700 chars) plus a generous anchor fit comfortably.
MAX_LINK_LENGTH: int = 3000

# ============================================================================
# PORTABLE LINKS
# ============================================================================

# Portable block: ~<hash>~<line>~<range>~<position>~
# "~" is a reserved character, so it never occurs inside a delimiter.
PORTABLE_METADATA_SEPARATOR: str = "~"

# Fields in the canonical block (hash, line, range, position).
PORTABLE_FIELD_COUNT: int = 4

# Fields in the line-only block written by older producers (no position).
PORTABLE_LEGACY_FIELD_COUNT: int = 3

# ============================================================================
# QUOTING
# ============================================================================

# Paths made only of these characters never need quoting.
SAFE_PATH_CHARS: frozenset[str] = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_.-/:"
)

# Web URL schemes the decoder refuses to treat as file paths.
WEB_URL_SCHEMES: tuple[str, ...] = ("http://", "https://", "ftp://")
