"""Diagnostic codes and data structures.

Defines error codes, categories, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization for RangeLinkError.

    Inherits from ``StrEnum`` so that ``str(category)`` and direct string
    comparisons work without accessing ``.value``; log aggregation receives
    plain strings (``"config"``, ``"parse"``, etc.).

    Categories:
        CONFIG: Invalid delimiter configuration
        SELECTION: Selection cannot be turned into a link
        PARSE: Candidate text has RangeLink shape but cannot be decoded
        PORTABLE: Embedded delimiter block of a portable link is unusable
    """

    CONFIG = "config"
    SELECTION = "selection"
    PARSE = "parse"
    PORTABLE = "portable"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Configuration errors (delimiter validation)
        2000-2999: Selection errors (normalization and encoder preconditions)
        3000-3999: Parse errors (decoding regular links)
        4000-4999: Portable link errors (embedded delimiter block)

    The x099 code of each range is the exhaustiveness guard of that
    category; it is never expected in practice.
    """

    # Configuration errors (1000-1999)
    CONFIG_DELIMITER_EMPTY = 1001
    CONFIG_DELIMITER_WHITESPACE = 1002
    CONFIG_DELIMITER_DIGITS = 1003
    CONFIG_DELIMITER_RESERVED = 1004
    CONFIG_HASH_NOT_SINGLE_CHAR = 1005
    CONFIG_DELIMITER_NOT_UNIQUE = 1006
    CONFIG_DELIMITER_SUBSTRING_CONFLICT = 1007
    CONFIG_UNKNOWN = 1099

    # Selection errors (2000-2999)
    SELECTION_EMPTY = 2001
    SELECTION_ZERO_WIDTH = 2002
    SELECTION_BACKWARD = 2003
    SELECTION_NEGATIVE_COORDINATES = 2004
    SELECTION_NORMAL_MULTIPLE = 2005
    SELECTION_RECTANGULAR_MULTILINE = 2006
    SELECTION_RECTANGULAR_MISMATCHED_COLUMNS = 2007
    SELECTION_RECTANGULAR_UNSORTED = 2008
    SELECTION_RECTANGULAR_NON_CONTIGUOUS = 2009
    SELECTION_OUT_OF_BOUNDS = 2010
    SELECTION_RECTANGULAR_TOO_FEW = 2011
    SELECTION_UNKNOWN_TYPE = 2099

    # Parse errors (3000-3999)
    PARSE_LINK_TOO_LONG = 3001
    PARSE_DELIMITERS_REQUIRED = 3002
    PARSE_EMPTY_PATH = 3003
    PARSE_URL_NOT_SUPPORTED = 3004
    PARSE_MALFORMED_RANGE = 3005
    PARSE_LINE_BELOW_MINIMUM = 3006
    PARSE_CHAR_BELOW_MINIMUM = 3007
    PARSE_LINE_BACKWARD = 3008
    PARSE_CHAR_BACKWARD_SAME_LINE = 3009

    # Portable link errors (4000-4999)
    BYOD_INVALID_FORMAT = 4001
    BYOD_HASH_INVALID = 4002
    BYOD_DELIMITER_VALIDATION = 4003
    BYOD_FORMAT_MISMATCH = 4004
    BYOD_POSITION_RECOVERY_FAILED = 4005

    @property
    def category(self) -> ErrorCategory:
        """Category derived from the code's thousand range."""
        match self.value // 1000:
            case 1:
                return ErrorCategory.CONFIG
            case 2:
                return ErrorCategory.SELECTION
            case 3:
                return ErrorCategory.PARSE
            case _:
                return ErrorCategory.PORTABLE


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        function_name: Function that produced the diagnostic
        position: Character offset in the decoded text (parse errors only)
        details: Key/value context pairs (immutable, hashable)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    function_name: str | None = None
    position: int | None = None
    details: tuple[tuple[str, str], ...] = ()
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    @property
    def category(self) -> ErrorCategory:
        """Category of this diagnostic's code."""
        return self.code.category

    def detail(self, key: str) -> str | None:
        """Look up a context value by key.

        Args:
            key: Detail name (e.g. "field", "value")

        Returns:
            The recorded value, or None if absent
        """
        for name, value in self.details:
            if name == key:
                return value
        return None

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output with
        control-character escaping (log injection prevention).

        Example output:
            error[CONFIG_DELIMITER_NOT_UNIQUE]: Delimiters must be unique (case-insensitive)
              = function: validate_uniqueness
              = help: Choose four delimiters that differ ignoring case

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
