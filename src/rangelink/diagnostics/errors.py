"""RangeLink exception hierarchy with structured diagnostics.

Errors are returned in ``(value, errors)`` tuples by every public operation;
they subclass Exception so that callers preferring exceptions can simply
``raise errors[0]``.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory

__all__ = [
    "DelimiterConfigError",
    "LinkParseError",
    "PortableLinkError",
    "RangeLinkError",
    "SelectionError",
    "error_from_diagnostic",
]


class RangeLinkError(Exception):
    """Base exception for all RangeLink errors.

    Attributes:
        diagnostic: Structured diagnostic information
    """

    def __init__(self, diagnostic: Diagnostic) -> None:
        """Initialize RangeLinkError.

        Args:
            diagnostic: Diagnostic describing the failure
        """
        self.diagnostic = diagnostic
        super().__init__(diagnostic.message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.code.name}: {self.diagnostic.message!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RangeLinkError):
            return NotImplemented
        return type(self) is type(other) and self.diagnostic == other.diagnostic

    def __hash__(self) -> int:
        return hash((type(self), self.diagnostic))

    @property
    def code(self) -> DiagnosticCode:
        """Diagnostic code of this error."""
        return self.diagnostic.code

    @property
    def category(self) -> ErrorCategory:
        """Error category (config, selection, parse, portable)."""
        return self.diagnostic.category

    @property
    def message(self) -> str:
        """Human-readable message."""
        return self.diagnostic.message


class DelimiterConfigError(RangeLinkError):
    """Delimiter configuration is unusable.

    Produced by the delimiter validator and by the configuration loader.
    """


class SelectionError(RangeLinkError):
    """Selection cannot be turned into a link.

    Produced by the selection normalizer and the encoder's preconditions.
    """


class LinkParseError(RangeLinkError):
    """Text looks like a RangeLink but cannot be decoded."""


class PortableLinkError(LinkParseError):
    """Embedded delimiter block of a portable link is unusable."""


def error_from_diagnostic(diagnostic: Diagnostic) -> RangeLinkError:
    """Wrap a diagnostic in the exception class of its category.

    Args:
        diagnostic: Diagnostic produced by ErrorTemplate

    Returns:
        Exception instance matching the diagnostic's category
    """
    match diagnostic.category:
        case ErrorCategory.CONFIG:
            return DelimiterConfigError(diagnostic)
        case ErrorCategory.SELECTION:
            return SelectionError(diagnostic)
        case ErrorCategory.PARSE:
            return LinkParseError(diagnostic)
        case ErrorCategory.PORTABLE:
            return PortableLinkError(diagnostic)
        case _:
            return RangeLinkError(diagnostic)
