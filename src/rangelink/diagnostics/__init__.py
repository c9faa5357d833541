"""Diagnostic system for RangeLink errors.

Provides structured error diagnostics with codes, categories, hints and
context details. Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory
from .errors import (
    DelimiterConfigError,
    LinkParseError,
    PortableLinkError,
    RangeLinkError,
    SelectionError,
    error_from_diagnostic,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate
from .validation import ValidationIssue, ValidationResult

__all__ = [
    "DelimiterConfigError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "LinkParseError",
    "OutputFormat",
    "PortableLinkError",
    "RangeLinkError",
    "SelectionError",
    "ValidationIssue",
    "ValidationResult",
    "error_from_diagnostic",
]
