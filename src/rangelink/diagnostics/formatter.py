"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from .validation import ValidationResult

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

# C0 controls and DEL; rendered as escapes so link text cannot forge log lines
_CONTROL_ESCAPES: dict[int, str] = {
    **{code: f"\\x{code:02x}" for code in range(0x20)},
    0x7F: "\\x7f",
    0x09: "\\t",
    0x0A: "\\n",
    0x0D: "\\r",
}


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Centralizes formatting of Diagnostic objects into human-readable
    or machine-readable output. Supports multiple output formats and
    sanitization options.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate content to prevent information leakage
        color: Enable ANSI color codes (for terminal output)
        max_content_length: Maximum content length when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> diagnostic = ErrorTemplate.link_too_long(3500, 3000)
        >>> print(formatter.format(diagnostic))
        error[PARSE_LINK_TOO_LONG]: Link length 3500 exceeds maximum of 3000 characters
          = function: parse_link
          = help: Shorten the path or select a smaller range

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        PARSE_LINK_TOO_LONG: Link length 3500 exceeds maximum of 3000 characters
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics.

        Args:
            diagnostics: Iterable of diagnostics to format

        Returns:
            Formatted string with all diagnostics separated by blank lines
        """
        return "\n\n".join(self.format(d) for d in diagnostics)

    def format_validation_result(self, result: "ValidationResult") -> str:
        """Format a delimiter ValidationResult with one line per issue.

        Args:
            result: ValidationResult to format

        Returns:
            Formatted string with summary and details
        """
        if result.is_valid:
            return "Validation passed"

        parts = [f"Validation failed: {result.error_count} error(s)"]
        for issue in result.issues:
            message = self._maybe_sanitize(self._escape(issue.message))
            parts.append(f"  [{issue.code.name}] {issue.field}: {message}")
        return "\n".join(parts)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            error[PARSE_MALFORMED_RANGE]: Malformed range 'L5C' in link
              --> offset 8
              = function: parse_link
              = value: L5C
              = help: Expected L<line>[C<col>][-L<line>[C<col>]]
        """
        severity = diagnostic.severity if diagnostic.severity == "warning" else "error"

        if self.color:
            if severity == "error":
                severity_str = f"\033[1;31m{severity}\033[0m"  # Bold red
            else:
                severity_str = f"\033[1;33m{severity}\033[0m"  # Bold yellow
        else:
            severity_str = severity

        message = self._maybe_sanitize(self._escape(diagnostic.message))
        parts = [f"{severity_str}[{diagnostic.code.name}]: {message}"]

        if diagnostic.position is not None:
            parts.append(f"  --> offset {diagnostic.position}")

        if diagnostic.function_name:
            parts.append(f"  = function: {diagnostic.function_name}")

        for key, value in diagnostic.details:
            parts.append(f"  = {key}: {self._maybe_sanitize(self._escape(value))}")

        if diagnostic.hint:
            hint = self._maybe_sanitize(self._escape(diagnostic.hint))
            parts.append(f"  = help: {hint}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format.

        Example output:
            PARSE_EMPTY_PATH: Link has no path before the hash
        """
        message = self._maybe_sanitize(self._escape(diagnostic.message))
        return f"{diagnostic.code.name}: {message}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"code": "PARSE_EMPTY_PATH", "code_value": 3003, "category": "parse", ...}
        """
        data: dict[str, str | int | dict[str, str] | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "category": str(diagnostic.category),
            "message": self._maybe_sanitize(diagnostic.message),
            "severity": diagnostic.severity,
        }

        if diagnostic.position is not None:
            data["position"] = diagnostic.position

        if diagnostic.function_name:
            data["function_name"] = diagnostic.function_name

        if diagnostic.details:
            data["details"] = {
                key: self._maybe_sanitize(value) for key, value in diagnostic.details
            }

        if diagnostic.hint:
            data["hint"] = self._maybe_sanitize(diagnostic.hint)

        return json.dumps(data, ensure_ascii=False)

    @staticmethod
    def _escape(text: str) -> str:
        """Escape control characters for single-line log output."""
        return text.translate(_CONTROL_ESCAPES)

    def _maybe_sanitize(self, text: str) -> str:
        """Truncate text if sanitization is enabled.

        Args:
            text: Text to possibly truncate

        Returns:
            Original or truncated text
        """
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
