"""Validation result for delimiter configurations.

Python 3.13+.
"""

from dataclasses import dataclass

from rangelink.enums import DelimiterField

from .codes import Diagnostic, DiagnosticCode
from .errors import DelimiterConfigError

__all__ = [
    "ValidationIssue",
    "ValidationResult",
]


# ============================================================================
# VALIDATION ISSUE
# ============================================================================


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """One failed check of one delimiter field.

    Attributes:
        field: Delimiter field the issue is reported on
        diagnostic: Structured diagnostic for the failure
    """

    field: DelimiterField
    diagnostic: Diagnostic

    @property
    def code(self) -> DiagnosticCode:
        """Diagnostic code of the issue."""
        return self.diagnostic.code

    @property
    def message(self) -> str:
        """Human-readable message."""
        return self.diagnostic.message

    def to_error(self) -> DelimiterConfigError:
        """Convert to a returnable/raisable error."""
        return DelimiterConfigError(self.diagnostic)

    def format(self) -> str:
        """Format issue as ``[CODE] field: message``."""
        return f"[{self.code.name}] {self.field}: {self.message}"


# ============================================================================
# VALIDATION RESULT
# ============================================================================


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of validating a delimiter configuration.

    Immutable result object; issues are ordered field by field, per-field
    checks first, then cross-field checks.

    Attributes:
        issues: Ordered validation issues (empty when valid)

    Example:
        >>> result = ValidationResult.valid()
        >>> result.is_valid
        True
        >>> result.error_count
        0
    """

    issues: tuple[ValidationIssue, ...]

    @property
    def is_valid(self) -> bool:
        """Check if validation passed.

        Returns:
            True if no issues were found
        """
        return len(self.issues) == 0

    @property
    def error_count(self) -> int:
        """Get number of issues.

        Returns:
            Count of issues
        """
        return len(self.issues)

    @property
    def invalid_fields(self) -> frozenset[DelimiterField]:
        """Fields with at least one issue."""
        return frozenset(issue.field for issue in self.issues)

    def codes_for(self, field: DelimiterField) -> tuple[DiagnosticCode, ...]:
        """Codes reported on a field, in report order.

        Args:
            field: Delimiter field

        Returns:
            Tuple of diagnostic codes (empty if the field is valid)
        """
        return tuple(issue.code for issue in self.issues if issue.field == field)

    def to_errors(self) -> tuple[DelimiterConfigError, ...]:
        """Convert every issue to a DelimiterConfigError."""
        return tuple(issue.to_error() for issue in self.issues)

    @staticmethod
    def valid() -> "ValidationResult":
        """Create a valid result with no issues.

        Returns:
            ValidationResult with an empty issue tuple
        """
        return ValidationResult(issues=())

    @staticmethod
    def invalid(issues: tuple[ValidationIssue, ...]) -> "ValidationResult":
        """Create an invalid result.

        Args:
            issues: Tuple of validation issues

        Returns:
            ValidationResult holding the issues
        """
        return ValidationResult(issues=issues)

    def format(self) -> str:
        """Format validation result as human-readable string.

        Returns:
            One line per issue, or a success line
        """
        if not self.issues:
            return "Validation passed: no errors"
        lines = [f"Errors ({len(self.issues)}):"]
        lines.extend(f"  {issue.format()}" for issue in self.issues)
        return "\n".join(lines)
