"""Tests for the RangeLinkError hierarchy and ValidationResult."""

from __future__ import annotations

import pytest

from rangelink.diagnostics import (
    DelimiterConfigError,
    Diagnostic,
    DiagnosticCode,
    ErrorCategory,
    ErrorTemplate,
    LinkParseError,
    PortableLinkError,
    RangeLinkError,
    SelectionError,
    ValidationIssue,
    ValidationResult,
    error_from_diagnostic,
)
from rangelink.enums import DelimiterField


class TestRangeLinkError:
    """Exception wrapper around a diagnostic."""

    def test_properties(self) -> None:
        error = LinkParseError(ErrorTemplate.empty_path())

        assert error.code is DiagnosticCode.PARSE_EMPTY_PATH
        assert error.category is ErrorCategory.PARSE
        assert error.message == "Link has no path before the hash"
        assert str(error) == error.message

    def test_raisable(self) -> None:
        """Callers preferring exceptions may raise returned errors."""
        with pytest.raises(RangeLinkError, match="no path"):
            raise SelectionError(ErrorTemplate.empty_path())

    def test_portable_is_parse_error(self) -> None:
        assert issubclass(PortableLinkError, LinkParseError)

    def test_equality_by_type_and_diagnostic(self) -> None:
        diagnostic = ErrorTemplate.empty_path()

        assert LinkParseError(diagnostic) == LinkParseError(diagnostic)
        assert LinkParseError(diagnostic) != PortableLinkError(diagnostic)
        assert len({LinkParseError(diagnostic), LinkParseError(diagnostic)}) == 1

    def test_repr(self) -> None:
        error = LinkParseError(ErrorTemplate.empty_path())

        assert repr(error).startswith("LinkParseError(PARSE_EMPTY_PATH:")


class TestErrorFromDiagnostic:
    @pytest.mark.parametrize(
        ("diagnostic", "error_type"),
        [
            (ErrorTemplate.delimiter_empty(""), DelimiterConfigError),
            (ErrorTemplate.selection_empty(), SelectionError),
            (ErrorTemplate.empty_path(), LinkParseError),
            (ErrorTemplate.portable_hash_invalid("##"), PortableLinkError),
        ],
    )
    def test_class_by_category(self, diagnostic: Diagnostic, error_type: type) -> None:
        assert type(error_from_diagnostic(diagnostic)) is error_type


class TestValidationResult:
    """Immutable outcome of delimiter validation."""

    def issue(self, field: DelimiterField) -> ValidationIssue:
        return ValidationIssue(field, ErrorTemplate.delimiter_empty("", str(field)))

    def test_valid(self) -> None:
        result = ValidationResult.valid()

        assert result.is_valid
        assert result.error_count == 0
        assert result.invalid_fields == frozenset()
        assert result.format() == "Validation passed: no errors"

    def test_invalid(self) -> None:
        result = ValidationResult.invalid(
            (self.issue(DelimiterField.LINE), self.issue(DelimiterField.RANGE))
        )

        assert not result.is_valid
        assert result.error_count == 2
        assert result.invalid_fields == frozenset({DelimiterField.LINE, DelimiterField.RANGE})
        assert result.codes_for(DelimiterField.LINE) == (DiagnosticCode.CONFIG_DELIMITER_EMPTY,)
        assert result.codes_for(DelimiterField.HASH) == ()

    def test_issue_format(self) -> None:
        issue = self.issue(DelimiterField.HASH)

        assert issue.format() == "[CONFIG_DELIMITER_EMPTY] hash: Delimiter 'hash' must not be empty"
        assert isinstance(issue.to_error(), DelimiterConfigError)

    def test_result_format(self) -> None:
        result = ValidationResult.invalid((self.issue(DelimiterField.LINE),))

        assert result.format().splitlines() == [
            "Errors (1):",
            "  [CONFIG_DELIMITER_EMPTY] line: Delimiter 'line' must not be empty",
        ]
