"""Delimiter configuration validation.

Guarantees that the four configurable tokens can never be confused with
each other or with path and line-number text.

Architecture:
    - validate_delimiter(): Per-field checks (empty, hash length, digits,
      whitespace, reserved characters), first failure wins
    - _uniqueness_issues(): Cross-field pass 1 - case-insensitive equality
    - _substring_issues(): Cross-field pass 2 - case-insensitive containment
    - validate_delimiters(): Main entry point, orchestrates the passes

Python 3.13+.
"""

import logging
from collections.abc import Sequence

from rangelink.constants import RESERVED_CHARS
from rangelink.diagnostics import (
    DelimiterConfigError,
    ErrorTemplate,
    ValidationIssue,
    ValidationResult,
)
from rangelink.enums import DelimiterField
from rangelink.model import DelimiterConfig

__all__ = [
    "are_delimiters_unique",
    "have_substring_conflicts",
    "validate_delimiter",
    "validate_delimiters",
    "validate_substring_conflicts",
    "validate_uniqueness",
]

logger = logging.getLogger(__name__)

_ALL_FIELDS: tuple[DelimiterField, ...] = tuple(DelimiterField)


def validate_delimiter(
    value: str,
    *,
    is_hash: bool = False,
    field: DelimiterField | None = None,
) -> DelimiterConfigError | None:
    """Validate a single delimiter value.

    Checks run in a fixed order and the first failure is returned:
    empty, hash not a single character (hash only), digits, whitespace,
    reserved character.

    Args:
        value: Delimiter text
        is_hash: Apply the single-character rule of the hash delimiter
        field: Field name recorded in the diagnostic

    Returns:
        DelimiterConfigError for the first failed check, or None if valid
    """
    name = None if field is None else str(field)

    if not value or not value.strip():
        return DelimiterConfigError(ErrorTemplate.delimiter_empty(value, name))

    if is_hash and len(value) != 1:
        return DelimiterConfigError(ErrorTemplate.hash_not_single_char(value))

    if any(ch.isdigit() for ch in value):
        return DelimiterConfigError(ErrorTemplate.delimiter_digits(value, name))

    if any(ch.isspace() for ch in value):
        return DelimiterConfigError(ErrorTemplate.delimiter_whitespace(value, name))

    for ch in RESERVED_CHARS:
        if ch in value:
            return DelimiterConfigError(ErrorTemplate.delimiter_reserved(value, ch, name))

    return None


def _uniqueness_issues(
    config: DelimiterConfig, fields: Sequence[DelimiterField]
) -> list[ValidationIssue]:
    """Report the later field of every case-insensitively equal pair."""
    issues: list[ValidationIssue] = []
    for j, later in enumerate(fields):
        later_value = config.get(later).lower()
        for earlier in fields[:j]:
            if config.get(earlier).lower() == later_value:
                diagnostic = ErrorTemplate.delimiter_not_unique(
                    str(later), config.get(later), str(earlier)
                )
                issues.append(ValidationIssue(later, diagnostic))
                break
    return issues


def _substring_issues(
    config: DelimiterConfig,
    fields: Sequence[DelimiterField],
    *,
    skip_equal: bool = False,
) -> list[ValidationIssue]:
    """Report every field that contains another one.

    Equal values contain each other, so both fields are reported unless
    ``skip_equal`` is set (pairs already reported as not unique).
    """
    issues: list[ValidationIssue] = []
    for outer in fields:
        outer_value = config.get(outer).lower()
        for inner in fields:
            if inner is outer:
                continue
            inner_value = config.get(inner).lower()
            if not outer_value or not inner_value:
                continue
            if skip_equal and outer_value == inner_value:
                continue
            if inner_value in outer_value:
                diagnostic = ErrorTemplate.delimiter_substring_conflict(
                    str(outer), config.get(outer), str(inner), config.get(inner)
                )
                issues.append(ValidationIssue(outer, diagnostic))
    return issues


def validate_uniqueness(config: DelimiterConfig) -> tuple[ValidationIssue, ...]:
    """Check that the four delimiters differ ignoring case.

    Args:
        config: Delimiter configuration

    Returns:
        One issue per colliding later field (empty if unique)
    """
    return tuple(_uniqueness_issues(config, _ALL_FIELDS))


def validate_substring_conflicts(config: DelimiterConfig) -> tuple[ValidationIssue, ...]:
    """Check that no delimiter contains another ignoring case.

    Args:
        config: Delimiter configuration

    Returns:
        One issue per (containing, contained) pair (empty if none)
    """
    return tuple(_substring_issues(config, _ALL_FIELDS))


def are_delimiters_unique(config: DelimiterConfig) -> bool:
    """Boolean form of validate_uniqueness."""
    return not validate_uniqueness(config)


def have_substring_conflicts(config: DelimiterConfig) -> bool:
    """Boolean form of validate_substring_conflicts."""
    return bool(validate_substring_conflicts(config))


def validate_delimiters(config: DelimiterConfig) -> ValidationResult:
    """Validate a complete delimiter configuration.

    Never raises. Per-field checks run for line, position, hash and range
    in that order; the cross-field passes (uniqueness, then substring
    conflicts) compare only the values that passed their own checks.

    Args:
        config: Delimiter configuration

    Returns:
        ValidationResult with ordered issues

    Example:
        >>> result = validate_delimiters(DelimiterConfig(line="L", position="l"))
        >>> [(issue.field, issue.code.name) for issue in result.issues]
        [(<DelimiterField.POSITION: 'position'>, 'CONFIG_DELIMITER_NOT_UNIQUE')]
    """
    issues: list[ValidationIssue] = []
    passed: list[DelimiterField] = []

    for field in _ALL_FIELDS:
        match field:
            case DelimiterField.HASH:
                error = validate_delimiter(config.get(field), is_hash=True, field=field)
            case DelimiterField.LINE | DelimiterField.POSITION | DelimiterField.RANGE:
                error = validate_delimiter(config.get(field), field=field)
            case _:
                issues.append(
                    ValidationIssue(field, ErrorTemplate.config_unknown(f"field {field!r}"))
                )
                continue
        if error is None:
            passed.append(field)
        else:
            issues.append(ValidationIssue(field, error.diagnostic))

    issues.extend(_uniqueness_issues(config, passed))
    issues.extend(_substring_issues(config, passed, skip_equal=True))

    if not issues:
        return ValidationResult.valid()

    logger.debug(
        "Delimiter validation failed: %d issue(s) on %s",
        len(issues),
        ", ".join(sorted({str(issue.field) for issue in issues})),
    )
    return ValidationResult.invalid(tuple(issues))
