"""Self-describing delimiter block of portable links.

Grammar:
    <regular link>~<hash>~<line>~<range>~<position>~

Delimiters never contain digits or "~", so the block is everything after
the last digit of the link: a regular link ends with a digit, a portable
link ends with "~". Older writers emitted a three-field block
``~<hash>~<line>~<range>~`` for links without columns; it is still read.

Python 3.13+.
"""

import logging
from collections.abc import Sequence

from rangelink.constants import (
    ASCII_DIGITS,
    DEFAULT_DELIMITER_POSITION,
    PORTABLE_FIELD_COUNT,
    PORTABLE_LEGACY_FIELD_COUNT,
    PORTABLE_METADATA_SEPARATOR,
)
from rangelink.diagnostics import ErrorTemplate, PortableLinkError, ValidationIssue
from rangelink.enums import DelimiterField
from rangelink.model import DelimiterConfig
from rangelink.validation import validate_delimiters

__all__ = [
    "compose_portable_metadata",
    "parse_portable_metadata",
    "split_portable_block",
]

logger = logging.getLogger(__name__)

_SEP = PORTABLE_METADATA_SEPARATOR


def compose_portable_metadata(delimiters: DelimiterConfig) -> str:
    """Render the delimiter block appended to portable links.

    Example:
        >>> compose_portable_metadata(DEFAULT_DELIMITERS)
        '~#~L~-~C~'
    """
    fields = (delimiters.hash, delimiters.line, delimiters.range, delimiters.position)
    return _SEP + _SEP.join(fields) + _SEP


def split_portable_block(text: str) -> tuple[str, str] | None:
    """Split a candidate into link body and delimiter block.

    Returns:
        (body, block) when the text ends with a block that follows the
        last digit, otherwise None
    """
    if not text.endswith(_SEP):
        return None
    last_digit = max(text.rfind(digit) for digit in ASCII_DIGITS)
    if last_digit < 0:
        return None
    block = text[last_digit + 1 :]
    if not block.startswith(_SEP) or len(block) < 2:
        return None
    return (text[: last_digit + 1], block)


def _recover_position(
    hash_: str, line: str, range_: str, fallback: DelimiterConfig | None
) -> DelimiterConfig | None:
    candidates: list[str] = []
    if fallback is not None:
        candidates.append(fallback.position)
    candidates.append(DEFAULT_DELIMITER_POSITION)
    for position in candidates:
        config = DelimiterConfig(line=line, position=position, hash=hash_, range=range_)
        if validate_delimiters(config).is_valid:
            return config
    return None


def parse_portable_metadata(
    block: str, fallback: DelimiterConfig | None = None
) -> tuple[DelimiterConfig | None, tuple[PortableLinkError, ...]]:
    """Read the delimiters embedded in a portable block.

    Args:
        block: Block including its leading and trailing "~"
        fallback: Caller delimiters used to recover the position token of
            a three-field block

    Returns:
        Tuple of (DelimiterConfig, errors)
    """
    if len(block) < 2 or not block.startswith(_SEP) or not block.endswith(_SEP):
        reason = "must start and end with '~'"
        return (None, (PortableLinkError(ErrorTemplate.portable_invalid_format(block, reason)),))

    fields = block[1:-1].split(_SEP)
    if len(fields) not in (PORTABLE_FIELD_COUNT, PORTABLE_LEGACY_FIELD_COUNT):
        reason = (
            f"expected {PORTABLE_FIELD_COUNT} (or {PORTABLE_LEGACY_FIELD_COUNT}) "
            f"fields, got {len(fields)}"
        )
        return (None, (PortableLinkError(ErrorTemplate.portable_invalid_format(block, reason)),))
    if any(not value for value in fields):
        reason = "empty field"
        return (None, (PortableLinkError(ErrorTemplate.portable_invalid_format(block, reason)),))

    hash_, line, range_ = fields[0], fields[1], fields[2]
    if len(hash_) != 1:
        return (None, (PortableLinkError(ErrorTemplate.portable_hash_invalid(hash_)),))

    if len(fields) == PORTABLE_LEGACY_FIELD_COUNT:
        config = _recover_position(hash_, line, range_, fallback)
        if config is not None:
            logger.debug("Recovered position delimiter '%s' for %s", config.position, block)
            return (config, ())
        # Blame the embedded fields when they fail regardless of the position
        candidate = DelimiterConfig(
            line=line, position=DEFAULT_DELIMITER_POSITION, hash=hash_, range=range_
        )
        issues = [
            issue
            for issue in validate_delimiters(candidate).issues
            if DelimiterField.POSITION
            not in (issue.field, issue.diagnostic.detail("conflicts_with"))
        ]
        if issues:
            return (None, (_validation_error(issues),))
        error = PortableLinkError(ErrorTemplate.portable_position_recovery_failed())
        return (None, (error,))

    config = DelimiterConfig(line=line, position=fields[3], hash=hash_, range=range_)
    result = validate_delimiters(config)
    if not result.is_valid:
        return (None, (_validation_error(result.issues),))
    return (config, ())


def _validation_error(issues: Sequence[ValidationIssue]) -> PortableLinkError:
    summary = "; ".join(issue.format() for issue in issues)
    return PortableLinkError(ErrorTemplate.portable_delimiter_validation(summary))
