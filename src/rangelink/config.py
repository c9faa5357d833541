"""Loading delimiter settings with per-field fallback to defaults.

Settings arrive as a flat mapping (an editor's configuration section, a
parsed JSON or TOML table). Keys that are missing or None use the default
delimiter; every other value is taken as the user's choice and validated.

Python 3.13+.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, replace

from .diagnostics import DelimiterConfigError
from .enums import DelimiterField, DelimiterSource
from .model import DEFAULT_DELIMITERS, DelimiterConfig
from .validation import validate_delimiters

__all__ = [
    "SETTING_KEYS",
    "DelimiterConfigLoadResult",
    "load_delimiter_config",
]

logger = logging.getLogger(__name__)

# Setting key for each delimiter field
SETTING_KEYS: dict[DelimiterField, str] = {
    DelimiterField.LINE: "delimiterLine",
    DelimiterField.POSITION: "delimiterPosition",
    DelimiterField.HASH: "delimiterHash",
    DelimiterField.RANGE: "delimiterRange",
}


@dataclass(frozen=True, slots=True)
class DelimiterConfigLoadResult:
    """Outcome of loading delimiter settings.

    Attributes:
        delimiters: Configuration to use (always valid)
        sources: Where each field's value came from
        errors: Every problem found in the user's values
    """

    delimiters: DelimiterConfig
    sources: Mapping[DelimiterField, DelimiterSource]
    errors: tuple[DelimiterConfigError, ...] = ()

    @property
    def is_default(self) -> bool:
        """All four values are the defaults."""
        return self.delimiters == DEFAULT_DELIMITERS

    def source_of(self, field: DelimiterField) -> DelimiterSource:
        return self.sources[field]


def _read_settings(
    settings: Mapping[str, object],
) -> tuple[DelimiterConfig, dict[DelimiterField, DelimiterSource]]:
    values: dict[str, str] = {}
    sources: dict[DelimiterField, DelimiterSource] = {}
    for field, key in SETTING_KEYS.items():
        raw = settings.get(key)
        if raw is None:
            values[str(field)] = DEFAULT_DELIMITERS.get(field)
            sources[field] = DelimiterSource.DEFAULT
        else:
            values[str(field)] = raw if isinstance(raw, str) else str(raw)
            sources[field] = DelimiterSource.USER
    return DelimiterConfig(**values), sources


def load_delimiter_config(settings: Mapping[str, object]) -> DelimiterConfigLoadResult:
    """Build a valid delimiter configuration from raw settings.

    Invalid user values fall back to their defaults field by field. When
    the merged configuration is still inconsistent (a user value clashes
    with a default), the whole configuration falls back to the defaults.

    Args:
        settings: Mapping with the keys delimiterLine, delimiterPosition,
            delimiterHash and delimiterRange (all optional)

    Returns:
        DelimiterConfigLoadResult; ``errors`` lists every issue found

    Example:
        >>> result = load_delimiter_config({"delimiterHash": "@"})
        >>> result.delimiters.hash
        '#'
        >>> [error.code.name for error in result.errors]
        ['CONFIG_DELIMITER_RESERVED']
    """
    config, sources = _read_settings(settings)
    result = validate_delimiters(config)

    if result.is_valid:
        logger.debug("Loaded delimiters %s", config.as_dict())
        return DelimiterConfigLoadResult(config, sources)

    errors = result.to_errors()
    failed = result.invalid_fields
    fallback = replace(
        config, **{str(field): DEFAULT_DELIMITERS.get(field) for field in failed}
    )
    for field in failed:
        sources[field] = DelimiterSource.DEFAULT

    if not validate_delimiters(fallback).is_valid:
        fallback = DEFAULT_DELIMITERS
        sources = dict.fromkeys(SETTING_KEYS, DelimiterSource.DEFAULT)

    logger.warning(
        "Invalid delimiter settings (%d issue(s)), using %s: %s",
        len(errors),
        fallback.as_dict(),
        "; ".join(issue.format() for issue in result.issues),
    )
    return DelimiterConfigLoadResult(fallback, sources, errors)
