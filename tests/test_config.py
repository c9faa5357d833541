"""Tests for loading delimiter settings."""

from __future__ import annotations

import logging

import pytest

from rangelink.config import SETTING_KEYS, load_delimiter_config
from rangelink.diagnostics import DelimiterConfigError, DiagnosticCode
from rangelink.enums import DelimiterField, DelimiterSource
from rangelink.model import DEFAULT_DELIMITERS, DelimiterConfig


class TestLoadDelimiterConfig:
    """Per-field fallback to defaults."""

    def test_empty_settings(self) -> None:
        result = load_delimiter_config({})

        assert result.delimiters == DEFAULT_DELIMITERS
        assert result.errors == ()
        assert result.is_default
        assert set(result.sources.values()) == {DelimiterSource.DEFAULT}

    def test_none_means_default(self) -> None:
        result = load_delimiter_config(dict.fromkeys(SETTING_KEYS.values()))

        assert result.delimiters == DEFAULT_DELIMITERS
        assert result.source_of(DelimiterField.LINE) is DelimiterSource.DEFAULT

    def test_user_values(self) -> None:
        result = load_delimiter_config({"delimiterLine": "ln", "delimiterRange": ".."})

        assert result.delimiters == DelimiterConfig(line="ln", position="C", hash="#", range="..")
        assert result.source_of(DelimiterField.LINE) is DelimiterSource.USER
        assert result.source_of(DelimiterField.RANGE) is DelimiterSource.USER
        assert result.source_of(DelimiterField.HASH) is DelimiterSource.DEFAULT
        assert result.errors == ()

    def test_all_four_user_values(self) -> None:
        settings = {
            "delimiterLine": "line",
            "delimiterPosition": "col",
            "delimiterHash": "%",
            "delimiterRange": "->",
        }

        result = load_delimiter_config(settings)

        assert result.delimiters == DelimiterConfig(
            line="line", position="col", hash="%", range="->"
        )
        assert not result.is_default

    def test_invalid_field_falls_back(self) -> None:
        """A reserved character in the hash only resets the hash."""
        result = load_delimiter_config({"delimiterHash": "@", "delimiterRange": ".."})

        assert result.delimiters == DelimiterConfig(range="..")
        assert result.source_of(DelimiterField.HASH) is DelimiterSource.DEFAULT
        assert result.source_of(DelimiterField.RANGE) is DelimiterSource.USER
        assert [error.code for error in result.errors] == [
            DiagnosticCode.CONFIG_DELIMITER_RESERVED
        ]
        assert all(isinstance(error, DelimiterConfigError) for error in result.errors)

    def test_collision_falls_back_later_field(self) -> None:
        """'l' collides with the default 'L'; the position is reset."""
        result = load_delimiter_config({"delimiterPosition": "l"})

        assert result.delimiters == DEFAULT_DELIMITERS
        assert [error.code for error in result.errors] == [
            DiagnosticCode.CONFIG_DELIMITER_NOT_UNIQUE
        ]

    def test_clash_with_default_resets_everything(self) -> None:
        """User 'C' for line collides with the default position 'C'.

        The later field (position) is reported and reset, which leaves the
        clash in place, so every field falls back.
        """
        result = load_delimiter_config({"delimiterLine": "C", "delimiterRange": ".."})

        assert result.delimiters == DEFAULT_DELIMITERS
        assert set(result.sources.values()) == {DelimiterSource.DEFAULT}
        assert result.errors[0].code is DiagnosticCode.CONFIG_DELIMITER_NOT_UNIQUE

    def test_non_string_value_validated_as_text(self) -> None:
        result = load_delimiter_config({"delimiterLine": 5})

        assert result.delimiters == DEFAULT_DELIMITERS
        assert result.errors[0].code is DiagnosticCode.CONFIG_DELIMITER_DIGITS

    def test_hash_too_long(self) -> None:
        result = load_delimiter_config({"delimiterHash": "##"})

        assert result.errors[0].code is DiagnosticCode.CONFIG_HASH_NOT_SINGLE_CHAR

    def test_every_issue_reported(self) -> None:
        result = load_delimiter_config({"delimiterLine": "", "delimiterRange": "a b"})

        assert [error.code for error in result.errors] == [
            DiagnosticCode.CONFIG_DELIMITER_EMPTY,
            DiagnosticCode.CONFIG_DELIMITER_WHITESPACE,
        ]

    def test_warning_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="rangelink.config"):
            load_delimiter_config({"delimiterHash": "@"})

        assert len(caplog.records) == 1
        assert caplog.records[0].levelno == logging.WARNING
        assert "CONFIG_DELIMITER_RESERVED" in caplog.text

    def test_success_not_logged_as_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="rangelink.config"):
            load_delimiter_config({"delimiterLine": "ln"})

        assert [record.levelno for record in caplog.records] == [logging.DEBUG]
