"""Tests for finding links in free text."""

from __future__ import annotations

import logging

import pytest

from rangelink.detection import (
    OccupiedRange,
    OverlapClassification,
    classify_overlap,
    find_links_in_text,
)
from rangelink.enums import LinkType, OverlapKind
from rangelink.model import DEFAULT_DELIMITERS, DelimiterConfig

# ============================================================================
# OVERLAP CLASSIFICATION
# ============================================================================


class TestClassifyOverlap:
    """Half-open span overlap."""

    def test_nothing_occupied(self) -> None:
        assert classify_overlap(0, 10, []) == OverlapClassification(OverlapKind.NONE)

    def test_disjoint(self) -> None:
        result = classify_overlap(0, 5, [OccupiedRange(6, 9)])

        assert result.kind is OverlapKind.NONE

    def test_adjacent_is_not_overlap(self) -> None:
        """Spans are half-open."""
        assert classify_overlap(5, 10, [OccupiedRange(2, 5)]).kind is OverlapKind.NONE

    def test_encompassing(self) -> None:
        result = classify_overlap(0, 10, [OccupiedRange(2, 5), OccupiedRange(6, 10)])

        assert result.kind is OverlapKind.ENCOMPASSING
        assert result.encompassed_indices == (0, 1)

    def test_partial(self) -> None:
        assert classify_overlap(3, 10, [OccupiedRange(2, 5)]).kind is OverlapKind.PARTIAL

    def test_partial_wins_over_encompassing(self) -> None:
        occupied = [OccupiedRange(2, 5), OccupiedRange(9, 12)]

        assert classify_overlap(0, 10, occupied).kind is OverlapKind.PARTIAL


# ============================================================================
# FINDER
# ============================================================================


def found(text: str, delimiters: DelimiterConfig = DEFAULT_DELIMITERS) -> list[tuple[str, int]]:
    return [(link.link_text, link.start_index) for link in find_links_in_text(text, delimiters)]


class TestFindLinksInText:
    """Unquoted and quoted passes."""

    def test_no_links(self) -> None:
        assert find_links_in_text("nothing to see here", DEFAULT_DELIMITERS) == []

    def test_unquoted_and_quoted(self) -> None:
        text = "see src/a.ts#L3-L5, then 'my file.py#L1'"

        assert found(text) == [("src/a.ts#L3-L5", 4), ("my file.py#L1", 25)]

    def test_quoted_span_includes_quotes(self) -> None:
        links = find_links_in_text('open "my file.ts#L2" now', DEFAULT_DELIMITERS)

        assert len(links) == 1
        assert links[0].link_text == "my file.ts#L2"
        assert links[0].start_index == 5
        assert links[0].length == 15
        assert links[0].parsed.path == "my file.ts"

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("at a.ts#L3.", "a.ts#L3"),
            ("(see a.ts#L3).", "a.ts#L3"),
            ("a.ts#L3C2-L4C1!?", "a.ts#L3C2-L4C1"),
            ("[a.ts#L3]", "[a.ts#L3"),
        ],
    )
    def test_trailing_punctuation_trimmed(self, text: str, expected: str) -> None:
        assert [link for link, _ in found(text)] == [expected]

    def test_multiple_lines(self) -> None:
        text = "a.ts#L1\nb.ts#L2C3-L4C5\n"

        assert found(text) == [("a.ts#L1", 0), ("b.ts#L2C3-L4C5", 8)]

    def test_invalid_links_skipped(self) -> None:
        """Links that decode with errors are not reported."""
        assert found("a.ts#L0 and b.ts#L2") == [("b.ts#L2", 12)]

    def test_quoted_non_link_ignored(self) -> None:
        assert found("say 'hello world' and a.ts#L9") == [("a.ts#L9", 22)]

    def test_portable_detected_under_any_delimiters(self) -> None:
        custom = DelimiterConfig(line="ln", position="c", hash="$", range="..")

        links = find_links_in_text("copy a.ts#L1~#~L~-~C~ here", custom)

        assert len(links) == 1
        assert links[0].parsed.link_type is LinkType.PORTABLE

    def test_custom_delimiters(self) -> None:
        custom = DelimiterConfig(line="ln", position="c", hash="$", range="..")

        assert found("go to a.ts$ln3..ln4 and b.ts#L1", custom) == [("a.ts$ln3..ln4", 6)]

    def test_results_sorted(self) -> None:
        """Quoted links found in the second pass are merged in order."""
        text = "'x y.ts#L1' z.ts#L2 'w v.ts#L3'"

        assert [start for _, start in found(text)] == [0, 12, 20]

    def test_summary_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="rangelink.detection.finder"):
            find_links_in_text("a.ts#L1", DEFAULT_DELIMITERS)

        assert "Link detection complete: 1 link(s)" in caplog.text

    def test_injected_logger(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = logging.getLogger("terminal.links")

        with caplog.at_level(logging.DEBUG, logger="terminal.links"):
            find_links_in_text("a.ts#L1", DEFAULT_DELIMITERS, logger=logger)

        assert any(record.name == "terminal.links" for record in caplog.records)
