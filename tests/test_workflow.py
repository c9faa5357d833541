"""End-to-end: settings, editor selection, link text, detection, decoding."""

from __future__ import annotations

from rangelink import (
    DEFAULT_DELIMITERS,
    EditorPosition,
    LinkType,
    RawSelection,
    find_links_in_text,
    format_link,
    load_delimiter_config,
    normalize_selections,
    parse_link,
)
from rangelink.selection import LineIndex

DOCUMENT = "import os\n\ndef main():\n    return 1\n"


class TestCopyAndFollowLink:
    """A link copied in one editor is followed from a chat message."""

    def test_regular_link_with_user_settings(self) -> None:
        config = load_delimiter_config({"delimiterLine": "ln", "delimiterRange": ".."})
        index = LineIndex(DOCUMENT)

        selection, errors = normalize_selections(
            index, [RawSelection(EditorPosition(2, 0), EditorPosition(4, 0))]
        )
        assert errors == ()
        assert selection is not None

        link, errors = format_link("app.py", selection, config.delimiters)
        assert errors == ()
        assert link is not None
        assert link.link == "app.py#ln3..ln4"

        message = f"Look at {link.link}, it returns early."
        detected = find_links_in_text(message, config.delimiters)

        assert [(d.link_text, d.start_index) for d in detected] == [(link.link, 8)]
        reconstructed = detected[0].parsed.to_input_selection(index)
        assert reconstructed.primary.start == EditorPosition(2, 0)
        assert reconstructed.primary.end == EditorPosition(3, 12)

    def test_portable_link_crosses_settings(self) -> None:
        """Written with custom delimiters, followed with the defaults."""
        config = load_delimiter_config({"delimiterLine": "ln", "delimiterRange": ".."})
        selection, _ = normalize_selections(
            LineIndex(DOCUMENT), [RawSelection(EditorPosition(2, 4), EditorPosition(3, 10))]
        )
        assert selection is not None

        link, _ = format_link(
            "app.py", selection, config.delimiters, link_type=LinkType.PORTABLE
        )
        assert link is not None
        assert link.link == "app.py#ln3C5..ln4C11~#~ln~..~C~"

        detected = find_links_in_text(f"see {link.link}", DEFAULT_DELIMITERS)

        assert len(detected) == 1
        assert detected[0].parsed.delimiters == config.delimiters
        assert detected[0].parsed.to_input_selection().is_equivalent(selection)

    def test_regular_link_needs_matching_settings(self) -> None:
        config = load_delimiter_config({"delimiterLine": "ln"})
        selection, _ = normalize_selections(
            LineIndex(DOCUMENT), [RawSelection(EditorPosition(0, 0), EditorPosition(0, 9))]
        )
        assert selection is not None

        link, _ = format_link("app.py", selection, config.delimiters)
        assert link is not None
        assert link.link == "app.py#ln1"

        assert parse_link(link.link, DEFAULT_DELIMITERS) == (None, ())
        assert find_links_in_text(link.link, DEFAULT_DELIMITERS) == []
