"""Quickstart example for rangelink.

Demonstrates the round trip from an editor selection to link text and back:

1. Normalize editor selections against the document text
2. Encode a link
3. Decode a link
4. Find links in a chat message
5. Report errors

Note: Examples print errors instead of handling them. In production, always
check the errors tuple returned alongside every result.

Python 3.13+.
"""

from __future__ import annotations

DOCUMENT = """\
def fetch(url):
    response = request(url)
    response.raise_for_status()
    return response.json()
"""


def example_1_encode() -> None:
    """Normalize a selection and encode it."""
    from rangelink import (
        DEFAULT_DELIMITERS,
        EditorPosition,
        RawSelection,
        format_link,
        normalize_selections,
    )
    from rangelink.selection import LineIndex

    print("=" * 60)
    print("Example 1: Encoding")
    print("=" * 60)

    index = LineIndex(DOCUMENT)
    cases = {
        "whole line 2": RawSelection(EditorPosition(1, 0), EditorPosition(2, 0)),
        "lines 2-3": RawSelection(EditorPosition(1, 0), EditorPosition(3, 0)),
        "request(url)": RawSelection(EditorPosition(1, 15), EditorPosition(1, 27)),
    }
    for label, raw in cases.items():
        selection, errors = normalize_selections(index, [raw])
        if selection is None:
            print(f"{label}: {errors}")
            continue
        link, errors = format_link("client/http.py", selection, DEFAULT_DELIMITERS)
        print(f"{label:>14}: {link}")
    # Output:
    #   whole line 2: client/http.py#L2
    #      lines 2-3: client/http.py#L2-L3
    #   request(url): client/http.py#L2C16-L2C28
    print()


def example_2_rectangular() -> None:
    """Column selections become a double-hash link."""
    from rangelink import DEFAULT_DELIMITERS, EditorPosition, RawSelection, format_link
    from rangelink import normalize_selections
    from rangelink.selection import LineIndex

    print("=" * 60)
    print("Example 2: Rectangular Selection")
    print("=" * 60)

    raw = [
        RawSelection(EditorPosition(line, 4), EditorPosition(line, 12)) for line in (1, 2, 3)
    ]
    selection, _ = normalize_selections(LineIndex(DOCUMENT), raw)
    assert selection is not None
    link, _ = format_link("client/http.py", selection, DEFAULT_DELIMITERS)
    print(link)
    # Output: client/http.py##L2C5-L4C13
    print()


def example_3_decode() -> None:
    """Decode link text back into a selection."""
    from rangelink import DEFAULT_DELIMITERS, parse_link
    from rangelink.selection import LineIndex

    print("=" * 60)
    print("Example 3: Decoding")
    print("=" * 60)

    parsed, errors = parse_link("client/http.py#L2-L3", DEFAULT_DELIMITERS)
    if parsed is None:
        print(f"Not a link: {errors}")
        return

    print(f"Path:  {parsed.path}")
    print(f"Start: {parsed.start}")
    print(f"End:   {parsed.end}")

    selection = parsed.to_input_selection(LineIndex(DOCUMENT))
    print(f"Editor selection: {selection.primary}")
    print()


def example_4_detection() -> None:
    """Find every link in a block of text."""
    from rangelink import DEFAULT_DELIMITERS, find_links_in_text

    print("=" * 60)
    print("Example 4: Detection")
    print("=" * 60)

    message = (
        "The bug is in client/http.py#L2C16-L2C28, called from "
        "'app main.py#L10-L12' (see also docs/api.md#L4)."
    )
    for detected in find_links_in_text(message, DEFAULT_DELIMITERS):
        print(f"{detected.start_index:>3}: {detected.link_text}")
    print()


def example_5_errors() -> None:
    """Errors are returned with structured diagnostics."""
    from rangelink import DEFAULT_DELIMITERS, parse_link
    from rangelink.diagnostics import DiagnosticFormatter, OutputFormat

    print("=" * 60)
    print("Example 5: Errors")
    print("=" * 60)

    formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
    for text in ("client/http.py#L0", "client/http.py#L9-L3", "#L3", "plain words"):
        _, errors = parse_link(text, DEFAULT_DELIMITERS)
        if not errors:
            print(f"{text!r}: not a link")
            continue
        for error in errors:
            print(f"{text!r}: {formatter.format(error.diagnostic)}")
    print()


def main() -> None:
    """Run all quickstart examples."""
    example_1_encode()
    example_2_rectangular()
    example_3_decode()
    example_4_detection()
    example_5_errors()

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
