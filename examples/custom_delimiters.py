"""Custom delimiters and portable links.

Shows how user settings are validated, how invalid values fall back to the
defaults, and how portable links carry their delimiters so they decode
under anyone else's settings.

Python 3.13+.
"""

from __future__ import annotations

import logging


def example_1_load_settings() -> None:
    """Load delimiters from raw settings with per-field fallback."""
    from rangelink import load_delimiter_config

    print("=" * 60)
    print("Example 1: Loading Settings")
    print("=" * 60)

    settings = {"delimiterLine": "line", "delimiterPosition": "col", "delimiterRange": "->"}
    result = load_delimiter_config(settings)
    print(f"Delimiters: {result.delimiters.as_dict()}")
    print(f"Sources:    { {str(k): str(v) for k, v in result.sources.items()} }")

    # '@' is reserved; only the hash falls back (a WARNING is logged)
    result = load_delimiter_config({"delimiterHash": "@", "delimiterRange": ".."})
    print(f"Fallback:   {result.delimiters.as_dict()}")
    for error in result.errors:
        print(f"  {error.code.name}: {error.message}")
    print()


def example_2_validate() -> None:
    """Validate a configuration and format the report."""
    from rangelink import DelimiterConfig, validate_delimiters
    from rangelink.diagnostics import DiagnosticFormatter

    print("=" * 60)
    print("Example 2: Validation Report")
    print("=" * 60)

    config = DelimiterConfig(line="L", position="l", hash="##", range="L-")
    result = validate_delimiters(config)
    print(DiagnosticFormatter().format_validation_result(result))
    print()


def example_3_portable() -> None:
    """Portable links decode without matching settings."""
    from rangelink import (
        DEFAULT_DELIMITERS,
        DelimiterConfig,
        EditorPosition,
        InputSelection,
        LinkType,
        Selection,
        format_link,
        parse_link,
    )

    print("=" * 60)
    print("Example 3: Portable Links")
    print("=" * 60)

    arrows = DelimiterConfig(line="line", position="col", hash="%", range="->")
    selection = InputSelection((Selection(EditorPosition(2, 0), EditorPosition(4, 7)),))

    regular, _ = format_link("src/app.py", selection, arrows)
    portable, _ = format_link("src/app.py", selection, arrows, link_type=LinkType.PORTABLE)
    print(f"Regular:  {regular}")
    print(f"Portable: {portable}")
    # Output:
    # Regular:  src/app.py%line3col1->line5col8
    # Portable: src/app.py%line3col1->line5col8~%~line~->~col~

    assert regular is not None
    assert portable is not None
    for link in (regular, portable):
        parsed, errors = parse_link(link.link, DEFAULT_DELIMITERS)
        outcome = f"{parsed.start} -> {parsed.end}" if parsed else f"not a link {errors}"
        print(f"With default settings, {link.link_type}: {outcome}")
    print()


def main() -> None:
    """Run all custom delimiter examples."""
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    example_1_load_settings()
    example_2_validate()
    example_3_portable()

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
