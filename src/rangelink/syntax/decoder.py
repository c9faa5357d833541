"""Link decoder: link text to ParsedLink.

Architecture:
    - parse_link(): Main entry point (unquote, size limit, grammar choice)
    - _split_at_hash(): Last hash wins, a doubled hash marks rectangular links
    - _scan_anchor(): Hand-written scanner over an immutable Cursor for
      LINE n [POSITION n] [RANGE LINE n [POSITION n]]
    - _check_coordinates(): 1-based bounds and ordering

Three outcomes, mirroring the ``(value, errors)`` convention:
    match     (ParsedLink, ())
    no match  (None, ())           ordinary text
    error     (None, (error, ...)) RangeLink shape, unusable content

Python 3.13+.
"""

import logging
from dataclasses import dataclass

from rangelink.constants import (
    ASCII_DIGITS,
    MAX_LINK_LENGTH,
    PORTABLE_METADATA_SEPARATOR,
    WEB_URL_SCHEMES,
)
from rangelink.diagnostics import (
    ErrorTemplate,
    LinkParseError,
    PortableLinkError,
    RangeLinkError,
)
from rangelink.enums import LinkType, SelectionType
from rangelink.model import DEFAULT_DELIMITERS, DelimiterConfig, LinkPosition, ParsedLink

from .cursor import Cursor, ParseError, ParseResult
from .portable import parse_portable_metadata, split_portable_block
from .quoting import unquote_link

__all__ = ["is_rangelink", "parse_link"]

logger = logging.getLogger(__name__)

type DecodeResult = tuple[ParsedLink | None, tuple[RangeLinkError, ...]]

_NO_MATCH: DecodeResult = (None, ())


@dataclass(frozen=True, slots=True)
class _Anchor:
    """Raw numbers read from an anchor; None marks an omitted part."""

    start_line: int
    start_char: int | None
    end_line: int | None
    end_char: int | None


# ============================================================================
# SCANNER
# ============================================================================


def _scan_number(cursor: Cursor) -> ParseResult[int] | ParseError:
    """Scan a decimal without leading zeros: 0 | [1-9][0-9]*"""
    if cursor.is_eof or cursor.current not in ASCII_DIGITS:
        return ParseError("Expected number", cursor, ("0-9",))

    start = cursor
    if cursor.current == "0":
        cursor = cursor.advance()
        if not cursor.is_eof and cursor.current in ASCII_DIGITS:
            return ParseError("Leading zero in number", start)
        return ParseResult(0, cursor)

    while not cursor.is_eof and cursor.current in ASCII_DIGITS:
        cursor = cursor.advance()
    return ParseResult(int(start.slice_to(cursor.pos)), cursor)


def _scan_position(
    cursor: Cursor, delimiters: DelimiterConfig
) -> ParseResult[tuple[int, int | None]] | ParseError:
    """Scan LINE n [POSITION n]."""
    after_line = cursor.expect(delimiters.line)
    if after_line is None:
        return ParseError("Expected line delimiter", cursor, (delimiters.line,))

    line = _scan_number(after_line)
    if isinstance(line, ParseError):
        return line
    cursor = line.cursor

    after_position = cursor.expect(delimiters.position)
    if after_position is None:
        return ParseResult((line.value, None), cursor)

    character = _scan_number(after_position)
    if isinstance(character, ParseError):
        return character
    return ParseResult((line.value, character.value), character.cursor)


def _scan_anchor(cursor: Cursor, delimiters: DelimiterConfig) -> _Anchor | ParseError:
    """Scan a complete anchor; the whole remaining text must be consumed."""
    start = _scan_position(cursor, delimiters)
    if isinstance(start, ParseError):
        return start
    start_line, start_char = start.value
    cursor = start.cursor

    if cursor.is_eof:
        return _Anchor(start_line, start_char, None, None)

    after_range = cursor.expect(delimiters.range)
    if after_range is None:
        return ParseError(
            "Expected range delimiter or end of link",
            cursor,
            (delimiters.range, delimiters.position),
        )

    end = _scan_position(after_range, delimiters)
    if isinstance(end, ParseError):
        return end
    if not end.cursor.is_eof:
        return ParseError("Unexpected text after range", end.cursor)

    end_line, end_char = end.value
    return _Anchor(start_line, start_char, end_line, end_char)


# ============================================================================
# HELPERS
# ============================================================================


def _split_at_hash(text: str, hash_: str) -> tuple[str, int, SelectionType] | None:
    """Locate the last hash.

    Returns:
        (path, anchor offset, selection type) or None when there is no hash
    """
    index = text.rfind(hash_)
    if index < 0:
        return None
    anchor_start = index + len(hash_)
    if index >= len(hash_) and text[index - len(hash_) : index] == hash_:
        return (text[: index - len(hash_)], anchor_start, SelectionType.RECTANGULAR)
    return (text[:index], anchor_start, SelectionType.NORMAL)


def _looks_like_anchor(cursor: Cursor, line: str) -> bool:
    after_line = cursor.expect(line)
    return after_line is not None and not after_line.is_eof and after_line.current in ASCII_DIGITS


def _has_link_shape(body: str, hash_: str, line: str) -> bool:
    split = _split_at_hash(body, hash_)
    return split is not None and _looks_like_anchor(Cursor(body, split[1]), line)


def _commits_to_portable(body: str, block: str, delimiters: DelimiterConfig) -> bool:
    """Whether the body before a trailing block has RangeLink shape.

    Checked with the hash and line tokens named in the block, then with
    the active delimiters, so a malformed block after a real link is still
    reported while text like ``release2~final~`` is no match.
    """
    fields = block[1:-1].split(PORTABLE_METADATA_SEPARATOR)
    if len(fields) >= 2 and fields[0] and fields[1] and _has_link_shape(body, fields[0], fields[1]):
        return True
    return _has_link_shape(body, delimiters.hash, delimiters.line)


def _check_coordinates(start: LinkPosition, end: LinkPosition) -> LinkParseError | None:
    if start.line < 1:
        return LinkParseError(ErrorTemplate.line_below_minimum(start.line))
    if end.line < start.line:
        return LinkParseError(ErrorTemplate.line_backward(start.line, end.line))
    for character in (start.character, end.character):
        if character is not None and character < 1:
            return LinkParseError(ErrorTemplate.char_below_minimum(character))
    if (
        start.line == end.line
        and start.character is not None
        and end.character is not None
        and end.character < start.character
    ):
        return LinkParseError(
            ErrorTemplate.char_backward_same_line(start.line, start.character, end.character)
        )
    return None


def _decode(
    text: str,
    delimiters: DelimiterConfig,
    link_type: LinkType,
) -> DecodeResult:
    """Decode a link body (no portable block) with known delimiters."""
    split = _split_at_hash(text, delimiters.hash)
    if split is None:
        return _NO_MATCH
    path, anchor_start, selection_type = split

    cursor = Cursor(text, anchor_start)
    if not _looks_like_anchor(cursor, delimiters.line):
        return _NO_MATCH

    if not path.strip():
        return (None, (LinkParseError(ErrorTemplate.empty_path()),))
    if path.lower().startswith(WEB_URL_SCHEMES):
        return (None, (LinkParseError(ErrorTemplate.url_not_supported(path)),))

    anchor = _scan_anchor(cursor, delimiters)
    if isinstance(anchor, ParseError):
        anchor_text = cursor.remaining
        logger.debug("Anchor scan failed for %s: %s", anchor_text, anchor.format_error())
        if link_type is LinkType.PORTABLE:
            mismatch = ErrorTemplate.portable_format_mismatch(anchor_text)
            return (None, (PortableLinkError(mismatch),))
        diagnostic = ErrorTemplate.malformed_range(anchor_text, anchor.position, anchor.message)
        return (None, (LinkParseError(diagnostic),))

    start = LinkPosition(anchor.start_line, anchor.start_char)
    if anchor.end_line is None:
        end = start
    else:
        end = LinkPosition(anchor.end_line, anchor.end_char)

    error = _check_coordinates(start, end)
    if error is not None:
        return (None, (error,))

    return (
        ParsedLink(
            path=path,
            start=start,
            end=end,
            link_type=link_type,
            selection_type=selection_type,
            delimiters=delimiters,
        ),
        (),
    )


# ============================================================================
# PUBLIC API
# ============================================================================


def parse_link(candidate: str, delimiters: DelimiterConfig | None = None) -> DecodeResult:
    """Decode a RangeLink.

    Single quotes added by quoting are removed first. A trailing portable
    block selects the embedded delimiters and ``delimiters`` is then only
    used to recover the position token of three-field blocks. Regular links
    require ``delimiters``.

    Args:
        candidate: Text to decode
        delimiters: Active delimiter configuration

    Returns:
        Tuple of (ParsedLink, errors); (None, ()) when the text is not a
        RangeLink at all

    Example:
        >>> parsed, errors = parse_link("src/foo.ts#L10C5-L20C10", DEFAULT_DELIMITERS)
        >>> parsed.path, parsed.start, parsed.end
        ('src/foo.ts', LinkPosition(line=10, character=5), LinkPosition(line=20, character=10))
        >>> parse_link("not a link at all", DEFAULT_DELIMITERS)
        (None, ())
    """
    text = unquote_link(candidate.strip())

    if not text.strip():
        return _NO_MATCH
    if len(text) > MAX_LINK_LENGTH:
        return (None, (LinkParseError(ErrorTemplate.link_too_long(len(text), MAX_LINK_LENGTH)),))

    portable = split_portable_block(text)
    if portable is not None:
        body, block = portable
        if not _commits_to_portable(body, block, delimiters or DEFAULT_DELIMITERS):
            return _NO_MATCH
        embedded, errors = parse_portable_metadata(block, delimiters)
        if embedded is None:
            logger.debug("Rejected portable block %s: %s", block, errors[0])
            return (None, errors)
        parsed, errors = _decode(body, embedded, LinkType.PORTABLE)
    elif delimiters is None:
        return (None, (LinkParseError(ErrorTemplate.delimiters_required()),))
    else:
        parsed, errors = _decode(text, delimiters, LinkType.REGULAR)

    if parsed is not None:
        logger.debug(
            "Parsed link: path=%s start=%s end=%s type=%s selection=%s",
            parsed.path,
            parsed.start,
            parsed.end,
            parsed.link_type,
            parsed.selection_type,
        )
    return (parsed, errors)


def is_rangelink(candidate: str, delimiters: DelimiterConfig | None = None) -> bool:
    """Check whether text decodes as a RangeLink."""
    parsed, _ = parse_link(candidate, delimiters)
    return parsed is not None
