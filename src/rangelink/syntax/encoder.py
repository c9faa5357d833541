"""Link encoder: InputSelection to link text.

Shapes (default delimiters, 1-based numbers):
    Normal, full line, single line    path#L10
    Normal, full line, several lines  path#L10-L20
    Normal, partial line              path#L10C5-L20C10
    Rectangular                       path##L10C5-L20C10

Python 3.13+.
"""

import logging

from rangelink.diagnostics import RangeLinkError
from rangelink.enums import LinkType, RangeFormat, RangeNotation, SelectionType
from rangelink.model import ComputedSelection, DelimiterConfig, FormattedLink, InputSelection
from rangelink.selection import compute_range_spec
from rangelink.validation import validate_delimiters

from .portable import compose_portable_metadata
from .quoting import quote_link

__all__ = [
    "build_anchor",
    "format_link",
    "format_simple_line_reference",
    "join_with_hash",
]

logger = logging.getLogger(__name__)


def build_anchor(
    start_line: int,
    end_line: int,
    start_position: int | None,
    end_position: int | None,
    delimiters: DelimiterConfig,
    range_format: RangeFormat = RangeFormat.WITH_POSITIONS,
) -> str:
    """Render the range part of a link (everything after the hash).

    Missing positions render as column 1 in the with-positions format.

    Example:
        >>> build_anchor(10, 20, 5, 10, DEFAULT_DELIMITERS)
        'L10C5-L20C10'
        >>> build_anchor(10, 20, None, None, DEFAULT_DELIMITERS, RangeFormat.LINE_ONLY)
        'L10-L20'
    """
    line, position, range_ = delimiters.line, delimiters.position, delimiters.range

    if range_format is RangeFormat.LINE_ONLY:
        return f"{line}{start_line}{range_}{line}{end_line}"

    start = f"{line}{start_line}{position}{start_position or 1}"
    end = f"{line}{end_line}{position}{end_position or 1}"
    return f"{start}{range_}{end}"


def join_with_hash(
    path: str,
    anchor: str,
    delimiters: DelimiterConfig,
    selection_type: SelectionType = SelectionType.NORMAL,
) -> str:
    """Join path and anchor; rectangular links write the hash twice."""
    prefix = delimiters.hash * 2 if selection_type is SelectionType.RECTANGULAR else delimiters.hash
    return f"{path}{prefix}{anchor}"


def format_simple_line_reference(path: str, line: int, delimiters: DelimiterConfig) -> str:
    """Render a single whole line: ``path#L10``."""
    return f"{path}{delimiters.hash}{delimiters.line}{line}"


def _render(path: str, computed: ComputedSelection, delimiters: DelimiterConfig) -> str:
    if computed.start_line == computed.end_line and computed.range_format is RangeFormat.LINE_ONLY:
        return format_simple_line_reference(path, computed.start_line, delimiters)

    anchor = build_anchor(
        computed.start_line,
        computed.end_line,
        computed.start_position,
        computed.end_position,
        delimiters,
        computed.range_format,
    )
    return join_with_hash(path, anchor, delimiters, computed.selection_type)


def format_link(
    path: str,
    input_selection: InputSelection,
    delimiters: DelimiterConfig,
    *,
    link_type: LinkType = LinkType.REGULAR,
    notation: RangeNotation = RangeNotation.AUTO,
) -> tuple[FormattedLink | None, tuple[RangeLinkError, ...]]:
    """Encode a path and selection as a RangeLink.

    Args:
        path: File path written before the hash (not modified)
        input_selection: Normalized selection (0-based)
        delimiters: Delimiter configuration; must pass validate_delimiters
        link_type: REGULAR, or PORTABLE to append the delimiter block
        notation: Line-only/positions preference for normal selections

    Returns:
        Tuple of (FormattedLink, errors). Errors come from the delimiter
        validation or from the selection preconditions.

    Example:
        >>> full = Selection(
        ...     EditorPosition(9, 0), EditorPosition(19, 0), SelectionCoverage.FULL_LINE
        ... )
        >>> selection = InputSelection((full,))
        >>> link, errors = format_link("src/foo.ts", selection, DEFAULT_DELIMITERS)
        >>> link.link
        'src/foo.ts#L10-L20'
    """
    validation = validate_delimiters(delimiters)
    if not validation.is_valid:
        return (None, validation.to_errors())

    computed, errors = compute_range_spec(input_selection, notation=notation)
    if computed is None:
        return (None, errors)

    raw_link = _render(path, computed, delimiters)

    match link_type:
        case LinkType.PORTABLE:
            raw_link += compose_portable_metadata(delimiters)
        case LinkType.REGULAR:
            pass

    link = quote_link(raw_link, path)
    logger.debug(
        "Generated link: %s (type=%s, selection=%s, format=%s, length=%d)",
        link,
        link_type,
        computed.selection_type,
        computed.range_format,
        len(link),
    )

    return (
        FormattedLink(
            link=link,
            raw_link=raw_link,
            link_type=link_type,
            delimiters=delimiters,
            computed_selection=computed,
        ),
        (),
    )
