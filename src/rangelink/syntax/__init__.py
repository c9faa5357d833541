"""RangeLink syntax: encoder, decoder, portable block and quoting.

Python 3.13+.
"""

from .cursor import Cursor, ParseError, ParseResult
from .decoder import is_rangelink, parse_link
from .encoder import build_anchor, format_link, format_simple_line_reference, join_with_hash
from .portable import compose_portable_metadata, parse_portable_metadata, split_portable_block
from .quoting import needs_quoting, quote_link, quote_path, unquote_link

__all__ = [
    "Cursor",
    "ParseError",
    "ParseResult",
    "build_anchor",
    "compose_portable_metadata",
    "format_link",
    "format_simple_line_reference",
    "is_rangelink",
    "join_with_hash",
    "needs_quoting",
    "parse_link",
    "parse_portable_metadata",
    "quote_link",
    "quote_path",
    "split_portable_block",
    "unquote_link",
]
