"""Shell-style quoting of links whose path has unsafe characters.

Python 3.13+. Zero external dependencies.
"""

from rangelink.constants import SAFE_PATH_CHARS

__all__ = ["needs_quoting", "quote_link", "quote_path", "unquote_link"]

_QUOTE = "'"
_ESCAPED_QUOTE = "'\\''"


def needs_quoting(path: str) -> bool:
    """Check whether a path has characters outside ``[A-Za-z0-9_.-/:]``.

    Empty paths never need quoting.
    """
    return any(ch not in SAFE_PATH_CHARS for ch in path)


def _quote(text: str) -> str:
    return _QUOTE + text.replace(_QUOTE, _ESCAPED_QUOTE) + _QUOTE


def quote_link(link: str, path: str) -> str:
    """Wrap a link in single quotes when its path needs quoting.

    Embedded single quotes are escaped POSIX style (``'\\''``).

    Example:
        >>> quote_link("my file.ts#L3", "my file.ts")
        "'my file.ts#L3'"
        >>> quote_link("src/a.ts#L3", "src/a.ts")
        'src/a.ts#L3'
    """
    if not needs_quoting(path):
        return link
    return _quote(link)


def quote_path(path: str) -> str:
    """Wrap a path in single quotes when it needs quoting."""
    return quote_link(path, path)


def unquote_link(text: str) -> str:
    """Reverse quote_link.

    Text not wrapped in single quotes is returned unchanged.
    """
    if len(text) >= 2 and text.startswith(_QUOTE) and text.endswith(_QUOTE):
        return text[1:-1].replace(_ESCAPED_QUOTE, _QUOTE)
    return text
