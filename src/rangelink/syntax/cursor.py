"""Immutable cursor infrastructure for the link scanner.

Implements the immutable cursor pattern for zero-`None` scanning.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Delimiters are matched as literal text, never compiled to regexes

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
"""

from dataclasses import dataclass, field

__all__ = ["Cursor", "ParseError", "ParseResult"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable position in a link anchor.

    Key Design Decisions:
        1. Frozen dataclass - Immutability enforced by Python
        2. Simple position - Just an integer offset
        3. EOF is a property - Not a return value
        4. current raises - No None handling needed

    Example:
        >>> cursor = Cursor("L10C5", 0)
        >>> cursor.current
        'L'
        >>> cursor.expect("L").current
        '1'
        >>> cursor.current  # Original unchanged (immutability)
        'L'
        >>> Cursor("L1", 2).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input.

        Returns:
            True if position >= source length
        """
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Returns:
            Current character at position

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected end of link at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    @property
    def remaining(self) -> str:
        """Unconsumed text from the current position."""
        return self.source[self.pos :]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions.

        Args:
            count: Number of positions to advance (default: 1)

        Returns:
            New Cursor instance at new position (original unchanged)
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos.

        Args:
            end_pos: End position (exclusive)

        Returns:
            Source substring from current position to end_pos

        Example:
            >>> cursor = Cursor("L10C5", 1)
            >>> start_cursor = cursor
            >>> while not cursor.is_eof and cursor.current.isdigit():
            ...     cursor = cursor.advance()
            >>> start_cursor.slice_to(cursor.pos)
            '10'
        """
        return self.source[self.pos : end_pos]

    def starts_with(self, token: str) -> bool:
        """Check whether the unconsumed text begins with token.

        Matching is case-sensitive. An empty token never matches.
        """
        return bool(token) and self.source.startswith(token, self.pos)

    def expect(self, token: str) -> "Cursor | None":
        """Consume token if the text at the cursor matches it.

        Args:
            token: Expected text (a delimiter may be several characters)

        Returns:
            New cursor advanced past the token, or None if no match or
            at EOF

        Example:
            >>> Cursor("->L5", 0).expect("->").pos
            2
            >>> Cursor("L5", 0).expect("C") is None
            True
        """
        if self.starts_with(token):
            return self.advance(len(token))
        return None


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Scanner result containing parsed value and new cursor position.

    Type Parameters:
        T: The type of the parsed value

    Pattern:
        Every scanner step has signature:
            def scan_foo(cursor: Cursor) -> ParseResult[Foo] | ParseError

    Example:
        >>> cursor = Cursor("L5", 0)
        >>> result = ParseResult("L", cursor.advance())
        >>> result.value
        'L'
        >>> result.cursor.current
        '5'
    """

    value: T
    cursor: Cursor


@dataclass(frozen=True, slots=True)
class ParseError:
    """Scan failure with location and context.

    Example:
        >>> error = ParseError("Expected column", Cursor("L5C", 3), expected=("0-9",))
        >>> error.format_error()
        "3: Expected column (expected: '0-9')"
    """

    message: str
    cursor: Cursor
    expected: tuple[str, ...] = field(default_factory=tuple)

    @property
    def position(self) -> int:
        """Offset where scanning stopped."""
        return self.cursor.pos

    def format_error(self) -> str:
        """Format error with its offset.

        Returns:
            Formatted error string with location
        """
        error_msg = f"{self.cursor.pos}: {self.message}"

        if self.expected:
            expected_str = ", ".join(f"'{e}'" for e in self.expected)
            error_msg += f" (expected: {expected_str})"

        return error_msg
