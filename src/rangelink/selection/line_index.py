"""Line length lookups over a text buffer.

Python 3.13+.
"""

__all__ = ["LineIndex"]


class LineIndex:
    """Precomputed line lengths of a text buffer.

    Scans the text once, then answers line-length lookups in O(1).
    Instances are callable and serve as the ``line_length`` accessor of
    ``normalize_selections``.

    Lines end at ``\\n``; a ``\\r`` before it is not counted in the line
    length. Text ending with a newline has a final empty line, as in
    editors.

    Example:
        >>> index = LineIndex("abc\\r\\ndefg\\n")
        >>> index(0), index(1), index(2)
        (3, 4, 0)

    Thread Safety:
        Thread-safe. Internal state is only set during __init__.
    """

    __slots__ = ("_lengths",)

    def __init__(self, text: str) -> None:
        """Build the index.

        Args:
            text: Buffer contents

        Complexity:
            O(n) where n = len(text)
        """
        offsets = [0]
        lengths: list[int] = []
        for i, char in enumerate(text):
            if char == "\n":
                end = i - 1 if i > offsets[-1] and text[i - 1] == "\r" else i
                lengths.append(end - offsets[-1])
                offsets.append(i + 1)
        last = len(text) - offsets[-1]
        if last and text.endswith("\r"):
            last -= 1
        lengths.append(last)
        self._lengths: tuple[int, ...] = tuple(lengths)

    def __call__(self, line: int) -> int:
        """Length of a 0-based line, excluding its terminator.

        Raises:
            IndexError: If the line does not exist
        """
        if line < 0 or line >= len(self._lengths):
            msg = f"line {line} out of range (0..{len(self._lengths) - 1})"
            raise IndexError(msg)
        return self._lengths[line]

    def __len__(self) -> int:
        return len(self._lengths)

    @property
    def line_count(self) -> int:
        """Number of lines (at least 1)."""
        return len(self._lengths)
