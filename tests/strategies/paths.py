"""Hypothesis strategies for link paths.

Events emitted:
- path_quoted={true|false}: Whether the path needs shell quoting
"""

from __future__ import annotations

from hypothesis import event
from hypothesis import strategies as st

from rangelink.syntax import needs_quoting

# Letters, digits and common path punctuation; spaces force quoting
PATH_ALPHABET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789/._- ()"

_PATH_EDGE = "abcdefghijklmnopqrstuvwxyz0123456789_."


@st.composite
def link_paths(draw: st.DrawFn, exclude: str = "#") -> str:
    """Generate a path that decodes back unchanged.

    Args:
        exclude: Characters the path must not contain (the hash of the
            delimiters in use, which would make the link ambiguous)

    Events emitted:
    - path_quoted={true|false}
    """
    alphabet = "".join(ch for ch in PATH_ALPHABET if ch not in exclude)
    edge = "".join(ch for ch in _PATH_EDGE if ch not in exclude)
    head = draw(st.sampled_from(edge))
    middle = draw(st.text(alphabet=alphabet, max_size=30))
    tail = draw(st.sampled_from(edge))
    path = head + middle + tail
    event(f"path_quoted={str(needs_quoting(path)).lower()}")
    return path
