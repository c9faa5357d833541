"""Finding RangeLinks in free text.

Architecture:
    - _detect_unquoted(): Pass 1 - whitespace-delimited words, trailing
      sentence punctuation trimmed until the word decodes
    - _detect_quoted(): Pass 2 - '...' and "..." segments; a quoted link
      replaces the unquoted matches it encompasses
    - find_links_in_text(): Main entry point, runs both passes

Python 3.13+.
"""

import logging
import re
from dataclasses import dataclass

from rangelink.enums import OverlapKind
from rangelink.model import DelimiterConfig, DetectedLink, ParsedLink
from rangelink.syntax import parse_link

from .overlap import OccupiedRange, classify_overlap

__all__ = ["TRAILING_PUNCTUATION", "find_links_in_text"]

# Characters that end sentences or close brackets around an inline link
TRAILING_PUNCTUATION: frozenset[str] = frozenset(".,;:!?)]}>\"'")

_WORD = re.compile(r"\S+")
_QUOTED_SEGMENT = re.compile(r"(['\"])([^'\"]+)\1")


@dataclass(slots=True)
class _DetectionState:
    """Links and claimed spans accumulated across passes."""

    links: list[DetectedLink]
    occupied: list[OccupiedRange]
    unquoted_words: int = 0
    parse_failures: int = 0
    quoted_candidates: int = 0
    quoted_parse_failures: int = 0
    quoted_replacements: int = 0

    def add(self, link: DetectedLink) -> None:
        self.links.append(link)
        self.occupied.append(OccupiedRange(link.start_index, link.end_index))

    def remove(self, indices: tuple[int, ...]) -> None:
        for index in reversed(indices):
            del self.links[index]
            del self.occupied[index]


def _parse_word(word: str, delimiters: DelimiterConfig) -> tuple[str, ParsedLink] | None:
    """Decode a word, trimming trailing punctuation until it parses."""
    candidate = word
    while candidate:
        parsed, _ = parse_link(candidate, delimiters)
        if parsed is not None:
            return (candidate, parsed)
        if candidate[-1] not in TRAILING_PUNCTUATION:
            return None
        candidate = candidate[:-1]
    return None


def _detect_unquoted(
    text: str, delimiters: DelimiterConfig, state: _DetectionState, log: logging.Logger
) -> None:
    for match in _WORD.finditer(text):
        state.unquoted_words += 1
        word = match.group()
        detected = _parse_word(word, delimiters)
        if detected is None:
            state.parse_failures += 1
            continue
        link_text, parsed = detected
        state.add(DetectedLink(link_text, match.start(), len(link_text), parsed))
        log.debug("Detected link %s at offset %d", link_text, match.start())


def _detect_quoted(
    text: str, delimiters: DelimiterConfig, state: _DetectionState, log: logging.Logger
) -> None:
    for match in _QUOTED_SEGMENT.finditer(text):
        state.quoted_candidates += 1
        inner = match.group(2)
        start, end = match.start(), match.end()

        overlap = classify_overlap(start, end, state.occupied)
        if overlap.kind is OverlapKind.PARTIAL:
            continue

        parsed, _ = parse_link(inner, delimiters)
        if parsed is None:
            state.quoted_parse_failures += 1
            continue

        if overlap.encompassed_indices:
            state.remove(overlap.encompassed_indices)
            state.quoted_replacements += len(overlap.encompassed_indices)
            log.debug(
                "Quoted link %s replaced %d unquoted match(es)",
                inner,
                len(overlap.encompassed_indices),
            )

        state.add(DetectedLink(inner, start, end - start, parsed))


def find_links_in_text(
    text: str,
    delimiters: DelimiterConfig,
    *,
    logger: logging.Logger | None = None,
) -> list[DetectedLink]:
    """Find every RangeLink in a block of text.

    Portable links are recognized regardless of ``delimiters``.

    Args:
        text: Text to search (terminal output, document contents, ...)
        delimiters: Active delimiter configuration for regular links
        logger: Logger receiving the detection summary (module logger when
            omitted)

    Returns:
        Detected links ordered by start offset

    Example:
        >>> text = "see src/a.ts#L3-L5, then 'my file.py#L1'"
        >>> links = find_links_in_text(text, DEFAULT_DELIMITERS)
        >>> [(link.link_text, link.start_index) for link in links]
        [('src/a.ts#L3-L5', 4), ('my file.py#L1', 25)]
    """
    log = logger if logger is not None else logging.getLogger(__name__)
    state = _DetectionState(links=[], occupied=[])

    _detect_unquoted(text, delimiters, state, log)
    _detect_quoted(text, delimiters, state, log)

    if state.links or state.quoted_candidates:
        log.debug(
            "Link detection complete: %d link(s) in %d chars "
            "(%d words, %d quoted candidates, %d replacements)",
            len(state.links),
            len(text),
            state.unquoted_words,
            state.quoted_candidates,
            state.quoted_replacements,
        )

    return sorted(state.links, key=lambda link: link.start_index)
