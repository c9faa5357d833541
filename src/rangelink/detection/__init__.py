"""Detection of RangeLinks in free text.

Python 3.13+.
"""

from .finder import TRAILING_PUNCTUATION, find_links_in_text
from .overlap import OccupiedRange, OverlapClassification, classify_overlap

__all__ = [
    "TRAILING_PUNCTUATION",
    "OccupiedRange",
    "OverlapClassification",
    "classify_overlap",
    "find_links_in_text",
]
