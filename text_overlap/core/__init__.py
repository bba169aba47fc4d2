"""
Core set algebra, text transforms and the comparison model.
"""

from .comparison import TextComparison, compare
from .sets import intersection, jaccard_index, set_difference, union
from .text import as_lowercase_words, shingle, trimmed_lines

__all__ = [
    "union",
    "intersection",
    "set_difference",
    "jaccard_index",
    "trimmed_lines",
    "as_lowercase_words",
    "shingle",
    "TextComparison",
    "compare",
]
