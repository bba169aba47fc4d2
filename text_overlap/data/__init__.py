"""Result data structures for text comparisons"""

from text_overlap.data.report import SimilarityReport

__all__ = [
    "SimilarityReport",
]
