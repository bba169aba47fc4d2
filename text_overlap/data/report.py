"""
Result data structures for text comparisons.
Provides a typed report instead of a raw dictionary of scores.
"""
from dataclasses import dataclass


@dataclass
class SimilarityReport:
    """
    All similarity scores for a single pair of texts.

    Attributes:
        line_similarity: Jaccard index of the trimmed line sets
        template_line_similarity: Same, with template lines removed
        shingle_similarity: Jaccard index of the shingle sets, template shingles removed
        shingle_length: Words per shingle used for shingle_similarity
    """
    line_similarity: float
    template_line_similarity: float
    shingle_similarity: float
    shingle_length: int

    def highest(self) -> float:
        """Largest of the three scores"""
        return max(self.line_similarity, self.template_line_similarity, self.shingle_similarity)

    def exceeds(self, threshold: float | None = None) -> bool:
        """Check if any score reaches the threshold (defaults to the configured similarity.threshold)"""
        if threshold is None:
            from text_overlap import config
            threshold = config.similarity.threshold
        return self.highest() >= threshold

    def to_dict(self) -> dict:
        """Convert to dictionary format"""
        return {
            "line_similarity": self.line_similarity,
            "template_line_similarity": self.template_line_similarity,
            "shingle_similarity": self.shingle_similarity,
            "shingle_length": self.shingle_length,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'SimilarityReport':
        """Create SimilarityReport from dictionary"""
        return cls(
            line_similarity=data["line_similarity"],
            template_line_similarity=data["template_line_similarity"],
            shingle_similarity=data["shingle_similarity"],
            shingle_length=data["shingle_length"],
        )
