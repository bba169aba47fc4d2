from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field

from text_overlap.data.report import SimilarityReport
from text_overlap.utils.similarity import line_similarity, shingle_similarity

logger = logging.getLogger(__name__)


def _default_shingle_length() -> int:
    from text_overlap import config
    return int(config.similarity.shingle_length)


class TextComparison(BaseModel):
    """
    A request to compare two texts against an optional shared template.

    The template holds whatever the two texts are expected to have in common
    (starter code, assignment boilerplate, a letterhead). Its lines and
    shingles are removed before scoring.

    Examples:
        # Default shingle length from config
        TextComparison(text1=essay_a, text2=essay_b).score()

        # With a template and explicit shingle length
        TextComparison(
            text1=submission_a,
            text2=submission_b,
            template=starter_code,
            shingle_length=4
        ).score()
    """
    model_config = ConfigDict(frozen=True, strict=True)

    text1: str = Field(description="First text")
    text2: str = Field(description="Second text")
    template: str = Field("", description="Text shared by both that should not count as overlap")
    shingle_length: int = Field(
        default_factory=_default_shingle_length,
        ge=1,
        description="Adjacent words per shingle"
    )

    def score(self) -> SimilarityReport:
        """Run every similarity measure on this pair."""
        report = SimilarityReport(
            line_similarity=line_similarity(self.text1, self.text2),
            template_line_similarity=line_similarity(self.text1, self.text2, self.template),
            shingle_similarity=shingle_similarity(
                self.text1, self.text2, self.template, self.shingle_length
            ),
            shingle_length=self.shingle_length,
        )
        logger.debug(f"Comparison scored: {report}")
        return report


def compare(
    text1: str,
    text2: str,
    template: str = "",
    shingle_length: int | None = None
) -> SimilarityReport:
    """
    Score two texts with all similarity measures.

    Args:
        text1: First text
        text2: Second text
        template: Text shared by both, removed before scoring
        shingle_length: Words per shingle (None uses the configured similarity.shingle_length)

    Returns:
        SimilarityReport with every score

    Raises:
        pydantic.ValidationError: If a text is not a str or shingle_length is not an int >= 1
    """
    data = {"text1": text1, "text2": text2, "template": template}
    if shingle_length is not None:
        data["shingle_length"] = shingle_length
    return TextComparison(**data).score()
