"""
Similarity measures between two texts, built on the set algebra.
"""
import logging

from text_overlap.core.sets import jaccard_index, set_difference
from text_overlap.core.text import as_lowercase_words, shingle, trimmed_lines

logger = logging.getLogger(__name__)


def line_similarity(text1: str, text2: str, template: str | None = None) -> float:
    """
    Jaccard index between the trimmed line sets of two texts.

    When a template is given, its trimmed lines are removed from both line
    sets before comparing. Removal happens after trimming, so a line that only
    partially matches a template line is kept.
    """
    lines1 = trimmed_lines(text1)
    lines2 = trimmed_lines(text2)
    if template is not None:
        template_lines = trimmed_lines(template)
        lines1 = set_difference(lines1, template_lines)
        lines2 = set_difference(lines2, template_lines)

    score = jaccard_index(lines1, lines2)
    logger.debug(f"Line similarity: {len(lines1)} vs {len(lines2)} lines -> {score:.4f}")
    return score


def shingle_similarity(text1: str, text2: str, template: str, shingle_length: int) -> float:
    """Jaccard index between the shingle sets of two texts, less the template's shingles."""
    template_shingles = shingle(as_lowercase_words(template), shingle_length)
    shingles1 = set_difference(shingle(as_lowercase_words(text1), shingle_length), template_shingles)
    shingles2 = set_difference(shingle(as_lowercase_words(text2), shingle_length), template_shingles)

    score = jaccard_index(shingles1, shingles2)
    logger.debug(
        f"Shingle similarity (k={shingle_length}): {len(shingles1)} vs {len(shingles2)} shingles, "
        f"{len(template_shingles)} template shingles removed -> {score:.4f}"
    )
    return score
