__version__ = "0.1.0"
from text_overlap.config import ConfigManager

config = ConfigManager()
cfg = config.load()

from text_overlap.core import *  # noqa: E402, F401, F403
from text_overlap.data import SimilarityReport  # noqa: E402
from text_overlap.utils.similarity import (line_similarity,  # noqa: E402
                                           shingle_similarity)

__all__ = [
    "__version__",
    "config",
    "cfg",
    "ConfigManager",
    "union",
    "intersection",
    "set_difference",
    "jaccard_index",
    "trimmed_lines",
    "as_lowercase_words",
    "shingle",
    "line_similarity",
    "shingle_similarity",
    "TextComparison",
    "compare",
    "SimilarityReport",
]
