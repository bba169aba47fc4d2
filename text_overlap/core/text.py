"""
Text-to-set transforms: trimmed lines, lowercase words and k-shingles.
"""
from __future__ import annotations

import re
from collections.abc import Sequence

# Letters and digits only; underscore counts as a separator
_WORD_RE = re.compile(r"[^\W_]+")


def _require_text(text: str, name: str = "text") -> str:
    if not isinstance(text, str):
        raise TypeError(f"{name} must be a str, got {type(text).__name__}")
    return text


def trimmed_lines(text: str) -> set[str]:
    """
    Return the set of non-empty lines in a text, stripped of leading and
    trailing whitespace.

    Example:
        trimmed_lines("  a  \\n\\n b \\n")  # {"a", "b"}
    """
    _require_text(text)
    return {line.strip() for line in text.split("\n") if line.strip()}


def as_lowercase_words(text: str) -> list[str]:
    """
    Return the words of a text, lowercased, in the order they appear.

    A word is a maximal run of letters and digits; every other character
    separates words. Duplicates are kept.

    Example:
        as_lowercase_words("Hi, there! 123 go-go")
        # ["hi", "there", "123", "go", "go"]
    """
    _require_text(text)
    return [word.lower() for word in _WORD_RE.findall(text)]


def shingle(words: Sequence[str], shingle_length: int) -> set[str]:
    """
    Return the k-shingles of a word sequence.

    A k-shingle is the concatenation, with no separator, of k adjacent words.
    A sequence shorter than k has no shingles.

    Args:
        words: Words in order (case is kept as given)
        shingle_length: Number of adjacent words per shingle (k >= 1)

    Returns:
        Set of shingle strings

    Raises:
        TypeError: If shingle_length is not an int
        ValueError: If shingle_length < 1

    Example:
        shingle(["a", "very", "fine", "young", "man", "I", "know"], 3)
        # {"averyfine", "veryfineyoung", "fineyoungman", "youngmanI", "manIknow"}
    """
    if isinstance(shingle_length, bool) or not isinstance(shingle_length, int):
        raise TypeError(f"shingle_length must be an int, got {type(shingle_length).__name__}")
    if shingle_length < 1:
        raise ValueError(f"shingle_length must be >= 1, got {shingle_length}")

    return {
        "".join(words[i:i + shingle_length])
        for i in range(len(words) - shingle_length + 1)
    }
