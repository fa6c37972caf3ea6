"""Sliding-window n-gram construction over token or character sequences."""

from __future__ import annotations

from typing import List, Sequence

# U+241F SYMBOL FOR UNIT SEPARATOR; joins the members of one n-gram.
NGRAM_SEPARATOR = "\u241f"


def build_ngrams(items: Sequence[str], n: int) -> List[str]:
    """Return the n-grams of `items` joined with `NGRAM_SEPARATOR`.

    Sequences of length 0 or 1, and windows of size 1, come back unchanged.
    A sequence shorter than `n` yields a single n-gram of the whole sequence.
    """
    count = len(items)
    if n <= 1 or count <= 1:
        return list(items)
    if count < n:
        return [NGRAM_SEPARATOR.join(items)]
    return [NGRAM_SEPARATOR.join(items[i:i + n]) for i in range(count - n + 1)]
