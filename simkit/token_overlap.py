"""
Token overlap scorers: Jaccard and Sorensen-Dice.

Summary:
- Order-insensitive. With `token_set` (default) duplicates are ignored; with
  `token_set=False` tokens are counted as a multiset using per-token min/max
  counts.

Score range:
- Float in [0.0, 1.0]. Both empty -> 1.0; exactly one empty -> 0.0.
"""

from __future__ import annotations

from collections import Counter

from .options import Algorithm, Options
from .registry import SCORER_REGISTRY, degenerate_score
from .text import PreparedInput


def score_jaccard(left: PreparedInput, right: PreparedInput, options: Options) -> float:
    a, b = left.tokens, right.tokens
    early = degenerate_score(a, b)
    if early is not None:
        return early

    if options.token_set:
        set_a, set_b = set(a), set(b)
        return len(set_a & set_b) / len(set_a | set_b)

    counts_a, counts_b = Counter(a), Counter(b)
    intersection = sum((counts_a & counts_b).values())
    union = sum((counts_a | counts_b).values())
    return intersection / union


def score_sorensen_dice(left: PreparedInput, right: PreparedInput, options: Options) -> float:
    a, b = left.tokens, right.tokens
    early = degenerate_score(a, b)
    if early is not None:
        return early

    if options.token_set:
        set_a, set_b = set(a), set(b)
        return 2.0 * len(set_a & set_b) / (len(set_a) + len(set_b))

    counts_a, counts_b = Counter(a), Counter(b)
    intersection = sum((counts_a & counts_b).values())
    return 2.0 * intersection / (len(a) + len(b))


SCORER_REGISTRY[Algorithm.JACCARD] = score_jaccard
SCORER_REGISTRY[Algorithm.SORENSEN_DICE] = score_sorensen_dice
