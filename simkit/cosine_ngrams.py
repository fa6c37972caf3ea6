"""
Cosine similarity over weighted n-grams.

Summary:
- Builds sliding n-grams of size `n` from the tokens (or from the characters
  when granularity is "character"), weights them per `weighting` and returns
  the cosine of the two vectors via scikit-learn.

Pros:
- Tolerant to local edits and reordering of distant parts.

Cons:
- Short inputs collapse to a single n-gram, so one differing unit zeroes the
  score.

Score range:
- Float in [0.0, 1.0]. Both empty -> 1.0; exactly one empty -> 0.0.
"""

from __future__ import annotations

from .ngrams import build_ngrams
from .options import Algorithm, Granularity, Options
from .registry import SCORER_REGISTRY, degenerate_score
from .text import PreparedInput
from .weighting import cosine


def score_cosine_ngrams(left: PreparedInput, right: PreparedInput, options: Options) -> float:
    if options.granularity is Granularity.CHARACTER:
        units_left, units_right = left.characters, right.characters
    else:
        units_left, units_right = left.tokens, right.tokens

    grams_left = build_ngrams(units_left, options.n)
    grams_right = build_ngrams(units_right, options.n)
    early = degenerate_score(grams_left, grams_right)
    if early is not None:
        return early
    return cosine(grams_left, grams_right, options.weighting)


SCORER_REGISTRY[Algorithm.COSINE_NGRAMS] = score_cosine_ngrams
