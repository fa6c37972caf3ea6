"""
Order-aware sequence scorers over tokens.

Summary:
- lcs-myers: 2 * LCS / (len(left) + len(right)), with an optional bonus for
  a shared leading run weighted by `weight_common_prefix` (capped at 1.0).
  The LCS length comes from `rapidfuzz.distance.LCSseq`, a bit-parallel
  implementation.
- ratcliff-obershelp: gestalt pattern matching. Take the longest common
  contiguous run, recurse on both sides of it and sum the matched lengths.
  `difflib.SequenceMatcher` with autojunk disabled does exactly this. With
  `symmetric` (the default) the match count is taken in both argument
  orders and the two ratios are averaged.
- github-style: the LCS ratio plus `prefix_scale` per shared leading token,
  up to `prefix_limit` tokens. The bonus is not capped here; the engine
  clamps the final score.

Score range:
- Both empty -> 1.0; exactly one empty -> 0.0.
"""

from __future__ import annotations

from difflib import SequenceMatcher
from typing import Sequence

from rapidfuzz.distance import LCSseq

from .jaro_winkler import common_prefix_length
from .options import Algorithm, Options
from .registry import SCORER_REGISTRY, degenerate_score
from .text import PreparedInput


def lcs_length(left: Sequence[str], right: Sequence[str]) -> int:
    if not left or not right:
        return 0
    return int(LCSseq.similarity(list(left), list(right)))


def lcs_ratio(left: Sequence[str], right: Sequence[str]) -> float:
    return 2.0 * lcs_length(left, right) / (len(left) + len(right))


def score_lcs_myers(left: PreparedInput, right: PreparedInput, options: Options) -> float:
    a, b = left.tokens, right.tokens
    early = degenerate_score(a, b)
    if early is not None:
        return early

    base = lcs_ratio(a, b)
    if options.weight_common_prefix <= 0.0:
        return base

    shorter = min(len(a), len(b))
    prefix = common_prefix_length(a, b, shorter)
    if prefix == 0:
        return base
    return min(1.0, base + prefix * options.weight_common_prefix / shorter)


def ratcliff_obershelp_matches(left: Sequence[str], right: Sequence[str]) -> int:
    matcher = SequenceMatcher(None, list(left), list(right), autojunk=False)
    return sum(block.size for block in matcher.get_matching_blocks())


def score_ratcliff_obershelp(left: PreparedInput, right: PreparedInput, options: Options) -> float:
    a, b = left.tokens, right.tokens
    early = degenerate_score(a, b)
    if early is not None:
        return early

    total = len(a) + len(b)
    forward = 2.0 * ratcliff_obershelp_matches(a, b) / total
    if not options.symmetric:
        return forward
    # The longest run found first depends on which side is scanned.
    backward = 2.0 * ratcliff_obershelp_matches(b, a) / total
    return (forward + backward) / 2.0


def score_github_style(left: PreparedInput, right: PreparedInput, options: Options) -> float:
    a, b = left.tokens, right.tokens
    early = degenerate_score(a, b)
    if early is not None:
        return early

    ratio = lcs_ratio(a, b)
    prefix = common_prefix_length(a, b, options.prefix_limit)
    return ratio + prefix * options.prefix_scale


SCORER_REGISTRY[Algorithm.LCS_MYERS] = score_lcs_myers
SCORER_REGISTRY[Algorithm.RATCLIFF_OBERSHELP] = score_ratcliff_obershelp
SCORER_REGISTRY[Algorithm.GITHUB_STYLE] = score_github_style
