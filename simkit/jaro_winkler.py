"""
Jaro-Winkler similarity over characters.

Summary:
- Jaro: units match when equal and no further apart than
  floor(max(len) / 2) - 1 positions; half the out-of-order matches count as
  transpositions.
- Winkler: boosts the Jaro score for a shared prefix of up to `prefix_limit`
  units, scaled by `prefix_scale`.

When to use:
- Short strings such as names or single tokens; it is the default secondary
  metric for the composite scorers.

Score range:
- Float in [0.0, 1.0] for prefix_scale * prefix_limit <= 1. Both empty -> 1.0;
  exactly one empty -> 0.0.
"""

from __future__ import annotations

from typing import Sequence

from .options import Algorithm, Options
from .registry import SCORER_REGISTRY, degenerate_score
from .text import PreparedInput


# Greedy scan: each unit takes the first free equal unit inside the window.
# rapidfuzz's Jaro pairs units differently and can score higher, and its
# JaroWinkler fixes the prefix limit at 4, so neither is used here.
def jaro_similarity(left: Sequence[str], right: Sequence[str]) -> float:
    len_left, len_right = len(left), len(right)
    window = max(0, max(len_left, len_right) // 2 - 1)

    matched_left = [False] * len_left
    matched_right = [False] * len_right
    matches = 0
    for i, unit in enumerate(left):
        start = max(0, i - window)
        end = min(len_right - 1, i + window)
        for j in range(start, end + 1):
            if not matched_right[j] and right[j] == unit:
                matched_left[i] = matched_right[j] = True
                matches += 1
                break

    if matches == 0:
        return 0.0

    out_of_order = 0
    k = 0
    for i, unit in enumerate(left):
        if not matched_left[i]:
            continue
        while not matched_right[k]:
            k += 1
        if unit != right[k]:
            out_of_order += 1
        k += 1

    transpositions = out_of_order / 2.0
    return (
        matches / len_left
        + matches / len_right
        + (matches - transpositions) / matches
    ) / 3.0


def common_prefix_length(left: Sequence[str], right: Sequence[str], limit: int) -> int:
    prefix = 0
    for a, b in zip(left[:limit], right[:limit]):
        if a != b:
            break
        prefix += 1
    return prefix


def score_jaro_winkler(left: PreparedInput, right: PreparedInput, options: Options) -> float:
    a, b = left.characters, right.characters
    early = degenerate_score(a, b)
    if early is not None:
        return early
    if a == b:
        return 1.0

    jaro = jaro_similarity(a, b)
    prefix = common_prefix_length(a, b, options.prefix_limit)
    return jaro + prefix * options.prefix_scale * (1.0 - jaro)


SCORER_REGISTRY[Algorithm.JARO_WINKLER] = score_jaro_winkler
