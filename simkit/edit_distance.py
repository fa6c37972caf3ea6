"""
Edit-distance scorers: Levenshtein and true Damerau-Levenshtein.

Summary:
- levenshtein: classic insert/delete/substitute distance over the normalized
  string, measured in units of the active length mode (bytes, codepoints or
  graphemes). Uses `rapidfuzz.distance.Levenshtein` on the unit sequences.
- damerau-levenshtein: unrestricted Damerau-Levenshtein distance, where a
  transposition of two adjacent units (possibly with edits between them)
  costs `transposition_cost`.

Score range:
- 1 - distance / max(len(left), len(right)). Both empty -> 1.0.
"""

from __future__ import annotations

from typing import Dict, List, Sequence

from rapidfuzz.distance import Levenshtein

from .options import Algorithm, Options
from .registry import SCORER_REGISTRY, degenerate_score
from .text import PreparedInput, string_length


def score_levenshtein(left: PreparedInput, right: PreparedInput, options: Options) -> float:
    if not left.normalized and not right.normalized:
        return 1.0
    length = max(
        string_length(left.normalized, options.mode),
        string_length(right.normalized, options.mode),
    )
    if length == 0:
        return 1.0
    distance = Levenshtein.distance(list(left.characters), list(right.characters))
    return 1.0 - distance / length


def damerau_levenshtein_distance(
    source: Sequence[str], target: Sequence[str], transposition_cost: int = 1
) -> int:
    """Distance with adjacent transpositions (Lowrance-Wagner recurrence).

    The matrix carries a border row and column filled with an upper bound on
    the distance; `last_row` remembers the last source row where each unit
    was seen.
    """
    len_source = len(source)
    len_target = len(target)
    infinity = len_source + len_target

    matrix: List[List[int]] = [[0] * (len_target + 2) for _ in range(len_source + 2)]
    matrix[0][0] = infinity
    for i in range(len_source + 1):
        matrix[i + 1][0] = infinity
        matrix[i + 1][1] = i
    for j in range(len_target + 1):
        matrix[0][j + 1] = infinity
        matrix[1][j + 1] = j

    last_row: Dict[str, int] = {}
    for i in range(1, len_source + 1):
        source_unit = source[i - 1]
        last_match_col = 0
        for j in range(1, len_target + 1):
            target_unit = target[j - 1]
            i1 = last_row.get(target_unit, 0)
            j1 = last_match_col
            cost = 0 if source_unit == target_unit else 1
            if cost == 0:
                last_match_col = j
            matrix[i + 1][j + 1] = min(
                matrix[i][j] + cost,
                matrix[i + 1][j] + 1,
                matrix[i][j + 1] + 1,
                matrix[i1][j1] + (i - i1 - 1) + (j - j1 - 1) + transposition_cost,
            )
        last_row[source_unit] = i

    return matrix[len_source + 1][len_target + 1]


def score_damerau_levenshtein(left: PreparedInput, right: PreparedInput, options: Options) -> float:
    a, b = left.characters, right.characters
    if a == b:
        return 1.0
    early = degenerate_score(a, b)
    if early is not None:
        return early
    distance = damerau_levenshtein_distance(a, b, options.transposition_cost)
    return 1.0 - distance / max(len(a), len(b))


SCORER_REGISTRY[Algorithm.LEVENSHTEIN] = score_levenshtein
SCORER_REGISTRY[Algorithm.DAMERAU_LEVENSHTEIN] = score_damerau_levenshtein
