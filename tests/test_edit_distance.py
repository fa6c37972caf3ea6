import pytest

from simkit import compute
from simkit.edit_distance import damerau_levenshtein_distance


def test_levenshtein_identical():
    assert compute("kitten", "kitten", "levenshtein", {}, "graphemes") == 1.0


def test_levenshtein_kitten_sitting():
    assert compute("kitten", "sitting", "levenshtein", {}, "graphemes") == pytest.approx(1 - 3 / 7)


def test_levenshtein_counts_in_length_mode():
    # One grapheme differs; in bytes "é" is two units against one.
    assert compute("caf\u00e9", "cafe", "levenshtein", {}, "graphemes") == pytest.approx(0.75)
    assert compute("caf\u00e9", "cafe", "levenshtein", {}, "bytes") == pytest.approx(1 - 2 / 5)


def test_levenshtein_empty_sides():
    assert compute("", "", "levenshtein") == 1.0
    assert compute("abc", "", "levenshtein") == 0.0
    assert compute("!!!", "", "levenshtein") == 1.0


def test_damerau_distance_counts_transposition_once():
    assert damerau_levenshtein_distance("ca", "ac") == 1
    assert damerau_levenshtein_distance("abc", "acb") == 1
    # unrestricted: edits between transposed units are allowed
    assert damerau_levenshtein_distance("ca", "abc") == 2
    assert damerau_levenshtein_distance("ca", "ac", transposition_cost=2) == 2
    assert damerau_levenshtein_distance("", "abc") == 3


def test_damerau_night_nacht():
    # two substitutions
    score = compute("night", "nacht", "damerau-levenshtein", {"transposition_cost": 1}, "graphemes")
    assert score == pytest.approx(0.6)


def test_damerau_transposition_scores():
    assert compute("abcd", "abdc", "damerau-levenshtein") == pytest.approx(0.75)
    assert compute("abcd", "abdc", "levenshtein") == pytest.approx(0.5)
    assert compute("abcd", "abdc", "damerau-levenshtein", {"transposition_cost": 0}) == 1.0
