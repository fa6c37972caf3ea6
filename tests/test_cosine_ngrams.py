import math

import pytest

from simkit import compute


def test_token_bigrams_binary():
    score = compute("a b c d", "a b c e", "cosine-ngrams", {"n": 2})
    assert score == pytest.approx(2 / 3)


def test_unigrams_tfidf():
    score = compute("a b", "a c", "cosine-ngrams", {"n": 1, "weighting": "tfidf"})
    rare = math.log(1.5) + 1.0
    assert score == pytest.approx(1.0 / (1.0 + rare * rare))


def test_unigrams_tf():
    score = compute("a a b", "a b", "cosine-ngrams", {"n": 1, "weighting": "tf"})
    assert score == pytest.approx(3 / math.sqrt(10))


def test_short_sequences_collapse_to_one_ngram():
    assert compute("a b", "a b", "cosine-ngrams") == 1.0
    assert compute("a b", "a c", "cosine-ngrams") == 0.0


def test_character_trigrams():
    score = compute("abcd", "abce", "cosine-ngrams", {"granularity": "character"})
    # trigrams abc, bcd vs abc, bce
    assert score == pytest.approx(0.5)


@pytest.mark.parametrize("weighting", ["binary", "tf", "log", "augmented", "double-normalization-0.5", "tfidf"])
def test_every_weighting_is_reflexive_and_bounded(weighting):
    options = {"n": 2, "weighting": weighting}
    assert compute("the cat sat on the mat", "the cat sat on the mat", "cosine-ngrams", options) == 1.0
    score = compute("the cat sat on the mat", "the dog sat on the mat", "cosine-ngrams", options)
    assert 0.0 < score < 1.0
