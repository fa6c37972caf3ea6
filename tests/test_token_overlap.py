import pytest

from simkit import SCORER_REGISTRY, Algorithm, resolve_options
from simkit import compute
from simkit.text import prepare_input


def test_registry_scorer_on_prepared_inputs():
    options = resolve_options({}, Algorithm.JACCARD)
    f = SCORER_REGISTRY[Algorithm.JACCARD]
    s = f(prepare_input("foo bar baz", options), prepare_input("baz bar foo", options), options)
    assert s == 1.0


def test_jaccard_identical():
    assert compute("foo bar baz", "foo bar baz", "jaccard", {}, "graphemes") == 1.0


def test_jaccard_set_mode():
    assert compute("a b c", "b c d", "jaccard") == pytest.approx(0.5)
    assert compute("a a b", "a b", "jaccard") == 1.0


def test_jaccard_multiset_mode():
    assert compute("a a b", "a b b", "jaccard", {"token_set": False}) == pytest.approx(0.5)
    assert compute("a a b", "a b", "jaccard", {"token_set": False}) == pytest.approx(2 / 3)


def test_sorensen_dice_set_mode():
    assert compute("a b c", "b c d", "sorensen-dice") == pytest.approx(2 / 3)


def test_sorensen_dice_multiset_mode():
    assert compute("a a b", "a b", "sorensen-dice", {"token_set": False}) == pytest.approx(0.8)


def test_case_and_punctuation_are_normalized():
    assert compute("Hello, World!", "hello world", "jaccard") == 1.0
    assert compute("Hello, world!", "hello world", "jaccard", {"case_sensitive": True}) == pytest.approx(1 / 3)


def test_word_granularity():
    score = compute("state-of-the-art", "state of the art", "jaccard", {"granularity": "word", "strip_punctuation": False})
    assert score == 1.0


def test_disjoint_tokens():
    assert compute("alpha beta", "gamma delta", "jaccard") == 0.0
    assert compute("alpha beta", "gamma delta", "sorensen-dice") == 0.0
