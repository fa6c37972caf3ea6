import pytest
from pydantic import ValidationError

from simkit import Algorithm, Granularity, InvalidArgumentError, LengthMode, Weighting, resolve_options


def test_global_defaults_are_applied():
    opts = resolve_options({}, Algorithm.LEVENSHTEIN, "graphemes")
    assert opts.granularity is Granularity.TOKEN
    assert opts.case_sensitive is False
    assert opts.normalize_whitespace is True
    assert opts.threshold == 0.0
    assert opts.mode is LengthMode.GRAPHEMES
    assert opts.tokenizer is None


def test_algorithm_defaults_override_global_defaults():
    gh = resolve_options(None, Algorithm.GITHUB_STYLE)
    assert gh.prefix_scale == pytest.approx(0.05)
    assert gh.prefix_limit == 3

    jw = resolve_options(None, Algorithm.JARO_WINKLER)
    assert jw.prefix_scale == pytest.approx(0.1)
    assert jw.prefix_limit == 4

    assert resolve_options(None, Algorithm.SOFT_TFIDF).weighting is Weighting.TFIDF
    assert resolve_options(None, Algorithm.COSINE_NGRAMS).weighting is Weighting.BINARY


def test_caller_overrides_win():
    opts = resolve_options({"prefix_limit": 2, "weighting": "TF"}, Algorithm.GITHUB_STYLE)
    assert opts.prefix_limit == 2
    assert opts.weighting is Weighting.TF


def test_strip_punctuation_follows_granularity_when_unset():
    assert resolve_options({}, Algorithm.JACCARD).strip_punctuation is True
    assert resolve_options({"granularity": "word"}, Algorithm.JACCARD).strip_punctuation is True
    assert resolve_options({"granularity": "character"}, Algorithm.JACCARD).strip_punctuation is False
    explicit = resolve_options({"granularity": "character", "strip_punctuation": True}, Algorithm.JACCARD)
    assert explicit.strip_punctuation is True


def test_numeric_fields_are_coerced_and_clamped():
    opts = resolve_options(
        {"prefix_limit": -3, "tau": 2, "n": 0, "transposition_cost": -1, "weight_common_prefix": -0.5, "threshold": "0.25"},
        Algorithm.MONGE_ELKAN,
    )
    assert opts.prefix_limit == 0
    assert opts.tau == 1.0
    assert opts.n == 1
    assert opts.transposition_cost == 0
    assert opts.weight_common_prefix == 0.0
    assert opts.threshold == pytest.approx(0.25)


def test_mode_option_overrides_ambient_mode():
    opts = resolve_options({"mode": "bytes"}, Algorithm.LEVENSHTEIN, "graphemes")
    assert opts.mode is LengthMode.BYTES


def test_enum_names_are_case_insensitive():
    assert Algorithm.parse(" Jaro-Winkler ") is Algorithm.JARO_WINKLER
    opts = resolve_options({"granularity": "WORD", "secondary_metric": "LEVENSHTEIN"}, Algorithm.MONGE_ELKAN)
    assert opts.granularity is Granularity.WORD
    assert opts.secondary_metric is Algorithm.LEVENSHTEIN


@pytest.mark.parametrize(
    "overrides",
    [
        {"granularity": "paragraph"},
        {"weighting": "bm25"},
        {"secondary_metric": "monge-elkan"},
        {"secondary_metric": "soft-tfidf"},
        {"secondary_metric": "hamming"},
        {"tokenizer": "not callable"},
        {"mode": "runes"},
        {"n": "three"},
        {"tau": None},
        {"symmetrical": True},
        {"case_sensitive": "sometimes"},
    ],
)
def test_invalid_options_are_rejected(overrides):
    with pytest.raises(InvalidArgumentError):
        resolve_options(overrides, Algorithm.MONGE_ELKAN)


def test_unknown_algorithm_is_rejected():
    with pytest.raises(InvalidArgumentError):
        Algorithm.parse("smith-waterman")


def test_invalid_argument_error_is_a_value_error():
    with pytest.raises(ValueError):
        resolve_options({"granularity": "paragraph"}, Algorithm.JACCARD)


def test_only_two_algorithms_are_composite():
    composite = {a for a in Algorithm if a.composite}
    assert composite == {Algorithm.MONGE_ELKAN, Algorithm.SOFT_TFIDF}


def test_options_are_immutable():
    opts = resolve_options({}, Algorithm.JACCARD)
    with pytest.raises(ValidationError):
        opts.n = 5


def test_symmetric_defaults_on_for_ratcliff_obershelp():
    assert resolve_options(None, Algorithm.RATCLIFF_OBERSHELP).symmetric is True
    opts = resolve_options({"symmetric": False}, Algorithm.RATCLIFF_OBERSHELP)
    assert opts.symmetric is False


def test_fractional_integers_are_truncated():
    opts = resolve_options({"n": 2.7, "prefix_limit": "2"}, Algorithm.COSINE_NGRAMS)
    assert opts.n == 2
    assert opts.prefix_limit == 2


def test_rejection_names_the_offending_option():
    with pytest.raises(InvalidArgumentError, match="weighting"):
        resolve_options({"weighting": "bm25"}, Algorithm.COSINE_NGRAMS)
