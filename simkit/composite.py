"""
Composite token scorers: Monge-Elkan and Soft TF-IDF.

Both compare individual token pairs with a simpler "secondary" algorithm run
at character granularity, case-sensitive, with no whitespace or punctuation
normalization, so the token-pair score is independent of the outer
normalization policy. Pairs scoring below `tau` do not count as matches.

- monge-elkan: mean over tokens of the best secondary score against the other
  side, averaged over both directions.
- soft-tfidf: sum of weight_a * weight_b * best score over matched token
  pairs, divided by the product of the vector norms and capped at 1.0.
  Computed in both directions and averaged.
"""

from __future__ import annotations

from typing import Dict, Mapping, Sequence

from .errors import InvalidArgumentError
from .options import Algorithm, LengthMode, Options, resolve_options
from .registry import SCORER_REGISTRY, degenerate_score, finalize_score
from .text import PreparedInput, prepare_input
from .weighting import vector_norm, weight_maps

SECONDARY_OVERRIDES = {
    "granularity": "character",
    "case_sensitive": True,
    "normalize_whitespace": False,
    "strip_punctuation": False,
    "threshold": 0.0,
}


class SecondaryMetric:
    """Scores bare token pairs with one non-composite algorithm.

    Lives for a single `compute` call; prepared tokens are cached per instance.
    """

    def __init__(self, algorithm: Algorithm):
        if algorithm.composite:
            raise InvalidArgumentError("Composite algorithms cannot be used as secondary metrics.")
        self.algorithm = algorithm
        self.options = resolve_options(SECONDARY_OVERRIDES, algorithm, LengthMode.CODEPOINTS)
        self._scorer = SCORER_REGISTRY[algorithm]
        self._prepared: Dict[str, PreparedInput] = {}

    def _prepare(self, token: str) -> PreparedInput:
        prepared = self._prepared.get(token)
        if prepared is None:
            prepared = prepare_input(token, self.options)
            self._prepared[token] = prepared
        return prepared

    def __call__(self, left: str, right: str) -> float:
        raw = self._scorer(self._prepare(left), self._prepare(right), self.options)
        return finalize_score(raw)


def _monge_elkan_direction(
    primary: Sequence[str], candidates: Sequence[str], metric: SecondaryMetric, tau: float
) -> float:
    total = 0.0
    for token in primary:
        best = 0.0
        for candidate in candidates:
            score = metric(token, candidate)
            if score >= tau and score > best:
                best = score
        total += best
    return total / len(primary)


def score_monge_elkan(left: PreparedInput, right: PreparedInput, options: Options) -> float:
    a, b = left.tokens, right.tokens
    early = degenerate_score(a, b)
    if early is not None:
        return early

    metric = SecondaryMetric(options.secondary_metric)
    forward = _monge_elkan_direction(a, b, metric, options.tau)
    backward = _monge_elkan_direction(b, a, metric, options.tau)
    return (forward + backward) / 2.0


def _soft_tfidf_direction(
    weights_primary: Mapping[str, float],
    weights_candidates: Mapping[str, float],
    metric: SecondaryMetric,
    tau: float,
) -> float:
    total = 0.0
    for token, weight in weights_primary.items():
        best_score = 0.0
        best_token = None
        for candidate in weights_candidates:
            score = metric(token, candidate)
            if score >= tau and score > best_score:
                best_score = score
                best_token = candidate
        if best_token is not None:
            total += weight * weights_candidates[best_token] * best_score
    return total


def score_soft_tfidf(left: PreparedInput, right: PreparedInput, options: Options) -> float:
    a, b = left.tokens, right.tokens
    early = degenerate_score(a, b)
    if early is not None:
        return early

    weights_a, weights_b = weight_maps(a, b, options.weighting)
    norms = vector_norm(weights_a) * vector_norm(weights_b)
    if norms == 0.0:
        return 0.0

    metric = SecondaryMetric(options.secondary_metric)
    forward = min(1.0, _soft_tfidf_direction(weights_a, weights_b, metric, options.tau) / norms)
    backward = min(1.0, _soft_tfidf_direction(weights_b, weights_a, metric, options.tau) / norms)
    return (forward + backward) / 2.0


SCORER_REGISTRY[Algorithm.MONGE_ELKAN] = score_monge_elkan
SCORER_REGISTRY[Algorithm.SOFT_TFIDF] = score_soft_tfidf
