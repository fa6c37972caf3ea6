"""
Global scorer registry and dispatch.

Exposes `SCORER_REGISTRY`: a mapping from an `Algorithm` member to a callable
of the form `(left: PreparedInput, right: PreparedInput, options: Options)
-> float`. Scorer modules add themselves on import (see `simkit/__init__.py`).
"""

from __future__ import annotations

from typing import Callable, Dict, Optional, Sequence

from .options import Algorithm, Options
from .text import PreparedInput

Scorer = Callable[[PreparedInput, PreparedInput, Options], float]

SCORER_REGISTRY: Dict[Algorithm, Scorer] = {}

# Scores this close to a bound are snapped onto it.
EPSILON = 1e-12


def degenerate_score(left: Sequence[str], right: Sequence[str]) -> Optional[float]:
    """1.0 when both sides are empty, 0.0 when exactly one is, else None."""
    if not left and not right:
        return 1.0
    if not left or not right:
        return 0.0
    return None


def finalize_score(score: float, threshold: float = 0.0) -> float:
    """Clamp to [0, 1], snap float noise at the bounds, then apply `threshold`."""
    score = max(0.0, min(1.0, float(score)))
    if abs(score - 1.0) < EPSILON:
        score = 1.0
    elif abs(score) < EPSILON:
        score = 0.0
    if threshold > 0.0 and score < threshold:
        return 0.0
    return score


def dispatch(
    algorithm: Algorithm, left: PreparedInput, right: PreparedInput, options: Options
) -> float:
    """Run the registered scorer for `algorithm` and return its raw score."""
    scorer = SCORER_REGISTRY[algorithm]
    return scorer(left, right, options)
