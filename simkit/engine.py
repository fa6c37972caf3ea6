"""
Similarity engine entry point.

`compute(left, right, algorithm, options, mode)` resolves options, prepares
both inputs, runs one of the eleven registered scorers and post-processes the
result into a float in [0, 1]. Deterministic and side-effect-free; every
`InvalidArgumentError` is raised before any scoring work.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from .errors import InvalidArgumentError
from .options import Algorithm, LengthMode, resolve_options
from .registry import dispatch, finalize_score
from .text import prepare_input

logger = logging.getLogger(__name__)


def compute(
    left: str,
    right: str,
    algorithm: Union[str, Algorithm],
    options: Optional[Mapping[str, Any]] = None,
    mode: Union[str, LengthMode] = LengthMode.GRAPHEMES,
) -> float:
    """Score how similar `left` and `right` are under `algorithm`.

    Returns 1.0 for inputs identical under the active rules and 0.0 for
    maximally dissimilar or incomparable ones (one side empty). A score below a
    positive `threshold` option is returned as 0.0.
    """
    if not isinstance(left, str) or not isinstance(right, str):
        raise InvalidArgumentError("Similarity inputs must be strings.")

    selected = Algorithm.parse(algorithm)
    resolved = resolve_options(options, selected, mode)
    logger.debug(
        "Computing %s similarity (granularity=%s, mode=%s)",
        selected, resolved.granularity, resolved.mode,
    )

    prepared_left = prepare_input(left, resolved)
    prepared_right = prepare_input(right, resolved)

    raw = dispatch(selected, prepared_left, prepared_right, resolved)
    return finalize_score(raw, resolved.threshold)
