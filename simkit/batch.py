"""
Column-wise similarity scoring over pandas DataFrames.

Summary:
- `score_columns` scores two columns row by row.
- `best_match` scores one source column against several candidate columns
  and keeps, per row, the best score and the column that produced it.

Missing cells (NaN/None) are compared as empty strings. Options are resolved
once up front, so invalid options fail before any row is scored.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Sequence, Union

import pandas as pd

from .engine import compute
from .errors import InvalidArgumentError
from .options import Algorithm, LengthMode, resolve_options

logger = logging.getLogger(__name__)


def _norm(x: Any) -> str:
    if x is None:
        return ""
    if not isinstance(x, str) and pd.isna(x):
        return ""
    return str(x)


def _check_columns(frame: pd.DataFrame, columns: Sequence[str]) -> None:
    missing = [c for c in columns if c not in frame.columns]
    if missing:
        raise InvalidArgumentError(f"Unknown column(s): {', '.join(map(str, missing))}")


def score_columns(
    frame: pd.DataFrame,
    left_column: str,
    right_column: str,
    algorithm: Union[str, Algorithm],
    options: Optional[Mapping[str, Any]] = None,
    mode: Union[str, LengthMode] = LengthMode.GRAPHEMES,
    output_column: Optional[str] = None,
) -> pd.DataFrame:
    """Return a copy of `frame` with a score column for `left_column` vs `right_column`."""
    selected = Algorithm.parse(algorithm)
    resolve_options(options, selected, mode)
    _check_columns(frame, [left_column, right_column])

    out = frame.copy()
    name = output_column or f"score_{selected.value}"
    out[name] = [
        compute(_norm(a), _norm(b), selected, options, mode)
        for a, b in zip(out[left_column], out[right_column])
    ]
    logger.info("Scored %d rows with %s into '%s'", len(out), selected, name)
    return out


def best_match(
    frame: pd.DataFrame,
    source_column: str,
    candidate_columns: Sequence[str],
    algorithm: Union[str, Algorithm],
    options: Optional[Mapping[str, Any]] = None,
    mode: Union[str, LengthMode] = LengthMode.GRAPHEMES,
    prefix: str = "best",
) -> pd.DataFrame:
    """Return a copy of `frame` with `<prefix>_score` and `<prefix>_column`.

    Ties keep the first candidate column; rows get None when there are no
    candidate columns.
    """
    selected = Algorithm.parse(algorithm)
    resolve_options(options, selected, mode)
    _check_columns(frame, [source_column, *candidate_columns])

    out = frame.copy()
    best_scores: List[Optional[float]] = []
    best_cols: List[Optional[str]] = []
    for _, row in out.iterrows():
        source = _norm(row[source_column])
        scores = [(compute(source, _norm(row[c]), selected, options, mode), c) for c in candidate_columns]
        # max() keeps the first of equal scores
        sc, bc = max(scores, key=lambda t: t[0]) if scores else (None, None)
        best_scores.append(sc)
        best_cols.append(bc)

    out[f"{prefix}_score"] = best_scores
    out[f"{prefix}_column"] = best_cols
    logger.info(
        "Matched %d rows against %d candidate column(s) with %s",
        len(out), len(candidate_columns), selected,
    )
    return out
