"""
Term weighting over the two-document corpus formed by a comparison.

Summary:
- Counts the distinct values of both sides with scikit-learn's
  `CountVectorizer` (identity analyzer, so items are used as-is) and turns
  the counts into weights under one of the six strategies.

Strategies (per distinct value, count > 0):
- binary: 1
- tf: raw count
- log: 1 + ln(count)
- augmented / double-normalization-0.5: 0.5 + 0.5 * count / max count
- tfidf: count * (ln((D + 1) / (df + 1)) + 1) with D = 2. This is exactly
  scikit-learn's smoothed idf, so `TfidfTransformer(norm=None)` computes it.
"""

from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

import numpy as np
from scipy.sparse import csr_matrix
from sklearn.feature_extraction.text import CountVectorizer, TfidfTransformer
from sklearn.metrics.pairwise import cosine_similarity

from .options import Weighting


def _identity(doc: List[str]) -> List[str]:
    return doc


def weight_matrix(
    left: Sequence[str], right: Sequence[str], weighting: Weighting
) -> Tuple[csr_matrix, Dict[str, int]]:
    """Return a 2 x V weight matrix (row 0 = left, row 1 = right) and its vocabulary.

    At least one side must be non-empty.
    """
    vectorizer = CountVectorizer(analyzer=_identity, dtype=np.float64)
    counts = vectorizer.fit_transform([list(left), list(right)]).tocsr()

    if weighting is Weighting.TFIDF:
        transformer = TfidfTransformer(norm=None, use_idf=True, smooth_idf=True, sublinear_tf=False)
        return transformer.fit_transform(counts).tocsr(), vectorizer.vocabulary_

    weights = counts.copy()
    if weighting is Weighting.BINARY:
        weights.data[:] = 1.0
    elif weighting is Weighting.LOG:
        weights.data = 1.0 + np.log(weights.data)
    elif weighting in (Weighting.AUGMENTED, Weighting.DOUBLE_NORMALIZATION):
        for row in range(weights.shape[0]):
            start, end = weights.indptr[row], weights.indptr[row + 1]
            if end > start:
                chunk = weights.data[start:end]
                weights.data[start:end] = 0.5 + 0.5 * chunk / chunk.max()
    return weights, vectorizer.vocabulary_


def weight_maps(
    left: Sequence[str], right: Sequence[str], weighting: Weighting
) -> Tuple[Dict[str, float], Dict[str, float]]:
    """Per-side {value: weight} maps, keyed in first-occurrence order."""
    weights, vocabulary = weight_matrix(left, right, weighting)
    dense = weights.toarray()

    def _row(row: int, items: Sequence[str]) -> Dict[str, float]:
        return {item: float(dense[row, vocabulary[item]]) for item in dict.fromkeys(items)}

    return _row(0, left), _row(1, right)


def vector_norm(weights: Dict[str, float]) -> float:
    if not weights:
        return 0.0
    return float(np.linalg.norm(list(weights.values())))


def cosine(left: Sequence[str], right: Sequence[str], weighting: Weighting) -> float:
    """Cosine similarity of the weighted vectors; 0.0 when either vector is zero."""
    weights, _ = weight_matrix(left, right, weighting)
    return float(cosine_similarity(weights[0], weights[1])[0, 0])
