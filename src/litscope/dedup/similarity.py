"""Similarity engine: document-term matrix -> candidate similarity pairs."""

from __future__ import annotations

import logging

import numpy as np
from sklearn.metrics.pairwise import cosine_similarity

from litscope.dedup.features import FeatureMatrix

logger = logging.getLogger(__name__)


def similarity_matrix(features: FeatureMatrix) -> np.ndarray:
    """Cosine similarity between every two rows, clipped to [0, 1].

    Only the strict upper triangle is meaningful to callers.
    """
    n_docs, n_terms = features.shape
    if n_docs == 0 or n_terms == 0:
        return np.zeros((n_docs, n_docs), dtype=float)
    sim = cosine_similarity(features.matrix)
    return np.clip(sim, 0.0, 1.0)


def candidate_floor(
    floor: float, doc_threshold: float, mean_threshold: float
) -> float:
    """Lowest doc similarity a pair needs to be able to fire a similarity rule.

    ``mean > m`` with ``title <= 1`` requires ``doc > 2m - 1``, so the floor
    only prunes pairs when it is at most ``doc_threshold`` and at most
    ``2 * mean_threshold - 1``. Otherwise it is lowered to that bound, which
    makes the candidate set equal to an exhaustive comparison.
    """
    bound = min(doc_threshold, 2 * mean_threshold - 1)
    if floor <= bound:
        return floor
    logger.warning(
        "Candidate floor %.3f exceeds what thresholds doc=%.3f mean=%.3f allow; "
        "lowering it to %.3f",
        floor,
        doc_threshold,
        mean_threshold,
        bound,
    )
    return bound


def upper_pairs(sim: np.ndarray, floor: float) -> list[tuple[int, int, float]]:
    """Return ``(i, j, sim)`` with ``i < j`` and ``sim > floor``, row-major."""
    n_docs = sim.shape[0]
    if n_docs < 2:
        return []
    mask = np.triu(sim > floor, k=1)
    rows, cols = np.nonzero(mask)
    return [
        (int(i), int(j), float(sim[i, j]))
        for i, j in zip(rows, cols)
    ]
