"""Deduplicator: Record[] -> Record[] (near-duplicates removed)."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import pandas as pd

from litscope.config import DedupConfig
from litscope.dedup.classifier import DuplicateClassifier
from litscope.dedup.corpus import build_corpus
from litscope.dedup.features import build_feature_matrix
from litscope.dedup.resolver import apply_removals, removal_set
from litscope.dedup.similarity import candidate_floor, similarity_matrix, upper_pairs
from litscope.dedup.titles import create_comparator
from litscope.models import DedupResult, Record, SimilarityPair

logger = logging.getLogger(__name__)


class Deduplicator:
    """Remove records that describe the same publication.

    Abstract+keyword text is compared across the whole corpus; pairs above
    the candidate floor also get their titles compared. A pair is a
    duplicate when the classifier says so, and the later record of every
    duplicate pair is dropped.
    """

    def __init__(self, config: DedupConfig | None = None) -> None:
        self._config = config or DedupConfig()
        self._comparator = create_comparator(self._config.title_comparison_mode)
        self._classifier = DuplicateClassifier(self._config)

    @property
    def config(self) -> DedupConfig:
        return self._config

    def find_duplicates(self, records: Sequence[Record]) -> DedupResult:
        total = len(records)
        if total <= 1:
            return DedupResult(total=total, records=list(records))
        if total > self._config.large_corpus_warning:
            logger.warning(
                "Comparing %s records pairwise; memory grows quadratically, "
                "consider splitting by year or source",
                total,
            )

        corpus = build_corpus(records)
        features = build_feature_matrix(corpus.texts)
        sim = similarity_matrix(features)
        floor = candidate_floor(
            self._config.candidate_floor,
            self._config.doc_sim_threshold,
            self._config.mean_sim_threshold,
        )
        titles = corpus.titles

        candidates = [
            SimilarityPair(
                i=i,
                j=j,
                doc_similarity=doc_sim,
                title_similarity=self._comparator.similarity(titles[i], titles[j]),
            )
            for i, j, doc_sim in upper_pairs(sim, floor)
        ]

        exact = set(self._comparator.exact_pairs(titles))
        seen = {(p.i, p.j) for p in candidates}
        pairs = candidates + [
            SimilarityPair(
                i=i,
                j=j,
                doc_similarity=float(sim[i, j]),
                title_similarity=self._comparator.similarity(titles[i], titles[j]),
            )
            for i, j in sorted(exact - seen)
        ]

        verdicts = [
            self._classifier.classify(p, exact_title=(p.i, p.j) in exact)
            for p in pairs
        ]
        removed = removal_set(verdicts)
        logger.info(
            "Dedup: %s records, %s vocabulary terms, %s candidate pairs, %s removed",
            total,
            features.shape[1],
            len(candidates),
            len(removed),
        )
        return DedupResult(
            total=total,
            candidates=candidates,
            verdicts=verdicts,
            removed=removed,
            records=apply_removals(records, removed),
        )

    def deduplicate(self, records: Sequence[Record]) -> list[Record]:
        return self.find_duplicates(records).records

    def deduplicate_frame(self, frame: pd.DataFrame) -> pd.DataFrame:
        """Filter a record table, keeping its columns, index and row order."""
        result = self.find_duplicates(records_from_frame(frame))
        return frame.iloc[result.kept]


def records_from_frame(frame: pd.DataFrame) -> list[Record]:
    """Convert table rows to Records; absent core columns become ''."""
    rows = frame.to_dict(orient="records")
    return [
        Record.model_validate({str(k): v for k, v in row.items()})
        for row in rows
    ]
