"""Duplicate classifier: SimilarityPair -> DuplicateVerdict."""

from __future__ import annotations

from litscope.config import DedupConfig
from litscope.models import DuplicateRule, DuplicateVerdict, SimilarityPair


class DuplicateClassifier:
    """Flag a pair when any configured rule fires.

    Rules:
        DOCUMENT     doc_similarity > doc_sim_threshold
        MEAN         mean_similarity > mean_sim_threshold
        TITLE_EXACT  the title comparator matched the pair on titles alone
        TITLE        title_similarity > title_sim_threshold, only when
                     ``enforce_title_threshold`` is set
    """

    def __init__(self, config: DedupConfig | None = None) -> None:
        cfg = config or DedupConfig()
        self._doc_threshold = cfg.doc_sim_threshold
        self._mean_threshold = cfg.mean_sim_threshold
        self._title_threshold = cfg.title_sim_threshold
        self._enforce_title = cfg.enforce_title_threshold

    def classify(
        self, pair: SimilarityPair, *, exact_title: bool = False
    ) -> DuplicateVerdict:
        rules: list[DuplicateRule] = []
        if pair.doc_similarity > self._doc_threshold:
            rules.append(DuplicateRule.DOCUMENT)
        if pair.mean_similarity > self._mean_threshold:
            rules.append(DuplicateRule.MEAN)
        if exact_title:
            rules.append(DuplicateRule.TITLE_EXACT)
        if self._enforce_title and pair.title_similarity > self._title_threshold:
            rules.append(DuplicateRule.TITLE)
        return DuplicateVerdict(pair=pair, rules=rules)
