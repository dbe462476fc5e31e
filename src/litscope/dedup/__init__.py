"""Duplicate detection package."""

from litscope.dedup.classifier import DuplicateClassifier
from litscope.dedup.corpus import Corpus, CorpusUnit, build_corpus
from litscope.dedup.deduplicator import Deduplicator, records_from_frame
from litscope.dedup.features import FeatureMatrix, build_feature_matrix, normalize_terms
from litscope.dedup.resolver import apply_removals, removal_set
from litscope.dedup.similarity import candidate_floor, similarity_matrix, upper_pairs
from litscope.dedup.titles import (
    ExactTitleComparator,
    TitleComparator,
    TokenTitleComparator,
    create_comparator,
    normalize_title,
)

__all__ = [
    "Corpus",
    "CorpusUnit",
    "Deduplicator",
    "DuplicateClassifier",
    "ExactTitleComparator",
    "FeatureMatrix",
    "TitleComparator",
    "TokenTitleComparator",
    "apply_removals",
    "build_corpus",
    "build_feature_matrix",
    "candidate_floor",
    "create_comparator",
    "normalize_terms",
    "normalize_title",
    "records_from_frame",
    "removal_set",
    "similarity_matrix",
    "upper_pairs",
]
