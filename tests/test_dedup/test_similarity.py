"""Tests for the similarity engine and title comparators."""

from __future__ import annotations

import math

import numpy as np
import pytest

from litscope.dedup.features import build_feature_matrix
from litscope.dedup.similarity import candidate_floor, similarity_matrix, upper_pairs
from litscope.dedup.titles import (
    ExactTitleComparator,
    TokenTitleComparator,
    create_comparator,
    normalize_title,
)
from litscope.models import TitleMode

_TEXTS = [
    "coral reef bleaching ocean warming plankton",
    "coral reef bleaching ocean warming",
    "quantum physics particles",
    "medieval poetry analysis",
    "",
]


class TestSimilarityMatrix:
    def test_symmetric(self):
        sim = similarity_matrix(build_feature_matrix(_TEXTS))
        assert sim.shape == (5, 5)
        assert np.allclose(sim, sim.T)

    def test_known_value(self):
        sim = similarity_matrix(build_feature_matrix(_TEXTS))
        assert sim[0, 1] == pytest.approx(math.sqrt(5 / 6))

    def test_disjoint_topics_zero(self):
        sim = similarity_matrix(build_feature_matrix(_TEXTS))
        assert sim[2, 3] == 0.0

    def test_empty_text_zero(self):
        sim = similarity_matrix(build_feature_matrix(_TEXTS))
        assert np.all(sim[4, :4] == 0.0)

    def test_bounded(self):
        sim = similarity_matrix(build_feature_matrix(["reef reef reef", "reef"]))
        assert 0.0 <= sim.min() and sim.max() <= 1.0

    def test_empty_vocabulary(self):
        sim = similarity_matrix(build_feature_matrix(["", ""]))
        assert sim.tolist() == [[0.0, 0.0], [0.0, 0.0]]


class TestUpperPairs:
    def test_upper_triangle_only(self):
        sim = similarity_matrix(build_feature_matrix(_TEXTS))
        pairs = upper_pairs(sim, 0.0)
        assert pairs
        assert all(i < j for i, j, _ in pairs)
        assert len({(i, j) for i, j, _ in pairs}) == len(pairs)

    def test_floor_filters(self):
        sim = similarity_matrix(build_feature_matrix(_TEXTS))
        pairs = upper_pairs(sim, 0.5)
        assert [(i, j) for i, j, _ in pairs] == [(0, 1)]

    def test_row_major_order(self):
        sim = np.ones((3, 3))
        assert [(i, j) for i, j, _ in upper_pairs(sim, 0.5)] == [(0, 1), (0, 2), (1, 2)]

    def test_single_document(self):
        assert upper_pairs(np.ones((1, 1)), 0.5) == []


class TestCandidateFloor:
    def test_reference_thresholds_keep_floor(self):
        assert candidate_floor(0.5, 0.85, 0.8) == 0.5

    def test_low_doc_threshold_lowers_floor(self):
        assert candidate_floor(0.5, 0.4, 0.8) == pytest.approx(0.4)

    def test_low_mean_threshold_lowers_floor(self):
        assert candidate_floor(0.5, 0.85, 0.7) == pytest.approx(0.4)


class TestNormalizeTitle:
    def test_basic(self):
        assert normalize_title("  Hello, World!  ") == "hello world"

    def test_punctuation(self):
        assert normalize_title("A.B-C:D") == "abcd"

    def test_whitespace(self):
        assert normalize_title("a   b\tc") == "a b c"


class TestTokenTitleComparator:
    def test_identical(self):
        comp = TokenTitleComparator()
        assert comp.similarity("Coral Reef Bleaching", "coral reef bleaching!") == pytest.approx(1.0)

    def test_disjoint(self):
        comp = TokenTitleComparator()
        assert comp.similarity("Coral reefs", "Medieval poetry") == 0.0

    def test_empty_title(self):
        comp = TokenTitleComparator()
        assert comp.similarity("", "Coral reefs") == 0.0

    def test_no_exact_pairs(self):
        assert TokenTitleComparator().exact_pairs(["Same", "Same"]) == []


class TestExactTitleComparator:
    def test_similarity(self):
        comp = ExactTitleComparator()
        assert comp.similarity("Effect of Heat on Steel.", "effect of heat on steel") == 1.0
        assert comp.similarity("Effect of heat", "Effect of cold") == 0.0

    def test_exact_pairs_link_first_occurrence(self):
        titles = ["Steel", "Copper", "steel!", "STEEL", "copper"]
        assert ExactTitleComparator().exact_pairs(titles) == [(0, 2), (0, 3), (1, 4)]

    def test_blank_titles_never_match(self):
        comp = ExactTitleComparator()
        assert comp.exact_pairs(["", "  ", "?!"]) == []
        assert comp.similarity("", "") == 0.0


class TestCreateComparator:
    def test_modes(self):
        assert isinstance(create_comparator(TitleMode.EXACT), ExactTitleComparator)
        assert isinstance(create_comparator(TitleMode.TOKEN_SIMILARITY), TokenTitleComparator)
