"""Title comparators.

Two policies, selected once from configuration:

- ``TokenTitleComparator`` scores a pair by the cosine similarity of a
  two-document term matrix built from just those titles.
- ``ExactTitleComparator`` treats titles as equal when their lowercased,
  punctuation-free forms are identical, and can list every such pair in
  the corpus without touching the similarity engine.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Sequence

from litscope.dedup.features import build_feature_matrix
from litscope.dedup.similarity import similarity_matrix
from litscope.models import TitleMode

_PUNCT_RE = re.compile(r"[^\w\s]")
_SPACE_RE = re.compile(r"\s+")


def normalize_title(title: str) -> str:
    """Normalize title for exact comparison."""
    t = title.lower().strip()
    t = _PUNCT_RE.sub("", t)
    t = _SPACE_RE.sub(" ", t).strip()
    return t


class TitleComparator(ABC):
    """Scores how alike two titles are, in [0, 1]."""

    mode: TitleMode

    @abstractmethod
    def similarity(self, title1: str, title2: str) -> float:
        ...

    def exact_pairs(self, titles: Sequence[str]) -> list[tuple[int, int]]:
        """Pairs flagged on titles alone, across the whole corpus."""
        return []


class TokenTitleComparator(TitleComparator):
    mode = TitleMode.TOKEN_SIMILARITY

    def similarity(self, title1: str, title2: str) -> float:
        features = build_feature_matrix([title1, title2])
        return float(similarity_matrix(features)[0, 1])


class ExactTitleComparator(TitleComparator):
    mode = TitleMode.EXACT

    def similarity(self, title1: str, title2: str) -> float:
        key = normalize_title(title1)
        return 1.0 if key and key == normalize_title(title2) else 0.0

    def exact_pairs(self, titles: Sequence[str]) -> list[tuple[int, int]]:
        """Pair each repeated title with its first occurrence.

        Blank titles never match.
        """
        first_seen: dict[str, int] = {}
        pairs: list[tuple[int, int]] = []
        for idx, title in enumerate(titles):
            key = normalize_title(title)
            if not key:
                continue
            if key in first_seen:
                pairs.append((first_seen[key], idx))
            else:
                first_seen[key] = idx
        return pairs


def create_comparator(mode: TitleMode) -> TitleComparator:
    """Create a title comparator for *mode*."""
    match mode:
        case TitleMode.TOKEN_SIMILARITY:
            return TokenTitleComparator()
        case TitleMode.EXACT:
            return ExactTitleComparator()
        case _:
            raise ValueError(f"Unknown title comparison mode: {mode}")
