"""Core data models for litscope.

All Pydantic models are defined here as the single source of truth.
Every other module imports from this file.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class TitleMode(str, Enum):
    EXACT = "exact"
    TOKEN_SIMILARITY = "token-similarity"


class DuplicateRule(str, Enum):
    DOCUMENT = "document"
    MEAN = "mean"
    TITLE_EXACT = "title_exact"
    TITLE = "title"


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

def _to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and math.isnan(value):
        return ""
    return value if isinstance(value, str) else str(value)


class Record(BaseModel):
    """One bibliographic entry in canonical form.

    Fields other than the four used by duplicate detection are kept as
    extras so they survive filtering untouched.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    id: str = ""
    title: str = ""
    text: str = ""
    authors: str = ""

    @field_validator("id", "title", "text", "authors", mode="before")
    @classmethod
    def _coerce_str(cls, value: Any) -> str:
        return _to_text(value)


# ---------------------------------------------------------------------------
# Similarity and verdicts
# ---------------------------------------------------------------------------

class SimilarityPair(BaseModel):
    i: int = Field(ge=0)
    j: int = Field(ge=0)
    doc_similarity: float = Field(ge=0.0, le=1.0)
    title_similarity: float = Field(ge=0.0, le=1.0, default=0.0)

    @model_validator(mode="after")
    def _check_order(self) -> SimilarityPair:
        if self.i >= self.j:
            raise ValueError(f"pair indices must satisfy i < j, got ({self.i}, {self.j})")
        return self

    @property
    def mean_similarity(self) -> float:
        return (self.doc_similarity + self.title_similarity) / 2


class DuplicateVerdict(BaseModel):
    pair: SimilarityPair
    rules: list[DuplicateRule] = []

    @property
    def is_duplicate(self) -> bool:
        return bool(self.rules)


class DedupResult(BaseModel):
    """Everything one deduplication run produced."""

    total: int
    candidates: list[SimilarityPair] = []
    verdicts: list[DuplicateVerdict] = []
    removed: list[int] = []
    records: list[Record] = []

    @property
    def duplicates(self) -> list[DuplicateVerdict]:
        return [v for v in self.verdicts if v.is_duplicate]

    @property
    def kept(self) -> list[int]:
        dropped = set(self.removed)
        return [idx for idx in range(self.total) if idx not in dropped]
