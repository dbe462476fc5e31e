"""Corpus builder: Record[] -> per-record text and title units."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from litscope.models import Record


@dataclass(frozen=True)
class CorpusUnit:
    index: int
    text: str
    title: str


@dataclass(frozen=True)
class Corpus:
    units: list[CorpusUnit]

    def __len__(self) -> int:
        return len(self.units)

    @property
    def texts(self) -> list[str]:
        return [u.text for u in self.units]

    @property
    def titles(self) -> list[str]:
        return [u.title for u in self.units]


def build_corpus(records: Sequence[Record]) -> Corpus:
    return Corpus(
        units=[
            CorpusUnit(index=idx, text=r.text or "", title=r.title or "")
            for idx, r in enumerate(records)
        ]
    )
