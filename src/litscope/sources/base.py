"""Database export format abstraction."""

from __future__ import annotations

import pandas as pd

CANONICAL_COLUMNS = [
    "id",
    "text",
    "title",
    "abstract",
    "keywords",
    "methods",
    "type",
    "authors",
    "affiliation",
    "source",
    "year",
    "volume",
    "issue",
    "startpage",
    "endpage",
    "doi",
    "language",
    "database",
]


class DatabaseFormat:
    """Maps one database's export columns onto the canonical schema.

    ``columns`` maps export header -> canonical name. Its keys double as the
    header signature used to recognise the database. Canonical columns the
    export lacks are filled with empty strings.
    """

    name: str = ""
    columns: dict[str, str] = {}

    @property
    def signature(self) -> frozenset[str]:
        return frozenset(self.columns)

    def matches(self, headers: set[str]) -> bool:
        return self.signature <= headers

    def to_canonical(self, raw: pd.DataFrame) -> pd.DataFrame:
        frame = raw[list(self.columns)].rename(columns=self.columns).copy()
        frame = self.post_process(frame)
        for col in CANONICAL_COLUMNS:
            if col not in frame.columns:
                frame[col] = ""
        frame["text"] = frame["abstract"].astype(str) + " " + frame["keywords"].astype(str)
        frame["database"] = self.name
        return frame[CANONICAL_COLUMNS].reset_index(drop=True)

    def post_process(self, frame: pd.DataFrame) -> pd.DataFrame:
        return frame
