"""Supported database exports and header-based detection."""

from __future__ import annotations

import logging
from collections.abc import Iterable

import pandas as pd

from litscope.sources.base import DatabaseFormat
from litscope.sources.exceptions import UnknownDatabaseError

logger = logging.getLogger(__name__)


class ScopusFormat(DatabaseFormat):
    name = "Scopus"
    columns = {
        "EID": "id",
        "Title": "title",
        "Abstract": "abstract",
        "Author Keywords": "keywords",
        "Document Type": "type",
        "Authors": "authors",
        "Affiliations": "affiliation",
        "Source title": "source",
        "Year": "year",
        "Volume": "volume",
        "Issue": "issue",
        "Page start": "startpage",
        "Page end": "endpage",
        "DOI": "doi",
    }


class ZooRecFormat(DatabaseFormat):
    """Zoological Record tagged export; pages come as one ``start-end`` field."""

    name = "ZooRec"
    columns = {
        "AN": "id",
        "TI": "title",
        "AB": "abstract",
        "DE": "keywords",
        "DT": "type",
        "AU": "authors",
        "C1": "affiliation",
        "SO": "source",
        "PY": "year",
        "VL": "volume",
        "IS": "issue",
        "PS": "startpage",
        "DI": "doi",
        "LA": "language",
    }

    def post_process(self, frame: pd.DataFrame) -> pd.DataFrame:
        if frame.empty:
            return frame
        pages = frame["startpage"].astype(str).str.split("-", n=1, expand=True)
        frame["startpage"] = pages[0].str.strip()
        if pages.shape[1] > 1:
            frame["endpage"] = pages[1].fillna("").str.strip()
        return frame


class BiosisFormat(DatabaseFormat):
    name = "BIOSIS"
    columns = {
        "UT": "id",
        "TI": "title",
        "AB": "abstract",
        "MQ": "methods",
        "MI": "keywords",
        "DT": "type",
        "AU": "authors",
        "C1": "affiliation",
        "SO": "source",
        "PY": "year",
        "VL": "volume",
        "IS": "issue",
        "BP": "startpage",
        "EP": "endpage",
        "DI": "doi",
        "LA": "language",
    }


class WebOfScienceFormat(DatabaseFormat):
    """Web of Science "All Databases" export; carries no keywords."""

    name = "WoS"
    columns = {
        "UT": "id",
        "TI": "title",
        "AB": "abstract",
        "AU": "authors",
        "SO": "source",
        "PY": "year",
        "VL": "volume",
        "IS": "issue",
        "BP": "startpage",
        "EP": "endpage",
        "DI": "doi",
    }


class EbscoFormat(DatabaseFormat):
    """EBSCO exports give a first page and a page count."""

    name = "EBSCO"
    columns = {
        "Accession Number": "id",
        "Article Title": "title",
        "Abstract": "abstract",
        "Author": "authors",
        "Journal Title": "source",
        "Publication Date": "year",
        "Volume": "volume",
        "Issue": "issue",
        "First Page": "startpage",
        "Page Count": "endpage",
        "DOI": "doi",
        "Keywords": "keywords",
        "Doctype": "type",
    }

    def post_process(self, frame: pd.DataFrame) -> pd.DataFrame:
        start = pd.to_numeric(frame["startpage"], errors="coerce")
        count = pd.to_numeric(frame["endpage"], errors="coerce")
        frame["endpage"] = (start + count).map(
            lambda v: "" if pd.isna(v) else str(int(v))
        )
        return frame


FORMATS: list[DatabaseFormat] = [
    ScopusFormat(),
    ZooRecFormat(),
    BiosisFormat(),
    WebOfScienceFormat(),
    EbscoFormat(),
]


def get_format(name: str) -> DatabaseFormat:
    """Look up a supported database format by name."""
    for fmt in FORMATS:
        if fmt.name.lower() == name.lower():
            return fmt
    raise ValueError(f"Unknown database format: {name}")


def detect_database(columns: Iterable[str]) -> DatabaseFormat:
    """Identify the database an export came from by its column headers.

    BIOSIS exports contain every Web of Science column, so the format with
    the largest matching signature wins.
    """
    headers = {str(c).strip() for c in columns}
    matches = [fmt for fmt in FORMATS if fmt.matches(headers)]
    if not matches:
        raise UnknownDatabaseError(
            f"Database format not recognized from columns: {sorted(headers)}"
        )
    best = max(matches, key=lambda fmt: len(fmt.signature))
    logger.debug("Detected %s export", best.name)
    return best
