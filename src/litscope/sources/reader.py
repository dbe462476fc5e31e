"""Read database exports and combine them into one canonical table."""

from __future__ import annotations

import csv
import logging
from pathlib import Path

import pandas as pd

from litscope.config import DedupConfig
from litscope.sources.base import CANONICAL_COLUMNS
from litscope.sources.exceptions import SourceError, UnsupportedFileError
from litscope.sources.formats import detect_database

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".csv", ".txt", ".xls", ".xlsx")


def read_export_file(path: str | Path) -> pd.DataFrame:
    """Read one export as strings, with blanks for missing cells."""
    path = Path(path)
    suffix = path.suffix.lower()
    match suffix:
        case ".csv":
            raw = pd.read_csv(
                path, dtype=str, keep_default_na=False, encoding="utf-8-sig"
            )
        case ".txt":
            raw = pd.read_csv(
                path,
                sep="\t",
                dtype=str,
                keep_default_na=False,
                encoding="utf-8-sig",
                index_col=False,
                quoting=csv.QUOTE_NONE,
            )
        case ".xls" | ".xlsx":
            raw = pd.read_excel(path, dtype=str).fillna("")
        case _:
            raise UnsupportedFileError(f"Unsupported export file: {path.name}")
    raw.columns = [str(c).strip() for c in raw.columns]
    return raw


def import_file(path: str | Path) -> pd.DataFrame:
    """Read one export and map it onto the canonical schema."""
    raw = read_export_file(path)
    fmt = detect_database(raw.columns)
    logger.info("Read %s records from %s (%s)", len(raw), Path(path).name, fmt.name)
    return fmt.to_canonical(raw)


def import_scope(
    directory: str | Path,
    remove_duplicates: bool = True,
    clean_dataset: bool = True,
    save_full_dataset: bool = False,
    full_dataset_path: str | Path = "full_dataset.csv",
    config: DedupConfig | None = None,
) -> pd.DataFrame:
    """Import every export in *directory* into one table.

    Args:
        directory: Folder holding the exported search results.
        remove_duplicates: Drop near-duplicate records across exports.
        clean_dataset: Standardize keyword separators.
        save_full_dataset: Write the combined table, before deduplication,
            to *full_dataset_path*.
        config: Thresholds for duplicate removal.
    """
    from litscope.cleaning import clean_keywords
    from litscope.dedup import Deduplicator
    from litscope.export import export_csv

    folder = Path(directory)
    if not folder.is_dir():
        raise SourceError(f"Not a directory: {folder}")

    frames = []
    for path in sorted(folder.iterdir()):
        if path.suffix.lower() not in SUPPORTED_EXTENSIONS:
            logger.debug("Skipping %s", path.name)
            continue
        frames.append(import_file(path))
    if not frames:
        raise SourceError(f"No database exports found in {folder}")

    hits = pd.concat(frames, ignore_index=True)[CANONICAL_COLUMNS]

    if save_full_dataset:
        export_csv(hits, full_dataset_path)
    if remove_duplicates:
        hits = Deduplicator(config).deduplicate_frame(hits)
    if clean_dataset:
        hits = clean_keywords(hits)
    return hits
