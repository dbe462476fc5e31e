"""litscope: combine literature database exports and remove duplicate records."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

import pandas as pd

from litscope.cleaning import clean_keywords
from litscope.export import export_csv, export_json, export_markdown
from litscope.models import DedupResult, Record, TitleMode
from litscope.sources import detect_database, import_scope

if TYPE_CHECKING:
    from litscope.config import DedupConfig


def deduplicate(
    data: pd.DataFrame | Sequence[Record],
    config: DedupConfig | None = None,
) -> pd.DataFrame | list[Record]:
    """One-line convenience: remove near-duplicate records.

    Args:
        data: A record table, or a sequence of Records.
        config: Optional DedupConfig. If None, reference thresholds are used.
    """
    from litscope.dedup import Deduplicator

    dedup = Deduplicator(config)
    if isinstance(data, pd.DataFrame):
        return dedup.deduplicate_frame(data)
    return dedup.deduplicate(data)


__all__ = [
    "DedupResult",
    "Record",
    "TitleMode",
    "clean_keywords",
    "deduplicate",
    "detect_database",
    "export_csv",
    "export_json",
    "export_markdown",
    "import_scope",
]
