"""Export utilities for record tables and dedup reports."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pandas as pd

from litscope.models import DedupResult, Record


def export_csv(frame: pd.DataFrame, path: str | Path) -> Path:
    """Write a record table to CSV without the index column."""
    out = Path(path)
    frame.to_csv(out, index=False)
    return out


def export_json(result: DedupResult, indent: int = 2) -> str:
    """Serialize a dedup result to JSON string."""
    return result.model_dump_json(indent=indent)


def export_markdown(result: DedupResult, records: Sequence[Record]) -> str:
    """Generate Markdown table of duplicate pairs, one row per removal decision."""
    header = "| Kept | Removed | Kept title | Removed title | Doc | Title | Mean | Rules |"
    sep = "|------|---------|------------|---------------|-----|-------|------|-------|"
    rows = []
    for verdict in result.duplicates:
        pair = verdict.pair
        kept, removed = records[pair.i], records[pair.j]
        rules = ", ".join(r.value for r in verdict.rules)
        rows.append(
            f"| {_cell(kept.id)} | {_cell(removed.id)} "
            f"| {_cell(kept.title)} | {_cell(removed.title)} "
            f"| {pair.doc_similarity:.2f} | {pair.title_similarity:.2f} "
            f"| {pair.mean_similarity:.2f} | {rules} |"
        )
    return "\n".join([header, sep] + rows)


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _cell(text: str) -> str:
    """Make text safe for a Markdown table cell."""
    if not text:
        return "-"
    return " ".join(text.split()).replace("|", "\\|")
