"""Tests for reading exports and combining them."""

from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest

from litscope.sources.base import CANONICAL_COLUMNS
from litscope.sources.exceptions import SourceError, UnsupportedFileError
from litscope.sources.formats import ScopusFormat, WebOfScienceFormat
from litscope.sources.reader import import_file, import_scope, read_export_file

_ABSTRACT = "Coral reef bleaching under ocean warming reduces plankton diversity."


def _write_scopus(path: Path, rows: list[dict[str, str]]) -> Path:
    base = {col: "" for col in ScopusFormat.columns}
    pd.DataFrame([base | row for row in rows]).to_csv(path, index=False, encoding="utf-8-sig")
    return path


def _write_wos(path: Path, rows: list[dict[str, str]]) -> Path:
    cols = list(WebOfScienceFormat.columns)
    lines = ["\t".join(cols)]
    for row in rows:
        lines.append("\t".join(row.get(c, "") for c in cols))
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


class TestReadExportFile:
    def test_csv_with_bom(self, tmp_path):
        path = _write_scopus(tmp_path / "scopus.csv", [{"EID": "1", "Year": "2020"}])
        raw = read_export_file(path)
        assert "Authors" in raw.columns
        assert raw.loc[0, "Year"] == "2020"
        assert raw.loc[0, "DOI"] == ""

    def test_tab_delimited(self, tmp_path):
        path = _write_wos(tmp_path / "wos.txt", [{"UT": "WOS:1", "TI": 'A "quoted" title'}])
        raw = read_export_file(path)
        assert raw.loc[0, "TI"] == 'A "quoted" title'

    def test_unsupported(self, tmp_path):
        path = tmp_path / "refs.ris"
        path.write_text("TY  - JOUR\n")
        with pytest.raises(UnsupportedFileError):
            read_export_file(path)


class TestImportFile:
    def test_maps_to_canonical(self, tmp_path):
        path = _write_wos(tmp_path / "wos.txt", [{"UT": "WOS:1", "TI": "Reefs", "AB": _ABSTRACT}])
        frame = import_file(path)
        assert list(frame.columns) == CANONICAL_COLUMNS
        assert frame.loc[0, "database"] == "WoS"


class TestImportScope:
    def _searches(self, tmp_path: Path) -> Path:
        _write_scopus(
            tmp_path / "a_scopus.csv",
            [
                {"EID": "S1", "Title": "Reef bleaching and plankton", "Abstract": _ABSTRACT,
                 "Author Keywords": "Coral, Reef/Ocean"},
                {"EID": "S2", "Title": "Medieval poetry", "Abstract": "Medieval poetry analysis."},
            ],
        )
        _write_wos(
            tmp_path / "b_wos.txt",
            [{"UT": "WOS:1", "TI": "Reef bleaching and plankton", "AB": _ABSTRACT}],
        )
        (tmp_path / "notes.md").write_text("ignored")
        return tmp_path

    def test_combines_and_dedups(self, tmp_path):
        hits = import_scope(self._searches(tmp_path))
        assert list(hits["id"]) == ["S1", "S2"]
        assert hits.iloc[0]["keywords"] == "coral;reef;ocean"

    def test_keep_duplicates(self, tmp_path):
        hits = import_scope(self._searches(tmp_path), remove_duplicates=False, clean_dataset=False)
        assert list(hits["id"]) == ["S1", "S2", "WOS:1"]
        assert list(hits["database"]) == ["Scopus", "Scopus", "WoS"]
        assert hits.iloc[0]["keywords"] == "Coral, Reef/Ocean"

    def test_save_full_dataset(self, tmp_path):
        out = tmp_path / "full.csv"
        import_scope(self._searches(tmp_path), save_full_dataset=True, full_dataset_path=out)
        assert len(pd.read_csv(out)) == 3

    def test_empty_directory(self, tmp_path):
        with pytest.raises(SourceError):
            import_scope(tmp_path)

    def test_missing_directory(self, tmp_path):
        with pytest.raises(SourceError):
            import_scope(tmp_path / "nope")
