"""Keyword punctuation cleanup for record tables."""

from __future__ import annotations

import pandas as pd

_REMOVALS = ("(", ")", ":", "=", "%", "+", "<", ">", "?", "\\", "&", "!", "$", "*")

# Applied in order; ";;" collapses after the comma and slash passes.
_SEPARATORS = (", ", ",", "/", ";;", "[", "]")


def clean_keyword_string(keywords: object) -> str:
    """Lowercase a keyword string, drop stray symbols, separate with ';'."""
    if keywords is None or (isinstance(keywords, float) and pd.isna(keywords)):
        return ""
    text = str(keywords).lower()
    for mark in _REMOVALS:
        text = text.replace(mark, "")
    for sep in _SEPARATORS:
        text = text.replace(sep, ";")
    return text


def clean_keywords(frame: pd.DataFrame) -> pd.DataFrame:
    """Return a copy of *frame* with its ``keywords`` column standardized."""
    cleaned = frame.copy()
    if "keywords" not in cleaned.columns:
        cleaned["keywords"] = ""
    cleaned["keywords"] = cleaned["keywords"].map(clean_keyword_string)
    return cleaned
