"""Configuration loading for litscope."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from litscope.models import TitleMode

# Aliases for the short mode names used by older scripts.
_TITLE_MODE_ALIASES = {
    "tokens": TitleMode.TOKEN_SIMILARITY,
    "quick": TitleMode.EXACT,
}


class DedupConfig(BaseModel):
    doc_sim_threshold: float = Field(default=0.85, ge=0.0, le=1.0)
    title_sim_threshold: float = Field(default=0.95, ge=0.0, le=1.0)
    mean_sim_threshold: float = Field(default=0.80, ge=0.0, le=1.0)
    title_comparison_mode: TitleMode = TitleMode.TOKEN_SIMILARITY
    candidate_floor: float = Field(default=0.5, ge=0.0, le=1.0)
    enforce_title_threshold: bool = False
    large_corpus_warning: int = 5000

    @field_validator("title_comparison_mode", mode="before")
    @classmethod
    def _resolve_alias(cls, value: object) -> object:
        if isinstance(value, str):
            return _TITLE_MODE_ALIASES.get(value.strip().lower(), value.strip().lower())
        return value


class ImportConfig(BaseModel):
    remove_duplicates: bool = True
    clean_dataset: bool = True


class AppConfig(BaseModel):
    dedup: DedupConfig = DedupConfig()
    imports: ImportConfig = ImportConfig()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def load_config(env_path: str | Path | None = None) -> AppConfig:
    """Load configuration from environment variables (.env file)."""
    if env_path:
        load_dotenv(env_path)
    else:
        load_dotenv()

    dedup = DedupConfig(
        doc_sim_threshold=float(os.getenv("DEDUP_DOC_SIM", "0.85")),
        title_sim_threshold=float(os.getenv("DEDUP_TITLE_SIM", "0.95")),
        mean_sim_threshold=float(os.getenv("DEDUP_MEAN_SIM", "0.80")),
        title_comparison_mode=os.getenv("DEDUP_TITLE_MODE", "token-similarity"),
        candidate_floor=float(os.getenv("DEDUP_CANDIDATE_FLOOR", "0.5")),
        enforce_title_threshold=_env_bool("DEDUP_ENFORCE_TITLE_SIM", False),
        large_corpus_warning=int(os.getenv("DEDUP_LARGE_CORPUS_WARNING", "5000")),
    )

    return AppConfig(
        dedup=dedup,
        imports=ImportConfig(
            remove_duplicates=_env_bool("IMPORT_REMOVE_DUPLICATES", True),
            clean_dataset=_env_bool("IMPORT_CLEAN_DATASET", True),
        ),
    )
