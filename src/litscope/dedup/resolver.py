"""Removal resolver: duplicate verdicts -> filtered records.

Every duplicate pair is stored as ``(i, j)`` with ``i < j``. The resolver
always drops ``j`` and keeps ``i``, so the earliest record of any duplicate
chain survives no matter how pairs were generated or ordered.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TypeVar

from litscope.models import DuplicateVerdict

T = TypeVar("T")


def removal_set(verdicts: Iterable[DuplicateVerdict]) -> list[int]:
    """Sorted, unique indices of the later member of each duplicate pair."""
    return sorted(
        {max(v.pair.i, v.pair.j) for v in verdicts if v.is_duplicate}
    )


def apply_removals(items: Sequence[T], removed: Iterable[int]) -> list[T]:
    """Return *items* without the *removed* positions, order preserved."""
    dropped = set(removed)
    return [item for idx, item in enumerate(items) if idx not in dropped]
