"""Helpers for the caller-owned expansion and collapsed-file sets"""

from collections.abc import Iterable

from diffview.core.models import Section


def toggle(keys: Iterable[str], key: str) -> frozenset[str]:
    """Return a new set with key flipped; the input is left untouched."""
    current = frozenset(keys)
    return current - {key} if key in current else current | {key}


def prune_stale(keys: Iterable[str], sections: list[Section]) -> frozenset[str]:
    """Drop keys that match no gap in a freshly computed section list."""
    live = {s.gap_key for s in sections if s.gap_key is not None}
    return frozenset(k for k in keys if k in live)
