"""Kernel text helpers."""
from __future__ import annotations


def normalize_query(raw: str | None) -> str:
    """Trim and case-fold a free-text query."""
    if not raw:
        return ""
    return raw.strip().casefold()


__all__ = ["normalize_query"]
