"""Presentation ordering for market summaries."""

from __future__ import annotations

from typing import Iterable, List

from .aggregator import MarketSummary

SORT_KEYS = ("none", "change", "absolute-change")


def sort_summaries(summaries: Iterable[MarketSummary], by: str = "none") -> List[MarketSummary]:
    items = list(summaries)
    if by == "none":
        return items
    if by == "change":
        return sorted(items, key=lambda s: s.percent_change, reverse=True)
    if by == "absolute-change":
        return sorted(items, key=lambda s: abs(s.percent_change), reverse=True)
    raise ValueError(f"Unknown sort key {by!r}, expected one of {', '.join(SORT_KEYS)}")
