"""Flat result projections: filtering, sorting, summary stats, intent mix."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Literal

from site_architect.schemas.architecture import (
    AnalysisSummary,
    IntentBucket,
    IntentFilter,
    SortDirection,
    SortKey,
)
from site_architect.schemas.keyword import ClassifiedKeyword, IntentType, KeywordRelation
from site_architect.services.hierarchy import filter_by_intent, pillar_name, theme_name

INTENT_COLORS: dict[IntentType, str] = {
    IntentType.PRODUCT: "#3b82f6",
    IntentType.COLLECTION: "#8b5cf6",
    IntentType.ARTICLE: "#10b981",
    IntentType.UNKNOWN: "#9ca3af",
}

NUMERIC_SORT_KEYS: frozenset[str] = frozenset({"volume", "confidence_score"})

ConfidenceBand = Literal["high", "medium", "low"]


@dataclass(frozen=True, slots=True)
class SortState:
    """Current column sort of the flat view."""

    key: SortKey = "volume"
    direction: SortDirection = "desc"

    def toggle(self, key: SortKey) -> "SortState":
        """Same key flips direction; a new key starts descending."""
        if key == self.key:
            return SortState(key=key, direction="asc" if self.direction == "desc" else "desc")
        return SortState(key=key, direction="desc")


def _sort_value(record: ClassifiedKeyword, key: SortKey) -> str | int:
    value = getattr(record, key, None)
    if key in NUMERIC_SORT_KEYS:
        return value or 0
    return value or ""


def sort_and_filter(
    records: Iterable[ClassifiedKeyword],
    intent_filter: IntentFilter = IntentFilter.ALL,
    sort_key: SortKey = "volume",
    direction: SortDirection = "desc",
) -> list[ClassifiedKeyword]:
    """Filter by intent, then stable-sort by the chosen column."""
    filtered = filter_by_intent(records, intent_filter)
    return sorted(
        filtered,
        key=lambda record: _sort_value(record, sort_key),
        reverse=direction == "desc",
    )


def summarize_results(records: Iterable[ClassifiedKeyword]) -> AnalysisSummary:
    """Count themes, pillars, pages and hub collection pages."""
    items = list(records)
    return AnalysisSummary(
        keyword_count=len(items),
        total_volume=sum(record.volume for record in items),
        theme_count=len({theme_name(record) for record in items}),
        pillar_count=len({pillar_name(record) for record in items}),
        page_count=len({record.page_key for record in items}),
        hub_count=sum(
            1
            for record in items
            if record.intent is IntentType.COLLECTION
            and record.relation is KeywordRelation.PRIMARY
        ),
    )


def intent_distribution(records: Iterable[ClassifiedKeyword]) -> list[IntentBucket]:
    """Keyword counts per intent in enum order, empty buckets omitted."""
    counts = Counter(IntentType.coerce(record.intent) for record in records)
    return [
        IntentBucket(intent=intent, count=counts[intent], color=INTENT_COLORS[intent])
        for intent in IntentType
        if counts[intent] > 0
    ]


def confidence_band(score: int) -> ConfidenceBand:
    """Bucket a 0-100 confidence score for display."""
    if score > 80:
        return "high"
    if score > 50:
        return "medium"
    return "low"
