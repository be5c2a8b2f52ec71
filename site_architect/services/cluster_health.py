"""Cluster health heuristic for themes."""

from __future__ import annotations

from collections.abc import Iterable

from site_architect.schemas.architecture import HealthLabel
from site_architect.schemas.keyword import ClassifiedKeyword

STRONG_MIN_PAGES = 5
MEDIUM_MIN_PAGES = 3


def health_for_page_count(page_count: int) -> HealthLabel:
    """Map a count of distinct pages to a health label."""
    if page_count >= STRONG_MIN_PAGES:
        return HealthLabel.STRONG
    if page_count >= MEDIUM_MIN_PAGES:
        return HealthLabel.MEDIUM
    return HealthLabel.WEAK


def count_distinct_pages(theme_records: Iterable[ClassifiedKeyword]) -> int:
    """Count distinct page keys (primary_variant, falling back to keyword)."""
    return len({record.page_key for record in theme_records if record.page_key})


def classify_cluster_health(theme_records: Iterable[ClassifiedKeyword]) -> HealthLabel:
    """Derive a theme's health label from how many distinct pages it holds."""
    return health_for_page_count(count_distinct_pages(theme_records))
