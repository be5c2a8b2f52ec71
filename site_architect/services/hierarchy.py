"""Theme -> Pillar -> Page hierarchy projection over classified keywords.

The hierarchy is never stored. Every call rebuilds it from the flat record
list, so callers recompute whenever the records or the intent filter change.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from site_architect.schemas.architecture import IntentFilter, Page, PillarGroup, ThemeGroup
from site_architect.schemas.keyword import ClassifiedKeyword, KeywordRelation
from site_architect.services.cluster_health import classify_cluster_health, count_distinct_pages

logger = logging.getLogger(__name__)

GENERAL_GROUP = "General"


def _group_name(value: str) -> str:
    # Names match exactly; only blank names collapse into the fallback group.
    return value if value.strip() else GENERAL_GROUP


def theme_name(record: ClassifiedKeyword) -> str:
    """Theme a record is grouped under."""
    return _group_name(record.parent_topic)


def pillar_name(record: ClassifiedKeyword) -> str:
    """Pillar a record is grouped under within its theme."""
    return _group_name(record.pillar)


def filter_by_intent(
    records: Iterable[ClassifiedKeyword],
    intent_filter: IntentFilter = IntentFilter.ALL,
) -> list[ClassifiedKeyword]:
    """Keep records matching the intent filter, in input order."""
    return [record for record in records if intent_filter.matches(record)]


def build_hierarchy(
    records: Iterable[ClassifiedKeyword],
    intent_filter: IntentFilter = IntentFilter.ALL,
) -> list[ThemeGroup]:
    """Group classified keywords into ordered themes, pillars and pages.

    Themes are ordered by descending total volume, pillars likewise within a
    theme, and pages by the volume of their primary keyword. All orderings are
    stable, so ties keep first-seen order.
    """
    themes: dict[str, list[ClassifiedKeyword]] = {}
    for record in filter_by_intent(records, intent_filter):
        if not record.keyword.strip():
            logger.warning(
                "Skipping classified record without keyword",
                extra={"parent_topic": record.parent_topic, "pillar": record.pillar},
            )
            continue
        themes.setdefault(theme_name(record), []).append(record)

    ordered_themes = sorted(themes.items(), key=lambda item: -_total_volume(item[1]))

    return [
        ThemeGroup(
            name=name,
            total_volume=_total_volume(theme_records),
            page_count=count_distinct_pages(theme_records),
            health=classify_cluster_health(theme_records),
            pillars=_build_pillars(theme_records),
        )
        for name, theme_records in ordered_themes
    ]


def _build_pillars(theme_records: list[ClassifiedKeyword]) -> list[PillarGroup]:
    pillars: dict[str, list[ClassifiedKeyword]] = {}
    for record in theme_records:
        pillars.setdefault(pillar_name(record), []).append(record)

    ordered_pillars = sorted(pillars.items(), key=lambda item: -_total_volume(item[1]))
    return [
        PillarGroup(
            name=name,
            total_volume=_total_volume(pillar_records),
            pages=_build_pages(pillar_records),
        )
        for name, pillar_records in ordered_pillars
    ]


def _build_pages(pillar_records: list[ClassifiedKeyword]) -> list[Page]:
    groups: dict[str, list[ClassifiedKeyword]] = {}
    for record in pillar_records:
        groups.setdefault(record.page_key, []).append(record)

    pages = [
        page
        for page_key, group in groups.items()
        if (page := resolve_page(page_key, group)) is not None
    ]
    return sorted(pages, key=lambda page: -page.primary.volume)


def resolve_page(page_key: str, group: list[ClassifiedKeyword]) -> Page | None:
    """Split a page group into exactly one primary and its synonyms.

    The first record flagged PRIMARY, or whose keyword equals the page key,
    becomes the primary. When no record qualifies, the first record in the
    group is promoted. Empty groups produce no page.
    """
    if not group:
        return None

    primary_index = next(
        (
            index
            for index, record in enumerate(group)
            if record.relation is KeywordRelation.PRIMARY or record.keyword == page_key
        ),
        None,
    )
    if primary_index is None:
        logger.debug(
            "No primary keyword in page group, promoting first record",
            extra={"page_key": page_key, "group_size": len(group)},
        )
        primary_index = 0

    synonyms = [record for index, record in enumerate(group) if index != primary_index]
    return Page(page_key=page_key, primary=group[primary_index], synonyms=synonyms)


def _total_volume(records: Iterable[ClassifiedKeyword]) -> int:
    return sum(record.volume for record in records)
