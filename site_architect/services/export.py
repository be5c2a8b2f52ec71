"""CSV export of classified keywords (flat, one row per keyword)."""

from __future__ import annotations

import csv
import io
from collections.abc import Iterable

from site_architect.schemas.keyword import ClassifiedKeyword

EXPORT_FILENAME = "seo_structure_strategy.csv"

EXPORT_HEADERS = [
    "Keyword",
    "Translation",
    "Volume",
    "Level 1: Theme",
    "Level 2: Pillar",
    "Level 3: Page (Primary)",
    "Relation",
    "Intent",
    "Strategy",
    "Confidence",
]


def export_row(record: ClassifiedKeyword) -> list[str | int]:
    return [
        record.keyword,
        record.translation,
        record.volume,
        record.parent_topic,
        record.pillar,
        record.primary_variant,
        record.relation.value,
        record.intent.value,
        record.content_strategy,
        record.confidence_score,
    ]


def export_csv(records: Iterable[ClassifiedKeyword]) -> str:
    """Render records as CSV text with a header row."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(EXPORT_HEADERS)
    for record in records:
        writer.writerow(export_row(record))
    return buffer.getvalue()
