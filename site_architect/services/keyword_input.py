"""Parsing and validation of pasted keyword lists."""

from __future__ import annotations

import re
from collections.abc import Sequence

from site_architect.config import settings
from site_architect.core.exceptions import EmptyKeywordInputError, KeywordLimitExceededError
from site_architect.schemas.keyword import KeywordInput

FIELD_SEPARATOR_PATTERN = re.compile(r"[\t,]+")
NON_DIGIT_PATTERN = re.compile(r"[^0-9]")

SAMPLE_INPUT_TEXT = """Artificial flowers\t14800
fake flowers\t18100
faux flowers\t6600
Artificial Floral Arrangements\t1000
Artificial Orchid\t390
Artificial Rose\t390
Artificial Hydrangea\t320
Artificial Sunflower\t210
Artificial Peony\t140
Artificial Tulip\t140
Artificial Chrysanthemum\t110
Artificial Magnolia\t110
Artificial Phalaenopsis\t50
Artificial Dahlia\t30
Artificial Lily\t30
Artificial plants\t9900
fake plants\t18100
faux plants\t6600
artificial outdoor plants\t3600
artificial planter plants\t3600
artificial hanging plants\t2400
artificial plants indoor\t2400
How to clean artificial flowers 500
Best artificial flowers for wedding 200"""


def parse_keyword_line(line: str) -> KeywordInput | None:
    """Parse one `term<TAB or comma>volume` line; blank terms yield None."""
    parts = FIELD_SEPARATOR_PATTERN.split(line)
    term = parts[0].strip()
    if not term:
        return None

    volume = 0
    if len(parts) > 1:
        digits = NON_DIGIT_PATTERN.sub("", parts[1])
        if digits:
            volume = int(digits)
    return KeywordInput(term=term, volume=volume)


def parse_keyword_text(text: str) -> list[KeywordInput]:
    """Turn pasted spreadsheet/CSV text into keyword records, one per line.

    Duplicate lines are kept.
    """
    stripped = (text or "").strip()
    if not stripped:
        return []

    keywords: list[KeywordInput] = []
    for line in stripped.split("\n"):
        keyword = parse_keyword_line(line)
        if keyword is not None:
            keywords.append(keyword)
    return keywords


def validate_keyword_count(
    keywords: Sequence[KeywordInput],
    limit: int | None = None,
) -> None:
    """Reject empty batches and batches above the per-analysis limit."""
    max_keywords = limit if limit is not None else settings.max_keywords_per_analysis
    if not keywords:
        raise EmptyKeywordInputError()
    if len(keywords) > max_keywords:
        raise KeywordLimitExceededError(max_keywords, len(keywords))
