"""Classification adapter: one classifier call plus search-volume reattachment."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol

from site_architect.agents.architecture_classifier import (
    ArchitectureClassifierAgent,
    ArchitectureClassifierInput,
    ArchitectureClassifierOutput,
)
from site_architect.core.exceptions import ClassificationError
from site_architect.schemas.keyword import ClassifiedKeyword, KeywordClassification, KeywordInput

logger = logging.getLogger(__name__)


class KeywordClassifier(Protocol):
    """Anything that classifies a keyword batch the way the agent does."""

    async def run(self, input_data: ArchitectureClassifierInput) -> ArchitectureClassifierOutput:
        ...


def _normalize_term(term: str) -> str:
    return term.strip().lower()


def match_input_volume(keyword: str, inputs: Sequence[KeywordInput]) -> int | None:
    """Find the search volume of the input line a classified keyword came from.

    A trimmed exact match wins over a case-insensitive one; among several
    case-insensitive matches the first input line wins. Returns None when
    nothing matches.
    """
    trimmed = keyword.strip()
    for item in inputs:
        if item.term.strip() == trimmed:
            return item.volume

    normalized = _normalize_term(keyword)
    for item in inputs:
        if _normalize_term(item.term) == normalized:
            return item.volume
    return None


def reattach_volumes(
    inputs: Sequence[KeywordInput],
    classifications: Sequence[KeywordClassification],
) -> list[ClassifiedKeyword]:
    """Attach the original search volume to every classified keyword.

    Unmatched keywords get volume 0; a volume is never borrowed from a
    sibling synonym.
    """
    results: list[ClassifiedKeyword] = []
    unmatched: list[str] = []
    for classification in classifications:
        volume = match_input_volume(classification.keyword, inputs)
        if volume is None:
            unmatched.append(classification.keyword)
            volume = 0
        results.append(
            ClassifiedKeyword.model_validate(
                {**classification.model_dump(), "volume": volume}
            )
        )

    if unmatched:
        logger.warning(
            "Classified keywords without matching input term",
            extra={"count": len(unmatched), "keywords": unmatched[:20]},
        )
    return results


async def classify_keywords(
    keywords: Sequence[KeywordInput],
    classifier: KeywordClassifier | None = None,
) -> list[ClassifiedKeyword]:
    """Classify keywords with a single call and reattach their volumes.

    Raises:
        ClassificationError: The classifier call failed for any reason.
    """
    if not keywords:
        return []

    agent = classifier or ArchitectureClassifierAgent()
    try:
        output = await agent.run(ArchitectureClassifierInput(keywords=list(keywords)))
    except Exception as exc:
        logger.exception(
            "Keyword classification failed",
            extra={"keyword_count": len(keywords), "error_type": type(exc).__name__},
        )
        raise ClassificationError() from exc

    logger.info(
        "Keyword classification completed",
        extra={"keyword_count": len(keywords), "classified_count": len(output.keywords)},
    )
    return reattach_volumes(keywords, output.keywords)
