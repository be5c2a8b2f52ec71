"""Holder for the most recent analysis and the single in-flight guard."""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime, timezone

from site_architect.core.exceptions import AnalysisInProgressError, AnalysisNotFoundError
from site_architect.schemas.keyword import ClassifiedKeyword, KeywordInput
from site_architect.services.classification import KeywordClassifier, classify_keywords
from site_architect.services.keyword_input import validate_keyword_count

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AnalysisResult:
    """Completed analysis: the inputs and their classified records."""

    inputs: list[KeywordInput]
    records: list[ClassifiedKeyword]
    completed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class AnalysisSession:
    """Runs analyses one at a time and keeps only the latest successful result.

    A new analysis is refused while another is awaiting the classifier. A
    failed analysis leaves the previous result untouched.
    """

    def __init__(self) -> None:
        self._result: AnalysisResult | None = None
        self._in_flight = False

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    @property
    def result(self) -> AnalysisResult | None:
        return self._result

    def require_result(self) -> AnalysisResult:
        """Return the latest result or raise AnalysisNotFoundError."""
        if self._result is None:
            raise AnalysisNotFoundError()
        return self._result

    async def run(
        self,
        keywords: Sequence[KeywordInput],
        classifier: KeywordClassifier | None = None,
    ) -> AnalysisResult:
        """Validate, classify and store a new result set.

        Raises:
            KeywordInputError: Empty batch or batch above the limit (no call made).
            AnalysisInProgressError: Another analysis has not finished yet.
            ClassificationError: The classifier call failed.
        """
        validate_keyword_count(keywords)
        if self._in_flight:
            raise AnalysisInProgressError()

        self._in_flight = True
        t0 = time.perf_counter()
        logger.info("Analysis started", extra={"keyword_count": len(keywords)})
        try:
            records = await classify_keywords(keywords, classifier)
        finally:
            self._in_flight = False

        self._result = AnalysisResult(inputs=list(keywords), records=records)
        logger.info(
            "Analysis completed",
            extra={
                "keyword_count": len(keywords),
                "classified_count": len(records),
                "duration_s": round(time.perf_counter() - t0, 2),
            },
        )
        return self._result

    def reset(self) -> None:
        """Forget the latest result."""
        self._result = None


_analysis_session: AnalysisSession | None = None


def get_analysis_session() -> AnalysisSession:
    """Get singleton analysis session."""
    global _analysis_session
    if _analysis_session is None:
        _analysis_session = AnalysisSession()
    return _analysis_session


def reset_analysis_session() -> None:
    """Drop the singleton (used between tests)."""
    global _analysis_session
    _analysis_session = None
