"""Shared dependencies for the analysis session and classifier."""

from typing import Annotated

from fastapi import Depends, HTTPException, status

from site_architect.agents.architecture_classifier import ArchitectureClassifierAgent
from site_architect.api.v1.analysis.constants import ANALYSIS_NOT_FOUND_DETAIL
from site_architect.core.exceptions import AnalysisNotFoundError
from site_architect.services.analysis_session import (
    AnalysisResult,
    AnalysisSession,
    get_analysis_session,
)
from site_architect.services.classification import KeywordClassifier


def get_keyword_classifier() -> KeywordClassifier:
    """Return the classifier used for new analyses."""
    return ArchitectureClassifierAgent()


AnalysisSessionDep = Annotated[AnalysisSession, Depends(get_analysis_session)]
ClassifierDep = Annotated[KeywordClassifier, Depends(get_keyword_classifier)]


def get_latest_result(session: AnalysisSessionDep) -> AnalysisResult:
    """Return the latest completed analysis or respond 404."""
    try:
        return session.require_result()
    except AnalysisNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=ANALYSIS_NOT_FOUND_DETAIL,
        ) from exc
