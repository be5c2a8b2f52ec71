"""Reusable API dependencies shared across v1 routes."""

from site_architect.api.v1.dependencies.analysis_access import (
    AnalysisSessionDep,
    ClassifierDep,
    get_keyword_classifier,
    get_latest_result,
)

__all__ = [
    "AnalysisSessionDep",
    "ClassifierDep",
    "get_keyword_classifier",
    "get_latest_result",
]
