"""Keyword analysis API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from site_architect.api.v1.analysis.constants import (
    ANALYSIS_IN_PROGRESS_DETAIL,
    CSV_MEDIA_TYPE,
    DEFAULT_SORT_DIRECTION,
    DEFAULT_SORT_KEY,
)
from site_architect.api.v1.dependencies import (
    AnalysisSessionDep,
    ClassifierDep,
    get_latest_result,
)
from site_architect.core.exceptions import (
    AnalysisInProgressError,
    ClassificationError,
    KeywordInputError,
)
from site_architect.schemas.architecture import (
    AnalysisResponse,
    AnalysisSummaryResponse,
    AnalyzeRequest,
    ArchitectureResponse,
    IntentFilter,
    KeywordListResponse,
    SortDirection,
    SortKey,
)
from site_architect.services.analysis_session import AnalysisResult
from site_architect.services.export import EXPORT_FILENAME, export_csv
from site_architect.services.hierarchy import build_hierarchy
from site_architect.services.keyword_input import SAMPLE_INPUT_TEXT, parse_keyword_text
from site_architect.services.result_view import (
    intent_distribution,
    sort_and_filter,
    summarize_results,
)

logger = logging.getLogger(__name__)

router = APIRouter()

LatestResult = Annotated[AnalysisResult, Depends(get_latest_result)]


@router.get(
    "/sample",
    summary="Sample input",
    description="Return a sample keyword list in the tab-separated paste format.",
)
async def get_sample_input() -> dict[str, str]:
    """Return demo keyword text."""
    return {"text": SAMPLE_INPUT_TEXT}


@router.post(
    "",
    response_model=AnalysisResponse,
    summary="Run analysis",
    description=(
        "Parse the keyword list, classify it with the LLM and replace the stored result set. "
        "Accepts raw pasted text (`term<TAB>volume` per line) or parsed keywords."
    ),
)
async def run_analysis(
    request: AnalyzeRequest,
    session: AnalysisSessionDep,
    classifier: ClassifierDep,
) -> AnalysisResponse:
    """Run a new keyword architecture analysis."""
    if request.text is not None:
        keywords = parse_keyword_text(request.text)
    else:
        keywords = list(request.keywords or [])

    try:
        result = await session.run(keywords, classifier)
    except KeywordInputError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=exc.message,
        ) from exc
    except AnalysisInProgressError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=ANALYSIS_IN_PROGRESS_DETAIL,
        ) from exc
    except ClassificationError as exc:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=exc.user_message,
        ) from exc

    return AnalysisResponse(
        keywords=result.records,
        summary=summarize_results(result.records),
    )


@router.get(
    "",
    response_model=KeywordListResponse,
    summary="List analysed keywords",
    description="Return the latest analysed keywords filtered by intent and sorted by one column.",
)
async def list_analysed_keywords(
    result: LatestResult,
    intent: IntentFilter = Query(IntentFilter.ALL),
    sort: SortKey = Query(DEFAULT_SORT_KEY),
    direction: SortDirection = Query(DEFAULT_SORT_DIRECTION),
) -> KeywordListResponse:
    """Flat keyword view."""
    items = sort_and_filter(result.records, intent, sort, direction)
    return KeywordListResponse(
        items=items,
        total=len(items),
        intent=intent,
        sort=sort,
        direction=direction,
    )


@router.get(
    "/architecture",
    response_model=ArchitectureResponse,
    summary="Get site architecture",
    description="Return the Theme -> Pillar -> Page tree of the latest analysis.",
)
async def get_architecture(
    result: LatestResult,
    intent: IntentFilter = Query(IntentFilter.ALL),
) -> ArchitectureResponse:
    """Grouped keyword view."""
    return ArchitectureResponse(
        intent=intent,
        themes=build_hierarchy(result.records, intent),
    )


@router.get(
    "/summary",
    response_model=AnalysisSummaryResponse,
    summary="Get analysis summary",
    description="Return theme/pillar/page counts and the intent distribution.",
)
async def get_summary(result: LatestResult) -> AnalysisSummaryResponse:
    """Summary stats for the latest analysis."""
    return AnalysisSummaryResponse(
        summary=summarize_results(result.records),
        intent_distribution=intent_distribution(result.records),
    )


@router.get(
    "/export",
    summary="Export CSV",
    description="Download the latest analysis as a CSV file, one row per keyword.",
    response_class=Response,
)
async def export_analysis(result: LatestResult) -> Response:
    """CSV download."""
    return Response(
        content=export_csv(result.records),
        media_type=CSV_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{EXPORT_FILENAME}"'},
    )


@router.delete(
    "",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Reset analysis",
    description="Clear the stored analysis results.",
)
async def reset_analysis(session: AnalysisSessionDep) -> Response:
    """Start over."""
    session.reset()
    logger.info("Analysis results cleared")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
