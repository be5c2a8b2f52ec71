"""Stateless architecture building endpoint."""

from fastapi import APIRouter, Query

from site_architect.schemas.architecture import ArchitectureResponse, IntentFilter
from site_architect.schemas.keyword import ClassifiedKeyword
from site_architect.services.hierarchy import build_hierarchy

router = APIRouter()


@router.post(
    "/build",
    response_model=ArchitectureResponse,
    summary="Build architecture from classified keywords",
    description=(
        "Group already-classified keywords into the Theme -> Pillar -> Page tree "
        "without calling the classifier or touching the stored analysis."
    ),
)
async def build_architecture(
    records: list[ClassifiedKeyword],
    intent: IntentFilter = Query(IntentFilter.ALL),
) -> ArchitectureResponse:
    """Pure projection over the posted records."""
    return ArchitectureResponse(intent=intent, themes=build_hierarchy(records, intent))
