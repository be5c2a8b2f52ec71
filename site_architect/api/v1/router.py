"""API v1 router aggregator."""

from fastapi import APIRouter

from site_architect.api.v1.analysis import routes as analysis
from site_architect.api.v1.architecture import routes as architecture

api_router = APIRouter()

api_router.include_router(analysis.router, prefix="/analysis", tags=["Analysis"])
api_router.include_router(architecture.router, prefix="/architecture", tags=["Architecture"])
