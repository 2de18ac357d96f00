"""
Cascade impact analysis router.

Wired to:
- CascadeAnalyzer for single analyses
- BatchCascadeAnalyzer for concurrent fan-out
- TopologyProvider for region rosters
"""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from beacon_api.config import get_settings
from beacon_api.engine import BatchCascadeAnalyzer, CascadeAnalyzer, OriginNotFoundError
from beacon_api.models.cascade import (
    CascadeAnalysisRequest,
    CascadeAnalysisResponse,
    CascadeSummaryResponse,
)
from beacon_api.routers.dependencies import get_analyzer, get_batch_analyzer
from beacon_api.utils.logging import get_logger

logger = get_logger(__name__)
router = APIRouter()


class BatchAnalysisRequest(BaseModel):
    """Several independent analyses submitted together."""

    requests: list[CascadeAnalysisRequest] = Field(min_length=1)


@router.post("/analyze", response_model=CascadeAnalysisResponse)
async def analyze_cascade(
    request: CascadeAnalysisRequest,
    analyzer: CascadeAnalyzer = Depends(get_analyzer),
):
    """
    Analyze cascade effects of a supply chain disruption.
    Returns affected nodes, traversed edges and the network impact score.
    """
    logger.info(
        "cascade_analyze",
        scenario_type=request.scenario_type,
        region=request.region,
        origin_node=request.origin_node,
        severity=request.severity,
    )

    try:
        return analyzer.analyze_request(request)
    except OriginNotFoundError as e:
        logger.warning("cascade_origin_rejected", origin_id=e.origin_id, region=e.region)
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/analyze/summary", response_model=CascadeSummaryResponse)
async def analyze_cascade_with_summary(
    request: CascadeAnalysisRequest,
    analyzer: CascadeAnalyzer = Depends(get_analyzer),
):
    """
    Analyze cascade effects and attach narrative, critical path and recommendations.
    """
    logger.info(
        "cascade_analyze_summary",
        scenario_type=request.scenario_type,
        region=request.region,
    )

    try:
        return analyzer.analyze_with_summary(request)
    except OriginNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/batch")
def analyze_cascade_batch(
    batch: BatchAnalysisRequest,
    batch_analyzer: BatchCascadeAnalyzer = Depends(get_batch_analyzer),
):
    """
    Run several independent analyses concurrently.
    Failed analyses are reported in place without aborting the batch.
    """
    settings = get_settings()
    if len(batch.requests) > settings.batch_max_requests:
        raise HTTPException(
            status_code=413,
            detail=f"Batch exceeds {settings.batch_max_requests} requests",
        )

    logger.info("cascade_batch", request_count=len(batch.requests))

    results = batch_analyzer.analyze_many(batch.requests)

    return {
        "success": all(r.success for r in results),
        "data": [r.model_dump(mode="json", by_alias=True) for r in results],
    }


@router.get("/topology/{region}")
async def get_region_topology(
    region: str,
    analyzer: CascadeAnalyzer = Depends(get_analyzer),
):
    """
    Get the supply-chain nodes for a region.
    Unknown regions return the fallback topology.
    """
    logger.info("topology_fetch", region=region)

    nodes = analyzer.topology_provider.get_topology(region)

    return {
        "success": True,
        "data": {
            "region": region,
            "nodes": [node.model_dump(mode="json", by_alias=True) for node in nodes],
        },
    }


@router.get("/regions")
async def list_regions(analyzer: CascadeAnalyzer = Depends(get_analyzer)):
    """List regions with a dedicated topology."""
    return {"success": True, "data": analyzer.topology_provider.regions()}
