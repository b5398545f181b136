"""Admin API for product variation detection and merging"""
from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse
from typing import List, Optional
from uuid import UUID
import logging

from app.core.dependencies import get_variation_service
from app.schemas.variation import DetectResponse, MergeResponse
from app.services.variation_service import VariationService

logger = logging.getLogger(__name__)

variations_admin_router = APIRouter()


def parse_exclude_ids(exclude_ids: Optional[str]) -> List[UUID]:
    """Parse a comma-separated list of product ids; malformed ids are a 422"""
    if not exclude_ids:
        return []
    try:
        return [UUID(value.strip()) for value in exclude_ids.split(",") if value.strip()]
    except ValueError as e:
        raise HTTPException(status_code=422, detail=f"Invalid excludeIds: {e}")


def error_response(message: str) -> JSONResponse:
    return JSONResponse(status_code=500, content={"success": False, "error": message})


@variations_admin_router.get("/variations/detect", response_model=DetectResponse)
def detect_variations(
    manufacturer_id: Optional[UUID] = Query(
        None, alias="manufacturerId", description="Only consider this manufacturer"
    ),
    exclude_ids: Optional[str] = Query(
        None, alias="excludeIds", description="Comma-separated product ids to skip"
    ),
    service: VariationService = Depends(get_variation_service),
):
    """
    Preview variation groups without changing the catalog.

    Safe to call repeatedly; an empty catalog yields an empty group list.
    """
    excluded = parse_exclude_ids(exclude_ids)
    try:
        groups = service.detect_all(
            manufacturer_id=manufacturer_id, exclude_ids=excluded
        )
    except Exception as e:
        logger.error(f"Error detecting variations: {e}", exc_info=True)
        return error_response(str(e))

    return DetectResponse.from_groups(groups)


@variations_admin_router.post("/variations/merge", response_model=MergeResponse)
def merge_variations(
    dry_run: bool = Query(
        False, alias="dryRun", description="Return the merge plan without writing"
    ),
    manufacturer_id: Optional[UUID] = Query(None, alias="manufacturerId"),
    exclude_ids: Optional[str] = Query(None, alias="excludeIds"),
    service: VariationService = Depends(get_variation_service),
):
    """
    Detect and merge all variation groups.

    Per-group failures are reported in ``results`` and counted as not merged;
    ``groupsMerged < groupsFound`` signals a partial run.
    """
    excluded = parse_exclude_ids(exclude_ids)
    try:
        if dry_run:
            plans = service.plan_all(
                manufacturer_id=manufacturer_id, exclude_ids=excluded
            )
            return MergeResponse.from_plans(plans)

        summary = service.merge_all(
            manufacturer_id=manufacturer_id, exclude_ids=excluded
        )
    except Exception as e:
        logger.error(f"Error merging variations: {e}", exc_info=True)
        return error_response(str(e))

    return MergeResponse.from_summary(summary)
