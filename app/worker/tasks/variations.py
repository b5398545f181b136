# app/worker/tasks/variations.py
"""
Celery tasks for background variation detection and merging.
"""
import logging
from celery import shared_task

from app.db.base import SessionLocal
from app.services.variation_service import VariationService

logger = logging.getLogger(__name__)


@shared_task(name="variations:detect")
def detect_variations():
    """
    Count the variation groups currently detectable in the catalog.
    Read-only.
    """
    try:
        db_session = SessionLocal()
        try:
            groups = VariationService(db_session).detect_all()
            return {"status": "success", "groups_found": len(groups)}
        finally:
            db_session.close()
    except Exception as e:
        logger.exception(f"Error detecting variations: {str(e)}")
        return {"status": "error", "message": str(e)}


@shared_task(name="variations:merge_all")
def merge_all_variations():
    """
    Detect and merge every variation group.

    Not retried: a rerun re-detects from the current catalog state.
    """
    try:
        logger.info("Starting variation merge")
        db_session = SessionLocal()
        try:
            summary = VariationService(db_session).merge_all()
            return {
                "status": "success",
                "groups_found": summary.groups_found,
                "groups_merged": summary.groups_merged,
                "products_affected": summary.products_affected,
            }
        finally:
            db_session.close()
    except Exception as e:
        logger.exception(f"Error merging variations: {str(e)}")
        return {"status": "error", "message": str(e)}
