from contextlib import contextmanager
from fastapi import Depends
from sqlalchemy.orm import Session

from app.core.logging import get_logger
from app.db.base import SessionLocal
from app.services.variation_service import VariationService

logger = get_logger(__name__)


@contextmanager
def get_db_session():
    """Create a database session with proper cleanup"""
    db_session = SessionLocal()
    try:
        yield db_session
    except Exception:
        db_session.rollback()
        raise
    finally:
        db_session.close()


def get_db():
    """FastAPI dependency for database session"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_variation_service(db: Session = Depends(get_db)) -> VariationService:
    """Get variation service bound to the request's DB session"""
    return VariationService(db)
