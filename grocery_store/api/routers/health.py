# grocery_store/api/routers/health.py
from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from grocery_store.data.database import get_db
from grocery_store.domain.schemas import HealthOut
from grocery_store.utils.logging import SERVICE_NAME, get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthOut)
def health(db: Session = Depends(get_db)):
    try:
        db.execute(text("SELECT 1"))
        database = "up"
    except SQLAlchemyError as e:
        logger.error(f"Health check: baza niedostepna: {e}")
        database = "down"

    return HealthOut(
        status="ok" if database == "up" else "degraded",
        service=SERVICE_NAME,
        database=database,
    )
