# app/api/routers/health.py
from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.data.database import get_db
from app.domain.schemas import HealthOut
from app.utils.logging import get_logger
from app.utils.settings import SERVICE_NAME

logger = get_logger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthOut)
def health(db: Session = Depends(get_db)):
    try:
        db.execute(text("SELECT 1"))
        database = "ok"
    except SQLAlchemyError as e:
        logger.warning(f"Health check: baza niedostepna: {e}")
        database = "unavailable"

    return HealthOut(
        status="ok" if database == "ok" else "degraded",
        service=SERVICE_NAME,
        database=database,
    )
