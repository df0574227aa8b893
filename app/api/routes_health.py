import logging
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.session import get_db
from app.db.models import utcnow
from app.schemas.health import HealthResponse
from app.usecases.dto import to_iso8601

log = logging.getLogger(__name__)

router = APIRouter()

@router.get("/health", response_model=HealthResponse, responses={500: {"model": HealthResponse}})
async def health(db: AsyncSession = Depends(get_db)):
    timestamp = to_iso8601(utcnow())
    try:
        await db.execute(text("SELECT 1"))
    except Exception as e:
        log.error("Database health check failed: %s", e, extra={"operation": "health"})
        return JSONResponse(
            status_code=500,
            content={"status": "error", "message": "Database connection failed", "timestamp": timestamp},
        )
    return HealthResponse(status="ok", message="Database is connected", timestamp=timestamp)
