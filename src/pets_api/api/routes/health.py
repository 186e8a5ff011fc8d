"""Health check endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from pets_api.api.schemas.common import HealthResponse
from pets_api.core.database import get_session

router = APIRouter()


@router.get("/health", response_model=HealthResponse, response_model_exclude_none=True)
async def health_check():
    """Basic health check."""
    return HealthResponse(status="healthy", service="pets-api")


@router.get("/health/db", response_model=HealthResponse, response_model_exclude_none=True)
async def database_health(session: AsyncSession = Depends(get_session)):
    """Check database connectivity."""
    try:
        result = await session.execute(text("SELECT 1"))
        result.scalar()
        return HealthResponse(status="healthy", database="connected")
    except SQLAlchemyError as e:
        return HealthResponse(status="unhealthy", database="disconnected", error=str(e))
