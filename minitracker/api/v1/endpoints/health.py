"""
Health checks - for load balancers, Kubernetes, and monitoring.
Liveness is process-only; readiness round-trips the database.
"""

from fastapi import APIRouter
from sqlalchemy import text

from minitracker.config import get_settings
from minitracker.db.session import DbSession
from minitracker.schemas.common import ok

router = APIRouter()
settings = get_settings()


@router.get("")
async def health():
    """Liveness: is the process up?"""
    return ok({"status": "ok", "app": settings.app_name})


@router.get("/ready")
async def ready(session: DbSession):
    """Readiness: can the database answer a trivial query?"""
    await session.execute(text("SELECT 1"))
    return ok({"status": "ready"})
