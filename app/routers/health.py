# app/routers/health.py

from pathlib import Path
from fastapi import APIRouter

from app.config import get_settings

router = APIRouter()


@router.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "service": "roster-sync",
    }


@router.get("/ready")
async def readiness_check():
    """Readiness check - the configured roster files must be present."""
    settings = get_settings()
    checks = {
        "guild_file": "ok" if Path(settings.guild_file).is_file() else "missing",
        "sheet_file": "ok" if Path(settings.sheet_file).is_file() else "missing",
        # Optional: no alias file just means no aliases
        "aliases_file": "ok" if Path(settings.aliases_file).is_file() else "absent",
    }
    ready = checks["guild_file"] == "ok" and checks["sheet_file"] == "ok"
    return {
        "status": "ready" if ready else "not_ready",
        "checks": checks,
    }
