"""Health check endpoints."""

import platform
from datetime import datetime, timezone

from fastapi import APIRouter

from app.config import get_settings

router = APIRouter()


@router.get("/health")
async def health_check():
    """Basic health check."""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/health/detailed")
async def detailed_health():
    """Health check with generation service configuration."""
    settings = get_settings()
    generation_enabled = settings.generation_enabled

    return {
        "status": "healthy" if generation_enabled else "degraded",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "system": {
            "platform": platform.system(),
            "python": platform.python_version(),
            "environment": settings.environment,
        },
        "generation": {
            "enabled": generation_enabled,
            "model": settings.openai_model,
            "chat_model": settings.openai_chat_model,
            "timeout_seconds": settings.generation_timeout_seconds,
        },
    }
