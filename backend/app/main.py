"""
nutrigenius: FastAPI backend for AI-generated diet plans.

Run with: uvicorn app.main:app --reload

Architecture:
- Validates health profiles and every generated response against typed contracts
- Delegates content to an external generation service (OpenAI)
- Returns a uniform {data} | {error} body from every action endpoint
- Keeps no state between requests; the current plan is owned by the frontend
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.api import health, ai

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown."""
    logger.info("Starting nutrigenius backend...")
    if not settings.generation_enabled:
        logger.warning("OPENAI_API_KEY not set - generation requests will fail!")

    yield

    logger.info("Shutting down nutrigenius backend...")


app = FastAPI(
    title="nutrigenius",
    description="AI diet plans, shopping lists, recipes and chat",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS - allow frontend access
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router, tags=["health"])
app.include_router(ai.router, prefix="/api", tags=["ai"])


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "nutrigenius",
        "version": "0.1.0",
        "description": "AI diet plans, shopping lists, recipes and chat",
        "docs": "/docs",
        "endpoints": {
            "health": "/health",
            "diet-plan": "/api/diet-plan",
            "shopping-list": "/api/shopping-list",
            "recipes": "/api/recipes",
            "chat": "/api/chat",
            "plan-day": "/api/plan/days/{day}",
        },
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=not settings.is_production,
    )
