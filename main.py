"""FastAPI application, entry point for the autopilot dashboard."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import settings
from dashboard import dashboard_router
from routes import router, set_dashboard
from state import DashboardState

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)-8s %(name)s — %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info("=" * 70)
    logger.info("Ultra-AI Autopilot - Starting Up")
    logger.info("=" * 70)
    logger.info("Text provider: %s (%s)", settings.llm_provider, settings.metadata_model)
    logger.info("Image model: %s", settings.image_model)
    logger.info("Speech model: %s (voice %s)", settings.speech_model, settings.speech_voice)
    if not settings.google_api_key:
        logger.warning("GOOGLE_API_KEY is not set; remote generation will fail")

    dashboard = DashboardState()
    set_dashboard(dashboard)

    logger.info("Dashboard running on http://localhost:%d", settings.port)
    yield

    logger.info("Shutting down dashboard...")
    await dashboard.close()
    set_dashboard(None)
    logger.info("Shutdown complete")


app = FastAPI(
    title="Ultra-AI Autopilot",
    description="Operator dashboard for AI video metadata, thumbnails and voice previews",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(dashboard_router)
app.include_router(router)

if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=settings.port, reload=True)
