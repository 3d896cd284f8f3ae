"""FastAPI routes for the dashboard API."""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from analytics import get_stats
from models import AppTab
from providers.factory import check_all_providers
from state import DashboardState

logger = logging.getLogger(__name__)
router = APIRouter()

# Set by main.py once the dashboard state is created
_dashboard: DashboardState | None = None


def set_dashboard(dashboard: DashboardState | None):
    global _dashboard
    _dashboard = dashboard


def _require_dashboard() -> DashboardState:
    if _dashboard is None:
        raise HTTPException(503, "Dashboard not running")
    return _dashboard


# ── Pydantic models ─────────────────────────────────────

class GenerateRequest(BaseModel):
    topic: Optional[str] = None


class TopicUpdate(BaseModel):
    topic: str = Field(min_length=1)


class TabUpdate(BaseModel):
    tab: AppTab


class AutopilotUpdate(BaseModel):
    enabled: bool


# ── Endpoints ───────────────────────────────────────────

@router.get("/state")
async def get_state():
    """Full view state rendered by the dashboard."""
    return _require_dashboard().get_view()


@router.get("/logs")
async def get_logs():
    """Activity log, most recent first."""
    return _require_dashboard().log.to_list()


@router.get("/stats")
async def get_analytics():
    return get_stats()


@router.put("/topic")
async def update_topic(body: TopicUpdate):
    dashboard = _require_dashboard()
    dashboard.set_topic(body.topic)
    return {"topic": dashboard.topic}


@router.put("/tab")
async def update_tab(body: TabUpdate):
    dashboard = _require_dashboard()
    dashboard.set_tab(body.tab)
    return {"active_tab": dashboard.active_tab.value}


@router.post("/generate")
async def trigger_generate(body: GenerateRequest | None = None):
    """Start a generation run in the background.

    Poll /state for progress. Returns busy while a run is active.
    """
    dashboard = _require_dashboard()
    started = dashboard.start_generation(body.topic if body else None)
    if not started:
        logger.info("Generation request ignored, run already active")
    return {"status": "started" if started else "busy", "topic": dashboard.topic}


@router.post("/voice/preview")
async def trigger_voice_preview():
    """Speak the current title. Returns started, busy or no_content."""
    status = _require_dashboard().start_voice_preview()
    return {"status": status}


@router.post("/autopilot")
async def update_autopilot(body: AutopilotUpdate):
    dashboard = _require_dashboard()
    dashboard.set_autopilot(body.enabled)
    return {"enabled": dashboard.autopilot.enabled}


@router.get("/providers/health")
async def providers_health():
    return await check_all_providers()
