import asyncio

import httpx
import pytest

import routes
from main import app
from models import AppTab
from state import DashboardState


@pytest.fixture
async def dashboard(metadata_generator, thumbnail_generator, speech_generator, output_factory):
    state = DashboardState(
        metadata_generator=metadata_generator,
        thumbnail_generator=thumbnail_generator,
        speech_generator=speech_generator,
        output_factory=output_factory,
        topic="Quantum Computing for Beginners",
        autopilot_interval=0.1,
    )
    routes.set_dashboard(state)
    yield state
    await state.close()
    routes.set_dashboard(None)


@pytest.fixture
async def client(dashboard):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


async def test_initial_state(client):
    resp = await client.get("/state")
    assert resp.status_code == 200
    view = resp.json()

    assert view["topic"] == "Quantum Computing for Beginners"
    assert view["active_tab"] == "dashboard"
    assert view["generating"] is False
    assert view["voice_playing"] is False
    assert view["autopilot"] is False
    assert view["metadata"] is None
    assert view["thumbnail_url"] is None
    assert [log["message"] for log in view["logs"]] == [
        "Core: Ultra-Fast mode initialized.",
        "Security: Zero-Error Shield Active.",
    ]
    assert len(view["stats"]["series"]) == 7


async def test_generate_then_read_content(client, dashboard, metadata_generator):
    resp = await client.post("/generate", json={"topic": "Black Holes"})
    assert resp.json() == {"status": "started", "topic": "Black Holes"}

    await dashboard.wait_idle()
    view = (await client.get("/state")).json()

    assert metadata_generator.calls == ["Black Holes"]
    assert view["metadata"]["title"] == metadata_generator.result.title
    assert view["metadata"]["thumbnailPrompt"] == metadata_generator.result.thumbnail_prompt
    assert view["thumbnail_url"].startswith("data:image/png;base64,")
    assert view["generating"] is False
    assert {"label": "SEO Meta Finalization", "status": "complete"} in view["tasks"]


async def test_generate_while_running_reports_busy(client, dashboard, metadata_generator):
    metadata_generator.gate = asyncio.Event()

    first = await client.post("/generate", json={})
    second = await client.post("/generate", json={"topic": "Something Else"})

    assert first.json()["status"] == "started"
    assert second.json() == {"status": "busy", "topic": "Quantum Computing for Beginners"}
    assert (await client.get("/state")).json()["generating"] is True

    metadata_generator.gate.set()
    await dashboard.wait_idle()
    assert metadata_generator.calls == ["Quantum Computing for Beginners"]


async def test_voice_preview_flow(client, dashboard, output_factory):
    assert (await client.post("/voice/preview")).json() == {"status": "no_content"}

    await client.post("/generate", json={})
    await dashboard.wait_idle()

    assert (await client.post("/voice/preview")).json() == {"status": "started"}
    await dashboard.wait_idle()
    assert (await client.get("/state")).json()["voice_playing"] is True
    assert (await client.post("/voice/preview")).json() == {"status": "busy"}

    output_factory.created[0].finish()
    assert (await client.get("/state")).json()["voice_playing"] is False


async def test_autopilot_toggle(client, dashboard):
    resp = await client.post("/autopilot", json={"enabled": True})
    assert resp.json() == {"enabled": True}
    await asyncio.sleep(0.15)

    resp = await client.post("/autopilot", json={"enabled": False})
    assert resp.json() == {"enabled": False}

    messages = [log["message"] for log in (await client.get("/logs")).json()]
    assert "Auto-Pilot: Scanning niche trends..." in messages
    assert sum(m.startswith("Auto: ") for m in messages) == 1


async def test_topic_and_tab_updates(client):
    assert (await client.put("/topic", json={"topic": "Fusion Energy"})).json() == {"topic": "Fusion Energy"}
    assert (await client.put("/tab", json={"tab": "voice"})).json() == {"active_tab": "voice"}

    view = (await client.get("/state")).json()
    assert view["topic"] == "Fusion Energy"
    assert view["active_tab"] == "voice"


async def test_invalid_input_is_rejected(client):
    assert (await client.put("/tab", json={"tab": "settings"})).status_code == 422
    assert (await client.put("/topic", json={"topic": ""})).status_code == 422
    assert (await client.post("/autopilot", json={})).status_code == 422


async def test_dashboard_page_and_stats(client):
    page = await client.get("/")
    assert page.status_code == 200
    assert "ULTRA-AI" in page.text

    stats = (await client.get("/stats")).json()
    assert stats["totals"]["reach"] == sum(p["reach"] for p in stats["series"])


async def test_dashboard_page_navigates_every_tab(client):
    page = (await client.get("/")).text

    for tab in AppTab:
        assert f'data-tab="{tab.value}"' in page
    for label in ("Dashboard", "Content Factory", "Neural Voice", "Analytics"):
        assert f">{label}</button>" in page
    assert "api('PUT', '/tab'" in page
    assert "s.active_tab" in page
    assert "Return to Core" in page


async def test_not_running_returns_503():
    routes.set_dashboard(None)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        assert (await c.get("/state")).status_code == 503
