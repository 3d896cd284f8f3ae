import asyncio

from state import DashboardState
from tests.fakes import messages


def _state(metadata_generator, thumbnail_generator, speech_generator, output_factory, **kwargs):
    return DashboardState(
        metadata_generator=metadata_generator,
        thumbnail_generator=thumbnail_generator,
        speech_generator=speech_generator,
        output_factory=output_factory,
        **kwargs,
    )


async def test_generation_and_voice_can_overlap(metadata_generator, thumbnail_generator, speech_generator, output_factory):
    state = _state(metadata_generator, thumbnail_generator, speech_generator, output_factory)
    state.start_generation("first")
    await state.wait_idle()
    assert state.start_voice_preview() == "started"
    await state.wait_idle()

    thumbnail_generator.gate = asyncio.Event()
    assert state.start_generation("second") is True
    await asyncio.sleep(0)

    assert state.pipeline.generating is True
    assert state.voice.playing is True

    thumbnail_generator.gate.set()
    output_factory.created[0].finish()
    await state.close()


async def test_blank_topic_falls_back_to_default(metadata_generator, thumbnail_generator, speech_generator, output_factory):
    state = _state(metadata_generator, thumbnail_generator, speech_generator, output_factory, topic="Custom")
    state.set_topic("   ")
    assert state.topic == "Quantum Computing for Beginners"


async def test_close_stops_autopilot_and_releases_audio(metadata_generator, thumbnail_generator, speech_generator, output_factory):
    state = _state(metadata_generator, thumbnail_generator, speech_generator, output_factory, autopilot_interval=0.05)
    state.start_generation()
    await state.wait_idle()
    state.start_voice_preview()
    await state.wait_idle()
    state.set_autopilot(True)

    await state.close()
    count = len(state.log)
    await asyncio.sleep(0.15)

    assert state.autopilot.enabled is False
    assert len(state.log) == count
    assert output_factory.created[0].closed is True


async def test_log_capacity_applies_to_whole_dashboard(metadata_generator, thumbnail_generator, speech_generator, output_factory):
    state = _state(metadata_generator, thumbnail_generator, speech_generator, output_factory, log_capacity=4)
    state.start_generation("topic")
    await state.wait_idle()

    assert messages(state.log) == [
        "Neural canvas render complete.",
        "Rendering neural thumbnail...",
        "Metadata synthesized successfully.",
        "Synthesizing metadata structure...",
    ]
