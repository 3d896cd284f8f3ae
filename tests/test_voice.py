import asyncio

from errors import RemoteRequestFailure
from tests.fakes import make_metadata, messages, severities
from voice import VoicePreview


def _preview(log, speech_generator, output_factory, metadata=None):
    current = {"metadata": metadata if metadata is not None else make_metadata()}
    preview = VoicePreview(
        log,
        metadata_source=lambda: current["metadata"],
        speech_generator=speech_generator,
        output_factory=output_factory,
    )
    return preview, current


async def test_no_metadata_is_a_noop(log, speech_generator, output_factory):
    preview, current = _preview(log, speech_generator, output_factory)
    current["metadata"] = None

    assert await preview.preview() is False
    assert preview.playing is False
    assert speech_generator.calls == []
    assert output_factory.created == []
    assert len(log) == 0


async def test_plays_title_until_playback_ends(log, speech_generator, output_factory):
    preview, current = _preview(log, speech_generator, output_factory)

    assert await preview.preview() is True

    assert speech_generator.calls == [current["metadata"].title]
    output = output_factory.created[0]
    assert len(output.played) == 1
    assert output.played[0].samples.tolist() == [0.0, -1.0]
    assert output.played[0].sample_rate == 24000
    assert preview.playing is True
    assert messages(log) == ["Voice stream active.", "Synthesizing neural voice output..."]

    output.finish()
    assert preview.playing is False


async def test_reinvoking_while_playing_is_a_noop(log, speech_generator, output_factory):
    preview, _ = _preview(log, speech_generator, output_factory)
    await preview.preview()
    entries_before = log.entries()

    assert await preview.preview() is False
    assert preview.playing is True
    assert len(speech_generator.calls) == 1
    assert log.entries() == entries_before


async def test_reinvoking_while_fetching_is_a_noop(log, speech_generator, output_factory):
    preview, _ = _preview(log, speech_generator, output_factory)
    speech_generator.gate = asyncio.Event()

    task = asyncio.create_task(preview.preview())
    await asyncio.sleep(0)
    assert await preview.preview() is False
    assert len(speech_generator.calls) == 1

    speech_generator.gate.set()
    await task
    assert preview.playing is True


async def test_remote_failure_clears_flag(log, speech_generator, output_factory):
    speech_generator.error = RemoteRequestFailure("Speech request failed: 429 Too Many Requests")
    preview, _ = _preview(log, speech_generator, output_factory)

    await preview.preview()

    assert preview.playing is False
    assert output_factory.created[0].played == []
    assert severities(log).count("error") == 1
    assert messages(log)[0] == "Voice synthesis failed: Speech request failed: 429 Too Many Requests"


async def test_decode_failure_plays_nothing(log, speech_generator, output_factory):
    speech_generator.payload = "AAA="  # one byte
    preview, _ = _preview(log, speech_generator, output_factory)

    await preview.preview()

    assert preview.playing is False
    assert output_factory.created[0].played == []
    assert messages(log)[0].startswith("Voice synthesis failed: Audio payload has odd length")


async def test_output_context_creation_failure_is_logged(log, speech_generator):
    def broken_factory():
        raise OSError("PortAudio library not found")

    preview, _ = _preview(log, speech_generator, broken_factory)

    await preview.preview()

    assert preview.playing is False
    assert speech_generator.calls == []
    assert messages(log)[0] == "Voice synthesis failed: PortAudio library not found"


async def test_output_context_is_created_once(log, speech_generator, output_factory):
    preview, _ = _preview(log, speech_generator, output_factory)

    await preview.preview()
    output_factory.created[0].finish()
    await preview.preview()
    output_factory.created[0].finish()

    assert len(output_factory.created) == 1
    assert len(output_factory.created[0].played) == 2


async def test_can_preview_again_after_failure(log, speech_generator, output_factory):
    speech_generator.error = RemoteRequestFailure("boom")
    preview, _ = _preview(log, speech_generator, output_factory)
    await preview.preview()

    speech_generator.error = None
    await preview.preview()

    assert preview.playing is True
    assert len(output_factory.created[0].played) == 1
