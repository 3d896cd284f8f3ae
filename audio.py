"""PCM decoding and the audio output context used for voice previews."""

import asyncio
import base64
import binascii
import logging
from typing import Callable

import numpy as np

from errors import DecodeFailure
from models import AudioBuffer

logger = logging.getLogger(__name__)

SAMPLE_RATE = 24000
CHANNELS = 1
PCM_SCALE = 32768.0


def decode_pcm(payload: str, sample_rate: int = SAMPLE_RATE) -> AudioBuffer:
    """Decode base64 raw PCM (signed 16-bit little-endian, mono) to float samples.

    Each sample is divided by 32768.0, so the result lies in [-1.0, 1.0).
    """
    try:
        raw = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeFailure(f"Audio payload is not valid base64: {e}") from e

    if not raw:
        raise DecodeFailure("Audio payload is empty")
    if len(raw) % 2:
        raise DecodeFailure(f"Audio payload has odd length ({len(raw)} bytes), expected 16-bit samples")

    samples = np.frombuffer(raw, dtype="<i2").astype(np.float32) / PCM_SCALE
    return AudioBuffer(samples=samples, sample_rate=sample_rate, channels=CHANNELS)


class AudioOutput:
    """Audio output context backed by sounddevice (PortAudio).

    One instance is created lazily by the voice preview and reused for the
    life of the process. ``play`` is non-blocking; ``on_ended`` is scheduled on
    the calling event loop once the stream has drained.
    """

    def __init__(self, sample_rate: int = SAMPLE_RATE, channels: int = CHANNELS):
        # Raises OSError on hosts without PortAudio
        import sounddevice as sd

        self._sd = sd
        self.sample_rate = sample_rate
        self.channels = channels
        self._streams: set = set()
        logger.info("Audio output ready (%d Hz, %d ch, device=%s)", sample_rate, channels, sd.default.device)

    def play(self, buffer: AudioBuffer, on_ended: Callable[[], None]) -> None:
        loop = asyncio.get_running_loop()
        samples = buffer.samples.reshape(-1, buffer.channels)
        position = 0
        sd = self._sd

        def callback(outdata, frames, time_info, status):
            nonlocal position
            if status:
                logger.debug("Audio stream status: %s", status)
            chunk = samples[position:position + frames]
            outdata[: len(chunk)] = chunk
            position += len(chunk)
            if len(chunk) < frames:
                outdata[len(chunk):] = 0
                raise sd.CallbackStop

        def finished():
            # PortAudio thread; closing and notifying happen on the loop
            loop.call_soon_threadsafe(self._finish, stream, on_ended)

        stream = sd.OutputStream(
            samplerate=buffer.sample_rate,
            channels=buffer.channels,
            dtype="float32",
            callback=callback,
            finished_callback=finished,
        )
        self._streams.add(stream)
        try:
            stream.start()
        except Exception:
            self._streams.discard(stream)
            stream.close()
            raise

    def _finish(self, stream, on_ended: Callable[[], None]) -> None:
        self._streams.discard(stream)
        stream.close()
        on_ended()

    def close(self) -> None:
        """Abort any playback still running."""
        for stream in list(self._streams):
            stream.abort()
            stream.close()
        self._streams.clear()
