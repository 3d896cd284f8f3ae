"""Failure kinds raised by the remote capability and the audio decoder.

All of them are recovered at the component that issued the request and turned
into a single activity log entry; none reach the HTTP layer.
"""


class StudioError(Exception):
    """Base class. ``str(err)`` is the human-readable detail shown in the log."""


class RemoteRequestFailure(StudioError):
    """Transport error or non-2xx response from the remote capability."""


class MalformedResponseFailure(StudioError):
    """A response arrived but required fields are missing or invalid."""


class DecodeFailure(StudioError):
    """Audio payload cannot be parsed as 16-bit PCM."""
