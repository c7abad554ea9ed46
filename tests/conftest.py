"""Pytest configuration and fixtures."""

import pytest

from domain import RawSegment, StreamDescriptor


async def aiter_chunks(*chunks: bytes):
    """Async iterator over the given byte chunks."""
    for chunk in chunks:
        yield chunk


class StepClock:
    """Clock returning preset readings, then repeating the last one."""

    def __init__(self, *readings: float):
        self._readings = list(readings)
        self.calls = 0

    def __call__(self) -> float:
        self.calls += 1
        if len(self._readings) > 1:
            return self._readings.pop(0)
        return self._readings[0]


@pytest.fixture
def raw_segments():
    """Upstream segments with the padding Whisper usually returns."""
    return [
        RawSegment(start=0.0, end=1.5, text=" Hello"),
        RawSegment(start=1.5, end=3.0, text=" world"),
    ]


@pytest.fixture
def audio_descriptor():
    """An audio-only rendition with a download URL."""
    return StreamDescriptor(
        url="https://media.example.com/audio.webm",
        format_id="251",
        ext="webm",
        acodec="opus",
        vcodec="none",
        abr=130.5,
        http_headers={"User-Agent": "Mozilla/5.0"},
    )
