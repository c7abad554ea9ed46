"""Tests for the resolve, download, transcribe, format orchestration."""

from contextlib import asynccontextmanager
from unittest.mock import AsyncMock

import pytest

from domain import (
    AudioUpload,
    BoundedAccumulator,
    FormatSelector,
    RawSegment,
    StreamDescriptor,
    TranscriptBuilder,
)
from exceptions import (
    AudioFetchFailedError,
    AudioTooLargeError,
    NoAudioFormatError,
    TranscriptionFailedError,
)
from handlers import TranscriptionHandler
from infrastructure.interfaces import AudioSource
from tests.conftest import StepClock, aiter_chunks


class FakeAudioSource(AudioSource):
    """Serves fixed chunks and records what was opened."""

    def __init__(self, *chunks: bytes, fail_status: int | None = None):
        self._chunks = chunks
        self._fail_status = fail_status
        self.opened: list[StreamDescriptor] = []

    @asynccontextmanager
    async def open(self, descriptor):
        self.opened.append(descriptor)
        if self._fail_status is not None:
            raise AudioFetchFailedError(self._fail_status)
        yield aiter_chunks(*self._chunks)


@pytest.fixture
def resolver(audio_descriptor):
    resolver = AsyncMock()
    resolver.list_formats.return_value = [
        StreamDescriptor(url="https://media.example.com/v", format_id="18", acodec="mp4a", vcodec="avc1"),
        audio_descriptor,
    ]
    return resolver


@pytest.fixture
def transcription_service(raw_segments):
    service = AsyncMock()
    service.transcribe.return_value = raw_segments
    return service


def _handler(resolver, audio_source, transcription_service, max_bytes=1024):
    return TranscriptionHandler(
        resolver=resolver,
        selector=FormatSelector(),
        audio_source=audio_source,
        accumulator=BoundedAccumulator(max_bytes=max_bytes, max_seconds=45, clock=StepClock(0.0)),
        transcription_service=transcription_service,
        transcript_builder=TranscriptBuilder(),
    )


class TestProcess:
    """Tests for TranscriptionHandler.process."""

    @pytest.mark.asyncio
    async def test_success(self, resolver, transcription_service, audio_descriptor):
        audio_source = FakeAudioSource(b"op", b"us")
        handler = _handler(resolver, audio_source, transcription_service)

        result = await handler.process("abc", "pt")

        resolver.list_formats.assert_awaited_once_with("abc")
        assert audio_source.opened == [audio_descriptor]
        transcription_service.transcribe.assert_awaited_once_with(
            AudioUpload(data=b"opus", filename="abc.webm", content_type="audio/webm", language="pt")
        )
        assert result.text == "Hello world"
        assert [s.text for s in result.segments] == ["Hello", "world"]
        assert result.vtt.startswith("WEBVTT\n\n1\n00:00:00.000 --> 00:00:01.500\nHello\n\n")

    @pytest.mark.asyncio
    async def test_language_is_passed_verbatim(self, resolver, transcription_service):
        handler = _handler(resolver, FakeAudioSource(b"x"), transcription_service)

        await handler.process("abc", "en-US")

        upload = transcription_service.transcribe.await_args.args[0]
        assert upload.language == "en-US"

    @pytest.mark.asyncio
    async def test_no_audio_format_skips_download(self, resolver, transcription_service):
        resolver.list_formats.return_value = []
        audio_source = FakeAudioSource(b"x")
        handler = _handler(resolver, audio_source, transcription_service)

        with pytest.raises(NoAudioFormatError):
            await handler.process("abc", "pt")

        assert audio_source.opened == []
        transcription_service.transcribe.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_fetch_failure_skips_transcription(self, resolver, transcription_service):
        handler = _handler(resolver, FakeAudioSource(fail_status=410), transcription_service)

        with pytest.raises(AudioFetchFailedError):
            await handler.process("abc", "pt")

        transcription_service.transcribe.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_oversized_audio_skips_transcription(self, resolver, transcription_service):
        handler = _handler(
            resolver, FakeAudioSource(b"x" * 600, b"x" * 600), transcription_service, max_bytes=1000
        )

        with pytest.raises(AudioTooLargeError):
            await handler.process("abc", "pt")

        transcription_service.transcribe.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_empty_audio_is_still_transcribed(self, resolver, transcription_service):
        transcription_service.transcribe.return_value = []
        handler = _handler(resolver, FakeAudioSource(), transcription_service)

        result = await handler.process("abc", "pt")

        assert transcription_service.transcribe.await_args.args[0].data == b""
        assert result.text == ""
        assert result.vtt == "WEBVTT\n\n"

    @pytest.mark.asyncio
    async def test_transcription_failure_propagates(self, resolver, transcription_service):
        transcription_service.transcribe.side_effect = TranscriptionFailedError(500, "boom")
        handler = _handler(resolver, FakeAudioSource(b"x"), transcription_service)

        with pytest.raises(TranscriptionFailedError):
            await handler.process("abc", "pt")

    @pytest.mark.asyncio
    async def test_segments_keep_upstream_order(self, resolver, transcription_service):
        transcription_service.transcribe.return_value = [
            RawSegment(start=5.0, end=6.0, text="later"),
            RawSegment(start=1.0, end=2.0, text="earlier"),
        ]
        handler = _handler(resolver, FakeAudioSource(b"x"), transcription_service)

        result = await handler.process("abc", "pt")

        assert [s.text for s in result.segments] == ["later", "earlier"]
