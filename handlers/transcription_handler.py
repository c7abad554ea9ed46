"""Handler for turning a video id into a transcript."""

from domain import (
    AudioUpload,
    BoundedAccumulator,
    CancelProbe,
    FormatSelector,
    TranscriptBuilder,
    TranscriptResult,
)
from infrastructure.interfaces import AudioSource, StreamResolver, TranscriptionService
from log_config import setup_logging

logger = setup_logging()


class TranscriptionHandler:
    """Orchestrates resolve, download, transcribe and format for one request."""

    def __init__(
        self,
        resolver: StreamResolver,
        selector: FormatSelector,
        audio_source: AudioSource,
        accumulator: BoundedAccumulator,
        transcription_service: TranscriptionService,
        transcript_builder: TranscriptBuilder,
    ):
        self._resolver = resolver
        self._selector = selector
        self._audio_source = audio_source
        self._accumulator = accumulator
        self._transcription_service = transcription_service
        self._transcript_builder = transcript_builder

    async def process(
        self,
        video_id: str,
        language: str,
        is_cancelled: CancelProbe | None = None,
    ) -> TranscriptResult:
        """
        Transcribes the best audio rendition of a video.

        Args:
            video_id: Platform video identifier.
            language: Language hint, passed to the transcription service verbatim.
            is_cancelled: Optional probe checked between downloaded chunks.

        Returns:
            TranscriptResult with text, segments and WebVTT track.

        Raises:
            NoAudioFormatError: If no audio-only rendition is available.
            AudioFetchFailedError: If the audio source rejects the download.
            AudioTooLargeError: If the audio exceeds the size ceiling.
            DownloadTimeoutError: If the download exceeds its time budget.
            DownloadCancelledError: If the probe reports cancellation.
            TranscriptionFailedError: If the transcription service rejects the audio.
        """
        logger.info(
            "Processing video",
            extra={"video_id": video_id, "language": language},
        )

        descriptors = await self._resolver.list_formats(video_id)
        descriptor = self._selector.select(descriptors, video_id)
        filename, content_type = self._selector.upload_name(descriptor, video_id)

        logger.info(
            "Audio format selected",
            extra={
                "video_id": video_id,
                "format_id": descriptor.format_id,
                "ext": descriptor.ext,
                "abr": descriptor.abr,
            },
        )

        started_at = self._accumulator.start()
        async with self._audio_source.open(descriptor) as chunks:
            audio = await self._accumulator.collect(chunks, started_at, is_cancelled)

        logger.info(
            "Audio downloaded",
            extra={"video_id": video_id, "byte_count": len(audio)},
        )

        raw_segments = await self._transcription_service.transcribe(
            AudioUpload(
                data=audio,
                filename=filename,
                content_type=content_type,
                language=language,
            )
        )
        result = self._transcript_builder.build(raw_segments)

        logger.info(
            "Video transcribed",
            extra={"video_id": video_id, "segment_count": len(result.segments)},
        )
        return result
