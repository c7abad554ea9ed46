"""OpenAI Whisper implementation of the TranscriptionService interface."""

import httpx

from config import OpenAIConfig
from domain.models import AudioUpload, RawSegment
from exceptions import TranscriptionFailedError
from log_config import setup_logging

from .interfaces import TranscriptionService

logger = setup_logging()


class OpenAITranscriber(TranscriptionService):
    """Handles audio transcription using the OpenAI audio API."""

    def __init__(
        self,
        config: OpenAIConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._config = config
        self._transport = transport

    async def transcribe(self, upload: AudioUpload) -> list[RawSegment]:
        """
        Uploads the audio as multipart form data and requests verbose JSON,
        the only response format that carries segment timings.
        """
        files = {"file": (upload.filename, upload.data, upload.content_type)}
        data = {
            "model": self._config.model,
            "language": upload.language,
            "response_format": self._config.response_format,
        }

        async with httpx.AsyncClient(
            base_url=self._config.base_url,
            timeout=httpx.Timeout(self._config.timeout_seconds),
            transport=self._transport,
        ) as client:
            response = await client.post(
                "/audio/transcriptions",
                headers={"Authorization": f"Bearer {self._config.api_key}"},
                files=files,
                data=data,
            )

        if not response.is_success:
            logger.warning(
                "Transcription request rejected",
                extra={"status": response.status_code, "audio_file": upload.filename},
            )
            raise TranscriptionFailedError(response.status_code, response.text)

        payload = response.json()
        segments = [RawSegment.model_validate(s) for s in payload.get("segments") or []]

        logger.info(
            "Audio transcription successful",
            extra={"segment_count": len(segments), "audio_file": upload.filename},
        )
        return segments
