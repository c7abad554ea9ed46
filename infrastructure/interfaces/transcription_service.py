"""Abstract interface for transcription service operations."""

from abc import ABC, abstractmethod

from domain.models import AudioUpload, RawSegment


class TranscriptionService(ABC):
    """Abstract base class for speech-to-text backends."""

    @abstractmethod
    async def transcribe(self, upload: AudioUpload) -> list[RawSegment]:
        """
        Transcribes an audio payload into timed segments.

        Args:
            upload: Audio bytes with filename, content type and language hint.

        Returns:
            Segments in chronological order, as returned upstream.

        Raises:
            TranscriptionFailedError: If the service rejects the request.
        """
        pass
