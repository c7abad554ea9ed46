"""Infrastructure interface exports."""

from .audio_source import AudioSource
from .stream_resolver import StreamResolver
from .transcription_service import TranscriptionService

__all__ = ["AudioSource", "StreamResolver", "TranscriptionService"]
