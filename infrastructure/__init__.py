"""Infrastructure layer exports."""

from .http_audio_source import HttpAudioSource
from .openai_transcriber import OpenAITranscriber
from .ytdlp_resolver import YtDlpResolver

__all__ = ["HttpAudioSource", "OpenAITranscriber", "YtDlpResolver"]
