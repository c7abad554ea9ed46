"""Application configuration loaded from environment variables."""

import os

from pydantic import BaseModel, computed_field


class OpenAIConfig(BaseModel, frozen=True):
    """OpenAI transcription API configuration."""

    api_key: str
    base_url: str = "https://api.openai.com/v1"
    model: str = "whisper-1"
    response_format: str = "verbose_json"
    timeout_seconds: float = 120.0


class DownloadConfig(BaseModel, frozen=True):
    """Limits applied while streaming the audio payload."""

    max_audio_mb: int = 25
    timeout_seconds: float = 45.0

    @computed_field
    @property
    def max_bytes(self) -> int:
        """Returns the size ceiling in bytes."""
        return self.max_audio_mb * 1024 * 1024


class ResolverConfig(BaseModel, frozen=True):
    """Stream resolver configuration."""

    watch_url_template: str = "https://www.youtube.com/watch?v={video_id}"


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    openai: OpenAIConfig
    download: DownloadConfig = DownloadConfig()
    resolver: ResolverConfig = ResolverConfig()
    default_language: str = "pt"


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        openai=OpenAIConfig(
            api_key=os.getenv("OPENAI_API_KEY", ""),
        ),
    )
