"""FastAPI dependency injection configuration."""

from config import AppConfig, load_config
from domain import BoundedAccumulator, FormatSelector, TranscriptBuilder
from handlers import TranscriptionHandler
from infrastructure import HttpAudioSource, OpenAITranscriber, YtDlpResolver
from log_config import setup_logging

logger = setup_logging()

_config = load_config()

if not _config.openai.api_key:
    logger.warning("OPENAI_API_KEY is not set, transcription requests will be rejected")


def build_handler(config: AppConfig) -> TranscriptionHandler:
    """Wires a TranscriptionHandler from an explicit configuration."""
    return TranscriptionHandler(
        resolver=YtDlpResolver(config.resolver),
        selector=FormatSelector(),
        audio_source=HttpAudioSource(config.download.timeout_seconds),
        accumulator=BoundedAccumulator(
            max_bytes=config.download.max_bytes,
            max_seconds=config.download.timeout_seconds,
        ),
        transcription_service=OpenAITranscriber(config.openai),
        transcript_builder=TranscriptBuilder(),
    )


def get_config() -> AppConfig:
    """Returns the process configuration."""
    return _config


def get_handler() -> TranscriptionHandler:
    """Returns a handler wired from the process configuration."""
    return build_handler(_config)
