"""Domain models for the stt-relay service."""

from pydantic import BaseModel, computed_field


class StreamDescriptor(BaseModel, frozen=True):
    """One downloadable rendition of a video, as reported by the resolver."""

    url: str | None = None
    format_id: str = ""
    ext: str = ""
    acodec: str | None = None
    vcodec: str | None = None
    abr: float | None = None
    filesize: int | None = None
    http_headers: dict[str, str] = {}

    @computed_field
    @property
    def is_audio_only(self) -> bool:
        """True when the rendition carries audio and no video track."""
        has_audio = bool(self.acodec) and self.acodec != "none"
        has_video = bool(self.vcodec) and self.vcodec != "none"
        return has_audio and not has_video


class AudioUpload(BaseModel, frozen=True):
    """Audio payload handed to the transcription service."""

    data: bytes
    filename: str
    content_type: str
    language: str


class RawSegment(BaseModel, frozen=True):
    """A segment exactly as the transcription service returned it."""

    start: float
    end: float
    text: str | None = None


class TranscriptSegment(BaseModel, frozen=True):
    """A timed span of transcribed speech, text trimmed."""

    start: float
    end: float
    text: str


class TranscriptResult(BaseModel, frozen=True):
    """Flattened text, normalized segments and the WebVTT track."""

    text: str
    segments: list[TranscriptSegment]
    vtt: str
