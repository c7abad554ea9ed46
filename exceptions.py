"""Custom exceptions for the stt-relay service."""


class MissingParameterError(Exception):
    """Raised when a required query parameter is absent."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"missing {name}")


class NoAudioFormatError(Exception):
    """Raised when the resolver offers no usable audio-only stream."""

    def __init__(self, video_id: str):
        self.video_id = video_id
        super().__init__(f"No audio-only format available for video '{video_id}'")


class AudioFetchFailedError(Exception):
    """Raised when the audio source answers with a non-success status."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"Audio source responded with status {status_code}")


class AudioTooLargeError(Exception):
    """Raised as soon as the streamed byte count crosses the size ceiling."""

    def __init__(self, limit_bytes: int):
        self.limit_bytes = limit_bytes
        super().__init__(f"Audio exceeds the {limit_bytes} byte limit")


class DownloadTimeoutError(Exception):
    """Raised when the audio download outlives its wall-clock budget."""

    def __init__(self, limit_seconds: float, cause: Exception | None = None):
        self.limit_seconds = limit_seconds
        self.cause = cause
        super().__init__(f"Audio download exceeded {limit_seconds} seconds")


class DownloadCancelledError(Exception):
    """Raised when the caller goes away while the audio is still streaming."""

    def __init__(self, received_bytes: int):
        self.received_bytes = received_bytes
        super().__init__(f"Audio download cancelled after {received_bytes} bytes")


class TranscriptionFailedError(Exception):
    """Raised when the transcription service answers with a non-success status."""

    def __init__(self, status_code: int, details: str = ""):
        self.status_code = status_code
        self.details = details
        super().__init__(f"Transcription service responded with status {status_code}")
