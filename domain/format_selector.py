"""Picks the audio rendition to download."""

from exceptions import NoAudioFormatError

from .models import StreamDescriptor

_CONTENT_TYPES = {
    "m4a": "audio/mp4",
    "mp4": "audio/mp4",
    "webm": "audio/webm",
    "mp3": "audio/mpeg",
    "ogg": "audio/ogg",
    "opus": "audio/ogg",
    "wav": "audio/wav",
}

DEFAULT_EXTENSION = "m4a"


class FormatSelector:
    """Selects the best audio-only descriptor using the resolver's ranking."""

    def select(self, descriptors: list[StreamDescriptor], video_id: str) -> StreamDescriptor:
        """
        Returns the highest-ranked audio-only descriptor.

        The resolver lists renditions from worst to best, so the last
        audio-only entry wins.

        Raises:
            NoAudioFormatError: If no audio-only descriptor exists or the
                chosen one has no URL.
        """
        audio_only = [d for d in descriptors if d.is_audio_only]
        if not audio_only:
            raise NoAudioFormatError(video_id)

        best = audio_only[-1]
        if not best.url:
            raise NoAudioFormatError(video_id)
        return best

    def upload_name(self, descriptor: StreamDescriptor, video_id: str) -> tuple[str, str]:
        """Returns (filename, content_type) for uploading the chosen rendition."""
        ext = descriptor.ext.lower()
        if ext not in _CONTENT_TYPES:
            ext = DEFAULT_EXTENSION
        return f"{video_id}.{ext}", _CONTENT_TYPES[ext]
