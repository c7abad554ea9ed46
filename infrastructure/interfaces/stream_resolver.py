"""Abstract interface for resolving the downloadable streams of a video."""

from abc import ABC, abstractmethod

from domain.models import StreamDescriptor


class StreamResolver(ABC):
    """Abstract base class for stream metadata backends."""

    @abstractmethod
    async def list_formats(self, video_id: str) -> list[StreamDescriptor]:
        """
        Lists every rendition of a video.

        Args:
            video_id: Platform video identifier.

        Returns:
            Descriptors ordered from worst to best by the backend's ranking.
        """
        pass
