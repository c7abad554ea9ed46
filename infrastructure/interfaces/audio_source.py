"""Abstract interface for streaming an audio payload."""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from contextlib import AbstractAsyncContextManager

from domain.models import StreamDescriptor


class AudioSource(ABC):
    """Abstract base class for audio byte stream providers."""

    @abstractmethod
    def open(self, descriptor: StreamDescriptor) -> AbstractAsyncContextManager[AsyncIterator[bytes]]:
        """
        Opens a streaming read of the descriptor's URL.

        The context manager yields an async iterator of raw chunks and
        releases the connection on exit, including early exit.

        Raises:
            AudioFetchFailedError: If the source answers with a non-success
                status. Raised on entry, before any chunk is read.
        """
        pass
