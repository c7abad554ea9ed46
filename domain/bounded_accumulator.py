"""Size- and time-bounded accumulation of a streamed audio payload."""

import time
from collections.abc import AsyncIterator, Awaitable, Callable

from exceptions import AudioTooLargeError, DownloadCancelledError, DownloadTimeoutError

CancelProbe = Callable[[], Awaitable[bool]]


class BoundedAccumulator:
    """Collects byte chunks into one buffer under a byte and a duration ceiling."""

    def __init__(
        self,
        max_bytes: int,
        max_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._max_bytes = max_bytes
        self._max_seconds = max_seconds
        self._clock = clock

    @property
    def max_bytes(self) -> int:
        return self._max_bytes

    @property
    def max_seconds(self) -> float:
        return self._max_seconds

    def start(self) -> float:
        """Returns the instant the download budget starts counting from."""
        return self._clock()

    async def collect(
        self,
        chunks: AsyncIterator[bytes],
        started_at: float | None = None,
        is_cancelled: CancelProbe | None = None,
    ) -> bytes:
        """
        Drains `chunks` into a single buffer.

        Each chunk boundary checks the size ceiling, then the elapsed time,
        then the cancellation probe. The stream is abandoned at the first
        violation; the caller owns closing it.

        Args:
            chunks: Async iterator of raw byte chunks.
            started_at: Clock reading taken before the first byte was
                requested. Defaults to now.
            is_cancelled: Optional coroutine returning True once the caller
                no longer wants the result.

        Returns:
            The concatenated payload; empty when the stream had no chunks.

        Raises:
            AudioTooLargeError: Running total crossed max_bytes.
            DownloadTimeoutError: Elapsed time crossed max_seconds.
            DownloadCancelledError: The cancellation probe fired.
        """
        if started_at is None:
            started_at = self._clock()

        received = 0
        parts: list[bytes] = []

        async for chunk in chunks:
            received += len(chunk)
            if received > self._max_bytes:
                raise AudioTooLargeError(self._max_bytes)
            if self._clock() - started_at > self._max_seconds:
                raise DownloadTimeoutError(self._max_seconds)
            if is_cancelled is not None and await is_cancelled():
                raise DownloadCancelledError(received)
            parts.append(chunk)

        return b"".join(parts)
