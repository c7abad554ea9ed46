"""httpx implementation of the AudioSource interface."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx

from domain.models import StreamDescriptor
from exceptions import AudioFetchFailedError, DownloadTimeoutError
from log_config import setup_logging

from .interfaces import AudioSource

logger = setup_logging()


class HttpAudioSource(AudioSource):
    """Streams audio over HTTP, one connection per download."""

    def __init__(
        self,
        timeout_seconds: float,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._timeout_seconds = timeout_seconds
        self._transport = transport

    @asynccontextmanager
    async def open(self, descriptor: StreamDescriptor) -> AsyncIterator[AsyncIterator[bytes]]:
        """
        Opens the descriptor URL and yields its body as byte chunks.

        A stalled connection trips httpx's own timeout, which surfaces as
        DownloadTimeoutError like the wall-clock check does.
        """
        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout_seconds),
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                async with client.stream(
                    "GET", descriptor.url, headers=descriptor.http_headers
                ) as response:
                    if not response.is_success:
                        logger.warning(
                            "Audio source rejected request",
                            extra={
                                "format_id": descriptor.format_id,
                                "status": response.status_code,
                            },
                        )
                        raise AudioFetchFailedError(response.status_code)

                    yield response.aiter_bytes()
        except httpx.TimeoutException as e:
            raise DownloadTimeoutError(self._timeout_seconds, e) from e
