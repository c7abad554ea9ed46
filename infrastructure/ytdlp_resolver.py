"""yt-dlp implementation of the StreamResolver interface."""

import asyncio
from typing import Any, Callable

import yt_dlp

from config import ResolverConfig
from domain.models import StreamDescriptor
from log_config import setup_logging

from .interfaces import StreamResolver

logger = setup_logging()

_YDL_OPTIONS = {
    "quiet": True,
    "no_warnings": True,
    "skip_download": True,
}


class YtDlpResolver(StreamResolver):
    """Lists the renditions of a YouTube video through yt-dlp."""

    def __init__(
        self,
        config: ResolverConfig,
        ydl_factory: Callable[[dict[str, Any]], Any] = yt_dlp.YoutubeDL,
    ):
        self._config = config
        self._ydl_factory = ydl_factory

    async def list_formats(self, video_id: str) -> list[StreamDescriptor]:
        """
        Extracts format metadata without downloading anything.

        yt-dlp is blocking, so extraction runs in a worker thread. Its
        errors propagate unchanged.
        """
        url = self._config.watch_url_template.format(video_id=video_id)
        info = await asyncio.to_thread(self._extract_info, url)

        formats = [self._to_descriptor(f) for f in info.get("formats") or []]
        logger.info(
            "Formats resolved",
            extra={"video_id": video_id, "format_count": len(formats)},
        )
        return formats

    def _extract_info(self, url: str) -> dict[str, Any]:
        with self._ydl_factory(dict(_YDL_OPTIONS)) as ydl:
            return ydl.extract_info(url, download=False)

    def _to_descriptor(self, fmt: dict[str, Any]) -> StreamDescriptor:
        """Maps one yt-dlp format dict onto a StreamDescriptor."""
        headers = fmt.get("http_headers") or {}
        return StreamDescriptor(
            url=fmt.get("url"),
            format_id=str(fmt.get("format_id") or ""),
            ext=fmt.get("ext") or "",
            acodec=fmt.get("acodec"),
            vcodec=fmt.get("vcodec"),
            abr=fmt.get("abr"),
            filesize=fmt.get("filesize"),
            http_headers={str(k): str(v) for k, v in headers.items()},
        )
