"""Core business logic for transcript building."""

import math

from .models import RawSegment, TranscriptResult, TranscriptSegment

WEBVTT_HEADER = "WEBVTT\n\n"


def format_timestamp(seconds: float) -> str:
    """
    Formats an offset in seconds as HH:MM:SS.mmm.

    Each field is truncated on its own; milliseconds are never carried
    into seconds, so output stays identical to earlier releases.
    """
    hours = math.floor(seconds / 3600)
    minutes = math.floor((seconds % 3600) / 60)
    whole_seconds = math.floor(seconds % 60)
    milliseconds = math.floor((seconds - math.floor(seconds)) * 1000)
    return f"{hours:02d}:{minutes:02d}:{whole_seconds:02d}.{milliseconds:03d}"


class TranscriptBuilder:
    """Builds text, segments and a WebVTT track from raw segments."""

    def build(self, raw_segments: list[RawSegment]) -> TranscriptResult:
        """
        Normalizes upstream segments into a TranscriptResult.

        Order is kept and empty segments are not dropped.
        """
        segments = [
            TranscriptSegment(start=s.start, end=s.end, text=(s.text or "").strip())
            for s in raw_segments
        ]
        text = " ".join(s.text for s in segments).strip()
        return TranscriptResult(text=text, segments=segments, vtt=self._to_vtt(segments))

    def _to_vtt(self, segments: list[TranscriptSegment]) -> str:
        """Renders numbered WebVTT cues, each followed by a blank line."""
        cues = [
            f"{i}\n{format_timestamp(s.start)} --> {format_timestamp(s.end)}\n{s.text}\n\n"
            for i, s in enumerate(segments, start=1)
        ]
        return WEBVTT_HEADER + "".join(cues)
