"""Domain layer exports."""

from .bounded_accumulator import BoundedAccumulator, CancelProbe
from .format_selector import FormatSelector
from .models import (
    AudioUpload,
    RawSegment,
    StreamDescriptor,
    TranscriptResult,
    TranscriptSegment,
)
from .transcript_builder import TranscriptBuilder, format_timestamp

__all__ = [
    "AudioUpload",
    "BoundedAccumulator",
    "CancelProbe",
    "FormatSelector",
    "RawSegment",
    "StreamDescriptor",
    "TranscriptBuilder",
    "TranscriptResult",
    "TranscriptSegment",
    "format_timestamp",
]
