"""Response models for the stt-relay API."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from domain import TranscriptSegment

MAX_DETAILS_LENGTH = 600


def truncate_details(text: str) -> str:
    """Caps diagnostic text so upstream bodies and messages stay bounded."""
    return text[:MAX_DETAILS_LENGTH]


class SttSuccessResponse(BaseModel):
    """Transcript returned when every stage succeeded."""

    ok: bool = True
    text: str
    segments: list[TranscriptSegment]
    vtt: str


class SttErrorResponse(BaseModel):
    """Error code plus whichever context fields apply to it."""

    model_config = ConfigDict(populate_by_name=True)

    ok: bool = False
    error: str
    status: int | None = None
    limit_mb: int | None = Field(default=None, alias="limitMB")
    details: str | None = None

    @field_validator("details")
    @classmethod
    def _cap_details(cls, value: str | None) -> str | None:
        if value is None:
            return value
        return truncate_details(value)


class PreflightResponse(BaseModel):
    """Body of the CORS preflight answer."""

    ok: bool = True


class HealthResponse(BaseModel):
    """Liveness probe answer."""

    status: str = "ok"
