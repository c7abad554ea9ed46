"""Speech-to-text relay endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config import AppConfig
from dependencies import get_config, get_handler
from exceptions import (
    AudioFetchFailedError,
    AudioTooLargeError,
    DownloadCancelledError,
    DownloadTimeoutError,
    MissingParameterError,
    NoAudioFormatError,
    TranscriptionFailedError,
)
from handlers import TranscriptionHandler
from log_config import setup_logging
from response_models import PreflightResponse, SttErrorResponse, SttSuccessResponse

logger = setup_logging()

router = APIRouter(prefix="/api", tags=["stt"])

HandlerDep = Annotated[TranscriptionHandler, Depends(get_handler)]
ConfigDep = Annotated[AppConfig, Depends(get_config)]

RESPONSE_HEADERS = {
    "content-type": "application/json; charset=utf-8",
    "cache-control": "no-store",
    "access-control-allow-origin": "*",
    "access-control-allow-headers": "authorization,content-type",
    "access-control-allow-methods": "GET,POST,OPTIONS",
}

# Non-standard, borrowed from nginx: the client went away before the answer.
CLIENT_CLOSED_REQUEST = 499


def _json(status_code: int, body: BaseModel) -> JSONResponse:
    """Serializes a response model with the relay's fixed header set."""
    return JSONResponse(
        content=body.model_dump(mode="json", by_alias=True, exclude_none=True),
        status_code=status_code,
        headers=RESPONSE_HEADERS,
    )


@router.api_route("/stt", methods=["GET", "POST"])
async def speech_to_text(
    request: Request,
    handler: HandlerDep,
    config: ConfigDep,
    yt: str | None = None,
    lang: str | None = None,
) -> JSONResponse:
    """
    Transcribes the audio of a YouTube video.

    Returns plain text, timed segments and a WebVTT track, or an error
    code with the status it maps to.
    """
    language = lang if lang is not None else config.default_language

    try:
        if not yt:
            raise MissingParameterError("yt")
        result = await handler.process(yt, language, is_cancelled=request.is_disconnected)
    except MissingParameterError as e:
        return _json(400, SttErrorResponse(error=str(e)))
    except NoAudioFormatError:
        return _json(404, SttErrorResponse(error="no_audio_format"))
    except AudioFetchFailedError as e:
        return _json(502, SttErrorResponse(error="audio_fetch_failed", status=e.status_code))
    except AudioTooLargeError as e:
        return _json(
            413,
            SttErrorResponse(error="audio_too_large", limit_mb=e.limit_bytes // (1024 * 1024)),
        )
    except DownloadTimeoutError:
        return _json(504, SttErrorResponse(error="download_timeout"))
    except DownloadCancelledError as e:
        logger.info(
            "Client disconnected during download",
            extra={"video_id": yt, "received_bytes": e.received_bytes},
        )
        return _json(CLIENT_CLOSED_REQUEST, SttErrorResponse(error="client_closed_request"))
    except TranscriptionFailedError as e:
        return _json(
            502,
            SttErrorResponse(error="whisper_failed", status=e.status_code, details=e.details),
        )
    except Exception as e:
        logger.exception("Unexpected failure", extra={"video_id": yt})
        return _json(500, SttErrorResponse(error="server_error", details=f"{type(e).__name__}: {e}"))

    return _json(
        200,
        SttSuccessResponse(text=result.text, segments=result.segments, vtt=result.vtt),
    )


@router.options("/stt")
async def speech_to_text_preflight() -> JSONResponse:
    """Answers CORS preflight requests."""
    return _json(200, PreflightResponse())
