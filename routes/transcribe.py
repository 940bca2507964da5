"""Audio transcription proxy endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from starlette.datastructures import FormData, UploadFile
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import ClientDisconnect

from config import AppConfig, TranscriptionConfig
from dependencies import get_config, get_transcription_backend
from domain import AudioUpload
from exceptions import (
    ClientDisconnectedError,
    RequestBuildError,
    UpstreamResponseError,
    UpstreamUnavailableError,
)
from gateway_logging import setup_logging
from interfaces import TranscriptionBackend

from .disconnect import CLIENT_CLOSED_REQUEST, cancel_on_disconnect
from .limits import limit_request_body

logger = setup_logging(__name__)

router = APIRouter(tags=["transcription"])

ConfigDep = Annotated[AppConfig, Depends(get_config)]
TranscriptionDep = Annotated[TranscriptionBackend, Depends(get_transcription_backend)]


async def _parse_form(request: Request, max_bytes: int) -> FormData:
    """
    Parses the multipart body, reading at most max_bytes from the client.

    Starlette reports malformed forms as 400; the body cap reports 413.
    """
    limited = limit_request_body(request, max_bytes)
    try:
        return await limited.form()
    except StarletteHTTPException as e:
        logger.warning(
            "Error parsing form",
            extra={"status_code": e.status_code, "error": e.detail},
        )
        raise


async def _read_upload(form: FormData, limits: TranscriptionConfig) -> AudioUpload:
    """Validates the parsed form before anything is forwarded."""
    file = form.get("file")
    if not isinstance(file, UploadFile):
        raise HTTPException(status_code=400, detail="Error getting file from form")

    language = form.get("language")
    upload = AudioUpload(
        filename=file.filename or "",
        content=await file.read(),
        content_type=file.content_type or "application/octet-stream",
        language=language if isinstance(language, str) else None,
    )

    if not upload.has_extension(limits.allowed_extensions):
        allowed = ", ".join(ext.lstrip(".").upper() for ext in limits.allowed_extensions)
        raise HTTPException(
            status_code=415, detail=f"Only {allowed} files are supported"
        )

    return upload


@router.post("/transcribe")
async def transcribe(
    request: Request, config: ConfigDep, backend: TranscriptionDep
) -> Response:
    """
    Forwards an uploaded audio file to the transcription backend.

    The backend's JSON body is relayed unchanged on success; on a non-200
    status its body and status are relayed verbatim.
    """
    logger.info("Received transcription request")

    try:
        form = await _parse_form(request, config.transcription.max_upload_bytes)
    except ClientDisconnect:
        logger.info("Client disconnected during upload")
        return Response(status_code=CLIENT_CLOSED_REQUEST)

    # Spooled form files are released before the backend call starts.
    try:
        upload = await _read_upload(form, config.transcription)
    finally:
        await form.close()

    try:
        result = await cancel_on_disconnect(request, backend.transcribe(upload))
    except UpstreamUnavailableError:
        raise HTTPException(
            status_code=502, detail="Error calling transcription service"
        )
    except UpstreamResponseError as e:
        return Response(
            content=e.body, status_code=e.status_code, media_type=e.content_type
        )
    except RequestBuildError:
        raise HTTPException(status_code=500, detail="Error creating request")
    except ClientDisconnectedError:
        logger.info("Client disconnected, transcription abandoned")
        return Response(status_code=CLIENT_CLOSED_REQUEST)

    logger.info("Transcription successful", extra={"file_name": upload.filename})
    return Response(content=result.body, status_code=200, media_type="application/json")
