"""Text summarization proxy endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from pydantic import ValidationError
from starlette.requests import ClientDisconnect

from config import AppConfig
from dependencies import get_config, get_summarization_backend
from domain import SummarizeRequest
from exceptions import (
    ClientDisconnectedError,
    RequestBuildError,
    UpstreamResponseError,
    UpstreamUnavailableError,
)
from gateway_logging import setup_logging
from interfaces import SummarizationBackend

from .disconnect import CLIENT_CLOSED_REQUEST, cancel_on_disconnect
from .limits import read_body_limited

logger = setup_logging(__name__)

router = APIRouter(tags=["summarization"])

ConfigDep = Annotated[AppConfig, Depends(get_config)]
SummarizationDep = Annotated[SummarizationBackend, Depends(get_summarization_backend)]


@router.post("/summarize")
async def summarize(
    request: Request, config: ConfigDep, backend: SummarizationDep
) -> Response:
    """Forwards text to the chat completion backend and relays its reply."""
    logger.info("Received summarization request")

    try:
        body = await read_body_limited(request, config.summarization.max_request_bytes)
    except ClientDisconnect:
        logger.info("Client disconnected while sending text")
        return Response(status_code=CLIENT_CLOSED_REQUEST)

    try:
        payload = SummarizeRequest.model_validate_json(body)
    except ValidationError as e:
        logger.warning("Error parsing JSON", extra={"error": str(e)})
        raise HTTPException(status_code=400, detail="Error parsing request body")

    if not payload.text:
        raise HTTPException(status_code=400, detail="Text field is required")

    try:
        result = await cancel_on_disconnect(request, backend.summarize(payload.text))
    except UpstreamUnavailableError:
        raise HTTPException(
            status_code=502, detail="Error calling summarization service"
        )
    except UpstreamResponseError as e:
        return Response(
            content=e.body, status_code=e.status_code, media_type=e.content_type
        )
    except RequestBuildError:
        raise HTTPException(status_code=500, detail="Error creating request")
    except ClientDisconnectedError:
        logger.info("Client disconnected, summarization abandoned")
        return Response(status_code=CLIENT_CLOSED_REQUEST)

    logger.info("Summarization successful")
    return Response(content=result.body, status_code=200, media_type="application/json")
