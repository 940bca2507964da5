"""Inbound request size guards."""

from fastapi import HTTPException, Request
from starlette.types import Message, Receive

BODY_TOO_LARGE = "Request body is too large"


def reject_oversized_body(request: Request, max_bytes: int) -> None:
    """Rejects a request whose declared Content-Length exceeds max_bytes."""
    declared = request.headers.get("content-length")
    if declared is None:
        return
    try:
        length = int(declared)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid Content-Length header")
    if length > max_bytes:
        raise HTTPException(status_code=413, detail=BODY_TOO_LARGE)


def limit_receive(receive: Receive, max_bytes: int) -> Receive:
    """
    Wraps an ASGI receive callable so it raises 413 once more than max_bytes
    of body have arrived, covering chunked requests without Content-Length.
    """
    received = 0

    async def limited() -> Message:
        nonlocal received
        message = await receive()
        if message["type"] == "http.request":
            received += len(message.get("body", b""))
            if received > max_bytes:
                raise HTTPException(status_code=413, detail=BODY_TOO_LARGE)
        return message

    return limited


def limit_request_body(request: Request, max_bytes: int) -> Request:
    """Returns a view of the request whose body reads stop past max_bytes."""
    reject_oversized_body(request, max_bytes)
    return Request(request.scope, limit_receive(request.receive, max_bytes))


async def read_body_limited(request: Request, max_bytes: int) -> bytes:
    """Reads the whole body, failing with 413 as soon as it passes max_bytes."""
    reject_oversized_body(request, max_bytes)
    chunks = []
    received = 0
    async for chunk in request.stream():
        received += len(chunk)
        if received > max_bytes:
            raise HTTPException(status_code=413, detail=BODY_TOO_LARGE)
        chunks.append(chunk)
    return b"".join(chunks)
