"""App factory for the transcription gateway."""

from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from config import AppConfig
from routes import health_router, static_router, summarize_router, transcribe_router


def create_app(
    config: AppConfig, transport: httpx.AsyncBaseTransport | None = None
) -> FastAPI:
    """
    Builds the FastAPI application around an already-resolved configuration.

    The configuration and a pooled outbound HTTP client live on ``app.state``
    and reach handlers through dependencies. ``transport`` replaces the
    network transport of that client.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        async with httpx.AsyncClient(transport=transport) as client:
            app.state.http_client = client
            yield

    app = FastAPI(title="Transcription Gateway", lifespan=lifespan)
    app.state.config = config

    app.include_router(static_router)
    app.include_router(health_router)
    app.include_router(transcribe_router)
    app.include_router(summarize_router)

    return app
