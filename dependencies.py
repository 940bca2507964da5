"""FastAPI dependency injection configuration."""

import httpx
from fastapi import Request

from config import AppConfig
from infrastructure import OpenAIChatClient, OpenAITranscriptionClient
from interfaces import SummarizationBackend, TranscriptionBackend


def get_config(request: Request) -> AppConfig:
    """Returns the configuration resolved when the application was created."""
    return request.app.state.config


def get_http_client(request: Request) -> httpx.AsyncClient:
    """Returns the pooled outbound client opened by the application lifespan."""
    return request.app.state.http_client


def get_transcription_backend(request: Request) -> TranscriptionBackend:
    """Returns the configured transcription backend."""
    return OpenAITranscriptionClient(
        get_http_client(request), get_config(request).transcription
    )


def get_summarization_backend(request: Request) -> SummarizationBackend:
    """Returns the configured summarization backend."""
    return OpenAIChatClient(
        get_http_client(request), get_config(request).summarization
    )
