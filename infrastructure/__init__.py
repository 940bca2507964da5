"""Concrete implementations of the backend interfaces."""

from .openai_chat import OpenAIChatClient
from .openai_transcription import OpenAITranscriptionClient

__all__ = ["OpenAIChatClient", "OpenAITranscriptionClient"]
