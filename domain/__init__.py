"""Domain layer exports."""

from domain.models import (
    AudioUpload,
    BackendResponse,
    ChatCompletionRequest,
    ChatMessage,
    SummarizeRequest,
)
from domain.prompts import SYSTEM_PROMPT, USER_PROMPT_PREFIX, build_summary_request

__all__ = [
    "AudioUpload",
    "BackendResponse",
    "ChatCompletionRequest",
    "ChatMessage",
    "SummarizeRequest",
    "SYSTEM_PROMPT",
    "USER_PROMPT_PREFIX",
    "build_summary_request",
]
