"""Domain models for the transcription and summarization gateways."""

from typing import Literal

from pydantic import BaseModel

AUTO_LANGUAGE = "auto"


class AudioUpload(BaseModel):
    """An audio file received from the browser, ready to forward."""

    filename: str
    content: bytes
    content_type: str = "application/octet-stream"
    language: str | None = None

    @property
    def size(self) -> int:
        return len(self.content)

    @property
    def language_hint(self) -> str | None:
        """Returns the spoken-language hint to forward, or None to let the backend detect it."""
        if self.language is None:
            return None
        language = self.language.strip()
        if not language or language.lower() == AUTO_LANGUAGE:
            return None
        return language

    def has_extension(self, extensions: tuple[str, ...]) -> bool:
        name = self.filename.lower()
        return any(name.endswith(ext.lower()) for ext in extensions)


class SummarizeRequest(BaseModel):
    """Inbound summarization payload."""

    text: str = ""


class ChatMessage(BaseModel):
    """A single chat-completion message."""

    role: Literal["system", "user", "assistant"]
    content: str


class ChatCompletionRequest(BaseModel):
    """Outbound OpenAI-compatible chat completion payload."""

    model: str
    messages: list[ChatMessage]
    temperature: float


class BackendResponse(BaseModel):
    """Raw reply from an inference backend, relayed without interpretation."""

    status_code: int
    body: bytes
    content_type: str = "application/json"
