"""OpenAI-compatible implementation of the SummarizationBackend interface."""

import httpx
from pydantic_core import PydanticSerializationError

from config import SummarizationConfig
from domain import build_summary_request
from domain.models import BackendResponse
from exceptions import RequestBuildError
from gateway_logging import setup_logging
from interfaces import SummarizationBackend

from .http_backend import HttpBackendClient

logger = setup_logging(__name__)

CHAT_COMPLETIONS_PATH = "/v1/chat/completions"


class OpenAIChatClient(HttpBackendClient, SummarizationBackend):
    """Wraps text in a chat completion and posts it to /v1/chat/completions."""

    service_name = "summarization"

    def __init__(self, client: httpx.AsyncClient, config: SummarizationConfig):
        super().__init__(client, config)
        self._config = config

    def build_request(self, text: str) -> httpx.Request:
        chat_request = build_summary_request(
            text, self._config.model, self._config.temperature
        )
        try:
            payload = chat_request.model_dump_json().encode("utf-8")
        except PydanticSerializationError as e:
            logger.exception("Failed to serialize chat completion request")
            raise RequestBuildError(self.service_name, e) from e

        return self._client.build_request(
            "POST",
            self._url(CHAT_COMPLETIONS_PATH),
            content=payload,
            headers={"Content-Type": "application/json", **self._headers()},
            timeout=self._config.timeout_seconds,
        )

    async def summarize(self, text: str) -> BackendResponse:
        logger.info("Summarizing text", extra={"text_length": len(text)})
        return await self._send(self.build_request(text))
