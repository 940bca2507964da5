"""OpenAI-compatible implementation of the TranscriptionBackend interface."""

import httpx

from config import TranscriptionConfig
from domain.models import AudioUpload, BackendResponse
from exceptions import RequestBuildError
from gateway_logging import setup_logging
from interfaces import TranscriptionBackend

from .http_backend import HttpBackendClient

logger = setup_logging(__name__)

TRANSCRIPTIONS_PATH = "/v1/audio/transcriptions"


class OpenAITranscriptionClient(HttpBackendClient, TranscriptionBackend):
    """Re-encodes uploads as multipart and posts them to /v1/audio/transcriptions."""

    service_name = "transcription"

    def __init__(self, client: httpx.AsyncClient, config: TranscriptionConfig):
        super().__init__(client, config)
        self._config = config

    def build_request(self, upload: AudioUpload) -> httpx.Request:
        fields = {"model": self._config.model}
        language = upload.language_hint
        if language is not None:
            fields["language"] = language
            logger.info("Language hint", extra={"language": language})

        try:
            return self._client.build_request(
                "POST",
                self._url(TRANSCRIPTIONS_PATH),
                files={"file": (upload.filename, upload.content, upload.content_type)},
                data=fields,
                headers=self._headers(),
                timeout=self._config.timeout_seconds,
            )
        except (TypeError, ValueError) as e:
            logger.exception("Failed to build transcription request")
            raise RequestBuildError(self.service_name, e) from e

    async def transcribe(self, upload: AudioUpload) -> BackendResponse:
        logger.info(
            "Processing file",
            extra={"file_name": upload.filename, "size": upload.size},
        )
        return await self._send(self.build_request(upload))
