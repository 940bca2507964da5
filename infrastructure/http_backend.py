"""Shared httpx plumbing for OpenAI-compatible inference backends."""

import httpx

from config import BackendConfig
from domain.models import BackendResponse
from exceptions import UpstreamResponseError, UpstreamUnavailableError
from gateway_logging import setup_logging

logger = setup_logging(__name__)


class HttpBackendClient:
    """Sends a single request to an inference backend and reads the full reply."""

    service_name = "inference"

    def __init__(self, client: httpx.AsyncClient, config: BackendConfig):
        self._client = client
        self._config = config

    def _url(self, path: str) -> str:
        return f"{self._config.base_url}{path}"

    def _headers(self) -> dict[str, str]:
        if self._config.api_key:
            return {"Authorization": f"Bearer {self._config.api_key}"}
        return {}

    async def _send(self, request: httpx.Request) -> BackendResponse:
        """
        Sends the request and returns the reply body when the status is 200.

        No retries are attempted; a single failure is reported to the caller.
        """
        url = str(request.url)
        logger.info("Forwarding request", extra={"service": self.service_name, "url": url})

        try:
            response = await self._client.send(request)
        except httpx.TimeoutException as e:
            logger.error(
                "Backend request timed out",
                extra={"service": self.service_name, "url": url},
            )
            raise UpstreamUnavailableError(self.service_name, url, e) from e
        except httpx.HTTPError as e:
            logger.error(
                "Backend request failed",
                extra={"service": self.service_name, "url": url, "error": str(e)},
            )
            raise UpstreamUnavailableError(self.service_name, url, e) from e

        content_type = response.headers.get("content-type", "text/plain; charset=utf-8")

        if response.status_code != httpx.codes.OK:
            logger.warning(
                "Backend returned error status",
                extra={
                    "service": self.service_name,
                    "status_code": response.status_code,
                    "body_size": len(response.content),
                },
            )
            raise UpstreamResponseError(
                self.service_name,
                response.status_code,
                response.content,
                content_type,
            )

        logger.info(
            "Backend request succeeded",
            extra={"service": self.service_name, "body_size": len(response.content)},
        )
        return BackendResponse(
            status_code=response.status_code,
            body=response.content,
            content_type=content_type,
        )
