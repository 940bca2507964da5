"""Custom exceptions for the transcription gateway."""


class ConfigurationError(Exception):
    """Raised when required configuration is missing or invalid at startup."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class UpstreamUnavailableError(Exception):
    """Raised when an inference backend cannot be reached or times out."""

    def __init__(self, service: str, url: str, cause: Exception | None = None):
        self.service = service
        self.url = url
        self.cause = cause
        super().__init__(f"Error calling {service} service")


class UpstreamResponseError(Exception):
    """Raised when an inference backend answers with a non-success status."""

    def __init__(
        self,
        service: str,
        status_code: int,
        body: bytes,
        content_type: str,
    ):
        self.service = service
        self.status_code = status_code
        self.body = body
        self.content_type = content_type
        super().__init__(f"{service} service returned status {status_code}")


class RequestBuildError(Exception):
    """Raised when the outbound backend request cannot be constructed."""

    def __init__(self, service: str, cause: Exception | None = None):
        self.service = service
        self.cause = cause
        super().__init__(f"Error creating {service} request")


class ClientDisconnectedError(Exception):
    """Raised when the inbound client goes away before the backend answers."""

    def __init__(self):
        super().__init__("Client disconnected before the backend responded")
