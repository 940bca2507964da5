"""Abstract interface for summarization backends."""

from abc import ABC, abstractmethod

from domain.models import BackendResponse


class SummarizationBackend(ABC):
    """Abstract base class for text summarization backends."""

    @abstractmethod
    async def summarize(self, text: str) -> BackendResponse:
        """
        Requests a summary of the given text and returns the backend's raw reply.

        Args:
            text: Non-empty text to summarize.

        Returns:
            BackendResponse holding the successful reply body.

        Raises:
            UpstreamUnavailableError: If the backend cannot be reached.
            UpstreamResponseError: If the backend answers with a non-200 status.
            RequestBuildError: If the outbound request cannot be built.
        """
        pass
