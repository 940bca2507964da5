"""Abstract interface for transcription backends."""

from abc import ABC, abstractmethod

from domain.models import AudioUpload, BackendResponse


class TranscriptionBackend(ABC):
    """Abstract base class for audio transcription backends."""

    @abstractmethod
    async def transcribe(self, upload: AudioUpload) -> BackendResponse:
        """
        Forwards an audio upload and returns the backend's raw reply.

        Args:
            upload: The validated audio file and optional language hint.

        Returns:
            BackendResponse holding the successful reply body.

        Raises:
            UpstreamUnavailableError: If the backend cannot be reached.
            UpstreamResponseError: If the backend answers with a non-200 status.
            RequestBuildError: If the outbound request cannot be built.
        """
        pass
