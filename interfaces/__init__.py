"""Abstract interfaces for inference backends."""

from .summarization_backend import SummarizationBackend
from .transcription_backend import TranscriptionBackend

__all__ = ["SummarizationBackend", "TranscriptionBackend"]
