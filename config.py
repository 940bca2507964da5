"""Application configuration loaded from environment variables."""

import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, ValidationError, field_validator

from exceptions import ConfigurationError

DEFAULT_MAX_UPLOAD_BYTES = 500 * 1024 * 1024
DEFAULT_MAX_SUMMARY_REQUEST_BYTES = 1024 * 1024
STATIC_DIR = Path(__file__).resolve().parent / "static"


class BackendConfig(BaseModel, frozen=True):
    """Connection settings shared by both inference backends."""

    base_url: str = Field(min_length=1)
    model: str
    api_key: str | None = None
    timeout_seconds: float = Field(gt=0)

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


class TranscriptionConfig(BackendConfig, frozen=True):
    """OpenAI-compatible transcription backend configuration."""

    model: str = "whisper-1"
    timeout_seconds: float = Field(default=300.0, gt=0)
    max_upload_bytes: int = Field(default=DEFAULT_MAX_UPLOAD_BYTES, gt=0)
    allowed_extensions: tuple[str, ...] = (".wav",)


class SummarizationConfig(BackendConfig, frozen=True):
    """OpenAI-compatible chat completion backend configuration."""

    model: str = "gpt-3.5-turbo"
    timeout_seconds: float = Field(default=120.0, gt=0)
    max_request_bytes: int = Field(default=DEFAULT_MAX_SUMMARY_REQUEST_BYTES, gt=0)
    temperature: float = 0.7


class ServerConfig(BaseModel, frozen=True):
    """HTTP listener configuration."""

    port: int = Field(default=8080, gt=0, lt=65536)
    static_dir: Path = STATIC_DIR
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    transcription: TranscriptionConfig
    summarization: SummarizationConfig
    server: ServerConfig = ServerConfig()


def _require(name: str) -> str:
    value = os.getenv(name, "")
    if not value:
        raise ConfigurationError(f"{name} environment variable is required")
    return value


def load_config() -> AppConfig:
    """
    Loads configuration from environment variables.

    Raises:
        ConfigurationError: If a required variable is missing or a value
            cannot be parsed.
    """
    transcription_url = _require("AUDIO_INFERENCE_URL")
    summarization_url = _require("LLM_INFERENCE_URL")

    try:
        return AppConfig(
            transcription=TranscriptionConfig(
                base_url=transcription_url,
                model=os.getenv("AUDIO_MODEL_NAME") or "whisper-1",
                api_key=os.getenv("AUDIO_API_KEY") or None,
                max_upload_bytes=os.getenv(
                    "MAX_UPLOAD_BYTES", str(DEFAULT_MAX_UPLOAD_BYTES)
                ),
            ),
            summarization=SummarizationConfig(
                base_url=summarization_url,
                model=os.getenv("LLM_MODEL_NAME") or "gpt-3.5-turbo",
                api_key=os.getenv("LLM_API_KEY") or None,
                max_request_bytes=os.getenv(
                    "MAX_SUMMARY_REQUEST_BYTES", str(DEFAULT_MAX_SUMMARY_REQUEST_BYTES)
                ),
            ),
            server=ServerConfig(
                port=os.getenv("PORT") or "8080",
                log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
            ),
        )
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}", cause=e) from e
