"""FastAPI application entry point."""

import uvicorn
from ddtrace import patch_all

from app_factory import create_app
from config import load_config
from exceptions import ConfigurationError
from gateway_logging import configure_logging, setup_logging

logger = setup_logging(__name__)
patch_all()

try:
    config = load_config()
except ConfigurationError as e:
    logger.critical(str(e))
    raise SystemExit(1) from e

configure_logging(config.server.log_level)

logger.info(
    "Starting transcription gateway",
    extra={
        "audio_inference_url": config.transcription.base_url,
        "audio_model": config.transcription.model,
        "llm_inference_url": config.summarization.base_url,
        "llm_model": config.summarization.model,
        "port": config.server.port,
        "log_level": config.server.log_level,
    },
)

app = create_app(config)


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=config.server.port, log_config=None)
