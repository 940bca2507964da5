"""Structured JSON logging for the transcription gateway."""

import logging
import sys

from pythonjsonlogger import jsonlogger

SERVICE_NAME = "transcription-gateway"
HANDLER_NAME = "transcription_gateway_json"

# Loggers that get the gateway handler directly instead of propagating.
SERVER_LOGGERS = ["uvicorn", "uvicorn.access", "uvicorn.error"]


def _build_handler() -> logging.Handler:
    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s",
        static_fields={"service": SERVICE_NAME},
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(formatter)
    return handler


def _is_configured() -> bool:
    return any(h.get_name() == HANDLER_NAME for h in logging.getLogger().handlers)


def configure_logging(level: str | int = logging.INFO) -> None:
    """
    Installs the JSON handler on the root and Uvicorn loggers at ``level``.

    Safe to call again, e.g. once the configured level is known; the handler
    is replaced rather than duplicated. httpx request lines stay at WARNING
    since every relay already logs its own forwarding entry.
    """
    handler = _build_handler()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [handler]

    for logger_name in SERVER_LOGGERS:
        server_logger = logging.getLogger(logger_name)
        server_logger.setLevel(level)
        server_logger.handlers = [handler]
        server_logger.propagate = False

    logging.getLogger("httpx").setLevel(logging.WARNING)


def setup_logging(name: str = "transcription_gateway") -> logging.Logger:
    """Returns a named gateway logger, configuring output on first use."""
    if not _is_configured():
        configure_logging()
    return logging.getLogger(name)
