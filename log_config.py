"""Structured JSON logging shared by every module of the service."""

import logging
import sys

from pythonjsonlogger import jsonlogger

SERVICE_NAME = "stt-relay"

_handler: logging.Handler | None = None


def _build_handler() -> logging.Handler:
    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s",
        static_fields={"service": SERVICE_NAME},
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    return handler


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Routes the root and Uvicorn loggers through one JSON stdout handler.

    Every record carries timestamp, level, logger name, message, the
    ddtrace trace_id/span_id (null outside a traced request) and the
    service name. Safe to call from every module: the handler is built
    once and re-attached, so repeated calls never duplicate output.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    global _handler
    if _handler is None:
        _handler = _build_handler()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [_handler]

    for logger_name in ["uvicorn", "uvicorn.access", "uvicorn.error"]:
        u_logger = logging.getLogger(logger_name)
        u_logger.setLevel(level)
        u_logger.handlers = [_handler]
        u_logger.propagate = False

    return root_logger
