"""
Logging utilities for scripts and for callers that forward engine logs
to another thread (a request log, a console widget, a job runner).

The package itself installs no handlers.
"""
from __future__ import annotations

import logging
from queue import Queue
from typing import Optional

PACKAGE_LOGGER = "trivia_toolkit"


def configure_logging(level: int = logging.INFO, fmt: Optional[str] = None) -> logging.Handler:
    """
    Attach a stream handler to the package logger.

    Calling it again replaces the handler added by the previous call.

    Args:
        level: Minimum level for package records.
        fmt: Optional format string.

    Returns:
        The attached handler.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if getattr(handler, "_trivia_configured", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt or "%(asctime)s %(levelname)s %(name)s: %(message)s"))
    handler._trivia_configured = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler


class QueueLogHandler(logging.Handler):
    """
    A logging handler that sends (message, level) tuples to a queue.

    DEBUG records are reported as INFO so consumers only deal with
    INFO/WARNING/ERROR.
    """

    def __init__(self, log_queue: Queue, level: int = logging.INFO):
        super().__init__(level)
        self.log_queue = log_queue
        self.setFormatter(logging.Formatter("%(message)s"))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            level = record.levelname
            if level == "DEBUG":
                level = "INFO"
            self.log_queue.put((message, level))
        except Exception:
            self.handleError(record)


def attach_queue_handler(log_queue: Queue, logger_name: Optional[str] = PACKAGE_LOGGER) -> QueueLogHandler:
    """
    Attach a QueueLogHandler to the named logger (package logger by default).

    Returns:
        The attached handler (for later removal).
    """
    handler = QueueLogHandler(log_queue)
    logging.getLogger(logger_name).addHandler(handler)
    return handler


def detach_queue_handler(handler: QueueLogHandler, logger_name: Optional[str] = PACKAGE_LOGGER) -> None:
    logging.getLogger(logger_name).removeHandler(handler)
