"""Logging utilities for blurnet.

All library modules log through loguru loggers obtained from `get_logger`,
bound with a ``logger_name`` extra so sinks can tell components apart.
Applications decide where the output goes by calling `configure_logging`;
stdlib `logging` records (e.g. from httpx) can be forwarded into the same sinks.

Usage:
    from blurnet.util.log import configure_logging, get_logger

    configure_logging(log_dir="logs", level="DEBUG")
    log = get_logger("APIResponse")
    log.debug("API response: {body}", body=text)
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any

from loguru import logger as _logger

_HANDLER_IDS: list[int] = []
_CONFIGURED: bool = False

_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[logger_name]}</cyan> - "
    "<level>{message}</level>"
)


class _InterceptHandler(logging.Handler):
    """Forward stdlib logging records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = _logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        _logger.bind(logger_name=record.name).opt(
            depth=depth,
            exception=record.exc_info,
        ).log(level, record.getMessage())


def configure_logging(
    *,
    log_dir: str | Path | None = None,
    level: str = "INFO",
    to_console: bool = True,
    to_file: bool = False,
    rotation: str = "10 MB",
    retention: str = "7 days",
    enqueue: bool = False,
    intercept_std_logging: bool = False,
) -> None:
    """Configure global logging sinks.

    Safe to call repeatedly; sinks added by a previous call are removed first.

    Args:
        log_dir: Directory for log files (defaults to ``./logs``).
        level: Minimum level, e.g. "DEBUG" to see verbose response bodies.
        to_console: Log to stderr.
        to_file: Log to a rotating file in ``log_dir``.
        rotation: loguru rotation policy.
        retention: loguru retention policy.
        enqueue: Route records through a queue (multiprocessing-safe).
        intercept_std_logging: Forward stdlib `logging` into loguru.
    """

    global _CONFIGURED

    shutdown_logging()

    # loguru's default stderr sink
    try:
        _logger.remove(0)
    except ValueError:
        pass

    _logger.configure(extra={"logger_name": "-"})

    if to_console:
        _HANDLER_IDS.append(
            _logger.add(sys.stderr, level=level, format=_FORMAT, enqueue=enqueue)
        )

    if to_file:
        directory = Path(log_dir) if log_dir is not None else Path.cwd() / "logs"
        directory.mkdir(parents=True, exist_ok=True)
        _HANDLER_IDS.append(
            _logger.add(
                str(directory / "blurnet_{time:YYYYMMDD}.log"),
                level=level,
                format=_FORMAT,
                rotation=rotation,
                retention=retention,
                enqueue=enqueue,
                encoding="utf-8",
            )
        )

    if intercept_std_logging:
        logging.root.handlers = [_InterceptHandler()]
        logging.root.setLevel(level)

    _CONFIGURED = True


def get_logger(logger_name: str | None = None, /, **extra: Any):
    """Return the loguru logger bound with ``logger_name`` and any extra fields."""

    if not _CONFIGURED:
        configure_logging()

    bound = _logger
    if logger_name is not None:
        bound = bound.bind(logger_name=logger_name)
    if extra:
        bound = bound.bind(**extra)
    return bound


def log_chunked(
    log: Any,
    text: str,
    *,
    threshold: int = 2048,
    delimiter: str = "}",
    level: str = "DEBUG",
) -> None:
    """Write ``text`` at ``level``, split at ``delimiter`` once it reaches ``threshold``.

    Some log pipelines truncate long lines, so long JSON bodies are emitted one
    object-closing chunk per record with the delimiter put back on each chunk.
    Empty pieces are kept, so a body ending in the delimiter logs a final lone
    delimiter.
    """

    if len(text) < threshold:
        log.log(level, "API response: \n{body}", body=text)
        return

    log.log(level, "API response: ")
    for part in text.split(delimiter):
        log.log(level, "{chunk}", chunk=part + delimiter)


def shutdown_logging() -> None:
    """Remove all sinks added by `configure_logging` (useful in unit tests)."""

    global _CONFIGURED

    for handler_id in _HANDLER_IDS:
        try:
            _logger.remove(handler_id)
        except ValueError:
            pass
    _HANDLER_IDS.clear()

    _CONFIGURED = False
