"""Utilities for blurnet."""

from blurnet.util.log import configure_logging, get_logger, log_chunked, shutdown_logging

__all__ = [
    "configure_logging",
    "get_logger",
    "log_chunked",
    "shutdown_logging",
]
