"""Logging configuration for the MCP servers.

On the stdio transport stdout carries the JSON-RPC stream, so every log
record, including the stdlib ones from the upstream client and the MCP SDK,
is sent to a single loguru sink on stderr.
"""

import logging
import sys

from loguru import logger


class _InterceptHandler(logging.Handler):
    """Forward stdlib log records to loguru, prefixed with the logger name."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        logger.opt(exception=record.exc_info).log(
            level, "{}: {}", record.name, record.getMessage()
        )


def configure_logging(*, verbose: bool = False) -> None:
    """Send loguru and stdlib logging to stderr at INFO, or DEBUG if verbose."""
    logger.remove()
    level = "DEBUG" if verbose else "INFO"
    logger.add(sys.stderr, level=level, format="{level.icon} {message}")

    root = logging.getLogger()
    # Installed before FastMCP is imported, so its basicConfig() becomes a no-op.
    root.handlers = [h for h in root.handlers if not isinstance(h, _InterceptHandler)]
    root.addHandler(_InterceptHandler())
    root.setLevel(logging.DEBUG if verbose else logging.INFO)
