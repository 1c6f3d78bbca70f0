"""Logging setup for the CLI and the MCP server.

The stdio transport owns stdout, so records go to stderr or to the
configured file, never to stdout.  With ``structured = true`` every
record, including third-party ones, is rendered as one JSON object by
structlog's ``ProcessorFormatter``.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from calcsum.config.schema import LoggingConfig

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def json_formatter() -> structlog.stdlib.ProcessorFormatter:
    """Formatter rendering stdlib records as JSON lines."""
    return structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.JSONRenderer(),
        ],
        foreign_pre_chain=[
            structlog.stdlib.add_logger_name,
            structlog.processors.add_log_level,
        ],
    )


def configure_logging(config: LoggingConfig) -> logging.Logger:
    """Attach a single handler to the ``calcsum`` logger.

    Calling again replaces the previous handler, so repeated CLI
    invocations in one process do not duplicate output.
    """
    logger = logging.getLogger("calcsum")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handler: logging.Handler
    if config.file:
        handler = logging.FileHandler(config.file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)

    if config.structured:
        handler.setFormatter(json_formatter())
    else:
        handler.setFormatter(logging.Formatter(_FORMAT))

    logger.addHandler(handler)
    logger.setLevel(config.level.upper())
    logger.propagate = False
    return logger
