"""Package logger and its optional stderr handler.

The package logs through the stdlib ``LOG``. ``configure_logging`` renders
those records with structlog, as console text or JSON lines.
"""

import logging
import sys
from typing import Literal

import structlog

LOG = logging.getLogger("cdaclient")


def build_formatter(fmt: Literal["text", "json"] = "text") -> structlog.stdlib.ProcessorFormatter:
    shared_processors: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if fmt == "json":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
        shared_processors.append(structlog.processors.format_exc_info)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )


def configure_logging(
    fmt: Literal["text", "json"] = "text", level: int | str = logging.INFO
) -> logging.Logger:
    """Attach a stderr handler to the package logger.

    Calling it again replaces the handler installed by the previous call.
    """
    for handler in list(LOG.handlers):
        if getattr(handler, "_cdaclient", False):
            LOG.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler._cdaclient = True
    handler.setFormatter(build_formatter(fmt))
    LOG.addHandler(handler)
    LOG.setLevel(level)
    return LOG
