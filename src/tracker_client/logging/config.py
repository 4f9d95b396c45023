import logging
import sys
from typing import Literal

import structlog
from structlog.types import Processor

from tracker_client.config import get_settings


def _renderer(log_format: str) -> Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(
        colors=sys.stderr.isatty(),
        exception_formatter=structlog.dev.plain_traceback,
    )


def setup_logging(
    service_name: str | None = None,
    log_format: Literal["json", "console"] | None = None,
    log_level: str | None = None,
) -> None:
    """Route structlog events to stderr for the CLI.

    Stdout is reserved for command output, so ``--json`` results stay
    parseable. Arguments left as None come from the tracker settings
    (SERVICE_NAME, LOG_FORMAT, LOG_LEVEL).
    """
    if service_name is None or log_format is None or log_level is None:
        settings = get_settings()
        service_name = service_name or settings.service_name
        log_format = log_format or settings.log_format
        log_level = log_level or settings.log_level

    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.WARNING

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level, force=True)
    # httpx logs every request at INFO; keep it below our own events.
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
        _renderer(log_format),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    structlog.contextvars.bind_contextvars(service=service_name)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
