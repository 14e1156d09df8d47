"""Structured logging setup using structlog.

Uses a **dual-renderer pattern**: one shared processor chain (context vars,
log level, timestamps, stack info) feeds either a coloured ConsoleRenderer
for local use or a JSONRenderer for production.  The renderer is chosen
from the ``APP_ENV`` environment variable (default ``"development"``) or
forced with the ``json_output`` flag.

Standard-library ``logging`` is routed through the same formatter so that
httpx request logs look like the client's own events.
"""

import logging
import os
import sys

import structlog


def configure_logging(
    log_level: str = "INFO",
    json_output: bool = False,
    stream=None,  # noqa: ANN001
) -> structlog.BoundLogger:
    """Configure structlog with environment-appropriate rendering.

    Replaces every handler on the root logger, so only application entry
    points such as the CLI should call it.

    Args:
        log_level: Logging level string (DEBUG, INFO, WARNING, ERROR).
        json_output: Force JSON output. When False, JSON is still used if
                     ``APP_ENV`` is ``"production"``.
        stream: Destination for log lines. Defaults to ``sys.stderr`` so
                that CLI output on stdout stays machine-readable.

    Returns:
        A configured structlog BoundLogger.
    """
    if stream is None:
        stream = sys.stderr

    app_env = os.environ.get("APP_ENV", "development")
    use_json = json_output or app_env == "production"

    # Order matters: contextvars first, then level/timestamps, then exc info.
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if use_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=stream.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(log_level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *shared_processors,
            renderer,
        ],
    )

    handler = logging.StreamHandler(stream)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level.upper())

    return structlog.get_logger()


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a named structlog logger.

    Never configures logging: library code only emits events, and the
    host application (or the CLI entry point) decides where they go by
    calling :func:`configure_logging`.

    Args:
        name: Logger name, typically the module name.
    """
    return structlog.get_logger(logger_name=name)
