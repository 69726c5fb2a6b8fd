"""Logging setup for the sensor-gap command line.

The core modules emit debug events describing each query: the sensor set's
size and x extent (`sensors`), merged row intervals (`row_coverage`), and
edge, cell and candidate counts for the gap search (`gaps`). `main` logs
the reason a run failed. Everything goes to stderr so stdout carries only
the two answers.
"""

from __future__ import annotations
import logging
import sys

import structlog

# Module-named loggers; the flat layout gives them no shared prefix to
# set a level on.
APP_LOGGERS = ("sensors", "row_coverage", "gaps", "parsing", "main")

_PROCESSORS: list[structlog.types.Processor] = [
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def _stderr_handler(log_json: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_PROCESSORS,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )
    return handler


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route structlog and stdlib logging to a single stderr handler.

    Args:
        verbose: Show the per-query debug events. When False, only
            warnings and errors from this application are shown.
        log_json: One JSON object per line instead of console text.
    """
    structlog.configure(
        processors=[*_PROCESSORS, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    # Replaces any handler from an earlier call.
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(_stderr_handler(log_json))
    root_logger.setLevel(logging.WARNING)

    app_level = logging.DEBUG if verbose else logging.WARNING
    for name in APP_LOGGERS:
        logging.getLogger(name).setLevel(app_level)
