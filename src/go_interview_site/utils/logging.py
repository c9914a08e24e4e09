"""Log setup for the go-interview CLI.

Records go to stderr, either through rich (interactive use) or as JSON lines
(``GO_INTERVIEW_JSON_LOGS=1``). stdout is left to command output such as page
listings and ``check --emit-json`` reports.
"""

import logging
import sys

import structlog
from rich.console import Console
from rich.logging import RichHandler
from structlog.stdlib import BoundLogger
from structlog.types import Processor

console = Console(stderr=True)


def setup_logging(
    level: str = "WARNING",
    json_logs: bool = False,
    include_timestamp: bool = True,
) -> None:
    """(Re)configure stdlib logging and structlog.

    Safe to call more than once; each call replaces the root handlers, which
    lets every CLI invocation pick up its own ``--debug`` and env settings.

    Args:
        level: Level name. Unknown names fall back to WARNING.
        json_logs: Emit JSON lines instead of rich console records.
        include_timestamp: Add an ISO timestamp to each record.
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    handler: logging.Handler
    if json_logs:
        handler = logging.StreamHandler(sys.stderr)
    else:
        handler = RichHandler(
            console=console,
            rich_tracebacks=True,
            show_time=include_timestamp,
            show_level=True,
            show_path=False,
        )
    logging.basicConfig(format="%(message)s", level=log_level, handlers=[handler], force=True)

    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
    ]
    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))
    processors += [
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        (
            structlog.processors.JSONRenderer()
            if json_logs
            else structlog.dev.ConsoleRenderer(colors=True)
        ),
    ]

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> BoundLogger:
    """Module logger, e.g. ``get_logger(__name__)``."""
    result: BoundLogger = structlog.get_logger(name)  # pyright: ignore[reportAssignmentType]
    return result


def log_performance(
    logger: BoundLogger,
    operation: str,
    duration_ms: float,
    success: bool = True,
    **context: object,
) -> None:
    """Emit a ``performance`` record for a timed generator run or check.

    Extra keyword arguments (return code, page counts) are attached as fields.
    """
    logger.info(
        "performance",
        operation=operation,
        duration_ms=round(duration_ms, 2),
        success=success,
        **context,
    )
