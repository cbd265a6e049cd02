"""Logging for the API process: structlog on top of the standard library.

Route and use-case code logs through structlog.get_logger(); adapters log
through logging.getLogger(__name__). Both end up in the same handlers with the
same processors, so a single request's lines share its request_id.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

import structlog

# Per-request connection chatter from the outbound HTTP client
HTTP_CLIENT_LOGGERS = ("httpx", "httpcore")

_PRE_CHAIN = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
]


def _formatter(console: bool) -> structlog.stdlib.ProcessorFormatter:
    renderer = structlog.dev.ConsoleRenderer() if console else structlog.processors.JSONRenderer()
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_PRE_CHAIN,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    )


def _rotating_file(file_path: str, max_mb: int, backups: int) -> logging.Handler | None:
    path = Path(file_path).resolve()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        return RotatingFileHandler(
            path,
            maxBytes=max_mb * 1024 * 1024,
            backupCount=backups,
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"Log file disabled: could not open {path}: {e}\n")
        return None


def setup_logging(
    level: str = "INFO",
    file_path: str = "",
    rotation_max_mb: int = 5,
    rotation_backups: int = 3,
) -> None:
    """Route structlog and stdlib logging to stdout, plus a rotating file if file_path is set.

    DEBUG renders human-readable console lines; any other level renders JSON.
    Below DEBUG the HTTP client loggers are held at WARNING.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    debug = log_level <= logging.DEBUG

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_PRE_CHAIN,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if file_path and file_path.strip():
        file_handler = _rotating_file(file_path.strip(), rotation_max_mb, rotation_backups)
        if file_handler is not None:
            handlers.append(file_handler)

    formatter = _formatter(console=debug)
    root = logging.getLogger()
    root.setLevel(log_level)
    root.handlers.clear()
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(log_level)
        root.addHandler(handler)

    for name in HTTP_CLIENT_LOGGERS:
        logging.getLogger(name).setLevel(log_level if debug else max(log_level, logging.WARNING))
