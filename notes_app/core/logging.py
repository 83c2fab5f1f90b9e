"""
Centralized Logging Configuration.

All modules must use this logging setup. Do not create standalone loggers.
Configuration is loaded from config/settings/logging.yaml.

Structured fields in every JSON log record:
    timestamp   - ISO 8601 UTC timestamp
    level       - Log level (debug, info, warning, error, critical)
    logger      - Module path (e.g., notes_app.store.note)
    event       - Log message
    func_name   - Function that emitted the log
    lineno      - Line number in source file
    source      - Layer that emitted the record (see VALID_SOURCES)

Usage:
    from notes_app.core.logging import get_logger, log_with_source, setup_logging

    setup_logging()                      # once, at application start
    setup_logging(level="DEBUG")         # arguments override logging.yaml

    logger = get_logger(__name__)
    logger.info("Message", extra={"key": "value"})
    log_with_source(logger, "store", "error", "Database write failed", operation="insert")
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Any

import structlog
from structlog.typing import Processor

from notes_app.core.config import find_project_root, get_app_config
from notes_app.core.config_schema import FileHandlerSchema

VALID_SOURCES = frozenset({
    "ui",
    "store",
    "navigation",
    "internal",
})
"""
Layers that tag their records with a source:

    ui          - view models
    store       - SQLite access
    navigation  - back stack changes
    internal    - application lifecycle (container start/close)
"""

QUIET_LOGGERS = ("sqlalchemy.engine", "aiosqlite")
"""Third-party loggers held at WARNING whatever the configured level."""


def _shared_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ],
        ),
    ]


def _file_handler(file_config: FileHandlerSchema, formatter: logging.Formatter) -> logging.Handler:
    """Rotating JSONL handler; the path is relative to the project root."""
    log_path = find_project_root() / file_config.path
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(
        filename=str(log_path),
        maxBytes=file_config.max_bytes,
        backupCount=file_config.backup_count,
        encoding="utf-8",
    )
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    level: str | None = None,
    format_type: str | None = None,
    enable_console: bool | None = None,
    enable_file_logging: bool | None = None,
) -> None:
    """
    Configure structured logging for the application.

    Replaces any handlers already on the root logger, so calling it twice
    is safe.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Overrides config.
        format_type: Output format ('json' or 'console'). Overrides config.
        enable_console: Whether to enable console output. Overrides config.
        enable_file_logging: Whether to write to JSONL file. Overrides config.
    """
    config = get_app_config().logging
    level = level if level is not None else config.level
    format_type = format_type if format_type is not None else config.format
    if enable_console is None:
        enable_console = config.handlers.console.enabled
    if enable_file_logging is None:
        enable_file_logging = config.handlers.file.enabled

    processors = _shared_processors()
    structlog.configure(
        processors=processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    json_formatter = structlog.stdlib.ProcessorFormatter(
        processor=structlog.processors.JSONRenderer(),
        foreign_pre_chain=processors,
    )
    if format_type == "console":
        console_formatter = structlog.stdlib.ProcessorFormatter(
            processor=structlog.dev.ConsoleRenderer(colors=True),
            foreign_pre_chain=processors,
        )
    else:
        console_formatter = json_formatter

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(console_formatter)
        root_logger.addHandler(console_handler)

    if enable_file_logging:
        root_logger.addHandler(_file_handler(config.handlers.file, json_formatter))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> Any:
    """
    Get a logger instance for the given name.

    Args:
        name: Logger name, typically __name__

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def log_with_source(logger: Any, source: str, level: str, message: str, **kwargs: Any) -> None:
    """
    Log a message tagged with the layer it came from.

    Args:
        logger: The logger instance
        source: One of VALID_SOURCES
        level: Log level (debug, info, warning, error, critical)
        message: Log message
        **kwargs: Additional context fields

    Raises:
        ValueError: If source is not in VALID_SOURCES
        AttributeError: If level is not a valid log level
    """
    if source not in VALID_SOURCES:
        raise ValueError(f"Unknown log source: {source!r}")
    log_method = getattr(logger, level.lower())
    log_method(message, source=source, **kwargs)
