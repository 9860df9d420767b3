"""
Centralized Logging.

structlog on top of the standard library logging module. Everything goes to a
single stderr handler so stdout stays reserved for command output (tables and
diagnostics).

Defaults come from config/settings/logging.yaml; setup_logging() arguments
override them.

Usage:
    from unifi_cli.core.logging import get_logger, setup_logging

    setup_logging(level="DEBUG")
    logger = get_logger(__name__)
    logger.debug("API request", method="GET", url=url)
"""

import logging
import sys
from typing import Any

import structlog

from unifi_cli.core.config import get_settings_dir, load_yaml_config

_logging_config: dict[str, Any] | None = None


def _load_logging_config() -> dict[str, Any]:
    """
    Load logging configuration from logging.yaml.

    Raises:
        FileNotFoundError: If logging.yaml is missing
    """
    global _logging_config
    _logging_config = load_yaml_config("logging.yaml", get_settings_dir())
    return _logging_config


def _get_logging_config() -> dict[str, Any]:
    """Get cached logging configuration, loading it if needed."""
    if _logging_config is None:
        return _load_logging_config()
    return _logging_config


def _shared_processors() -> list[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]


def setup_logging(
    level: str | None = None,
    format_type: str | None = None,
) -> None:
    """
    Configure structlog and the root logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ...). Defaults to logging.yaml.
        format_type: "console" or "json". Defaults to logging.yaml.
    """
    config = _get_logging_config()
    level = (level or config.get("level", "WARNING")).upper()
    format_type = format_type or config.get("format", "console")
    console_enabled = config.get("handlers", {}).get("console", {}).get("enabled", True)

    if format_type == "json":
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    if console_enabled:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
    else:
        root_logger.addHandler(logging.NullHandler())

    root_logger.setLevel(level)

    # httpx logs every request at INFO; keep it quiet unless debugging
    logging.getLogger("httpx").setLevel(logging.DEBUG if level == "DEBUG" else logging.WARNING)


def get_logger(name: str) -> Any:
    """Return a structlog logger bound to the given module name."""
    return structlog.get_logger(name)
