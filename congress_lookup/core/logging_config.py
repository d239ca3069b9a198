"""
Logging configuration for the lookup service.

Single-line records on stdout. The upstream client's call timings get their
own level so they can be silenced without hiding lookup results.
"""
import logging
import sys
from typing import Optional

SERVICE_LOGGER = "congress_lookup"
UPSTREAM_LOGGER = "congress_lookup.services.upstream_client"

# Third-party loggers and the level they are capped at
LIBRARY_LOG_LEVELS = {
    "uvicorn.access": logging.WARNING,
    "uvicorn.error": logging.INFO,
    "httpx": logging.WARNING,
    "httpcore": logging.WARNING,
}


def _level(name: Optional[str], default: int = logging.INFO) -> int:
    if not name:
        return default
    return getattr(logging, name.upper(), default)


def setup_logging(
    log_level: str = "INFO",
    log_format: Optional[str] = None,
    include_timestamp: bool = True,
    upstream_log_level: Optional[str] = None,
) -> None:
    """
    Configure logging for the service.

    Args:
        log_level: Level for the root and service loggers (DEBUG, INFO, ...)
        log_format: Custom format string. If None, a bracketed single-line format is used.
        include_timestamp: Whether the default format starts with a timestamp.
        upstream_log_level: Level for per-call upstream logs. Defaults to log_level.
    """
    numeric_level = _level(log_level)

    if log_format is None:
        if include_timestamp:
            log_format = "%(asctime)s [%(levelname)-8s] [%(name)s] %(message)s"
        else:
            log_format = "[%(levelname)-8s] [%(name)s] %(message)s"

    logging.basicConfig(
        level=numeric_level,
        format=log_format,
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    logging.getLogger(SERVICE_LOGGER).setLevel(numeric_level)
    logging.getLogger(UPSTREAM_LOGGER).setLevel(_level(upstream_log_level, numeric_level))

    # Upstream calls are logged by the upstream client itself
    for name, level in LIBRARY_LOG_LEVELS.items():
        logging.getLogger(name).setLevel(level)

    logger = logging.getLogger(__name__)
    logger.info(
        f"Logging configured: level={log_level}, "
        f"upstream_level={upstream_log_level or log_level}, format={log_format}"
    )


def get_logger(name: str) -> logging.Logger:
    """Logger for a module, normally called with __name__."""
    return logging.getLogger(name)
