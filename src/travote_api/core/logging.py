"""Loguru logging configuration.

Locally, records go to stderr in a readable one-line format.  In Lambda
(``log_json=True``) every record is serialized to stdout, which CloudWatch
ingests as one JSON document per line.  A rotating file sink can be added
with ``log_dir``.
"""

import sys
from pathlib import Path

from loguru import logger

_LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | {extra[environment]} | {name}:{function}:{line} | {message}"
LOG_FILE_NAME = "travote-api.log"


def setup_logging(
    log_level: str = "INFO",
    log_dir: str | None = None,
    *,
    json_logs: bool = False,
    environment: str = "local",
) -> None:
    """Replace Loguru's sinks with the configured ones.

    Args:
        log_level: Minimum log level to emit (case-insensitive).
        log_dir: Optional directory for log files.  When set, a rotating
            file sink is added (rotated every 24 hours, retained 7 days).
        json_logs: Serialize records as JSON on stdout instead of the
            human-readable stderr format.
        environment: Deployment name bound to every record.
    """
    level = log_level.upper()
    logger.remove()
    logger.configure(extra={"environment": environment})

    if json_logs:
        logger.add(sys.stdout, level=level, serialize=True)
    else:
        logger.add(sys.stderr, level=level, format=_LOG_FORMAT)

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path / LOG_FILE_NAME,
            level=level,
            format=_LOG_FORMAT,
            rotation="24h",
            retention="7 days",
        )
