"""
Logging configuration for countnoun.

The library itself only creates "countnoun.*" loggers and never configures
handlers. Applications (and the MCP server) call setup_logging() once.

CRITICAL: in MCP stdio mode stdout carries JSON-RPC, so the server logs to a
file only. Console logging goes to stderr and is meant for HTTP mode.

Log files: .countnoun/logs/countnoun-YYYY-MM-DD.log (rotated daily)
"""

import logging
import logging.handlers
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

LOG_LEVEL_ENV = "COUNTNOUN_LOG_LEVEL"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class FlushingHandler(logging.handlers.TimedRotatingFileHandler):
    """Daily rotating file handler that flushes after every record."""

    def emit(self, record):
        super().emit(record)
        self.flush()


def level_from_env(default: int = logging.INFO) -> int:
    """Resolve COUNTNOUN_LOG_LEVEL ("DEBUG", "warning", ...) to a level number."""
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default


def setup_logging(
    log_dir: Optional[Path] = None,
    level: Union[int, None] = None,
    backup_count: int = 30,  # days
    console: bool = False,
) -> logging.Logger:
    """
    Attach file (and optionally stderr) handlers to the "countnoun" logger.

    Safe to call repeatedly: handlers that are already attached are not
    added twice.

    Args:
        log_dir: Directory for log files (default: ./.countnoun/logs)
        level: Logging level (default: COUNTNOUN_LOG_LEVEL or INFO)
        backup_count: Number of daily files to keep
        console: Also log to stderr

    Returns:
        The configured "countnoun" logger
    """
    if log_dir is None:
        log_dir = Path.cwd() / ".countnoun" / "logs"
    if level is None:
        level = level_from_env()

    logger = logging.getLogger("countnoun")
    logger.setLevel(level)

    has_file_handler = any(isinstance(h, FlushingHandler) for h in logger.handlers)
    has_console_handler = any(
        type(h) is logging.StreamHandler and h.stream is sys.stderr for h in logger.handlers
    )

    if has_file_handler and (not console or has_console_handler):
        return logger

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if not has_file_handler:
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"countnoun-{datetime.now().strftime('%Y-%m-%d')}.log"

        file_handler = FlushingHandler(
            log_file,
            when="midnight",
            interval=1,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

        logger.info(f"Logging initialized: {log_file} (level {logging.getLevelName(level)})")

    if console and not has_console_handler:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)
        logger.info("Console logging enabled")

    return logger
