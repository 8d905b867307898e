"""
Shared loguru configuration for mathbot processes.

A process calls setup_logger() once at startup; every context then logs
through its own prefixed wrappers in contexts/{context}/logger.py.
"""

import os
import platform
import socket
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"
)

# The bot runs for weeks; cap what a single log file and its history can take
LOG_ROTATION = "10 MB"
LOG_RETENTION = 5


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[dict] = None,
    level_colors: Optional[dict] = None,
    console_level: str = "INFO",
) -> Path:
    """
    Replace loguru's default sink with a rotating file and a coloured console.

    Args:
        context_name: Log file stem (e.g. "bot", "render")
        log_dir: Created if missing
        extra_provenance: Settings to record in the startup banner
        level_colors: Overrides for LEVEL_COLORS
        console_level: Minimum level shown on the console; the file always gets DEBUG

    Returns:
        Path to the active log file
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()

    for level_name, color in {**LEVEL_COLORS, **(level_colors or {})}.items():
        logger.level(level_name, color=color)

    # enqueue: the bot logs from the event loop and from executor threads
    logger.add(
        log_file,
        format=FILE_FORMAT,
        level="DEBUG",
        rotation=LOG_ROTATION,
        retention=LOG_RETENTION,
        enqueue=True,
    )
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    log_provenance(context_name, extra_provenance)

    return log_file


def log_provenance(context_name: str, settings: Optional[dict] = None) -> None:
    """
    Log a startup banner identifying this process and its settings.

    A rotated log file may be read long after the fact, so the banner names
    the host and pid alongside the command line.

    Args:
        context_name: Process role, shown in the banner title
        settings: Key-value pairs, one line each
    """
    logger.info(f"---- {context_name} starting ----")
    logger.info(f"pid={os.getpid()} host={socket.gethostname()}")
    logger.info(f"python={platform.python_version()} cwd={Path.cwd()}")
    logger.info(f"argv={' '.join(sys.argv)}")

    for key, value in (settings or {}).items():
        logger.info(f"{key}={value}")
