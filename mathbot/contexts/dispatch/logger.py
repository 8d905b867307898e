"""
Dispatch context logger.

Provides logging interface for the bot layer with automatic [bot] prefix.
"""

from pathlib import Path

from loguru import logger

from mathbot import __version__
from mathbot.contexts.rendering.renderer import RENDER_TIMEOUT_S, TYPST_COMPILER
from mathbot.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[bot]"


def setup_bot_logger(log_dir: Path, console_level: str = "INFO") -> Path:
    """
    Setup logger for the bot process.

    The startup banner records the version and the render settings in effect,
    since those decide what every /math reply looks like.

    Args:
        log_dir: Directory for bot.log and its rotated copies
        console_level: Minimum console level (file sink always keeps DEBUG)

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="bot",
        log_dir=log_dir,
        extra_provenance={
            "mathbot": __version__,
            "typst_compiler": TYPST_COMPILER,
            "render_timeout_s": RENDER_TIMEOUT_S,
        },
        console_level=console_level,
    )


def _log_info(message: str) -> None:
    """Log info message with [bot] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_exception(message: str, error: BaseException) -> None:
    """Log error message with the error's traceback and [bot] prefix."""
    logger.opt(exception=error).error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [bot] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_invocation(command_name: str, user, value: str) -> None:
    """Log one incoming command invocation."""
    _log_info(f"/{command_name} from {user}")
    _log_debug(f"  Argument: {value!r}")
