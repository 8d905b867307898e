"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from loguru directly.
"""

from pathlib import Path

from loguru import logger

from mathbot.contexts.rendering.outcome import InputError, RenderOutcome

CONTEXT_PREFIX = "[render]"


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_render_start(expression: str, workspace_path: Path) -> None:
    """Log start of a render with context."""
    _log_info(f"Rendering expression ({len(expression)} chars)")
    _log_debug(f"  Workspace: {workspace_path}")
    _log_debug(f"  Expression: {expression!r}")


def log_render_outcome(outcome: RenderOutcome, elapsed_time: float) -> None:
    """
    Log the classified outcome of one render.

    Args:
        outcome: RenderOutcome returned by render_expression()
        elapsed_time: Time taken from workspace acquisition to classification
    """
    if outcome.is_success:
        _log_success(f"Render succeeded: {len(outcome.data)} bytes ({elapsed_time:.2f}s)")
    elif isinstance(outcome, InputError):
        _log_info(f"Render rejected by compiler ({elapsed_time:.2f}s): {outcome.message}")
    else:
        _log_error(f"Render failed ({elapsed_time:.2f}s): {outcome.detail}")


def log_compiler_stderr(stderr: bytes) -> None:
    """
    Log the full compiler diagnostic stream.

    Uses opt(raw=True) so multi-line diagnostics keep their original layout
    instead of getting a timestamp/level prefix on every line.
    """
    if stderr:
        text = stderr.decode("utf-8", errors="replace")
        logger.opt(raw=True).debug(f"\n{'=' * 80}\nTYPST STDERR:\n{'=' * 80}\n{text}\n")
