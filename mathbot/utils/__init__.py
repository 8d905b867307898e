"""
Shared utilities for mathbot.

Common functionality used across contexts:
- Logger configuration
"""

from mathbot.utils.logger import log_provenance, setup_logger

__all__ = ["log_provenance", "setup_logger"]
