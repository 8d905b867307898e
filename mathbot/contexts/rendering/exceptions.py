"""Custom exceptions for the rendering context."""

from pathlib import Path
from typing import Optional


class WorkspaceAllocationError(Exception):
    """
    Exception raised when a scratch workspace cannot be created.

    Attributes:
        message: Error description
        root: Directory the workspace was to be created under (None for the system default)
        original_error: The underlying OSError
    """

    def __init__(
        self,
        message: str,
        root: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.root = root
        self.original_error = original_error

        parts = [message]

        if root is not None:
            parts.append(f"Root: {root}")

        if original_error:
            parts.append(f"Original error: {original_error}")

        super().__init__("\n".join(parts))
