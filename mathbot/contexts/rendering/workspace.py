"""
Scratch Workspace Manager

Allocates one private directory per render and guarantees it is removed
afterwards, whatever the render did.
"""

import os
import shutil
import tempfile
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional

from dotenv import load_dotenv

from mathbot.contexts.rendering.exceptions import WorkspaceAllocationError
from mathbot.contexts.rendering.logger import _log_debug, _log_error, _log_warning

load_dotenv()

SCRATCH_ROOT = Path(os.getenv("SCRATCH_ROOT")) if os.getenv("SCRATCH_ROOT") else None
WORKSPACE_PREFIX = "mathbot-"
SOURCE_FILENAME = "math.typ"
OUTPUT_FILENAME = "math.png"


@dataclass(frozen=True)
class Workspace:
    """
    A uniquely named scratch directory owned by a single render.

    Attributes:
        path: The directory itself
    """

    path: Path

    @property
    def source_path(self) -> Path:
        return self.path / SOURCE_FILENAME

    @property
    def output_path(self) -> Path:
        return self.path / OUTPUT_FILENAME

    def write_source(self, text: str) -> Path:
        """Write the typst document into the workspace and return its path."""
        self.source_path.write_text(text, encoding="utf-8")
        return self.source_path


def acquire(root: Optional[Path] = SCRATCH_ROOT) -> Workspace:
    """
    Create a fresh workspace directory.

    mkdtemp creates the directory atomically with mode 0700, so two live
    workspaces can never share a name.

    Args:
        root: Parent directory (default: SCRATCH_ROOT env, else the system temp dir)

    Returns:
        The new Workspace

    Raises:
        WorkspaceAllocationError: If the directory cannot be created
    """
    try:
        if root is not None:
            root.mkdir(parents=True, exist_ok=True)
        path = Path(tempfile.mkdtemp(prefix=WORKSPACE_PREFIX, dir=root))
    except OSError as e:
        _log_error(f"Could not allocate workspace: {e}")
        raise WorkspaceAllocationError(
            "Could not allocate scratch workspace", root=root, original_error=e
        ) from e

    _log_debug(f"Allocated workspace {path}")
    return Workspace(path=path)


def release(workspace: Workspace) -> None:
    """
    Recursively delete a workspace and everything in it.

    Args:
        workspace: Workspace returned by acquire()
    """
    if not workspace.path.exists():
        _log_warning(f"Workspace already gone: {workspace.path}")
        return

    try:
        shutil.rmtree(workspace.path)
    except OSError as e:
        # Runs inside a finally; a leftover directory must not replace the render outcome
        _log_error(f"Could not remove workspace {workspace.path}: {e!r}")
        return

    _log_debug(f"Released workspace {workspace.path}")


@contextmanager
def scratch_workspace(root: Optional[Path] = SCRATCH_ROOT) -> Iterator[Workspace]:
    """
    Scoped acquisition: exactly one release per acquire, on every exit path.

    Example:
        with scratch_workspace() as workspace:
            workspace.write_source(document)
            ...
    """
    workspace = acquire(root)
    try:
        yield workspace
    finally:
        release(workspace)
