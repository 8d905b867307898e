"""Unit tests for scratch workspace allocation and cleanup."""

import pytest

from mathbot.contexts.rendering import workspace as workspace_module
from mathbot.contexts.rendering.exceptions import WorkspaceAllocationError
from mathbot.contexts.rendering.workspace import (
    OUTPUT_FILENAME,
    SOURCE_FILENAME,
    acquire,
    release,
    scratch_workspace,
)


@pytest.mark.unit
def test_acquire_creates_directory_under_root(scratch_root):
    """A workspace is a fresh directory directly under the root."""
    workspace = acquire(scratch_root)

    assert workspace.path.is_dir()
    assert workspace.path.parent == scratch_root
    assert workspace.source_path == workspace.path / SOURCE_FILENAME
    assert workspace.output_path == workspace.path / OUTPUT_FILENAME

    release(workspace)


@pytest.mark.unit
def test_acquire_never_reuses_a_name(scratch_root):
    """Live workspaces always have distinct paths."""
    workspaces = [acquire(scratch_root) for _ in range(20)]

    assert len({w.path for w in workspaces}) == 20

    for workspace in workspaces:
        release(workspace)


@pytest.mark.unit
def test_acquire_creates_missing_root(tmp_path):
    """A missing root directory is created on demand."""
    root = tmp_path / "not" / "yet" / "there"
    workspace = acquire(root)

    assert workspace.path.parent == root
    release(workspace)


@pytest.mark.unit
def test_release_removes_contents(scratch_root):
    """Release deletes the workspace and everything inside it."""
    workspace = acquire(scratch_root)
    workspace.write_source("$ x $")
    workspace.output_path.write_bytes(b"png")
    (workspace.path / "nested").mkdir()
    (workspace.path / "nested" / "file").write_text("x")

    release(workspace)

    assert not workspace.path.exists()
    assert list(scratch_root.iterdir()) == []


@pytest.mark.unit
def test_release_tolerates_missing_directory(scratch_root):
    """Releasing twice is harmless."""
    workspace = acquire(scratch_root)
    release(workspace)

    release(workspace)

    assert not workspace.path.exists()


@pytest.mark.unit
def test_write_source_is_utf8(scratch_root):
    """The source file is written as UTF-8."""
    with scratch_workspace(scratch_root) as workspace:
        path = workspace.write_source("$ α + β $")
        assert path.read_bytes() == "$ α + β $".encode("utf-8")


@pytest.mark.unit
def test_scratch_workspace_releases_on_success(scratch_root):
    """The context manager removes the workspace on normal exit."""
    with scratch_workspace(scratch_root) as workspace:
        assert workspace.path.exists()

    assert not workspace.path.exists()


@pytest.mark.unit
def test_scratch_workspace_releases_on_exception(scratch_root):
    """The context manager removes the workspace when the body raises."""
    with pytest.raises(RuntimeError, match="boom"):
        with scratch_workspace(scratch_root) as workspace:
            workspace.write_source("$ x $")
            raise RuntimeError("boom")

    assert not workspace.path.exists()
    assert list(scratch_root.iterdir()) == []


@pytest.mark.unit
def test_acquire_failure_raises_allocation_error(tmp_path):
    """An unusable root raises WorkspaceAllocationError with the cause attached."""
    # A regular file where the root directory should be
    root = tmp_path / "occupied"
    root.write_text("not a directory")

    with pytest.raises(WorkspaceAllocationError) as excinfo:
        acquire(root)

    assert excinfo.value.root == root
    assert isinstance(excinfo.value.original_error, OSError)


@pytest.mark.unit
def test_release_logs_instead_of_raising_when_removal_fails(scratch_root, monkeypatch):
    """A directory that cannot be deleted is left behind and logged, not raised."""

    def refuse(path, *args, **kwargs):
        raise PermissionError(13, "Permission denied", str(path))

    workspace = acquire(scratch_root)
    monkeypatch.setattr(workspace_module.shutil, "rmtree", refuse)

    release(workspace)

    assert workspace.path.exists()
