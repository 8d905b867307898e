"""
Rendering Context

Responsibilities:
- Wraps user expressions in the fixed typst math document
- Runs the typst compiler in a per-invocation scratch workspace
- Classifies results into artifact, input error or infrastructure error
- Removes every workspace once its render finishes

Owns: typst invocation, scratch workspaces, render outcomes
Never: Talks to Discord or decides how outcomes are displayed
"""

from mathbot.contexts.rendering.exceptions import WorkspaceAllocationError
from mathbot.contexts.rendering.outcome import (
    GENERIC_ERROR_MESSAGE,
    Artifact,
    InfrastructureError,
    InputError,
    RenderOutcome,
)
from mathbot.contexts.rendering.renderer import build_document, render_expression
from mathbot.contexts.rendering.workspace import Workspace, acquire, release, scratch_workspace

__all__ = [
    # Orchestration
    "render_expression",
    "build_document",
    # Outcomes
    "Artifact",
    "InputError",
    "InfrastructureError",
    "RenderOutcome",
    "GENERIC_ERROR_MESSAGE",
    # Workspaces
    "Workspace",
    "acquire",
    "release",
    "scratch_workspace",
    "WorkspaceAllocationError",
]
