"""
Typst Render Module

Turns a raw user expression into a PNG by running the typst compiler inside
a scratch workspace, then classifies what happened.
"""

import asyncio
import contextlib
import os
import time
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from jinja2 import Environment, FileSystemLoader, StrictUndefined

from mathbot.contexts.rendering.exceptions import WorkspaceAllocationError
from mathbot.contexts.rendering.logger import (
    _log_debug,
    log_compiler_stderr,
    log_render_outcome,
    log_render_start,
)
from mathbot.contexts.rendering.outcome import (
    Artifact,
    InfrastructureError,
    InputError,
    RenderOutcome,
)
from mathbot.contexts.rendering.workspace import SCRATCH_ROOT, Workspace, scratch_workspace

load_dotenv()

TYPST_COMPILER = os.getenv("TYPST_COMPILER", "typst")
RENDER_TIMEOUT_S = float(os.getenv("RENDER_TIMEOUT_S", "30"))

TEMPLATES_PATH = Path(__file__).parent / "templates"
MATH_TEMPLATE = "math.typ.jinja"

# Custom delimiters: typst uses '#' and braces, which clash with jinja defaults
_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_PATH)),
    undefined=StrictUndefined,
    variable_start_string="<<<",
    variable_end_string=">>>",
    block_start_string="<%%",
    block_end_string="%%>",
    comment_start_string="<#",
    comment_end_string="#>",
    trim_blocks=True,
    keep_trailing_newline=True,
    autoescape=False,
)


def build_document(expression: str) -> str:
    """
    Wrap an expression in the fixed math document.

    The expression is inserted verbatim. Nothing is escaped: typst's own parser
    is the trust boundary, and a malformed expression surfaces as an InputError
    from the compiler rather than being rewritten here.

    Args:
        expression: Raw user text (untrusted)

    Returns:
        Complete typst source
    """
    return _env.get_template(MATH_TEMPLATE).render(expression=expression)


def first_stderr_line(stderr: bytes) -> str:
    """
    Extract the user-facing part of a compiler diagnostic.

    Returns:
        Everything before the first newline, or "" if stderr is empty or not UTF-8
    """
    try:
        text = stderr.decode("utf-8")
    except UnicodeDecodeError:
        return ""
    return text.split("\n", 1)[0]


def _kill(process: asyncio.subprocess.Process) -> None:
    with contextlib.suppress(ProcessLookupError):
        process.kill()


async def run_compiler(
    workspace: Workspace,
    compiler: str = TYPST_COMPILER,
    timeout_s: Optional[float] = RENDER_TIMEOUT_S,
) -> RenderOutcome:
    """
    Compile the workspace's source file and classify the result.

    Pure invocation function - assumes the source file is already written.

    Args:
        workspace: Workspace holding the typst source
        compiler: Compiler executable (name on PATH or absolute path)
        timeout_s: Seconds to wait for the compiler; None or 0 waits forever

    Returns:
        Artifact, InputError or InfrastructureError
    """
    cmd = [compiler, "compile", str(workspace.source_path), str(workspace.output_path)]
    _log_debug(f"  Command: {' '.join(cmd)}")

    try:
        process = await asyncio.create_subprocess_exec(
            *cmd,
            cwd=workspace.path,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        return InfrastructureError(detail=f"Could not start {compiler}: {e!r}")

    try:
        _, stderr = await asyncio.wait_for(process.communicate(), timeout=timeout_s or None)
    except asyncio.TimeoutError:
        _kill(process)
        await process.wait()
        return InfrastructureError(detail=f"{compiler} timed out after {timeout_s}s")
    except asyncio.CancelledError:
        # The workspace is about to be deleted; do not leave typst writing into it
        _kill(process)
        await process.wait()
        raise

    if process.returncode != 0:
        log_compiler_stderr(stderr)
        return InputError(message=first_stderr_line(stderr))

    try:
        data = workspace.output_path.read_bytes()
    except FileNotFoundError:
        log_compiler_stderr(stderr)
        return InfrastructureError(
            detail=f"{compiler} exited 0 but wrote no output at {workspace.output_path}"
        )
    except OSError as e:
        return InfrastructureError(detail=f"Could not read {workspace.output_path}: {e!r}")

    return Artifact(data=data)


async def render_expression(
    expression: str,
    compiler: str = TYPST_COMPILER,
    timeout_s: Optional[float] = RENDER_TIMEOUT_S,
    workspace_root: Optional[Path] = SCRATCH_ROOT,
) -> RenderOutcome:
    """
    Render a math expression to PNG bytes.

    Orchestration function: allocates a workspace, writes the document, runs
    the compiler, and releases the workspace on every path (including
    unexpected exceptions, which propagate after cleanup).

    Args:
        expression: Raw user text (typst math syntax)
        compiler: Compiler executable (default: TYPST_COMPILER env)
        timeout_s: Compiler timeout in seconds (default: RENDER_TIMEOUT_S env)
        workspace_root: Parent for scratch directories (default: SCRATCH_ROOT env)

    Returns:
        Exactly one of Artifact, InputError, InfrastructureError
    """
    start_time = time.time()

    try:
        with scratch_workspace(workspace_root) as workspace:
            log_render_start(expression, workspace.path)
            try:
                workspace.write_source(build_document(expression))
            except (OSError, UnicodeError) as e:
                # UnicodeError: lone surrogates in the expression cannot be encoded as UTF-8
                outcome = InfrastructureError(detail=f"Could not write source: {e!r}")
            else:
                outcome = await run_compiler(workspace, compiler=compiler, timeout_s=timeout_s)
    except WorkspaceAllocationError as e:
        outcome = InfrastructureError(detail=str(e))

    log_render_outcome(outcome, elapsed_time=time.time() - start_time)
    return outcome
